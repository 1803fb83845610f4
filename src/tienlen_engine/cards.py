"""Card, rank and suit values plus the 52-card deck."""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum

from .errors import DealSizeMismatch, MalformedCardToken


class Rank(IntEnum):
    """Card ranks ordered from weakest to strongest.  The 2 is highest."""

    THREE = 0
    FOUR = 1
    FIVE = 2
    SIX = 3
    SEVEN = 4
    EIGHT = 5
    NINE = 6
    TEN = 7
    JACK = 8
    QUEEN = 9
    KING = 10
    ACE = 11
    TWO = 12

    @property
    def symbol(self) -> str:
        return RANK_SYMBOLS[self]

    @property
    def height(self) -> int:
        """Numeric strength used for straight adjacency (3 -> 3, 2 -> 15)."""

        return self.value + 3


class Suit(IntEnum):
    """Suits ordered for tie breaking: Spades < Clubs < Diamonds < Hearts."""

    SPADES = 0
    CLUBS = 1
    DIAMONDS = 2
    HEARTS = 3

    @property
    def code(self) -> str:
        return SUIT_CODES[self]

    @property
    def glyph(self) -> str:
        return SUIT_GLYPHS[self]


# Indexed by the enum value
RANK_SYMBOLS = ('3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K', 'A', '2')
SUIT_CODES = ('S', 'C', 'D', 'H')
SUIT_GLYPHS = ('♠', '♣', '♦', '♥')


def parse_rank(token: str) -> Rank:
    """Return the :class:`Rank` for ``token`` (case insensitive)."""

    sym = token.upper()
    try:
        return Rank(RANK_SYMBOLS.index(sym))
    except ValueError:
        raise MalformedCardToken(token, "unknown rank") from None


def parse_suit(token: str) -> Suit:
    """Return the :class:`Suit` for a one character code or glyph."""

    if token in SUIT_GLYPHS:
        return Suit(SUIT_GLYPHS.index(token))
    code = token.upper()
    if code in SUIT_CODES:
        return Suit(SUIT_CODES.index(code))
    raise MalformedCardToken(token, "unknown suit")


@dataclass(frozen=True, order=True, repr=False)
class Card:
    """An immutable playing card ordered by rank, then suit."""

    rank: Rank
    suit: Suit

    @property
    def height(self) -> int:
        return self.rank.height

    def __repr__(self) -> str:
        """Return the short form ``<rank><glyph>``, e.g. ``3♠``."""

        return f"{self.rank.symbol}{self.suit.glyph}"

    def to_string(self) -> str:
        """Return the ASCII token, e.g. ``"10H"``."""

        return f"{self.rank.symbol}{self.suit.code}"

    @classmethod
    def from_string(cls, token: str) -> "Card":
        """Parse ``token`` such as ``"3S"``, ``"kh"`` or ``"10♦"``."""

        text = token.strip()
        if len(text) not in (2, 3):
            raise MalformedCardToken(token, "bad length")
        return cls(parse_rank(text[:-1]), parse_suit(text[-1]))

    def to_dict(self) -> dict:
        """Return a ``dict`` representation of this card."""

        return {"rank": self.rank.symbol, "suit": self.suit.name.title()}


THREE_OF_SPADES = Card(Rank.THREE, Suit.SPADES)


class Deck:
    """A standard 52-card deck."""

    def __init__(self, rng: random.Random | None = None) -> None:
        # Canonical order so a seeded ``rng`` reproduces games
        self.cards = [Card(r, s) for s in Suit for r in Rank]
        self.rng = rng or random.Random()
        self.dealt = False

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle(self) -> None:
        """Shuffle the deck in place."""

        self.rng.shuffle(self.cards)

    def deal(self, n: int) -> list[list[Card]]:
        """Split the deck into ``n`` contiguous hands of equal size."""

        if self.dealt:
            raise DealSizeMismatch("Deck has already been dealt")
        if n <= 0 or len(self.cards) % n:
            raise DealSizeMismatch(
                f"Cannot deal {len(self.cards)} cards into {n} equal hands"
            )
        size = len(self.cards) // n
        hands = [self.cards[i * size : (i + 1) * size] for i in range(n)]
        self.dealt = True
        return hands
