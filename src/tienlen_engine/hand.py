"""The cards held by a single player."""
from __future__ import annotations

from collections import Counter
from typing import Iterable

from .cards import THREE_OF_SPADES, Card
from .errors import CardNotInHand


class Hand:
    """A player's mutable card collection."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(self._cards)

    def __contains__(self, card) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"Hand({self._cards})"

    def get_cards(self) -> tuple[Card, ...]:
        """Return a read-only view of the held cards."""

        return tuple(self._cards)

    def get_card_count(self) -> int:
        return len(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def find_three_of_spades(self) -> bool:
        return THREE_OF_SPADES in self._cards

    def remove_cards(self, cards: Iterable[Card]) -> None:
        """Remove each of ``cards`` once.

        Nothing is removed unless every requested card (counting
        repeats) is held; otherwise :class:`CardNotInHand` is raised.
        """

        wanted = Counter(cards)
        held = Counter(self._cards)
        for card, n in wanted.items():
            if held[card] < n:
                raise CardNotInHand(card)
        for card, n in wanted.items():
            for _ in range(n):
                self._cards.remove(card)

    def sort(self, mode: str = "rank") -> None:
        """Sort the hand.

        Parameters
        ----------
        mode:
            ``"rank"`` to sort by rank then suit (default) or ``"suit"``
            to sort by suit then rank.
        """

        if mode == "suit":
            self._cards.sort(key=lambda c: (c.suit, c.rank))
        else:
            self._cards.sort()

    def find_bombs(self) -> list[list[Card]]:
        """Return all four-of-a-kind sets in the hand."""

        cnt = Counter(c.rank for c in self._cards)
        return [
            sorted(c for c in self._cards if c.rank == r)
            for r, v in sorted(cnt.items())
            if v == 4
        ]

    def to_dict(self) -> dict:
        """Return a snapshot for display."""

        return {
            "count": len(self._cards),
            "cards": [c.to_dict() for c in self._cards],
        }
