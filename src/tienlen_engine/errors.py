"""Exception types raised by the Tiến Lên engine.

Every error derives from :class:`TienLenError`.  The five rule-engine
errors also derive from :class:`ValueError` so code that already guards
against bad values keeps working.
"""
from __future__ import annotations


class TienLenError(Exception):
    """Base class for all engine errors."""


class MalformedCardToken(TienLenError, ValueError):
    """A card token such as ``"3S"`` could not be parsed."""

    def __init__(self, token: str, reason: str = "unrecognised card") -> None:
        super().__init__(f"{reason}: {token!r}")
        self.token = token


class CardNotInHand(TienLenError, ValueError):
    """A card requested for removal is not held."""

    def __init__(self, card) -> None:
        super().__init__(f"Card {card} not in hand")
        self.card = card


class InvalidCombination(TienLenError, ValueError):
    """Cards do not form any legal combination."""

    def __init__(self, cards) -> None:
        super().__init__(f"Invalid combo: {list(cards)}")
        self.cards = tuple(cards)


class IllegalComparison(TienLenError, ValueError):
    """``beats`` was asked to compare an invalid or empty combo."""


class DealSizeMismatch(TienLenError, ValueError):
    """The deck cannot be dealt into the requested number of hands."""


class TurnLimitExceeded(TienLenError):
    """The driving loop passed its turn ceiling without a winner."""

    def __init__(self, turns: int) -> None:
        super().__init__(f"No winner after {turns} turns")
        self.turns = turns
