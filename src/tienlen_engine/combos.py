"""Combination detection, validation and comparison.

Each ``is_*`` helper recognises one shape from a list of :class:`Card`
objects.  :func:`detect_type` folds them into a :class:`ComboType` and
:func:`beats` decides whether one classified play tops another.

Comparison rules, applied in order:

* an empty table is a round start and cannot be "beaten";
* bombs (four-of-a-kind and straight-bombs) beat a lone 2 or a pair of
  2s, and beat weaker bombs;
* otherwise both plays must share type and size, and the higher top
  card (rank, then suit) wins.
"""
from __future__ import annotations

from collections import Counter
from enum import IntEnum
from typing import Sequence

from .cards import THREE_OF_SPADES, Card, Rank
from .errors import IllegalComparison, InvalidCombination
from .settings import DEFAULT_RULES, BombRules


class ComboType(IntEnum):
    SINGLE = 1
    PAIR = 2
    TRIPLE = 3
    STRAIGHT = 4
    FOUR_OF_A_KIND = 5
    STRAIGHT_BOMB = 6
    INVALID = 7


BOMB_TYPES = frozenset({ComboType.FOUR_OF_A_KIND, ComboType.STRAIGHT_BOMB})

_TYPE_NAMES = {
    ComboType.SINGLE: 'single',
    ComboType.PAIR: 'pair',
    ComboType.TRIPLE: 'triple',
    ComboType.STRAIGHT: 'straight',
    ComboType.FOUR_OF_A_KIND: 'four of a kind',
    ComboType.STRAIGHT_BOMB: 'straight bomb',
    ComboType.INVALID: 'invalid',
}


def _same_rank(cards: Sequence[Card]) -> bool:
    return len({c.rank for c in cards}) == 1


def _consecutive(heights: list[int]) -> bool:
    return all(heights[i] + 1 == heights[i + 1] for i in range(len(heights) - 1))


def is_single(cards) -> bool:
    """Return ``True`` if the list contains exactly one card."""

    return len(cards) == 1


def is_pair(cards) -> bool:
    return len(cards) == 2 and _same_rank(cards)


def is_triple(cards) -> bool:
    return len(cards) == 3 and _same_rank(cards)


def is_four_of_a_kind(cards) -> bool:
    return len(cards) == 4 and _same_rank(cards)


def is_straight(cards) -> bool:
    """Return ``True`` if ``cards`` are three or more consecutive heights.

    Suits do not matter.  A straight never contains a 2.
    """

    if len(cards) < 3:
        return False
    if any(c.rank == Rank.TWO for c in cards):
        return False
    heights = sorted(c.height for c in cards)
    if len(set(heights)) != len(heights):
        return False
    return _consecutive(heights)


def is_straight_bomb(cards) -> bool:
    """Return ``True`` for three or more consecutive pairs without a 2."""

    if len(cards) < 6 or len(cards) % 2:
        return False
    if any(c.rank == Rank.TWO for c in cards):
        return False
    counts = Counter(c.height for c in cards)
    if any(n != 2 for n in counts.values()):
        return False
    return _consecutive(sorted(counts))


def detect_type(cards) -> ComboType:
    """Return the :class:`ComboType` of ``cards``.

    Total over every input: an empty selection or repeated card is
    :attr:`ComboType.INVALID`.
    """

    cards = list(cards)
    if not cards or len(set(cards)) != len(cards):
        return ComboType.INVALID
    if is_single(cards):
        return ComboType.SINGLE
    if is_pair(cards):
        return ComboType.PAIR
    if is_triple(cards):
        return ComboType.TRIPLE
    if is_four_of_a_kind(cards):
        return ComboType.FOUR_OF_A_KIND
    if is_straight(cards):
        return ComboType.STRAIGHT
    if is_straight_bomb(cards):
        return ComboType.STRAIGHT_BOMB
    return ComboType.INVALID


def is_valid(cards) -> bool:
    return detect_type(cards) is not ComboType.INVALID


def is_bomb(cards) -> bool:
    return detect_type(cards) in BOMB_TYPES


def classify(cards) -> ComboType:
    """Like :func:`detect_type` but raise :class:`InvalidCombination`."""

    combo = detect_type(cards)
    if combo is ComboType.INVALID:
        raise InvalidCombination(cards)
    return combo


def contains_three_of_spades(cards) -> bool:
    return THREE_OF_SPADES in cards


def _is_twos(cards, combo: ComboType) -> bool:
    return combo in (ComboType.SINGLE, ComboType.PAIR) and all(
        c.rank == Rank.TWO for c in cards
    )


def beats(candidate, table, rules: BombRules = DEFAULT_RULES) -> bool:
    """Return ``True`` if ``candidate`` beats the combo on ``table``.

    Both arguments must be valid combinations.  Round starts (an empty
    table) are the caller's responsibility; passing one raises
    :class:`IllegalComparison`, as does an invalid candidate or table.
    """

    if not table:
        raise IllegalComparison("Cannot compare against an empty table")
    cand_type = detect_type(candidate)
    table_type = detect_type(table)
    if cand_type is ComboType.INVALID:
        raise IllegalComparison(f"Invalid candidate {list(candidate)}")
    if table_type is ComboType.INVALID:
        raise IllegalComparison(f"Invalid table combo {list(table)}")

    top = max(candidate)
    table_top = max(table)

    if cand_type in BOMB_TYPES:
        if _is_twos(table, table_type):
            return True
        if cand_type == table_type == ComboType.STRAIGHT_BOMB:
            if len(candidate) != len(table):
                return len(candidate) > len(table)
            return top > table_top
        if cand_type == table_type:
            return top > table_top
        if table_type is ComboType.STRAIGHT_BOMB:
            return len(table) // 2 < rules.run_pairs_over_four
        if table_type is ComboType.FOUR_OF_A_KIND:
            return len(candidate) // 2 >= rules.run_pairs_over_four
        return False

    if cand_type == table_type and len(candidate) == len(table):
        return top > table_top
    return False


def is_legal_play(cards, table, first_turn_of_game: bool = False,
                  rules: BombRules = DEFAULT_RULES) -> tuple[bool, str]:
    """Validate ``cards`` as a play against ``table``.

    Returns ``(ok, reason)``.  An empty selection is not a play.
    """

    if not cards:
        return False, 'No cards selected'
    if not is_valid(cards):
        return False, 'Invalid combo'
    if first_turn_of_game and not contains_three_of_spades(cards):
        return False, f'Must include {THREE_OF_SPADES} first'
    if not table:
        return True, ''
    if beats(cards, table, rules):
        return True, ''
    return False, 'Does not beat current'


def type_to_string(combo: ComboType) -> str:
    return _TYPE_NAMES[combo]


def combo_to_string(cards) -> str:
    """Render ``cards`` as ``"3♠ 3♥ (pair)"``, or ``"pass"`` when empty."""

    cards = list(cards)
    if not cards:
        return 'pass'
    shown = " ".join(repr(c) for c in sorted(cards))
    return f"{shown} ({type_to_string(detect_type(cards))})"
