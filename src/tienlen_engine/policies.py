"""Reference decision policies.

A policy is asked once per turn what the current player plays::

    policy.choose(hand, state, must_open) -> list[Card]

An empty list is a pass.  The engine never trusts the answer: the
driving loop validates it and treats anything illegal as a pass.
"""
from __future__ import annotations

import random
import sys
from itertools import combinations

from .cards import Card
from .combos import (
    BOMB_TYPES,
    ComboType,
    combo_to_string,
    detect_type,
    is_legal_play,
)
from .errors import MalformedCardToken
from .game_log import logger
from .hand import Hand
from .settings import DEFAULT_RULES, BombRules

# Rough ranking used by the greedy policy; lower types are shed first.
TYPE_PRIORITY = {
    ComboType.SINGLE: 1,
    ComboType.PAIR: 2,
    ComboType.TRIPLE: 3,
    ComboType.STRAIGHT: 4,
    ComboType.FOUR_OF_A_KIND: 5,
    ComboType.STRAIGHT_BOMB: 6,
}


def _candidate_sizes(n_cards: int, table) -> list[int]:
    if not table:
        return list(range(1, n_cards + 1))
    sizes = {len(table), 4}
    sizes.update(range(6, n_cards + 1, 2))
    return sorted(s for s in sizes if s <= n_cards)


def generate_valid_moves(hand, table=(), first_turn_of_game: bool = False,
                         rules: BombRules = DEFAULT_RULES) -> list[list[Card]]:
    """Return every legal play from ``hand`` against ``table``."""

    cards = sorted(hand)
    moves = []
    for n in _candidate_sizes(len(cards), table):
        for combo_cards in combinations(cards, n):
            lst = list(combo_cards)
            ok, _ = is_legal_play(lst, table, first_turn_of_game, rules)
            if ok:
                moves.append(lst)
    return moves


def score_move(hand, move, table) -> tuple:
    """Heuristic score; higher is better for the greedy policy."""

    combo = detect_type(move)
    finish = 1 if len(move) == len(hand) else 0
    bomb = 1 if combo in BOMB_TYPES else 0
    # Lead with longer combos to shed cards; follow as cheaply as possible
    shed = len(move) if not table else 0
    top = max(move)
    return (finish, -bomb, shed, -TYPE_PRIORITY[combo], -top.rank, -top.suit)


class DecisionPolicy:
    """Base class for anything that chooses plays."""

    name = "policy"

    @classmethod
    def from_options(cls, rng: random.Random | None = None,
                     rules: BombRules = DEFAULT_RULES) -> "DecisionPolicy":
        return cls()

    def choose(self, hand: Hand, state, must_open: bool) -> list[Card]:
        """Return the cards to play from ``hand``, or an empty list to pass.

        ``state`` is a read-only :class:`~tienlen_engine.state.StateView`
        of the table.  Policies must not modify ``hand``.
        """
        raise NotImplementedError


class PassPolicy(DecisionPolicy):
    """Always passes."""

    name = "pass"

    def choose(self, hand, state, must_open):
        return []


class RandomPolicy(DecisionPolicy):
    """Plays a uniformly random legal move."""

    name = "random"

    def __init__(self, rng: random.Random | None = None,
                 rules: BombRules = DEFAULT_RULES) -> None:
        self.rng = rng or random.Random()
        self.rules = rules

    @classmethod
    def from_options(cls, rng=None, rules=DEFAULT_RULES):
        return cls(rng, rules)

    def choose(self, hand, state, must_open):
        moves = generate_valid_moves(hand, state.table_combo, must_open, self.rules)
        if not moves:
            return []
        return self.rng.choice(moves)


class GreedyPolicy(DecisionPolicy):
    """Plays the highest scoring legal move according to :func:`score_move`."""

    name = "greedy"

    def __init__(self, rules: BombRules = DEFAULT_RULES) -> None:
        self.rules = rules

    @classmethod
    def from_options(cls, rng=None, rules=DEFAULT_RULES):
        return cls(rules)

    def choose(self, hand, state, must_open):
        table = state.table_combo
        moves = generate_valid_moves(hand, table, must_open, self.rules)
        if not moves:
            return []
        return max(moves, key=lambda m: score_move(hand, m, table))


def parse_input(inp: str, hand):
    """Parse console input into ``(command, payload)``.

    ``payload`` is the list of selected cards for ``'play'`` and an error
    message for ``'error'``.  Cards may be given as tokens (``3S``,
    ``10♥``) or as 1-based positions in ``hand``.
    """

    s = inp.strip().lower()
    if s in ['pass', 'help', 'quit', 'hint']:
        return s, []

    held = list(hand)
    cards = []
    for p in inp.strip().split():
        if p.isdigit():
            idx = int(p) - 1
            if idx < 0 or idx >= len(held):
                return 'error', 'Invalid index'
            card = held[idx]
        else:
            try:
                card = Card.from_string(p)
            except MalformedCardToken:
                return 'error', f"Invalid card {p}"
            if card not in held:
                return 'error', f"Card {card} not in hand"
        if card in cards:
            return 'error', 'Duplicate card'
        cards.append(card)
    if not cards:
        return 'error', 'No cards selected'
    return 'play', cards


class ConsolePolicy(DecisionPolicy):
    """Reads plays from standard input."""

    name = "human"

    def __init__(self, rules: BombRules = DEFAULT_RULES, output=print) -> None:
        self.rules = rules
        self.output = output

    def hint(self, hand, state, must_open) -> list[Card]:
        return GreedyPolicy(self.rules).choose(hand, state, must_open)

    def show_hand(self, hand) -> None:
        listing = "  ".join(f"{i}:{c}" for i, c in enumerate(hand, 1))
        self.output(f"Your hand: {listing}")

    def choose(self, hand, state, must_open):
        table = state.table_combo
        self.output(f"Table: {combo_to_string(table) if table else 'empty'}")
        self.show_hand(hand)
        while True:
            try:
                inp = input("Enter cards or 'pass','hint','help','quit': ")
            except (EOFError, OSError):
                logger.info('Input unsupported; defaulting to pass')
                return []
            cmd, res = parse_input(inp, hand)
            if cmd == 'quit':
                logger.info('Game quit')
                sys.exit()
            if cmd == 'help':
                self.output("Commands: pass, hint, quit, or list card numbers/tokens (e.g. 3S 3H)")
                continue
            if cmd == 'hint':
                self.output(f"Hint: {combo_to_string(self.hint(hand, state, must_open))}")
                continue
            if cmd == 'pass':
                return []
            if cmd == 'error':
                self.output(str(res))
                continue
            ok, msg = is_legal_play(res, table, must_open, self.rules)
            if ok:
                return res
            self.output(f"Invalid: {msg}")


POLICIES = {
    'Greedy': GreedyPolicy,
    'Random': RandomPolicy,
    'Pass': PassPolicy,
}


def make_policy(name: str, rng: random.Random | None = None,
                rules: BombRules = DEFAULT_RULES) -> DecisionPolicy:
    """Build the computer policy registered under ``name``."""

    try:
        cls = POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown policy {name!r}") from None
    return cls.from_options(rng, rules)
