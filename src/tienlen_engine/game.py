"""Driving loop for a single game of Tiến Lên.

:class:`Game` deals the cards, asks each seat's decision policy for a
play, validates it and feeds the result into :class:`GameState`.  A few
key decisions:

* An illegal play is treated exactly like a pass.
* The very first play of the game must contain the 3♠.  The seat holding
  it leads.
* The loop stops at the first emptied hand unless ``play_to_last`` is
  set, in which case it continues until one player is left.
* Exceeding ``max_turns`` raises :class:`TurnLimitExceeded`.
"""
from __future__ import annotations

import random
from typing import NamedTuple, Sequence

from . import sound
from .cards import THREE_OF_SPADES, Card, Deck
from .combos import BOMB_TYPES, classify, combo_to_string, is_legal_play
from .errors import TurnLimitExceeded
from .game_log import log_action, logger
from .hand import Hand
from .policies import DecisionPolicy, GreedyPolicy
from .settings import DEFAULT_RULES, MAX_TURNS, NUM_PLAYERS, BombRules
from .state import GameState

# Names used for computer seats.  The list is longer than the number of
# seats so ``sample`` can pick distinct names for each game.
AI_NAMES = ["Linh", "Phong", "Bao", "Trang", "My", "Tuan", "Nam", "Duy", "Ha", "Minh"]


class GameResult(NamedTuple):
    winner: int
    turns: int
    rounds: int
    finish_order: list[int]


class Game:
    """Owns the deck, hands, table state and policies of one game."""

    def __init__(self, policies: Sequence[DecisionPolicy] | None = None,
                 rng: random.Random | None = None, seed: int | None = None,
                 max_turns: int = MAX_TURNS, rules: BombRules = DEFAULT_RULES,
                 play_to_last: bool = False, names: Sequence[str] | None = None) -> None:
        self.rng = rng or random.Random(seed)
        self.rules = rules
        if policies is None:
            policies = [GreedyPolicy(rules) for _ in range(NUM_PLAYERS)]
        if len(policies) != NUM_PLAYERS:
            raise ValueError(f"Expected {NUM_PLAYERS} policies, got {len(policies)}")
        self.policies = list(policies)
        self.names = list(names) if names else ['Player'] + self.rng.sample(AI_NAMES, 3)
        self.max_turns = max_turns
        self.play_to_last = play_to_last
        self.deck = Deck(self.rng)
        self.hands: list[Hand] = []
        self.state: GameState | None = None
        self.first_turn = True
        self.turns = 0
        self.current_round = 1
        # Plays of the current round as ``(seat, cards)``
        self.pile: list[tuple[int, list[Card]]] = []
        self.history: list[tuple[int, str]] = []
        self.move_log: dict[int, list[tuple[str, int, list[str]]]] = {}

    def setup(self) -> None:
        """Shuffle, deal and seat the player holding the 3♠."""

        self.deck.shuffle()
        sound.play("shuffle")
        self.hands = [Hand(cards) for cards in self.deck.deal(NUM_PLAYERS)]
        starter = 0
        for i, hand in enumerate(self.hands):
            hand.sort()
            bombs = hand.find_bombs()
            if bombs:
                logger.info("%s bombs: %s", self.names[i], bombs)
            if hand.find_three_of_spades():
                starter = i
        self.start(starter)

    def start(self, starter: int) -> None:
        """Begin play with ``starter`` leading.  Hands must already be set."""

        self.state = GameState(starter, NUM_PLAYERS, self.play_to_last)
        self.first_turn = True
        self.turns = 0
        self.current_round = 1
        self.pile.clear()
        self.history.clear()
        self.move_log.clear()
        if self.hands[starter].find_three_of_spades():
            logger.info("%s starts (holds %s)", self.names[starter], THREE_OF_SPADES)
        else:
            logger.info("%s starts", self.names[starter])
        log_action(f"Start: {self.names[starter]}")

    # Round and turn processing
    def process_play(self, seat: int, cards: list[Card]) -> bool:
        """Apply ``cards`` as ``seat``'s move.

        ``cards`` must already be validated.  Returns ``True`` if the
        seat emptied their hand.
        """

        combo = classify(cards)
        hand = self.hands[seat]
        hand.remove_cards(cards)
        self.state.set_table_combo(cards)
        self.first_turn = False

        name = self.names[seat]
        text = combo_to_string(cards)
        self.pile.append((seat, list(cards)))
        self.history.append((self.current_round, f"{name} plays {text}"))
        self.move_log.setdefault(self.current_round, []).append(
            ("play", seat, [c.to_string() for c in cards])
        )
        logger.info("%s plays %s", name, text)
        sound.play("bomb" if combo in BOMB_TYPES else "play")

        if not hand.is_empty():
            return False
        self.state.mark_player_inactive(seat)
        if self.state.winner is None:
            logger.info("%s wins!", name)
            log_action(f"Winner: {name}")
            sound.play("win")
        else:
            logger.info("%s is out", name)
        self.state.declare_winner(seat)
        return True

    def process_pass(self, seat: int) -> bool:
        """Record a pass by ``seat``.  Returns ``True`` if the round reset."""

        name = self.names[seat]
        self.history.append((self.current_round, f"{name} passes"))
        self.move_log.setdefault(self.current_round, []).append(("pass", seat, []))
        logger.info("%s passes", name)
        sound.play("pass")
        if not self.state.table_combo:
            # Nothing to pass against; the lead moves on
            return False
        self.state.mark_player_passed()
        if self.state.all_others_passed():
            self.reset_pile()
            return True
        return False

    def reset_pile(self) -> None:
        """Clear the table after everyone else has passed."""

        logger.info('All passed. Resetting pile.')
        self.summary_round()
        self.state.reset_round()
        self.pile.clear()
        self.current_round += 1

    def summary_round(self) -> None:
        logger.info('-- Round %d summary --', self.current_round)
        for seat, cards in self.pile:
            logger.info(" %s: %s", self.names[seat], combo_to_string(cards))
        leader = self.state.last_player_to_play
        if leader is not None:
            logger.info("%s won the round", self.names[leader])
        for i, hand in enumerate(self.hands):
            logger.info(" %s: %d cards", self.names[i], hand.get_card_count())
        log_action(f"Round summary: {self.pile}")

    def handle_turn(self) -> bool:
        """Process the current player's turn.

        Returns ``True`` when the game is over, otherwise ``False``.
        """

        state = self.state
        seat = state.current_player
        hand = self.hands[seat]
        must_open = self.first_turn
        cards = list(self.policies[seat].choose(hand, state.view(), must_open) or [])

        if cards:
            ok, msg = is_legal_play(cards, state.table_combo, must_open, self.rules)
            if not ok:
                logger.info("Invalid move by %s (%s), passing", self.names[seat], msg)
                cards = []

        if cards:
            self.process_play(seat, cards)
            if state.check_game_over():
                return True
            state.next_player()
        elif not self.process_pass(seat):
            state.next_player()
        return state.check_game_over()

    def play(self) -> GameResult:
        """Run the game until it is over and return the result."""

        if self.state is None:
            self.setup()
        while not self.state.check_game_over():
            if self.turns >= self.max_turns:
                logger.warning("Turn limit of %d reached without a winner", self.max_turns)
                log_action("Game aborted: turn limit")
                raise TurnLimitExceeded(self.turns)
            self.turns += 1
            self.handle_turn()
        return self.result()

    def result(self) -> GameResult:
        order = list(self.state.finish_order)
        if self.play_to_last:
            # The last seat standing finishes last
            order += sorted(self.state.active_players)
        return GameResult(self.state.winner, self.turns, self.current_round, order)

    def get_rankings(self) -> list[tuple[str, int]]:
        """Return players sorted by fewest cards remaining."""

        return sorted(
            [(self.names[i], len(h)) for i, h in enumerate(self.hands)], key=lambda x: x[1]
        )

    def to_dict(self) -> dict:
        """Return a snapshot of the game for display."""

        return {
            "players": [
                {"name": name, "card_count": len(hand)}
                for name, hand in zip(self.names, self.hands)
            ],
            "state": self.state.to_dict() if self.state else None,
            "first_turn": self.first_turn,
            "turns": self.turns,
            "current_round": self.current_round,
            "history": list(self.history),
        }
