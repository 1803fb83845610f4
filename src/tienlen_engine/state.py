"""Turn and round state machine.

:class:`GameState` only does bookkeeping.  Deciding whether a play is
legal belongs to :mod:`tienlen_engine.combos`; asking players for plays
belongs to the driving loop in :mod:`tienlen_engine.game`.

Round flow::

    ROUND_OPEN --set_table_combo--> ROUND_ACTIVE --reset_round--> ROUND_OPEN
            \\                        |
             +------ winner set -----+--> GAME_OVER
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable

from .cards import Card
from .combos import classify, combo_to_string
from .settings import NUM_PLAYERS


class Phase(Enum):
    ROUND_OPEN = 'round_open'
    ROUND_ACTIVE = 'round_active'
    GAME_OVER = 'game_over'


class GameState:
    """Mutable per-game table state."""

    def __init__(self, starting_player: int = 0, num_players: int = NUM_PLAYERS,
                 play_to_last: bool = False) -> None:
        if not 0 <= starting_player < num_players:
            raise ValueError(f"Invalid starting player {starting_player}")
        self.num_players = num_players
        self.current_player = starting_player
        self.active_players: set[int] = set(range(num_players))
        self.table_combo: tuple[Card, ...] = ()
        self.last_player_to_play: int | None = None
        self.pass_count = 0
        self.winner: int | None = None
        # Keep going after the first player empties their hand
        self.play_to_last = play_to_last
        self.finish_order: list[int] = []

    @property
    def phase(self) -> Phase:
        if self.check_game_over():
            return Phase.GAME_OVER
        if self.table_combo:
            return Phase.ROUND_ACTIVE
        return Phase.ROUND_OPEN

    def set_table_combo(self, cards: Iterable[Card]) -> None:
        """Record ``cards`` as the combo to beat, played by the current player.

        The caller has already checked that the play is legal; only its
        shape is re-checked here.
        """

        cards = tuple(cards)
        classify(cards)
        self.table_combo = cards
        self.mark_player_played()

    def mark_player_played(self) -> None:
        self.last_player_to_play = self.current_player
        self.pass_count = 0

    def mark_player_passed(self) -> None:
        self.pass_count += 1

    def _passes_needed(self) -> int:
        # A leader who went out is no longer waiting for passes
        if self.last_player_to_play in self.active_players:
            return len(self.active_players) - 1
        return len(self.active_players)

    def all_others_passed(self) -> bool:
        """Return ``True`` once every other active player has passed."""

        if not self.table_combo:
            return False
        return self.pass_count >= self._passes_needed()

    def reset_round(self) -> None:
        """Clear the table and hand the lead to the last player to play."""

        self.table_combo = ()
        self.pass_count = 0
        leader = self.last_player_to_play
        if leader is None:
            return
        self.current_player = leader
        if leader not in self.active_players:
            self.next_player()

    def next_player(self) -> int:
        """Advance ``current_player`` to the next active seat."""

        if not self.active_players:
            return self.current_player
        idx = self.current_player
        for _ in range(self.num_players):
            idx = (idx + 1) % self.num_players
            if idx in self.active_players:
                break
        self.current_player = idx
        return idx

    def mark_player_inactive(self, player: int) -> None:
        """Remove ``player`` from play after they empty their hand.

        If ``player`` is the current player the caller must follow up with
        :meth:`next_player`.
        """

        self.active_players.discard(player)
        if player not in self.finish_order:
            self.finish_order.append(player)

    def declare_winner(self, player: int) -> None:
        """Record ``player`` as the winner unless one is already set."""

        if self.winner is None:
            self.winner = player

    def check_game_over(self) -> bool:
        if self.play_to_last:
            return len(self.active_players) <= 1
        return self.winner is not None or len(self.active_players) <= 1

    def view(self) -> "StateView":
        """Return the read-only view given to decision policies."""

        return StateView(self)

    def to_dict(self) -> dict:
        """Return a read-only snapshot for display."""

        return {
            "phase": self.phase.value,
            "current_player": self.current_player,
            "active_players": sorted(self.active_players),
            "table_combo": [c.to_dict() for c in self.table_combo],
            "table_text": combo_to_string(self.table_combo) if self.table_combo else None,
            "last_player_to_play": self.last_player_to_play,
            "pass_count": self.pass_count,
            "winner": self.winner,
            "finish_order": list(self.finish_order),
        }


class StateView:
    """Read-only window onto a :class:`GameState`."""

    __slots__ = ('_state',)

    def __init__(self, state: GameState) -> None:
        self._state = state

    @property
    def current_player(self) -> int:
        return self._state.current_player

    @property
    def active_players(self) -> frozenset[int]:
        return frozenset(self._state.active_players)

    @property
    def table_combo(self) -> tuple[Card, ...]:
        return self._state.table_combo

    @property
    def last_player_to_play(self) -> int | None:
        return self._state.last_player_to_play

    @property
    def pass_count(self) -> int:
        return self._state.pass_count

    @property
    def winner(self) -> int | None:
        return self._state.winner

    @property
    def phase(self) -> Phase:
        return self._state.phase

    def to_dict(self) -> dict:
        return self._state.to_dict()
