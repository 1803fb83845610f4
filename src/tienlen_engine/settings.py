"""Table size, safety limits and rule settings."""
from __future__ import annotations

from typing import NamedTuple

NUM_PLAYERS = 4
CARDS_PER_HAND = 13

# Safety bound on total turns per game, enforced by the driving loop.
MAX_TURNS = 1000

# All game actions are appended to this file once logging is configured.
LOG_FILE = 'tien_len_game.log'

# Sound cue names the driving loop plays.
SOUND_CUES = ('shuffle', 'play', 'pass', 'bomb', 'win')


class BombRules(NamedTuple):
    """Precedence between four-of-a-kind and straight-bombs.

    ``run_pairs_over_four`` is the number of consecutive pairs from which
    a straight-bomb beats any four-of-a-kind.  Shorter straight-bombs lose
    to four-of-a-kind.
    """

    run_pairs_over_four: int = 4


DEFAULT_RULES = BombRules()
