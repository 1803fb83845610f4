import os
import sys

import pytest

# Add ``src`` directory to Python path for tests
ROOT_DIR = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, os.path.join(ROOT_DIR, "src"))

# Keep pygame's mixer away from real audio devices
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from tienlen_engine import Card, Game, Hand, PassPolicy, sound  # noqa: E402


@pytest.fixture(autouse=True)
def mute_sound():
    """Run every test with sound cues disabled."""
    sound.set_enabled(False)
    yield
    sound.set_enabled(False)


def cards(*tokens):
    """Build cards from tokens such as ``'3S'`` or ``'10H'``."""
    return [Card.from_string(t) for t in tokens]


class ScriptedPolicy:
    """Plays a fixed list of moves in order, then passes."""

    name = "scripted"

    def __init__(self, *moves):
        self.moves = [cards(*m.split()) if m else [] for m in moves]
        self.calls = []

    def choose(self, hand, state, must_open):
        self.calls.append(must_open)
        return self.moves.pop(0) if self.moves else []


def make_game(hands, starter=0, policies=None, **kwargs):
    """Create a ``Game`` with fixed hands (lists of tokens) and start it."""
    game = Game(policies or [PassPolicy() for _ in range(4)], seed=0, **kwargs)
    game.hands = [Hand(cards(*h)) for h in hands]
    game.start(starter)
    return game
