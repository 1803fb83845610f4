"""Command line interface entry point for Tiến Lên."""
from __future__ import annotations

import argparse
import logging
import random

from . import sound
from .errors import TurnLimitExceeded
from .game import Game
from .game_log import configure_logging, logger
from .policies import POLICIES, ConsolePolicy, make_policy
from .settings import LOG_FILE, MAX_TURNS, NUM_PLAYERS, BombRules


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Play Tiến Lên in the terminal')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for shuffling and random players')
    parser.add_argument('--ai', default='Greedy', choices=sorted(POLICIES),
                        help='Policy used by computer seats')
    parser.add_argument('--human', action='store_true',
                        help='Take seat 0 and enter plays on the console')
    parser.add_argument('--max-turns', type=int, default=MAX_TURNS,
                        help='Abort the game after this many turns')
    parser.add_argument('--run-pairs-over-four', type=int, default=BombRules().run_pairs_over_four,
                        help='Pairs a straight bomb needs to beat four of a kind')
    parser.add_argument('--play-to-last', action='store_true',
                        help='Keep playing after the first player goes out')
    parser.add_argument('--log-file', default=LOG_FILE, help='Append the game log here')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Echo the game log to the console')
    parser.add_argument('--mute', action='store_true', help='Disable sound cues')
    parser.add_argument('--sound-dir', default=None,
                        help='Directory holding <cue>.wav sound files')
    return parser


def build_game(args: argparse.Namespace) -> Game:
    rules = BombRules(args.run_pairs_over_four)
    rng = random.Random(args.seed)
    policies = []
    for seat in range(NUM_PLAYERS):
        if seat == 0 and args.human:
            policies.append(ConsolePolicy(rules))
        else:
            policies.append(make_policy(args.ai, random.Random(rng.random()), rules))
    return Game(policies, rng=rng, max_turns=args.max_turns, rules=rules,
                play_to_last=args.play_to_last)


def main(argv=None) -> int:
    """Run a game via the CLI and return the process exit status."""

    args = create_parser().parse_args(argv)
    configure_logging(args.log_file, logging.INFO, console=args.verbose)
    sound.set_enabled(not args.mute)
    if args.sound_dir and not args.mute:
        sound.load_dir(args.sound_dir)

    game = build_game(args)
    try:
        result = game.play()
    except TurnLimitExceeded as exc:
        logger.warning("Game aborted: %s", exc)
        print(f"Game aborted: {exc}")
        return 2

    print(f"{game.names[result.winner]} wins after {result.turns} turns "
          f"({result.rounds} rounds)")
    for name, left in game.get_rankings():
        print(f" {name}: {left} cards left")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
