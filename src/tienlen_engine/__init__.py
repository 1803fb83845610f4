from .cards import (
    Card, Deck, Rank, Suit, THREE_OF_SPADES, RANK_SYMBOLS, SUIT_CODES, SUIT_GLYPHS,
)
from .combos import (
    ComboType, BOMB_TYPES,
    is_single, is_pair, is_triple, is_four_of_a_kind, is_straight, is_straight_bomb,
    detect_type, is_valid, is_bomb, classify, contains_three_of_spades, beats,
    is_legal_play, combo_to_string, type_to_string,
)
from .errors import (
    TienLenError, MalformedCardToken, CardNotInHand, InvalidCombination,
    IllegalComparison, DealSizeMismatch, TurnLimitExceeded,
)
from .game import Game, GameResult, AI_NAMES
from .game_log import logger, log_action, configure_logging
from .hand import Hand
from .policies import (
    DecisionPolicy, PassPolicy, RandomPolicy, GreedyPolicy, ConsolePolicy,
    generate_valid_moves, parse_input, make_policy,
)
from .settings import BombRules, DEFAULT_RULES, MAX_TURNS, NUM_PLAYERS, CARDS_PER_HAND
from .state import GameState, Phase, StateView
from .cli import create_parser, main
from . import sound

__all__ = [
    'Card', 'Deck', 'Rank', 'Suit', 'THREE_OF_SPADES', 'RANK_SYMBOLS', 'SUIT_CODES', 'SUIT_GLYPHS',
    'ComboType', 'BOMB_TYPES',
    'is_single', 'is_pair', 'is_triple', 'is_four_of_a_kind', 'is_straight', 'is_straight_bomb',
    'detect_type', 'is_valid', 'is_bomb', 'classify', 'contains_three_of_spades', 'beats',
    'is_legal_play', 'combo_to_string', 'type_to_string',
    'TienLenError', 'MalformedCardToken', 'CardNotInHand', 'InvalidCombination',
    'IllegalComparison', 'DealSizeMismatch', 'TurnLimitExceeded',
    'Game', 'GameResult', 'AI_NAMES',
    'logger', 'log_action', 'configure_logging',
    'Hand',
    'DecisionPolicy', 'PassPolicy', 'RandomPolicy', 'GreedyPolicy', 'ConsolePolicy',
    'generate_valid_moves', 'parse_input', 'make_policy',
    'BombRules', 'DEFAULT_RULES', 'MAX_TURNS', 'NUM_PLAYERS', 'CARDS_PER_HAND',
    'GameState', 'Phase', 'StateView',
    'create_parser', 'main',
    'sound',
]
