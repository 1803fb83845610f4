from itertools import combinations

import pytest

from conftest import cards
from tienlen_engine import (
    BombRules,
    ComboType,
    Deck,
    IllegalComparison,
    InvalidCombination,
    beats,
    classify,
    combo_to_string,
    contains_three_of_spades,
    detect_type,
    is_bomb,
    is_four_of_a_kind,
    is_legal_play,
    is_pair,
    is_single,
    is_straight,
    is_straight_bomb,
    is_triple,
    is_valid,
    type_to_string,
)


def test_combo_detection():
    assert is_single(cards('3S'))
    assert detect_type(cards('3S')) is ComboType.SINGLE

    assert is_pair(cards('3S', '3H'))
    assert detect_type(cards('3S', '3H')) is ComboType.PAIR
    assert not is_pair(cards('3S', '4S'))

    assert is_triple(cards('3S', '3H', '3D'))
    assert detect_type(cards('3S', '3H', '3D')) is ComboType.TRIPLE

    bomb = cards('3S', '3H', '3D', '3C')
    assert is_four_of_a_kind(bomb)
    assert detect_type(bomb) is ComboType.FOUR_OF_A_KIND
    assert is_bomb(bomb)

    seq = cards('3S', '4H', '5C')
    assert is_straight(seq)
    assert detect_type(seq) is ComboType.STRAIGHT
    assert detect_type(cards('JS', 'QS', 'KS', 'AS')) is ComboType.STRAIGHT
    assert detect_type(cards('8D', '9D', '10D', 'JD', 'QD')) is ComboType.STRAIGHT

    run = cards('3S', '3H', '4C', '4D', '5S', '5H')
    assert is_straight_bomb(run)
    assert detect_type(run) is ComboType.STRAIGHT_BOMB
    assert is_bomb(run)


@pytest.mark.parametrize('tokens', [
    (),
    ('3S', '4S'),
    ('3S', '3H', '4D'),
    ('3S', '5H', '7D'),
    ('3S', '4S', '5S', '7S'),
    ('QS', 'KS', 'AS', '2S'),
    ('KH', 'AH', '2H'),
    ('3S', '3H', '3D', '4C'),
    ('3S', '3H', '4C', '4D'),
    ('3S', '3H', '4C', '4D', '6S', '6H'),
    ('3S', '3H', '3C', '4C', '4D', '4H'),
    ('KS', 'KH', 'AC', 'AD', '2S', '2H'),
    ('3S', '3S'),
])
def test_invalid_shapes(tokens):
    assert detect_type(cards(*tokens)) is ComboType.INVALID
    assert not is_valid(cards(*tokens))


def test_detect_type_is_total():
    deck = Deck().cards[:8]
    for n in range(0, 6):
        for combo in combinations(deck, n):
            assert detect_type(list(combo)) in set(ComboType)


def test_classify_raises_on_invalid():
    assert classify(cards('9S')) is ComboType.SINGLE
    with pytest.raises(InvalidCombination):
        classify(cards('9S', '10S'))


def test_contains_three_of_spades():
    assert contains_three_of_spades(cards('3S', '4H', '5D'))
    assert not contains_three_of_spades(cards('3H', '3C'))


def test_single_comparison():
    assert beats(cards('8C'), cards('7H'))
    assert not beats(cards('7S'), cards('7H'))
    assert beats(cards('7H'), cards('7S'))
    assert beats(cards('2S'), cards('AH'))


def test_pair_and_triple_comparison():
    assert beats(cards('5S', '5D'), cards('4H', '4C'))
    assert not beats(cards('4S', '4D'), cards('4H', '4C'))
    assert beats(cards('4S', '4H'), cards('4C', '4D'))
    assert beats(cards('9S', '9C', '9D'), cards('8S', '8C', '8H'))


def test_straight_comparison():
    assert beats(cards('4S', '5S', '6S'), cards('3H', '4H', '5H'))
    # Same top height: the suit of the top card decides
    assert beats(cards('3S', '4H', '5H'), cards('3H', '4S', '5D'))
    assert not beats(cards('3H', '4S', '5D'), cards('3S', '4H', '5H'))
    # Different lengths never compare
    assert not beats(cards('4S', '5S', '6S', '7S'), cards('3H', '4H', '5H'))
    assert not beats(cards('4S', '5S', '6S'), cards('3H', '4H', '5H', '6H'))


def test_type_mismatch_is_rejected():
    assert not beats(cards('9S', '9H'), cards('3C'))
    assert not beats(cards('3S', '4S', '5S'), cards('KC', 'KD', 'KH'))
    assert not beats(cards('3S', '3C', '3D'), cards('2H'))


def test_bombs_beat_twos():
    four = cards('3S', '3C', '3D', '3H')
    run = cards('4S', '4C', '5D', '5H', '6S', '6C')
    assert beats(four, cards('2H'))
    assert beats(four, cards('2S', '2H'))
    assert beats(run, cards('2H'))
    assert beats(run, cards('2D', '2H'))
    assert not beats(cards('2H'), four)
    assert not beats(cards('2D', '2H'), run)


def test_bombs_do_not_beat_other_plays():
    four = cards('3S', '3C', '3D', '3H')
    assert not beats(four, cards('KH'))
    assert not beats(four, cards('AS', 'AH'))
    assert not beats(four, cards('2S', '2C', '2H'))
    assert not beats(four, cards('5S', '6S', '7S'))


def test_bomb_against_bomb():
    assert beats(cards('4S', '4C', '4D', '4H'), cards('3S', '3C', '3D', '3H'))
    assert not beats(cards('3S', '3C', '3D', '3H'), cards('4S', '4C', '4D', '4H'))
    assert beats(cards('2S', '2C', '2D', '2H'), cards('AS', 'AC', 'AD', 'AH'))

    low = cards('3S', '3C', '4S', '4C', '5S', '5C')
    high = cards('4D', '4H', '5D', '5H', '6D', '6H')
    longer = cards('7S', '7C', '8S', '8C', '9S', '9C', '10S', '10C')
    assert beats(high, low)
    assert not beats(low, high)
    assert beats(longer, high)
    assert not beats(high, longer)
    same_top = cards('3D', '3H', '4D', '4H', '5D', '5H')
    assert beats(same_top, low)
    assert not beats(low, same_top)


def test_four_of_a_kind_against_straight_bomb():
    four = cards('KS', 'KC', 'KD', 'KH')
    three_pairs = cards('3S', '3C', '4S', '4C', '5S', '5C')
    four_pairs = cards('3D', '3H', '4D', '4H', '5D', '5H', '6D', '6H')
    assert beats(four, three_pairs)
    assert not beats(three_pairs, four)
    assert beats(four_pairs, four)
    assert not beats(four, four_pairs)


def test_configurable_bomb_precedence():
    rules = BombRules(run_pairs_over_four=3)
    four = cards('KS', 'KC', 'KD', 'KH')
    three_pairs = cards('3S', '3C', '4S', '4C', '5S', '5C')
    assert beats(three_pairs, four, rules)
    assert not beats(four, three_pairs, rules)


def test_beats_is_antisymmetric_for_singles_and_pairs():
    deck = Deck().cards
    for a, b in combinations(deck, 2):
        assert beats([a], [b]) != beats([b], [a])
    pairs = [list(p) for p in combinations(cards('9S', '9C', '9D', '9H', '10S', '10H'), 2)]
    pairs = [p for p in pairs if is_pair(p)]
    for a, b in combinations(pairs, 2):
        if set(a) & set(b):
            continue
        assert not (beats(a, b) and beats(b, a))


def test_illegal_comparisons():
    with pytest.raises(IllegalComparison):
        beats(cards('3S'), [])
    with pytest.raises(IllegalComparison):
        beats(cards('3S', '4S'), cards('5S'))
    with pytest.raises(IllegalComparison):
        beats(cards('5S'), cards('3S', '4S'))
    with pytest.raises(IllegalComparison):
        beats([], cards('3S'))


def test_is_legal_play_opening_rules():
    ok, msg = is_legal_play(cards('3S'), (), first_turn_of_game=True)
    assert ok and msg == ''
    ok, msg = is_legal_play(cards('4S'), (), first_turn_of_game=True)
    assert not ok and msg == 'Must include 3♠ first'
    ok, _ = is_legal_play(cards('3S', '4H', '5D'), (), first_turn_of_game=True)
    assert ok
    ok, _ = is_legal_play(cards('4S'), (), first_turn_of_game=False)
    assert ok


def test_is_legal_play_against_table():
    current = cards('4H', '4C')
    assert is_legal_play(cards('5S', '5D'), current) == (True, '')
    assert is_legal_play(cards('4S', '4D'), current) == (False, 'Does not beat current')
    assert is_legal_play(cards('3S', '4D'), current) == (False, 'Invalid combo')
    assert is_legal_play([], current) == (False, 'No cards selected')
    bomb = cards('7S', '7H', '7C', '7D')
    assert is_legal_play(bomb, current) == (False, 'Does not beat current')
    assert is_legal_play(bomb, cards('2S', '2H')) == (True, '')


def test_strings():
    assert combo_to_string(cards('3H', '3S')) == '3♠ 3♥ (pair)'
    assert combo_to_string([]) == 'pass'
    assert combo_to_string(cards('3S', '5H')) == '3♠ 5♥ (invalid)'
    assert type_to_string(ComboType.FOUR_OF_A_KIND) == 'four of a kind'
    assert type_to_string(ComboType.STRAIGHT_BOMB) == 'straight bomb'
    assert [type_to_string(t) for t in ComboType][:4] == ['single', 'pair', 'triple', 'straight']
