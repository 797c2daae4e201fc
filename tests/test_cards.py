import random
from collections import Counter

import pytest

from balik.cards import (
    DECK_SIZE,
    HAND_SIZE,
    choose_rank,
    deal,
    draw_from_table,
    new_deck,
    shuffle,
    take_fish,
)


class _FixedRng:
    def __init__(self, pick):
        self.pick = pick

    def randrange(self, n):
        return self.pick(n)


def test_new_deck_has_four_of_each_rank():
    deck = new_deck()
    assert len(deck) == 24
    assert Counter(deck) == {rank: 4 for rank in range(1, 7)}
    assert deck == sorted(deck)


def test_shuffle_is_permutation():
    cards = new_deck()
    shuffle(cards, random.Random(3))
    assert sorted(cards) == new_deck()


def test_shuffle_identity_when_rng_picks_last():
    cards = [1, 2, 3, 4]
    shuffle(cards, _FixedRng(lambda n: n - 1))
    assert cards == [1, 2, 3, 4]


def test_shuffle_always_swapping_with_first():
    cards = [1, 2, 3]
    shuffle(cards, _FixedRng(lambda n: 0))
    assert cards == [2, 3, 1]


def test_deal_alternates_cards():
    deck = new_deck()
    player, computer, table = deal(deck, _FixedRng(lambda n: n - 1))
    assert player == deck[0:12:2]
    assert computer == deck[1:12:2]
    assert table == deck[12:]


def test_deal_sizes_and_conservation():
    deck = new_deck()
    player, computer, table = deal(deck, random.Random(7))
    assert len(player) == HAND_SIZE
    assert len(computer) == HAND_SIZE
    assert len(table) == DECK_SIZE - 2 * HAND_SIZE
    assert sorted(player + computer + table) == deck
    assert deck == new_deck()


def test_take_fish_removes_rank():
    hand = [1, 2, 1, 1, 3, 1]
    assert take_fish(hand) == 1
    assert hand == [2, 3]


def test_take_fish_none():
    hand = [1, 1, 1, 2, 2]
    assert take_fish(hand) is None
    assert hand == [1, 1, 1, 2, 2]


def test_take_fish_first_to_reach_four():
    hand = [2, 1, 2, 1, 2, 1, 2, 1]
    assert take_fish(hand) == 2
    assert hand == [1, 1, 1, 1]


def test_draw_from_table_takes_top():
    table = [5, 6]
    hand = [1]
    assert draw_from_table(table, hand) == 5
    assert hand == [1, 5]
    assert table == [6]


def test_draw_from_empty_table():
    hand = [1]
    assert draw_from_table([], hand) is None
    assert hand == [1]


def test_choose_rank_prefers_lowest_on_tie():
    assert choose_rank([3, 3, 2, 2, 5], random.Random(0)) == 2


def test_choose_rank_most_frequent():
    assert choose_rank([1, 4, 4, 4], random.Random(0)) == 4


def test_choose_rank_random_when_all_single():
    hand = [6, 2, 5]
    assert choose_rank(hand, _FixedRng(lambda n: 1)) == hand[1]
    assert choose_rank(hand, random.Random(9)) in hand


def test_choose_rank_empty_hand():
    with pytest.raises(ValueError):
        choose_rank([], random.Random(0))