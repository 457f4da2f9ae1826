import numpy as np
import pytest

from poker_odds.cards import Deck, parse_hand
from poker_odds.counting import count_hand, count_hands
from poker_odds.dealer import deal_hand, return_hand
from poker_odds.draw_tracker import DrawTracker


def test_count_two_pair_hand():
    t = count_hand(parse_hand("2C 2H 5S 5D KC"))
    assert t.rank_count.tolist() == [0, 2, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 1]
    assert t.suit_count.tolist() == [2, 1, 1, 1]
    # eight ranks missing, one single, two pairs
    assert t.rank_x_of_a_kind.tolist() == [10, 1, 2, 0, 0, 0]
    assert t.suit_x_of_a_kind.tolist() == [0, 3, 1, 0, 0, 0]
    assert t.min_rank == 2
    assert t.max_rank == 13


def test_count_flush_hand():
    t = count_hand(parse_hand("2C 5C 7C 9C KC"))
    assert t.suit_x(5) == 1
    assert t.suit_x(0) == 3
    assert t.rank_x(1) == 5


def test_count_four_of_a_kind():
    t = count_hand(parse_hand("7C 7H 7S 7D KC"))
    assert t.rank_x(4) == 1
    assert t.rank_x(1) == 1
    assert t.rank_x(2) == 0
    assert t.rank_x(3) == 0


def test_tables_are_rebuilt_every_call():
    first = count_hand(parse_hand("3C 3H 3S 9D 9C"))
    second = count_hand(parse_hand("4C 5H 6S 7D 8C"))
    assert first.rank_x(3) == 1
    assert second.rank_x(3) == 0
    assert second.rank_x(2) == 0
    assert second.rank_x(1) == 5
    assert (second.min_rank, second.max_rank) == (4, 8)


def test_frequency_sums_for_random_hands():
    deck = Deck(seed=21)
    tracker = DrawTracker()
    for _ in range(500):
        hand = deal_hand(deck, tracker)
        t = count_hand(hand)
        assert t.rank_count.sum() == 5
        assert t.suit_count.sum() == 5
        assert t.rank_x_of_a_kind.sum() == 13
        assert t.suit_x_of_a_kind.sum() == 4
        assert sum(k * n for k, n in enumerate(t.rank_x_of_a_kind)) == 5
        assert t.min_rank == min(c.rank for c in hand)
        assert t.max_rank == max(c.rank for c in hand)
        return_hand(hand, tracker)


def test_count_hand_rejects_wrong_size():
    with pytest.raises(ValueError):
        count_hand(parse_hand("2C 3C 4C"))


def test_batch_tables_match_single_hand_tables():
    texts = ["2C 2H 5S 9D KC", "3C 3H 3S 9D 9C", "AC 2H 3S 4D 5C", "2C 5C 7C 9C KC"]
    hands = [parse_hand(t) for t in texts]
    ranks = np.array([[c.rank for c in h] for h in hands])
    suits = np.array([[c.suit for c in h] for h in hands])
    batch = count_hands(ranks, suits)
    assert batch.rank_count.shape == (4, 13)
    assert batch.rank_x_of_a_kind.shape == (4, 6)
    for i, hand in enumerate(hands):
        single = count_hand(hand)
        assert batch.rank_count[i].tolist() == single.rank_count.tolist()
        assert batch.suit_count[i].tolist() == single.suit_count.tolist()
        assert batch.rank_x_of_a_kind[i].tolist() == single.rank_x_of_a_kind.tolist()
        assert batch.suit_x_of_a_kind[i].tolist() == single.suit_x_of_a_kind.tolist()
        assert batch.min_rank[i] == single.min_rank
        assert batch.max_rank[i] == single.max_rank


def test_count_hands_rejects_bad_shapes():
    with pytest.raises(ValueError):
        count_hands(np.ones((3, 4), dtype=int), np.ones((3, 4), dtype=int))
    with pytest.raises(ValueError):
        count_hands(np.ones((3, 5), dtype=int), np.ones((2, 5), dtype=int))
