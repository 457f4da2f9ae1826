"""Poker hand predicates over frequency tables.

Each predicate looks only at the x-of-a-kind tables and the rank extrema,
never at the cards themselves, and each is evaluated on its own. The
categories therefore overlap: a full house also counts as three of a kind.
Ranks are plain integers with the ace at 1, so A-2-3-4-5 is a straight while
10-J-Q-K-A is not.

All predicates broadcast, so the same code classifies one hand or a batch.
"""
from __future__ import annotations
from typing import Callable, Dict
from logging import getLogger

import numpy as np

from poker_odds.constants import HAND_SIZE
from poker_odds.counting import FrequencyTables

logger = getLogger(__name__)

HAND_CATEGORIES = (
    "one_pair",
    "two_pair",
    "three_of_a_kind",
    "four_of_a_kind",
    "straight",
    "flush",
    "full_house",
)


def is_one_pair(t: FrequencyTables):
    return t.rank_x(2) == 1


def is_two_pair(t: FrequencyTables):
    return t.rank_x(2) == 2


def is_three_of_a_kind(t: FrequencyTables):
    return t.rank_x(3) == 1


def is_four_of_a_kind(t: FrequencyTables):
    return t.rank_x(4) == 1


def is_straight(t: FrequencyTables):
    # with every rank unique, the ranks are contiguous iff they span HAND_SIZE
    all_unique = t.rank_x(1) == HAND_SIZE
    return all_unique & (np.asarray(t.max_rank) - np.asarray(t.min_rank) + 1 == HAND_SIZE)


def is_flush(t: FrequencyTables):
    return t.suit_x(HAND_SIZE) > 0


def is_full_house(t: FrequencyTables):
    return (t.rank_x(3) > 0) & (t.rank_x(2) > 0)


PREDICATES: Dict[str, Callable[[FrequencyTables], np.ndarray]] = {
    "one_pair": is_one_pair,
    "two_pair": is_two_pair,
    "three_of_a_kind": is_three_of_a_kind,
    "four_of_a_kind": is_four_of_a_kind,
    "straight": is_straight,
    "flush": is_flush,
    "full_house": is_full_house,
}


def classify(tables: FrequencyTables) -> np.ndarray:
    """0/1 hit per category, in HAND_CATEGORIES order (last axis)."""
    hits = [np.asarray(PREDICATES[name](tables)) for name in HAND_CATEGORIES]
    return np.stack(hits, axis=-1).astype(np.int64)


def classify_named(tables: FrequencyTables) -> Dict[str, int]:
    """Single hand convenience: {'one_pair': 1, 'two_pair': 0, ...}"""
    hits = classify(tables)
    if hits.ndim != 1:
        raise ValueError("classify_named expects the tables of a single hand")
    return {name: int(h) for name, h in zip(HAND_CATEGORIES, hits)}
