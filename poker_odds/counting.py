from __future__ import annotations
from dataclasses import dataclass
from typing import List
from logging import getLogger

import numpy as np

from poker_odds.cards import Card
from poker_odds.constants import HAND_SIZE, RANKS, SUITS, X_OF_A_KIND_SIZE

logger = getLogger(__name__)

"""
Frequency tables for a five card hand:
    - rank_count[13]: cards per rank (rank 1 at index 0)
    - suit_count[4]: cards per suit (suit 1 at index 0)
    - rank_x_of_a_kind[6]: how many ranks occur exactly x times, for x in 0..5
    - suit_x_of_a_kind[6]: same for suits
    - min_rank / max_rank: extrema of the hand's ranks

Slot 0 of an x-of-a-kind table counts the ranks (suits) missing from the hand.
It is kept apart from the real occurrence counts and no predicate reads it.

Every table may carry leading batch dimensions: count_hand() builds the
single-hand shapes above, count_hands() builds (n, 13), (n, 4), (n, 6), (n,).
"""


@dataclass
class FrequencyTables:
    rank_count: np.ndarray
    suit_count: np.ndarray
    rank_x_of_a_kind: np.ndarray
    suit_x_of_a_kind: np.ndarray
    min_rank: np.ndarray | int
    max_rank: np.ndarray | int

    def rank_x(self, x: int):
        """Number of x-of-a-kind sets by rank, eg. [1,1,2,2,5], x = 2 : 2"""
        return self.rank_x_of_a_kind[..., x]

    def suit_x(self, x: int):
        return self.suit_x_of_a_kind[..., x]


def _tally(values: np.ndarray, size: int, offset: int = 0) -> np.ndarray:
    # values (..., k) -> counts (..., size) of each value offset..offset+size-1
    slots = np.arange(offset, offset + size)
    return (values[..., None] == slots).sum(axis=-2)


def count_hands(ranks: np.ndarray, suits: np.ndarray) -> FrequencyTables:
    """Count a batch of hands given as (..., HAND_SIZE) rank and suit arrays (1-based)."""
    ranks = np.asarray(ranks)
    suits = np.asarray(suits)
    if ranks.shape[-1] != HAND_SIZE or suits.shape != ranks.shape:
        raise ValueError(f"Expected (..., {HAND_SIZE}) rank/suit arrays, got {ranks.shape} and {suits.shape}")
    rank_count = _tally(ranks, RANKS, offset=1)
    suit_count = _tally(suits, SUITS, offset=1)
    return FrequencyTables(
        rank_count=rank_count,
        suit_count=suit_count,
        rank_x_of_a_kind=_tally(rank_count, X_OF_A_KIND_SIZE),
        suit_x_of_a_kind=_tally(suit_count, X_OF_A_KIND_SIZE),
        min_rank=ranks.min(axis=-1),
        max_rank=ranks.max(axis=-1),
    )


def count_hand(hand: List[Card]) -> FrequencyTables:
    """Count occurrences of each rank and suit plus x-of-a-kind occurrences.

    Nothing is carried over from a previous hand; the tables are rebuilt
    from the cards every call.
    """
    if len(hand) != HAND_SIZE:
        raise ValueError(f"A hand holds {HAND_SIZE} cards, got {len(hand)}")
    rank_count = np.zeros(RANKS, dtype=np.int64)
    suit_count = np.zeros(SUITS, dtype=np.int64)
    lowest_rank = RANKS
    highest_rank = 0
    for c in hand:
        rank_count[c.rank - 1] += 1
        suit_count[c.suit - 1] += 1
        if c.rank < lowest_rank:
            lowest_rank = c.rank
        if c.rank > highest_rank:
            highest_rank = c.rank
    return FrequencyTables(
        rank_count=rank_count,
        suit_count=suit_count,
        rank_x_of_a_kind=np.bincount(rank_count, minlength=X_OF_A_KIND_SIZE),
        suit_x_of_a_kind=np.bincount(suit_count, minlength=X_OF_A_KIND_SIZE),
        min_rank=lowest_rank,
        max_rank=highest_rank,
    )
