"""Batch engine: deal and classify many hands at once with numpy.

Instead of redrawing on duplicates, each hand takes the HAND_SIZE smallest of
DECK_SIZE uniform random keys, which is the same distribution as a partial
Fisher-Yates shuffle of the deck indices. Counting and classification reuse
the broadcasting tables and predicates of the card-by-card engine.
"""
from __future__ import annotations
from typing import Optional, Tuple
import time
from logging import getLogger

import numpy as np

from poker_odds.classifier import classify
from poker_odds.constants import DECK_SIZE, DEFAULT_BATCH_SIZE, HAND_SIZE, SUITS
from poker_odds.counting import count_hands
from poker_odds.simulation import (
    OddsAccumulator,
    OddsSnapshot,
    ReportCallback,
    check_report_every,
    check_total_hands,
)

logger = getLogger(__name__)


def deal_batch(rng: np.random.Generator, n: int) -> Tuple[np.ndarray, np.ndarray]:
    """(n, HAND_SIZE) 1-based rank and suit arrays of n independent hands."""
    keys = rng.random((n, DECK_SIZE))
    idx = np.argpartition(keys, HAND_SIZE, axis=1)[:, :HAND_SIZE]
    # deck index = rank_index * SUITS + suit_index, same as Card.to_index()
    return idx // SUITS + 1, idx % SUITS + 1


def simulate_poker_odds_vectorized(
    total_hands: int,
    seed: int | None = None,
    report_every: Optional[int] = None,
    on_report: Optional[ReportCallback] = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> OddsSnapshot:
    total_hands = check_total_hands(total_hands)
    report_every = check_report_every(report_every)
    if batch_size <= 0:
        raise ValueError(f"batch_size must be > 0, got {batch_size}")
    if report_every:
        # batches never straddle a checkpoint
        batch_size = min(batch_size, report_every)
    rng = np.random.default_rng(seed)
    # hands never touch a Deck or DrawTracker here, only the counters
    state = OddsAccumulator()
    start = time.perf_counter()
    logger.info("Dealing %d hands in batches of %d (seed=%s)", total_hands, batch_size, seed)

    last_reported = -1
    while state.hands_dealt < total_hands:
        n = min(batch_size, total_hands - state.hands_dealt)
        if report_every:
            n = min(n, report_every - state.hands_dealt % report_every)
        ranks, suits = deal_batch(rng, n)
        hits = classify(count_hands(ranks, suits))
        state.add_hits(hits.sum(axis=0), hands=n)
        if report_every and state.hands_dealt % report_every == 0:
            if on_report is not None:
                on_report(state.snapshot(total_hands, time.perf_counter() - start))
            last_reported = state.hands_dealt

    final = state.snapshot(total_hands, time.perf_counter() - start)
    if on_report is not None and last_reported != state.hands_dealt:
        on_report(final)
    logger.info("Dealt %d hands in %.2fs", final.hands_dealt, final.elapsed_seconds)
    return final
