from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional
import logging
import time
from logging import getLogger

import numpy as np

from poker_odds.cards import Card, Deck, format_hand
from poker_odds.classifier import HAND_CATEGORIES, classify
from poker_odds.constants import ODDS_UNDEFINED
from poker_odds.counting import count_hand
from poker_odds.dealer import arrange_hand, deal_hand, return_hand
from poker_odds.draw_tracker import DrawTracker

logger = getLogger(__name__)


def compute_odds(hands_dealt: int, count: int) -> int:
    """Odds against a category as N in 'N:1'; ODDS_UNDEFINED until it has occurred."""
    if count <= 0:
        return ODDS_UNDEFINED
    return hands_dealt // count


@dataclass
class OddsSnapshot:
    hands_dealt: int
    total_hands: int
    counts: Dict[str, int]
    elapsed_seconds: float = 0.0

    @property
    def percent_complete(self) -> float:
        if self.total_hands == 0:
            return 100.0
        return self.hands_dealt / self.total_hands * 100.0

    def odds(self) -> Dict[str, int]:
        return {name: compute_odds(self.hands_dealt, self.counts[name]) for name in HAND_CATEGORIES}

    def to_dict(self) -> dict:
        return {
            "hands_dealt": self.hands_dealt,
            "total_hands": self.total_hands,
            "elapsed_seconds": self.elapsed_seconds,
            "counts": dict(self.counts),
            "odds": self.odds(),
        }


@dataclass
class OddsAccumulator:
    """The seven category counters and the number of hands behind them."""
    counts: np.ndarray = field(default_factory=lambda: np.zeros(len(HAND_CATEGORIES), dtype=np.int64))
    hands_dealt: int = 0

    def add_hits(self, hits: np.ndarray, hands: int = 1) -> None:
        # hits is one 0/1 row per category, or already summed over a batch
        self.counts += hits
        self.hands_dealt += hands

    def snapshot(self, total_hands: int, elapsed_seconds: float = 0.0) -> OddsSnapshot:
        counts = {name: int(c) for name, c in zip(HAND_CATEGORIES, self.counts)}
        return OddsSnapshot(self.hands_dealt, total_hands, counts, elapsed_seconds)


@dataclass
class SimulationState(OddsAccumulator):
    """Everything the card-by-card loop mutates: deck, draw flags and accumulators."""
    deck: Deck = field(default_factory=Deck)
    tracker: DrawTracker = field(default_factory=DrawTracker)

    @classmethod
    def new(cls, seed: int | None = None) -> SimulationState:
        return cls(deck=Deck(seed))


ReportCallback = Callable[[OddsSnapshot], None]


def play_hand(state: SimulationState) -> List[Card]:
    """Deal, count, classify and accumulate one hand, then return it to the deck."""
    hand = deal_hand(state.deck, state.tracker)
    hits = classify(count_hand(hand))
    state.add_hits(hits)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("hand %d: %s -> %s", state.hands_dealt, format_hand(arrange_hand(hand)), hits.tolist())
    return_hand(hand, state.tracker)
    return hand


def check_total_hands(total_hands: int) -> int:
    if isinstance(total_hands, bool) or not isinstance(total_hands, (int, np.integer)):
        raise ValueError(f"total_hands must be an int, got {total_hands!r}")
    if total_hands < 0:
        raise ValueError(f"total_hands must be >= 0, got {total_hands}")
    return int(total_hands)


def check_report_every(report_every: Optional[int]) -> Optional[int]:
    """None or 0 means no checkpoints; anything else must be a positive int."""
    if report_every is None:
        return None
    if isinstance(report_every, bool) or not isinstance(report_every, (int, np.integer)):
        raise ValueError(f"report_every must be an int, got {report_every!r}")
    if report_every < 0:
        raise ValueError(f"report_every must be >= 0, got {report_every}")
    return int(report_every) or None


def simulate_poker_odds(
    total_hands: int,
    seed: int | None = None,
    report_every: Optional[int] = None,
    on_report: Optional[ReportCallback] = None,
    state: Optional[SimulationState] = None,
) -> OddsSnapshot:
    """Simulate dealing total_hands hands and return the final counts.

    on_report gets a snapshot every report_every hands (when set) and always
    once more at the end, unless the last checkpoint already covered it.
    """
    total_hands = check_total_hands(total_hands)
    report_every = check_report_every(report_every)
    if state is None:
        state = SimulationState.new(seed)
    start = time.perf_counter()
    logger.info("Dealing %d hands (seed=%s)", total_hands, seed)

    last_reported = -1
    for _ in range(total_hands):
        play_hand(state)
        if report_every and state.hands_dealt % report_every == 0:
            if on_report is not None:
                on_report(state.snapshot(total_hands, time.perf_counter() - start))
            last_reported = state.hands_dealt

    final = state.snapshot(total_hands, time.perf_counter() - start)
    if on_report is not None and last_reported != state.hands_dealt:
        on_report(final)
    logger.info("Dealt %d hands in %.2fs", final.hands_dealt, final.elapsed_seconds)
    return final
