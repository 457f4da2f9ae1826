from logging import getLogger

import numpy as np

from poker_odds.cards import Card
from poker_odds.constants import DECK_SIZE

logger = getLogger(__name__)


class DrawTracker:
    """Which cards of the deck are currently sitting in a live hand.

    Indexed by Card.to_index(), i.e. rank_index * SUITS + suit_index.
    """

    def __init__(self) -> None:
        self._drawn = np.zeros(DECK_SIZE, dtype=bool)

    def is_drawn(self, card: Card) -> bool:
        return bool(self._drawn[card.to_index()])

    def set_drawn(self, card: Card, drawn: bool) -> None:
        self._drawn[card.to_index()] = drawn

    def drawn_count(self) -> int:
        return int(np.count_nonzero(self._drawn))

    def reset(self) -> None:
        self._drawn[:] = False
