from __future__ import annotations
from typing import List
from logging import getLogger

from poker_odds.cards import Card, Deck
from poker_odds.constants import HAND_SIZE
from poker_odds.draw_tracker import DrawTracker

logger = getLogger(__name__)


def deal_hand(deck: Deck, tracker: DrawTracker) -> List[Card]:
    """Draw HAND_SIZE random cards from the (unsorted) deck into a new hand.

    Each slot redraws until it finds a card the tracker has not marked, so a
    hand can never hold the same card twice. At most HAND_SIZE - 1 cards are
    marked while a slot is being filled, which keeps the redraw loop short.
    """
    hand: List[Card] = []
    for _ in range(HAND_SIZE):
        card = deck.cards[deck.random_index()]
        while tracker.is_drawn(card):
            card = deck.cards[deck.random_index()]
        tracker.set_drawn(card, True)
        hand.append(card)
    return hand


def return_hand(hand: List[Card], tracker: DrawTracker) -> None:
    # cards never leave deck storage, only the drawn flags change
    for c in hand:
        tracker.set_drawn(c, False)


def arrange_hand(hand: List[Card]) -> List[Card]:
    # highest rank first; the counters don't care about order, this is for display
    return sorted(hand, key=lambda c: (c.rank, c.suit), reverse=True)
