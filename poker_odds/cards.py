from dataclasses import dataclass
from typing import Iterable, List
import random
from logging import getLogger

from poker_odds.constants import DECK_SIZE, RANKS, SUITS

logger = getLogger(__name__)

RANK_VALUES = list(range(1, RANKS + 1))  # 1=Ace, 11=Jack, 12=Queen, 13=King
SUIT_VALUES = list(range(1, SUITS + 1))

RANK_NAMES = ["ace", "deuce", "three", "four", "five", "six", "seven",
              "eight", "nine", "ten", "jack", "queen", "king"]
RANK_LABELS = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]
SUIT_SYMBOLS = ["C", "H", "S", "D"]
SUIT_NAMES = ["clubs", "hearts", "spades", "diamonds"]


@dataclass(frozen=True)
class Card:
    rank: int
    suit: int

    def __post_init__(self) -> None:
        if not 1 <= self.rank <= RANKS:
            raise ValueError(f"rank must be in 1..{RANKS}, got {self.rank!r}")
        if not 1 <= self.suit <= SUITS:
            raise ValueError(f"suit must be in 1..{SUITS}, got {self.suit!r}")

    def __str__(self) -> str:
        return f"{RANK_LABELS[self.rank - 1]}{SUIT_SYMBOLS[self.suit - 1]}"

    @property
    def name(self) -> str:
        return f"{RANK_NAMES[self.rank - 1]} of {SUIT_NAMES[self.suit - 1]}"

    def to_index(self) -> int:
        r = self.rank - 1
        s = self.suit - 1
        return r * SUITS + s


def build_deck() -> List[Card]:
    """The 52 canonical cards, rank-major: ace of each suit first, kings last.

    The order is fixed; cards are picked by random index so the deck never
    needs shuffling to get an unbiased draw.
    """
    return [Card(r, s) for r in RANK_VALUES for s in SUIT_VALUES]


class Deck:
    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)
        self.cards: List[Card] = build_deck()

    def __len__(self) -> int:
        return len(self.cards)

    def random_index(self) -> int:
        return self._rng.randrange(DECK_SIZE)

    def shuffle(self) -> None:
        self._rng.shuffle(self.cards)

    def reset(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self.cards = build_deck()


def parse_card(text: str) -> Card:
    """Parse '10H', 'KC', 'a s' style text into a Card."""
    t = text.strip().upper().replace(" ", "")
    if len(t) < 2:
        raise ValueError(f"Can't parse card {text!r}")
    label, symbol = t[:-1], t[-1]
    if label == "T":
        label = "10"
    if label not in RANK_LABELS or symbol not in SUIT_SYMBOLS:
        raise ValueError(f"Can't parse card {text!r}")
    return Card(RANK_LABELS.index(label) + 1, SUIT_SYMBOLS.index(symbol) + 1)


def parse_hand(text: str) -> List[Card]:
    return [parse_card(part) for part in text.replace(",", " ").split()]


def format_card(card: Card) -> str:
    return str(card)


def format_hand(hand: Iterable[Card]) -> str:
    return " ".join(format_card(c) for c in hand)
