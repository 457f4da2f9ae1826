import os
import sys
import json
from typing import List, TextIO
from logging import getLogger

import matplotlib.pyplot as plt

from poker_odds.classifier import HAND_CATEGORIES
from poker_odds.simulation import OddsSnapshot

logger = getLogger(__name__)

COLUMN_TITLES = {
    "one_pair": "----1P----",
    "two_pair": "----2P----",
    "three_of_a_kind": "----3K----",
    "four_of_a_kind": "----4K----",
    "straight": "-Straight-",
    "flush": "--Flush---",
    "full_house": "-F.-House-",
}


def format_header() -> str:
    columns = "  ".join(f"{COLUMN_TITLES[name]:<8}" for name in HAND_CATEGORIES)
    return f"{columns} \t{'  % Dealt ':<8}  {'Time elapsed':<8} "


def format_odds(snapshot: OddsSnapshot) -> str:
    odds = snapshot.odds()
    return "     ".join(f"{odds[name]:5d}:1" for name in HAND_CATEGORIES) + " \t"


def format_status(snapshot: OddsSnapshot) -> str:
    return f"  {int(snapshot.percent_complete):4d}%     [ {int(snapshot.elapsed_seconds)} seconds ]"


class ConsoleReporter:
    """Redraws one odds/status line in place for every snapshot it is handed.

    With realtime off only the final snapshot (hands_dealt == total_hands)
    is drawn.
    """

    def __init__(self, stream: TextIO | None = None, realtime: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.realtime = realtime
        self.history: List[OddsSnapshot] = []
        self._header_written = False

    def write_header(self) -> None:
        self.stream.write("\n" + format_header() + "\n\n")
        self._header_written = True

    def __call__(self, snapshot: OddsSnapshot) -> None:
        self.history.append(snapshot)
        if not self.realtime and snapshot.hands_dealt < snapshot.total_hands:
            return
        if not self._header_written:
            self.write_header()
        self.stream.write("\r" + format_odds(snapshot) + format_status(snapshot))
        if snapshot.hands_dealt >= snapshot.total_hands:
            # end the line so later output doesn't land on it
            self.stream.write("\n")
        # flush so the line refreshes as the simulation runs
        self.stream.flush()


def save_report(snapshot: OddsSnapshot, out_path: str) -> None:
    parent = os.path.dirname(out_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(out_path, "w") as f:
        json.dump(snapshot.to_dict(), f, indent=2)
    logger.info(f"Saved odds report to {out_path}")


def plot_odds_convergence(history: List[OddsSnapshot], out_path_prefix: str) -> str:
    # history: snapshots in the order they were reported
    dealt = [h.hands_dealt for h in history]
    for name in HAND_CATEGORIES:
        odds = [h.odds()[name] for h in history]
        plt.plot(dealt, odds, label=name)
    plt.xlabel('Hands dealt')
    plt.ylabel('Odds against (N:1)')
    plt.yscale('symlog')
    plt.title('Poker Hand Odds Over Time')
    plt.legend()
    plt.tight_layout()
    out_path = out_path_prefix + "_odds.png"
    plt.savefig(out_path)
    logger.info(f"Saved odds plot to {out_path}")
    plt.close()
    return out_path
