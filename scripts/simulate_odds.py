"""Estimate the odds of five card poker hands by dealing random hands.

Usage:
  python scripts/simulate_odds.py --hands 10000000
  python scripts/simulate_odds.py --hands 1000000 --engine vectorized --seed 7 --report_out reports/odds.json
  python scripts/simulate_odds.py            # prompts for the number of hands
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional

sys.path.insert(0, ".")

from poker_odds.logging_setup import configure_logging
from poker_odds.reporting import ConsoleReporter, plot_odds_convergence, save_report
from poker_odds.simulation import OddsSnapshot, simulate_poker_odds
from poker_odds.vectorized import simulate_poker_odds_vectorized
from utils import build_simulate_parser, coerce_int_args, parse_num_hands

import logging

logger = logging.getLogger(__name__)

PROMPT = "How many hands would you like to deal? "


def input_num_hands(prompt_fn: Callable[[str], str] = input) -> int:
    return parse_num_hands(prompt_fn(PROMPT))


def simulate_odds(args: argparse.Namespace, reporter: Optional[ConsoleReporter] = None) -> OddsSnapshot:
    coerce_int_args(args, ["hands", "seed", "report_every", "batch_size"])
    if args.hands is None or args.hands < 0:
        raise ValueError(f"hands must be a whole number >= 0, got {args.hands!r}")
    if reporter is None:
        reporter = ConsoleReporter(realtime=args.realtime)
    reporter.write_header()

    report_every = args.report_every or None
    if args.engine == "vectorized":
        final = simulate_poker_odds_vectorized(
            args.hands,
            seed=args.seed,
            report_every=report_every,
            on_report=reporter,
            batch_size=args.batch_size,
        )
    elif args.engine == "loop":
        final = simulate_poker_odds(args.hands, seed=args.seed, report_every=report_every, on_report=reporter)
    else:
        raise ValueError(f"Unknown engine: {args.engine}")

    if args.report_out:
        save_report(final, args.report_out)
    if args.plot_prefix:
        plot_odds_convergence(reporter.history, args.plot_prefix)
    return final


def main(argv: Optional[List[str]] = None, prompt_fn: Callable[[str], str] = input) -> int:
    configure_logging()
    args = build_simulate_parser().parse_args(argv)
    if args.hands is None:
        try:
            args.hands = input_num_hands(prompt_fn)
        except ValueError as exc:
            logger.error("%s", exc)
            return 2
    simulate_odds(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())

# python scripts/simulate_odds.py --hands 1000000 --report_every 100000
# python scripts/simulate_odds.py --hands 50000000 --engine vectorized --no-realtime
