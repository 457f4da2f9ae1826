import argparse

from poker_odds.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_ENGINE,
    DEFAULT_SEED,
    DISPLAY_REALTIME,
    DISPLAY_REALTIME_FREQ,
)

ENGINES = ["loop", "vectorized"]


def coerce_int_args(args: argparse.Namespace, names: list[str]) -> None:
    for name in names:
        value = getattr(args, name, None)
        if value is None:
            continue
        if isinstance(value, int):
            continue
        try:
            setattr(args, name, int(value))
        except Exception as exc:
            raise ValueError(f"{name} must be an int, got {value!r}") from exc


def parse_num_hands(raw: str) -> int:
    """Number of hands to deal from user text; rejects anything but a whole number >= 0."""
    text = raw.strip()
    try:
        value = int(text)
    except ValueError as exc:
        raise ValueError(f"Number of hands must be a whole number, got {raw!r}") from exc
    if value < 0:
        raise ValueError(f"Number of hands can't be negative, got {value}")
    return value


def _num_hands_arg(raw: str) -> int:
    try:
        return parse_num_hands(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _int_at_least(minimum: int):
    def parse(raw: str) -> int:
        try:
            value = int(raw)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"expected a whole number, got {raw!r}") from exc
        if value < minimum:
            raise argparse.ArgumentTypeError(f"must be >= {minimum}, got {value}")
        return value
    return parse


def build_simulate_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Estimate five card poker hand odds by Monte Carlo simulation.")
    ap.add_argument(
        "--hands",
        type=_num_hands_arg,
        default=None,
        help="Number of hands to deal. Omit to be prompted.",
    )
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Random seed. Omit to use a random seed.")
    ap.add_argument("--engine", type=str, default=DEFAULT_ENGINE, choices=ENGINES)
    ap.add_argument(
        "--report_every",
        type=_int_at_least(0),
        default=DISPLAY_REALTIME_FREQ,
        help="Refresh the odds display every this many hands (0 for only at the end).",
    )
    ap.add_argument(
        "--batch_size",
        type=_int_at_least(1),
        default=DEFAULT_BATCH_SIZE,
        help="Hands per numpy batch for the vectorized engine.",
    )
    ap.add_argument("--realtime", action=argparse.BooleanOptionalAction, default=DISPLAY_REALTIME)
    ap.add_argument("--report_out", type=str, default=None, help="Write the final odds as JSON here.")
    ap.add_argument("--plot_prefix", type=str, default=None, help="Save an odds convergence plot as <prefix>_odds.png.")
    return ap
