import os
from dotenv import load_dotenv

load_dotenv(override=True)

DECK_SIZE = 52  # cards in a deck
HAND_SIZE = 5  # cards in a hand
SUITS = 4
RANKS = 13

# x-of-a-kind tables are indexed by occurrence count 0..HAND_SIZE
X_OF_A_KIND_SIZE = HAND_SIZE + 1

# odds reported for a category that has not occurred yet
ODDS_UNDEFINED = 0


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an int, got {raw!r}") from exc


# set to 0 to only display odds once at the end; realtime display is roughly
# forty times slower for large runs
DISPLAY_REALTIME = os.getenv("POKER_DISPLAY_REALTIME", "1") == "1"
DISPLAY_REALTIME_FREQ = _env_int("POKER_DISPLAY_REALTIME_FREQ", 1_000_000)

DEFAULT_SEED = _env_int("POKER_SEED", None)
DEFAULT_BATCH_SIZE = _env_int("POKER_BATCH_SIZE", 100_000)
DEFAULT_ENGINE = os.getenv("POKER_ENGINE", "loop")
