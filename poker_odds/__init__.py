from logging import getLogger
logger = getLogger(__name__)

__all__ = [
    "cards",
    "constants",
    "draw_tracker",
    "dealer",
    "counting",
    "classifier",
    "simulation",
    "vectorized",
    "reporting",
    "logging_setup",
]
