"""Project-wide logging setup.

Python auto-imports sitecustomize when it is on sys.path. This ensures
all scripts/tests log to text/log_file.log unless POKER_LOG_FILE is set.
"""
from poker_odds.logging_setup import configure_logging

configure_logging()
