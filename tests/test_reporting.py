import io
import json
import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

from poker_odds.classifier import HAND_CATEGORIES
from poker_odds.reporting import (
    ConsoleReporter,
    format_header,
    format_odds,
    format_status,
    plot_odds_convergence,
    save_report,
)
from poker_odds.simulation import OddsSnapshot, simulate_poker_odds


def make_snapshot(dealt: int, total: int, elapsed: float = 0.0, **counts) -> OddsSnapshot:
    c = {n: 0 for n in HAND_CATEGORIES}
    c.update(counts)
    return OddsSnapshot(dealt, total, c, elapsed)


def test_header_columns():
    header = format_header()
    assert header.startswith("----1P----  ----2P----  ----3K----  ----4K----  -Straight-  --Flush---  -F.-House-")
    assert "% Dealt" in header
    assert header.rstrip().endswith("Time elapsed")


def test_format_odds_with_sentinel():
    snap = make_snapshot(1000, 1000, one_pair=423, two_pair=47)
    row = format_odds(snap)
    assert row.startswith("    2:1        21:1         0:1")
    assert row.count(":1") == 7


def test_format_status():
    assert format_status(make_snapshot(250, 1000, 12.7)) == "    25%     [ 12 seconds ]"
    assert format_status(make_snapshot(0, 0)) == "   100%     [ 0 seconds ]"


def test_console_reporter_realtime_writes_every_snapshot():
    out = io.StringIO()
    reporter = ConsoleReporter(stream=out, realtime=True)
    reporter(make_snapshot(10, 20))
    reporter(make_snapshot(20, 20))
    text = out.getvalue()
    assert text.count("\r") == 2
    assert text.count("----1P----") == 1
    assert len(reporter.history) == 2


def test_console_reporter_without_realtime_only_writes_final():
    out = io.StringIO()
    reporter = ConsoleReporter(stream=out, realtime=False)
    reporter(make_snapshot(10, 20))
    assert out.getvalue() == ""
    reporter(make_snapshot(20, 20))
    assert out.getvalue().count("\r") == 1
    # still kept for plotting
    assert len(reporter.history) == 2


def test_console_reporter_drives_simulation():
    out = io.StringIO()
    reporter = ConsoleReporter(stream=out)
    final = simulate_poker_odds(300, seed=1, report_every=100, on_report=reporter)
    assert [s.hands_dealt for s in reporter.history] == [100, 200, 300]
    last = reporter.history[-1]
    assert last.counts == final.counts
    assert out.getvalue().endswith(format_odds(last) + format_status(last) + "\n")


def test_save_report(tmp_path: Path):
    snap = make_snapshot(100, 100, 0.5, one_pair=40, flush=1)
    out_path = tmp_path / "reports" / "odds.json"
    save_report(snap, str(out_path))
    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert data["hands_dealt"] == 100
    assert data["counts"]["one_pair"] == 40
    assert data["odds"]["one_pair"] == 2
    assert data["odds"]["flush"] == 100
    assert data["odds"]["straight"] == 0


def test_plot_odds_convergence(tmp_path: Path):
    history = [make_snapshot(100 * i, 300, one_pair=42 * i, two_pair=5 * i) for i in range(1, 4)]
    out_path = plot_odds_convergence(history, str(tmp_path / "run"))
    assert out_path.endswith("run_odds.png")
    assert Path(out_path).exists()


def test_final_line_ends_before_the_run_is_logged():
    out = io.StringIO()
    handler = logging.StreamHandler(out)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    sim_logger = logging.getLogger("poker_odds.simulation")
    old_level = sim_logger.level
    sim_logger.addHandler(handler)
    sim_logger.setLevel(logging.INFO)
    try:
        simulate_poker_odds(150, seed=2, report_every=100, on_report=ConsoleReporter(stream=out))
    finally:
        sim_logger.removeHandler(handler)
        sim_logger.setLevel(old_level)
    lines = out.getvalue().split("\n")
    assert any(line.startswith("INFO poker_odds.simulation: Dealt 150 hands") for line in lines)
    assert all("seconds ]INFO" not in line for line in lines)


def test_intermediate_snapshots_stay_on_one_line():
    out = io.StringIO()
    reporter = ConsoleReporter(stream=out)
    reporter(make_snapshot(10, 20))
    assert not out.getvalue().endswith("\n")
    reporter(make_snapshot(20, 20))
    assert out.getvalue().endswith("\n")
