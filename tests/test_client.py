import logging

from zippy.client import SpawnTimer, log_run_end, parse_args
from zippy.constants import ASSET_DIR, DB_FILE


def test_spawn_timer_fires_on_interval():
    timer = SpawnTimer(1500)
    assert timer.advance(1000) == 0
    assert timer.advance(499) == 0
    assert timer.advance(1) == 1
    assert timer.advance(3000) == 2
    assert timer.elapsed_ms == 0


def test_spawn_timer_independent_of_frame_rate():
    fast, slow = SpawnTimer(1500), SpawnTimer(1500)
    fast_total = sum(fast.advance(1000 / 120) for _ in range(120 * 5))
    slow_total = sum(slow.advance(1000 / 30) for _ in range(30 * 5))
    assert fast_total == slow_total == 3


def test_parse_args_defaults():
    args = parse_args([])
    assert args.db_file == DB_FILE
    assert args.assets == ASSET_DIR
    assert args.simple_pause is False


def test_parse_args_options():
    args = parse_args(["--db-file", "x.db", "--simple-pause", "--log-level", "debug"])
    assert args.db_file == "x.db"
    assert args.simple_pause
    assert args.log_level == "debug"


def test_run_end_is_logged_with_snapshot(engine, caplog):
    engine.on_flap()
    engine.score = 3
    with caplog.at_level(logging.DEBUG, logger="zippy.client"):
        log_run_end(engine.snapshot())
    assert "Run ended" in caplog.text
    assert "'score': 3" in caplog.text
