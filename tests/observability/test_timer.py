#!filepath: tests/observability/test_timer.py

import time

from tabledb.observability.timer import Timer, TimingStats


def test_timer_basic():
    t = Timer(enabled=True)
    t.start("task")
    time.sleep(0.01)
    elapsed = t.end("task")

    assert elapsed > 0
    assert isinstance(elapsed, float)


def test_timer_disabled():
    t = Timer(enabled=False)
    t.start("task")
    elapsed = t.end("task")

    assert elapsed == 0.0


def test_timer_end_without_start():
    assert Timer().end("never") == 0.0


def test_timing_stats():
    stats = TimingStats()
    for v in (0.3, 0.1, 0.2):
        stats.add(v)

    assert stats.runs == 3
    assert stats.best == 0.1
    assert abs(stats.total - 0.6) < 1e-9
