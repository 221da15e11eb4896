# tests/core/test_day_series.py
from __future__ import annotations

from tabledb.core.index import DaySeries


def test_put_keeps_days_sorted():
    s = DaySeries()
    for day, v in [(5, 5.0), (1, 1.0), (3, 3.0), (9, 9.0)]:
        s.put(day, v)

    assert [d for d, _ in s.items()] == [1, 3, 5, 9]
    assert len(s) == 4


def test_put_duplicate_day_keeps_later_value():
    s = DaySeries()
    s.put(1, 1.0)
    s.put(2, 2.0)
    s.put(1, 10.0)
    s.put(2, 20.0)

    assert list(s.items()) == [(1, 10.0), (2, 20.0)]
    assert s.get(1) == 10.0
    assert s.get(7) is None


def test_window_is_inclusive():
    s = DaySeries()
    for day in (12, 13, 100, 268, 269):
        s.put(day, float(day))

    assert [d for d, _ in s.window(13, 268)] == [13, 100, 268]


def test_window_outside_range_is_empty():
    s = DaySeries()
    s.put(12, 1000.0)
    s.put(269, 1000.0)

    assert list(s.window(13, 268)) == []
    assert list(DaySeries().window(13, 268)) == []
