#!filepath: tests/observability/test_metrics.py

from tabledb.observability.metrics import MetricRecorder


def test_metrics_record():
    m = MetricRecorder(enabled=True)
    m.record("rows.trades", 5)
    m.record("rows.trades", 6)

    assert m.metrics == {"rows.trades": 6}


def test_metrics_disabled():
    m = MetricRecorder(enabled=False)
    m.record("rows.trades", 5)

    assert m.metrics == {}
