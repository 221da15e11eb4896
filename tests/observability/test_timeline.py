#!filepath: tests/observability/test_timeline.py

from loguru import logger

from tabledb.observability.timeline_reporter import TimelineReporter
from tabledb.observability.timer import TimingStats


def test_timeline_log_output():
    ingest = TimingStats()
    ingest.add(1.23)
    query = TimingStats()
    query.add(0.5)
    query.add(0.25)

    reporter = TimelineReporter({"Ingest": ingest, "Query": query}, "tables.csv")

    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)), level="INFO")

    reporter.print()

    logger.remove(sink_id)

    output = "\n".join(captured)

    assert "Query timeline for tables.csv" in output
    assert "Ingest" in output
    assert "1.23" in output
    assert "best=0.250000s" in output
    assert "runs=2" in output
