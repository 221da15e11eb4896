#!filepath: tabledb/observability/timeline_reporter.py
from typing import Dict

from tabledb.observability.timer import TimingStats
from tabledb.utils.logger import logs


class TimelineReporter:
    """
    Run timeline: name → best / mean seconds over its runs.
    """

    def __init__(self, timeline: Dict[str, TimingStats], label: str):
        self.timeline = timeline
        self.label = label

    def print(self):
        logs.info(f"[Timeline] ===== Query timeline for {self.label} =====")

        for name, stats in self.timeline.items():
            mean = stats.total / stats.runs if stats.runs else 0.0
            logs.info(
                f"[Timeline] {str(name):<24} best={stats.best:>8.6f}s "
                f"mean={mean:>8.6f}s runs={stats.runs}"
            )

        logs.info("[Timeline] ===========================================")
