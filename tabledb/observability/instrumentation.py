#!filepath: tabledb/observability/instrumentation.py
from __future__ import annotations

from dataclasses import dataclass
from contextlib import contextmanager
from collections import OrderedDict
from typing import Dict, Optional

from tabledb.observability.timer import Timer, TimingStats
from tabledb.observability.metrics import MetricRecorder
from tabledb.observability.timeline_reporter import TimelineReporter


@dataclass
class Instrumentation:
    """
    Instrumentation（timers + metrics）

    Rules:
    1. record=True timers land in the timeline
    2. record=False timers only bound a scope, no side effect
    3. a name timed repeatedly keeps its best run (benchmark semantics)
    4. nothing here logs on the hot path
    """

    enabled: bool = True

    def __post_init__(self):
        self._timer = Timer(enabled=self.enabled)
        self.metrics = MetricRecorder(enabled=self.enabled)

        # timeline: OrderedDict[name, TimingStats]
        self.timeline: Dict[str, TimingStats] = OrderedDict()

    def timer(self, name: str, *, record: bool = True):
        """
        Context-manager timer.

        Parameters
        ----------
        name : str
            timeline key
        record : bool
            - True  : add the run to the timeline
            - False : scope only
        """
        inst = self

        @contextmanager
        def _ctx():
            if not inst.enabled:
                yield
                return

            inst._timer.start(name)
            try:
                yield
            finally:
                elapsed = inst._timer.end(name)
                if record:
                    inst.timeline.setdefault(name, TimingStats()).add(elapsed)

        return _ctx()

    def best(self, name: str) -> Optional[float]:
        stats = self.timeline.get(name)
        return stats.best if stats is not None and stats.runs else None

    def generate_timeline_report(self, label: str):
        TimelineReporter(self.timeline, label).print()


class NoOpInstrumentation:
    """Used when observability is disabled."""

    def __init__(self):
        self.timeline: Dict[str, TimingStats] = {}
        self.metrics = MetricRecorder(enabled=False)

    def timer(self, name: str, *, record: bool = True):
        return _NoOpTimer()

    def best(self, name: str) -> Optional[float]:
        return None

    def generate_timeline_report(self, label: str):
        pass


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
