#!filepath: tabledb/observability/timer.py
import time
from dataclasses import dataclass
from typing import Dict


@dataclass
class TimingStats:
    runs: int = 0
    best: float = float("inf")
    total: float = 0.0

    def add(self, elapsed: float) -> None:
        self.runs += 1
        self.total += elapsed
        if elapsed < self.best:
            self.best = elapsed


class Timer:
    """
    Wall-clock timer keyed by name.
    - start(name)
    - end(name) → elapsed seconds (0.0 when disabled or never started)
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._start: Dict[str, float] = {}

    def start(self, name: str):
        if not self.enabled:
            return
        self._start[name] = time.perf_counter()

    def end(self, name: str) -> float:
        if not self.enabled or name not in self._start:
            return 0.0
        return time.perf_counter() - self._start.pop(name)
