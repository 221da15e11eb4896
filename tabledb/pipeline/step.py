#!filepath: tabledb/pipeline/step.py
from __future__ import annotations

from tabledb.pipeline.context import QueryContext
from tabledb.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class PipelineStep:
    """
    Pipeline Step base class

    Responsibilities:
      1. orchestration of one stage (call engines, fill the context)
      2. step-level time boundary (parent scope)

    Rules:
      - the step itself is not recorded in the timeline
      - leaf timers inside the step are
      - a step behaves the same with or without instrumentation
    """

    def __init__(self, inst: Instrumentation | None = None):
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def step_name(self) -> str:
        """Class name by default."""
        return self.__class__.__name__

    def timed(self):
        """
        Step-level scope: record=False, never enters the timeline.
        """
        return self.inst.timer(self.step_name, record=False)

    def run(self, ctx: QueryContext) -> QueryContext:
        raise NotImplementedError
