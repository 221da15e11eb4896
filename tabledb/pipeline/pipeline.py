#!filepath: tabledb/pipeline/pipeline.py
from __future__ import annotations

from pathlib import Path

from tabledb.pipeline.context import QueryContext
from tabledb.pipeline.step import PipelineStep
from tabledb.observability.instrumentation import Instrumentation, NoOpInstrumentation
from tabledb.utils.logger import logs


class QueryPipeline:
    """
    QueryPipeline = scheduler

    - runs steps in order over one QueryContext
    - no step-level timing of its own
    - any exception aborts the run; no partial context is returned
    """

    def __init__(
            self,
            steps: list[PipelineStep],
            inst: Instrumentation | NoOpInstrumentation | None = None,
    ):
        self.steps = steps
        self.inst = inst if inst is not None else NoOpInstrumentation()

    def run(self, input_path: str | Path) -> QueryContext:
        logs.info(f"[Pipeline] ====== START {input_path} ======")

        ctx = QueryContext(input_path=Path(input_path))

        for step in self.steps:
            ctx = step.run(ctx)

        self.inst.generate_timeline_report(str(input_path))
        logs.info(f"[Pipeline] ====== DONE {input_path} ======")
        return ctx
