#!filepath: tabledb/steps/ingest_step.py
from __future__ import annotations

from tabledb.engines.ingest_engine import IngestEngine
from tabledb.pipeline.context import QueryContext
from tabledb.pipeline.step import PipelineStep


class IngestStep(PipelineStep):
    """
    ctx.lines → ctx.database (tables + query index)
    """

    def __init__(self, engine: IngestEngine | None = None, inst=None):
        super().__init__(inst)
        self.engine = engine if engine is not None else IngestEngine()

    def run(self, ctx: QueryContext) -> QueryContext:
        if ctx.lines is None:
            raise RuntimeError(f"[{self.step_name}] no input lines; run ReadInputStep first")

        with self.inst.timer("Ingest"):
            ctx.database = self.engine.execute(ctx.lines)

        for table in ctx.database.tables:
            columnar = table.to_arrow()
            self.inst.metrics.record(f"rows.{table.name}", columnar.num_rows)
            self.inst.metrics.record(f"bytes.{table.name}", columnar.nbytes)
        return ctx
