#!filepath: tabledb/steps/evaluate_step.py
from __future__ import annotations

from tabledb.config.query_config import QueryConfig
from tabledb.engines.query_engine import AssetClassCountQuery
from tabledb.observability.timer import Timer
from tabledb.pipeline.context import QueryContext
from tabledb.pipeline.step import PipelineStep
from tabledb.utils.logger import logs


class EvaluateStep(PipelineStep):
    """
    EvaluateStep（ctx.database → ctx.result）

    The query is run ``config.repeat`` times to smooth out cold-start
    noise; ctx.query_seconds is the best run.
    """

    def __init__(self, config: QueryConfig | None = None, inst=None):
        super().__init__(inst)
        self.config = config if config is not None else QueryConfig()

    def run(self, ctx: QueryContext) -> QueryContext:
        if ctx.database is None:
            raise RuntimeError(f"[{self.step_name}] no database; run IngestStep first")

        query = AssetClassCountQuery(ctx.database.index, self.config)
        timer = Timer()
        best = float("inf")

        with self.timed():
            for _ in range(self.config.repeat):
                with self.inst.timer("Query"):
                    timer.start("query")
                    ctx.result = query.evaluate()
                    best = min(best, timer.end("query"))

        ctx.query_seconds = best
        logs.info(
            f"[{self.step_name}] {self.config.repeat} runs, best={best:.6f}s, "
            f"rows={ctx.result.num_rows}"
        )
        return ctx
