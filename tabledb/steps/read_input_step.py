#!filepath: tabledb/steps/read_input_step.py
from __future__ import annotations

from tabledb.io.table_file import read_table_file
from tabledb.pipeline.context import QueryContext
from tabledb.pipeline.step import PipelineStep


class ReadInputStep(PipelineStep):
    """
    input file → ctx.lines (tokenized)
    """

    def run(self, ctx: QueryContext) -> QueryContext:
        with self.inst.timer("ReadInput"):
            ctx.lines = read_table_file(ctx.input_path)

        self.inst.metrics.record("input.lines", len(ctx.lines))
        return ctx
