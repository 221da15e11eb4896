#!filepath: tabledb/workflows/query_workflow.py
from __future__ import annotations

from tabledb.config.app_config import AppConfig
from tabledb.engines.ingest_engine import IngestEngine
from tabledb.observability.instrumentation import Instrumentation
from tabledb.pipeline.pipeline import QueryPipeline
from tabledb.steps.evaluate_step import EvaluateStep
from tabledb.steps.ingest_step import IngestStep
from tabledb.steps.read_input_step import ReadInputStep


def build_query_pipeline(
        cfg: AppConfig | None = None,
        inst: Instrumentation | None = None,
) -> QueryPipeline:
    """
    Query pipeline

    Semantic order:
        ReadInput   (file → tokenized lines)
        → Ingest    (lines → tables + index)
        → Evaluate  (index → asset-class_counts, repeated for timing)
    """
    cfg = cfg if cfg is not None else AppConfig.load()
    inst = inst if inst is not None else Instrumentation()

    steps = [
        ReadInputStep(inst=inst),
        IngestStep(engine=IngestEngine(), inst=inst),
        EvaluateStep(config=cfg.query, inst=inst),
    ]

    return QueryPipeline(steps=steps, inst=inst)
