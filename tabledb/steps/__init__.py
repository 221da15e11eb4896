from .read_input_step import ReadInputStep
from .ingest_step import IngestStep
from .evaluate_step import EvaluateStep

__all__ = ["ReadInputStep", "IngestStep", "EvaluateStep"]
