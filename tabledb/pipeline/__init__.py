from .context import QueryContext
from .pipeline import QueryPipeline
from .step import PipelineStep

__all__ = ["QueryContext", "QueryPipeline", "PipelineStep"]
