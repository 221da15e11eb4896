from .query_workflow import build_query_pipeline

__all__ = ["build_query_pipeline"]
