from .ingest_engine import IngestEngine
from .query_engine import AssetClassCountQuery

__all__ = ["IngestEngine", "AssetClassCountQuery"]
