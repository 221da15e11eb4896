#!filepath: tabledb/__init__.py

from .utils.logger import Logging, logs, init_logging
from .config.app_config import AppConfig
from .core import (
    Column,
    Database,
    FieldType,
    FloatValue,
    IntValue,
    QueryIndex,
    Row,
    StringValue,
    Table,
)
from .engines import AssetClassCountQuery, IngestEngine

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "AppConfig",
    "Column", "Database", "FieldType", "FloatValue", "IntValue",
    "QueryIndex", "Row", "StringValue", "Table",
    "AssetClassCountQuery", "IngestEngine",
]
