from .value import FieldType, IntValue, FloatValue, StringValue, Value, parse_value
from .table import Column, Row, Table
from .index import DaySeries, QueryIndex, TradeRecord
from .database import Database

__all__ = [
    "FieldType", "IntValue", "FloatValue", "StringValue", "Value", "parse_value",
    "Column", "Row", "Table",
    "DaySeries", "QueryIndex", "TradeRecord",
    "Database",
]
