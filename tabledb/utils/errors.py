# tabledb/utils/errors.py
from __future__ import annotations

from typing import Optional


class TableDBError(RuntimeError):
    """
    Base class for errors reported at the process boundary.
    """


class MalformedInputError(TableDBError):
    """
    Raised when the table stream violates the input grammar.
    Ingestion aborts; nothing built so far is published.
    """

    def __init__(self, message: str, line_no: Optional[int] = None):
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class UserInputError(TableDBError):
    """
    Raised for invalid user-provided input (paths, options, config values).
    Should NOT print traceback.
    """


class SchemaViolationError(AssertionError):
    """
    Contract fault: a caller ignored the table schema
    (wrong-typed accessor, bad column index, malformed row append).
    """
