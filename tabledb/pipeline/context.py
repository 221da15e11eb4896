#!filepath: tabledb/pipeline/context.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from tabledb.core.database import Database
from tabledb.core.table import Table


@dataclass
class QueryContext:
    """
    QueryContext = the single carrier between steps

    Principles:
    - the pipeline builds it
    - each step fills exactly one slot
    - no business logic here
    """

    # -------------------------
    # input
    # -------------------------
    input_path: Path

    # -------------------------
    # stage outputs
    # -------------------------
    lines: Optional[List[List[str]]] = None
    database: Optional[Database] = None
    result: Optional[Table] = None

    # -------------------------
    # timing（best query run, seconds）
    # -------------------------
    query_seconds: Optional[float] = None
