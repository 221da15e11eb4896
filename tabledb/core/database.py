#!filepath: tabledb/core/database.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from tabledb.core.index import QueryIndex
from tabledb.core.table import Table


@dataclass
class Database:
    """
    Output of one ingestion: every declared table plus the query indexes.
    """

    tables: List[Table] = field(default_factory=list)
    index: QueryIndex = field(default_factory=QueryIndex)

    def names(self) -> List[str]:
        return [t.name for t in self.tables]

    def get(self, name: str) -> Table:
        """Most recently declared table with this name."""
        for table in reversed(self.tables):
            if table.name == name:
                return table
        raise KeyError(f"no table named {name!r}")

    @property
    def num_rows(self) -> int:
        return sum(t.num_rows for t in self.tables)
