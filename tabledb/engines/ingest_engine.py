#!filepath: tabledb/engines/ingest_engine.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from tabledb.core.database import Database
from tabledb.core.index import INDEX_SHAPES, Indexer, QueryIndex
from tabledb.core.table import TABLE_MARKER, Column, Row, Table
from tabledb.core.value import FieldType, parse_value
from tabledb.engines.base import BaseEngine
from tabledb.utils.errors import MalformedInputError
from tabledb.utils.logger import logs


@dataclass
class _PendingHeader:
    name: str
    line_no: int
    kinds: Optional[Tuple[FieldType, ...]] = None


class IngestEngine(BaseEngine[Sequence[str], Optional[Row]]):
    """
    IngestEngine（single pass · table stream → Database）

    Input:
      - tokenized lines (each line = list of text fields)

    Grammar:
      <TABLE>,<name>          header
      <type>,<type>,...       mandatory, INT | FLOAT | STRING
      <col>,<col>,...         mandatory
      <field>,<field>,...     data lines for the latest header

    Output:
      - Database(tables, index)

    Rules:
      - any grammar violation raises MalformedInputError (with line number)
      - nothing is published on failure
      - the indexer for a table is picked once, at header time
      - unknown table names are stored but not indexed
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._tables: List[Table] = []
        self._index = QueryIndex()
        self._current: Optional[Table] = None
        self._indexer: Optional[Indexer] = None
        self._pending: Optional[_PendingHeader] = None
        self._line_no = 0

    # --------------------------------------------------
    @logs.catch(msg="ingestion failed")
    def execute(self, lines: Iterable[Sequence[str]]) -> Database:
        self._reset()
        try:
            for _ in self.process_stream(lines):
                pass

            if self._pending is not None:
                raise MalformedInputError(
                    f"table header {self._pending.name!r} is not followed by "
                    f"a type line and a column-name line",
                    self._pending.line_no,
                )

            db = Database(tables=self._tables, index=self._index)
        finally:
            # partial state never outlives the call
            self._reset()

        logs.info(
            f"[IngestEngine] {len(db.tables)} tables, {db.num_rows} rows, "
            f"index={db.index.summary()}"
        )
        return db

    # --------------------------------------------------
    def process(self, fields: Sequence[str]) -> Optional[Row]:
        self._line_no += 1

        if self._pending is not None:
            self._consume_header_line(fields)
            return None

        if fields and fields[0] == TABLE_MARKER:
            if len(fields) != 2 or not fields[1]:
                raise MalformedInputError(
                    f"table header must be '{TABLE_MARKER},<name>', got {list(fields)!r}",
                    self._line_no,
                )
            self._pending = _PendingHeader(name=fields[1], line_no=self._line_no)
            return None

        return self._consume_data_line(fields)

    # --------------------------------------------------
    def _consume_header_line(self, fields: Sequence[str]) -> None:
        pending = self._pending

        # 1) type line
        if pending.kinds is None:
            try:
                pending.kinds = tuple(FieldType.parse(f) for f in fields)
            except MalformedInputError as e:
                raise MalformedInputError(str(e), self._line_no) from None
            return

        # 2) column-name line
        if len(fields) != len(pending.kinds):
            raise MalformedInputError(
                f"table {pending.name!r} declares {len(pending.kinds)} types "
                f"but {len(fields)} column names",
                self._line_no,
            )

        shape = INDEX_SHAPES.get(pending.name)
        if shape is not None and pending.kinds != shape.kinds:
            raise MalformedInputError(
                f"table {pending.name!r} must have column types "
                f"{','.join(k.value for k in shape.kinds)}, got "
                f"{','.join(k.value for k in pending.kinds)}",
                pending.line_no,
            )

        table = Table(
            pending.name,
            [Column(name, kind) for name, kind in zip(fields, pending.kinds)],
        )
        self._tables.append(table)
        self._current = table
        self._indexer = shape.indexer if shape is not None else None
        self._pending = None

        if shape is None:
            logs.debug(f"[IngestEngine] table {table.name!r} stored without index")

    # --------------------------------------------------
    def _consume_data_line(self, fields: Sequence[str]) -> Row:
        table = self._current
        if table is None:
            raise MalformedInputError("data line before any table header", self._line_no)

        if len(fields) != table.column_count():
            raise MalformedInputError(
                f"table {table.name!r} has {table.column_count()} columns, "
                f"line has {len(fields)} fields",
                self._line_no,
            )

        try:
            row = Row(parse_value(col.kind, text) for col, text in zip(table.columns, fields))
        except MalformedInputError as e:
            raise MalformedInputError(f"table {table.name!r}: {e}", self._line_no) from None

        table.append(row)
        if self._indexer is not None:
            self._indexer(self._index, row)
        return row
