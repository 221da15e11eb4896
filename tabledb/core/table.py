#!filepath: tabledb/core/table.py
from __future__ import annotations

import io
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterable, Iterator, List, TextIO, Tuple

import pyarrow as pa

from tabledb.core.value import FieldType, FloatValue, IntValue, StringValue, Value
from tabledb.utils.errors import SchemaViolationError

TABLE_MARKER = "<TABLE>"

ARROW_TYPES = {
    FieldType.INT: pa.int64(),
    FieldType.FLOAT: pa.float64(),
    FieldType.STRING: pa.string(),
}


@dataclass(frozen=True, slots=True)
class Column:
    name: str
    kind: FieldType


class Row(Sequence):
    """
    Immutable, fixed-length sequence of Values (one per column).
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Value]):
        self._values: Tuple[Value, ...] = tuple(values)

    def __getitem__(self, i):
        return self._values[i]

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other) -> bool:
        if isinstance(other, Row):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Row({list(self._values)!r})"

    # --------------------------------------------------
    # typed accessors（wrong tag = contract fault）
    # --------------------------------------------------
    def _at(self, i: int, expected: type) -> Value:
        if not 0 <= i < len(self._values):
            raise SchemaViolationError(
                f"field index {i} out of range for row of {len(self._values)} fields"
            )
        v = self._values[i]
        if type(v) is not expected:
            raise SchemaViolationError(
                f"field {i} is {v.kind.value}, not {expected.kind.value}"
            )
        return v

    def int_at(self, i: int) -> int:
        return self._at(i, IntValue).val

    def float_at(self, i: int) -> float:
        return self._at(i, FloatValue).val

    def string_at(self, i: int) -> str:
        return self._at(i, StringValue).val

    def render(self) -> str:
        return ",".join(v.render() for v in self._values)


class RowsView(Sequence):
    """
    Read-only, restartable view over a table's row storage (no copy).
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: List[Row]):
        self._rows = rows

    def __getitem__(self, i):
        return self._rows[i]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)


class Table:
    """
    Append-only typed table.

    Invariants:
      - columns is non-empty and fixed at creation
      - row[i].kind == columns[i].kind for every row and position
      - rows keep insertion order
    """

    def __init__(self, name: str, columns: Sequence[Column]):
        if not columns:
            raise SchemaViolationError(f"table {name!r} needs at least one column")
        self._name = name
        self._columns: Tuple[Column, ...] = tuple(columns)
        self._rows: List[Row] = []

    @classmethod
    def create(cls, name: str, columns: Sequence[Column]) -> "Table":
        return cls(name, columns)

    # --------------------------------------------------
    # schema
    # --------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def columns(self) -> Tuple[Column, ...]:
        return self._columns

    def column_count(self) -> int:
        return len(self._columns)

    def _column(self, i: int) -> Column:
        if not 0 <= i < len(self._columns):
            raise SchemaViolationError(
                f"column index {i} out of range for table {self._name!r} "
                f"with {len(self._columns)} columns"
            )
        return self._columns[i]

    def column_name(self, i: int) -> str:
        return self._column(i).name

    def column_type(self, i: int) -> FieldType:
        return self._column(i).kind

    def column_index(self, name: str) -> int:
        for i, col in enumerate(self._columns):
            if col.name == name:
                return i
        raise SchemaViolationError(f"no column named {name!r} in table {self._name!r}")

    def column_type_of(self, name: str) -> FieldType:
        return self._columns[self.column_index(name)].kind

    # --------------------------------------------------
    # rows
    # --------------------------------------------------
    def append(self, row: Row | Sequence[Value]) -> Row:
        if not isinstance(row, Row):
            row = Row(row)

        if len(row) != len(self._columns):
            raise SchemaViolationError(
                f"row has {len(row)} fields, table {self._name!r} has "
                f"{len(self._columns)} columns"
            )
        for i, (value, col) in enumerate(zip(row, self._columns)):
            if getattr(value, "kind", None) is not col.kind:
                raise SchemaViolationError(
                    f"field {i} ({col.name}) expects {col.kind.value}, got {value!r}"
                )

        self._rows.append(row)
        return row

    def rows(self) -> RowsView:
        return RowsView(self._rows)

    @property
    def num_rows(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        cols = ", ".join(f"{c.name}:{c.kind.value}" for c in self._columns)
        return f"Table({self._name!r}, [{cols}], rows={len(self._rows)})"

    # --------------------------------------------------
    # serialization
    # --------------------------------------------------
    def render(self, sink: TextIO) -> None:
        """
        <TABLE>,<name>
        <type>,<type>,...
        <col>,<col>,...
        <value>,<value>,...   (one line per row)
        """
        sink.write(f"{TABLE_MARKER},{self._name}\n")
        sink.write(",".join(c.kind.value for c in self._columns) + "\n")
        sink.write(",".join(c.name for c in self._columns) + "\n")
        for row in self._rows:
            sink.write(row.render() + "\n")

    def to_text(self) -> str:
        buf = io.StringIO()
        self.render(buf)
        return buf.getvalue()

    def to_arrow(self) -> pa.Table:
        schema = pa.schema(
            [pa.field(c.name, ARROW_TYPES[c.kind]) for c in self._columns]
        )
        arrays = [
            pa.array([row[i].val for row in self._rows], type=ARROW_TYPES[c.kind])
            for i, c in enumerate(self._columns)
        ]
        return pa.Table.from_arrays(arrays, schema=schema)
