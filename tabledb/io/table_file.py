#!filepath: tabledb/io/table_file.py
from __future__ import annotations

import io
from pathlib import Path
from typing import Iterable, List

from tabledb.core.table import Table
from tabledb.utils.errors import MalformedInputError, UserInputError
from tabledb.utils.logger import logs

FIELD_SEP = ","


def split_lines(text: str) -> List[List[str]]:
    """
    Raw text → list of field lists.

    - lines split on "\\n", one trailing "\\r" stripped per line
    - a single trailing empty line (file ending in newline) is dropped
    - fields split on "," with no quoting
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r").split(FIELD_SEP) for line in lines]


def read_table_file(path: str | Path) -> List[List[str]]:
    p = Path(path)
    if not p.is_file():
        raise UserInputError(f"input table file not found: {p}")

    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"{p} is not valid UTF-8: {e}") from None

    lines = split_lines(text)
    logs.info(f"[TableFile] input table file {p} has {len(lines)} lines")
    return lines


def render_tables(tables: Iterable[Table]) -> str:
    buf = io.StringIO()
    for table in tables:
        table.render(buf)
    return buf.getvalue()
