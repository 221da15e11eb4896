# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger

from tabledb.io.table_file import split_lines


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield
    logger.remove()


# stock A: prices within limit, 3 trades
# bond  B: no prices, volumes within limit, 2 trades
SAMPLE_TEXT = """\
<TABLE>,tradable
STRING,STRING
name,asset_class
A,stock
B,bond
<TABLE>,price-over-time
INT,STRING,FLOAT
day,name,price
13,A,100.0
268,A,299.0
<TABLE>,volume-over-time
INT,STRING,FLOAT
day,name,volume
13,B,10.0
200,B,50.5
<TABLE>,trades
INT,INT,STRING,INT
id,day,name,quantity
1,20,A,100
2,21,A,50
3,22,A,10
4,30,B,5
5,31,B,7
"""

EXPECTED_RESULT = """\
<TABLE>,asset-class_counts
STRING,INT
asset-class,count
bond,2
stock,3
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture
def sample_lines() -> list[list[str]]:
    return split_lines(SAMPLE_TEXT)


@pytest.fixture
def expected_result() -> str:
    return EXPECTED_RESULT


@pytest.fixture
def table_file(tmp_path: Path) -> Path:
    p = tmp_path / "tables.csv"
    p.write_text(SAMPLE_TEXT, encoding="utf-8")
    return p


@pytest.fixture
def make_lines():
    """
    Factory: build tokenized lines from (table name, types, columns, rows) blocks.

    Usage:
        lines = make_lines(
            ("tradable", "STRING,STRING", "name,asset_class", ["A,stock"]),
        )
    """

    def _make(*blocks) -> list[list[str]]:
        text = ""
        for name, types, columns, rows in blocks:
            text += f"<TABLE>,{name}\n{types}\n{columns}\n"
            for r in rows:
                text += r + "\n"
        return split_lines(text)

    return _make
