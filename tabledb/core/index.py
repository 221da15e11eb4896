#!filepath: tabledb/core/index.py
from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from tabledb.core.table import Row
from tabledb.core.value import FieldType

TRADABLE = "tradable"
PRICE_OVER_TIME = "price-over-time"
VOLUME_OVER_TIME = "volume-over-time"
TRADES = "trades"


class DaySeries:
    """
    day → value, kept sorted by day.

    Structure:
      1. sorted day list (binary search for put / range bounds)
      2. parallel value list

    Complexity:
      - put, in-order day: O(1) amortized
      - put, out-of-order day: O(log N) search + O(N) insert
      - window(lo, hi): O(log N + K)
    """

    __slots__ = ("_days", "_values")

    def __init__(self) -> None:
        self._days: List[int] = []
        self._values: List[float] = []

    def put(self, day: int, value: float) -> None:
        """Insert or overwrite; a repeated day keeps the later value."""
        if not self._days or day > self._days[-1]:
            self._days.append(day)
            self._values.append(value)
            return

        pos = bisect.bisect_left(self._days, day)
        if pos < len(self._days) and self._days[pos] == day:
            self._values[pos] = value
        else:
            self._days.insert(pos, day)
            self._values.insert(pos, value)

    def get(self, day: int) -> Optional[float]:
        pos = bisect.bisect_left(self._days, day)
        if pos < len(self._days) and self._days[pos] == day:
            return self._values[pos]
        return None

    def window(self, lo: int, hi: int) -> Iterator[Tuple[int, float]]:
        """Ascending (day, value) pairs with lo <= day <= hi."""
        start = bisect.bisect_left(self._days, lo)
        end = bisect.bisect_right(self._days, hi)
        for i in range(start, end):
            yield self._days[i], self._values[i]

    def items(self) -> Iterator[Tuple[int, float]]:
        return zip(self._days, self._values)

    def __len__(self) -> int:
        return len(self._days)

    def __repr__(self) -> str:
        return f"DaySeries({dict(self.items())!r})"


@dataclass(frozen=True, slots=True)
class TradeRecord:
    id: int
    day: int
    quantity: int


@dataclass
class QueryIndex:
    """
    Denormalized lookups built during ingestion, read-only afterwards.

    - class_of      : name → asset class (last write wins)
    - price_series  : name → DaySeries(day → price)
    - volume_series : name → DaySeries(day → volume)
    - trades_of     : name → trades in input order
    """

    class_of: Dict[str, str] = field(default_factory=dict)
    price_series: Dict[str, DaySeries] = field(default_factory=dict)
    volume_series: Dict[str, DaySeries] = field(default_factory=dict)
    trades_of: Dict[str, List[TradeRecord]] = field(default_factory=dict)

    def names(self) -> List[str]:
        """Entity names in ascending order."""
        return sorted(self.class_of)

    def summary(self) -> Dict[str, int]:
        return {
            "class_of": len(self.class_of),
            "price_series": len(self.price_series),
            "volume_series": len(self.volume_series),
            "trades_of": len(self.trades_of),
        }


# ============================================================
# indexing strategies（table name → shape + row handler）
# ============================================================
Indexer = Callable[[QueryIndex, Row], None]


def _index_tradable(index: QueryIndex, row: Row) -> None:
    index.class_of[row.string_at(0)] = row.string_at(1)


def _index_price(index: QueryIndex, row: Row) -> None:
    name = row.string_at(1)
    series = index.price_series.get(name)
    if series is None:
        series = index.price_series[name] = DaySeries()
    series.put(row.int_at(0), row.float_at(2))


def _index_volume(index: QueryIndex, row: Row) -> None:
    name = row.string_at(1)
    series = index.volume_series.get(name)
    if series is None:
        series = index.volume_series[name] = DaySeries()
    series.put(row.int_at(0), row.float_at(2))


def _index_trade(index: QueryIndex, row: Row) -> None:
    index.trades_of.setdefault(row.string_at(2), []).append(
        TradeRecord(id=row.int_at(0), day=row.int_at(1), quantity=row.int_at(3))
    )


@dataclass(frozen=True)
class IndexShape:
    kinds: Tuple[FieldType, ...]
    indexer: Indexer


INDEX_SHAPES: Dict[str, IndexShape] = {
    TRADABLE: IndexShape(
        (FieldType.STRING, FieldType.STRING),
        _index_tradable,
    ),
    PRICE_OVER_TIME: IndexShape(
        (FieldType.INT, FieldType.STRING, FieldType.FLOAT),
        _index_price,
    ),
    VOLUME_OVER_TIME: IndexShape(
        (FieldType.INT, FieldType.STRING, FieldType.FLOAT),
        _index_volume,
    ),
    TRADES: IndexShape(
        (FieldType.INT, FieldType.INT, FieldType.STRING, FieldType.INT),
        _index_trade,
    ),
}
