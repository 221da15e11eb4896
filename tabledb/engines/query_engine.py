#!filepath: tabledb/engines/query_engine.py
from __future__ import annotations

from typing import Dict, Optional

from tabledb.config.query_config import QueryConfig
from tabledb.core.index import DaySeries, QueryIndex
from tabledb.core.table import Column, Table
from tabledb.core.value import FieldType, IntValue, StringValue
from tabledb.utils.logger import logs

RESULT_TABLE = "asset-class_counts"
STOCK = "stock"
BOND = "bond"

# output row order
ASSET_CLASSES = (BOND, STOCK)


class AssetClassCountQuery:
    """
    AssetClassCountQuery（the one supported query）

    For every traded stock / bond, in ascending name order:
      1) price window test: no in-window price above max_price
      2) if that fails, volume window test: no in-window volume below min_volume
      3) an eligible entity adds its trade count to its asset class

    Output:
      asset-class_counts(asset-class: STRING, count: INT)
      bond row then stock row, zero counts omitted

    The index is only read; evaluate() can be called any number of times.
    """

    def __init__(self, index: QueryIndex, config: Optional[QueryConfig] = None):
        self.index = index
        self.config = config if config is not None else QueryConfig()

    # --------------------------------------------------
    def _price_ok(self, series: DaySeries) -> bool:
        cfg = self.config
        return not any(
            price > cfg.max_price
            for _, price in series.window(cfg.window_start, cfg.window_end)
        )

    def _volume_ok(self, series: DaySeries) -> bool:
        cfg = self.config
        return not any(
            volume < cfg.min_volume
            for _, volume in series.window(cfg.window_start, cfg.window_end)
        )

    # --------------------------------------------------
    def counts(self) -> Dict[str, int]:
        index = self.index
        totals = {asset_class: 0 for asset_class in ASSET_CLASSES}

        # NOTE: with carry_over_eligibility the verdict survives across
        # entities; an entity without price and volume series reuses it.
        eligible = False

        for name in index.names():
            asset_class = index.class_of[name]
            if asset_class not in totals:
                continue

            trades = index.trades_of.get(name)
            if trades is None:
                continue

            if not self.config.carry_over_eligibility:
                eligible = False

            prices = index.price_series.get(name)
            if prices is not None:
                eligible = self._price_ok(prices)

            if not eligible:
                volumes = index.volume_series.get(name)
                if volumes is not None:
                    eligible = self._volume_ok(volumes)

            if eligible:
                totals[asset_class] += len(trades)

        return totals

    # --------------------------------------------------
    def evaluate(self) -> Table:
        totals = self.counts()

        result = Table(
            RESULT_TABLE,
            [
                Column("asset-class", FieldType.STRING),
                Column("count", FieldType.INT),
            ],
        )
        for asset_class in ASSET_CLASSES:
            if totals[asset_class] != 0:
                result.append([StringValue(asset_class), IntValue(totals[asset_class])])

        logs.debug(f"[AssetClassCountQuery] totals={totals}")
        return result
