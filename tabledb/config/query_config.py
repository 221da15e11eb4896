# tabledb/config/query_config.py
from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class QueryConfig(BaseModel):
    """
    QueryConfig（asset-class count query）

    Semantics:
      - [window_start, window_end] is a closed day range
      - a price strictly above max_price disqualifies the window
      - a volume strictly below min_volume disqualifies the window
      - carry_over_eligibility=True keeps the previous entity's verdict
        when an entity has no series to re-evaluate it
    """

    window_start: int = 13
    window_end: int = 268
    max_price: float = 299.0
    min_volume: float = 10.0
    carry_over_eligibility: bool = True

    # benchmark repetitions per run
    repeat: int = Field(default=5, ge=1)

    @model_validator(mode="after")
    def _check_window(self) -> "QueryConfig":
        if self.window_start > self.window_end:
            raise ValueError(
                f"window_start ({self.window_start}) > window_end ({self.window_end})"
            )
        return self
