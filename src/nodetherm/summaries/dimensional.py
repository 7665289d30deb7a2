"""Per-dimension breakdown of a node's thermal state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import Column, Float, Integer, SmallInteger, String

from nodetherm.core.dimension import ThermalDimension
from nodetherm.models.types import NormalizedValue, ShardHeat
from nodetherm.summaries.base import SummaryBase

DIMENSION_COL_NAME = "dimension"
MEAN_COL_NAME = "mean"
TOTAL_COL_NAME = "total"
NUM_SHARDS_COL_NAME = "num_shards"


@dataclass(frozen=True)
class NodeDimensionProfile(SummaryBase):
    """Mean score and shard-level detail for one dimension on one node.

    Attributes:
        dimension: Dimension this profile describes.
        mean_value: Mean score along the dimension (None when unknown).
        total_usage: Total consumption along the dimension on the node.
        shards: Scores of the individual shards.
    """

    dimension: ThermalDimension
    mean_value: NormalizedValue | None
    total_usage: float = 0.0
    shards: tuple[ShardHeat, ...] = field(default_factory=tuple)

    def get_table_name(self) -> str:
        return f"{self.dimension.value}Summary"

    def get_sql_schema(self) -> list[Column]:
        return [
            Column(DIMENSION_COL_NAME, String(64), nullable=False),
            Column(MEAN_COL_NAME, SmallInteger, nullable=True),
            Column(TOTAL_COL_NAME, Float, nullable=False),
            Column(NUM_SHARDS_COL_NAME, Integer, nullable=False),
        ]

    def get_sql_value(self) -> list[Any]:
        return [
            self.dimension.value,
            self.mean_value.points if self.mean_value is not None else None,
            self.total_usage,
            len(self.shards),
        ]

    def to_json(self) -> dict[str, Any]:
        return {
            "dimension": self.dimension.value,
            "mean": self.mean_value.points if self.mean_value is not None else None,
            "total": self.total_usage,
            "numShards": len(self.shards),
            "shards": [
                {
                    "index_name": shard.index_name,
                    "shard_id": shard.shard_id,
                    "value": shard.value.points,
                }
                for shard in self.shards
            ],
        }
