"""Pydantic value models for thermal summaries.

These are immutable once produced and shared by reference between
summaries.
"""

from __future__ import annotations

from functools import total_ordering

from pydantic import BaseModel, ConfigDict, Field

MIN_POINTS = 0
MAX_POINTS = 10


@total_ordering
class NormalizedValue(BaseModel):
    """Unit-free intensity score along one dimension.

    Absence of data is represented by ``None`` wherever a NormalizedValue
    is expected, never by zero points.
    """

    model_config = ConfigDict(frozen=True)

    points: int = Field(..., ge=MIN_POINTS, le=MAX_POINTS)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NormalizedValue):
            return NotImplemented
        return self.points < other.points

    @classmethod
    def calculate(cls, consumed: float, total: float) -> NormalizedValue:
        """Score a consumer by its share of the total consumption.

        Args:
            consumed: Amount consumed by the candidate.
            total: Total consumption along the dimension.

        Returns:
            NormalizedValue with points in [MIN_POINTS, MAX_POINTS].

        Raises:
            ValueError: If total is not positive.
        """
        if total <= 0:
            raise ValueError(f"total consumption must be positive, got {total}")
        points = int(consumed / total * MAX_POINTS)
        return cls(points=max(MIN_POINTS, min(MAX_POINTS, points)))


class ShardHeat(BaseModel):
    """Score of a single shard along one dimension."""

    model_config = ConfigDict(frozen=True)

    index_name: str
    shard_id: int = Field(..., ge=0)
    value: NormalizedValue
