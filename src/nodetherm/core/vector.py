"""Per-dimension mean-score projection for one node."""

from __future__ import annotations

from nodetherm.core.dimension import ThermalDimension
from nodetherm.models.types import NormalizedValue


class ThermalVector:
    """One NormalizedValue slot per known dimension, indexed by ordinal.

    Slots start absent (``None``). The size is fixed at construction; slots
    are only ever overwritten.
    """

    def __init__(self) -> None:
        self._values: list[NormalizedValue | None] = [None] * ThermalDimension.count()

    def update_for_dimension(
        self, dimension: ThermalDimension, value: NormalizedValue | None
    ) -> None:
        self._values[dimension.ordinal] = value

    def get_for_dimension(self, dimension: ThermalDimension) -> NormalizedValue | None:
        return self._values[dimension.ordinal]

    def to_dict(self) -> dict[str, int | None]:
        """Canonical dimension name -> points (None when absent), in ordinal order."""
        return {
            dimension.value: (value.points if value is not None else None)
            for dimension, value in zip(ThermalDimension, self._values)
        }

    def __repr__(self) -> str:
        return f"ThermalVector({self.to_dict()})"
