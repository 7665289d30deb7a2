"""Thermal dimensions tracked per node.

Each dimension is one axis of resource pressure. Declaration order is the
ordinal order used for vector slots, profile slots and table columns.
"""

from __future__ import annotations

from enum import Enum


class ThermalDimension(Enum):
    """Known thermal dimensions, valued by canonical name."""

    CPU_UTILIZATION = "CPU_Utilization"
    HEAP_ALLOC_RATE = "Heap_AllocRate"
    SHARD_SIZE_IN_BYTES = "Shard_Size_In_Bytes"

    @property
    def ordinal(self) -> int:
        """0-based declaration index."""
        return _ORDINALS[self]

    @classmethod
    def count(cls) -> int:
        return len(_ORDINALS)


_ORDINALS: dict[ThermalDimension, int] = {
    dimension: index for index, dimension in enumerate(ThermalDimension)
}
