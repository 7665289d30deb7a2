"""Thermal summaries.

- base: capability contract shared by all summaries
- dimensional: per-dimension profile of one node
- node: full node summary (local only, never transported)
"""

from nodetherm.summaries.base import SummaryBase, SummaryNotTransportableError
from nodetherm.summaries.dimensional import NodeDimensionProfile
from nodetherm.summaries.node import NodeThermalSummary

__all__ = [
    "NodeDimensionProfile",
    "NodeThermalSummary",
    "SummaryBase",
    "SummaryNotTransportableError",
]
