"""Node summary assembly.

Builds a NodeThermalSummary from the per-dimension profiles produced for
one collection cycle. Pure in-memory; persistence goes through db.repo.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from nodetherm.summaries.dimensional import NodeDimensionProfile
from nodetherm.summaries.node import NodeThermalSummary

logger = logging.getLogger(__name__)


def assemble_node_summary(
    node_id: str,
    host_address: str,
    profiles: Iterable[NodeDimensionProfile],
) -> NodeThermalSummary:
    """Build the node summary for one collection cycle.

    Profiles are applied in the given order, so a later profile for the
    same dimension replaces an earlier one.

    Args:
        node_id: Node identifier.
        host_address: Host IP address of the node.
        profiles: Dimension profiles available for this cycle.

    Returns:
        NodeThermalSummary populated with the given profiles.
    """
    summary = NodeThermalSummary(node_id, host_address)
    for profile in profiles:
        summary.update_dimension_profile(profile)

    populated = [p.dimension.value for p in summary.get_nested_summaries()]
    logger.debug(f"Assembled summary for node {node_id}: dimensions={populated}")
    return summary
