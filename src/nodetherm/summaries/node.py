"""Full thermal summary for a single node.

Holds the node identity, the node's mean score along every dimension and
the per-dimension profiles. The per-dimension profiles are what other
components consume; this aggregate only exists for local assembly and for
rendering as a table row or a JSON tree. It is never sent over the wire.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Column, SmallInteger, String

from nodetherm.core.dimension import ThermalDimension
from nodetherm.core.vector import ThermalVector
from nodetherm.summaries.base import SummaryBase, SummaryNotTransportableError
from nodetherm.summaries.dimensional import NodeDimensionProfile

logger = logging.getLogger(__name__)

NODE_ID_COL_NAME = "node_id"
HOST_IP_ADDRESS_COL_NAME = "host_address"


class NodeThermalSummary(SummaryBase):
    """Node identity, thermal vector and per-dimension profiles.

    Invariants:
        - one profile slot per ThermalDimension, indexed by ordinal
        - for every populated slot, the vector holds that slot's mean value
        - node_id and host_address never change

    Single writer: all updates happen before any projection is read.
    """

    TABLE_NAME = "NodeThermalSummary"

    def __init__(self, node_id: str, host_address: str):
        """Initialize an empty summary.

        Args:
            node_id: Node identifier.
            host_address: Host IP address of the node.
        """
        self._node_id = node_id
        self._host_address = host_address
        self._thermal_vector = ThermalVector()
        self._dimension_profiles: list[NodeDimensionProfile | None] = [
            None
        ] * ThermalDimension.count()

    @property
    def node_id(self) -> str:
        return self._node_id

    @property
    def host_address(self) -> str:
        return self._host_address

    @property
    def thermal_vector(self) -> ThermalVector:
        return self._thermal_vector

    @property
    def dimension_profiles(self) -> list[NodeDimensionProfile | None]:
        """All profile slots in ordinal order, None where not populated."""
        return list(self._dimension_profiles)

    def update_dimension_profile(self, profile: NodeDimensionProfile) -> None:
        """Install a dimension profile, replacing any earlier one for its dimension.

        The profile slot and the vector entry are written together.
        """
        dimension = profile.dimension
        replaced = self._dimension_profiles[dimension.ordinal] is not None
        self._dimension_profiles[dimension.ordinal] = profile
        self._thermal_vector.update_for_dimension(dimension, profile.mean_value)
        logger.debug(
            f"Node {self._node_id}: {'replaced' if replaced else 'set'} profile for "
            f"{dimension.value}, mean={profile.mean_value}"
        )

    def get_nested_summaries(self) -> list[SummaryBase]:
        return [profile for profile in self._dimension_profiles if profile is not None]

    def build_summary_message(self) -> Any:
        raise SummaryNotTransportableError(
            "NodeThermalSummary should not be transported over the wire."
        )

    def build_summary_message_and_add_to_flow_unit(self, message_builder: Any) -> None:
        raise SummaryNotTransportableError(
            "NodeThermalSummary should not be received over the wire."
        )

    def get_table_name(self) -> str:
        return self.TABLE_NAME

    def get_sql_schema(self) -> list[Column]:
        schema = [
            Column(NODE_ID_COL_NAME, String(64), nullable=False),
            Column(HOST_IP_ADDRESS_COL_NAME, String(64), nullable=False),
        ]
        for dimension in ThermalDimension:
            schema.append(Column(dimension.value, SmallInteger, nullable=True))
        return schema

    def get_sql_value(self) -> list[Any]:
        values: list[Any] = [self._node_id, self._host_address]
        for dimension in ThermalDimension:
            value = self._thermal_vector.get_for_dimension(dimension)
            values.append(value.points if value is not None else None)
        return values

    def to_json(self) -> dict[str, Any]:
        summary_obj: dict[str, Any] = self._thermal_vector.to_dict()
        for summary in self.get_nested_summaries():
            summary_obj[summary.get_table_name()] = summary.to_json()
        return summary_obj
