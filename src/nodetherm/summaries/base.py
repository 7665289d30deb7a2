"""Capability contract shared by all summaries.

A summary has a table identity, an SQL row shape, and a JSON tree
projection. Summaries may nest other summaries. Wire serialization is
only available on transportable summaries; everything else refuses it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy import Column


class SummaryNotTransportableError(RuntimeError):
    """A summary that must stay local was asked for a wire message.

    This is a caller bug and is never caught inside the package.
    """


class SummaryBase(ABC):
    """Abstract base class for summaries."""

    @abstractmethod
    def get_table_name(self) -> str:
        """Stable identifier for this summary's row shape."""

    @abstractmethod
    def get_sql_schema(self) -> list[Column]:
        """Ordered columns of this summary's row.

        A new list of fresh columns is returned on every call so the
        result can be bound to a table.
        """

    @abstractmethod
    def get_sql_value(self) -> list[Any]:
        """Row values, positionally aligned with get_sql_schema()."""

    @abstractmethod
    def to_json(self) -> dict[str, Any]:
        """JSON-compatible tree for hierarchical reporting."""

    def get_nested_summaries(self) -> list[SummaryBase]:
        """Child summaries, if any."""
        return []

    def build_summary_message(self) -> Any:
        raise SummaryNotTransportableError(
            f"{self.get_table_name()} does not define a wire message."
        )

    def build_summary_message_and_add_to_flow_unit(self, message_builder: Any) -> None:
        raise SummaryNotTransportableError(
            f"{self.get_table_name()} does not define a wire message."
        )
