"""Table definitions derived from summary row shapes.

Summary tables are not declared up front: each summary describes its own
columns, and the table is built from that description. Every table gets a
surrogate ``id`` primary key; nested summary tables also carry a foreign
key to their parent row.

A table name is bound to one nesting: a summary written standalone and
the same summary written under a parent need different row shapes, so
reusing a table under the other nesting is rejected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Integer, MetaData, Table

from nodetherm.core.dimension import ThermalDimension
from nodetherm.summaries.dimensional import NodeDimensionProfile
from nodetherm.summaries.node import NodeThermalSummary

if TYPE_CHECKING:
    from nodetherm.summaries.base import SummaryBase

ID_COL_NAME = "id"


def parent_key_column_name(parent_table: str) -> str:
    """Name of the column linking a nested row to its parent row."""
    return f"{parent_table}_{ID_COL_NAME}"


def _parent_tables(table: Table) -> list[str]:
    """Names of the tables this table's rows are nested under."""
    parents = []
    for column in table.columns:
        for fk in column.foreign_keys:
            target_table = fk.target_fullname.split(".")[0]
            if column.name == parent_key_column_name(target_table):
                parents.append(target_table)
    return parents


def _check_nesting(table: Table, parent_table: str | None) -> None:
    """Reject reuse of a table under a different nesting than it was defined for."""
    existing = _parent_tables(table)
    expected = [parent_table] if parent_table is not None else []
    if existing != expected:
        defined_as = f"nested under {existing[0]!r}" if existing else "standalone"
        requested = f"nested under {parent_table!r}" if parent_table else "standalone"
        raise ValueError(
            f"Table {table.name!r} is defined {defined_as}; cannot write it {requested}"
        )


def summary_table(
    summary: SummaryBase,
    metadata: MetaData,
    parent_table: str | None = None,
) -> Table:
    """Get or define the table holding rows of this summary's shape.

    Args:
        summary: Summary whose row shape defines the table.
        metadata: MetaData the table is registered in.
        parent_table: Table name of the enclosing summary, if nested.

    Returns:
        The existing table of that name, or a newly defined one.

    Raises:
        ValueError: If a table of that name exists with a different nesting.
    """
    table_name = summary.get_table_name()
    if table_name in metadata.tables:
        table = metadata.tables[table_name]
        _check_nesting(table, parent_table)
        return table

    columns: list[Column] = [Column(ID_COL_NAME, Integer, primary_key=True, autoincrement=True)]
    if parent_table is not None:
        columns.append(
            Column(
                parent_key_column_name(parent_table),
                Integer,
                ForeignKey(f"{parent_table}.{ID_COL_NAME}"),
                nullable=False,
            )
        )
    columns.extend(summary.get_sql_schema())
    return Table(table_name, metadata, *columns)


def define_node_summary_tables(metadata: MetaData) -> list[Table]:
    """Register the node summary table and one nested table per dimension.

    Row shapes do not depend on values, so placeholder summaries are
    enough to describe the tables.

    Returns:
        The node table followed by the dimension profile tables, in
        ordinal order.
    """
    node_table = summary_table(NodeThermalSummary("", ""), metadata)
    tables = [node_table]
    for dimension in ThermalDimension:
        profile = NodeDimensionProfile(dimension=dimension, mean_value=None)
        tables.append(summary_table(profile, metadata, parent_table=node_table.name))
    return tables


# Shared registry of summary tables for the process
summary_metadata = MetaData()
