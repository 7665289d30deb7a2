"""Repository functions for persisting summaries.

Encapsulates all SQLAlchemy statements. Summaries only describe their row
shape and values; tables are created on first write.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from sqlalchemy import MetaData, Table, insert, inspect, select
from sqlalchemy.orm import Session

from nodetherm.db.schema import (
    ID_COL_NAME,
    parent_key_column_name,
    summary_metadata,
    summary_table,
)
from nodetherm.db.session import get_db_session
from nodetherm.summaries.base import SummaryBase
from nodetherm.summaries.node import NodeThermalSummary

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

__all__ = ["DbSession", "persist_node_summary", "read_summary_rows", "write_summary"]

logger = logging.getLogger(__name__)


def _ensure_table(session: DbSession, table: Table) -> None:
    """Create the table in the session's database if it does not exist yet."""
    connection = session.connection()
    if not inspect(connection).has_table(table.name):
        table.create(connection)
        logger.debug(f"Created summary table {table.name}")


def write_summary(
    session: DbSession,
    summary: SummaryBase,
    parent_table: str | None = None,
    parent_id: int | None = None,
    metadata: MetaData | None = None,
) -> int:
    """Insert a summary row and, recursively, its nested summaries.

    Values are taken positionally from get_sql_value() and matched to
    get_sql_schema(). Nested rows reference the new row's id.

    Args:
        session: Database session. Caller commits.
        summary: Summary to persist.
        parent_table: Table name of the enclosing summary, if nested.
        parent_id: Row id of the enclosing summary, if nested.
        metadata: Table registry. Defaults to the shared summary_metadata.

    Returns:
        Row id of the inserted summary.

    Raises:
        ValueError: If schema and values have different lengths, if only
            one of parent_table and parent_id is given, or if the summary's
            table already exists with a different nesting.
    """
    if (parent_table is None) != (parent_id is None):
        raise ValueError("parent_table and parent_id must be given together")
    if metadata is None:
        metadata = summary_metadata

    columns = summary.get_sql_schema()
    values = summary.get_sql_value()
    if len(columns) != len(values):
        raise ValueError(
            f"{summary.get_table_name()}: {len(columns)} columns but {len(values)} values"
        )

    table = summary_table(summary, metadata, parent_table=parent_table)
    _ensure_table(session, table)

    row: dict[str, Any] = {column.name: value for column, value in zip(columns, values)}
    if parent_table is not None:
        row[parent_key_column_name(parent_table)] = parent_id

    result = session.execute(insert(table).values(**row))
    row_id = result.inserted_primary_key[0]

    nested = summary.get_nested_summaries()
    for child in nested:
        write_summary(
            session,
            child,
            parent_table=table.name,
            parent_id=row_id,
            metadata=metadata,
        )

    if parent_table is None:
        logger.info(f"Persisted {table.name} row {row_id} with {len(nested)} nested summaries")
    else:
        logger.debug(f"Wrote {table.name} row {row_id} under {parent_table} row {parent_id}")
    return row_id


def persist_node_summary(summary: NodeThermalSummary, db_path: Path | None = None) -> int:
    """Store one collection cycle's node summary in the summary database.

    Args:
        summary: Fully populated node summary.
        db_path: Path to SQLite database file. See session.resolve_db_path.

    Returns:
        Row id of the node summary.
    """
    with get_db_session(db_path) as session:
        return write_summary(session, summary)


def read_summary_rows(
    session: DbSession,
    table_name: str,
    metadata: MetaData | None = None,
) -> list[dict[str, Any]]:
    """Read all rows of a summary table, ordered by id.

    Tables not yet known to the registry are reflected from the database.

    Args:
        session: Database session.
        table_name: Summary table name (see SummaryBase.get_table_name).
        metadata: Table registry. Defaults to the shared summary_metadata.

    Returns:
        List of rows as column-name -> value dicts.

    Raises:
        sqlalchemy.exc.NoSuchTableError: If the table does not exist.
    """
    if metadata is None:
        metadata = summary_metadata

    if table_name in metadata.tables:
        table = metadata.tables[table_name]
    else:
        table = Table(table_name, metadata, autoload_with=session.connection())

    stmt = select(table).order_by(table.c[ID_COL_NAME])
    return [dict(row) for row in session.execute(stmt).mappings()]
