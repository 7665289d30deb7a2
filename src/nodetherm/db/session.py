"""SQLite storage for node thermal summaries.

The database path comes from ``NODETHERM_DB_PATH`` unless given
explicitly. A new engine gets the node summary schema created on it, so
every session opened here can write node summaries right away.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session

from nodetherm.db.schema import define_node_summary_tables, summary_metadata

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path("data/nodetherm.db")

DB_PATH_ENV_VAR = "NODETHERM_DB_PATH"

# Engines by resolved database path
_engines: dict[str, Engine] = {}


def resolve_db_path(db_path: Path | None = None) -> Path:
    """Resolve the database path.

    Args:
        db_path: Explicit path. Takes precedence over the environment.

    Returns:
        db_path, else $NODETHERM_DB_PATH, else DEFAULT_DB_PATH.
    """
    if db_path is not None:
        return Path(db_path)
    env_path = os.environ.get(DB_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_DB_PATH


def get_engine(db_path: Path | None = None) -> Engine:
    """Get the engine for a summary database, creating its schema on first use.

    Args:
        db_path: Path to SQLite database file. See resolve_db_path.

    Returns:
        Engine shared by all callers using the same resolved path.
    """
    db_path = resolve_db_path(db_path)
    key = str(db_path.resolve())
    engine = _engines.get(key)
    if engine is not None:
        return engine

    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    tables = define_node_summary_tables(summary_metadata)
    summary_metadata.create_all(engine, tables=tables)
    logger.debug(f"Summary database ready at {db_path}: {[t.name for t in tables]}")

    _engines[key] = engine
    return engine


@contextmanager
def get_db_session(db_path: Path | None = None) -> Generator[Session, None, None]:
    """Open a session on the summary database.

    Commits when the block completes and rolls back if it raises.

    Example:
        with get_db_session() as session:
            write_summary(session, summary)
    """
    session = Session(get_engine(db_path))
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
