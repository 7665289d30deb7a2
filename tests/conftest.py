"""Shared pytest fixtures for nodetherm tests."""

import pytest
from sqlalchemy import MetaData, create_engine
from sqlalchemy.orm import sessionmaker

from nodetherm.core.dimension import ThermalDimension
from nodetherm.models.types import NormalizedValue, ShardHeat
from nodetherm.summaries.dimensional import NodeDimensionProfile


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    return create_engine("sqlite:///:memory:", echo=False)


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def metadata():
    """Fresh table registry so tests do not share table definitions."""
    return MetaData()


@pytest.fixture
def make_profile():
    """Factory for dimension profiles with a given mean in points."""

    def _make(
        dimension: ThermalDimension,
        mean: int | None,
        total: float = 100.0,
        shards: int = 0,
    ) -> NodeDimensionProfile:
        return NodeDimensionProfile(
            dimension=dimension,
            mean_value=NormalizedValue(points=mean) if mean is not None else None,
            total_usage=total,
            shards=tuple(
                ShardHeat(
                    index_name="logs",
                    shard_id=i,
                    value=NormalizedValue(points=mean or 0),
                )
                for i in range(shards)
            ),
        )

    return _make
