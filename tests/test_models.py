"""Tests for pydantic value models."""

import pytest
from pydantic import ValidationError

from nodetherm.models.types import MAX_POINTS, MIN_POINTS, NormalizedValue, ShardHeat


class TestNormalizedValue:
    """Test NormalizedValue model."""

    def test_valid_points(self):
        """Points within range should create model."""
        assert NormalizedValue(points=7).points == 7

    def test_bounds_inclusive(self):
        """Both range ends are valid."""
        assert NormalizedValue(points=MIN_POINTS).points == 0
        assert NormalizedValue(points=MAX_POINTS).points == 10

    def test_above_max_rejected(self):
        """Points above MAX_POINTS should be rejected."""
        with pytest.raises(ValidationError):
            NormalizedValue(points=MAX_POINTS + 1)

    def test_negative_rejected(self):
        """Negative points should be rejected."""
        with pytest.raises(ValidationError):
            NormalizedValue(points=-1)

    def test_immutable(self):
        """Values cannot be changed after creation."""
        value = NormalizedValue(points=3)
        with pytest.raises(ValidationError):
            value.points = 4

    def test_ordering(self):
        """Values compare by points."""
        low = NormalizedValue(points=2)
        high = NormalizedValue(points=8)
        assert low < high
        assert high > low
        assert low <= NormalizedValue(points=2)
        assert max([high, low]) == high

    def test_equal_and_hashable(self):
        """Equal points are equal values with equal hashes."""
        assert NormalizedValue(points=5) == NormalizedValue(points=5)
        assert len({NormalizedValue(points=5), NormalizedValue(points=5)}) == 1


class TestNormalizedValueCalculate:
    """Test share-of-total scoring."""

    def test_half_share(self):
        assert NormalizedValue.calculate(50.0, 100.0).points == 5

    def test_truncates(self):
        """Partial points are truncated, not rounded."""
        assert NormalizedValue.calculate(19.0, 100.0).points == 1

    def test_full_share_is_max(self):
        assert NormalizedValue.calculate(100.0, 100.0).points == MAX_POINTS

    def test_clamped_above_total(self):
        """Consumption above total is clamped to MAX_POINTS."""
        assert NormalizedValue.calculate(300.0, 100.0).points == MAX_POINTS

    def test_zero_total_rejected(self):
        with pytest.raises(ValueError):
            NormalizedValue.calculate(1.0, 0.0)


class TestShardHeat:
    """Test ShardHeat model."""

    def test_valid_shard(self):
        shard = ShardHeat(index_name="logs", shard_id=3, value=NormalizedValue(points=4))
        assert shard.index_name == "logs"
        assert shard.value.points == 4

    def test_negative_shard_id_rejected(self):
        with pytest.raises(ValidationError):
            ShardHeat(index_name="logs", shard_id=-1, value=NormalizedValue(points=4))
