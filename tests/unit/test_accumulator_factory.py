from unittest.mock import patch

import pytest

from utf8_builder.accumulator.factory import AccumulatorFactory
from utf8_builder.accumulator.fixed_adapter import FixedAccumulator
from utf8_builder.accumulator.growable_adapter import GrowableAccumulator


def _make_settings(
    backend: str,
    capacity: int = 16,
    max_size: int | None = None,
):  # type: ignore[no-untyped-def]
    """Create a minimal Settings-like object with only accumulator fields."""
    with patch("utf8_builder.config.settings.Settings") as mock_cls:
        settings = mock_cls.return_value
        settings.accumulator_backend = backend
        settings.accumulator_capacity = capacity
        settings.accumulator_max_size = max_size
        return settings


class TestAccumulatorFactory:
    def test_creates_growable_accumulator(self) -> None:
        acc = AccumulatorFactory.create(_make_settings("growable", max_size=32))
        assert isinstance(acc, GrowableAccumulator)
        assert acc.capacity == 32

    def test_creates_unbounded_growable_accumulator(self) -> None:
        acc = AccumulatorFactory.create(_make_settings("growable"))
        assert acc.capacity is None

    def test_creates_fixed_accumulator(self) -> None:
        acc = AccumulatorFactory.create(_make_settings("fixed", capacity=16))
        assert isinstance(acc, FixedAccumulator)
        assert acc.capacity == 16

    def test_is_case_insensitive(self) -> None:
        acc = AccumulatorFactory.create(_make_settings("Fixed"))
        assert isinstance(acc, FixedAccumulator)

    def test_raises_for_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="Unknown accumulator backend"):
            AccumulatorFactory.create(_make_settings("mmap"))
