from unittest.mock import Mock

import pytest

from utf8_builder.accumulator.fixed_adapter import FixedAccumulator
from utf8_builder.accumulator.growable_adapter import GrowableAccumulator
from utf8_builder.builder.builder import Utf8Builder, build_builder
from utf8_builder.config.settings import Settings
from utf8_builder.exceptions import AllocationFailureError


def _settings(**overrides: object) -> Mock:
    settings = Mock(spec=Settings)
    settings.log_level = "INFO"
    settings.accumulator_backend = "growable"
    settings.accumulator_capacity = 65536
    settings.accumulator_max_size = None
    for key, value in overrides.items():
        setattr(settings, key, value)
    return settings


class TestBuildBuilder:
    def test_returns_builder_with_growable_accumulator(self) -> None:
        builder = build_builder(_settings())
        assert isinstance(builder, Utf8Builder)
        assert isinstance(builder.accumulator, GrowableAccumulator)

    def test_fixed_backend(self) -> None:
        builder = build_builder(_settings(accumulator_backend="fixed", accumulator_capacity=4))
        assert isinstance(builder.accumulator, FixedAccumulator)
        builder.push_chunk(b"abcd")
        with pytest.raises(AllocationFailureError):
            builder.push(0x65)
        assert builder.finalize() == "abcd"

    def test_default_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UTF8_BUILDER_ACCUMULATOR_BACKEND", "fixed")
        monkeypatch.setenv("UTF8_BUILDER_ACCUMULATOR_CAPACITY", "8")
        builder = build_builder()
        assert isinstance(builder.accumulator, FixedAccumulator)
        assert builder.accumulator.capacity == 8

    def test_unknown_backend_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown accumulator backend"):
            build_builder(_settings(accumulator_backend="pool"))
