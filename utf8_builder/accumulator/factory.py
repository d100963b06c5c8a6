from utf8_builder.accumulator.base import BaseAccumulator
from utf8_builder.accumulator.fixed_adapter import FixedAccumulator
from utf8_builder.accumulator.growable_adapter import GrowableAccumulator
from utf8_builder.config.settings import Settings


class AccumulatorFactory:
    """Creates the accumulator backend selected in settings."""

    ADAPTERS: dict[str, type[BaseAccumulator]] = {
        "growable": GrowableAccumulator,
        "fixed": FixedAccumulator,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseAccumulator:
        backend = settings.accumulator_backend.lower()
        adapter_cls = cls.ADAPTERS.get(backend)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown accumulator backend '{backend}'. Choose from: {list(cls.ADAPTERS)}"
            )
        if adapter_cls is FixedAccumulator:
            return FixedAccumulator(capacity=settings.accumulator_capacity)
        return GrowableAccumulator(max_size=settings.accumulator_max_size)
