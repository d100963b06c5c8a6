from utf8_builder.accumulator.base import BaseAccumulator
from utf8_builder.accumulator.factory import AccumulatorFactory
from utf8_builder.accumulator.fixed_adapter import FixedAccumulator
from utf8_builder.accumulator.growable_adapter import GrowableAccumulator
from utf8_builder.builder.builder import Utf8Builder, build_builder
from utf8_builder.exceptions import (
    AllocationFailureError,
    IncompleteSequenceError,
    InvalidContinuationByteError,
    InvalidLeadByteError,
    InvalidStateError,
    UnencodableTextError,
    Utf8BuilderError,
    Utf8ValidationError,
)

__all__ = [
    "AccumulatorFactory",
    "AllocationFailureError",
    "BaseAccumulator",
    "FixedAccumulator",
    "GrowableAccumulator",
    "IncompleteSequenceError",
    "InvalidContinuationByteError",
    "InvalidLeadByteError",
    "InvalidStateError",
    "UnencodableTextError",
    "Utf8Builder",
    "Utf8BuilderError",
    "Utf8ValidationError",
    "build_builder",
]
