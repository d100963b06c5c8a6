from utf8_builder.accumulator.base import BaseAccumulator
from utf8_builder.exceptions import AllocationFailureError


class GrowableAccumulator(BaseAccumulator):
    """Accumulates bytes in an owned bytearray that grows on demand.

    `max_size` optionally bounds the growth; going past it fails the same way
    an exhausted allocator would.
    """

    def __init__(self, max_size: int | None = None, initial: bytes = b"") -> None:
        if max_size is not None and max_size <= 0:
            raise ValueError("max_size must be a positive integer")
        self._buffer = bytearray()
        self._max_size = max_size
        if initial:
            self.append(initial)

    @property
    def capacity(self) -> int | None:
        return self._max_size

    def append(self, data: bytes) -> None:
        if not data:
            return
        self._ensure_room(len(data))
        try:
            self._buffer += data
        except MemoryError as exc:
            raise AllocationFailureError(len(data)) from exc

    def reserve(self, additional: int) -> None:
        # bytearray has no separate capacity; only the configured bound can refuse.
        self._ensure_room(additional)

    def as_bytes(self) -> bytes:
        return bytes(self._buffer)

    def take(self) -> str:
        text = self._buffer.decode("utf-8")
        self._buffer = bytearray()
        return text

    def clear(self) -> None:
        self._buffer.clear()

    def copy(self) -> "GrowableAccumulator":
        return GrowableAccumulator(max_size=self._max_size, initial=bytes(self._buffer))

    def __len__(self) -> int:
        return len(self._buffer)

    def _ensure_room(self, size: int) -> None:
        available = self.available
        if available is not None and size > available:
            raise AllocationFailureError(size, available)
