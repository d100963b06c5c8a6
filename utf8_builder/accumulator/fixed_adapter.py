from utf8_builder.accumulator.base import BaseAccumulator
from utf8_builder.exceptions import AllocationFailureError


class FixedAccumulator(BaseAccumulator):
    """Accumulates bytes into fixed storage that is never resized.

    The storage is either supplied by the caller (any writable buffer, e.g. a
    bytearray) or preallocated once from `capacity`. A supplied bytearray is
    held through a memoryview, so it cannot be resized while in use.
    """

    def __init__(
        self,
        capacity: int | None = None,
        storage: bytearray | memoryview | None = None,
    ) -> None:
        if storage is None:
            if capacity is None or capacity <= 0:
                raise ValueError("capacity must be a positive integer when no storage is given")
            storage = bytearray(capacity)
        view = memoryview(storage).cast("B")
        if view.readonly:
            raise ValueError("storage must be a writable buffer")
        if capacity is None:
            capacity = len(view)
        elif capacity > len(view):
            raise ValueError(
                f"capacity {capacity} exceeds the supplied storage size {len(view)}"
            )
        self._storage = view
        self._capacity = capacity
        self._length = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, data: bytes) -> None:
        size = len(data)
        if not size:
            return
        self.reserve(size)
        end = self._length + size
        self._storage[self._length:end] = data
        self._length = end

    def reserve(self, additional: int) -> None:
        available = self._capacity - self._length
        if additional > available:
            raise AllocationFailureError(additional, available)

    def as_bytes(self) -> bytes:
        return self._storage[: self._length].tobytes()

    def take(self) -> str:
        text = str(self._storage[: self._length], "utf-8")
        self._length = 0
        return text

    def clear(self) -> None:
        self._length = 0

    def copy(self) -> "FixedAccumulator":
        clone = FixedAccumulator(capacity=self._capacity)
        clone.append(self.as_bytes())
        return clone

    def __len__(self) -> int:
        return self._length
