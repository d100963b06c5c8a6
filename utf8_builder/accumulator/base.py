from abc import ABC, abstractmethod


class BaseAccumulator(ABC):
    """Contract for append-only storage of confirmed-valid UTF-8 bytes."""

    @abstractmethod
    def append(self, data: bytes) -> None:
        """Append validated bytes, all or nothing.

        Args:
            data: Bytes forming only complete, valid UTF-8 sequences.

        Raises:
            AllocationFailureError: if the bytes cannot be stored. Nothing
                is committed in that case.
        """

    @abstractmethod
    def reserve(self, additional: int) -> None:
        """Make sure `additional` more bytes can be appended.

        Raises:
            AllocationFailureError: if the storage cannot provide the room.
        """

    @abstractmethod
    def as_bytes(self) -> bytes:
        """Return a copy of the accumulated bytes."""

    @abstractmethod
    def take(self) -> str:
        """Return the accumulated bytes as text and leave the accumulator empty."""

    @abstractmethod
    def clear(self) -> None:
        """Discard all accumulated bytes."""

    @abstractmethod
    def copy(self) -> "BaseAccumulator":
        """Return an independent accumulator holding the same bytes."""

    @property
    @abstractmethod
    def capacity(self) -> int | None:
        """Maximum number of bytes this accumulator can hold, None if unbounded."""

    @abstractmethod
    def __len__(self) -> int: ...

    @property
    def available(self) -> int | None:
        """Bytes that can still be appended, None if unbounded."""
        capacity = self.capacity
        if capacity is None:
            return None
        return capacity - len(self)
