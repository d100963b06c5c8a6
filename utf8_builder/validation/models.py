from dataclasses import dataclass


@dataclass(frozen=True)
class Idle:
    """No multi-byte sequence in progress."""


@dataclass(frozen=True)
class Pending:
    """A multi-byte sequence whose lead byte has arrived but is not complete yet."""

    lead_byte: int
    expected_length: int  # 2, 3 or 4
    continuation: bytes = b""

    @property
    def bytes_consumed(self) -> int:
        return 1 + len(self.continuation)

    def sequence(self) -> bytes:
        """Bytes of the sequence seen so far, in arrival order."""
        return bytes((self.lead_byte,)) + self.continuation


ValidatorState = Idle | Pending

IDLE = Idle()


@dataclass(frozen=True)
class ValidatorSnapshot:
    """Point-in-time copy of a validator, used to roll back a failed commit."""

    state: ValidatorState
    offset: int
