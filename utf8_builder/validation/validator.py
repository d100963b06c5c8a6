"""Byte-at-a-time UTF-8 grammar state machine (RFC 3629)."""

from utf8_builder.exceptions import InvalidContinuationByteError, InvalidLeadByteError
from utf8_builder.validation.models import (
    IDLE,
    Idle,
    Pending,
    ValidatorSnapshot,
    ValidatorState,
)

_CONTINUATION_RANGE = (0x80, 0xBF)

# Second-byte ranges that exclude overlongs, surrogates and code points above U+10FFFF.
_SECOND_BYTE_RANGES: dict[int, tuple[int, int]] = {
    0xE0: (0xA0, 0xBF),
    0xED: (0x80, 0x9F),
    0xF0: (0x90, 0xBF),
    0xF4: (0x80, 0x8F),
}


def sequence_length(lead_byte: int) -> int:
    """Return the total sequence length announced by a lead byte.

    Returns 0 when the byte cannot start a sequence: stray continuation
    bytes, 0xC0, 0xC1 and 0xF5-0xFF.
    """
    if lead_byte <= 0x7F:
        return 1
    if 0xC2 <= lead_byte <= 0xDF:
        return 2
    if 0xE0 <= lead_byte <= 0xEF:
        return 3
    if 0xF0 <= lead_byte <= 0xF4:
        return 4
    return 0


def continuation_range(state: Pending) -> tuple[int, int]:
    """Inclusive range the next byte must fall into to continue `state`."""
    if state.bytes_consumed == 1:
        return _SECOND_BYTE_RANGES.get(state.lead_byte, _CONTINUATION_RANGE)
    return _CONTINUATION_RANGE


class Utf8Validator:
    """Tracks partial-sequence state across pushes and classifies each byte.

    `feed` returns the bytes of a sequence once it is complete and an empty
    bytes object while a sequence is still pending. A rejected byte leaves
    the state and offset untouched.
    """

    def __init__(self) -> None:
        self._state: ValidatorState = IDLE
        self._offset = 0

    @property
    def state(self) -> ValidatorState:
        return self._state

    @property
    def offset(self) -> int:
        """Number of bytes accepted so far, pending bytes included."""
        return self._offset

    @property
    def pending_len(self) -> int:
        if isinstance(self._state, Pending):
            return self._state.bytes_consumed
        return 0

    def is_idle(self) -> bool:
        return isinstance(self._state, Idle)

    def feed(self, byte: int, index: int | None = None) -> bytes:
        """Classify one byte and advance the state machine.

        Args:
            byte: Incoming byte value (0-255).
            index: Position of the byte within the pushed chunk, reported on error.

        Returns:
            The complete sequence when `byte` finishes one, otherwise b"".

        Raises:
            InvalidLeadByteError: if `byte` cannot start a sequence.
            InvalidContinuationByteError: if `byte` cannot continue the pending sequence.
        """
        state = self._state
        if isinstance(state, Idle):
            length = sequence_length(byte)
            if length == 0:
                raise InvalidLeadByteError(byte, self._offset, index)
            self._offset += 1
            if length == 1:
                return bytes((byte,))
            self._state = Pending(lead_byte=byte, expected_length=length)
            return b""

        low, high = continuation_range(state)
        if not low <= byte <= high:
            raise InvalidContinuationByteError(
                byte, self._offset, index, lead_byte=state.lead_byte
            )
        self._offset += 1
        continuation = state.continuation + bytes((byte,))
        if 1 + len(continuation) == state.expected_length:
            self._state = IDLE
            return bytes((state.lead_byte,)) + continuation
        self._state = Pending(state.lead_byte, state.expected_length, continuation)
        return b""

    def accept_trusted(self, size: int) -> None:
        """Account for `size` bytes of known-valid text appended while idle."""
        if not self.is_idle():
            raise RuntimeError("trusted bytes cannot be accepted mid-sequence")
        self._offset += size

    def snapshot(self) -> ValidatorSnapshot:
        return ValidatorSnapshot(state=self._state, offset=self._offset)

    def restore(self, snapshot: ValidatorSnapshot) -> None:
        self._state = snapshot.state
        self._offset = snapshot.offset

    def reset(self) -> None:
        self._state = IDLE
        self._offset = 0
