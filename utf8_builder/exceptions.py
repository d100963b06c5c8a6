class Utf8BuilderError(Exception):
    """Base exception for all UTF-8 builder errors."""


class Utf8ValidationError(Utf8BuilderError):
    """Raised when an incoming byte breaks the UTF-8 grammar.

    Attributes:
        byte: The offending byte value.
        offset: Cumulative stream offset of the offending byte.
        index: Position of the offending byte inside the pushed chunk,
               or None when the byte was pushed on its own.
    """

    reason = "invalid byte"

    def __init__(self, byte: int, offset: int, index: int | None = None) -> None:
        self.byte = byte
        self.offset = offset
        self.index = index
        where = f"offset {offset}" if index is None else f"offset {offset} (chunk index {index})"
        super().__init__(f"incorrect UTF-8 data: {self.reason} 0x{byte:02X} at {where}")


class InvalidLeadByteError(Utf8ValidationError):
    """Raised when a byte cannot start a UTF-8 sequence."""

    reason = "invalid lead byte"


class InvalidContinuationByteError(Utf8ValidationError):
    """Raised when a byte cannot continue the pending multi-byte sequence."""

    reason = "invalid continuation byte"

    def __init__(
        self,
        byte: int,
        offset: int,
        index: int | None = None,
        lead_byte: int | None = None,
    ) -> None:
        self.lead_byte = lead_byte
        super().__init__(byte, offset, index)


class IncompleteSequenceError(Utf8BuilderError):
    """Raised when finalizing while a multi-byte sequence is still pending."""

    def __init__(self, pending: int, expected: int) -> None:
        self.pending = pending
        self.expected = expected
        super().__init__(
            f"incorrect UTF-8 data: incomplete sequence ({pending} of {expected} bytes)"
        )


class AllocationFailureError(Utf8BuilderError):
    """Raised when the accumulator cannot hold newly validated bytes."""

    def __init__(self, requested: int, available: int | None = None) -> None:
        self.requested = requested
        self.available = available
        detail = "" if available is None else f", {available} available"
        super().__init__(f"accumulator cannot hold {requested} more bytes{detail}")


class InvalidStateError(Utf8BuilderError):
    """Raised when known-valid text is pushed while a sequence is pending."""


class UnencodableTextError(Utf8BuilderError):
    """Raised when text passed as known-valid cannot be encoded as UTF-8."""
