from utf8_builder.accumulator.base import BaseAccumulator
from utf8_builder.accumulator.factory import AccumulatorFactory
from utf8_builder.accumulator.growable_adapter import GrowableAccumulator
from utf8_builder.config.settings import Settings
from utf8_builder.exceptions import (
    AllocationFailureError,
    IncompleteSequenceError,
    InvalidStateError,
    UnencodableTextError,
    Utf8ValidationError,
)
from utf8_builder.logging.logger import Log
from utf8_builder.validation.models import Pending, ValidatorSnapshot
from utf8_builder.validation.validator import Utf8Validator


class Utf8Builder:
    """Builds and validates UTF-8 text from chunks of bytes.

    Bytes may arrive split at any boundary, including inside a multi-byte
    sequence. Only complete, valid sequences ever reach the accumulator; a
    sequence still waiting for continuation bytes is held by the validator.

    After any error the builder stays consistent: the accumulated valid
    prefix is intact and a pending sequence is kept. The stream should be
    considered tainted after a validation error unless `clear()` is called.
    """

    def __init__(self, accumulator: BaseAccumulator | None = None) -> None:
        self._accumulator = accumulator if accumulator is not None else GrowableAccumulator()
        self._validator = Utf8Validator()

    @classmethod
    def from_str(cls, text: str, accumulator: BaseAccumulator | None = None) -> "Utf8Builder":
        """Create a builder already holding `text`."""
        builder = cls(accumulator)
        builder.push_str(text)
        return builder

    def __len__(self) -> int:
        """Committed bytes plus the bytes of a pending sequence."""
        return len(self._accumulator) + self._validator.pending_len

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(accumulated={len(self._accumulator)}, "
            f"pending={self._validator.pending_len})"
        )

    def is_empty(self) -> bool:
        return len(self) == 0

    def is_valid(self) -> bool:
        """True when no multi-byte sequence is waiting for more bytes."""
        return self._validator.is_idle()

    @property
    def accumulated_len(self) -> int:
        return len(self._accumulator)

    @property
    def pending_len(self) -> int:
        return self._validator.pending_len

    @property
    def offset(self) -> int:
        """Stream offset of the next byte to be pushed."""
        return self._validator.offset

    @property
    def accumulator(self) -> BaseAccumulator:
        return self._accumulator

    def as_bytes(self) -> bytes:
        """Return the confirmed-valid prefix built so far."""
        return self._accumulator.as_bytes()

    def push(self, byte: int) -> None:
        """Push a single byte.

        Raises:
            InvalidLeadByteError: if the byte cannot start a sequence.
            InvalidContinuationByteError: if the byte breaks the pending sequence.
            AllocationFailureError: if the completed sequence cannot be stored.
        """
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte must be in range 0..255, got {byte}")
        snapshot = self._validator.snapshot()
        try:
            completed = self._validator.feed(byte)
        except Utf8ValidationError as exc:
            Log.debug(f"Rejected byte: {exc}")
            raise
        if completed:
            self._commit(completed, snapshot)

    def push_chunk(self, chunk: bytes | bytearray | memoryview) -> None:
        """Push a chunk of bytes, stopping at the first invalid byte.

        The valid prefix before an offending byte is committed and the error
        reports both its index inside `chunk` and its stream offset. If the
        accumulator cannot hold the chunk's completed sequences, the whole
        chunk is rejected and the builder is left as it was.
        """
        data = bytes(chunk)
        if not data:
            return
        snapshot = self._validator.snapshot()

        if self._validator.is_idle() and data.isascii():
            self._commit(data, snapshot)
            self._validator.accept_trusted(len(data))
            return

        staged = bytearray()
        error: Utf8ValidationError | None = None
        for index, byte in enumerate(data):
            try:
                staged += self._validator.feed(byte, index)
            except Utf8ValidationError as exc:
                error = exc
                break
        if staged:
            self._commit(bytes(staged), snapshot)
        if error is not None:
            Log.debug(f"Rejected chunk of {len(data)} bytes: {error}")
            raise error

    def push_str(self, text: str) -> None:
        """Push text that is already known to be valid.

        Only allowed while no multi-byte sequence is pending, since the text
        would otherwise land in the middle of that sequence.

        Raises:
            InvalidStateError: if a multi-byte sequence is pending.
            UnencodableTextError: if `text` cannot be encoded as UTF-8.
            AllocationFailureError: if the accumulator cannot hold the text.
        """
        if not self._validator.is_idle():
            raise InvalidStateError(
                f"cannot push text while a {self._expected_length()}-byte sequence "
                f"is pending ({self._validator.pending_len} bytes received)"
            )
        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise UnencodableTextError(f"text is not encodable as UTF-8: {exc}") from exc
        self._commit(data, self._validator.snapshot())
        self._validator.accept_trusted(len(data))

    def push_char(self, char: str) -> None:
        """Push a single character through the known-valid path."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {len(char)}")
        self.push_str(char)

    def reserve(self, additional: int) -> None:
        """Ask the accumulator for room for `additional` more bytes."""
        self._accumulator.reserve(additional)

    def finalize(self) -> str:
        """Return the built text and reset the builder to empty.

        Raises:
            IncompleteSequenceError: if a multi-byte sequence is pending.
                The builder is left untouched.
        """
        if not self._validator.is_idle():
            error = IncompleteSequenceError(
                self._validator.pending_len, self._expected_length()
            )
            Log.debug(f"Finalize refused: {error}")
            raise error
        size = len(self._accumulator)
        text = self._accumulator.take()
        self._validator.reset()
        Log.debug(f"Finalized {size} bytes of UTF-8 text")
        return text

    def clear(self) -> None:
        """Discard accumulated bytes and any pending sequence."""
        self._accumulator.clear()
        self._validator.reset()

    def copy(self) -> "Utf8Builder":
        clone = type(self)(self._accumulator.copy())
        clone._validator.restore(self._validator.snapshot())
        return clone

    def _commit(self, data: bytes, snapshot: ValidatorSnapshot) -> None:
        try:
            self._accumulator.append(data)
        except AllocationFailureError as exc:
            self._validator.restore(snapshot)
            Log.warning(f"Accumulator refused {len(data)} bytes: {exc}")
            raise

    def _expected_length(self) -> int:
        state = self._validator.state
        return state.expected_length if isinstance(state, Pending) else 0


def build_builder(settings: Settings | None = None) -> Utf8Builder:
    """Build a Utf8Builder with the accumulator backend chosen in settings."""
    settings = settings if settings is not None else Settings()
    Log.configure(settings.log_level)
    accumulator = AccumulatorFactory.create(settings)
    return Utf8Builder(accumulator)
