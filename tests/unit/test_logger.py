import logging

import pytest

from utf8_builder.builder.builder import Utf8Builder
from utf8_builder.exceptions import IncompleteSequenceError, InvalidLeadByteError
from utf8_builder.logging.logger import Log


class TestLogConfigure:
    def test_sets_level_and_single_handler(self) -> None:
        logger = logging.getLogger("utf8_builder")
        Log.configure("debug")
        Log.configure("warning")
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1


class TestBuilderLogging:
    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="utf8_builder")
        builder = Utf8Builder()
        with pytest.raises(InvalidLeadByteError):
            builder.push_chunk(b"a\x80")
        assert "Rejected chunk of 2 bytes" in caplog.text

    def test_incomplete_finalize_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="utf8_builder")
        builder = Utf8Builder()
        builder.push(0xE2)
        with pytest.raises(IncompleteSequenceError):
            builder.finalize()
        assert "Finalize refused" in caplog.text

    def test_finalize_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="utf8_builder")
        Utf8Builder.from_str("abc").finalize()
        assert "Finalized 3 bytes" in caplog.text
