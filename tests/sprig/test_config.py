"""Tests for front-end options and logging setup."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from pydantic import ValidationError

from sprig.config import DEFAULT_OPTIONS, FrontendOptions
from sprig.lexer import scan
from sprig.log import get_logger, init_logging


class TestFrontendOptions:
    """Test the options model."""

    def test_defaults(self) -> None:
        """Both switches are off by default."""
        assert DEFAULT_OPTIONS.strict_types is False
        assert DEFAULT_OPTIONS.debug_parser is False

    def test_options_are_frozen(self) -> None:
        """Options cannot be changed after creation."""
        options = FrontendOptions()
        with pytest.raises(ValidationError):
            options.strict_types = True  # type: ignore[misc]

    def test_unknown_options_are_rejected(self) -> None:
        """Misspelled options fail loudly."""
        with pytest.raises(ValidationError):
            FrontendOptions(strict_typez=True)  # type: ignore[call-arg]

    def test_copy_with_update(self) -> None:
        """Variants are derived with model_copy."""
        strict = DEFAULT_OPTIONS.model_copy(update={"strict_types": True})
        assert strict.strict_types is True
        assert DEFAULT_OPTIONS.strict_types is False


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """The package logger, restored after the test."""
    logger = logging.getLogger("sprig")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestLogging:
    """Test the logging helpers."""

    def test_get_logger_is_named(self) -> None:
        """Module loggers live under the package logger."""
        assert get_logger("sprig.lexer.scanner").name == "sprig.lexer.scanner"

    def test_init_logging_default_level(self, package_logger: logging.Logger) -> None:
        """Without verbose the package logs at INFO."""
        init_logging()
        assert package_logger.level == logging.INFO
        assert len(package_logger.handlers) == 1

    def test_init_logging_replaces_handlers(
        self,
        package_logger: logging.Logger,
    ) -> None:
        """Calling init_logging twice keeps a single handler."""
        init_logging()
        init_logging(verbose=True)
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1

    def test_init_logging_to_file(
        self,
        package_logger: logging.Logger,
        tmp_path: Path,
    ) -> None:
        """Debug output of the passes lands in the log file."""
        log_file = tmp_path / "sprig.log"
        init_logging(verbose=True, filename=str(log_file))

        scan("var x;")
        for handler in package_logger.handlers:
            handler.flush()

        text = log_file.read_text()
        assert "sprig.lexer.scanner - DEBUG - Scanned 4 tokens" in text
