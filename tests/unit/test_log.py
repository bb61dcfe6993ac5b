"""Unit tests for logging setup."""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING

import pytest
from rich.console import Console
from rich.logging import RichHandler


if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Restore the package logger's handlers and level after the test."""
    logger = logging.getLogger("tempurl")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.mark.core
class TestPackageLogger:
    """The library logs through standard loggers without output by default."""

    def test_null_handler_installed(self) -> None:
        import tempurl  # noqa: F401

        handlers = logging.getLogger("tempurl").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_service_logs_issued_link(
        self, frozen_clock, issuer, fake_fetcher, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Issuing a link should emit an INFO record from the service module."""
        from tempurl import MemoryCache, TemporaryUrlService

        service = TemporaryUrlService(
            cache=MemoryCache(), fetcher=fake_fetcher, issuer=issuer, clock=frozen_clock
        )

        with caplog.at_level(logging.INFO, logger="tempurl"):
            service.temporary_url("test/image")

        records = [r for r in caplog.records if r.name == "tempurl.core.services"]
        assert any("test/image" in r.getMessage() for r in records)

    def test_fetch_failure_logs_warning(
        self, frozen_clock, issuer, fake_fetcher, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A failed fetch should be logged at WARNING before being re-raised."""
        from tempurl import MemoryCache, ResourceNotFoundError, TemporaryUrlService

        service = TemporaryUrlService(
            cache=MemoryCache(), fetcher=fake_fetcher, issuer=issuer, clock=frozen_clock
        )

        with (
            caplog.at_level(logging.WARNING, logger="tempurl"),
            pytest.raises(ResourceNotFoundError),
        ):
            service.temporary_url("missing/image")

        assert any(
            r.levelno == logging.WARNING and "missing/image" in r.getMessage()
            for r in caplog.records
        )


@pytest.mark.core
class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_installs_rich_handler(self, package_logger: logging.Logger) -> None:
        from tempurl import configure_logging

        logger = configure_logging(logging.DEBUG)

        assert logger is package_logger
        assert logger.level == logging.DEBUG
        assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1

    def test_repeated_calls_replace_handler(
        self, package_logger: logging.Logger
    ) -> None:
        """Calling twice should not stack handlers."""
        from tempurl import configure_logging

        configure_logging()
        configure_logging("WARNING")

        assert sum(isinstance(h, RichHandler) for h in package_logger.handlers) == 1
        assert package_logger.level == logging.WARNING

    def test_writes_to_console(self, package_logger: logging.Logger) -> None:
        """Records should be rendered to the given console."""
        from tempurl import configure_logging

        buffer = io.StringIO()
        configure_logging(console=Console(file=buffer, width=200))

        logging.getLogger("tempurl.core.services").info("hello from tempurl")

        assert "hello from tempurl" in buffer.getvalue()
