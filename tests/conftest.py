"""Pytest configuration and fixtures."""
from __future__ import annotations

import logging
from typing import Generator

import pytest
import structlog

from fp_utils.shared import logging as fp_logging
from fp_utils.shared.config import Settings
from tests.helpers import CallCounter


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with a recognisable worker name."""
    return Settings(
        dispatch_thread_name_prefix="test-worker",
        log_level="DEBUG",
    )


@pytest.fixture
def counter() -> CallCounter:
    """Identity stub counting its calls."""
    return CallCounter()


@pytest.fixture
def restore_logging(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Undo configure_logging so other tests see structlog defaults."""
    monkeypatch.setattr(fp_logging, "_configured", False)
    yield
    package_logger = logging.getLogger(fp_logging.PACKAGE_LOGGER)
    for handler in fp_logging._handlers:
        package_logger.removeHandler(handler)
        handler.close()
    fp_logging._handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    structlog.reset_defaults()
