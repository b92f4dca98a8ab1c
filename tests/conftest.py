"""Shared pytest fixtures for strval tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
import structlog
from click.testing import CliRunner
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from structlog.testing import CapturingLogger


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo any configure_logging() call so tests never share handlers."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    strval_logger = logging.getLogger("strval")
    strval_level = strval_logger.level
    coerce_logger = logging.getLogger("strval.coerce")
    coerce_state = (coerce_logger.handlers[:], coerce_logger.level, coerce_logger.propagate)
    yield
    coerce_logger.handlers, coerce_level, coerce_logger.propagate = coerce_state
    coerce_logger.setLevel(coerce_level)
    root.handlers = original_handlers
    root.setLevel(original_level)
    strval_logger.setLevel(strval_level)
    structlog.reset_defaults()


@pytest.fixture
def sink() -> CapturingLogger:
    """Diagnostic sink that records every call for inspection."""
    return CapturingLogger()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine() -> Generator[Engine]:
    """In-memory SQLite engine."""
    engine = create_engine("sqlite://", echo=False)
    try:
        yield engine
    finally:
        engine.dispose()
