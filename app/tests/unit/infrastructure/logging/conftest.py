"""Fixtures for feedfind.infrastructure.logging tests."""

import pytest
import structlog

from feedfind.infrastructure.logging import setup


@pytest.fixture
def restore_logging(monkeypatch):
    """Reapply the suppressed test configuration after a test reconfigures structlog."""
    yield monkeypatch
    monkeypatch.undo()
    structlog.contextvars.clear_contextvars()
    setup.configure_logging()
