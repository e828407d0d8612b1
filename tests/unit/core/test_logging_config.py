"""Renderer selection for structlog."""

import pytest
import structlog

from aupair.core.logging_config import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_console_format_is_honoured_when_output_is_captured():
    configure_logging("INFO", "console")
    assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)


def test_json_format():
    configure_logging("DEBUG", "json")
    assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)
