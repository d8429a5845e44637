"""
Test configuration and fixtures for the inputguard test suite.

Environment variables are set before any inputguard module is imported so the
module-level pattern tables are built from the test configuration.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

os.environ.setdefault("LOGGING_ENVIRONMENT", "unit_test")
os.environ.setdefault("LOGGING_LEVEL", "DEBUG")

from inputguard.config import reset_config  # noqa: E402
from inputguard.structured_logging.enhanced_logging_config import get_logger  # noqa: E402


@pytest.fixture(autouse=True)
def reset_config_singleton() -> Generator[None, None, None]:
    """Reset the config cache before and after each test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def captured_logs() -> Generator[list[dict[str, Any]], None, None]:
    """Capture structlog entries emitted during the test."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture(autouse=True)
def restore_structlog_defaults() -> Generator[None, None, None]:
    """Undo any structlog.configure() a test performs."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def test_logger() -> Any:
    """Provide a logger for tests."""
    return get_logger(__name__)


def pytest_collection_modifyitems(config: Any, items: list[Any]) -> None:
    """Tests in unit/ get @pytest.mark.unit."""
    for item in items:
        file_path = str(item.fspath)
        if "/unit/" in file_path or "\\unit\\" in file_path:
            item.add_marker(pytest.mark.unit)
