"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from cenv.adapters.mock import MockAdapter


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own cenv settings out of the tests."""
    for var in ("CENV_CONFIG", "CENV_LOG_LEVEL", "CENV_LOG_FILE", "CENV_LOG_FILE_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put them back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def mock_vcs() -> MockAdapter:
    """A git stand-in that succeeds without touching the filesystem."""
    return MockAdapter(adapter_name="git")


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Target path for a new project (does not exist yet)."""
    return tmp_path / "demo"
