# tests/conftest.py
"""
Shared Test Fixtures

Files that USE this module:
- pytest (fixtures are injected into every test module)

Files that this module USES:
- ratetable.config.defaults (default_config)
- ratetable.application.rates_service (RateLookupService)
"""
import logging  # Root logger state restored around logging tests

import pytest  # Testing framework for writing and running tests

from ratetable.application.rates_service import RateLookupService  # Service under test
from ratetable.config.defaults import default_config  # Baseline configuration


@pytest.fixture
def default_service():
    return RateLookupService(default_config())


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Empty working directory and no service environment variables."""
    monkeypatch.chdir(tmp_path)
    for name in ("PORT", "HOST", "LOG_LEVEL", "LOG_FILE", "LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
