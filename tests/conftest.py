"""
Shared fixtures.

The package logger does not propagate to the root logger, which is where
pytest's caplog handler lives, so tests re-enable propagation.
"""

import pytest

from agentshield_hook.logger import logger


@pytest.fixture(autouse=True)
def propagate_package_logs(monkeypatch):
    monkeypatch.setattr(logger, "propagate", True)
