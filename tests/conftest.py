"""
Root pytest configuration for signing-gate.

Keeps the signing environment variables from leaking into tests.
"""

import pytest

from signing_gate.build.config.logging import auto_bootstrap_logging
from signing_gate.build.config.settings import ENV_POLICY, ENV_KEY_PROPERTIES

# Auto-bootstrap logging for all tests
auto_bootstrap_logging()(None)


@pytest.fixture(autouse=True)
def clean_signing_environment(monkeypatch):
    """Remove environment overrides a developer shell may have set."""
    monkeypatch.delenv(ENV_POLICY, raising=False)
    monkeypatch.delenv(ENV_KEY_PROPERTIES, raising=False)
