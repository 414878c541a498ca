"""
Unit test conftest.py for signing-gate.
"""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "critical: behaviour a release build depends on"
    )
