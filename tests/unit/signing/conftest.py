"""
Pytest fixtures for signing tests.

Each test gets its own project directory under pytest's tmp_path.
"""

import pytest

from .base import COMPLETE_PROPERTIES, render_properties


@pytest.fixture
def project_root(tmp_path):
    root = tmp_path / "android"
    root.mkdir()
    return root


@pytest.fixture
def write_key_properties(project_root):
    """Return a writer for <project_root>/key.properties."""
    def _write(values=None, **overrides):
        data = dict(COMPLETE_PROPERTIES if values is None else values)
        for key, value in overrides.items():
            if value is None:
                data.pop(key, None)
            else:
                data[key] = value
        path = project_root / "key.properties"
        path.write_text(render_properties(data), encoding="latin-1")
        return path
    return _write
