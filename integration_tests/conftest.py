"""Pytest configuration for integration tests."""

import pytest

from maxlift.db import engine


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the data directory at a throwaway folder."""
    monkeypatch.setattr(engine, "DATA_DIR", tmp_path)
    return tmp_path
