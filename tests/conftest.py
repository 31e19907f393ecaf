"""
Root conftest.py — Shared fixtures for all tests.
"""

import textwrap

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast, isolated unit tests")


# ---------------------------------------------------------------------------
# Properties file helpers
# ---------------------------------------------------------------------------

UPLOAD_PROPERTIES = """\
keyAlias=upload
keyPassword=secret123
storeFile=/keys/upload.jks
storePassword=secret456
"""


@pytest.fixture
def properties_file_factory(tmp_path):
    """Factory that writes a properties file under tmp_path and returns its path."""

    def _make(content: str = UPLOAD_PROPERTIES, name: str = "key.properties"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _make


@pytest.fixture
def upload_properties(properties_file_factory):
    """A complete key.properties for the 'upload' key."""
    return properties_file_factory()


@pytest.fixture
def missing_properties(tmp_path):
    """A path where no properties file exists."""
    return tmp_path / "key.properties"
