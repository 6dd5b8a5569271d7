"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path

import pytest

from s3source.source.config import S3BatchSourceConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def base_properties():
    """Flat properties for a valid Access Credentials config."""
    return {
        "referenceName": "orders",
        "path": "s3a://bucket/data/",
        "authenticationMethod": "Access Credentials",
        "accessID": "AKIAEXAMPLE",
        "accessKey": "secret",
        "region": "us-east-1",
        "fileSystemProperties": "{}",
    }


@pytest.fixture
def make_config(base_properties):
    """Factory building a config from base_properties with overrides.

    Passing None for a key removes it from the properties.
    """

    def _make(**overrides):
        properties = dict(base_properties)
        for key, value in overrides.items():
            if value is None:
                properties.pop(key, None)
            else:
                properties[key] = value
        return S3BatchSourceConfig.from_properties(properties)

    return _make


@pytest.fixture
def write_yaml(temp_dir):
    """Write YAML text to a file in temp_dir and return its path."""

    def _write(text: str, name: str = "source.yaml") -> str:
        path = temp_dir / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write
