"""Shared fixtures for ossd_validator tests."""

import copy
import logging
from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parent / "fixtures"

_MINIMAL_PROJECT = {
    "version": 3,
    "slug": "example-project",
    "name": "Example Project",
}

_MINIMAL_COLLECTION = {
    "version": 3,
    "slug": "example-collection",
    "name": "Example Collection",
    "projects": ["example-project"],
}


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def project():
    return copy.deepcopy(_MINIMAL_PROJECT)


@pytest.fixture
def collection():
    return copy.deepcopy(_MINIMAL_COLLECTION)


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers the CLI installs so they do not outlive captured streams."""
    yield
    logger = logging.getLogger("ossd_validator")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
