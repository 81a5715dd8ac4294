"""Pytest configuration and shared fixtures."""

import pytest

from format_converter.session import ConverterState


@pytest.fixture
def sample_records():
    """Rows shaped like a parsed CSV document."""
    return [
        {"name": "Ann", "age": "30"},
        {"name": "Bob", "age": "41"},
    ]


@pytest.fixture
def sample_xml():
    return (
        "<people>"
        "<person><name>Ann</name><age>30</age></person>"
        "<person><name>Bob</name><age>41</age></person>"
        "</people>"
    )


@pytest.fixture
def make_upload(tmp_path):
    """Write a file under a temp dir and return its path as a string."""
    def _make(name, content):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return str(path)
    return _make


@pytest.fixture
def state():
    return ConverterState()


@pytest.fixture(autouse=True)
def download_dir(tmp_path, monkeypatch):
    """Keep downloads written during tests out of the shared temp dir."""
    path = tmp_path / "downloads"
    monkeypatch.setattr("format_converter.io_utils.DOWNLOAD_DIR", str(path))
    return path
