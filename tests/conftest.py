"""Shared pytest fixtures for save-license tests."""

import textwrap

import pytest

from save_license.reporting import RecordingReporter


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def write_source(tmp_path):
    """Write a dedented source file under tmp_path and return its path."""

    def _write(name: str, source: str, encoding: str = "utf-8"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(source), encoding=encoding)
        return path

    return _write
