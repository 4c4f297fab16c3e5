"""Shared fixtures for quiz-api tests."""

from pathlib import Path

import pytest

from tests.helpers import write_wav


@pytest.fixture
def valid_wav(tmp_path) -> Path:
    return write_wav(tmp_path / "valid.wav")
