"""Pytest configuration for rasm tests."""

import os
from typing import Any

import pytest

from .rasm.utils import gradient, write_image


@pytest.fixture
def photo(tmp_path: Any) -> str:
    """A 10x8 PNG file with distinct pixels."""
    return write_image(os.fspath(tmp_path / "photo.png"), gradient(10, 8))
