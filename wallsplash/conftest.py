"""
conftest.py

Test configuration for wallsplash tests.

Defines Pytest fixtures for supplying test data to tests across the entire
test suite. Fixtures used within only a single module are defined
directly in that module. Conftest.py should only be used for universal
fixtures to avoid unnecessary performance hit.
"""

from pathlib import Path

import pytest

import wallsplash.console as wallsplash_console


# smallest byte sequence that still starts and ends like a JPEG
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + b"\x00" * 16 + b"\xff\xd9"


@pytest.fixture(autouse=True)
def reset_console():
    """
    --quiet and --debug change module level console state. Put the consoles back after
    every test so output settings never leak between tests.
    """

    yield

    for each in (
        wallsplash_console.console,
        wallsplash_console.error_console,
        wallsplash_console.log_console,
    ):
        each.file = None

    wallsplash_console.set_verbosity("verbose")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return JPEG_BYTES


@pytest.fixture
def image_dir(tmp_path) -> Path:
    """
    Directory holding three wallpapers, a subdirectory and a file inside that
    subdirectory. Only the three top level files count as images.
    """

    directory = tmp_path / "wallpapers"
    directory.mkdir()

    for name in ("mountain.jpg", "lake.jpg", "forest.png"):
        (directory / name).write_bytes(JPEG_BYTES)

    nested = directory / "archive"
    nested.mkdir()
    (nested / "old.jpg").write_bytes(JPEG_BYTES)

    return directory


@pytest.fixture
def empty_dir(tmp_path) -> Path:
    directory = tmp_path / "empty"
    directory.mkdir()
    return directory
