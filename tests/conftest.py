import os
import sys
import pytest
from pathlib import Path
from nxshot.catalog import Catalog

MARIO_ID = "0123456789abcdef0123456789abcdef"
ZELDA_ID = "fedcba9876543210fedcba9876543210"
UNKNOWN_ID = "ffffffffffffffffffffffffffffffff"


def capture_name(timestamp: str = "20230615103045", identifier: str = MARIO_ID, ext: str = ".jpg") -> str:
    """Builds a 53-character capture filename: 14-digit timestamp, 2 digits, '-', id, ext."""
    return f"{timestamp}00-{identifier}{ext}"


@pytest.fixture
def catalog():
    """A small catalog with two known games."""
    return Catalog({
        MARIO_ID: "Super Mario Odyssey",
        ZELDA_ID: "The Legend of Zelda",
    })


@pytest.fixture
def make_capture():
    """Returns a factory that writes a capture file and returns its path."""
    def _make(directory: Path, timestamp: str = "20230615103045", identifier: str = MARIO_ID,
              ext: str = ".jpg", data: bytes = b"capture") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        p = directory / capture_name(timestamp, identifier, ext)
        p.write_bytes(data)
        return p
    return _make


@pytest.fixture
def non_utf8_dir(tmp_path):
    """A directory whose name is not valid UTF-8 (surrogate-escaped by os.fsdecode)."""
    if sys.platform in ("darwin", "win32"):
        pytest.skip("filesystem rejects non-UTF-8 names")
    path = tmp_path / "album" / os.fsdecode(b"dir\xff")
    try:
        path.mkdir(parents=True)
    except (OSError, UnicodeEncodeError):
        pytest.skip("filesystem rejects non-UTF-8 names")
    return path
