import tempfile
from pathlib import Path

import pytest

from hope.events import CurlStatus, Info, PianobarStatus, Song


@pytest.fixture
def info():
    return Info(
        pianobar_status=PianobarStatus(code=1, message="Everything is fine :)"),
        curl_status=CurlStatus(code=0, message="No error"),
        song=Song(duration=0, played=0),
        rating=0,
    )


@pytest.fixture
def socket_path():
    # Unix socket paths are limited to ~100 characters, pytest's tmp_path can be longer.
    with tempfile.TemporaryDirectory(prefix="hope-") as directory:
        yield Path(directory) / "hope.sock"
