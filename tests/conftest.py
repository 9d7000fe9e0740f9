"""
Pytest configuration and fixtures for screengen tests.
"""
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import List, Optional
from PIL import Image
import numpy as np

from screengen.core.errors import ExtractionError
from screengen.core.interfaces import ICompositor, IVideoHandle


class FakeVideo(IVideoHandle):
    """In-memory video handle producing gradient frames."""

    def __init__(
        self,
        path: Path,
        duration: int = 270_000,
        width: int = 1920,
        height: int = 1080,
        fail_at: Optional[int] = None
    ):
        self._path = path
        self._duration = duration
        self._width = width
        self._height = height
        self.fail_at = fail_at
        self.requests = []
        self.closed = False

    @property
    def filename(self) -> str:
        return str(self._path)

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def video_codec_name(self) -> str:
        return "H.264 / AVC / MPEG-4 AVC / MPEG-4 part 10"

    @property
    def audio_codec_name(self) -> str:
        return "AAC (Advanced Audio Coding)"

    def frame_at(self, timestamp: int, width: int, height: int) -> Image.Image:
        self.requests.append((timestamp, width, height))
        if timestamp == self.fail_at:
            raise ExtractionError(f"can't extract image at {timestamp} ms", timestamp)
        row = np.linspace(0, 255, width, dtype=np.uint8)
        pixels = np.stack([np.tile(row, (height, 1))] * 3, axis=-1)
        return Image.fromarray(pixels)

    def close(self) -> None:
        self.closed = True


class RecordingCompositor(ICompositor):
    """Compositor that records arguments and which inputs existed."""

    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.calls: List[List[str]] = []
        self.inputs_existed: List[bool] = []

    def run(self, args: List[str]) -> None:
        self.calls.append(list(args))
        self.inputs_existed = [Path(a).exists() for a in args if a.endswith(".png")]
        if self.error is not None:
            raise self.error


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="screengen_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sample_video_file(temp_dir) -> Path:
    """A 3 MiB (plus change) file standing in for a video."""
    path = temp_dir / "movie.mkv"
    with open(path, "wb") as f:
        f.truncate(3 * 1024 * 1024 + 500)
    return path


@pytest.fixture
def fake_video(sample_video_file) -> FakeVideo:
    return FakeVideo(sample_video_file)


@pytest.fixture
def compositor() -> RecordingCompositor:
    return RecordingCompositor()


@pytest.fixture
def isolated_tempdir(temp_dir, monkeypatch) -> Path:
    """Route tempfile to a private directory so leftovers can be listed."""
    scratch = temp_dir / "scratch"
    scratch.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(scratch))
    return scratch


@pytest.fixture
def sample_frame() -> Image.Image:
    """A small RGB frame with some variation."""
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, size=(36, 64, 3), dtype=np.uint8)
    return Image.fromarray(pixels)
