"""
Tests for temporary thumbnail files.
"""
import pytest
from pathlib import Path
from PIL import Image

from screengen.core.errors import EncodingError, ExtractionError
from screengen.sheet.thumbnails import FrameFetcher, TempFileRegistry, ThumbnailWriter
from conftest import FakeVideo


class TestTempFileRegistry:
    """Tests for TempFileRegistry class."""

    def test_create_registers_unique_files(self, temp_dir):
        registry = TempFileRegistry(directory=temp_dir)

        first = registry.create()
        second = registry.create()

        assert first != second
        assert first.exists() and second.exists()
        assert first.name.startswith("screengen")
        assert first.suffix == ".png"
        assert registry.paths == [first, second]

        registry.cleanup()

    def test_cleanup_removes_files(self, temp_dir):
        registry = TempFileRegistry(directory=temp_dir)
        paths = [registry.create() for _ in range(3)]

        registry.cleanup()

        assert not any(p.exists() for p in paths)
        assert registry.paths == []

    def test_cleanup_twice_is_noop(self, temp_dir):
        registry = TempFileRegistry(directory=temp_dir)
        registry.create()

        registry.cleanup()
        registry.cleanup()

        assert list(temp_dir.iterdir()) == []

    def test_context_exit_on_error(self, temp_dir):
        created = []

        with pytest.raises(RuntimeError):
            with TempFileRegistry(directory=temp_dir) as registry:
                created.append(registry.create())
                raise RuntimeError("boom")

        assert not created[0].exists()

    def test_already_removed_file_is_ignored(self, temp_dir):
        registry = TempFileRegistry(directory=temp_dir)
        path = registry.create()
        path.unlink()

        registry.cleanup()

        assert registry.paths == []


class TestThumbnailWriter:
    """Tests for ThumbnailWriter class."""

    def test_write_png(self, temp_dir, sample_frame):
        with TempFileRegistry(directory=temp_dir) as registry:
            path = ThumbnailWriter().write(sample_frame, registry)

            with Image.open(path) as img:
                assert img.format == "PNG"
                assert img.size == sample_frame.size
                assert list(img.getdata()) == list(sample_frame.getdata())

        assert not path.exists()

    def test_unwritable_directory_raises(self, temp_dir, sample_frame):
        registry = TempFileRegistry(directory=temp_dir / "missing")

        with pytest.raises(EncodingError, match="can't write thumbnail"):
            ThumbnailWriter().write(sample_frame, registry)


class TestFrameFetcher:
    """Tests for FrameFetcher class."""

    def test_fetch_in_order(self, temp_dir, fake_video):
        with TempFileRegistry(directory=temp_dir) as registry:
            thumbnails = FrameFetcher().fetch(
                fake_video, [0, 90000, 180000], 256, 144, registry
            )

            assert [t.timestamp for t in thumbnails] == [0, 90000, 180000]
            assert all(t.image_path.exists() for t in thumbnails)
            assert fake_video.requests == [
                (0, 256, 144), (90000, 256, 144), (180000, 256, 144)
            ]
            with Image.open(thumbnails[0].image_path) as img:
                assert img.size == (256, 144)

    def test_extraction_failure_aborts(self, temp_dir, sample_video_file):
        video = FakeVideo(sample_video_file, fail_at=90000)
        scratch = temp_dir / "scratch"
        scratch.mkdir()

        with pytest.raises(ExtractionError):
            with TempFileRegistry(directory=scratch) as registry:
                FrameFetcher().fetch(video, [0, 90000, 180000], 64, 36, registry)

        assert [r[0] for r in video.requests] == [0, 90000]
        assert list(scratch.iterdir()) == []
