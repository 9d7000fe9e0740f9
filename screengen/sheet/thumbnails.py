"""
Thumbnail fetching and temporary file management.
Frames are encoded as PNG into temporary files that live until the
compositor has run.
"""
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence
import logging

from PIL import Image

from ..core.errors import EncodingError
from ..core.interfaces import IVideoHandle, Thumbnail

logger = logging.getLogger(__name__)


class TempFileRegistry:
    """
    Creates temporary files and removes all of them when the scope exits.

    Files are registered as soon as they are created, so a failure in any
    later stage still removes them.
    """

    def __init__(self, prefix: str = "screengen", directory: Optional[Path] = None):
        self.prefix = prefix
        self.directory = directory
        self._paths: List[Path] = []

    @property
    def paths(self) -> List[Path]:
        return list(self._paths)

    def create(self, suffix: str = ".png") -> Path:
        """Create a new, uniquely named empty file and register it."""
        fd, name = tempfile.mkstemp(
            prefix=self.prefix,
            suffix=suffix,
            dir=str(self.directory) if self.directory else None
        )
        os.close(fd)
        path = Path(name)
        self._paths.append(path)
        return path

    def cleanup(self) -> None:
        """Remove every registered file. Safe to call more than once."""
        while self._paths:
            path = self._paths.pop()
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                logger.warning(f"Could not remove temporary file {path}: {e}")

    def __enter__(self) -> "TempFileRegistry":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()


class ThumbnailWriter:
    """Encodes frames as lossless PNG temp files. Single Responsibility."""

    def write(self, image: Image.Image, registry: TempFileRegistry) -> Path:
        """
        Write an image to a fresh temporary file.

        Raises:
            EncodingError: if the file cannot be created or written
        """
        try:
            path = registry.create(suffix=".png")
            image.save(path, "PNG")
        except OSError as e:
            raise EncodingError(f"can't write thumbnail: {e}") from e
        return path


class FrameFetcher:
    """Fetches frames at sampled timestamps and stores them as thumbnails."""

    def __init__(self, writer: Optional[ThumbnailWriter] = None):
        self.writer = writer or ThumbnailWriter()

    def fetch(
        self,
        video: IVideoHandle,
        timestamps: Sequence[int],
        width: int,
        height: int,
        registry: TempFileRegistry
    ) -> List[Thumbnail]:
        """
        Extract and store one thumbnail per timestamp, in order.

        Any extraction or encoding error aborts immediately; files created so
        far stay registered for cleanup.
        """
        thumbnails = []
        for i, timestamp in enumerate(timestamps):
            image = video.frame_at(timestamp, width, height)
            path = self.writer.write(image, registry)
            thumbnails.append(Thumbnail(timestamp=timestamp, image_path=path))
            logger.debug(f"Thumbnail {i + 1}/{len(timestamps)} at {timestamp} ms -> {path}")
        return thumbnails
