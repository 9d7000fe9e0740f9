"""
Frame extraction using ffmpeg.
Decoded frames are piped back as raw RGB and wrapped as Pillow images.
"""
import subprocess
from pathlib import Path
from typing import Union
import logging

import numpy as np
from PIL import Image

from ..core.errors import ExtractionError
from ..core.interfaces import IVideoHandle
from .info import VideoInfo

logger = logging.getLogger(__name__)


class FrameExtractor:
    """Extracts single scaled frames from a video. Single Responsibility."""

    def __init__(self, ffmpeg: str = "ffmpeg"):
        self.ffmpeg = ffmpeg

    def _build_command(
        self,
        video_path: Path,
        timestamp: int,
        width: int,
        height: int
    ) -> list:
        """Build ffmpeg raw frame capture command."""
        return [
            self.ffmpeg, "-v", "error",
            "-ss", f"{timestamp / 1000:.3f}",
            "-i", str(video_path),
            "-frames:v", "1",
            "-vf", f"scale={width}:{height}",
            "-f", "rawvideo",
            "-pix_fmt", "rgb24",
            "-"
        ]

    def extract(
        self,
        video_path: Path,
        timestamp: int,
        width: int,
        height: int
    ) -> Image.Image:
        """
        Extract the frame at a timestamp.

        Args:
            video_path: Source video path
            timestamp: Time in milliseconds
            width: Target width
            height: Target height

        Returns:
            RGB image of exactly width x height pixels
        """
        cmd = self._build_command(video_path, timestamp, width, height)
        try:
            result = subprocess.run(cmd, capture_output=True)
        except OSError as e:
            raise ExtractionError(f"{self.ffmpeg} could not be started: {e}", timestamp) from e

        if result.returncode != 0:
            stderr = result.stderr.decode(errors="replace").strip()
            logger.error(f"Frame extraction failed at {timestamp} ms: {stderr}")
            raise ExtractionError(
                f"can't extract image at {timestamp} ms: {stderr or 'ffmpeg failed'}",
                timestamp
            )

        expected = width * height * 3
        if len(result.stdout) < expected:
            raise ExtractionError(
                f"can't extract image at {timestamp} ms: "
                f"got {len(result.stdout)} of {expected} bytes",
                timestamp
            )

        pixels = np.frombuffer(result.stdout[:expected], dtype=np.uint8)
        logger.debug(f"Extracted frame at {timestamp} ms")
        return Image.fromarray(pixels.reshape((height, width, 3)))


class VideoHandle(IVideoHandle):
    """
    An opened video backed by ffprobe metadata and ffmpeg frame extraction.
    """

    def __init__(self, path: Union[str, Path], info: VideoInfo, extractor: FrameExtractor):
        self._filename = str(path)
        self.info = info
        self.extractor = extractor

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def duration(self) -> int:
        return self.info.duration

    @property
    def width(self) -> int:
        return self.info.width

    @property
    def height(self) -> int:
        return self.info.height

    @property
    def video_codec_name(self) -> str:
        return self.info.video_codec_long

    @property
    def audio_codec_name(self) -> str:
        return self.info.audio_codec_long

    def frame_at(self, timestamp: int, width: int, height: int) -> Image.Image:
        return self.extractor.extract(self.info.input_path, timestamp, width, height)


def open_video(
    path: Union[str, Path],
    ffprobe: str = "ffprobe",
    ffmpeg: str = "ffmpeg"
) -> VideoHandle:
    """
    Open a video file for metadata queries and frame extraction.

    Raises:
        OpenError: if the file is missing or not a readable video
    """
    info = VideoInfo(Path(path), ffprobe=ffprobe)
    info.load()
    logger.info(f"Opened {path}: {info.width}x{info.height}, {info.duration} ms")
    return VideoHandle(path, info, FrameExtractor(ffmpeg))
