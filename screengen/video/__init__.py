"""
Video module for screengen.
Provides video metadata and frame extraction backed by ffprobe/ffmpeg.
"""
from .info import VideoInfo
from .frames import (
    FrameExtractor,
    VideoHandle,
    open_video,
)

__all__ = [
    "VideoInfo",
    "FrameExtractor",
    "VideoHandle",
    "open_video",
]
