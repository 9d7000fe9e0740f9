"""
screengen - Screenlists (contact sheets) from video files.

Samples evenly spaced frames with ffmpeg and hands them, together with a
metadata header, to ImageMagick's convert for composition.

Example usage:
    from screengen import ScreenlistGenerator, ScreenlistConfig

    config = ScreenlistConfig(count=12, thumbnails_per_row=4, output=Path("sheet.jpg"))
    ScreenlistGenerator(config).generate(Path("movie.mkv"))

    # Or in one call
    from screengen import make_screenlist
    make_screenlist("movie.mkv", "sheet.jpg", count=12)
"""

from .generator import ScreenlistGenerator, make_screenlist
from .core.interfaces import (
    Thumbnail,
    LayoutParams,
    SheetHeader,
    ScreenlistConfig,
    IVideoHandle,
    ICompositor,
)
from .core.errors import (
    ScreengenError,
    OpenError,
    ExtractionError,
    EncodingError,
    CompositionError,
    StatError,
)
from .video import VideoInfo, FrameExtractor, VideoHandle, open_video
from .sheet import (
    sample_timestamps,
    GridLayoutCalculator,
    div_round_up,
    scaled_height,
    TempFileRegistry,
    ThumbnailWriter,
    FrameFetcher,
    ConvertArgumentBuilder,
    build_header,
    file_size_label,
    ms_to_string,
    ImageMagickCompositor,
)

__version__ = "1.0.0"

__all__ = [
    # Main facade
    "ScreenlistGenerator",
    "make_screenlist",

    # Core types
    "Thumbnail",
    "LayoutParams",
    "SheetHeader",
    "ScreenlistConfig",
    "IVideoHandle",
    "ICompositor",

    # Errors
    "ScreengenError",
    "OpenError",
    "ExtractionError",
    "EncodingError",
    "CompositionError",
    "StatError",

    # Video
    "VideoInfo",
    "FrameExtractor",
    "VideoHandle",
    "open_video",

    # Screenlist building blocks
    "sample_timestamps",
    "GridLayoutCalculator",
    "div_round_up",
    "scaled_height",
    "TempFileRegistry",
    "ThumbnailWriter",
    "FrameFetcher",
    "ConvertArgumentBuilder",
    "build_header",
    "file_size_label",
    "ms_to_string",
    "ImageMagickCompositor",
]
