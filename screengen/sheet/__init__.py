"""
Screenlist building blocks: sampling, layout, thumbnails, arguments, composition.
"""
from .sampler import sample_timestamps
from .layout import GridLayoutCalculator, div_round_up, scaled_height
from .thumbnails import TempFileRegistry, ThumbnailWriter, FrameFetcher
from .arguments import (
    ConvertArgumentBuilder,
    build_header,
    file_size_label,
    ms_to_string,
)
from .compositor import ImageMagickCompositor

__all__ = [
    # Sampling and layout
    "sample_timestamps",
    "GridLayoutCalculator",
    "div_round_up",
    "scaled_height",

    # Thumbnails
    "TempFileRegistry",
    "ThumbnailWriter",
    "FrameFetcher",

    # Arguments
    "ConvertArgumentBuilder",
    "build_header",
    "file_size_label",
    "ms_to_string",

    # Composition
    "ImageMagickCompositor",
]
