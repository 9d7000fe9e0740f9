"""
ImageMagick ``convert`` argument construction.
Lays out a metadata header above the thumbnail grid and appends the two.
"""
import os
from pathlib import Path
from typing import List, Sequence, Union

from ..core.errors import StatError
from ..core.interfaces import (
    IVideoHandle,
    LayoutParams,
    ScreenlistConfig,
    SheetHeader,
    Thumbnail,
)


def ms_to_string(ms: int) -> str:
    """Format milliseconds as HH:MM:SS, dropping sub-second precision."""
    s = ms // 1000
    h = s // 3600
    m = (s % 3600) // 60
    s = s % 60
    return f"{h:02d}:{m:02d}:{s:02d}"


def file_size_label(path: Union[str, Path]) -> str:
    """File size in whole mebibytes, labelled "Mb"."""
    try:
        size = os.stat(path).st_size
    except OSError as e:
        raise StatError(f"can't get file size: {e}") from e
    return f"{size // 1024 // 1024} Mb"


def build_header(video: IVideoHandle) -> SheetHeader:
    """Collect header values for a video."""
    return SheetHeader(
        filename=video.filename,
        size=file_size_label(video.filename),
        duration=ms_to_string(video.duration),
        resolution=f"{video.width}x{video.height}",
        video_codec=video.video_codec_name,
        audio_codec=video.audio_codec_name,
    )


def quote_text(text: str) -> str:
    """Single-quote text for a -draw primitive."""
    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def draw_text(x: int, y: int, text: str) -> List[str]:
    return ["-draw", f"text {x},{y} {quote_text(text)}"]


class ConvertArgumentBuilder:
    """Builds the full ``convert`` argument list. Deterministic."""

    def __init__(self, config: ScreenlistConfig):
        self.config = config

    def build(
        self,
        header: SheetHeader,
        thumbnails: Sequence[Thumbnail],
        layout: LayoutParams,
        output: Union[str, Path],
        quality: int
    ) -> List[str]:
        args = self.header_panel(header, layout)
        args += self.grid_panel(thumbnails, layout)
        args += ["-append", "-quality", str(quality), str(output)]
        return args

    def header_panel(self, header: SheetHeader, layout: LayoutParams) -> List[str]:
        """White panel with bold labels and regular-weight values."""
        cfg = self.config
        top = cfg.spacing * 2
        rows = header.rows()

        args = [
            "(",
            "-size", f"{layout.canvas_width}x{cfg.header_height}",
            "xc:white",
            "-fill", "black",
            "-font", cfg.bold_font,
        ]
        for i, (label, _) in enumerate(rows):
            args += draw_text(cfg.spacing, top + i * cfg.line_height, label)

        args += ["-font", cfg.font]
        for i, (_, value) in enumerate(rows):
            args += draw_text(cfg.spacing + cfg.value_offset, top + i * cfg.line_height, value)

        args.append(")")
        return args

    def grid_panel(self, thumbnails: Sequence[Thumbnail], layout: LayoutParams) -> List[str]:
        """
        Thumbnails composited row-major, each labelled with its timestamp.

        The label is drawn in black and again in white one pixel down-right so
        it stays readable on both light and dark frames.
        """
        offset = self.config.label_offset
        args = [
            "(",
            "-size", f"{layout.canvas_width}x{layout.canvas_height}",
            "xc:white",
            "-gravity", "northwest",
            "-font", self.config.font,
        ]
        for i, thumb in enumerate(thumbnails):
            x, y = layout.position(i)
            label = ms_to_string(thumb.timestamp)
            args += [
                str(thumb.image_path),
                "-geometry", f"+{x}+{y}",
                "-composite",
                "-fill", "black",
            ]
            args += draw_text(x + offset, y + offset, label)
            args += ["-fill", "white"]
            args += draw_text(x + offset + 1, y + offset + 1, label)

        args.append(")")
        return args
