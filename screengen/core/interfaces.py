"""
Abstract interfaces following Interface Segregation Principle (SOLID).
Defines contracts and data types for all screengen components.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Tuple
from dataclasses import dataclass, field

from PIL import Image


@dataclass(frozen=True)
class Thumbnail:
    """A sampled frame: its timestamp and the temporary image holding it."""
    timestamp: int
    image_path: Path


@dataclass(frozen=True)
class LayoutParams:
    """Grid geometry derived from thumbnail count and size."""
    thumb_width: int
    thumb_height: int
    columns: int
    rows: int
    spacing: int
    canvas_width: int
    canvas_height: int

    def position(self, index: int) -> Tuple[int, int]:
        """Top-left corner of the thumbnail at ``index`` (row-major)."""
        row, col = divmod(index, self.columns)
        x = col * (self.thumb_width + self.spacing) + self.spacing
        y = row * (self.thumb_height + self.spacing) + self.spacing
        return x, y


@dataclass(frozen=True)
class SheetHeader:
    """Values rendered in the metadata panel above the grid."""
    filename: str
    size: str
    duration: str
    resolution: str
    video_codec: str
    audio_codec: str

    def rows(self) -> List[Tuple[str, str]]:
        """Label/value pairs in display order."""
        return [
            ("Filename:", self.filename),
            ("Size:", self.size),
            ("Duration:", self.duration),
            ("Resolution:", self.resolution),
            ("Video:", self.video_codec),
            ("Audio:", self.audio_codec),
        ]


@dataclass
class ScreenlistConfig:
    """Configuration for screenlist generation."""
    count: int = 27
    thumbnails_per_row: int = 3
    output: Path = field(default_factory=lambda: Path("output.jpg"))
    quality: int = 85
    thumb_width: int = 256
    spacing: int = 16
    header_height: int = 128
    value_offset: int = 80
    line_height: int = 16
    label_offset: int = 5
    font: str = "LiberationSans"
    bold_font: str = "LiberationSansB"
    compositor: str = "convert"

    def __post_init__(self):
        self.output = Path(self.output)
        if self.count < 1:
            raise ValueError(f"Number of thumbnails must be at least 1, got {self.count}")
        if self.thumbnails_per_row < 1:
            raise ValueError(
                f"Thumbnails per row must be at least 1, got {self.thumbnails_per_row}"
            )
        if self.thumb_width < 1:
            raise ValueError(f"Thumbnail width must be positive, got {self.thumb_width}")
        if not 0 <= self.quality <= 100:
            raise ValueError(f"Quality must be between 0 and 100, got {self.quality}")


class IVideoHandle(ABC):
    """Interface for an opened video: metadata plus frame extraction."""

    @property
    @abstractmethod
    def filename(self) -> str:
        """Source path as given by the caller."""
        pass

    @property
    @abstractmethod
    def duration(self) -> int:
        """Duration in milliseconds."""
        pass

    @property
    @abstractmethod
    def width(self) -> int:
        pass

    @property
    @abstractmethod
    def height(self) -> int:
        pass

    @property
    @abstractmethod
    def video_codec_name(self) -> str:
        """Display name of the video codec."""
        pass

    @property
    @abstractmethod
    def audio_codec_name(self) -> str:
        """Display name of the audio codec, empty if there is no audio."""
        pass

    @abstractmethod
    def frame_at(self, timestamp: int, width: int, height: int) -> Image.Image:
        """Decode the frame at ``timestamp`` ms scaled to width x height."""
        pass

    def close(self) -> None:
        """Release the handle."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class ICompositor(ABC):
    """Interface for the external image compositor."""

    @abstractmethod
    def run(self, args: List[str]) -> None:
        """Execute the compositor with the given argument list."""
        pass


class IScreenlistGenerator(ABC):
    """Interface for screenlist generation."""

    @abstractmethod
    def generate(self, video_path: Path) -> Path:
        """Generate a screenlist for a video and return the output path."""
        pass
