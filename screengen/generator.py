"""
ScreenlistGenerator - Main facade for making screenlists.
Orchestrates sampling, frame extraction, layout and composition.
Follows Facade Pattern for simplified API.
"""
from pathlib import Path
from typing import Callable, List, Optional, Union
import logging

from .core.interfaces import (
    ICompositor,
    IScreenlistGenerator,
    IVideoHandle,
    ScreenlistConfig,
)
from .sheet.arguments import ConvertArgumentBuilder, build_header
from .sheet.compositor import ImageMagickCompositor
from .sheet.layout import GridLayoutCalculator, scaled_height
from .sheet.sampler import sample_timestamps
from .sheet.thumbnails import FrameFetcher, TempFileRegistry
from .video.frames import open_video

logger = logging.getLogger(__name__)


class ScreenlistGenerator(IScreenlistGenerator):
    """
    Generates a contact sheet image for a video.

    Example:
        generator = ScreenlistGenerator(ScreenlistConfig(count=12))
        output = generator.generate(Path("movie.mkv"))
    """

    def __init__(
        self,
        config: Optional[ScreenlistConfig] = None,
        compositor: Optional[ICompositor] = None,
        opener: Callable[[Union[str, Path]], IVideoHandle] = open_video
    ):
        self.config = config or ScreenlistConfig()
        self.compositor = compositor or ImageMagickCompositor(self.config.compositor)
        self.opener = opener

        self.fetcher = FrameFetcher()
        self.layout_calculator = GridLayoutCalculator()
        self.builder = ConvertArgumentBuilder(self.config)

    def generate(self, video_path: Union[str, Path]) -> Path:
        """
        Open a video and write its screenlist to the configured output.

        Raises:
            ScreengenError: on any failure; no output is produced
        """
        with self.opener(video_path) as video:
            return self.generate_from_video(video)

    def generate_from_video(self, video: IVideoHandle) -> Path:
        """Write the screenlist for an already opened video."""
        with TempFileRegistry() as registry:
            args = self.build_arguments(video, registry)
            self.compositor.run(args)

        logger.info(f"Screenlist written to {self.config.output}")
        return self.config.output

    def build_arguments(self, video: IVideoHandle, registry: TempFileRegistry) -> List[str]:
        """
        Extract thumbnails into ``registry`` and build the compositor arguments.

        The thumbnail files stay alive until the registry is cleaned up.
        """
        cfg = self.config
        thumb_height = scaled_height(cfg.thumb_width, video.width, video.height)

        timestamps = sample_timestamps(video.duration, cfg.count)
        thumbnails = self.fetcher.fetch(
            video, timestamps, cfg.thumb_width, thumb_height, registry
        )

        layout = self.layout_calculator.calculate(
            len(thumbnails),
            cfg.thumbnails_per_row,
            cfg.thumb_width,
            thumb_height,
            cfg.spacing
        )
        logger.debug(
            f"Grid {layout.columns}x{layout.rows}, canvas "
            f"{layout.canvas_width}x{layout.canvas_height}"
        )

        header = build_header(video)
        return self.builder.build(header, thumbnails, layout, cfg.output, cfg.quality)


def make_screenlist(
    video_path: Union[str, Path],
    output: Union[str, Path] = "output.jpg",
    count: int = 27,
    thumbnails_per_row: int = 3,
    quality: int = 85
) -> Path:
    """
    Convenience function to make a screenlist.

    Args:
        video_path: Path to video file
        output: Output image path
        count: Number of thumbnails
        thumbnails_per_row: Grid columns
        quality: Output image quality

    Returns:
        Path to the written screenlist
    """
    config = ScreenlistConfig(
        count=count,
        thumbnails_per_row=thumbnails_per_row,
        output=Path(output),
        quality=quality
    )
    return ScreenlistGenerator(config).generate(video_path)
