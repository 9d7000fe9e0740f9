"""
Example: Screenlists with screengen

This example demonstrates how to:
- Inspect a video through its handle
- Build the convert arguments without running convert
- Generate a screenlist with a custom grid
"""
import sys
from pathlib import Path

from screengen import (
    ScreenlistConfig,
    ScreenlistGenerator,
    TempFileRegistry,
    make_screenlist,
    ms_to_string,
    open_video,
)


def show_video_info(video_path: Path):
    """Print the values that end up in the screenlist header."""
    with open_video(video_path) as video:
        print(f"Video: {video.filename}")
        print(f"  Duration: {ms_to_string(video.duration)}")
        print(f"  Dimensions: {video.width}x{video.height}")
        print(f"  Video codec: {video.video_codec_name}")
        print(f"  Audio codec: {video.audio_codec_name or '-'}")


def preview_arguments(video_path: Path):
    """Print the convert command for a small grid."""
    generator = ScreenlistGenerator(ScreenlistConfig(count=6, thumbnails_per_row=2))

    with open_video(video_path) as video, TempFileRegistry() as registry:
        args = generator.build_arguments(video, registry)
        print("convert " + " ".join(args))


def generate_wide_sheet(video_path: Path, output_path: Path):
    """Generate a screenlist with five thumbnails per row."""
    config = ScreenlistConfig(
        count=30,
        thumbnails_per_row=5,
        output=output_path,
        quality=90
    )
    result = ScreenlistGenerator(config).generate(video_path)
    print(f"Screenlist generated: {result}")
    return result


def main():
    """Main example entry point."""
    if len(sys.argv) < 2:
        print("Usage: python video_processing.py <video_path>")
        sys.exit(1)

    video_path = Path(sys.argv[1])
    if not video_path.exists():
        print(f"Video not found: {video_path}")
        sys.exit(1)

    print("=" * 50)
    print("Video Information")
    print("=" * 50)
    show_video_info(video_path)

    print("\n" + "=" * 50)
    print("Convert Arguments")
    print("=" * 50)
    preview_arguments(video_path)

    print("\n" + "=" * 50)
    print("Wide Screenlist")
    print("=" * 50)
    generate_wide_sheet(video_path, video_path.with_suffix(".sheet.jpg"))

    print("\n" + "=" * 50)
    print("Quick Screenlist (convenience function)")
    print("=" * 50)
    print(f"Quick screenlist: {make_screenlist(video_path, count=9)}")


if __name__ == "__main__":
    main()
