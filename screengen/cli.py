"""Command-line interface for screengen."""

import argparse
import logging
import sys
from pathlib import Path

from .core.errors import ScreengenError
from .core.interfaces import ScreenlistConfig
from .generator import ScreenlistGenerator


PROG = "screengen"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage=argparse.SUPPRESS,
        description="Makes screenlists from video files with ImageMagick's convert.",
        add_help=False,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("videofiles", nargs="*", help=argparse.SUPPRESS)

    options = parser.add_argument_group("Options")
    options.add_argument("-n", type=int, default=27, help="Number of thumbnails")
    options.add_argument(
        "-thumbnails-per-row",
        dest="thumbnails_per_row",
        type=int,
        default=3,
        help="Thumbnails per row",
    )
    options.add_argument("-o", dest="output", default="output.jpg", help="Output file")
    options.add_argument("-quality", type=int, default=85, help="Output image quality")
    options.add_argument(
        "-v", "-verbose", dest="verbose", action="store_true", help="Enable debug logging"
    )
    options.add_argument(
        "-h", "-help", "--help", dest="help", action="store_true", help="Show this message"
    )
    return parser


def print_usage(parser: argparse.ArgumentParser) -> None:
    print(f"Usage: {PROG} [options] videofile")
    print(parser.format_help().strip("\n"))


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    if args.help or len(args.videofiles) != 1:
        print_usage(parser)
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ScreenlistConfig(
            count=args.n,
            thumbnails_per_row=args.thumbnails_per_row,
            output=Path(args.output),
            quality=args.quality,
        )
        ScreenlistGenerator(config).generate(args.videofiles[0])
    except (ScreengenError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
