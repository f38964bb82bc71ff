"""Picross generator - command line entry point."""

import argparse
import logging
import sys
from pathlib import Path

from .config_manager import ConfigManager
from .errors import PicrossError
from .image_processing import (
    ImageProcessor,
    board_to_svg,
    format_board,
    render_board_image,
)
from .models import CONFIG_FILE, BoardPolicy


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="picross",
        description="Convert an image into a picross (nonogram) board.",
    )
    parser.add_argument("image", type=Path, help="Input image file")
    parser.add_argument("--size", type=int, help="Board size (default 16)")
    parser.add_argument("--color", action="store_true", help="Keep quantized colors")
    parser.add_argument(
        "--outline",
        action="store_true",
        help="Fill only edge and color-change cells instead of the full silhouette",
    )
    parser.add_argument("--alpha-threshold", type=int, help="Opacity cutoff (default 128)")
    parser.add_argument(
        "--color-threshold", type=float, help="Color change distance (default 80)"
    )
    parser.add_argument("--png", type=Path, help="Write a PNG preview of the board")
    parser.add_argument("--svg", type=Path, help="Write an SVG preview of the board")
    parser.add_argument(
        "--config",
        type=Path,
        default=CONFIG_FILE,
        help="JSON file with default settings",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    """Generate a board from an image and print it."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = ConfigManager(args.config).load()
    if args.size is not None:
        config.board_size = args.size
    if args.color:
        config.color_mode = True
    if args.outline:
        config.board_policy = BoardPolicy.OUTLINE
    if args.alpha_threshold is not None:
        config.alpha_threshold = args.alpha_threshold
    if args.color_threshold is not None:
        config.color_threshold = args.color_threshold

    try:
        result = ImageProcessor(config).process(args.image)
    except (PicrossError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_board(result.board))

    try:
        if args.png:
            image = render_board_image(result.matrix, color_mode=config.color_mode)
            image.save(args.png)
            print(f"Saved {args.png}")
        if args.svg:
            args.svg.write_text(board_to_svg(result.board))
            print(f"Saved {args.svg}")
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
