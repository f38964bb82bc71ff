"""Main image processor orchestrating the image-to-board pipeline.

AIDEV-NOTE: process_image_data is the core entry point and works on raw
RGBA buffers only. Decoding files and bytes into such buffers happens in
load_image_data, which is the only place that talks to Pillow.
"""

import io
import logging
from pathlib import Path

from PIL import Image

from ..errors import ImageAcquisitionError
from ..models import ProcessingConfig, ProcessingResult
from .board import build_board_data, build_board_matrix
from .utils import calculate_bounding_box, scale_image_data, to_rgba_buffer

logger = logging.getLogger(__name__)


def resolve_config(config: "ProcessingConfig | dict | None" = None) -> ProcessingConfig:
    """Resolve an optional config or partial mapping into a validated config."""
    if config is None:
        config = ProcessingConfig()
    elif isinstance(config, dict):
        config = ProcessingConfig.from_dict(config)
    config.validate()
    return config


def process_image_data(
    data,
    width: int,
    height: int,
    config: "ProcessingConfig | dict | None" = None,
) -> ProcessingResult:
    """Convert a raw RGBA buffer into a picross board.

    Args:
        data: Flat RGBA pixel data, row-major, 4 bytes per pixel
        width: Image width in pixels
        height: Image height in pixels
        config: ProcessingConfig, partial mapping or None for defaults

    Returns:
        ProcessingResult with the board, its size and the raw matrix

    Raises:
        InvalidImageBufferError: If the buffer does not match width x height
        ValueError: If the config is invalid
    """
    config = resolve_config(config)
    buffer = to_rgba_buffer(data, width, height)
    width, height = int(width), int(height)

    # Step 1: Find bounding box
    bbox = calculate_bounding_box(buffer, width, height, config.alpha_threshold)
    logger.debug(f"Bounding box for {width}x{height} image: {bbox}")

    # Step 2: Resample crop to board size
    scaled = scale_image_data(buffer, width, height, bbox, config.board_size)

    # Step 3: Classify cells
    matrix = build_board_matrix(scaled, config)

    # Step 4: Presentation cells and clues
    board = build_board_data(matrix, config.color_mode)

    return ProcessingResult(
        board=board,
        board_size=config.board_size,
        matrix=matrix,
        bounding_box=bbox,
    )


def load_image_data(
    source: "str | Path | bytes | Image.Image",
) -> "tuple[bytes, int, int]":
    """Decode an image source into an RGBA buffer.

    Args:
        source: Path to an image file, encoded image bytes or a PIL image

    Returns:
        Tuple of (rgba_bytes, width, height)

    Raises:
        ImageAcquisitionError: If the source cannot be read or decoded
    """
    try:
        if isinstance(source, Image.Image):
            image = source
        elif isinstance(source, (bytes, bytearray)):
            image = Image.open(io.BytesIO(source))
        else:
            image = Image.open(source)
        # AIDEV-NOTE: Always convert to RGBA for consistent processing
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        width, height = image.size
        return image.tobytes(), width, height
    except Exception as e:
        raise ImageAcquisitionError(f"Failed to load image: {e}") from e


class ImageProcessor:
    """Converts images into picross boards with a fixed configuration."""

    def __init__(self, config: "ProcessingConfig | dict | None" = None):
        self.config = resolve_config(config)

    def load_image(
        self, source: "str | Path | bytes | Image.Image"
    ) -> "tuple[bytes, int, int]":
        """Decode an image source into (rgba_bytes, width, height)."""
        return load_image_data(source)

    def process_image_data(self, data, width: int, height: int) -> ProcessingResult:
        """Run the pipeline on an already decoded RGBA buffer."""
        return process_image_data(data, width, height, self.config)

    def process(self, source: "str | Path | bytes | Image.Image") -> ProcessingResult:
        """Load an image source and run the complete pipeline.

        Raises:
            ImageAcquisitionError: If the image cannot be loaded
        """
        data, width, height = self.load_image(source)
        logger.debug(f"Loaded image with size: {width}x{height} pixels")
        result = self.process_image_data(data, width, height)
        logger.info(
            f"Generated {result.board_size}x{result.board_size} board "
            f"({self.config.board_policy.value}, "
            f"{'color' if self.config.color_mode else 'mono'})"
        )
        return result


def process_image_file(
    file_path: "str | Path",
    config: "ProcessingConfig | dict | None" = None,
) -> ProcessingResult:
    """Load an image file and convert it into a picross board."""
    return ImageProcessor(config).process(file_path)
