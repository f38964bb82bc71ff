"""Image processing pipeline for image-to-picross conversion.

AIDEV-NOTE: This package handles the complete pipeline from an RGBA
buffer to a picross board. Organized into modular components:
- processor: Pipeline entry points and image loading
- utils: Buffer validation, bounding box and nearest-neighbor rescaling
- pixels: Pixel sampling and neighbor tests
- quantization: RGB332 color indices
- board: Cell classification and presentation cells
- clues: Run-length clues and completion tracking
- rendering: PNG, SVG and text previews
"""

from .clues import build_line_clues, recalculate_clue_colors
from .processor import (
    ImageProcessor,
    load_image_data,
    process_image_data,
    process_image_file,
)
from .quantization import color_to_index, index_to_color
from .rendering import board_to_svg, format_board, render_board_image

__all__ = [
    "ImageProcessor",
    "board_to_svg",
    "build_line_clues",
    "color_to_index",
    "format_board",
    "index_to_color",
    "load_image_data",
    "process_image_data",
    "process_image_file",
    "recalculate_clue_colors",
    "render_board_image",
]
