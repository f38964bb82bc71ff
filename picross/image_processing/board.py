"""Classify rescaled pixels into a raw board and build presentation cells.

AIDEV-NOTE: The raw matrix uses EMPTY_CELL (-1) for empty cells and 0..255
for filled cells. Presentation cells are derived from it once; after that
only the player state (`pushed`, `marked`) changes.
"""

import logging

import numpy as np

from ..models import (
    BACKGROUND_COLOR,
    EMPTY_CELL,
    FOREGROUND_COLOR,
    MONO_FILL,
    BoardPolicy,
    PicrossBoardData,
    PicrossCellData,
    PicrossRowData,
    ProcessingConfig,
)
from .clues import build_clues
from .pixels import (
    get_pixel_data,
    has_significant_color_change,
    has_transparent_neighbor,
    is_opaque,
)
from .quantization import color_to_index, index_to_css

logger = logging.getLogger(__name__)


def _is_filled(
    data: np.ndarray, row: int, col: int, config: ProcessingConfig
) -> bool:
    size = config.board_size
    if not is_opaque(data, size, row, col, config.alpha_threshold):
        return False

    if config.board_policy == BoardPolicy.OUTLINE:
        return has_transparent_neighbor(
            data, size, row, col, config.alpha_threshold
        ) or has_significant_color_change(
            data, size, row, col, config.color_threshold, config.alpha_threshold
        )

    return True


def build_board_matrix(
    data: np.ndarray, config: ProcessingConfig
) -> "list[list[int]]":
    """Convert a rescaled board_size x board_size RGBA buffer to a raw matrix.

    Args:
        data: Flat RGBA buffer from scale_image_data
        config: Resolved processing configuration

    Returns:
        Row-major matrix of EMPTY_CELL, MONO_FILL or color indices
    """
    size = config.board_size
    matrix = [[EMPTY_CELL] * size for _ in range(size)]

    for row in range(size):
        for col in range(size):
            if not _is_filled(data, row, col, config):
                continue
            if config.color_mode:
                pixel = get_pixel_data(data, size, row, col)
                matrix[row][col] = color_to_index(pixel, config.alpha_threshold)
            else:
                matrix[row][col] = MONO_FILL

    return matrix


def cell_color(value: int, color_mode: bool) -> str:
    """Presentation color for a raw cell value."""
    if value < 0:
        return BACKGROUND_COLOR
    if color_mode:
        return index_to_css(value)
    return FOREGROUND_COLOR


def build_board_data(
    matrix: "list[list[int]]", color_mode: bool = False
) -> PicrossBoardData:
    """Build the presentation board and its clues from a raw matrix.

    AIDEV-NOTE: Every cell is enabled, including empty ones, so the player
    can mark cells they believe are empty.
    """
    rows = []
    for values in matrix:
        cells = []
        for value in values:
            correct = value >= 0
            cells.append(
                PicrossCellData(
                    color=cell_color(value, color_mode),
                    enabled=True,
                    pushed=False,
                    correct=correct,
                    marked=False,
                )
            )
        rows.append(PicrossRowData(cells=cells))

    row_clues, column_clues = build_clues(matrix)
    filled = sum(1 for values in matrix for value in values if value >= 0)
    logger.debug(f"Built {len(matrix)}x{len(matrix)} board with {filled} filled cells")

    return PicrossBoardData(rows=rows, row_clues=row_clues, column_clues=column_clues)
