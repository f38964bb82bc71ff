"""Bounds-checked access and neighbor tests over a square RGBA buffer.

AIDEV-NOTE: All helpers take the flat buffer plus the board stride. Out of
range coordinates read as a fully transparent pixel so edge checks treat
"off the board" the same as transparency.
"""

import math

from ..models import COLOR_DISTANCE_ALPHA, TRANSPARENT_PIXEL, PixelData

# N, S, W, E
NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def get_pixel_data(data, board_size: int, row: int, col: int) -> PixelData:
    """Get the pixel at (row, col) of a board_size x board_size buffer.

    Returns a transparent pixel for out-of-range coordinates.
    """
    if row < 0 or row >= board_size or col < 0 or col >= board_size:
        return TRANSPARENT_PIXEL

    index = (row * board_size + col) * 4
    # int() so channel arithmetic never wraps on uint8 buffers
    return PixelData(
        int(data[index]),
        int(data[index + 1]),
        int(data[index + 2]),
        int(data[index + 3]),
    )


def is_opaque(
    data, board_size: int, row: int, col: int, alpha_threshold: int = 128
) -> bool:
    """Check if the pixel alpha is strictly above alpha_threshold."""
    return get_pixel_data(data, board_size, row, col).a > alpha_threshold


def color_difference(pixel1: PixelData, pixel2: PixelData) -> float:
    """Euclidean RGB distance between two pixels.

    Returns 0 if either pixel is transparent under the fixed
    COLOR_DISTANCE_ALPHA cutoff.
    """
    if pixel1.a <= COLOR_DISTANCE_ALPHA or pixel2.a <= COLOR_DISTANCE_ALPHA:
        return 0.0

    dr = pixel1.r - pixel2.r
    dg = pixel1.g - pixel2.g
    db = pixel1.b - pixel2.b
    return math.sqrt(dr * dr + dg * dg + db * db)


def has_transparent_neighbor(
    data, board_size: int, row: int, col: int, alpha_threshold: int = 128
) -> bool:
    """Check if any 4-connected neighbor is off the board or not opaque."""
    for dr, dc in NEIGHBOR_OFFSETS:
        r, c = row + dr, col + dc
        if r < 0 or r >= board_size or c < 0 or c >= board_size:
            # Edge of board counts as transparent
            return True
        if not is_opaque(data, board_size, r, c, alpha_threshold):
            return True
    return False


def has_significant_color_change(
    data,
    board_size: int,
    row: int,
    col: int,
    color_threshold: float = 80,
    alpha_threshold: int = 128,
) -> bool:
    """Check if an opaque pixel differs sharply from an opaque neighbor.

    Only on-board opaque neighbors are compared. A transparent center
    pixel never counts as a color change.
    """
    if not is_opaque(data, board_size, row, col, alpha_threshold):
        return False

    current = get_pixel_data(data, board_size, row, col)

    for dr, dc in NEIGHBOR_OFFSETS:
        r, c = row + dr, col + dc
        if 0 <= r < board_size and 0 <= c < board_size:
            neighbor = get_pixel_data(data, board_size, r, c)
            if neighbor.a > alpha_threshold:
                if color_difference(current, neighbor) > color_threshold:
                    return True
    return False
