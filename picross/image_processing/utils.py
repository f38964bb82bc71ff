"""Buffer validation, bounding box detection and rescaling.

AIDEV-NOTE: These helpers work on flat RGBA numpy buffers. The rescale is a
plain nearest-neighbor lookup; keep it that way so boards stay deterministic
and comparable across runs.
"""

import logging
import math

import numpy as np

from ..errors import InvalidImageBufferError
from ..models import BoundingBox

logger = logging.getLogger(__name__)


def to_rgba_buffer(data, width: int, height: int) -> np.ndarray:
    """Normalise pixel data into a flat uint8 array and check its size.

    Args:
        data: bytes, bytearray, memoryview, int sequence or numpy array
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        Flat numpy uint8 array of length width * height * 4

    Raises:
        InvalidImageBufferError: If dimensions are invalid or the buffer
            length does not match them
    """
    integer_types = (int, np.integer)
    if not isinstance(width, integer_types) or not isinstance(height, integer_types):
        raise InvalidImageBufferError(
            f"Image dimensions must be integers, got {width!r}x{height!r}"
        )
    width, height = int(width), int(height)
    if width < 0 or height < 0:
        raise InvalidImageBufferError(f"Negative image dimensions: {width}x{height}")

    if isinstance(data, (bytes, bytearray, memoryview)):
        buffer = np.frombuffer(bytes(data), dtype=np.uint8)
    else:
        try:
            buffer = np.asarray(data).reshape(-1)
        except (TypeError, ValueError) as e:
            raise InvalidImageBufferError(f"Unreadable pixel buffer: {e}") from e
        # Floats would be truncated and could flip opacity
        integer_like = buffer.dtype == np.bool_ or np.issubdtype(buffer.dtype, np.integer)
        if buffer.size and not integer_like:
            raise InvalidImageBufferError(
                f"Pixel buffer must hold integers, got dtype {buffer.dtype}"
            )
        if buffer.size and (buffer.min() < 0 or buffer.max() > 255):
            raise InvalidImageBufferError("Pixel values must be in range 0-255")
        buffer = buffer.astype(np.uint8)

    expected = width * height * 4
    if buffer.size != expected:
        raise InvalidImageBufferError(
            f"Invalid image buffer: expected {expected} bytes for "
            f"{width}x{height} RGBA, got {buffer.size}"
        )
    return buffer


def calculate_bounding_box(
    data: np.ndarray,
    width: int,
    height: int,
    alpha_threshold: int = 128,
) -> BoundingBox:
    """Find the tight box around all pixels with alpha > alpha_threshold.

    Every pixel is visited. If none qualifies the inverted box
    (width, height, 0, 0) is returned; check `BoundingBox.is_empty`.
    """
    min_x, min_y, max_x, max_y = width, height, 0, 0

    if width and height:
        alpha = np.asarray(data).reshape(height, width, 4)[:, :, 3]
        ys, xs = np.nonzero(alpha > alpha_threshold)
        if xs.size:
            min_x, max_x = int(xs.min()), int(xs.max())
            min_y, max_y = int(ys.min()), int(ys.max())

    return BoundingBox(
        min_x=min_x,
        min_y=min_y,
        max_x=max_x,
        max_y=max_y,
        width=max_x - min_x + 1,
        height=max_y - min_y + 1,
    )


def scale_image_data(
    source: np.ndarray,
    source_width: int,
    source_height: int,
    bbox: BoundingBox,
    board_size: int,
) -> np.ndarray:
    """Nearest-neighbor resample of the bbox crop to board_size x board_size.

    Args:
        source: Flat RGBA source buffer
        source_width: Source image width
        source_height: Source image height
        bbox: Crop to sample from
        board_size: Output dimension

    Returns:
        Flat uint8 RGBA buffer of length board_size * board_size * 4.
        Target cells that map outside the source image stay transparent.
    """
    scaled = np.zeros(board_size * board_size * 4, dtype=np.uint8)
    if bbox.is_empty:
        logger.debug("Empty bounding box, returning transparent board")
        return scaled

    for target_row in range(board_size):
        source_row = math.floor(target_row / board_size * bbox.height) + bbox.min_y
        for target_col in range(board_size):
            source_col = math.floor(target_col / board_size * bbox.width) + bbox.min_x

            if 0 <= source_col < source_width and 0 <= source_row < source_height:
                source_index = (source_row * source_width + source_col) * 4
                target_index = (target_row * board_size + target_col) * 4
                scaled[target_index:target_index + 4] = source[source_index:source_index + 4]

    return scaled
