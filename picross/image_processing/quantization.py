"""Color quantization between RGB pixels and single-byte indices.

AIDEV-NOTE: Uses a fixed RGB332 layout (3 bits red, 3 bits green, 2 bits
blue). Index 0 is reserved for "transparent/empty", so pure black maps to 1.
"""

from ..models import TRANSPARENT_PIXEL, PixelData


def color_to_index(pixel: PixelData, alpha_threshold: int = 128) -> int:
    """Quantize a pixel color into a 0..255 index using RGB332.

    Args:
        pixel: Source pixel
        alpha_threshold: Pixels with alpha at or below this map to 0

    Returns:
        0 for transparent pixels, otherwise 1..255
    """
    if pixel.a <= alpha_threshold:
        return 0

    r3 = pixel.r >> 5
    g3 = pixel.g >> 5
    b2 = pixel.b >> 6
    index = (r3 << 5) | (g3 << 2) | b2
    return 1 if index == 0 else index


def index_to_color(index: int) -> PixelData:
    """Expand a 0..255 index back to an opaque RGBA pixel.

    Channels are widened by bit replication so 0 stays 0 and the
    maximum field value becomes 255. Index <= 0 is transparent black.
    """
    if index <= 0:
        return TRANSPARENT_PIXEL

    clamped = max(0, min(255, int(index)))
    r3 = (clamped >> 5) & 0x07
    g3 = (clamped >> 2) & 0x07
    b2 = clamped & 0x03

    r8 = (r3 << 5) | (r3 << 2) | (r3 >> 1)
    g8 = (g3 << 5) | (g3 << 2) | (g3 >> 1)
    b8 = (b2 << 6) | (b2 << 4) | (b2 << 2) | b2
    return PixelData(r8, g8, b8, 255)


def index_to_css(index: int) -> str:
    """Format a color index as an `rgb(r, g, b)` string."""
    pixel = index_to_color(index)
    return f"rgb({pixel.r}, {pixel.g}, {pixel.b})"
