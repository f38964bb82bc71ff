"""Shared image builders for the picross tests."""

import pytest

OPAQUE_BLACK = (0, 0, 0, 255)
CLEAR = (0, 0, 0, 0)


def make_rgba(pixels):
    """Flatten a 2D list of (r, g, b, a) tuples into (bytes, width, height)."""
    height = len(pixels)
    width = len(pixels[0]) if height else 0
    data = bytearray()
    for row in pixels:
        for pixel in row:
            data.extend(pixel)
    return bytes(data), width, height


def mask_pixel(row, col):
    """Predictable color for opaque mask cells, varying across the image."""
    return (
        (row * 13 + col * 7) % 256,
        (row * 5 + col * 11) % 256,
        (row * 17 + col * 3) % 256,
        255,
    )


def image_from_mask(mask, color=mask_pixel):
    """Build an RGBA image where mask cells of 1 are opaque."""
    pixels = [
        [color(r, c) if value else CLEAR for c, value in enumerate(row)]
        for r, row in enumerate(mask)
    ]
    return make_rgba(pixels)


def solid_image(width, height, pixel=OPAQUE_BLACK):
    return make_rgba([[pixel] * width for _ in range(height)])


def spiral_mask(size):
    """Square spiral with one-cell gaps between its turns."""
    mask = [[0] * size for _ in range(size)]
    top, left, bottom, right = 0, 0, size - 1, size - 1

    while left <= right and top <= bottom:
        for col in range(left, right + 1):
            mask[top][col] = 1
        for row in range(top + 1, bottom + 1):
            mask[row][right] = 1
        if top < bottom:
            for col in range(right - 1, left - 1, -1):
                mask[bottom][col] = 1
        if left < right:
            for row in range(bottom - 1, top, -1):
                mask[row][left] = 1
        top += 2
        left += 2
        bottom -= 2
        right -= 2

    return mask


# 1 = opaque, 0 = transparent
PATTERN_5X5 = [
    [1, 1, 0, 1, 0],
    [0, 0, 0, 0, 0],
    [1, 1, 1, 0, 1],
    [0, 1, 0, 1, 1],
    [0, 0, 0, 1, 1],
]


@pytest.fixture
def pattern_mask():
    return [row[:] for row in PATTERN_5X5]


@pytest.fixture
def pattern_matrix():
    """Raw matrix of PATTERN_5X5 in monochrome mode."""
    return [[255 if value else -1 for value in row] for row in PATTERN_5X5]


@pytest.fixture
def pattern_image():
    return image_from_mask(PATTERN_5X5)
