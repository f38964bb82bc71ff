"""Preview rendering for generated boards.

AIDEV-NOTE: These are debugging and inspection aids: a PNG of the raw
matrix, an SVG of the presentation board and a plain text grid with clues.
"""

import svg
from PIL import Image, ImageDraw

from ..models import PicrossBoardData
from .quantization import index_to_color

EMPTY_RGB = (255, 255, 255)
FILLED_RGB = (0, 0, 0)


def render_board_image(
    matrix: "list[list[int]]",
    cell_size: int = 16,
    color_mode: bool = False,
) -> Image.Image:
    """Draw a raw board matrix as an RGB image.

    Args:
        matrix: Raw board matrix (EMPTY_CELL or 0..255)
        cell_size: Size of each cell in pixels
        color_mode: Draw color indices instead of black fill

    Returns:
        PIL RGB image of size (cols * cell_size, rows * cell_size)
    """
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    image = Image.new("RGB", (cols * cell_size, rows * cell_size), EMPTY_RGB)
    draw = ImageDraw.Draw(image)

    for row, values in enumerate(matrix):
        for col, value in enumerate(values):
            if value < 0:
                continue
            if color_mode:
                pixel = index_to_color(value)
                fill = (pixel.r, pixel.g, pixel.b)
            else:
                fill = FILLED_RGB
            x0 = col * cell_size
            y0 = row * cell_size
            draw.rectangle(
                (x0, y0, x0 + cell_size - 1, y0 + cell_size - 1), fill=fill
            )

    return image


def board_to_svg(board: PicrossBoardData, cell_size: int = 16) -> str:
    """Convert a presentation board to an SVG string.

    Filled cells are drawn with their own color, empty cells are left out.
    A thin grid outline is drawn around every cell.
    """
    size = board.size
    elements: list[svg.Element] = []

    for row_index, row in enumerate(board.rows):
        for col_index, cell in enumerate(row.cells):
            elements.append(
                svg.Rect(
                    x=col_index * cell_size,
                    y=row_index * cell_size,
                    width=cell_size,
                    height=cell_size,
                    fill=cell.color if cell.correct else "none",
                    stroke="#cccccc",
                    stroke_width=1,
                )
            )

    total = size * cell_size
    final_svg = svg.SVG(
        width=total,
        height=total,
        viewBox=svg.ViewBoxSpec(0, 0, total, total),
        elements=elements,
    )
    return final_svg.as_str()


def format_board(board: PicrossBoardData, filled: str = "#", empty: str = ".") -> str:
    """Render a board as text with column clues on top and row clues on the right."""
    lines = []

    # Column clues, one line per clue depth, bottom aligned
    depth = max((len(clues) for clues in board.column_clues), default=0)
    width = max(
        (len(str(clue.value)) for clues in board.column_clues for clue in clues),
        default=1,
    )
    for level in range(depth):
        parts = []
        for clues in board.column_clues:
            offset = level - (depth - len(clues))
            text = str(clues[offset].value) if offset >= 0 else ""
            parts.append(text.rjust(width))
        lines.append(" ".join(parts))

    for row, clues in zip(board.rows, board.row_clues):
        cells = " ".join(
            (filled if cell.correct else empty).rjust(width) for cell in row.cells
        )
        hint = " ".join(str(clue.value) for clue in clues)
        lines.append(f"{cells}  {hint}")

    return "\n".join(lines)
