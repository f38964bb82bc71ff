"""Run-length clue derivation and clue completion tracking."""

from typing import Sequence

from ..models import PicrossBoardData, PicrossCellData, PicrossClueData


def build_line_clues(values: Sequence[int]) -> "list[PicrossClueData]":
    """Build the clues for one row or column of raw cell values.

    A value >= 0 is filled. A line with no filled cells gets a single
    clue of value 0.
    """
    clues = []
    run = 0
    for value in values:
        if value >= 0:
            run += 1
        elif run > 0:
            clues.append(PicrossClueData(value=run))
            run = 0
    if run > 0:
        clues.append(PicrossClueData(value=run))

    return clues or [PicrossClueData(value=0)]


def build_clues(
    matrix: "list[list[int]]",
) -> "tuple[list[list[PicrossClueData]], list[list[PicrossClueData]]]":
    """Build (row_clues, column_clues) for a square raw matrix."""
    size = len(matrix)
    row_clues = [build_line_clues(row) for row in matrix]
    column_clues = [
        build_line_clues([matrix[row][col] for row in range(size)])
        for col in range(size)
    ]
    return row_clues, column_clues


def _line_runs(cells: "Sequence[PicrossCellData]") -> "list[tuple[int, bool]]":
    """Runs of correct cells as (length, solved) pairs, in line order.

    A run is solved when every cell in it has been pushed.
    """
    runs = []
    length = 0
    solved = True
    for cell in cells:
        if cell.correct:
            length += 1
            solved = solved and cell.pushed == cell.correct
        elif length > 0:
            runs.append((length, solved))
            length = 0
            solved = True
    if length > 0:
        runs.append((length, solved))
    return runs


def _update_line(
    clues: "list[PicrossClueData]", cells: "Sequence[PicrossCellData]"
) -> None:
    runs = _line_runs(cells)
    for index, clue in enumerate(clues):
        if clue.value == 0:
            clue.completed = not runs
        elif index < len(runs):
            length, solved = runs[index]
            clue.completed = solved and length == clue.value
        else:
            clue.completed = False


def recalculate_clue_colors(board: PicrossBoardData) -> PicrossBoardData:
    """Refresh every clue's `completed` flag from the cells' `pushed` state.

    AIDEV-NOTE: Only `completed` is written. Clue lists and values keep
    their shape. The board is updated in place and returned for chaining.
    """
    for row_index, row in enumerate(board.rows):
        _update_line(board.row_clues[row_index], row.cells)

    for col_index, clues in enumerate(board.column_clues):
        column = [row.cells[col_index] for row in board.rows]
        _update_line(clues, column)

    return board
