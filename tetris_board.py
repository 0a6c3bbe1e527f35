"""Field helpers: collides, place, remove, erase_full_rows"""
from typing import Iterator, List, Tuple

from tetris_config import CONFIG
from tetris_piece import Piece, BRICK_HEIGHT, BRICK_WIDTH

ROWS, COLS = CONFIG["FIELD_ROWS"], CONFIG["FIELD_COLS"]

Grid = List[List[int]]

# mask cell (r, c) lands on field (y + r + ROW_OFFSET, x + c + COL_OFFSET)
ROW_OFFSET = -BRICK_HEIGHT // 2 + 1
COL_OFFSET = -BRICK_WIDTH // 2


def new_grid(rows: int = ROWS, cols: int = COLS) -> Grid:
    return [[0] * cols for _ in range(rows)]


def clear(grid: Grid) -> None:
    for row in grid:
        row[:] = [0] * len(row)


def piece_cells(piece: Piece) -> Iterator[Tuple[int, int]]:
    for r, row in enumerate(piece.mask):
        for c, v in enumerate(row):
            if v:
                yield piece.y + ROW_OFFSET + r, piece.x + COL_OFFSET + c


def collides(grid: Grid, piece: Piece) -> bool:
    """True if the piece leaves the field or overlaps a non-empty cell."""
    rows, cols = len(grid), len(grid[0])
    for by, bx in piece_cells(piece):
        if bx < 0 or bx >= cols or by < 0 or by >= rows:
            return True
        if grid[by][bx]:
            return True
    return False


def place(grid: Grid, piece: Piece) -> None:
    for by, bx in piece_cells(piece):
        grid[by][bx] = piece.color


def remove(grid: Grid, piece: Piece) -> None:
    for by, bx in piece_cells(piece):
        grid[by][bx] = 0


def erase_full_rows(grid: Grid) -> int:
    """Drop every full row, shifting the rows above down. Returns the count."""
    erased = 0
    y = len(grid) - 1
    while y >= 0:
        if all(grid[y]):
            for above in range(y, 0, -1):
                grid[above][:] = grid[above - 1]
            grid[0][:] = [0] * len(grid[0])
            erased += 1
        else:
            y -= 1
    return erased
