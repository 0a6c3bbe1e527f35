from conftest import brick

from tetris_board import (ROWS, COLS, new_grid, clear, piece_cells, collides, place, remove,
                          erase_full_rows)
from tetris_piece import Piece


def test_new_grid_dimensions():
    grid = new_grid()
    assert len(grid) == ROWS == 20
    assert all(len(row) == COLS == 10 for row in grid)
    assert not any(map(any, grid))


def test_anchor_is_mask_centre():
    piece = Piece(brick("I"), x=5, y=0)
    assert sorted(piece_cells(piece)) == [(0, 3), (0, 4), (0, 5), (0, 6)]
    piece.next_state()
    assert sorted(piece_cells(piece)) == [(-1, 5), (0, 5), (1, 5), (2, 5)]


def test_inside_empty_field_does_not_collide():
    grid = new_grid()
    assert not collides(grid, Piece(brick("T"), x=5, y=5))


def test_out_of_bounds_collides():
    grid = new_grid()
    o = brick("O")  # occupies mask cols 1-2, rows 1-2
    assert collides(grid, Piece(o, x=0, y=5))       # col -1
    assert not collides(grid, Piece(o, x=1, y=5))
    assert collides(grid, Piece(o, x=10, y=5))      # col 10
    assert not collides(grid, Piece(o, x=9, y=5))
    assert collides(grid, Piece(o, x=5, y=19))      # row 20
    assert not collides(grid, Piece(o, x=5, y=18))
    vertical_i = Piece(brick("I"), state=1, x=5, y=0)
    assert collides(grid, vertical_i)               # row -1


def test_overlap_collides():
    grid = new_grid()
    grid[10][5] = 3
    assert collides(grid, Piece(brick("O"), x=5, y=9))
    assert not collides(grid, Piece(brick("O"), x=5, y=7))


def test_place_and_remove():
    grid = new_grid()
    piece = Piece(brick("T"), x=4, y=10)
    place(grid, piece)
    cells = set(piece_cells(piece))
    for r in range(ROWS):
        for c in range(COLS):
            assert grid[r][c] == (piece.color if (r, c) in cells else 0)
    assert collides(grid, piece)
    remove(grid, piece)
    assert not any(map(any, grid))


def test_erase_single_full_row():
    grid = new_grid()
    grid[19] = [1] * COLS
    grid[18][2] = 5
    grid[17][7] = 6
    assert erase_full_rows(grid) == 1
    assert grid[19][2] == 5
    assert grid[18][7] == 6
    assert sum(v != 0 for row in grid for v in row) == 2
    assert grid[0] == [0] * COLS


def test_erase_rechecks_shifted_row():
    grid = new_grid()
    grid[19] = [2] * COLS
    grid[18] = [3] * COLS
    grid[17] = [4] * (COLS - 1) + [0]
    grid[16][0] = 7
    assert erase_full_rows(grid) == 2
    assert grid[19] == [4] * (COLS - 1) + [0]
    assert grid[18][0] == 7
    assert grid[17] == [0] * COLS


def test_erase_non_adjacent_rows():
    grid = new_grid()
    grid[19] = [1] * COLS
    grid[18][4] = 2
    grid[17] = [1] * COLS
    assert erase_full_rows(grid) == 2
    assert grid[19][4] == 2
    assert sum(v != 0 for row in grid for v in row) == 1


def test_erase_nothing():
    grid = new_grid()
    grid[19][0] = 1
    assert erase_full_rows(grid) == 0
    assert grid[19][0] == 1


def test_clear():
    grid = new_grid()
    grid[3][3] = 1
    rows = grid[3]
    clear(grid)
    assert not any(map(any, grid))
    assert grid[3] is rows
