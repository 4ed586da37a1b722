# sudoku_checker.py - Row / column / box constraint checks for a 9×9 grid

import numpy as np

N = 9
BOX = 3


def is_absent_in_row(grid, row, value):
    """True if value does not appear anywhere in the row"""
    return value not in grid[row]


def is_absent_in_col(grid, col, value):
    """True if value does not appear anywhere in the column"""
    return value not in grid[:, col]


def is_absent_in_box(grid, box_row, box_col, value):
    """
    True if value does not appear in the 3×3 box whose top-left corner is
    (box_row, box_col). The origin must be a multiple of 3.
    """
    return value not in grid[box_row:box_row+BOX, box_col:box_col+BOX]


def box_origin(row, col):
    return BOX * (row // BOX), BOX * (col // BOX)


def is_safe(grid, row, col, value):
    """Check if value can go at (row, col) without breaking any constraint"""
    box_row, box_col = box_origin(row, col)
    return (is_absent_in_row(grid, row, value)
            and is_absent_in_col(grid, col, value)
            and is_absent_in_box(grid, box_row, box_col, value))


def is_cell_empty(grid, row, col):
    return bool(grid[row, col] == 0)


def verify_sudoku(grid):
    """Verify that a completed grid is a valid solution"""
    grid = np.asarray(grid).reshape(N, N)

    # Check all numbers are 1-9
    if not np.all((grid >= 1) & (grid <= N)):
        return False

    # Check rows
    for row in grid:
        if len(set(row)) != N:
            return False

    # Check columns
    for col in grid.T:
        if len(set(col)) != N:
            return False

    # Check 3×3 boxes
    for box_r in range(0, N, BOX):
        for box_c in range(0, N, BOX):
            box = grid[box_r:box_r+BOX, box_c:box_c+BOX].flatten()
            if len(set(box)) != N:
                return False

    return True
