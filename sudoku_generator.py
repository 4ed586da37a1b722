# sudoku_generator.py

from enum import Enum

import numpy as np

from sudoku_checker import N, BOX, is_absent_in_box, is_safe


class Difficulty(Enum):
    """Difficulty levels, valued by the number of cells left empty"""
    EASY = 13
    MEDIUM = 29
    HARD = 41

    @classmethod
    def from_choice(cls, choice):
        """
        Map a menu choice ("1"/"2"/"3" or a level name) to a level.
        Anything unrecognised falls back to MEDIUM.
        """
        if isinstance(choice, cls):
            return choice
        choice = str(choice).strip()
        by_number = {'1': cls.EASY, '2': cls.MEDIUM, '3': cls.HARD}
        if choice in by_number:
            return by_number[choice]
        try:
            return cls[choice.upper()]
        except KeyError:
            return cls.MEDIUM


def make_rng(seed=None):
    """Random source for one session; seed=None draws fresh OS entropy"""
    return np.random.default_rng(seed)


def in_diagonal_box(row, col):
    # Diagonal boxes are exactly the cells whose row and col fall in the same band
    return row // BOX == col // BOX


def remaining_cells():
    """Cells outside the three diagonal boxes, in row-major order"""
    return [(i, j) for i in range(N) for j in range(N) if not in_diagonal_box(i, j)]


def fill_box(grid, row, col, rng):
    """Fill the 3×3 box at (row, col) with 1-9 in random order"""
    for i in range(BOX):
        for j in range(BOX):
            num = int(rng.integers(1, N + 1))
            while not is_absent_in_box(grid, row, col, num):
                num = int(rng.integers(1, N + 1))
            grid[row + i, col + j] = num


def fill_diagonal(grid, rng):
    # Diagonal boxes share no row or column, so each only needs in-box uniqueness
    for origin in range(0, N, BOX):
        fill_box(grid, origin, origin, rng)


def fill_remaining(grid, cells=None, index=0):
    """
    Backtracking fill of every cell outside the diagonal boxes.

    Candidates are tried in ascending order; a cell that runs out of
    candidates is reset to 0 and the search steps back to the previous cell.
    Returns True once every cell in `cells` holds a digit.
    """
    if cells is None:
        cells = remaining_cells()
    if index == len(cells):
        return True

    row, col = cells[index]
    for num in range(1, N + 1):
        if is_safe(grid, row, col, num):
            grid[row, col] = num
            if fill_remaining(grid, cells, index + 1):
                return True
            grid[row, col] = 0
    return False


def fill_values(rng):
    """Build a fully solved grid: seed the diagonal, then backtrack the rest"""
    grid = np.zeros((N, N), dtype=np.int32)
    fill_diagonal(grid, rng)
    if not fill_remaining(grid):
        raise RuntimeError("Backtracking failed to complete a seeded grid")
    return grid


def add_empty_cells(grid, n_empty, rng):
    """Clear exactly n_empty distinct cells of grid (in place) at random"""
    if not 0 <= n_empty <= N * N:
        raise ValueError(f"Cannot empty {n_empty} cells of a {N}×{N} grid")

    count = n_empty
    while count != 0:
        cell_id = int(rng.integers(0, N * N))
        i, j = divmod(cell_id, N)
        if grid[i, j] != 0:
            grid[i, j] = 0
            count -= 1
    return grid


def count_empty(grid):
    return int(np.count_nonzero(grid == 0))


def is_complete(puzzle, solution):
    """A puzzle is complete once every cell matches the solution"""
    return np.array_equal(puzzle, solution)


def generate(difficulty=Difficulty.MEDIUM, rng=None):
    """
    Generate a (solution, puzzle) pair.

    difficulty is a Difficulty, or a raw number of cells to empty.
    The returned solution is read-only; the puzzle is the mutable grid
    the player fills in.
    """
    if rng is None:
        rng = make_rng()
    n_empty = difficulty.value if isinstance(difficulty, Difficulty) else int(difficulty)

    solution = fill_values(rng)
    puzzle = add_empty_cells(solution.copy(), n_empty, rng)
    solution.flags.writeable = False

    return solution, puzzle


def generate_dataset(n_puzzles=1000, difficulty=Difficulty.MEDIUM, seed=42):
    """Generate many puzzles at one difficulty, flattened to (n, 81) arrays"""
    rng = make_rng(seed)

    all_puzzles = []
    all_solutions = []

    print(f"Generating {n_puzzles} 9×9 puzzles...")
    for i in range(n_puzzles):
        if (i + 1) % 100 == 0:
            print(f"  Generated {i+1}/{n_puzzles}")

        solution, puzzle = generate(difficulty, rng)
        all_puzzles.append(puzzle.flatten())
        all_solutions.append(solution.flatten())

    print(f"Total dataset size: {len(all_puzzles)} examples")
    return np.array(all_puzzles), np.array(all_solutions)
