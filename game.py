# game.py - Terminal play session around the generator and checker

import os
import sys
import time
from enum import Enum

from sudoku_checker import N, BOX, is_cell_empty, is_safe
from sudoku_generator import Difficulty, count_empty, generate, is_complete, make_rng


class MoveResult(Enum):
    PLACED = 'placed'
    OUT_OF_RANGE = 'out_of_range'
    OCCUPIED = 'occupied'
    INVALID_VALUE = 'invalid_value'
    UNSAFE = 'unsafe'
    INCORRECT = 'incorrect'


MESSAGES = {
    MoveResult.OUT_OF_RANGE: "Invalid row or column!",
    MoveResult.OCCUPIED: "This cell is already filled!",
    MoveResult.INVALID_VALUE: "Invalid value!",
    MoveResult.UNSAFE: "Invalid value!",
    MoveResult.INCORRECT: "Wrong value for this cell!",
}


class PlayerQuit(Exception):
    """Raised when the player declines to continue"""


class GameSession:
    """One game: a solution grid, the puzzle grid being filled, and a move count"""

    def __init__(self, difficulty=Difficulty.MEDIUM, rng=None):
        # A plain int is a raw empty-cell count, passed straight to generate
        self.difficulty = difficulty if isinstance(difficulty, int) \
            else Difficulty.from_choice(difficulty)
        self.rng = rng if rng is not None else make_rng()
        self.new_game()

    def new_game(self):
        """Discard the current grids and generate a fresh pair"""
        self.solution, self.puzzle = generate(self.difficulty, self.rng)
        self.attempts = 0
        self.moves = []

    def check_cell(self, row, col):
        """Cell-level rejection for 1-based (row, col), or None if the cell is open"""
        if not (1 <= row <= N and 1 <= col <= N):
            return MoveResult.OUT_OF_RANGE
        if not is_cell_empty(self.puzzle, row - 1, col - 1):
            return MoveResult.OCCUPIED
        return None

    def place(self, row, col, value):
        """
        Try to write value at 1-based (row, col).

        Only a value that passes the constraint check AND matches the
        solution is written, so every filled cell always agrees with the
        solution. Rejections after the value is in range still count as
        attempts.
        """
        result = self.check_cell(row, col)
        if result is None and not 1 <= value <= N:
            result = MoveResult.INVALID_VALUE

        if result is None:
            self.attempts += 1
            i, j = row - 1, col - 1
            if not is_safe(self.puzzle, i, j, value):
                result = MoveResult.UNSAFE
            elif value != self.solution[i, j]:
                result = MoveResult.INCORRECT
            else:
                self.puzzle[i, j] = value
                result = MoveResult.PLACED

        self.moves.append((row, col, value, result))
        return result

    def is_solved(self):
        return is_complete(self.puzzle, self.solution)

    @property
    def empty_cells(self):
        return count_empty(self.puzzle)


def board_text(grid):
    """Render a grid with X (column) and Y (row) numbering, boxes ruled off"""
    rule = "  " + "-" * 25
    header = "  X" + "".join(
        f" {j}" + ("  " if j % BOX == 0 else "") for j in range(1, N + 1)
    )
    lines = [header, "Y" + rule[1:]]

    for i in range(N):
        if i != 0 and i % BOX == 0:
            lines.append(rule)
        line = f"{i + 1} | "
        for j in range(N):
            line += f"{grid[i, j] if grid[i, j] else '.'} "
            if (j + 1) % BOX == 0:
                line += "| "
        lines.append(line.rstrip())
    lines.append(rule)
    return "\n".join(lines)


def clear_screen():
    if sys.stdout.isatty():
        os.system('cls' if os.name == 'nt' else 'clear')


def _ask(input_fn, prompt):
    try:
        return input_fn(prompt)
    except EOFError:
        raise PlayerQuit()


def _read_int(input_fn, prompt):
    try:
        return int(_ask(input_fn, prompt).strip())
    except ValueError:
        return 0  # out of range for every prompt


def _ask_retry(input_fn, message):
    answer = _ask(input_fn, f"{message} Try again? (y/n) ")
    if answer.strip().lower() == 'n':
        raise PlayerQuit()


def ask_yes_no(input_fn, prompt):
    """Keep asking until the answer is y or n"""
    while True:
        answer = _ask(input_fn, prompt).strip().lower()
        if answer in ('y', 'n'):
            return answer == 'y'


def ask_difficulty(input_fn, output_fn):
    output_fn("Choose difficulty level:")
    output_fn("1. Easy")
    output_fn("2. Medium (default)")
    output_fn("3. Hard")
    level = Difficulty.from_choice(_ask(input_fn, "Enter your choice: "))
    output_fn(f"\n{level.name.capitalize()} level selected\n")
    return level


def play_moves(session, input_fn=None, output_fn=None, logger=None):
    """Prompt for moves until the session's puzzle is solved"""
    input_fn = input_fn or input
    output_fn = output_fn or print
    while not session.is_solved():
        col = _read_int(input_fn, "Enter column (X axis): ")
        row = _read_int(input_fn, "Enter row (Y axis): ")

        rejected = session.check_cell(row, col)
        if rejected is not None:
            _ask_retry(input_fn, MESSAGES[rejected])
            continue

        value = _read_int(input_fn, "Enter value: ")
        while not 1 <= value <= N:
            _ask_retry(input_fn, MESSAGES[MoveResult.INVALID_VALUE])
            value = _read_int(input_fn, "Enter value: ")

        result = session.place(row, col, value)
        if logger is not None:
            logger.log_move(row, col, value, result)
        if result is not MoveResult.PLACED:
            _ask_retry(input_fn, MESSAGES[result])

        clear_screen()
        output_fn(f"Attempted {session.attempts} times\n")
        output_fn(board_text(session.puzzle))


def play(difficulty=None, seed=None, logger=None, input_fn=None, output_fn=None,
         on_new_game=None):
    """
    Interactive loop: pick a level, play, offer another game.
    on_new_game(session) is called with each freshly generated session.
    Returns the number of boards solved.
    """
    input_fn = input_fn or input
    output_fn = output_fn or print
    rng = make_rng(seed)
    solved = 0
    game_index = 0
    session = None
    start = None

    try:
        while True:
            clear_screen()
            output_fn("Welcome to Sudoku!\n")
            level = difficulty if difficulty is not None \
                else ask_difficulty(input_fn, output_fn)

            session = GameSession(level, rng)
            start = time.time()
            if on_new_game is not None:
                on_new_game(session)
            if logger is not None:
                logger.log_game(game_index, session.difficulty, session.empty_cells)
            output_fn(board_text(session.puzzle))

            play_moves(session, input_fn, output_fn, logger)

            output_fn("\nCongratulations! You solved the board!\n")
            solved += 1
            if logger is not None:
                logger.log_result(True, session.attempts, time.time() - start)
            session = None
            game_index += 1

            if not ask_yes_no(input_fn, "Do you want to play again? (y/n) "):
                break
    except PlayerQuit:
        if logger is not None and session is not None:
            logger.log_result(False, session.attempts, time.time() - start)

    return solved
