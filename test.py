from sudoku_generator import Difficulty, generate, count_empty
from sudoku_checker import verify_sudoku
from game import board_text

solution, puzzle = generate(Difficulty.EASY)
print("Puzzle:")
print(board_text(puzzle))
print("\nSolution:")
print(board_text(solution))
print(f"\nSolution valid: {verify_sudoku(solution)}")
print(f"Empty cells: {count_empty(puzzle)} (expected {Difficulty.EASY.value})")
