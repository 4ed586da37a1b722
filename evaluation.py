# evaluation.py - Check generator output over many boards

import time

import numpy as np
from tqdm import tqdm

from sudoku_checker import verify_sudoku
from sudoku_generator import Difficulty, generate, make_rng, count_empty


def evaluate_generator(difficulty=Difficulty.MEDIUM, n_games=100, seed=0):
    """
    Generate n_games boards and check each one:
    the solution is a valid Sudoku, the puzzle has exactly the requested
    number of empty cells, and every given digit agrees with the solution.
    """
    rng = make_rng(seed)

    valid = []
    exact_empty = []
    consistent = []
    seconds = []
    digit_counts = np.zeros(10, dtype=np.int64)

    for _ in tqdm(range(n_games), desc=f"{difficulty.name.lower():>6}"):
        start = time.perf_counter()
        solution, puzzle = generate(difficulty, rng)
        seconds.append(time.perf_counter() - start)

        filled = puzzle != 0
        valid.append(verify_sudoku(solution))
        exact_empty.append(count_empty(puzzle) == difficulty.value)
        consistent.append(bool(np.all(puzzle[filled] == solution[filled])))
        digit_counts += np.bincount(puzzle[filled], minlength=10)

    return {
        'n_games': n_games,
        'valid_rate': float(np.mean(valid)) if valid else 0.0,
        'exact_empty_rate': float(np.mean(exact_empty)) if exact_empty else 0.0,
        'consistent_rate': float(np.mean(consistent)) if consistent else 0.0,
        'mean_seconds': float(np.mean(seconds)) if seconds else 0.0,
        'max_seconds': float(np.max(seconds)) if seconds else 0.0,
        'digit_counts': {d: int(digit_counts[d]) for d in range(1, 10)},
    }


def evaluate_all(n_games=100, seed=0):
    """Run evaluate_generator for every difficulty and print a table"""
    results = {}
    for difficulty in Difficulty:
        results[difficulty.name] = evaluate_generator(difficulty, n_games, seed)

    print(f"\n{'level':<8} {'valid':>7} {'exact':>7} {'consist':>8} {'mean s':>9} {'max s':>9}")
    for name, r in results.items():
        print(f"{name:<8} {r['valid_rate']:>7.2%} {r['exact_empty_rate']:>7.2%} "
              f"{r['consistent_rate']:>8.2%} {r['mean_seconds']:>9.4f} {r['max_seconds']:>9.4f}")

    return results
