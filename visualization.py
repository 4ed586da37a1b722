# visualization.py - Draw boards with matplotlib

import matplotlib.pyplot as plt
import numpy as np

from sudoku_checker import N, BOX


def visualize_sudoku_grid(grid, ax=None, title=None, givens=None):
    """
    Draw a single 9×9 grid. If givens (the original puzzle) is passed,
    digits that were not given are drawn in a second color.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))

    grid = np.asarray(grid).reshape(N, N)
    if givens is not None:
        givens = np.asarray(givens).reshape(N, N)

    # Draw grid
    for i in range(N + 1):
        linewidth = 2 if i % BOX == 0 else 0.5
        ax.plot([i, i], [0, N], 'k-', linewidth=linewidth)
        ax.plot([0, N], [i, i], 'k-', linewidth=linewidth)

    # Fill in numbers
    for i in range(N):
        for j in range(N):
            if grid[i, j] != 0:
                given = givens is None or givens[i, j] != 0
                ax.text(j + 0.5, N - i - 0.5, str(grid[i, j]),
                        ha='center', va='center', fontsize=16,
                        fontweight='bold' if given else 'normal',
                        color='black' if given else 'tab:blue')

    ax.set_xlim(0, N)
    ax.set_ylim(0, N)
    ax.set_aspect('equal')
    ax.axis('off')

    if title:
        ax.set_title(title, fontsize=14, fontweight='bold')

    return ax


def visualize_game(puzzle, solution, save_path=None):
    """Puzzle and its solution side by side"""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 6))

    n_empty = int(np.count_nonzero(np.asarray(puzzle) == 0))
    visualize_sudoku_grid(puzzle, ax1, f'Puzzle ({n_empty} empty)')
    visualize_sudoku_grid(solution, ax2, 'Solution', givens=puzzle)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved board to {save_path}")

    return fig
