# play.py - Command line entry point

import argparse

from game import play
from logger import GameLogger
from sudoku_generator import Difficulty
from evaluation import evaluate_all


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Play Sudoku in the terminal.")
    ap.add_argument("--difficulty", choices=[d.name.lower() for d in Difficulty],
                    help="Skip the difficulty menu.")
    ap.add_argument("--seed", type=int, help="Random seed for reproducible boards.")
    ap.add_argument("--log-dir", help="Write game logs under this directory.")
    ap.add_argument("--save-png", metavar="PATH",
                    help="Render a generated puzzle and its solution to an image, then play.")
    ap.add_argument("--evaluate", type=int, metavar="N",
                    help="Check N generated boards per difficulty instead of playing.")
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    if args.evaluate is not None:
        evaluate_all(n_games=args.evaluate, seed=args.seed or 0)
        return 0

    difficulty = Difficulty.from_choice(args.difficulty) if args.difficulty else None

    on_new_game = None
    if args.save_png:
        from visualization import visualize_game
        rendered = []

        def on_new_game(session):
            # Only the first board of the session is saved
            if not rendered:
                visualize_game(session.puzzle, session.solution, save_path=args.save_png)
                rendered.append(session)

    logger = None
    if args.log_dir:
        logger = GameLogger(log_dir=args.log_dir)
        logger.log_config({
            'difficulty': args.difficulty,
            'seed': args.seed,
            'empty_cells': {d.name: d.value for d in Difficulty},
        })

    play(difficulty=difficulty, seed=args.seed, logger=logger, on_new_game=on_new_game)

    if logger is not None:
        logger.generate_summary()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
