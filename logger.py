# logger.py - Per-session game logging

import json
import numpy as np
from pathlib import Path
from datetime import datetime


class GameLogger:
    """Logs games, moves and results of a play session as JSON"""

    def __init__(self, log_dir='logs', experiment_name=None):
        if experiment_name is None:
            experiment_name = f"sudoku_{datetime.now().strftime('%Y%m%d_%H%M%S')}"

        self.log_dir = Path(log_dir) / experiment_name
        self.log_dir.mkdir(parents=True, exist_ok=True)

        # One record per game, in play order
        self.history = {
            'games': [],
        }

        self.config = {}

        print(f"Logging to: {self.log_dir}")

    @property
    def current_game(self):
        games = self.history['games']
        if not games or 'solved' in games[-1]:
            return None
        return games[-1]

    def log_config(self, config):
        """Save session configuration"""
        self.config = config
        with open(self.log_dir / 'config.json', 'w') as f:
            json.dump(config, f, indent=2)

    def log_game(self, game_index, difficulty, n_empty):
        """Open the record for a newly generated board"""
        self.history['games'].append({
            'game': game_index,
            'difficulty': getattr(difficulty, 'name', str(difficulty)),
            'n_empty': int(n_empty),
            'started_at': datetime.now().isoformat(timespec='seconds'),
            'moves': [],
        })

    def log_move(self, row, col, value, result):
        """Append a move (1-based row/col) to the open game"""
        game = self.current_game
        if game is None:
            return
        game['moves'].append({
            'row': int(row),
            'col': int(col),
            'value': int(value),
            'result': getattr(result, 'name', str(result)),
        })

    def log_result(self, solved, attempts, elapsed):
        """Close the open game and persist history"""
        game = self.current_game
        if game is None:
            return
        game['solved'] = bool(solved)
        game['attempts'] = int(attempts)
        game['elapsed'] = float(elapsed)
        self.save_history()

    def save_history(self):
        """Save game history to JSON"""
        with open(self.log_dir / 'history.json', 'w') as f:
            json.dump(self.history, f, indent=2)

    def generate_summary(self):
        """Generate a summary report"""
        finished = [g for g in self.history['games'] if 'solved' in g]
        if not finished:
            print("No games to summarize")
            return

        summary = {
            'experiment_name': self.log_dir.name,
            'games_played': len(finished),
            'games_solved': sum(g['solved'] for g in finished),
            'total_moves': sum(len(g['moves']) for g in finished),
            'mean_attempts': float(np.mean([g['attempts'] for g in finished])),
            'mean_time_per_game': float(np.mean([g['elapsed'] for g in finished])),
        }

        # Save summary
        with open(self.log_dir / 'summary.json', 'w') as f:
            json.dump(summary, f, indent=2)

        # Print summary
        print("\n" + "="*60)
        print("SESSION SUMMARY")
        print("="*60)
        for key, value in summary.items():
            if isinstance(value, float):
                print(f"{key:.<40} {value:.4f}")
            else:
                print(f"{key:.<40} {value}")
        print("="*60 + "\n")

        return summary
