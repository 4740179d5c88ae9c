import logging
import os
import sys

from models.grid import PuzzleConfig
from models.sudoku_solver import SudokuSolver
from utils.grid_io import print_grid, prompt_for_file, read_grid

logger = logging.getLogger(__name__)


class SudokuApp:
    def __init__(self, config=None, input_func=input):
        self.config = config or PuzzleConfig()
        self.sudoku_solver = SudokuSolver()
        self.input_func = input_func
        self.current_grid = None

    def run(self):
        """Prompt for a puzzle file, solve it and print before/after grids"""
        print("This program solves Sudoku puzzles.")

        path = prompt_for_file("Sudoku file: ", self.input_func)
        self.current_grid = read_grid(path, self.config)

        print_grid(self.current_grid, "Starting Sudoku grid:")

        print("\n\nSolution:")
        if not self.sudoku_solver.solve(self.current_grid):
            print("No solution found.")
        print_grid(self.current_grid)

        return self.current_grid


def setup_logging():
    level = os.environ.get("SUDOKU_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main():
    setup_logging()

    try:
        config = PuzzleConfig.from_env()
        app = SudokuApp(config)
        app.run()
    except (OSError, ValueError) as e:
        logger.debug("Run aborted", exc_info=True)
        print(f"Error: {e}")
        return 1
    except (EOFError, KeyboardInterrupt):
        print()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
