import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class SolveStats:
    assignments: int = 0  # Candidate values written into a square
    backtracks: int = 0   # Squares reset to unknown after exhausting candidates


def next_pos(r, c, size):
    """Next position in row-major order"""
    c += 1
    if c == size:
        c = 0
        r += 1
    return r, c


def prev_pos(r, c, size):
    """Previous position in row-major order"""
    c -= 1
    if c == -1:
        c = size - 1
        r -= 1
    return r, c


class SudokuSolver:
    def __init__(self):
        self.stats = SolveStats()

    def is_valid(self, grid, r, c):
        """Check if the value at (r, c) obeys the usual Sudoku rules"""
        return not (self.is_dupl_row(grid, r, c)
                    or self.is_dupl_col(grid, r, c)
                    or self.is_dupl_subgrid(grid, r, c))

    def is_dupl_row(self, grid, r, c):
        """Check if another square in row r holds the value at (r, c)"""
        value = grid.get(r, c)
        for i in range(grid.size):
            if i != c and grid.get(r, i) == value:
                return True
        return False

    def is_dupl_col(self, grid, r, c):
        """Check if another square in column c holds the value at (r, c)"""
        value = grid.get(r, c)
        for i in range(grid.size):
            if i != r and grid.get(i, c) == value:
                return True
        return False

    def is_dupl_subgrid(self, grid, r, c):
        """
        Check if another square in the sub-grid holds the value at (r, c).
        Squares sharing a row or column with (r, c) are left to the
        row and column checks.
        """
        block = grid.block_size
        start_row = (r // block) * block
        start_col = (c // block) * block
        value = grid.get(r, c)

        for row in range(start_row, start_row + block):
            for col in range(start_col, start_col + block):
                if r != row and c != col and grid.get(row, col) == value:
                    return True
        return False

    def is_valid_sudoku(self, grid):
        """Check if the filled squares are free of duplicates"""
        for r in range(grid.size):
            for c in range(grid.size):
                if grid.is_filled(r, c) and not self.is_valid(grid, r, c):
                    logger.debug("Conflicting value %d at (%d, %d)", grid.get(r, c), r, c)
                    return False
        return True

    def is_solved(self, grid):
        """Check if every row, column and sub-grid holds 1..N exactly once"""
        expected = list(range(1, grid.size + 1))
        block = grid.block_size
        cells = grid.cells

        for i in range(grid.size):
            if sorted(cells[i, :].tolist()) != expected:
                return False
            if sorted(cells[:, i].tolist()) != expected:
                return False

        for br in range(0, grid.size, block):
            for bc in range(0, grid.size, block):
                if sorted(cells[br:br + block, bc:bc + block].ravel().tolist()) != expected:
                    return False
        return True

    def solve(self, grid):
        """
        Solve the puzzle in place using backtracking.
        Returns True if a solution is found. On failure every guessed
        square is back to unknown and only the given clues remain.
        """
        self.stats = SolveStats()
        logger.debug("Solving %dx%d grid with %d unknown squares",
                     grid.size, grid.size, grid.empty_cells())

        if not self.is_valid_sudoku(grid):
            logger.info("Given clues conflict, no solution possible")
            return False

        solved = self._attempt(grid, 0, 0)
        logger.info("Search %s after %d assignments, %d backtracks",
                    "succeeded" if solved else "failed",
                    self.stats.assignments, self.stats.backtracks)
        return solved

    def _attempt(self, grid, r, c):
        """
        Depth-first search from (r, c) in row-major order. Guessed
        positions are kept on an explicit stack so the depth is not
        limited by the interpreter's recursion limit.
        """
        size = grid.size
        guesses = []  # Positions holding a tentative value, oldest first

        while True:
            while grid.in_bounds(r, c) and grid.is_filled(r, c):
                r, c = next_pos(r, c, size)

            if grid.in_bounds(r, c):
                placed = self._place_next(grid, r, c, 1)
            elif self.is_valid(grid, *prev_pos(r, c, size)):
                return True
            else:
                placed = False

            while not placed:
                if not guesses:
                    return False
                r, c = guesses.pop()
                placed = self._place_next(grid, r, c, grid.get(r, c) + 1)

            guesses.append((r, c))
            r, c = next_pos(r, c, size)

    def _place_next(self, grid, r, c, start):
        """Write the first valid value >= start at (r, c), or reset the square"""
        for num in range(start, grid.size + 1):
            grid.set(r, c, num)
            self.stats.assignments += 1
            if self.is_valid(grid, r, c):
                return True

        grid.set(r, c, grid.config.unknown_value)  # Backtrack
        self.stats.backtracks += 1
        return False
