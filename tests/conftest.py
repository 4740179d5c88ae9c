import pytest

from models.grid import Grid

from helpers import PUZZLE_ROWS, SOLVED_ROWS, rows_to_text


@pytest.fixture
def solved_grid():
    return Grid.from_rows(SOLVED_ROWS)


@pytest.fixture
def puzzle_grid():
    return Grid.from_rows(PUZZLE_ROWS)


@pytest.fixture
def puzzle_file(tmp_path):
    path = tmp_path / "puzzle.txt"
    path.write_text(rows_to_text(PUZZLE_ROWS))
    return path
