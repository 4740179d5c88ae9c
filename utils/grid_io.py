import logging
import os

from models.grid import Grid, PuzzleConfig

logger = logging.getLogger(__name__)


class GridFormatError(ValueError):
    """Raised when a puzzle file does not match the expected layout"""

    def __init__(self, message, path=None, line_no=None):
        self.path = path
        self.line_no = line_no
        location = ""
        if path is not None:
            location = f"{path}"
            if line_no is not None:
                location += f", line {line_no}"
            location += ": "
        super().__init__(location + message)


def encode_value(value):
    """Character used for a value in files and printed grids"""
    return chr(ord('0') + value)


def decode_value(ch):
    return ord(ch) - ord('0')


def parse_grid(lines, config=None, path=None):
    """Build a grid from text lines, one puzzle row per line"""
    config = config or PuzzleConfig()
    size = config.size
    stride = config.num_spaces + 1

    rows = [line.rstrip() for line in lines]
    while rows and not rows[-1]:
        rows.pop()

    if len(rows) != size:
        raise GridFormatError(f"expected {size} rows, found {len(rows)}", path)

    grid = Grid(config)
    for r, line in enumerate(rows):
        line_no = r + 1
        expected_len = (size - 1) * stride + 1
        if len(line) != expected_len:
            raise GridFormatError(
                f"expected {size} values separated by {config.num_spaces} space(s) "
                f"({expected_len} characters), got {len(line)} characters",
                path, line_no)

        for c in range(size):
            pos = stride * c
            if c > 0 and line[pos - config.num_spaces:pos] != " " * config.num_spaces:
                raise GridFormatError(f"bad separator before column {c + 1}", path, line_no)

            value = decode_value(line[pos])
            if value != config.unknown_value and not 1 <= value <= size:
                raise GridFormatError(
                    f"invalid value {line[pos]!r} in column {c + 1}", path, line_no)
            grid.set(r, c, value)

    return grid


def read_grid(path, config=None):
    """Read a puzzle file into a grid"""
    with open(path) as f:
        lines = f.read().splitlines()

    grid = parse_grid(lines, config, path=path)
    logger.info("Loaded %s with %d unknown squares", path, grid.empty_cells())
    return grid


def prompt_for_file(prompt="Sudoku file: ", input_func=input):
    """Ask for a file name until one can be opened"""
    while True:
        path = input_func(prompt).strip()
        if not path:
            raise FileNotFoundError("No puzzle file given")

        if os.path.isfile(path) and os.access(path, os.R_OK):
            return path

        print("Unable to open that file.  Try again.")


def format_grid(grid):
    """Rows of space separated values"""
    lines = []
    for r in range(grid.size):
        lines.append(" ".join(encode_value(grid.get(r, c)) for c in range(grid.size)))
    return "\n".join(lines)


def print_grid(grid, title=None):
    """Print grid to console"""
    if title:
        print(f"\n{title}")
    print(format_grid(grid))
