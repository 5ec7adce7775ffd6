"""
board.py - Board representation and core mechanics for Cookies & Milk

This module implements the Board class: a walled 6x5 grid with a 4x4 playable
area, gravity-based placement, line-scan win detection, a seeded random filler
and the canonical text rendering of the board.
"""

import numpy as np
from typing import Any, Callable, Optional, Tuple, Union

from cookie4.debug import debug, DebugLevel
from cookie4.utils import (WIDTH, HEIGHT, DEFAULT_SEED, PLAYABLE_ROWS, PLAYABLE_COLS,
                           WIN_LINES, Cell, Team, GameState, Line,
                           BoardFinishedError, InvalidInputError,
                           is_valid_position, is_playable_position)

PIECE_VALUES = (Cell.COOKIE.value, Cell.MILK.value)


class Board:
    """
    Represents a Cookies & Milk game board.

    The board owns its random generator: every call to randomize() advances it,
    and reset() puts it back to the board's seed, so the sequence of random
    boards depends only on the seed and the order of calls.
    """

    def __init__(self, seed: int = DEFAULT_SEED,
                 rng_factory: Callable[[int], Any] = np.random.default_rng):
        """
        Initialize a fresh board.

        Args:
            seed: Seed for the board's random generator
            rng_factory: Builds a generator from a seed; the generator must
                provide numpy's ``integers(low, high)``
        """
        debug.debug(f"Initializing new Board (seed={seed})", "board")
        self.seed = seed
        self._rng_factory = rng_factory
        self.reset()

    def reset(self):
        """Reset the board to its fresh state and re-seed the generator."""
        debug.debug("Resetting board", "board")
        grid = np.full((HEIGHT, WIDTH), Cell.EMPTY.value, dtype=np.int8)
        grid[:, 0] = Cell.WALL.value
        grid[:, WIDTH - 1] = Cell.WALL.value
        grid[HEIGHT - 1, :] = Cell.WALL.value
        self.grid = grid
        self.winner: Optional[Cell] = None
        self.winning_line: Optional[Line] = None
        self.finished = False
        self._rng = self._rng_factory(self.seed)

    def get(self, row: int, col: int) -> Cell:
        """
        Get the cell at a position.

        Raises:
            IndexError: If the position is outside the grid
        """
        if not is_valid_position(row, col):
            raise IndexError(f"Position ({row}, {col}) is outside the {HEIGHT}x{WIDTH} grid")
        return Cell(int(self.grid[row, col]))

    def set(self, row: int, col: int, cell: Cell):
        """
        Write a cell in the playable area and update the finished flag.

        Raises:
            IndexError: If the position is outside the grid
            ValueError: If the position is a wall or the cell is a wall
        """
        if not is_valid_position(row, col):
            raise IndexError(f"Position ({row}, {col}) is outside the {HEIGHT}x{WIDTH} grid")
        if not is_playable_position(row, col) or cell == Cell.WALL:
            raise ValueError(f"Walls are fixed; cannot write {cell.name} at ({row}, {col})")

        debug.trace(f"Setting ({row}, {col}) to {cell.name}", "board")
        self.grid[row, col] = cell.value
        self._check_finished()

    def _check_finished(self):
        # A full grid is a draw even without a line; never flips back before reset
        self.finished = self.finished or not np.any(self.grid == Cell.EMPTY.value)

    def place(self, team: Union[Team, str], column: int) -> Tuple[int, int]:
        """
        Drop a team's piece into a column.

        The piece lands in the lowest empty playable row. Winning lines are not
        checked here; call check_winner() afterwards.

        Args:
            team: Team or team token ("cookie" / "milk")
            column: Playable column, 1 to 4

        Returns:
            The (row, col) position where the piece landed

        Raises:
            BoardFinishedError: The board is finished or the column is full
            InvalidInputError: Column out of range or unknown team
        """
        if self.finished:
            debug.debug(f"Rejected drop into column {column}: board is finished", "board")
            raise BoardFinishedError("Board is finished", payload=self.render())

        if (isinstance(column, bool) or not isinstance(column, (int, np.integer))
                or column not in PLAYABLE_COLS):
            debug.debug(f"Rejected drop: column {column} out of range", "board")
            raise InvalidInputError(f"Column must be between {PLAYABLE_COLS[0]} and {PLAYABLE_COLS[-1]}")

        team = Team.parse(team)

        for row in reversed(PLAYABLE_ROWS):
            if self.get(row, column) == Cell.EMPTY:
                self.set(row, column, team.cell)
                debug.debug(f"{team.cell.label} landed at ({row}, {column})", "board")
                return row, column

        debug.debug(f"Rejected drop: column {column} is full", "board")
        raise BoardFinishedError(f"Column {column} is full", payload=self.render())

    def check_winner(self) -> Optional[Cell]:
        """
        Scan the winning lines in their fixed order and record the first win.

        Does nothing once a winner is known.

        Returns:
            The winning cell, or None
        """
        if self.winner is not None:
            return self.winner

        for line in WIN_LINES:
            rows, cols = zip(*line)
            values = self.grid[list(rows), list(cols)]
            if values[0] in PIECE_VALUES and np.all(values == values[0]):
                self.winner = Cell(int(values[0]))
                self.winning_line = line
                self.finished = True
                debug.info(f"{self.winner.label} wins along {line}", "board")
                break

        return self.winner

    def randomize(self):
        """
        Fill every playable cell with a random piece, then check for a winner.

        Clears the winner but not the finished flag; pieces already on the board
        are overwritten.
        """
        debug.debug("Filling board with random pieces", "board")
        self.winner = None
        self.winning_line = None

        for row in PLAYABLE_ROWS:
            for col in PLAYABLE_COLS:
                cell = Cell.COOKIE if self._draw_bool() else Cell.MILK
                self.set(row, col, cell)

        self.check_winner()

    def _draw_bool(self) -> bool:
        return bool(self._rng.integers(0, 2))

    @property
    def state(self) -> GameState:
        """Current lifecycle state derived from the grid and flags."""
        if self.winner is not None:
            return GameState.WON
        if self.finished:
            return GameState.DRAWN
        if np.any(np.isin(self.grid, PIECE_VALUES)):
            return GameState.IN_PROGRESS
        return GameState.FRESH

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D array of Cell values
        """
        return self.grid.copy()

    def render(self) -> str:
        """
        Render the board as text.

        Returns:
            One line of glyphs per row, followed by an outcome line when the
            board is finished
        """
        lines = ["".join(Cell(int(value)).glyph for value in row) for row in self.grid]
        if self.winner is not None:
            lines.append(f"{self.winner.label} wins!")
        elif self.finished:
            lines.append("No winner.")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()


if __name__ == "__main__":
    debug.configure(level=DebugLevel.DEBUG)

    board = Board()
    print(board)

    for team, col in [("cookie", 1), ("milk", 2), ("cookie", 2), ("milk", 3),
                      ("milk", 3), ("cookie", 3), ("milk", 4), ("milk", 4),
                      ("milk", 4), ("cookie", 4)]:
        board.place(team, col)
        board.check_winner()
    print(board)

    board.reset()
    board.randomize()
    print(board)
