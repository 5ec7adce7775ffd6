"""
utils.py - Constants, enumerations and errors for the Cookies & Milk engine

This module provides the board dimensions, the cell/team/state enumerations,
the fixed table of winning lines and the exceptions raised to callers.
"""

from enum import Enum, auto
from typing import Tuple, List, Union

# Board constants
WIDTH = 6
HEIGHT = 5
DEFAULT_SEED = 2024

# Playable area, walls excluded
PLAYABLE_ROWS = range(0, HEIGHT - 1)
PLAYABLE_COLS = range(1, WIDTH - 1)


class Cell(Enum):
    """Enumeration of everything a board cell can hold."""
    EMPTY = 0
    WALL = 1
    COOKIE = 2
    MILK = 3

    @property
    def glyph(self) -> str:
        return GLYPHS[self]

    @property
    def label(self) -> str:
        """Name used in outcome lines, e.g. 'Cookie'."""
        return self.name.capitalize()

    def is_piece(self) -> bool:
        return self in (Cell.COOKIE, Cell.MILK)

    def __str__(self):
        return self.glyph


GLYPHS = {
    Cell.WALL: "⬜",
    Cell.EMPTY: "⬛",
    Cell.COOKIE: "🍪",
    Cell.MILK: "🥛",
}


class Team(Enum):
    """The two competing teams."""
    COOKIE = "cookie"
    MILK = "milk"

    @property
    def cell(self) -> Cell:
        return Cell.COOKIE if self == Team.COOKIE else Cell.MILK

    def other(self) -> 'Team':
        return Team.MILK if self == Team.COOKIE else Team.COOKIE

    @classmethod
    def parse(cls, token: Union['Team', str]) -> 'Team':
        """
        Resolve a team token.

        Args:
            token: A Team, or one of the strings "cookie" / "milk"

        Raises:
            InvalidInputError: For any other value
        """
        if isinstance(token, Team):
            return token
        try:
            return cls(token)
        except ValueError:
            raise InvalidInputError(f"Unknown team: {token!r}") from None

    def __str__(self):
        return self.value


class GameState(Enum):
    """Observable lifecycle of a board."""
    FRESH = auto()
    IN_PROGRESS = auto()
    WON = auto()
    DRAWN = auto()

    def is_terminal(self) -> bool:
        return self in (GameState.WON, GameState.DRAWN)


Line = Tuple[Tuple[int, int], ...]


def _build_win_lines() -> List[Line]:
    """The ten lines checked for a win, in tie-break order."""
    rows = list(PLAYABLE_ROWS)
    cols = list(PLAYABLE_COLS)
    lines = []
    for row in rows:
        lines.append(tuple((row, col) for col in cols))
    for col in cols:
        lines.append(tuple((row, col) for row in rows))
    # Descending from the top-left playable corner, then ascending from the bottom-left
    lines.append(tuple(zip(rows, cols)))
    lines.append(tuple(zip(reversed(rows), cols)))
    return lines


WIN_LINES: List[Line] = _build_win_lines()


def is_valid_position(row: int, col: int) -> bool:
    """Check if a position is inside the grid (walls included)."""
    return 0 <= row < HEIGHT and 0 <= col < WIDTH


def is_playable_position(row: int, col: int) -> bool:
    """Check if a position is inside the 4x4 playable area."""
    return row in PLAYABLE_ROWS and col in PLAYABLE_COLS


class BoardError(Exception):
    """
    Base class for rejections reported to the caller.

    Attributes:
        payload: Text to hand back to the caller (may be empty)
        http_status: Status code an outer request layer should answer with
    """
    http_status = 500

    def __init__(self, message: str = "", payload: str = ""):
        super().__init__(message or self.__class__.__name__)
        self.payload = payload


class InvalidInputError(BoardError, ValueError):
    """Out-of-range column or unknown team token; nothing was changed."""
    http_status = 400


class BoardFinishedError(BoardError):
    """The board is finished or the column is full; payload is the current board."""
    http_status = 503
