import os
import sys

import pytest

# Ensure the project root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from cookie4.debug import debug, DebugLevel
from cookie4.game.board import Board


FRESH_RENDER = (
    "⬜⬛⬛⬛⬛⬜\n"
    "⬜⬛⬛⬛⬛⬜\n"
    "⬜⬛⬛⬛⬛⬜\n"
    "⬜⬛⬛⬛⬛⬜\n"
    "⬜⬜⬜⬜⬜⬜\n"
)

# Two consecutive fills, row-major over the playable area (1 = cookie, 0 = milk)
GOLDEN_BITS = [
    1, 1, 1, 1,
    0, 1, 1, 0,
    0, 0, 0, 0,
    1, 0, 1, 0,

    1, 0, 1, 1,
    0, 1, 0, 1,
    0, 1, 1, 1,
    1, 0, 0, 0,
]


class ScriptedBits:
    """Generator stand-in that replays a fixed bit sequence."""

    def __init__(self, bits):
        self._bits = list(bits)
        self.draws = 0

    def integers(self, low, high=None):
        self.draws += 1
        return self._bits.pop(0)


@pytest.fixture(autouse=True)
def quiet_debug():
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])


@pytest.fixture
def fresh_render():
    return FRESH_RENDER


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def scripted_factory():
    """Factory for boards whose generator replays the given bits after every reset."""
    def make(bits=GOLDEN_BITS):
        return Board(seed=0, rng_factory=lambda seed: ScriptedBits(bits))
    return make
