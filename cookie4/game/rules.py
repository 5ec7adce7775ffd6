"""
rules.py - Shared game ownership and Gymnasium environment for Cookies & Milk

This module provides:
1. CookieMilkGame, the single lock-guarded owner of a board
2. CookieMilkEnv, a gymnasium-compatible environment for agents
"""

import threading
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional, Tuple, Union

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from cookie4.debug import debug
from cookie4.utils import (WIDTH, HEIGHT, DEFAULT_SEED, PLAYABLE_COLS, Cell, Team,
                           GameState, BoardError)
from cookie4.game.board import Board


class CookieMilkGame:
    """
    High-level owner of the one shared board.

    Every operation holds the lock for its whole duration, so placement, the
    win check and generator advancement never interleave between threads.
    Mutating operations return the rendered board.
    """

    def __init__(self, seed: int = DEFAULT_SEED,
                 rng_factory: Callable[[int], Any] = np.random.default_rng):
        debug.debug("Initializing CookieMilkGame", "game")
        self._board = Board(seed=seed, rng_factory=rng_factory)
        self._lock = threading.Lock()

    @contextmanager
    def locked(self) -> Iterator[Board]:
        """Hold the lock and expose the board for multi-step access."""
        with self._lock:
            yield self._board

    def render(self) -> str:
        with self._lock:
            return self._board.render()

    def reset(self) -> str:
        """Reset the board and return the fresh rendering."""
        with self._lock:
            debug.debug("Resetting game", "game")
            self._board.reset()
            return self._board.render()

    def place(self, team: Union[Team, str], column: int) -> str:
        """
        Drop a piece, check for a winner and return the new rendering.

        Raises:
            InvalidInputError: Column out of range or unknown team
            BoardFinishedError: Board finished or column full; payload is the board
        """
        with self._lock:
            try:
                self._board.place(team, column)
            except BoardError as e:
                debug.debug(f"Placement {team}/{column} rejected: {e}", "game")
                raise
            self._board.check_winner()
            return self._board.render()

    def randomize(self) -> str:
        """Fill the board from the generator and return the rendering."""
        with self._lock:
            self._board.randomize()
            return self._board.render()

    def check_winner(self) -> Optional[Cell]:
        with self._lock:
            return self._board.check_winner()

    @property
    def state(self) -> GameState:
        with self._lock:
            return self._board.state

    @property
    def winner(self) -> Optional[Cell]:
        with self._lock:
            return self._board.winner

    def is_game_over(self) -> bool:
        return self.state.is_terminal()


class CookieMilkEnv(gym.Env):
    """
    Cookies & Milk environment following the Gymnasium interface.

    Action ``a`` drops the current team's piece into playable column ``a + 1``.
    Cookie moves first and teams alternate after every accepted move. Rewards
    are from Cookie's point of view.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None, seed: int = DEFAULT_SEED):
        """
        Initialize the environment.

        Args:
            render_mode: Mode for rendering the environment
            seed: Seed for the board's random generator
        """
        debug.debug("Initializing CookieMilkEnv", "env")

        self.action_space = spaces.Discrete(len(PLAYABLE_COLS))
        self.observation_space = spaces.Box(
            low=0, high=max(c.value for c in Cell), shape=(HEIGHT, WIDTH), dtype=np.int8
        )

        self.board = Board(seed=seed)
        self.current_team = Team.COOKIE
        self.render_mode = render_mode

        # Track reward settings
        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to a fresh board.

        Args:
            seed: New seed for the board's generator (keeps the current one if None)
            options: Unused

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        if seed is not None:
            self.board = Board(seed=seed)
        else:
            self.board.reset()
        self.current_team = Team.COOKIE

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Take a step by dropping the current team's piece.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        column = int(action) + PLAYABLE_COLS[0]
        debug.debug(f"Environment step: {self.current_team} into column {column}", "env")

        try:
            self.board.place(self.current_team, column)
        except BoardError as e:
            debug.warning(f"Invalid action {action}: {e}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        self.board.check_winner()

        reward = self.reward_step
        terminated = False
        state = self.board.state
        if state == GameState.WON:
            reward = self.reward_win if self.board.winner == Cell.COOKIE else self.reward_lose
            terminated = True
            debug.info(f"Game over: {self.board.winner.label} wins", "env")
        elif state == GameState.DRAWN:
            reward = self.reward_draw
            terminated = True
            debug.info("Game over: draw", "env")
        else:
            self.current_team = self.current_team.other()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        """Render the board according to render_mode."""
        if self.render_mode == "ascii":
            return self.board.render()
        if self.render_mode == "human":
            print(self.board.render(), end="")
        return None

    def valid_actions(self):
        """Actions whose column still has an empty playable cell."""
        if self.board.finished:
            return []
        top_row = 0
        return [col - PLAYABLE_COLS[0] for col in PLAYABLE_COLS
                if self.board.get(top_row, col) == Cell.EMPTY]

    def _get_observation(self) -> np.ndarray:
        return self.board.get_state()

    def _get_info(self) -> Dict:
        return {
            'valid_actions': self.valid_actions(),
            'current_team': self.current_team.value,
            'game_state': self.board.state.name,
            'winner': self.board.winner.label if self.board.winner else None,
            'winning_line': self.board.winning_line,
        }
