"""
cookie4.game - Core game mechanics for Cookies & Milk

This package contains the board, the lock-guarded game owner and the
Gymnasium environment.
"""

from cookie4.game.board import Board
from cookie4.game.rules import CookieMilkGame, CookieMilkEnv

__all__ = ['Board', 'CookieMilkGame', 'CookieMilkEnv']
