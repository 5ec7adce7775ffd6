"""
cookie4 - Cookies & Milk four-in-a-row engine

This package provides a deterministic four-in-a-row board: a walled grid,
gravity-based placement, win detection, a seeded random filler and a
canonical text rendering of the board.
"""

# Version number
__version__ = '0.1.0'
