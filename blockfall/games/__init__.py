"""
Games module for Blockfall.
"""

from .tetris import TetrisGame

__all__ = [
    'TetrisGame',
]
