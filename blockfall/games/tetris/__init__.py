"""
Tetris game module for Blockfall.

The renderer needs pygame and is imported from .renderer directly.
"""

from .game import TetrisGame, GameStatus, Action, LINE_CLEAR_POINTS
from .board import Board, collides, BOARD_WIDTH, BOARD_HEIGHT
from .pieces import Piece, PieceDefinition, PIECES, random_piece, rotate_shape, spawn_piece
from .scheduler import TickScheduler
from .controls import InputDispatcher, default_key_bindings
from .config import TetrisConfig

__all__ = [
    'TetrisGame',
    'GameStatus',
    'Action',
    'LINE_CLEAR_POINTS',
    'Board',
    'collides',
    'BOARD_WIDTH',
    'BOARD_HEIGHT',
    'Piece',
    'PieceDefinition',
    'PIECES',
    'random_piece',
    'rotate_shape',
    'spawn_piece',
    'TickScheduler',
    'InputDispatcher',
    'default_key_bindings',
    'TetrisConfig',
]
