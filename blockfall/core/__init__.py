"""
Core abstractions for Blockfall.

Provides the contracts between the game engine and its collaborators.
"""

from .game_interface import GameInterface, GameMetadata, StateListener
from .renderer_interface import RendererInterface

__all__ = [
    'GameInterface',
    'GameMetadata',
    'StateListener',
    'RendererInterface',
]
