# Blockfall Source Package
"""
Blockfall - A falling-block puzzle game.

Modules:
- core: Abstract interfaces for games and renderers
- games: Game implementations (Tetris engine, scheduler, controls, renderer)
- utils: Configuration and logging setup
"""

__version__ = "1.0.0"
