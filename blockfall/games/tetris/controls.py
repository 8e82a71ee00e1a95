"""
Input Dispatcher - maps raw key presses to game commands.

Controls (default):
    Left / A     : Move left
    Right / D    : Move right
    Down / S     : Soft drop
    Up / W       : Hard drop
    Space        : Rotate
    P            : Pause / resume
    R            : Reset
"""

import logging
from typing import Any, Dict, Optional

from ...core.game_interface import GameInterface
from .game import Action

logger = logging.getLogger(__name__)


def default_key_bindings() -> Dict[int, Action]:
    """Build the default pygame key -> Action table."""
    import pygame

    return {
        pygame.K_LEFT: Action.MOVE_LEFT,
        pygame.K_a: Action.MOVE_LEFT,
        pygame.K_RIGHT: Action.MOVE_RIGHT,
        pygame.K_d: Action.MOVE_RIGHT,
        pygame.K_DOWN: Action.SOFT_DROP,
        pygame.K_s: Action.SOFT_DROP,
        pygame.K_UP: Action.HARD_DROP,
        pygame.K_w: Action.HARD_DROP,
        pygame.K_SPACE: Action.ROTATE,
        pygame.K_p: Action.PAUSE_TOGGLE,
        pygame.K_r: Action.RESET,
    }


class InputDispatcher:
    """
    Forwards discrete input events to the game in arrival order.

    Unrecognised keys and command ids are ignored.
    """

    def __init__(self, game: GameInterface, key_bindings: Optional[Dict[int, Action]] = None):
        """
        Args:
            game: Game receiving the commands
            key_bindings: Key code -> Action table (defaults to default_key_bindings())
        """
        self.game = game
        self.key_bindings = key_bindings if key_bindings is not None else default_key_bindings()

    def dispatch(self, action: Any) -> bool:
        """
        Send one command to the game.

        Returns:
            True if the command was recognised and forwarded
        """
        if not self.game.is_valid_action(action):
            logger.debug("Ignoring unknown command %r", action)
            return False
        self.game.step(action)
        return True

    def handle_key(self, key: int) -> bool:
        """Dispatch the command bound to a key, if any."""
        action = self.key_bindings.get(key)
        if action is None:
            return False
        return self.dispatch(action)

    def handle_event(self, event: Any) -> bool:
        """Dispatch a pygame KEYDOWN event; other events are ignored."""
        import pygame

        if event.type != pygame.KEYDOWN:
            return False
        return self.handle_key(event.key)
