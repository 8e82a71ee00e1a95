"""
Abstract game interface for Blockfall.

Games own their state and expose it to collaborators as plain snapshot
dictionaries. Renderers and schedulers learn about changes by subscribing.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, List, Callable


StateListener = Callable[[Dict[str, Any]], None]


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Tetris")
    id: str                             # Unique identifier (e.g., "tetris")
    description: str                    # Brief description for UI
    version: str = "1.0.0"              # Game version
    supports_human: bool = True         # Can humans play?


class GameInterface(ABC):
    """
    Abstract base class for games in Blockfall.

    Games handle the core rules and state management. They know nothing
    about windows, fonts or timers; those live in the collaborators that
    read snapshots and forward commands.
    """

    def __init__(self) -> None:
        self._listeners: List[StateListener] = []

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def reset(self) -> Dict[str, Any]:
        """
        Reset the game to initial state.

        Returns:
            Initial game state dictionary
        """
        pass

    @abstractmethod
    def step(self, action: int) -> Dict[str, Any]:
        """
        Apply one discrete command.

        Args:
            action: The command to apply (game-specific encoding)

        Returns:
            Game state dictionary after the command
        """
        pass

    @abstractmethod
    def tick(self) -> Dict[str, Any]:
        """
        Advance the game by one timer step.

        Returns:
            Game state dictionary after the advance
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state for rendering.

        Returns:
            Dictionary containing all state needed for rendering
        """
        pass

    @abstractmethod
    def is_valid_action(self, action: int) -> bool:
        """
        Check if an action id is known to this game.

        Args:
            action: The action to check

        Returns:
            True if action is recognised, False otherwise
        """
        pass

    @property
    @abstractmethod
    def action_space_size(self) -> int:
        """Number of distinct commands this game accepts."""
        pass

    @property
    @abstractmethod
    def action_names(self) -> List[str]:
        """Human-readable names for each command, indexed by command id."""
        pass

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with a fresh snapshot after each change.

        Args:
            listener: Callable taking the state dictionary

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        """Push the current snapshot to every listener."""
        if not self._listeners:
            return
        state = self.get_state()
        for listener in list(self._listeners):
            listener(state)

    def get_score(self) -> int:
        """
        Get the current score.

        Returns:
            Current game score
        """
        return 0
