"""
Tick Scheduler - drives gravity at the game's current fall interval.
"""

import logging
from typing import Dict, Any, Optional

from ...core.game_interface import GameInterface

logger = logging.getLogger(__name__)


class TickScheduler:
    """
    Polled periodic timer calling game.tick().

    The host loop calls update() with its clock reading (e.g.
    pygame.time.get_ticks()). The timer arms with a full interval on the
    first update, re-arms with the game's current interval after every
    tick, and stops while the game is paused or over. Resuming, resetting,
    or a change of interval starts a fresh full interval.
    """

    def __init__(self, game: GameInterface):
        """
        Args:
            game: Game exposing tick(), get_state() and subscribe()
        """
        self.game = game
        self._deadline: Optional[float] = None
        state = game.get_state()
        self._interval: float = state["fall_interval"]
        self._status: str = state["status"]
        self._game: int = state.get("games_started", 0)
        self._unsubscribe = game.subscribe(self._on_state)

    @property
    def armed(self) -> bool:
        return self._deadline is not None

    @property
    def interval(self) -> float:
        return self._interval

    def _running(self) -> bool:
        return self._status == "running"

    def _on_state(self, state: Dict[str, Any]) -> None:
        """Disarm on a new game or any status or interval change; update() re-arms."""
        status = state["status"]
        interval = state["fall_interval"]
        game = state.get("games_started", 0)
        if status != self._status or interval != self._interval or game != self._game:
            logger.debug("Timer re-armed: status=%s interval=%.0f ms", status, interval)
            self._deadline = None
        self._game = game
        self._status = status
        self._interval = interval

    def update(self, now_ms: float) -> int:
        """
        Fire a tick if the interval has elapsed.

        At most one tick fires per call; a late frame does not queue
        catch-up ticks.

        Args:
            now_ms: Current time in milliseconds

        Returns:
            Number of ticks fired (0 or 1)
        """
        if not self._running():
            self._deadline = None
            return 0

        if self._deadline is None:
            self._deadline = now_ms + self._interval
            return 0

        if now_ms < self._deadline:
            return 0

        self.game.tick()
        # The tick may have paused or ended the game, or changed the interval
        if self._running():
            self._deadline = now_ms + self._interval
        else:
            self._deadline = None
        return 1

    def time_until_tick(self, now_ms: float) -> Optional[float]:
        """Milliseconds until the next tick, or None when disarmed."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - now_ms)

    def close(self) -> None:
        """Stop listening to the game."""
        self._unsubscribe()
        self._deadline = None
