"""
Tetris Game Core - board, falling piece, line clears and level progression.
"""

import logging
import random
from enum import Enum, IntEnum
from typing import Dict, Any, List, Optional

from ...core.game_interface import GameInterface, GameMetadata
from .board import Board, collides
from .config import TetrisConfig
from .pieces import Piece, random_piece

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    """Engine states. GAME_OVER only leaves through reset."""
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Action(IntEnum):
    """Tetris commands."""
    NOOP = 0
    MOVE_LEFT = 1
    MOVE_RIGHT = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    ROTATE = 5
    PAUSE_TOGGLE = 6
    RESET = 7


# Points per placement indexed by lines cleared, multiplied by level
LINE_CLEAR_POINTS = (0, 100, 300, 500, 800)


class TetrisGame(GameInterface):
    """
    Single-player Tetris engine.

    Features:
    - Fixed 10x20 board, pieces spawn centered on row 0
    - Rotation by transpose + row reversal, rejected outright on collision
    - Soft drop, hard drop and timer ticks share one placement routine
    - Multi-line clear bonus scaled by level
    - Level every 10 lines; each level speeds up the fall interval

    Every state change is pushed to subscribers as a snapshot dictionary.
    """

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        """Return metadata about Tetris game."""
        return GameMetadata(
            name="Tetris",
            id="tetris",
            description="Classic block-stacking puzzle - clear lines, score points, survive!",
            version="1.0.0",
            supports_human=True,
        )

    def __init__(
        self,
        config: Optional[TetrisConfig] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize Tetris game.

        Args:
            config: Gravity and progression tuning (defaults to TetrisConfig())
            rng: Random source for piece selection (defaults to one seeded from config)
        """
        super().__init__()
        self.config = config or TetrisConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)

        # Game state (initialized in reset)
        self.board: Board
        self.current_piece: Piece
        self.next_piece: Piece
        self.status: GameStatus
        self.score: int
        self.level: int
        self.lines_cleared: int
        self.pieces_placed: int
        self.fall_interval: float
        self.games_started: int = 0

        self.reset()

    @property
    def paused(self) -> bool:
        return self.status is GameStatus.PAUSED

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    @property
    def action_space_size(self) -> int:
        """Number of possible actions."""
        return len(Action)

    @property
    def action_names(self) -> List[str]:
        """Human-readable action names."""
        return ["Noop", "Left", "Right", "Soft Drop", "Hard Drop", "Rotate", "Pause", "Reset"]

    def reset(self) -> Dict[str, Any]:
        """Reset game to a fresh running state."""
        self.games_started += 1
        self.board = Board()
        self.current_piece = random_piece(self.rng, self.board.width)
        self.next_piece = random_piece(self.rng, self.board.width)

        self.status = GameStatus.RUNNING
        self.score = 0
        self.level = 1
        self.lines_cleared = 0
        self.pieces_placed = 0
        self.fall_interval = self.config.initial_fall_interval_ms

        logger.debug("New game: current=%s next=%s", self.current_piece.tag, self.next_piece.tag)
        self._notify()
        return self.get_state()

    def _collides(self, piece: Piece) -> bool:
        return collides(piece.shape, piece.position, self.board)

    # ==== Commands ====

    def move_horizontal(self, direction: int) -> bool:
        """
        Shift the current piece sideways.

        Moves one column at a time for |direction| columns and stops at the
        first blocked column, so an overshoot leaves the piece against the wall.

        Returns:
            True if the piece moved at least one column
        """
        if self.status is not GameStatus.RUNNING or direction == 0:
            return False

        step = 1 if direction > 0 else -1
        moved = False
        for _ in range(abs(direction)):
            candidate = self.current_piece.moved(step, 0)
            if self._collides(candidate):
                break
            self.current_piece = candidate
            moved = True

        if moved:
            self._notify()
        return moved

    def soft_drop(self) -> bool:
        """
        Move the current piece down one row, placing it if it cannot move.

        Returns:
            True if the piece moved down, False if it was placed (or ignored)
        """
        if self.status is not GameStatus.RUNNING:
            return False

        candidate = self.current_piece.moved(0, 1)
        if not self._collides(candidate):
            self.current_piece = candidate
            self._notify()
            return True

        self._lock_piece()
        self._notify()
        return False

    def tick(self) -> Dict[str, Any]:
        """Timer advance: one soft drop."""
        self.soft_drop()
        return self.get_state()

    def rotate(self) -> bool:
        """
        Rotate the current piece clockwise in place.

        No wall kicks: if the rotated shape collides at the current position
        the rotation is rejected.

        Returns:
            True if rotation committed
        """
        if self.status is not GameStatus.RUNNING:
            return False

        candidate = self.current_piece.rotated()
        if self._collides(candidate):
            return False
        self.current_piece = candidate
        self._notify()
        return True

    def hard_drop(self) -> int:
        """
        Drop the current piece as far as it goes and place it.

        Returns:
            Rows dropped
        """
        if self.status is not GameStatus.RUNNING:
            return 0

        rows_dropped = 0
        piece = self.current_piece
        while not self._collides(piece.moved(0, 1)):
            piece = piece.moved(0, 1)
            rows_dropped += 1
        self.current_piece = piece

        self._lock_piece()
        self._notify()
        return rows_dropped

    def toggle_pause(self) -> bool:
        """
        Switch between running and paused.

        Returns:
            True if the state changed (never during game over)
        """
        if self.status is GameStatus.GAME_OVER:
            return False
        if self.status is GameStatus.PAUSED:
            self.status = GameStatus.RUNNING
        else:
            self.status = GameStatus.PAUSED
        logger.debug("Game %s", self.status.value)
        self._notify()
        return True

    def step(self, action: int) -> Dict[str, Any]:
        """
        Apply one command.

        Unknown command ids are ignored.

        Args:
            action: Action to take (see Action enum)

        Returns:
            Game state after the command
        """
        try:
            command = Action(action)
        except ValueError:
            logger.debug("Ignoring unknown action %r", action)
            return self.get_state()

        if command == Action.RESET:
            return self.reset()
        if command == Action.PAUSE_TOGGLE:
            self.toggle_pause()
        elif command == Action.MOVE_LEFT:
            self.move_horizontal(-1)
        elif command == Action.MOVE_RIGHT:
            self.move_horizontal(1)
        elif command == Action.SOFT_DROP:
            self.soft_drop()
        elif command == Action.HARD_DROP:
            self.hard_drop()
        elif command == Action.ROTATE:
            self.rotate()

        return self.get_state()

    def is_valid_action(self, action: int) -> bool:
        """Check if action is a known command id."""
        try:
            Action(action)
        except ValueError:
            return False
        return True

    # ==== Placement ====

    def _lock_piece(self) -> int:
        """
        Settle the current piece, clear lines, promote the next piece.

        Returns:
            Number of lines cleared
        """
        placed = self.current_piece
        self.board.place(placed)
        self.pieces_placed += 1

        cleared = self.board.clear_lines()
        if cleared:
            self._award_lines(cleared)
        logger.debug(
            "Placed %s at (%d, %d), cleared %d line(s)",
            placed.tag, placed.x, placed.y, cleared
        )

        self.current_piece = self.next_piece
        self.next_piece = random_piece(self.rng, self.board.width)

        if placed.y <= 0:
            self.status = GameStatus.GAME_OVER
            logger.info(
                "Game over: score=%d level=%d lines=%d",
                self.score, self.level, self.lines_cleared
            )

        return cleared

    def _award_lines(self, cleared: int) -> None:
        """Score a placement and apply any level-ups it earned."""
        points = LINE_CLEAR_POINTS[min(cleared, len(LINE_CLEAR_POINTS) - 1)]
        self.score += points * self.level
        self.lines_cleared += cleared

        target_level = self.lines_cleared // self.config.lines_per_level + 1
        while self.level < target_level:
            self.level += 1
            self.fall_interval = max(
                self.config.min_fall_interval_ms,
                self.fall_interval * self.config.speed_factor
            )
            logger.info("Level %d reached, fall interval %.0f ms", self.level, self.fall_interval)

    # ==== Snapshot ====

    def get_state(self) -> Dict[str, Any]:
        """Get current game state for rendering."""
        return {
            "board": self.board.to_rows(),
            "current_piece": self.current_piece.to_dict(),
            "next_piece": self.next_piece.to_dict(),
            "score": self.score,
            "level": self.level,
            "lines_cleared": self.lines_cleared,
            "pieces_placed": self.pieces_placed,
            "games_started": self.games_started,
            "fall_interval": self.fall_interval,
            "status": self.status.value,
            "paused": self.paused,
            "game_over": self.game_over,
            "width": self.board.width,
            "height": self.board.height,
        }

    def get_score(self) -> int:
        """Get current score."""
        return self.score
