"""
Piece catalog and the falling piece value type.
"""

import random
from dataclasses import dataclass, replace
from typing import Dict, Iterator, List, Optional, Tuple, Any

Shape = Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True)
class PieceDefinition:
    """Catalog entry: a canonical (unrotated) shape and its visual tag."""
    tag: str
    shape: Shape


# Canonical shapes, 1 = occupied cell
PIECES: Dict[str, PieceDefinition] = {
    "I": PieceDefinition("I", ((1, 1, 1, 1),)),
    "J": PieceDefinition("J", ((1, 0, 0),
                               (1, 1, 1))),
    "L": PieceDefinition("L", ((0, 0, 1),
                               (1, 1, 1))),
    "O": PieceDefinition("O", ((1, 1),
                               (1, 1))),
    "S": PieceDefinition("S", ((0, 1, 1),
                               (1, 1, 0))),
    "T": PieceDefinition("T", ((0, 1, 0),
                               (1, 1, 1))),
    "Z": PieceDefinition("Z", ((1, 1, 0),
                               (0, 1, 1))),
}

PIECE_TAGS: List[str] = list(PIECES)


def rotate_shape(shape: Shape) -> Shape:
    """
    Rotate a shape matrix 90 degrees clockwise.

    Transposes the matrix and reverses each resulting row. The rotation is
    about the matrix's own top-left origin, so a piece's bounding box swaps
    width and height without any re-centering.
    """
    width = len(shape[0])
    return tuple(
        tuple(row[col] for row in reversed(shape))
        for col in range(width)
    )


@dataclass(frozen=True)
class Piece:
    """A piece on the board: shape matrix, tag and top-left position."""
    tag: str
    shape: Shape
    x: int  # Left edge of the shape matrix on the board
    y: int  # Top edge of the shape matrix on the board

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def moved(self, dx: int, dy: int) -> "Piece":
        """Return a copy shifted by (dx, dy)."""
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self) -> "Piece":
        """Return a copy with the shape rotated clockwise in place."""
        return replace(self, shape=rotate_shape(self.shape))

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield absolute board coordinates of occupied cells."""
        for dy, row in enumerate(self.shape):
            for dx, value in enumerate(row):
                if value:
                    yield (self.x + dx, self.y + dy)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for snapshots."""
        return {
            "tag": self.tag,
            "shape": [list(row) for row in self.shape],
            "x": self.x,
            "y": self.y,
        }


def spawn_piece(tag: str, board_width: int = 10) -> Piece:
    """Create a catalog piece at the spawn position: centered, row 0."""
    definition = PIECES[tag]
    return Piece(
        tag=definition.tag,
        shape=definition.shape,
        x=board_width // 2 - 1,
        y=0,
    )


def random_piece(rng: Optional[random.Random] = None, board_width: int = 10) -> Piece:
    """
    Pick one of the seven catalog pieces uniformly at random.

    Args:
        rng: Random source (defaults to the module-level generator)
        board_width: Board width used to center the spawn position

    Returns:
        Fresh piece at the spawn position
    """
    chooser = rng if rng is not None else random
    return spawn_piece(chooser.choice(PIECE_TAGS), board_width)
