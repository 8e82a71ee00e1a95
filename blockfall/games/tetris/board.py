"""
Board grid and the collision predicate.
"""

from typing import List, Optional, Set, Tuple

from .pieces import Piece, Shape

BOARD_WIDTH = 10
BOARD_HEIGHT = 20


class Board:
    """
    Fixed-size grid of settled cells.

    Row 0 is the top row. Each cell is None (empty) or the tag of the
    piece that settled there. Dimensions never change after creation.
    """

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT):
        self.width = width
        self.height = height
        self.cells: List[List[Optional[str]]] = [
            self._empty_row() for _ in range(height)
        ]

    def _empty_row(self) -> List[Optional[str]]:
        return [None for _ in range(self.width)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_empty(self, x: int, y: int) -> bool:
        """Check if an in-bounds cell holds no tag."""
        return self.cells[y][x] is None

    def is_row_complete(self, y: int) -> bool:
        return all(cell is not None for cell in self.cells[y])

    def place(self, piece: Piece) -> int:
        """
        Settle a piece's occupied cells into the grid.

        Cells above the top edge (negative row) are discarded.

        Returns:
            Number of cells written to the grid
        """
        placed = 0
        for x, y in piece.cells():
            if y < 0:
                continue
            self.cells[y][x] = piece.tag
            placed += 1
        return placed

    def clear_lines(self) -> int:
        """
        Remove every complete row, shifting the rows above it down.

        Scans from the bottom up. After a removal the same index is checked
        again, since the row that slid into it may also be complete.

        Returns:
            Number of rows cleared
        """
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if self.is_row_complete(y):
                del self.cells[y]
                self.cells.insert(0, self._empty_row())
                cleared += 1
            else:
                y -= 1
        return cleared

    def occupied_cells(self) -> Set[Tuple[int, int]]:
        """Coordinates of every non-empty cell."""
        return {
            (x, y)
            for y, row in enumerate(self.cells)
            for x, cell in enumerate(row)
            if cell is not None
        }

    def to_rows(self) -> List[List[Optional[str]]]:
        """Copy of the grid, safe to hand to collaborators."""
        return [list(row) for row in self.cells]

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height}, filled={len(self.occupied_cells())})"


def collides(shape: Shape, position: Tuple[int, int], board: Board) -> bool:
    """
    Check whether a shape at a position overlaps a wall, the floor or a settled cell.

    Cells above the top edge are only checked against the side walls, so a
    piece may legally poke out of the top while spawning.

    Args:
        shape: Binary shape matrix
        position: (x, y) of the shape's top-left corner in board coordinates
        board: Board to test against

    Returns:
        True if any occupied cell is out of bounds or on a settled cell
    """
    px, py = position
    for dy, row in enumerate(shape):
        for dx, value in enumerate(row):
            if not value:
                continue
            x = px + dx
            y = py + dy
            if x < 0 or x >= board.width or y >= board.height:
                return True
            if y >= 0 and not board.is_empty(x, y):
                return True
    return False
