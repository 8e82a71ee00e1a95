"""
Board-building helpers shared by the test modules.
"""


def fill_row(board, y, tag="X", gaps=()):
    """Fill board row y with tag, leaving the given columns empty."""
    for x in range(board.width):
        board.cells[y][x] = None if x in gaps else tag


def complete_rows(board):
    """Indexes of rows with no empty cell."""
    return [y for y in range(board.height) if board.is_row_complete(y)]
