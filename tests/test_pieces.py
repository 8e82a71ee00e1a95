"""
Tests for the piece catalog, rotation and spawning.
"""

import random

import pytest

from blockfall.games.tetris.pieces import (
    PIECES, PIECE_TAGS, Piece, random_piece, rotate_shape, spawn_piece
)


class TestCatalog:
    """Tests for the seven canonical pieces."""

    def test_seven_pieces(self):
        """Test the catalog holds I, J, L, O, S, T, Z."""
        assert sorted(PIECES) == ["I", "J", "L", "O", "S", "T", "Z"]
        assert PIECE_TAGS == list(PIECES)

    def test_every_piece_has_four_cells(self):
        """Test each canonical shape is a tetromino."""
        for definition in PIECES.values():
            assert sum(sum(row) for row in definition.shape) == 4

    def test_shapes_are_rectangular(self):
        """Test every row of a shape has the same width."""
        for definition in PIECES.values():
            widths = {len(row) for row in definition.shape}
            assert len(widths) == 1

    def test_tag_matches_key(self):
        for tag, definition in PIECES.items():
            assert definition.tag == tag


class TestRotation:
    """Tests for transpose + reverse rotation."""

    def test_rotate_j_clockwise(self):
        """Test J rotates to its clockwise orientation."""
        assert rotate_shape(PIECES["J"].shape) == ((1, 1), (1, 0), (1, 0))

    def test_rotate_i_becomes_vertical(self):
        """Test the I bar turns into a one-wide column."""
        assert rotate_shape(PIECES["I"].shape) == ((1,), (1,), (1,), (1,))

    @pytest.mark.parametrize("tag", sorted(PIECES))
    def test_four_rotations_restore_shape(self, tag):
        """Test rotating four times returns the original shape."""
        shape = PIECES[tag].shape
        rotated = shape
        for _ in range(4):
            rotated = rotate_shape(rotated)
        assert rotated == shape

    def test_rotated_keeps_position(self):
        """Test rotation is about the matrix origin, not a pivot."""
        piece = spawn_piece("T").moved(1, 3)
        rotated = piece.rotated()

        assert (rotated.x, rotated.y) == (piece.x, piece.y)
        assert (rotated.width, rotated.height) == (piece.height, piece.width)


class TestPiece:
    """Tests for the piece value type."""

    def test_spawn_position_centered(self):
        """Test pieces spawn at x = width // 2 - 1, row 0."""
        piece = spawn_piece("O")

        assert piece.position == (4, 0)

    def test_moved_returns_new_piece(self):
        """Test moving never mutates the original."""
        piece = spawn_piece("S")
        moved = piece.moved(-1, 2)

        assert piece.position == (4, 0)
        assert moved.position == (3, 2)
        assert moved.shape == piece.shape

    def test_cells_are_absolute(self):
        """Test cells() offsets occupied cells by the position."""
        piece = Piece("O", PIECES["O"].shape, 2, 5)

        assert sorted(piece.cells()) == [(2, 5), (2, 6), (3, 5), (3, 6)]

    def test_to_dict(self):
        piece = spawn_piece("T")
        data = piece.to_dict()

        assert data == {"tag": "T", "shape": [[0, 1, 0], [1, 1, 1]], "x": 4, "y": 0}


class TestRandomPiece:
    """Tests for random piece selection."""

    def test_random_piece_spawns_at_top(self):
        piece = random_piece(random.Random(7))

        assert piece.tag in PIECES
        assert piece.position == (4, 0)

    def test_seeded_rng_is_reproducible(self):
        first_rng, second_rng = random.Random(42), random.Random(42)
        first = [random_piece(first_rng).tag for _ in range(10)]
        second = [random_piece(second_rng).tag for _ in range(10)]

        assert first == second

    def test_all_pieces_eventually_drawn(self):
        """Test selection covers the whole catalog."""
        rng = random.Random(99)
        seen = {random_piece(rng).tag for _ in range(500)}

        assert seen == set(PIECES)

    def test_default_rng(self):
        """Test the module-level generator is used without an rng."""
        assert random_piece().tag in PIECES
