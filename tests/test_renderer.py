"""
Tests for the pygame renderer, run against the mocked pygame module.
"""

from unittest.mock import MagicMock

from blockfall.games.tetris import GameStatus


def _rendered_text(mock_pygame):
    font = mock_pygame.font.Font.return_value
    return [c.args[0] for c in font.render.call_args_list]


class TestTetrisRenderer:
    """Tests for TetrisRenderer."""

    def test_preferred_size(self, mock_pygame_module):
        """Test size covers board, next box and info strip."""
        from blockfall.games.tetris.renderer import TetrisRenderer

        renderer = TetrisRenderer(cell_size=25)

        assert renderer.get_preferred_size() == (10 * 25 + 6 * 25 + 10, 20 * 25 + 80)

    def test_set_cell_size(self, mock_pygame_module):
        from blockfall.games.tetris.renderer import TetrisRenderer

        renderer = TetrisRenderer(cell_size=25)
        renderer.set_cell_size(20)

        assert renderer.get_cell_size() == 20
        assert renderer.get_preferred_size() == (10 * 20 + 6 * 20 + 10, 20 * 20 + 80)

    def test_set_render_area_fits_cells(self, mock_pygame_module):
        from blockfall.games.tetris.renderer import TetrisRenderer

        renderer = TetrisRenderer(cell_size=25)
        renderer.set_render_area(0, 0, 330, 480)

        assert renderer.get_cell_size() == 20

    def test_render_running_game(self, game, mock_pygame_module):
        """Test a running game draws board and info without overlays."""
        from blockfall.games.tetris.renderer import TetrisRenderer

        mock_pygame_module.draw.rect.reset_mock()
        mock_pygame_module.font.Font.return_value.render.reset_mock()
        renderer = TetrisRenderer()
        game.board.cells[19][0] = "Z"

        renderer.render(game.get_state(), MagicMock())

        assert mock_pygame_module.draw.rect.called
        texts = _rendered_text(mock_pygame_module)
        assert "NEXT" in texts
        assert "Score: 0" in texts
        assert "PAUSED" not in texts

    def test_render_paused(self, game, mock_pygame_module):
        from blockfall.games.tetris.renderer import TetrisRenderer

        mock_pygame_module.font.Font.return_value.render.reset_mock()
        game.toggle_pause()

        TetrisRenderer().render(game.get_state(), MagicMock())

        assert "PAUSED" in _rendered_text(mock_pygame_module)

    def test_render_game_over(self, game, mock_pygame_module):
        from blockfall.games.tetris.renderer import TetrisRenderer

        mock_pygame_module.font.Font.return_value.render.reset_mock()
        game.score = 700
        game.status = GameStatus.GAME_OVER

        TetrisRenderer().render(game.get_state(), MagicMock())

        texts = _rendered_text(mock_pygame_module)
        assert "GAME OVER" in texts
        assert "Final Score: 700" in texts

    def test_render_does_not_mutate_state(self, game, mock_pygame_module):
        from blockfall.games.tetris.renderer import TetrisRenderer

        state = game.get_state()
        before = game.get_state()

        TetrisRenderer().render(state, MagicMock())

        assert state == before
