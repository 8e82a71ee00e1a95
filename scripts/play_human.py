#!/usr/bin/env python3
"""
Human Play Mode - Play Tetris yourself.

Controls:
    Left / Right (A / D): Move
    Down (S): Soft drop
    Up (W): Hard drop
    Space: Rotate
    P: Pause / resume
    R: Restart game
    ESC: Quit
"""
import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pygame
from blockfall.games.tetris import TetrisGame, TickScheduler, InputDispatcher
from blockfall.games.tetris.renderer import TetrisRenderer, BLACK
from blockfall.utils.config_loader import load_config
from blockfall.utils.logging_setup import setup_logging

logger = logging.getLogger("blockfall.play")

PADDING = 20


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Tetris")
    parser.add_argument("--config", type=str, default=None,
                        help="Path to config YAML (default: config.yaml)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the piece randomizer")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Override the configured log level")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for human play mode."""
    args = parse_args(argv)

    config = load_config(args.config)
    if args.seed is not None:
        config.game.seed = args.seed
    if args.log_level is not None:
        config.logging.level = args.log_level
    setup_logging(config.logging)

    game = TetrisGame(config.game)
    scheduler = TickScheduler(game)
    dispatcher = InputDispatcher(game)

    renderer = TetrisRenderer(cell_size=config.visualization.cell_size)
    render_w, render_h = renderer.get_preferred_size()
    renderer.set_render_area(PADDING, PADDING, render_w, render_h)

    pygame.init()
    surface = pygame.display.set_mode((render_w + PADDING * 2, render_h + PADDING * 2))
    pygame.display.set_caption(config.visualization.window_title)
    clock = pygame.time.Clock()

    # Redraw only when the game reports a change
    latest_state = {"state": game.get_state(), "dirty": True}

    def on_state(state):
        latest_state["state"] = state
        latest_state["dirty"] = True

    unsubscribe = game.subscribe(on_state)
    high_score = 0

    logger.info("Tetris started (seed=%s)", config.game.seed)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            else:
                dispatcher.handle_event(event)

        scheduler.update(pygame.time.get_ticks())

        if game.game_over and game.score > high_score:
            high_score = game.score
            logger.info("New high score: %d", high_score)

        if latest_state["dirty"]:
            surface.fill(BLACK)
            renderer.render(latest_state["state"], surface)
            pygame.display.flip()
            latest_state["dirty"] = False

        clock.tick(config.visualization.render_fps)

    unsubscribe()
    scheduler.close()
    pygame.quit()
    logger.info("Final high score: %d", high_score)


if __name__ == "__main__":
    main()
