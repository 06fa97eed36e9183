"""
Pong (Python + Pygame)

Controls:
- classic:   W/S or Up/Down move the left paddle; the right paddle is AI
- particles: W/S move the left paddle, Up/Down the right one
- Esc or closing the window quits

Run:
    python -m pong --variant particles
"""

from __future__ import annotations

import argparse
import logging
import os
import random
from typing import Optional, Sequence

import pygame

from .config import PongConfig, Variant
from .input_state import InputState
from .logging_config import setup_logging
from .loop import GameLoop
from .render import PygameCanvas
from .state import new_game

logger = logging.getLogger(__name__)


class PygameHost:
    """Window, clock and keyboard: everything the loop needs from pygame."""

    def __init__(self, config: PongConfig, keys: Optional[InputState] = None):
        pygame.init()
        pygame.display.set_caption(f"Pong ({config.variant.value})")
        self.config = config
        self.screen = pygame.display.set_mode((config.width, config.height))
        self.canvas = PygameCanvas(self.screen)
        self.clock = pygame.time.Clock()
        self.keys = keys if keys is not None else InputState()
        self.alive = True

    def wait_for_frame(self) -> bool:
        pygame.display.flip()
        self.clock.tick(self.config.fps)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.alive = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.alive = False
            elif event.type == pygame.WINDOWFOCUSLOST:
                # Key-up events go to whichever window has focus now
                self.keys.clear()
            else:
                self.keys.handle_event(event)
        return self.alive

    def close(self):
        pygame.quit()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pong", description="Two-paddle Pong")
    parser.add_argument("--variant", choices=[v.value for v in Variant], default=Variant.CLASSIC.value,
                        help="classic (AI opponent) or particles (two players, score bursts)")
    parser.add_argument("--width", type=int, default=None, help="Surface width in px")
    parser.add_argument("--height", type=int, default=None, help="Surface height in px")
    parser.add_argument("--fps", type=int, default=None, help="Frames per second")
    parser.add_argument("--seed", type=int, default=None, help="Seed for serves and AI")
    parser.add_argument("--frames", type=int, default=None, help="Stop after this many frames")
    parser.add_argument("--headless", action="store_true", help="Use the SDL dummy video driver")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    if args.headless:
        os.environ["SDL_VIDEODRIVER"] = "dummy"

    try:
        config = PongConfig.from_env(Variant(args.variant), width=args.width,
                                     height=args.height, fps=args.fps)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    host = PygameHost(config)
    try:
        state = new_game(config, rng=random.Random(args.seed), keys=host.keys)
        loop = GameLoop(state, host.canvas, host.wait_for_frame)
        frames = loop.start(max_frames=args.frames)
        logger.info("Final score %d - %d after %d frames",
                    state.score.left, state.score.right, frames)
    finally:
        host.close()
    return 0
