"""Frame-driven game loop with an injected wait-for-next-frame primitive."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from . import physics
from .render import render

logger = logging.getLogger(__name__)


class LoopStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"


class GameLoop:
    """
    Runs step-then-render once per frame.

    wait_for_frame blocks until the host is ready for the next frame and
    returns False once the host has gone away.
    """

    def __init__(self, state, canvas, wait_for_frame: Callable[[], bool],
                 simulate=physics.step, draw=render):
        self.state = state
        self.canvas = canvas
        self.wait_for_frame = wait_for_frame
        self.simulate = simulate
        self.draw = draw
        self.status = LoopStatus.IDLE
        self.frames = 0

    def tick(self):
        scorer = self.simulate(self.state)
        self.draw(self.state, self.canvas)
        self.frames += 1
        return scorer

    def start(self, max_frames: Optional[int] = None) -> int:
        """Leave Idle and run frames until the host stops or max_frames is hit."""
        if self.status is LoopStatus.RUNNING:
            raise RuntimeError("game loop is already running")
        self.status = LoopStatus.RUNNING
        logger.info("Game loop started")

        ran = 0
        while max_frames is None or ran < max_frames:
            self.tick()
            ran += 1
            if not self.wait_for_frame():
                logger.info("Host went away after %d frames", ran)
                break
        return ran
