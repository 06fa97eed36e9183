"""The GameState aggregate handed to the simulation step and the renderer."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from .config import PongConfig
from .entities import AIPaddle, Ball, HumanPaddle, Paddle, Score
from .input_state import InputState
from .particles import ParticleSystem

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    config: PongConfig
    ball: Ball
    left: Paddle
    right: Paddle
    score: Score = field(default_factory=Score)
    keys: InputState = field(default_factory=InputState)
    particles: Optional[ParticleSystem] = None
    rng: random.Random = field(default_factory=random.Random)
    frame: int = 0

    @property
    def paddles(self):
        return (self.left, self.right)

    def reset_ball(self):
        cfg = self.config
        self.ball.reset(cfg.width, cfg.height, cfg.ball_speed, self.rng)


def new_game(config: Optional[PongConfig] = None, rng=None, keys: Optional[InputState] = None) -> GameState:
    """Build a fresh game: centered paddles, a served ball, zero score."""
    cfg = config or PongConfig()
    rng = rng if rng is not None else random.Random()
    keys = keys if keys is not None else InputState()

    paddle_y = cfg.height / 2 - cfg.paddle_height / 2
    left = HumanPaddle(cfg.paddle_margin, paddle_y, cfg.paddle_width, cfg.paddle_height,
                       cfg.paddle_speed, cfg.left_keys, cfg.input_mode)
    right_x = cfg.width - cfg.paddle_width - cfg.paddle_margin
    if cfg.ai_right:
        right = AIPaddle(right_x, paddle_y, cfg.paddle_width, cfg.paddle_height, cfg.paddle_speed,
                         cfg.ai_dead_zone, cfg.ai_difficulty, cfg.ai_damping)
    else:
        right = HumanPaddle(right_x, paddle_y, cfg.paddle_width, cfg.paddle_height,
                            cfg.paddle_speed, cfg.right_keys, cfg.input_mode)

    ball = Ball(0.0, 0.0, cfg.ball_size, cfg.ball_shape)
    state = GameState(
        config=cfg,
        ball=ball,
        left=left,
        right=right,
        keys=keys,
        particles=ParticleSystem.from_config(cfg) if cfg.particles else None,
        rng=rng,
    )
    state.reset_ball()
    logger.info("New %s game on a %dx%d surface", cfg.variant.value, cfg.width, cfg.height)
    return state
