"""
One simulation tick: paddles, ball motion, collisions, scoring, particles.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from .config import SpinModel
from .entities import Ball, Paddle, clamp

logger = logging.getLogger(__name__)


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


def bounce_off_walls(ball: Ball, height: float) -> bool:
    """Reflect off the top/bottom edges and pull the ball back inside."""
    if ball.y < 0 or ball.y + ball.size > height:
        ball.vel.y = -ball.vel.y
        ball.y = clamp(ball.y, 0, height - ball.size)
        return True
    return False


def apply_spin(ball: Ball, paddle: Paddle, config):
    if config.spin_model is SpinModel.HIT_OFFSET:
        # -1 at the paddle's top tip, +1 at its bottom tip
        offset = (ball.center_y - paddle.center_y) / (paddle.height / 2)
        ball.vel.y = clamp(offset, -1.0, 1.0) * config.hit_spin
    else:
        ball.vel.y += paddle.vy * config.paddle_spin_factor


def bounce_off_paddle(ball: Ball, paddle: Paddle, side: Side, config) -> bool:
    """Send the ball back from a paddle it overlaps, flush with the paddle face."""
    if not ball.overlaps(paddle):
        return False
    if side is Side.LEFT:
        if ball.vel.x > 0:
            return False
        ball.vel.x = -ball.vel.x
        ball.x = paddle.x + paddle.width
    else:
        if ball.vel.x < 0:
            return False
        ball.vel.x = -ball.vel.x
        ball.x = paddle.x - ball.size
    apply_spin(ball, paddle, config)
    logger.debug("Ball hit %s paddle at y=%.1f, speed %.2f", side.value, ball.center_y, ball.speed)
    return True


def check_score(state) -> Optional[Side]:
    """Award a point if the ball left the surface; returns the scoring side."""
    ball, cfg = state.ball, state.config
    if ball.x < 0:
        scorer, edge_x = Side.RIGHT, 0.0
        state.score.right += 1
    elif ball.x + ball.size > cfg.width:
        scorer, edge_x = Side.LEFT, float(cfg.width)
        state.score.left += 1
    else:
        return None

    if state.particles is not None:
        state.particles.spawn(edge_x, ball.center_y, state.rng)
    state.reset_ball()
    logger.info("%s scores: %d - %d", scorer.value.capitalize(), state.score.left, state.score.right)
    return scorer


def step(state) -> Optional[Side]:
    """Advance the game by one tick. Returns the side that scored, if any."""
    cfg = state.config
    ball = state.ball

    for paddle in state.paddles:
        paddle.update(state)

    ball.update(state)
    bounce_off_walls(ball, cfg.height)
    bounce_off_paddle(ball, state.left, Side.LEFT, cfg)
    bounce_off_paddle(ball, state.right, Side.RIGHT, cfg)

    scorer = check_score(state)
    ball.clamp_speed(cfg.max_ball_speed)

    if state.particles is not None:
        state.particles.update(state)

    state.frame += 1
    return scorer
