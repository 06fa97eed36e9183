"""Tests for the ball and paddle entities."""

import math
import random

import pygame
import pytest

from conftest import FixedRandom
from pong.config import BallShape, InputMode, KeyBinding
from pong.entities import AIPaddle, Ball, HumanPaddle, Paddle, clamp
from pong.state import new_game


class TestBall:
    def test_reset_centers_ball(self):
        ball = Ball(10, 10, 8)
        ball.reset(800, 400, 5, FixedRandom(sign=1))
        assert ball.center_x == 400
        assert ball.center_y == 200
        assert tuple(ball.vel) == (5, 5)

    def test_reset_negative_direction(self):
        ball = Ball(0, 0, 8)
        ball.reset(800, 400, 5, FixedRandom(sign=-1))
        assert tuple(ball.vel) == (-5, -5)

    def test_reset_signs_are_random_with_fixed_magnitude(self):
        rng = random.Random(7)
        ball = Ball(0, 0, 8)
        seen = set()
        for _ in range(50):
            ball.reset(800, 400, 5, rng)
            assert abs(ball.vel.x) == 5 and abs(ball.vel.y) == 5
            seen.add(tuple(ball.vel))
        assert len(seen) == 4

    def test_advance(self):
        ball = Ball(100, 100, 8)
        ball.vel.update(3, -2)
        ball.advance()
        assert (ball.x, ball.y) == (103, 98)

    def test_clamp_speed_rescales_to_max(self):
        ball = Ball(0, 0, 8)
        ball.vel.update(30, -40)
        assert ball.clamp_speed(8)
        assert ball.speed == pytest.approx(8)
        assert ball.vel.x == pytest.approx(4.8)
        assert ball.vel.y == pytest.approx(-6.4)

    def test_clamp_speed_leaves_slow_ball_alone(self):
        ball = Ball(0, 0, 8)
        ball.vel.update(5, 5)
        assert not ball.clamp_speed(8)
        assert tuple(ball.vel) == (5, 5)

    def test_box_overlap(self):
        paddle = Paddle(10, 100, 10, 80, 6)
        ball = Ball(15, 150, 8)
        assert ball.overlaps(paddle)
        ball.x = 20
        assert not ball.overlaps(paddle)
        ball.x, ball.y = 15, 180
        assert not ball.overlaps(paddle)

    def test_box_overlap_uses_rounded_rect(self):
        paddle = Paddle(10, 100.4, 10, 80, 6)
        ball = Ball(19.2, 150, 8)
        assert ball.rect() == pygame.Rect(19, 150, 8, 8)
        assert paddle.rect() == pygame.Rect(10, 100, 10, 80)
        assert ball.overlaps(paddle)
        ball.x = 19.7  # rounds onto the paddle face
        assert not ball.overlaps(paddle)

    def test_position_and_velocity_are_vectors(self):
        ball = Ball(1, 2, 8)
        assert isinstance(ball.pos, pygame.Vector2)
        assert isinstance(ball.vel, pygame.Vector2)
        ball.x = 7
        assert ball.pos == pygame.Vector2(7, 2)

    def test_circle_misses_paddle_corner(self):
        paddle = Paddle(10, 100, 10, 80, 6)
        # Bounding box touches the corner region, the circle does not
        ball = Ball(19, 93, 8, BallShape.CIRCLE)
        assert not ball.overlaps(paddle)
        ball.y = 96
        assert ball.overlaps(paddle)


class TestHumanPaddle:
    def test_up_key_moves_up_one_step(self, classic_state):
        paddle = classic_state.left
        paddle.y = 50
        classic_state.keys.press("ArrowUp")
        paddle.update(classic_state)
        assert paddle.y == 44

    def test_holding_up_clamps_at_top(self, classic_state):
        paddle = classic_state.left
        paddle.y = 50
        classic_state.keys.press("w")
        for _ in range(20):
            paddle.update(classic_state)
        assert paddle.y == 0

    def test_holding_down_clamps_at_bottom(self, classic_state):
        paddle = classic_state.left
        classic_state.keys.press("s")
        for _ in range(100):
            paddle.update(classic_state)
        assert paddle.y == classic_state.config.height - paddle.height

    def test_classic_keys_are_case_insensitive(self, classic_state):
        paddle = classic_state.left
        paddle.y = 50
        classic_state.keys.press("W")
        paddle.update(classic_state)
        assert paddle.y == 44

    def test_exclusive_mode_prefers_up(self, classic_state):
        paddle = classic_state.left
        paddle.y = 50
        classic_state.keys.press("w")
        classic_state.keys.press("s")
        paddle.update(classic_state)
        assert paddle.vy == -paddle.speed
        assert paddle.y == 44

    def test_no_keys_stops(self, classic_state):
        paddle = classic_state.left
        paddle.vy = 6
        paddle.update(classic_state)
        assert paddle.vy == 0

    def test_independent_mode_both_keys_cancel(self, particles_state):
        paddle = particles_state.left
        paddle.y = 50
        particles_state.keys.press("w")
        particles_state.keys.press("s")
        paddle.update(particles_state)
        assert paddle.y == 50

    def test_independent_mode_only_nudges_in_bounds(self, particles_state):
        paddle = particles_state.left
        paddle.y = 0
        particles_state.keys.press("w")
        particles_state.keys.press("s")
        paddle.update(particles_state)
        # Up is blocked at the top edge, down still applies
        assert paddle.y == 6

    def test_independent_mode_is_case_sensitive(self, particles_state):
        paddle = particles_state.left
        paddle.y = 50
        particles_state.keys.press("W")
        paddle.update(particles_state)
        assert paddle.y == 50

    def test_particles_right_paddle_uses_arrows(self, particles_state):
        paddle = particles_state.right
        paddle.y = 50
        particles_state.keys.press("ArrowUp")
        paddle.update(particles_state)
        assert paddle.y == 44
        assert particles_state.left.y == 160


class TestAIPaddle:
    def make(self, state):
        cfg = state.config
        return AIPaddle(cfg.width - 20, 0, 10, 80, 6, dead_zone=35, difficulty=0.08, damping=0.7)

    def test_chases_ball_below(self, classic_state):
        ai = self.make(classic_state)
        classic_state.ball.y = 300
        classic_state.rng = FixedRandom(value=0.0)  # never damped
        ai.update(classic_state)
        assert ai.vy == 6
        assert ai.y == 6

    def test_chases_ball_above(self, classic_state):
        ai = self.make(classic_state)
        ai.y = 300
        classic_state.ball.y = 10
        classic_state.rng = FixedRandom(value=0.0)
        ai.update(classic_state)
        assert ai.vy == -6

    def test_dead_zone_holds_still(self, classic_state):
        ai = self.make(classic_state)
        ai.y = 100  # center 140
        classic_state.ball.y = 140 + 30 - classic_state.ball.size / 2
        classic_state.rng = FixedRandom(value=0.0)
        ai.update(classic_state)
        assert ai.vy == 0
        assert ai.y == 100

    def test_random_damping(self, classic_state):
        ai = self.make(classic_state)
        classic_state.ball.y = 300
        classic_state.rng = FixedRandom(value=0.99)
        ai.update(classic_state)
        assert ai.vy == pytest.approx(6 * 0.7)

    def test_replayable_with_seed(self, classic_config):
        def run(seed):
            state = new_game(classic_config, rng=random.Random(seed))
            ys = []
            for _ in range(60):
                state.ball.advance()
                state.right.update(state)
                ys.append(state.right.y)
            return ys

        assert run(99) == run(99)


def test_clamp():
    assert clamp(-1, 0, 5) == 0
    assert clamp(7, 0, 5) == 5
    assert clamp(3, 0, 5) == 3


def test_custom_binding():
    keys = KeyBinding(up=("i",), down=("k",))
    state = new_game(rng=random.Random(0))
    paddle = HumanPaddle(10, 100, 10, 80, 6, keys, InputMode.EXCLUSIVE)
    state.keys.press("k")
    paddle.update(state)
    assert paddle.y == 106
    assert math.isclose(paddle.vy, 6)
