"""
Game entities. Every entity exposes update(state) and render(canvas); the
simulation step decides when each runs.
"""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .config import FG_COLOR, SCORE_FONT_SIZE, SCORE_Y, BallShape, InputMode


def clamp(x, lo, hi):
    return max(lo, min(hi, x))


class Entity:
    def update(self, state):
        raise NotImplementedError

    def render(self, canvas):
        raise NotImplementedError


# ----- Ball -----
class Ball(Entity):
    """Ball stored by its bounding box (pos is the top-left corner)."""

    def __init__(self, x: float, y: float, size: float, shape: BallShape = BallShape.BOX):
        # Float position for smooth motion; rect() rounds it for collisions
        self.pos = pygame.Vector2(x, y)
        self.vel = pygame.Vector2()
        self.size = size
        self.shape = shape

    @property
    def x(self) -> float:
        return self.pos.x

    @x.setter
    def x(self, value: float):
        self.pos.x = value

    @property
    def y(self) -> float:
        return self.pos.y

    @y.setter
    def y(self, value: float):
        self.pos.y = value

    @property
    def center_x(self) -> float:
        return self.pos.x + self.size / 2

    @property
    def center_y(self) -> float:
        return self.pos.y + self.size / 2

    @property
    def radius(self) -> float:
        return self.size / 2

    @property
    def speed(self) -> float:
        return self.vel.length()

    def rect(self) -> pygame.Rect:
        return pygame.Rect(round(self.pos.x), round(self.pos.y), round(self.size), round(self.size))

    def reset(self, width: float, height: float, base_speed: float, rng):
        """Serve from the middle of the surface, each axis heading a random way."""
        self.pos.update(width / 2 - self.size / 2, height / 2 - self.size / 2)
        self.vel.update(base_speed * rng.choice((-1, 1)), base_speed * rng.choice((-1, 1)))

    def advance(self):
        self.pos += self.vel

    def clamp_speed(self, max_speed: float) -> bool:
        """Rescale the velocity to max_speed if it is faster, keeping direction."""
        if self.vel.length() > max_speed:
            self.vel.scale_to_length(max_speed)
            return True
        return False

    def overlaps(self, paddle: "Paddle") -> bool:
        if self.shape is BallShape.CIRCLE:
            # Closest point on the paddle to the ball's center
            px = clamp(self.center_x, paddle.x, paddle.x + paddle.width)
            py = clamp(self.center_y, paddle.y, paddle.y + paddle.height)
            return (self.center_x - px) ** 2 + (self.center_y - py) ** 2 < self.radius ** 2
        return self.rect().colliderect(paddle.rect())

    def update(self, state):
        self.advance()

    def render(self, canvas):
        if self.shape is BallShape.CIRCLE:
            canvas.fill_circle(self.center_x, self.center_y, self.radius, FG_COLOR)
        else:
            canvas.fill_rect(self.x, self.y, self.size, self.size, FG_COLOR)


# ----- Paddles -----
class Paddle(Entity):
    def __init__(self, x: float, y: float, width: float, height: float, speed: float):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.speed = speed
        self.vy = 0.0

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def rect(self) -> pygame.Rect:
        return pygame.Rect(round(self.x), round(self.y), round(self.width), round(self.height))

    def steer(self, state):
        """Pick this tick's velocity."""

    def move(self, surface_height: float):
        self.y = clamp(self.y + self.vy, 0, surface_height - self.height)

    def update(self, state):
        self.steer(state)
        self.move(state.config.height)

    def render(self, canvas):
        canvas.fill_rect(self.x, self.y, self.width, self.height, FG_COLOR)


class HumanPaddle(Paddle):
    """Paddle driven by held keys."""

    def __init__(self, x, y, width, height, speed, keys, mode: InputMode = InputMode.EXCLUSIVE):
        super().__init__(x, y, width, height, speed)
        self.keys = keys
        self.mode = mode

    def steer(self, state):
        up = state.keys.any_held(self.keys.up, self.keys.case_sensitive)
        down = state.keys.any_held(self.keys.down, self.keys.case_sensitive)
        if self.mode is InputMode.EXCLUSIVE:
            if up:
                self.vy = -self.speed
            elif down:
                self.vy = self.speed
            else:
                self.vy = 0.0
            return
        # Independent nudges, each only while there is room to move
        self.vy = 0.0
        if up and self.y > 0:
            self.vy -= self.speed
        if down and self.y + self.height < state.config.height:
            self.vy += self.speed


class AIPaddle(Paddle):
    """Follows the ball with a dead zone and random sluggishness."""

    def __init__(self, x, y, width, height, speed, dead_zone, difficulty, damping):
        super().__init__(x, y, width, height, speed)
        self.dead_zone = dead_zone
        self.difficulty = difficulty
        self.damping = damping

    def steer(self, state):
        target = state.ball.center_y
        if self.center_y < target - self.dead_zone:
            self.vy = self.speed
        elif self.center_y > target + self.dead_zone:
            self.vy = -self.speed
        else:
            self.vy = 0.0
        if state.rng.random() > self.difficulty:
            self.vy *= self.damping


# ----- Score -----
@dataclass
class Score:
    left: int = 0
    right: int = 0

    def render(self, canvas):
        canvas.text(str(self.left), canvas.width / 4, SCORE_Y, FG_COLOR, SCORE_FONT_SIZE)
        canvas.text(str(self.right), 3 * canvas.width / 4, SCORE_Y, FG_COLOR, SCORE_FONT_SIZE)
