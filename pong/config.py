"""
Tunables for the Pong simulation.

Module-level constants hold the stock values; PongConfig bundles them per
game so a variant (or a test) can override any of them without touching
globals.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum

# --- Surface ---
WIDTH, HEIGHT = 800, 400
FPS = 60

# --- Paddles ---
PADDLE_WIDTH, PADDLE_HEIGHT = 10, 80
PADDLE_MARGIN = 10      # gap between a paddle and its side edge
PADDLE_SPEED = 6        # px per tick

# --- Ball ---
BALL_SIZE = 8
BALL_SPEED = 5          # per-axis speed on serve
MAX_BALL_SPEED = 8      # cap on |velocity|

# --- AI ---
AI_DEAD_ZONE = 35       # px around the ball the AI does not chase
AI_DIFFICULTY = 0.08    # damping kicks in when rng.random() > this
AI_DAMPING = 0.7

# --- Spin ---
PADDLE_SPIN_FACTOR = 0.2  # share of paddle velocity handed to the ball
HIT_SPIN = 6.0            # vertical speed given at the paddle tip

# --- Particles ---
PARTICLE_COUNT = 12
PARTICLE_SPEED = (2.0, 4.0)
PARTICLE_DECAY = 0.02
PARTICLE_GRAVITY = 0.1
PARTICLE_COLOR = (255, 215, 0)

# --- Style ---
BG_COLOR = (0, 0, 0)
FG_COLOR = (255, 255, 255)
CENTER_DASH = (5, 5)
SCORE_FONT_SIZE = 32
SCORE_Y = 50


class Variant(Enum):
    CLASSIC = "classic"
    PARTICLES = "particles"


class SpinModel(Enum):
    PADDLE_VELOCITY = "paddle_velocity"  # dy += factor * paddle.vy
    HIT_OFFSET = "hit_offset"            # dy = offset from paddle center * HIT_SPIN


class InputMode(Enum):
    EXCLUSIVE = "exclusive"      # up wins over down, sets velocity
    INDEPENDENT = "independent"  # up and down each nudge while in bounds


class BallShape(Enum):
    BOX = "box"
    CIRCLE = "circle"


@dataclass(frozen=True)
class KeyBinding:
    up: tuple = ()
    down: tuple = ()
    case_sensitive: bool = True


@dataclass
class PongConfig:
    variant: Variant = Variant.CLASSIC
    width: int = WIDTH
    height: int = HEIGHT
    fps: int = FPS

    paddle_width: float = PADDLE_WIDTH
    paddle_height: float = PADDLE_HEIGHT
    paddle_margin: float = PADDLE_MARGIN
    paddle_speed: float = PADDLE_SPEED

    ball_size: float = BALL_SIZE
    ball_speed: float = BALL_SPEED
    max_ball_speed: float = MAX_BALL_SPEED
    ball_shape: BallShape = BallShape.BOX

    ai_right: bool = True
    ai_dead_zone: float = AI_DEAD_ZONE
    ai_difficulty: float = AI_DIFFICULTY
    ai_damping: float = AI_DAMPING

    input_mode: InputMode = InputMode.EXCLUSIVE
    left_keys: KeyBinding = field(default_factory=lambda: KeyBinding(
        up=("w", "ArrowUp"), down=("s", "ArrowDown"), case_sensitive=False))
    right_keys: KeyBinding = field(default_factory=lambda: KeyBinding(
        up=("ArrowUp",), down=("ArrowDown",)))

    spin_model: SpinModel = SpinModel.PADDLE_VELOCITY
    paddle_spin_factor: float = PADDLE_SPIN_FACTOR
    hit_spin: float = HIT_SPIN

    particles: bool = False
    particle_count: int = PARTICLE_COUNT
    particle_speed: tuple = PARTICLE_SPEED
    particle_decay: float = PARTICLE_DECAY
    particle_gravity: float = PARTICLE_GRAVITY
    particle_color: tuple = PARTICLE_COLOR

    def __post_init__(self):
        if self.width <= 2 * (self.paddle_margin + self.paddle_width) + self.ball_size:
            raise ValueError(f"surface width {self.width} cannot fit both paddles")
        if self.height < self.paddle_height or self.height < self.ball_size:
            raise ValueError(f"surface height {self.height} is smaller than a paddle")
        if self.fps <= 0:
            raise ValueError("fps must be positive")
        if self.max_ball_speed <= 0:
            raise ValueError("max_ball_speed must be positive")
        if not 0.0 <= self.ai_difficulty <= 1.0:
            raise ValueError("ai_difficulty must be within [0, 1]")

    @classmethod
    def for_variant(cls, variant: Variant, **overrides) -> "PongConfig":
        """Preset matching one of the two shipped game variants."""
        if variant is Variant.PARTICLES:
            preset = dict(
                variant=variant,
                ball_shape=BallShape.CIRCLE,
                ai_right=False,
                input_mode=InputMode.INDEPENDENT,
                left_keys=KeyBinding(up=("w",), down=("s",)),
                right_keys=KeyBinding(up=("ArrowUp",), down=("ArrowDown",)),
                spin_model=SpinModel.HIT_OFFSET,
                particles=True,
            )
        else:
            preset = dict(variant=Variant.CLASSIC)
        preset.update(overrides)
        return cls(**preset)

    @classmethod
    def from_env(cls, variant: Variant = Variant.CLASSIC, **overrides) -> "PongConfig":
        """Preset with PONG_* environment variables layered on top.

        Explicit keyword overrides win over the environment.
        """
        env = {}
        for name, key, cast in (
            ("width", "PONG_WIDTH", int),
            ("height", "PONG_HEIGHT", int),
            ("fps", "PONG_FPS", int),
            ("max_ball_speed", "PONG_MAX_BALL_SPEED", float),
            ("ai_difficulty", "PONG_AI_DIFFICULTY", float),
        ):
            raw = os.getenv(key)
            if raw is not None and raw.strip():
                env[name] = cast(raw)
        env.update({k: v for k, v in overrides.items() if v is not None})
        return cls.for_variant(variant, **env)
