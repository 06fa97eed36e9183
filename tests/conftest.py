"""Pytest configuration and shared fixtures."""

import os
import random
import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

# No display needed for tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from pong.config import PongConfig, Variant
from pong.state import new_game


class FixedRandom:
    """Stand-in for random.Random that always returns the same draws."""

    def __init__(self, value=0.5, sign=1):
        self.value = value
        self.sign = sign

    def random(self):
        return self.value

    def choice(self, seq):
        return seq[-1] if self.sign > 0 else seq[0]

    def uniform(self, a, b):
        return a + (b - a) * self.value


class RecordingCanvas:
    """Canvas that remembers every draw call instead of drawing."""

    def __init__(self, width=800, height=400):
        self.width = width
        self.height = height
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("fill_rect", x, y, w, h, color))

    def fill_circle(self, cx, cy, radius, color, alpha=255):
        self.calls.append(("fill_circle", cx, cy, radius, color, alpha))

    def dashed_line(self, start, end, dash, color):
        self.calls.append(("dashed_line", start, end, dash, color))

    def text(self, value, x, y, color, size):
        self.calls.append(("text", value, x, y, color, size))

    def names(self):
        return [c[0] for c in self.calls]


@pytest.fixture(autouse=True)
def pygame_init():
    pygame.init()
    yield


@pytest.fixture
def classic_config():
    return PongConfig.for_variant(Variant.CLASSIC)


@pytest.fixture
def particles_config():
    return PongConfig.for_variant(Variant.PARTICLES)


@pytest.fixture
def classic_state(classic_config):
    return new_game(classic_config, rng=random.Random(1234))


@pytest.fixture
def particles_state(particles_config):
    return new_game(particles_config, rng=random.Random(1234))


@pytest.fixture
def recording_canvas():
    return RecordingCanvas()
