"""Two-paddle Pong on pygame."""

from .config import PongConfig, Variant
from .loop import GameLoop
from .physics import step
from .render import render
from .state import GameState, new_game

__version__ = "0.1.0"

__all__ = [
    "GameLoop",
    "GameState",
    "PongConfig",
    "Variant",
    "new_game",
    "render",
    "step",
]
