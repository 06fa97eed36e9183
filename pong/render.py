"""
Drawing. render() is a pure function of the game state; all pixels go
through a Canvas so the simulation can be drawn on pygame or recorded in
tests.
"""

from __future__ import annotations

import pygame

from .config import BG_COLOR, CENTER_DASH, FG_COLOR


class Canvas:
    """The drawing capability the game needs from its host."""

    width = 0
    height = 0

    def clear(self, color):
        raise NotImplementedError

    def fill_rect(self, x, y, w, h, color):
        raise NotImplementedError

    def fill_circle(self, cx, cy, radius, color, alpha=255):
        raise NotImplementedError

    def dashed_line(self, start, end, dash, color):
        raise NotImplementedError

    def text(self, value, x, y, color, size):
        """Draw value horizontally centered on x."""
        raise NotImplementedError


class PygameCanvas(Canvas):
    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self.width, self.height = surface.get_size()
        self._fonts = {}

    def _font(self, size):
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def clear(self, color):
        self.surface.fill(color)

    def fill_rect(self, x, y, w, h, color):
        pygame.draw.rect(self.surface, color, pygame.Rect(round(x), round(y), round(w), round(h)))

    def fill_circle(self, cx, cy, radius, color, alpha=255):
        if alpha >= 255:
            pygame.draw.circle(self.surface, color, (round(cx), round(cy)), radius)
            return
        # Translucent: draw on a scratch surface and blend it in
        r = int(radius) + 1
        scratch = pygame.Surface((2 * r, 2 * r), pygame.SRCALPHA)
        pygame.draw.circle(scratch, (*color[:3], max(0, alpha)), (r, r), radius)
        self.surface.blit(scratch, (round(cx) - r, round(cy) - r))

    def dashed_line(self, start, end, dash, color):
        on, off = dash
        (x1, y1), (x2, y2) = start, end
        length = ((x2 - x1) ** 2 + (y2 - y1) ** 2) ** 0.5
        if length == 0:
            return
        ux, uy = (x2 - x1) / length, (y2 - y1) / length
        pos = 0.0
        while pos < length:
            seg_end = min(pos + on, length)
            pygame.draw.line(self.surface, color,
                             (x1 + ux * pos, y1 + uy * pos),
                             (x1 + ux * seg_end, y1 + uy * seg_end))
            pos = seg_end + off

    def text(self, value, x, y, color, size):
        surf = self._font(size).render(str(value), True, color)
        rect = surf.get_rect(center=(round(x), round(y)))
        self.surface.blit(surf, rect)


def draw_center_line(canvas: Canvas):
    mid = canvas.width / 2
    canvas.dashed_line((mid, 0), (mid, canvas.height), CENTER_DASH, FG_COLOR)


def render(state, canvas: Canvas):
    canvas.clear(BG_COLOR)
    draw_center_line(canvas)
    state.left.render(canvas)
    state.right.render(canvas)
    state.ball.render(canvas)
    state.score.render(canvas)
    if state.particles is not None:
        state.particles.render(canvas)
