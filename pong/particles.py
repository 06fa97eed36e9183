"""Scoring bursts. Purely decorative; nothing in the physics reads them."""

from __future__ import annotations

import math
from dataclasses import dataclass

PARTICLE_RADIUS = 2


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: float
    color: tuple

    @property
    def alive(self) -> bool:
        return self.life > 0

    def update(self, state):
        cfg = state.config
        self.life -= cfg.particle_decay
        self.x += self.vx
        self.y += self.vy
        self.vy += cfg.particle_gravity

    def render(self, canvas):
        if self.life > 0:
            alpha = int(255 * min(1.0, self.life))
            canvas.fill_circle(self.x, self.y, PARTICLE_RADIUS, self.color, alpha)


class ParticleSystem:
    def __init__(self, count: int, speed_band: tuple, color: tuple):
        self.count = count
        self.speed_band = speed_band
        self.color = color
        self.particles = []

    def __len__(self):
        return len(self.particles)

    def spawn(self, x: float, y: float, rng):
        """Ring of particles flying out from (x, y), evenly spaced in angle."""
        lo, hi = self.speed_band
        for i in range(self.count):
            ang = math.tau * i / self.count
            spd = rng.uniform(lo, hi)
            self.particles.append(
                Particle(x, y, math.cos(ang) * spd, math.sin(ang) * spd, 1.0, self.color))

    def update(self, state):
        for p in self.particles:
            p.update(state)
        self.particles = [p for p in self.particles if p.alive]

    def render(self, canvas):
        for p in self.particles:
            p.render(canvas)

    @classmethod
    def from_config(cls, config):
        return cls(config.particle_count, config.particle_speed, config.particle_color)
