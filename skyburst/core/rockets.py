"""
Rockets
The rising phase of a firework, leaving a spark trail until it detonates.
"""
import random
from typing import List

from .config import ConfigError, SimParams
from .particles import Particle, prune_expired, render_all, update_all


class Rocket:
    """A projectile flying at constant velocity towards a random apex."""

    def __init__(self, x: float, y: float, vx: float, vy: float, params: SimParams):
        if vy >= 0:
            raise ConfigError(f"Rocket must fly upward (vy < 0), got vy={vy}")

        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.params = params
        self.width = params.rocket_width
        self.height = params.rocket_height
        self.trail: List[Particle] = []

        # Ticks until the rocket climbs from the launch point to its apex
        apex = random.uniform(params.apex_min, params.apex_max)
        self.countdown = (y - apex) / abs(vy)

    @property
    def pos(self) -> tuple:
        return (self.x, self.y)

    def advance(self) -> None:
        """Fly one tick and emit one trail spark at the tail."""
        self.countdown -= 1
        self.x += self.vx
        self.y += self.vy

        update_all(self.trail)
        prune_expired(self.trail)

        p = self.params
        self.trail.append(Particle(
            self.x + self.width / 2,
            self.y + self.height,
            p.trail_speed,
            p.trail_size,
            p.trail_decay,
            p.trail_colors,
            p
        ))

    def has_detonated(self) -> bool:
        return self.countdown <= 0

    def particle_count(self) -> int:
        return len(self.trail)

    def render(self, surface) -> None:
        surface.fill_rect(self.x, self.y, self.width, self.height, self.params.rocket_color)
        render_all(self.trail, surface)
