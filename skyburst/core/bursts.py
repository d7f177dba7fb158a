"""
Skyburst Bursts - Particle Explosions

Three shapes share one update/prune/render contract:
- RadialBurst: the main firework explosion, optionally with sparkles and stars
- SecondaryBurst: the small pop left behind by a dying star
- FountainBurst: an upward shower fired straight from the ground
"""
import random
from typing import List

from .config import ColorPair, SimParams
from .particles import Particle, prune_expired, render_all, spawn_particles, update_all


class Burst:
    """Base class for a batch of particles spawned at one point.

    Subclasses fill `self.particles` in `_spawn()`.
    """

    # Draw only on frames where random() > flicker (0 = every frame)
    flicker = 0.0

    def __init__(self, x: float, y: float, colors: ColorPair, params: SimParams):
        self.x = x
        self.y = y
        self.colors = colors
        self.params = params
        self.particles: List[Particle] = []
        self._spawn()

    def _spawn(self) -> None:
        raise NotImplementedError

    def update(self) -> None:
        update_all(self.particles)
        prune_expired(self.particles)

    def is_expired(self) -> bool:
        return not self.particles

    def particle_count(self) -> int:
        return len(self.particles)

    def render(self, surface) -> None:
        if _visible(self.flicker):
            render_all(self.particles, surface)


def _visible(flicker: float) -> bool:
    """Roll the flicker dice. Steady batches skip the random draw."""
    return flicker <= 0 or random.random() > flicker


class SecondaryBurst(Burst):
    """Small, sparse pop spawned where a star burns out."""

    def __init__(self, x: float, y: float, colors: ColorPair, params: SimParams):
        self.flicker = params.secondary_flicker
        super().__init__(x, y, colors, params)

    def _spawn(self) -> None:
        p = self.params
        self.particles = spawn_particles(
            p.secondary_count, self.x, self.y,
            p.secondary_speed, p.secondary_size, p.secondary_decay,
            self.colors, p
        )


class FountainBurst(Burst):
    """Narrow, strongly upward shower of long-lived particles."""

    def _spawn(self) -> None:
        p = self.params
        self.particles = spawn_particles(
            p.fountain_count, self.x, self.y,
            p.fountain_speed, p.fountain_size, p.fountain_decay,
            self.colors, p,
            direction_range=p.fountain_direction_range,
            y_spread=p.fountain_y_spread
        )


class RadialBurst(Burst):
    """Omnidirectional firework explosion.

    Optional sub-populations:
    - sparkles: more numerous, smaller, longer-lived, flickering
    - stars: a few white dots that each end in a SecondaryBurst
    """

    def __init__(
        self,
        x: float,
        y: float,
        colors: ColorPair,
        params: SimParams,
        sparkles: bool = False,
        stars: bool = False
    ):
        self.with_sparkles = sparkles
        self.with_stars = stars
        self.sparkles: List[Particle] = []
        self.stars: List[Particle] = []
        self.secondaries: List[SecondaryBurst] = []
        super().__init__(x, y, colors, params)

    def _spawn(self) -> None:
        p = self.params
        self.particles = spawn_particles(
            p.burst_count, self.x, self.y,
            p.burst_speed, p.burst_size, p.burst_decay,
            self.colors, p
        )

        if self.with_sparkles:
            self.sparkles = spawn_particles(
                p.sparkle_count, self.x, self.y,
                p.burst_speed * p.sparkle_speed_scale,
                p.burst_size * p.sparkle_size_scale,
                int(p.burst_decay * p.sparkle_decay_scale),
                p.sparkle_colors, p
            )

        if self.with_stars:
            for _ in range(p.star_count):
                # Stars burn out at different times: decay in [half, full)
                decay = int((random.random() + 1) * (p.burst_decay / 2))
                self.stars.append(Particle(
                    self.x, self.y,
                    p.burst_speed * p.star_speed_scale,
                    1, decay, p.star_colors, p
                ))

    def update(self) -> None:
        update_all(self.particles)
        prune_expired(self.particles)
        update_all(self.sparkles)
        prune_expired(self.sparkles)

        update_all(self.stars)
        for secondary in self.secondaries:
            secondary.update()

        # A star that burns out this tick pops in the same tick
        prune_expired(self.stars, on_expire=self._pop_star)
        self.secondaries = [s for s in self.secondaries if not s.is_expired()]

    def _pop_star(self, star: Particle) -> None:
        self.secondaries.append(
            SecondaryBurst(star.x, star.y, self.params.secondary_colors, self.params)
        )

    def is_expired(self) -> bool:
        return not (self.particles or self.sparkles or self.stars or self.secondaries)

    def particle_count(self) -> int:
        count = len(self.particles) + len(self.sparkles) + len(self.stars)
        return count + sum(s.particle_count() for s in self.secondaries)

    def render(self, surface) -> None:
        render_all(self.particles, surface)
        if self.sparkles and _visible(self.params.sparkle_flicker):
            render_all(self.sparkles, surface)
        render_all(self.stars, surface)
        for secondary in self.secondaries:
            secondary.render(surface)
