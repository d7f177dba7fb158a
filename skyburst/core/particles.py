"""
Particle System
The simulation primitive shared by rockets and bursts.
"""
import math
import random
from typing import Callable, List, Optional

from .config import ColorPair, SimParams


def particle_size(base: float) -> float:
    """Randomized particle size around `base`, never below 1.

    Rounds half up so a 0.5 draw still gives a visible particle.
    """
    return max(1.0, float(math.floor((random.random() + 0.1) * base + 0.5)))


class Particle:
    """A single decaying particle with gravity and drag."""

    def __init__(
        self,
        x: float,
        y: float,
        max_speed: float,
        size: float,
        decay: int,
        colors: ColorPair,
        params: SimParams,
        direction_range: float = 1.0,
        y_spread: float = 0.5
    ):
        self.x = x
        self.y = y
        self.params = params
        self.color = colors.color
        self.highlight = colors.highlight
        self.direction_range = direction_range
        self.y_spread = y_spread

        self.max_size = max(1.0, float(size))
        self.size = self.max_size
        self.max_decay = max(1, int(decay))
        self.decay = self.max_decay

        # direction_range < 1 narrows the sideways spread,
        # y_spread > 0.5 biases the launch upward
        self.vx = (random.random() - 0.5) * max_speed * direction_range
        self.vy = (random.random() - y_spread) * max_speed

    @property
    def life(self) -> float:
        """Remaining fraction of the particle's decay (1.0 at birth)."""
        return max(0.0, self.decay / self.max_decay)

    def update(self) -> None:
        """Advance one tick."""
        p = self.params
        self.vy = min(self.vy + p.gravity, p.terminal_velocity)
        self.vx *= p.drag
        self.vy *= p.drag

        self.x += self.vx
        self.y += self.vy

        self.decay -= 1
        self.size = self.max_size * self.life

    def is_expired(self) -> bool:
        return self.decay <= 0

    def render(self, surface) -> None:
        """Draw the base disc and the highlight core.

        Freshly spawned particles flash at full size, then the
        highlight shrinks to half.
        """
        surface.fill_circle(self.x, self.y, self.size, self.color)
        if self.life > self.params.highlight_threshold:
            radius = self.size
        else:
            radius = self.size / 2
        surface.fill_circle(self.x, self.y, radius, self.highlight)


def spawn_particles(
    count: int,
    x: float,
    y: float,
    max_speed: float,
    size: float,
    decay: int,
    colors: ColorPair,
    params: SimParams,
    direction_range: float = 1.0,
    y_spread: float = 0.5
) -> List[Particle]:
    """Create a batch of particles at one point with randomized sizes."""
    return [
        Particle(x, y, max_speed, particle_size(size), decay, colors, params,
                 direction_range=direction_range, y_spread=y_spread)
        for _ in range(count)
    ]


def update_all(particles: List[Particle]) -> None:
    for particle in particles:
        particle.update()


def prune_expired(
    particles: List[Particle],
    on_expire: Optional[Callable[[Particle], None]] = None
) -> None:
    """Remove expired particles in place.

    Expired entries are swapped with the last live one and the tail is
    truncated, so no new list is allocated each tick. Order is not kept.
    """
    i = 0
    end = len(particles)
    while i < end:
        particle = particles[i]
        if particle.is_expired():
            if on_expire is not None:
                on_expire(particle)
            end -= 1
            particles[i] = particles[end]
        else:
            i += 1
    del particles[end:]


def render_all(particles: List[Particle], surface) -> None:
    for particle in particles:
        particle.render(surface)
