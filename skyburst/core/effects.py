"""
Skyburst Effects - Rocket Lifecycle

An Effect wraps one Rocket and the RadialBurst it turns into:

    FLYING --(rocket detonates)--> EXPLODING --(burst expires)--> DONE

Fountains skip the rocket and start out EXPLODING.
"""
from typing import Optional

from .bursts import Burst, RadialBurst
from .config import ColorPair, SimParams
from .rockets import Rocket


class Effect:
    """One-way state machine for a single launched firework."""

    # States
    FLYING = "flying"
    EXPLODING = "exploding"
    DONE = "done"

    def __init__(
        self,
        rocket: Optional[Rocket] = None,
        colors: Optional[ColorPair] = None,
        sparkles: bool = False,
        stars: bool = False,
        burst: Optional[Burst] = None
    ):
        self.rocket = rocket
        self.colors = colors
        self.sparkles = sparkles
        self.stars = stars
        self.burst = burst
        self.kind = "rocket" if rocket is not None else "fountain"
        self.state = self.FLYING if rocket is not None else self.EXPLODING

    @classmethod
    def launch(
        cls,
        x: float,
        y: float,
        vx: float,
        vy: float,
        colors: ColorPair,
        params: SimParams,
        sparkles: bool = False,
        stars: bool = False
    ) -> "Effect":
        """Create a rocket effect flying from (x, y)."""
        rocket = Rocket(x, y, vx, vy, params)
        return cls(rocket=rocket, colors=colors, sparkles=sparkles, stars=stars)

    @classmethod
    def from_burst(cls, burst: Burst) -> "Effect":
        """Wrap a burst that needs no rocket stage (fountains)."""
        return cls(burst=burst)

    @property
    def done(self) -> bool:
        return self.state == self.DONE

    @property
    def pos(self) -> tuple:
        if self.state == self.FLYING:
            return self.rocket.pos
        if self.burst is not None:
            return (self.burst.x, self.burst.y)
        return (0.0, 0.0)

    def update(self) -> None:
        if self.state == self.FLYING:
            self.rocket.advance()
            if self.rocket.has_detonated():
                x, y = self.rocket.pos
                self.burst = RadialBurst(
                    x, y, self.colors, self.rocket.params,
                    sparkles=self.sparkles, stars=self.stars
                )
                self.rocket = None
                self.state = self.EXPLODING

        elif self.state == self.EXPLODING:
            self.burst.update()
            if self.burst.is_expired():
                self.burst = None
                self.state = self.DONE

    def particle_count(self) -> int:
        if self.state == self.FLYING:
            return self.rocket.particle_count()
        if self.state == self.EXPLODING:
            return self.burst.particle_count()
        return 0

    def render(self, surface) -> None:
        if self.state == self.FLYING:
            self.rocket.render(surface)
        elif self.state == self.EXPLODING:
            self.burst.render(surface)
