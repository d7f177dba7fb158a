"""
Skyburst Battery - Launch Scheduler

Walks the scripted schedule on a tick counter:
- When the current entry's cooldown has elapsed, every effect in it fires
- The next entry becomes current and the counter resets
- Live effects are updated and burned-out ones are dropped

Once the queue is empty the remaining effects play out and the battery
goes idle.
"""
from collections import deque
from typing import Deque, Dict, Iterable, Optional

from .bursts import FountainBurst
from .config import ConfigError, DEFAULT_PARAMS, SimParams
from .effects import Effect
from .events import (
    event_bus, EventBus, LaunchEvent, DetonationEvent,
    EffectDoneEvent, EntryFiredEvent, ShowFinishedEvent
)
from .schedule import EffectDescriptor, FountainDescriptor, RocketDescriptor, ScheduleEntry


class Battery:
    """Fires scheduled effects and owns every live one.

    Live effects are stored flat in `self.effects`, keyed by an integer
    handle, so pruning is a single pass over one dict.
    """

    def __init__(
        self,
        entries: Iterable[ScheduleEntry],
        width: float,
        height: float,
        params: SimParams = DEFAULT_PARAMS,
        bus: EventBus = event_bus
    ):
        self.params = params
        self.bus = bus
        self.width = width
        self.height = height

        # Rockets start at the bottom center, fountains just below it
        self.x = width / 2
        self.y = height

        self.queue: Deque[ScheduleEntry] = deque(entries)
        self.current: Optional[ScheduleEntry] = self.queue.popleft() if self.queue else None
        self.entry_index = 0

        self.counter = 0       # Ticks since the last firing
        self.tick_count = 0    # Ticks since the battery started
        self.effects: Dict[int, Effect] = {}
        self.next_handle = 1
        self.finished = False

    @property
    def is_idle(self) -> bool:
        return self.current is None and not self.effects

    def tick(self) -> None:
        """Advance the show by one frame."""
        if self.current is not None and self.counter >= self.current.cooldown:
            self._fire(self.current)
            self.current = self.queue.popleft() if self.queue else None
            self.entry_index += 1
            self.counter = 0

        self._update_effects()

        self.counter += 1
        self.tick_count += 1

        if self.is_idle and not self.finished:
            self.finished = True
            self.bus.publish(ShowFinishedEvent(tick=self.tick_count))

    def _fire(self, entry: ScheduleEntry) -> None:
        for descriptor in entry.effects:
            self._add_effect(self._create_effect(descriptor))
        self.bus.publish(EntryFiredEvent(
            index=self.entry_index,
            tick=self.tick_count,
            effect_count=len(entry.effects)
        ))

    def _create_effect(self, descriptor: EffectDescriptor) -> Effect:
        """Instantiate one descriptor. The only place variants are told apart."""
        if isinstance(descriptor, RocketDescriptor):
            return Effect.launch(
                self.x, self.y,
                descriptor.offset, -self.params.rocket_speed,
                descriptor.color, self.params,
                sparkles=descriptor.sparkles,
                stars=descriptor.stars
            )
        if isinstance(descriptor, FountainDescriptor):
            burst = FountainBurst(
                self.x - descriptor.offset,
                self.y + 1 + abs(descriptor.offset),
                descriptor.color,
                self.params
            )
            return Effect.from_burst(burst)
        raise ConfigError(f"Unknown effect descriptor: {descriptor!r}")

    def _add_effect(self, effect: Effect) -> int:
        handle = self.next_handle
        self.next_handle += 1
        self.effects[handle] = effect
        self.finished = False
        self.bus.publish(LaunchEvent(handle=handle, kind=effect.kind, pos=effect.pos))
        return handle

    def _update_effects(self) -> None:
        for handle, effect in self.effects.items():
            before = effect.state
            effect.update()
            if before == Effect.FLYING and effect.state == Effect.EXPLODING:
                self.bus.publish(DetonationEvent(handle=handle, pos=effect.pos))
            if effect.done:
                self.bus.publish(EffectDoneEvent(handle=handle, kind=effect.kind))

        for handle in [h for h, e in self.effects.items() if e.done]:
            del self.effects[handle]

    def live_effect_count(self) -> int:
        return len(self.effects)

    def particle_count(self) -> int:
        return sum(effect.particle_count() for effect in self.effects.values())

    def render(self, surface) -> None:
        for effect in self.effects.values():
            effect.render(surface)
