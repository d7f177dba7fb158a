"""
Skyburst Events

The battery publishes events as fireworks launch, detonate and burn out.
Handlers (logging, statistics) subscribe without the battery knowing
about them.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List


# === Event Dataclasses ===


@dataclass
class LaunchEvent:
    """Fired when the battery instantiates an effect.

    Used by: Battery
    Handled by: LoggerHandler, ShowStatsHandler
    """
    handle: int
    kind: str          # "rocket" or "fountain"
    pos: tuple         # (x, y) launch point


@dataclass
class DetonationEvent:
    """Fired when a rocket reaches its apex and bursts."""
    handle: int
    pos: tuple         # (x, y) of the burst


@dataclass
class EffectDoneEvent:
    """Fired when an effect has burned out and leaves the battery."""
    handle: int
    kind: str


@dataclass
class EntryFiredEvent:
    """Fired when a schedule entry's cooldown elapses.

    tick is the battery's total tick count at the moment of firing.
    """
    index: int
    tick: int
    effect_count: int


@dataclass
class ShowFinishedEvent:
    """Fired once when the queue is empty and every effect is done."""
    tick: int


# === EventBus ===


class EventBus:
    """Central event dispatcher.

    Publishers call publish(), handlers call subscribe().
    Publishers never know who is listening.
    """

    def __init__(self):
        # Maps event type -> list of handler functions
        self._subscribers: Dict[type, List[Callable]] = {}

    def subscribe(self, event_type: type, handler: Callable) -> None:
        """Register a handler for an event type.

        Args:
            event_type: The class of events to listen for (e.g., LaunchEvent)
            handler: A callable that takes the event as its argument
        """
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []
        self._subscribers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        """Remove a handler from an event type."""
        handlers = self._subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: Any) -> None:
        """Notify all handlers subscribed to this event's type."""
        for handler in self._subscribers.get(type(event), []):
            handler(event)

    def clear(self) -> None:
        self._subscribers.clear()


# === Global EventBus Instance ===

event_bus = EventBus()
