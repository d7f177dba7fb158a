"""
Skyburst Event Handlers
Subscribers that log and count what the battery does.
"""
from typing import List, Optional

from .events import (
    event_bus, EventBus, LaunchEvent, DetonationEvent,
    EffectDoneEvent, EntryFiredEvent, ShowFinishedEvent
)


class LoggerHandler:
    """Prints show events to the console and optionally to a file."""

    def __init__(self, verbose: bool = False, log_file: Optional[str] = None,
                 bus: EventBus = event_bus):
        self.verbose = verbose
        self.log_file = log_file
        self.logs: List[str] = []
        bus.subscribe(EntryFiredEvent, self.on_entry_fired)
        bus.subscribe(ShowFinishedEvent, self.on_show_finished)
        if verbose:
            bus.subscribe(LaunchEvent, self.on_launch)
            bus.subscribe(DetonationEvent, self.on_detonation)
            bus.subscribe(EffectDoneEvent, self.on_effect_done)

    def _log(self, line: str) -> None:
        self.logs.append(line)
        print(line)
        if self.log_file:
            with open(self.log_file, 'a') as f:
                f.write(line + '\n')

    def on_entry_fired(self, event: EntryFiredEvent) -> None:
        self._log(f"[ENTRY] #{event.index} fired {event.effect_count} effect(s) at tick {event.tick}")

    def on_launch(self, event: LaunchEvent) -> None:
        self._log(f"[LAUNCH] {event.kind} {event.handle} at ({event.pos[0]:.1f}, {event.pos[1]:.1f})")

    def on_detonation(self, event: DetonationEvent) -> None:
        self._log(f"[BURST] rocket {event.handle} at ({event.pos[0]:.1f}, {event.pos[1]:.1f})")

    def on_effect_done(self, event: EffectDoneEvent) -> None:
        self._log(f"[DONE] {event.kind} {event.handle}")

    def on_show_finished(self, event: ShowFinishedEvent) -> None:
        self._log(f"[SHOW] finished after {event.tick} ticks")

    def get_recent_logs(self, count: int = 10) -> List[str]:
        """Get most recent log entries."""
        return self.logs[-count:]


class ShowStatsHandler:
    """Counts launches, detonations and burned-out effects for the HUD."""

    def __init__(self, bus: EventBus = event_bus):
        self.launched = 0
        self.rockets = 0
        self.fountains = 0
        self.detonated = 0
        self.done = 0
        self.entries_fired = 0
        self.finished_at: Optional[int] = None
        bus.subscribe(LaunchEvent, self.on_launch)
        bus.subscribe(DetonationEvent, self.on_detonation)
        bus.subscribe(EffectDoneEvent, self.on_effect_done)
        bus.subscribe(EntryFiredEvent, self.on_entry_fired)
        bus.subscribe(ShowFinishedEvent, self.on_show_finished)

    def on_launch(self, event: LaunchEvent) -> None:
        self.launched += 1
        if event.kind == "rocket":
            self.rockets += 1
        else:
            self.fountains += 1

    def on_detonation(self, event: DetonationEvent) -> None:
        self.detonated += 1

    def on_effect_done(self, event: EffectDoneEvent) -> None:
        self.done += 1

    def on_entry_fired(self, event: EntryFiredEvent) -> None:
        self.entries_fired += 1

    def on_show_finished(self, event: ShowFinishedEvent) -> None:
        self.finished_at = event.tick

    @property
    def in_flight(self) -> int:
        return self.launched - self.done

    def summary(self) -> str:
        return (f"{self.entries_fired} entries, {self.rockets} rockets, "
                f"{self.fountains} fountains, {self.detonated} bursts")
