#!/usr/bin/env python3
"""
Skyburst - Fireworks Show
=========================

Run with: python -m skyburst.main [--seed N] [--verbose] [--headless --ticks N]

Each frame:
- fade the previous frame (light trails)
- tick the battery (launch, fly, burst, burn out)
- render every live effect
"""
import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from skyburst.core.config import ConfigError, DEFAULT_PARAMS, DEFAULT_SHOW, FPS, SCREEN_HEIGHT, SCREEN_WIDTH, SimParams
from skyburst.core.events import event_bus, EventBus
from skyburst.core.handlers import LoggerHandler, ShowStatsHandler
from skyburst.core.schedule import ScheduleEntry, load_show
from skyburst.core.scheduler import Battery


class Show:
    """Owns the battery and drives it frame by frame."""

    def __init__(
        self,
        entries: List[ScheduleEntry],
        width: float,
        height: float,
        params: SimParams = DEFAULT_PARAMS,
        bus: EventBus = event_bus,
        loop: bool = False
    ):
        self.entries = list(entries)
        self.width = width
        self.height = height
        self.params = params
        self.bus = bus
        self.loop = loop
        self.running = True
        self.battery: Optional[Battery] = None
        self.stats = ShowStatsHandler(bus)

    def setup(self) -> None:
        """Create a fresh battery from the schedule."""
        self.battery = Battery(self.entries, self.width, self.height, self.params, self.bus)

    def update(self) -> None:
        self.battery.tick()
        if self.loop and self.battery.is_idle:
            self.setup()

    def render(self, surface) -> None:
        surface.fade(self.params.fade_alpha)
        self.battery.render(surface)

    def hud_text(self) -> str:
        return (f"tick {self.battery.tick_count} | effects {self.battery.live_effect_count()} | "
                f"particles {self.battery.particle_count()}")

    def run(self, renderer, max_ticks: Optional[int] = None, stop_when_idle: bool = False) -> int:
        """Frame loop. Returns the number of ticks played."""
        if self.battery is None:
            self.setup()

        ticks = 0
        while self.running:
            if renderer.handle_input()['quit']:
                self.running = False
                break
            if max_ticks is not None and ticks >= max_ticks:
                break

            renderer.begin_frame()
            self.update()
            self.render(renderer)
            renderer.end_frame(self.hud_text())
            ticks += 1

            if stop_when_idle and self.battery.is_idle:
                break
        return ticks


def main(argv=None):
    parser = argparse.ArgumentParser(description="Skyburst - Fireworks Show")
    parser.add_argument('--show', type=Path, default=DEFAULT_SHOW,
                        help='Battery script (JSON)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed the random source for a reproducible show')
    parser.add_argument('--width', type=int, default=SCREEN_WIDTH)
    parser.add_argument('--height', type=int, default=SCREEN_HEIGHT)
    parser.add_argument('--headless', action='store_true',
                        help='Run without a window')
    parser.add_argument('--ticks', type=int, default=None,
                        help='Stop after this many ticks')
    parser.add_argument('--loop', action='store_true',
                        help='Restart the battery when the show ends')
    parser.add_argument('--verbose', action='store_true',
                        help='Print every launch and burst')
    parser.add_argument('--log-file', default=None,
                        help='Also append event log lines to this file')
    parser.add_argument('--debug', action='store_true',
                        help='Show tick/effect/particle counters')
    args = parser.parse_args(argv)

    if args.seed is not None:
        random.seed(args.seed)

    try:
        entries, params = load_show(args.show)
    except (ConfigError, OSError) as e:
        print(f"Error: could not load show {args.show}: {e}")
        sys.exit(1)

    if args.headless:
        from frontends.headless_renderer import HeadlessRenderer
        renderer = HeadlessRenderer(args.width, args.height)
    else:
        try:
            from frontends.pygame_renderer import PygameRenderer
            renderer = PygameRenderer(args.width, args.height, fps=FPS, debug=args.debug)
        except ImportError as e:
            print(f"Error: pygame is required for the window: {e}")
            print("Install with: pip install pygame, or run with --headless")
            sys.exit(1)

    # Fresh bus per run so repeated main() calls don't stack handlers
    bus = EventBus()
    logger = LoggerHandler(verbose=args.verbose, log_file=args.log_file, bus=bus)

    # Viewport is read once; the launch point stays put
    show = Show(entries, renderer.width, renderer.height, params, bus, loop=args.loop)
    show.setup()

    print(f"Skyburst started! {len(entries)} scheduled entries")
    if not args.headless:
        print("Close the window or press ESC to quit")

    # Headless runs need an end; default to the end of the show
    stop_when_idle = args.headless and not args.loop and args.ticks is None

    try:
        ticks = show.run(renderer, max_ticks=args.ticks, stop_when_idle=stop_when_idle)
    except KeyboardInterrupt:
        ticks = show.battery.tick_count
    finally:
        renderer.cleanup()

    print(f"\nShow ended after {ticks} ticks: {show.stats.summary()}")


if __name__ == '__main__':
    main()
