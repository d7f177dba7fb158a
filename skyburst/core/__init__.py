"""Skyburst Core - Simulation"""
from .config import ColorPair, ConfigError, SimParams, DEFAULT_PARAMS
from .particles import Particle
from .rockets import Rocket
from .bursts import Burst, RadialBurst, SecondaryBurst, FountainBurst
from .effects import Effect
from .events import (
    event_bus,
    EventBus,
    LaunchEvent,
    DetonationEvent,
    EffectDoneEvent,
    EntryFiredEvent,
    ShowFinishedEvent,
)
from .schedule import (
    ScheduleEntry,
    RocketDescriptor,
    FountainDescriptor,
    load_show,
    parse_schedule,
)
from .scheduler import Battery
from .handlers import LoggerHandler, ShowStatsHandler
