"""
Core module - shared data types, utilities, and configuration.
"""
from .types import (
    DartHit,
    EventType,
    MatchEvent,
)
from .io_utils import (
    atomic_write_yaml,
    load_yaml,
)
from .config_loader import Config, DEFAULT_CONFIG_PATH
from .scheduler import (
    Scheduler,
    ScheduledCall,
    ThreadingScheduler,
    ManualScheduler,
)

__all__ = [
    # Types
    "DartHit",
    "EventType",
    "MatchEvent",
    # I/O
    "atomic_write_yaml",
    "load_yaml",
    # Config
    "Config",
    "DEFAULT_CONFIG_PATH",
    # Scheduling
    "Scheduler",
    "ScheduledCall",
    "ThreadingScheduler",
    "ManualScheduler",
]
