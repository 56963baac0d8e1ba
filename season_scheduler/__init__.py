"""
Season Scheduler - full-season matchup generation for leagues with divisions and conferences.
"""

__version__ = "0.1.0"

from .config import LeagueConfig, ScheduleConfigError, load_config
from .models import Team, Level, ScheduleResult
from .engine import new_schedule, new_schedule_good, validate_schedule
from .days import compact_days

__all__ = [
    "LeagueConfig",
    "ScheduleConfigError",
    "load_config",
    "Team",
    "Level",
    "ScheduleResult",
    "new_schedule",
    "new_schedule_good",
    "validate_schedule",
    "compact_days",
]
