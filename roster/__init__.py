"""Roster module for generating recurring duty schedules."""

from .generator import ScheduleGenerator, generate_schedule
from .models import (
    DutyEvent,
    RosterConfigError,
    RosterParameters,
    RotationPolicy,
    Schedule,
    TimeWindow,
)

__all__ = [
    "DutyEvent",
    "RosterConfigError",
    "RosterParameters",
    "RotationPolicy",
    "Schedule",
    "ScheduleGenerator",
    "TimeWindow",
    "generate_schedule",
]
