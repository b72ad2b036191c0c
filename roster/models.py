"""Data models for duty roster generation."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional

MODULAR_MIN_PEOPLE = 3


class RosterConfigError(ValueError):
    """Raised when roster parameters cannot produce a schedule."""


class RotationPolicy(Enum):
    """Supported ways of rotating people through duty roles."""

    MODULAR = "modular"  # hospital / on-call / off advance one slot per week
    SINGLE = "single"    # one duty person holds every role for the week


@dataclass(frozen=True)
class TimeWindow:
    """Time-of-day window given as two "HH:MM" strings.

    Values are kept as entered; out-of-range components roll over
    when the window is applied to a date.
    """

    start: str
    end: str


@dataclass(frozen=True)
class RosterParameters:
    """Immutable input for a single schedule generation run."""

    start_date: date
    years: float
    rotation_order: tuple[str, ...]
    hospital: TimeWindow
    on_call: TimeWindow
    lane: TimeWindow
    weekend: TimeWindow
    policy: RotationPolicy = RotationPolicy.MODULAR
    lane_every_weeks: int = field(default=4)
    lane_weekend_every: int = field(default=4)
    show_off: bool = False
    double_off: bool = False
    hide_odc_when_lane: bool = False
    rotation_weeks: Optional[int] = None  # Policy B cycle length, defaults to len(rotation_order)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rotation_order", tuple(self.rotation_order))

        people = len(self.rotation_order)
        if people == 0:
            raise RosterConfigError("Rotation order is empty")
        if self.policy is RotationPolicy.MODULAR and people < MODULAR_MIN_PEOPLE:
            raise RosterConfigError(
                f"Rotation order too short: modular rotation needs at least "
                f"{MODULAR_MIN_PEOPLE} people, got {people}"
            )
        if self.policy is RotationPolicy.SINGLE:
            if self.rotation_weeks is None:
                object.__setattr__(self, "rotation_weeks", people)
            elif not 1 <= self.rotation_weeks <= people:
                raise RosterConfigError(
                    f"Rotation weeks must be between 1 and {people}, "
                    f"got {self.rotation_weeks}"
                )
        if self.lane_every_weeks < 1:
            raise RosterConfigError("Lane cadence must be at least 1 week")
        if self.lane_weekend_every < 1:
            raise RosterConfigError("Lane weekend cadence must be at least 1 week")


@dataclass(frozen=True)
class DutyEvent:
    """A single materialized duty shift.

    Start and end are naive (floating) datetimes. An end earlier than
    the start is kept as given.
    """

    title: str
    start: datetime
    end: datetime


Schedule = list[DutyEvent]
