"""Duty schedule generation."""

import logging
import math
from datetime import date
from operator import attrgetter

from .models import DutyEvent, RosterParameters, RotationPolicy, Schedule, TimeWindow
from .rotation import Role, is_lane_week, is_lane_weekend, strategy_for
from .timeutils import add_days, at_clock_time

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.25
WEEKDAYS = 5

LANE_TITLE = "ODC Lane"
WEEKEND_LANE_TITLE = "Weekend Lane"


class ScheduleGenerator:
    """Materializes every duty event for the configured time span.

    Weeks are counted in 7-day blocks from the start date, whatever
    weekday it falls on. Days 0-4 of each block are treated as weekdays
    and days 5-6 as the weekend.
    """

    def __init__(self, params: RosterParameters) -> None:
        """Initialize the generator.

        Args:
            params: Validated roster parameters.
        """
        self._params = params
        self._rotation = strategy_for(params)

    def generate(self) -> Schedule:
        """Generate the schedule.

        The span is floor(years * 365.25) days, an average that does not
        track actual leap years.

        Returns:
            Events sorted by start time, ties kept in generation order.
        """
        params = self._params
        total_days = math.floor(params.years * DAYS_PER_YEAR)
        end = add_days(params.start_date, total_days)
        weeks_total = math.ceil(total_days / 7)

        events: Schedule = []
        for week in range(weeks_total):
            week_start = add_days(params.start_date, week * 7)
            roles = self._rotation.resolve_roles(week)

            for day in range(WEEKDAYS):
                current = add_days(week_start, day)
                # Later days and weeks are all past the end too
                if current > end:
                    break
                events.extend(self._weekday_events(week, current, roles))

            saturday = add_days(week_start, 5)
            if saturday <= end:
                events.append(self._weekend_event(week, saturday, roles))

        logger.debug(
            "Generated %d events over %d weeks from %s",
            len(events), weeks_total, params.start_date,
        )
        return sorted(events, key=attrgetter("start"))

    def _weekday_events(self, week: int, day: date, roles: dict[Role, str]) -> list[DutyEvent]:
        params = self._params
        lane_week = is_lane_week(week, params.lane_every_weeks)

        events = [self._event(f"HOSPITAL {roles[Role.HOSPITAL]}", day, params.hospital)]

        if params.policy is RotationPolicy.SINGLE:
            if not (lane_week and params.hide_odc_when_lane):
                events.append(self._event(f"ODC {roles[Role.ON_CALL]}", day, params.on_call))
            if lane_week:
                events.append(self._event(LANE_TITLE, day, params.lane))
            return events

        if lane_week:
            events.append(self._event(LANE_TITLE, day, params.lane))
            if params.show_off:
                # On-call person is displaced by the lane
                events.append(self._event(f"OFF {roles[Role.ON_CALL]}", day, params.on_call))
                if params.double_off:
                    events.append(self._event(f"OFF {roles[Role.OFF]}", day, params.on_call))
        else:
            events.append(self._event(f"ODC {roles[Role.ON_CALL]}", day, params.on_call))
            if params.show_off:
                events.append(self._event(f"OFF {roles[Role.OFF]}", day, params.on_call))

        return events

    def _weekend_event(self, week: int, saturday: date, roles: dict[Role, str]) -> DutyEvent:
        params = self._params
        if is_lane_weekend(week, params.lane_weekend_every):
            title = WEEKEND_LANE_TITLE
        else:
            title = f"Weekend {roles[Role.WEEKEND]}"

        sunday = add_days(saturday, 1)
        return DutyEvent(
            title=title,
            start=at_clock_time(saturday, params.weekend.start),
            end=at_clock_time(sunday, params.weekend.end),
        )

    @staticmethod
    def _event(title: str, day: date, window: TimeWindow) -> DutyEvent:
        return DutyEvent(
            title=title,
            start=at_clock_time(day, window.start),
            end=at_clock_time(day, window.end),
        )


def generate_schedule(params: RosterParameters) -> Schedule:
    """Generate a fresh schedule for the given parameters."""
    return ScheduleGenerator(params).generate()
