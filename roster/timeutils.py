"""Date and clock helpers shared by the generator and serializer."""

from datetime import date, datetime, time, timedelta
from typing import Union

from icalendar import vDatetime


def parse_clock_time(text: str) -> tuple[int, int]:
    """Split an "HH:MM" string into hour and minute.

    No range check is made, so "25:99" yields (25, 99). Anything after
    the minutes, such as seconds in "07:30:00", is ignored.
    """
    hours, minutes = text.split(":")[:2]
    return int(hours), int(minutes)


def at_clock_time(day: date, clock_text: str) -> datetime:
    """Place a clock time on a calendar day.

    Out-of-range hours or minutes roll into the following hours and days
    rather than failing.

    Args:
        day: Calendar day the time applies to.
        clock_text: Time of day as "HH:MM".

    Returns:
        Naive datetime for that day and time.
    """
    hours, minutes = parse_clock_time(clock_text)
    midnight = datetime.combine(day, time())
    return midnight + timedelta(hours=hours, minutes=minutes)


def add_days(value: Union[date, datetime], days: int) -> Union[date, datetime]:
    """Return value shifted by whole days, keeping the time of day."""
    return value + timedelta(days=days)


def format_floating(value: datetime) -> str:
    """Render a datetime as floating iCalendar time (YYYYMMDDTHHMM00)."""
    value = value.replace(second=0, microsecond=0, tzinfo=None)
    return vDatetime(value).to_ical().decode("ascii")
