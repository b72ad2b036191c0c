"""Read exported iCalendar documents back into duty events."""

from typing import Union

from icalendar import Calendar

from roster.models import DutyEvent


def read_events(data: Union[str, bytes]) -> list[DutyEvent]:
    """Parse VEVENT blocks from an iCalendar document.
    
    Args:
        data: Document text as produced by ICalTransformer.
        
    Returns:
        One event per VEVENT, in document order.
        
    Raises:
        ValueError: If the document cannot be parsed.
    """
    calendar = Calendar.from_ical(data)
    
    events = []
    for component in calendar.walk("VEVENT"):
        events.append(DutyEvent(
            title=str(component.get("summary", "")),
            start=component.decoded("dtstart"),
            end=component.decoded("dtend"),
        ))
    return events
