"""iCalendar transformer for duty events."""

import logging
import uuid
from datetime import datetime
from typing import Callable, Optional, Sequence

from roster.models import DutyEvent
from roster.timeutils import format_floating
from .base import BaseTransformer

logger = logging.getLogger(__name__)

ICS_MEDIA_TYPE = "text/calendar"
CRLF = "\r\n"


def _random_uid() -> str:
    return str(uuid.uuid4())


class ICalTransformer(BaseTransformer):
    """Transformer that converts duty events to iCalendar text.
    
    Every event is written as its own VEVENT with floating (zone-less)
    DTSTART/DTEND. Properties are emitted in a fixed order and SUMMARY
    is written verbatim, without text escaping or line folding.
    """
    
    PRODID = "-//ShiftScheduler//EN"
    VERSION = "2.0"
    
    def __init__(
        self,
        uid_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """Initialize the iCalendar transformer.
        
        Args:
            uid_factory: Returns a new unique identifier per call
                (default: random UUID4).
            clock: Returns the current local time used for DTSTAMP
                (default: datetime.now).
        """
        self._uid_factory = uid_factory or _random_uid
        self._clock = clock or datetime.now
        self._document: Optional[str] = None
    
    def _event_lines(self, event: DutyEvent) -> list[str]:
        """Build the content lines of a single VEVENT block.
        
        Args:
            event: The duty event.
            
        Returns:
            Content lines without terminators.
        """
        return [
            "BEGIN:VEVENT",
            f"UID:{self._uid_factory()}",
            f"DTSTAMP:{format_floating(self._clock())}",
            f"SUMMARY:{event.title}",
            f"DTSTART:{format_floating(event.start)}",
            f"DTEND:{format_floating(event.end)}",
            "END:VEVENT",
        ]
    
    def transform(self, events: Sequence[DutyEvent]) -> str:
        """Transform duty events into an iCalendar document.
        
        Events are written in the order given. Identifiers are generated
        afresh on every call.
        
        Args:
            events: Duty events to serialize.
            
        Returns:
            The document, lines joined with CRLF.
        """
        lines = [
            "BEGIN:VCALENDAR",
            f"VERSION:{self.VERSION}",
            f"PRODID:{self.PRODID}",
        ]
        for event in events:
            lines.extend(self._event_lines(event))
        lines.append("END:VCALENDAR")
        
        self._document = CRLF.join(lines)
        logger.debug("Serialized %d events to iCalendar", len(events))
        return self._document
    
    def save(self, output_path: str) -> None:
        """Save the calendar to an .ics file.
        
        Args:
            output_path: Path to the output file.
            
        Raises:
            RuntimeError: If transform() hasn't been called yet.
        """
        if self._document is None:
            raise RuntimeError("No calendar data. Call transform() first.")
        
        with open(output_path, "wb") as f:
            f.write(self._document.encode("utf-8"))
