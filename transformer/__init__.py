"""Transformer module for converting duty schedules to output formats."""

from .base import BaseTransformer
from .ical_reader import read_events
from .ical_transformer import ICS_MEDIA_TYPE, ICalTransformer

__all__ = ["BaseTransformer", "ICalTransformer", "ICS_MEDIA_TYPE", "read_events"]
