"""ical_lite - tolerant iCalendar (RFC 5545) parser.

Turns raw ICS text into a tree of components keyed by UID, with recurrence
overrides folded into their parent entry and RRULEs turned into
``dateutil`` rule objects.
"""

__version__ = "0.1.0"

from .config import ParserSettings, get_settings, load_settings
from .exceptions import (
    DateKeyError,
    ICalContentTooLargeError,
    ICalError,
    ICalParseError,
    RRuleParseError,
)
from .lite_models import DateValue, FreeBusyBlock, GeoValue, ParameterizedValue
from .lite_parser import ParseTask, parse_ics, parse_ics_async, parse_ics_with_callback

__all__ = [
    "DateKeyError",
    "DateValue",
    "FreeBusyBlock",
    "GeoValue",
    "ICalContentTooLargeError",
    "ICalError",
    "ICalParseError",
    "ParameterizedValue",
    "ParseTask",
    "ParserSettings",
    "RRuleParseError",
    "__version__",
    "get_settings",
    "load_settings",
    "parse_ics",
    "parse_ics_async",
    "parse_ics_with_callback",
]
