"""Typed value coercion for iCalendar properties - iCal Lite.

Each known property name maps to a handler that coerces the raw value and
stores it on the component currently being built. Unknown properties are
stored as text under their lower-cased name; ``X-`` extensions inside a
component are stored under their name without the prefix.
"""

import logging
import re
from collections.abc import Callable
from typing import Any, Optional

from .exceptions import DateKeyError
from .lite_datetime_utils import (
    classify_date_type,
    is_duration,
    parse_date_value,
    parse_duration,
)
from .lite_models import Component, DateValue, FreeBusyBlock, GeoValue, ParameterizedValue
from .lite_tokenizer import (
    PropertyLine,
    has_only_trivial_parameters,
    parse_parameters,
    unescape_text,
)

logger = logging.getLogger(__name__)

_LIST_SEPARATOR_RE = re.compile(r"\s*,\s*")

CUSTOM_PREFIX = "X-"

Handler = Callable[[PropertyLine, Component], None]


def store_value(curr: Component, name: str, value: Any) -> None:
    """Store ``value`` under ``name``, promoting repeated properties to a list."""
    current = curr.get(name)
    if isinstance(current, list):
        current.append(value)
    elif name not in curr:
        curr[name] = value
    else:
        curr[name] = [current, value]


def text_value(value: str, params: Optional[list[str]]) -> Any:
    """Unescape ``value``, wrapping it with its parameters when they matter."""
    text = unescape_text(value)
    if has_only_trivial_parameters(params):
        return text
    return ParameterizedValue(params=parse_parameters(params), value=text)


def split_list(value: str) -> list[str]:
    """Split a comma separated value, trimming whitespace around each item."""
    if not value:
        return []
    return [item.strip() for item in _LIST_SEPARATOR_RE.split(value)]


class LiteValueHandlers:
    """Registry of per-property value handlers.

    The table maps upper-cased property names to the handler method and the
    field the coerced value is stored under.
    """

    PROPERTY_TABLE: dict[str, tuple[str, str]] = {
        "SUMMARY": ("store_text", "summary"),
        "DESCRIPTION": ("store_text", "description"),
        "URL": ("store_text", "url"),
        "UID": ("store_text", "uid"),
        "LOCATION": ("store_text", "location"),
        "CLASS": ("store_text", "class"),
        "TRANSP": ("store_text", "transparency"),
        "PERCENT-COMPLETE": ("store_text", "completion"),
        "DTSTART": ("store_start", "start"),
        "DTEND": ("store_date", "end"),
        "DUE": ("store_date", "due"),
        "COMPLETED": ("store_date", "completed"),
        "DTSTAMP": ("store_date", "dtstamp"),
        "CREATED": ("store_date", "created"),
        "LAST-MODIFIED": ("store_date", "lastmodified"),
        "RECURRENCE-ID": ("store_date", "recurrenceid"),
        "EXDATE": ("store_exdate", "exdate"),
        "GEO": ("store_geo", "geo"),
        "CATEGORIES": ("store_categories", "categories"),
        "FREEBUSY": ("store_freebusy", "freebusy"),
        "RRULE": ("store_rrule_line", "rrule"),
    }

    def __init__(self, local_timezone: Optional[str] = None) -> None:
        """Initialize handlers.

        Args:
            local_timezone: Zone substituted for Outlook's custom-zone TZID;
                detected from the host when None
        """
        self.local_timezone = local_timezone
        self._handlers: dict[str, Handler] = {
            prop_name: self._bind(method_name, field)
            for prop_name, (method_name, field) in self.PROPERTY_TABLE.items()
        }

    def _bind(self, method_name: str, field: str) -> Handler:
        method = getattr(self, method_name)

        def handler(prop: PropertyLine, curr: Component) -> None:
            method(field, prop, curr)

        return handler

    def get(self, name: str) -> Optional[Handler]:
        return self._handlers.get(name.upper())

    def handle(self, prop: PropertyLine, curr: Component, inside_component: bool) -> None:
        """Coerce ``prop`` and store it on ``curr``.

        Args:
            prop: Tokenized property line
            curr: Component being built (or the result tree at top level)
            inside_component: Whether a BEGIN block is currently open
        """
        handler = self.get(prop.name)
        if handler is not None:
            handler(prop, curr)
            return

        if inside_component and prop.name.upper().startswith(CUSTOM_PREFIX):
            self.store_text(prop.name[len(CUSTOM_PREFIX):], prop, curr)
            return

        self.store_text(prop.name.lower(), prop, curr)

    def parse_date(self, value: str, params: list[str]) -> Any:
        return parse_date_value(value, params, self.local_timezone)

    # Handlers -------------------------------------------------------------

    def store_text(self, name: str, prop: PropertyLine, curr: Component) -> None:
        store_value(curr, name, text_value(prop.value, prop.params))

    def store_date(self, name: str, prop: PropertyLine, curr: Component) -> None:
        store_value(curr, name, self.parse_date(prop.value, prop.params))

    def store_start(self, name: str, prop: PropertyLine, curr: Component) -> None:
        self.store_date(name, prop, curr)
        store_value(curr, "datetype", classify_date_type(prop.value, prop.params))

    def store_rrule_line(self, name: str, prop: PropertyLine, curr: Component) -> None:
        # Kept raw; the rule object is built when the component closes
        curr[name] = prop.line

    def store_geo(self, name: str, prop: PropertyLine, curr: Component) -> None:
        parts = prop.value.split(";")
        try:
            curr[name] = GeoValue(lat=float(parts[0]), lon=float(parts[1]))
        except (IndexError, ValueError):
            logger.debug("Malformed GEO value %r stored as text", prop.value)
            self.store_text(name, prop, curr)

    def store_categories(self, name: str, prop: PropertyLine, curr: Component) -> None:
        values = split_list(prop.value)
        current = curr.get(name)
        if current is None:
            curr[name] = values
        elif values:
            if not isinstance(current, list):
                current = [current]
            curr[name] = current + values

    def store_freebusy(self, name: str, prop: PropertyLine, curr: Component) -> None:
        fb_type = str(parse_parameters(prop.params).get("FBTYPE", "BUSY"))
        blocks = curr.setdefault(name, [])
        for period in split_list(prop.value):
            start_text, _, end_text = period.partition("/")
            start = self.parse_date(start_text, prop.params)
            if is_duration(end_text) and isinstance(start, DateValue):
                end: Any = start.shifted(parse_duration(end_text))
            elif end_text:
                end = self.parse_date(end_text, prop.params)
            else:
                end = None
            blocks.append(FreeBusyBlock(type=fb_type, start=start, end=end))

    def store_exdate(self, name: str, prop: PropertyLine, curr: Component) -> None:
        exdates = curr.get(name)
        if not isinstance(exdates, dict):
            exdates = curr[name] = {}
        for entry in split_list(prop.value):
            if not entry:
                continue
            parsed = self.parse_date(entry, prop.params)
            key = date_key(parsed, name)
            # The first exclusion seen for a date wins
            exdates.setdefault(key, parsed)


def date_key(value: Any, field: str) -> str:
    """Render a date value as its ``YYYY-MM-DD`` key.

    Raises:
        DateKeyError: If ``value`` is not a DateValue
    """
    if isinstance(value, DateValue):
        return value.date_key()
    raise DateKeyError(f"Cannot derive a calendar-date key for {field}={value!r}")
