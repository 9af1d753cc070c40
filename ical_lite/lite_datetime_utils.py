"""DATE, DATE-TIME and DURATION parsing for iCalendar properties - iCal Lite.

This module provides timezone-aware datetime parsing for property values,
tolerating Outlook's zone labels and falling back to floating time whenever
a zone cannot be resolved.
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from .lite_models import UTC_ZONE, DateValue
from .lite_tokenizer import find_parameter, unescape_text
from .timezone_utils import resolve_tzid

logger = logging.getLogger(__name__)

DATE_TYPE = "date"
DATE_TIME_TYPE = "date-time"

_DATE_ONLY_RE = re.compile(r"^\d{8}$")
_DATE_PREFIX_RE = re.compile(r"^(\d{4})(\d{2})(\d{2})")
_DATE_TIME_RE = re.compile(r"^(\d{4})(\d{2})(\d{2})T(\d{2})(\d{2})(\d{2})(Z)?$")
_DURATION_TOKEN_RE = re.compile(r"-?\d+[YMWDHS]")

# Outlook's custom-zone TZID contains a colon, so the tokenizer cuts it short
_TRUNCATED_OUTLOOK_TZID = "TZID=tzone"

_DURATION_UNITS = {
    "W": "weeks",
    "D": "days",
    "H": "hours",
    "M": "minutes",
    "S": "seconds",
}


def is_date_only(value: str, params: Optional[list[str]]) -> bool:
    """Decide whether a value is a DATE rather than a DATE-TIME.

    True for an explicit ``VALUE=DATE`` parameter (without a ``VALUE=DATE-TIME``
    override) or for a bare 8-digit value.
    """
    params = params or []
    if "VALUE=DATE" in params and "VALUE=DATE-TIME" not in params:
        return True
    return bool(_DATE_ONLY_RE.match(value or ""))


def classify_date_type(value: str, params: Optional[list[str]]) -> str:
    return DATE_TYPE if is_date_only(value, params) else DATE_TIME_TYPE


def _repair_outlook_tzid(value: str, params: list[str]) -> tuple[str, list[str]]:
    """Re-join ``TZID=tzone://Microsoft/Custom`` split at its colon."""
    if _TRUNCATED_OUTLOOK_TZID not in params:
        return value, params
    index = params.index(_TRUNCATED_OUTLOOK_TZID)
    head, _, tail = value.partition(":")
    repaired = list(params)
    repaired[index] = f"{_TRUNCATED_OUTLOOK_TZID}:{head}"
    return tail, repaired


def parse_date_value(
    value: str,
    params: Optional[list[str]] = None,
    local_timezone: Optional[str] = None,
) -> Union[DateValue, str]:
    """Parse a DATE or DATE-TIME property value.

    Args:
        value: Raw property value
        params: Raw ``KEY=VALUE`` parameter tokens of the line
        local_timezone: Zone substituted for the Outlook custom-zone marker

    Returns:
        DateValue, or the unescaped text when the value is not a recognised
        date format
    """
    value, params = _repair_outlook_tzid(value or "", list(params or []))

    if is_date_only(value, params):
        comps = _DATE_PREFIX_RE.match(value)
        if comps is not None:
            try:
                return DateValue(dt=datetime(*map(int, comps.groups())), date_only=True)
            except ValueError:
                logger.debug("Invalid calendar date %r", value)
                return unescape_text(value)

    comps = _DATE_TIME_RE.match(value)
    if comps is None:
        return unescape_text(value)

    try:
        naive = datetime(*map(int, comps.groups()[:6]))
    except ValueError:
        logger.debug("Invalid date-time %r", value)
        return unescape_text(value)

    if comps.group(7) == "Z":
        return DateValue(dt=naive.replace(tzinfo=timezone.utc), tz=UTC_ZONE)

    tzid = find_parameter(params, "TZID")
    if tzid:
        resolution = resolve_tzid(tzid, local_timezone)
        tzinfo = resolution.tzinfo
        if tzinfo is not None:
            return DateValue(dt=naive.replace(tzinfo=tzinfo), tz=resolution.identifier)
        # Unresolvable zone: keep the label, read the time as floating
        return DateValue(dt=naive, tz=resolution.identifier)

    return DateValue(dt=naive)


def parse_duration(text: str) -> timedelta:
    """Parse an RFC 5545 DURATION into a timedelta.

    Weeks, days, hours, minutes and seconds are supported. Year and month
    tokens cannot be expressed as a fixed span and are skipped. A leading
    ``-`` negates every token.
    """
    text = (text or "").strip()
    sign = -1 if text.startswith("-") else 1
    date_part, _, time_part = text.partition("T")

    total = timedelta()
    for part, in_time in ((date_part, False), (time_part, True)):
        for token in _DURATION_TOKEN_RE.findall(part):
            unit = token[-1]
            if unit == "Y" or (unit == "M" and not in_time):
                logger.debug("Skipping unsupported duration token %r in %r", token, text)
                continue
            total += timedelta(**{_DURATION_UNITS[unit]: int(token[:-1]) * sign})
    return total


def is_duration(text: str) -> bool:
    return bool(text) and text.lstrip("+-").startswith("P")
