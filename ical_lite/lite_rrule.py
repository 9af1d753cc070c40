"""Recurrence rule finalization - iCal Lite.

Turns the raw RRULE line kept on a component into a ``dateutil`` rule once
the component closes, synthesizing DTSTART from the component's start when
the rule text does not carry one. Expansion into occurrences is left to the
caller.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Any, Optional

from dateutil.rrule import rrule, rrulestr

from .exceptions import RRuleParseError
from .lite_models import UTC_ZONE, Component, DateValue
from .timezone_utils import is_known_zone, resolve_tzid

logger = logging.getLogger(__name__)

RECURRING_TYPES = frozenset({"VEVENT", "VTODO", "VJOURNAL"})

_DTSTART_RE = re.compile(
    r";?DTSTART(?:;VALUE=DATE)?(?:;TZID=([^:;]+))?[:=](\d{8}(?:T\d{6}Z?)?)",
    re.IGNORECASE,
)
_UNTIL_RE = re.compile(r"UNTIL=(\d{8})(T\d{6})?(Z)?", re.IGNORECASE)


def render_dtstart(start: Any) -> str:
    """Render the DTSTART segment appended to a rule without one.

    Raises:
        RRuleParseError: If ``start`` is not a date value
    """
    if not isinstance(start, DateValue):
        raise RRuleParseError(f"Cannot build recurrence rule without a start date, got {start!r}")

    if start.date_only:
        return f"DTSTART;VALUE=DATE:{start.dt.strftime('%Y%m%d')}"
    if start.dt.tzinfo is None:
        return f"DTSTART:{start.dt.strftime('%Y%m%dT%H%M%S')}"
    if start.tz and start.tz != UTC_ZONE and is_known_zone(start.tz):
        return f"DTSTART;TZID={start.tz}:{start.dt.strftime('%Y%m%dT%H%M%S')}"
    # UTC and fixed-offset starts
    return f"DTSTART:{start.dt.astimezone(timezone.utc).strftime('%Y%m%dT%H%M%SZ')}"


def build_rule_text(raw_line: str, start: Any) -> str:
    """Normalize a raw RRULE line and append DTSTART if it lacks one."""
    rule = raw_line.replace("RRULE:", "", 1)
    freq_index = rule.rfind("FREQ=")
    if freq_index >= 0:
        rule = rule[freq_index:]
    if "DTSTART" not in rule:
        rule = f"{rule};{render_dtstart(start)}"
    return rule


def _parse_dtstart(match: "re.Match[str]", local_timezone: Optional[str]) -> datetime:
    tzid, stamp = match.groups()
    if len(stamp) == 8:
        return datetime.strptime(stamp, "%Y%m%d")
    dt = datetime.strptime(stamp.rstrip("Zz"), "%Y%m%dT%H%M%S")
    if stamp[-1] in "Zz":
        return dt.replace(tzinfo=timezone.utc)
    if tzid:
        tzinfo = resolve_tzid(tzid, local_timezone).tzinfo
        if tzinfo is not None:
            return dt.replace(tzinfo=tzinfo)
    return dt


def _align_until(rule: str, dtstart: datetime) -> str:
    """Make UNTIL agree with DTSTART on being zone-aware.

    ``dateutil`` refuses a floating UNTIL with an aware DTSTART and vice versa,
    a mix common in Outlook and Google feeds.
    """
    match = _UNTIL_RE.search(rule)
    if match is None:
        return rule
    day, clock, utc_marker = match.groups()
    aware = dtstart.tzinfo is not None
    if aware and not utc_marker:
        local = datetime.strptime(day + (clock or "T235959"), "%Y%m%dT%H%M%S")
        until = local.replace(tzinfo=dtstart.tzinfo).astimezone(timezone.utc)
        replacement = f"UNTIL={until.strftime('%Y%m%dT%H%M%S')}Z"
    elif not aware and utc_marker:
        replacement = f"UNTIL={day}{clock or ''}"
    else:
        return rule
    return rule[: match.start()] + replacement + rule[match.end():]


def rrule_from_text(rule_text: str, local_timezone: Optional[str] = None) -> rrule:
    """Construct a rule object from finalized RRULE text.

    Raises:
        RRuleParseError: If the text does not describe a valid rule
    """
    match = _DTSTART_RE.search(rule_text)
    if match is None:
        raise RRuleParseError(f"Recurrence rule has no DTSTART: {rule_text!r}")

    body = (rule_text[: match.start()] + rule_text[match.end():]).strip(";")
    try:
        dtstart = _parse_dtstart(match, local_timezone)
        return rrulestr(_align_until(body, dtstart), dtstart=dtstart)
    except (ValueError, TypeError) as e:
        raise RRuleParseError(f"Invalid recurrence rule {rule_text!r}: {e}") from e


def finalize_rrule(
    component: Component,
    component_type: str,
    local_timezone: Optional[str] = None,
) -> None:
    """Replace the raw RRULE line on a closing component with a rule object.

    Applies to VEVENT, VTODO and VJOURNAL only, and only while ``rrule`` still
    holds the raw line. The finalized text is kept under ``rrule_text``.
    """
    raw = component.get("rrule")
    if component_type not in RECURRING_TYPES or not isinstance(raw, str):
        return

    rule_text = build_rule_text(raw, component.get("start"))
    component["rrule"] = rrule_from_text(rule_text, local_timezone)
    component["rrule_text"] = rule_text
    logger.debug("Finalized recurrence rule %s", rule_text)
