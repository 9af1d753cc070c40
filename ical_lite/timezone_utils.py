"""Timezone resolution for TZID parameters - iCal Lite.

Turns the zone labels found in the wild (IANA names, quoted names, Microsoft
display names, "(UTC+01:00) City" labels and the Outlook custom-zone marker)
into something a datetime can be attached to.
"""

from __future__ import annotations

import datetime
import logging
import os
import re
import time
import zoneinfo
from functools import lru_cache
from typing import ClassVar, NamedTuple, Optional

from .windows_zones import WINDOWS_ZONES

logger = logging.getLogger(__name__)

# Default fallback timezone when the host zone cannot be detected
DEFAULT_LOCAL_TIMEZONE = "Etc/UTC"

# TZID emitted by Outlook for zones it only describes through VTIMEZONE rules
OUTLOOK_CUSTOM_TZID = "tzone://Microsoft/Custom"

_QUOTED_RE = re.compile(r'^"(.*)"$')
_OFFSET_RE = re.compile(r"[+-]\d{1,2}:\d{2}")


class TimezoneDetector:
    """Detects the host timezone using multiple fallback strategies."""

    # Timezone abbreviation to IANA identifier mapping
    TZ_ABBREV_MAP: ClassVar[dict[str, str]] = {
        "UTC": "Etc/UTC",
        "GMT": "Etc/UTC",
        "PST": "America/Los_Angeles",
        "PDT": "America/Los_Angeles",
        "EST": "America/New_York",
        "EDT": "America/New_York",
        "CST": "America/Chicago",
        "CDT": "America/Chicago",
        "MST": "America/Denver",
        "MDT": "America/Denver",
        "CET": "Europe/Berlin",
        "CEST": "Europe/Berlin",
        "BST": "Europe/London",
        "JST": "Asia/Tokyo",
    }

    def get_local_timezone(self) -> str:
        """Get the host's local timezone as an IANA timezone identifier.

        Strategies, in order: the ``TZ`` environment variable when it names a
        known zone, the platform zone abbreviation, then a whole-hour UTC
        offset mapped onto an ``Etc/GMT`` zone.

        Returns:
            IANA timezone string, ``Etc/UTC`` if detection fails.
        """
        env_tz = os.environ.get("TZ", "").lstrip(":")
        if env_tz and is_known_zone(env_tz):
            return env_tz

        try:
            local_tz_name = time.tzname[time.daylight] if time.daylight else time.tzname[0]
            if local_tz_name in self.TZ_ABBREV_MAP:
                return self.TZ_ABBREV_MAP[local_tz_name]

            offset = datetime.datetime.now().astimezone().utcoffset()
            if offset is not None and offset.total_seconds() % 3600 == 0:
                offset_hours = int(offset.total_seconds() // 3600)
                if offset_hours == 0:
                    return DEFAULT_LOCAL_TIMEZONE
                # Etc/GMT zones use inverted signs
                candidate = f"Etc/GMT{-offset_hours:+d}"
                if is_known_zone(candidate):
                    return candidate

            logger.debug("Could not detect host timezone, falling back to %s", DEFAULT_LOCAL_TIMEZONE)
            return DEFAULT_LOCAL_TIMEZONE

        except (OSError, ValueError) as e:
            logger.warning("Failed to detect host timezone: %s, falling back to %s", e, DEFAULT_LOCAL_TIMEZONE)
            return DEFAULT_LOCAL_TIMEZONE


class TimezoneResolution(NamedTuple):
    """Outcome of resolving a raw TZID token.

    At most one of ``zone`` and ``offset`` is set. When neither is, the label
    could not be resolved and ``raw`` is passed through.
    """

    zone: Optional[str]
    offset: Optional[str]
    raw: str

    @property
    def identifier(self) -> str:
        return self.zone or self.offset or self.raw

    @property
    def resolved(self) -> bool:
        return bool(self.zone or self.offset)

    @property
    def tzinfo(self) -> Optional[datetime.tzinfo]:
        if self.zone:
            return zoneinfo.ZoneInfo(self.zone)
        if self.offset:
            return offset_to_tzinfo(self.offset)
        return None


_detector = TimezoneDetector()


def get_local_timezone() -> str:
    """Get the host's local timezone (convenience function)."""
    return _detector.get_local_timezone()


@lru_cache(maxsize=1)
def _known_zones() -> frozenset[str]:
    return frozenset(zoneinfo.available_timezones())


def is_known_zone(name: str) -> bool:
    """Return True if ``name`` is a recognised IANA zone identifier."""
    return bool(name) and name in _known_zones()


def resolve_offset(name: str, instant: datetime.datetime) -> Optional[datetime.timedelta]:
    """Compute the UTC offset of zone ``name`` at ``instant``.

    Naive instants are read as wall-clock time in the zone.
    """
    tz = zoneinfo.ZoneInfo(name)
    if instant.tzinfo is None:
        return instant.replace(tzinfo=tz).utcoffset()
    return instant.astimezone(tz).utcoffset()


def windows_tz_to_iana(windows_tz: str) -> Optional[str]:
    """Convert a Microsoft timezone name to an IANA timezone identifier.

    Args:
        windows_tz: Windows zone id or legacy display label
            (e.g. "Mountain Standard Time", "(UTC+01:00) Amsterdam, Berlin, ...")

    Returns:
        IANA timezone identifier or None if unknown or unmapped
    """
    return WINDOWS_ZONES.get(windows_tz)


def offset_to_tzinfo(offset: str) -> datetime.timezone:
    """Build a fixed-offset tzinfo from a ``+HH:MM`` string."""
    sign = -1 if offset.startswith("-") else 1
    hours, minutes = offset.lstrip("+-").split(":")
    return datetime.timezone(sign * datetime.timedelta(hours=int(hours), minutes=int(minutes)))


def strip_quotes(value: str) -> str:
    return _QUOTED_RE.sub(r"\1", value)


def resolve_tzid(raw_tzid: str, local_timezone: Optional[str] = None) -> TimezoneResolution:
    """Resolve a raw TZID parameter value.

    Args:
        raw_tzid: TZID as found on the property line
        local_timezone: Zone to use for the Outlook custom-zone marker,
            detected from the host when not given

    Returns:
        TimezoneResolution with a confirmed IANA zone, a raw offset, or neither
    """
    tz = raw_tzid
    if tz == OUTLOOK_CUSTOM_TZID:
        # No usable zone information; best guess is the host zone
        tz = local_timezone or get_local_timezone()

    tz = strip_quotes(tz)

    if " " in tz:
        iana = windows_tz_to_iana(tz)
        if iana:
            tz = iana

    if tz.startswith("("):
        # Legacy display label with no IANA equivalent; keep only the offset
        match = _OFFSET_RE.search(tz)
        if match is None:
            logger.debug("Unresolvable timezone label %r", tz)
        return TimezoneResolution(None, match.group() if match else None, raw_tzid)

    if is_known_zone(tz):
        return TimezoneResolution(tz, None, tz)

    logger.debug("Unknown timezone %r, passing through", raw_tzid)
    return TimezoneResolution(None, None, raw_tzid)
