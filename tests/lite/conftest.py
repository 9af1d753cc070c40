import os
from collections.abc import Generator
from typing import Any

import pytest

from ical_lite.config import ParserSettings, reset_settings

CRLF = "\r\n"


def ics(*lines: str) -> str:
    """Join content lines with CRLF the way calendar servers emit them."""
    return CRLF.join(lines) + CRLF


@pytest.fixture
def test_timezone() -> str:
    """Return a deterministic timezone identifier for tests.

    Using a fixed timezone string avoids host-local timezone differences
    which can make datetime-sensitive tests flaky.
    """
    return "America/Los_Angeles"


@pytest.fixture
def settings(test_timezone: str) -> ParserSettings:
    """Parser settings pinned to a fixed local timezone."""
    return ParserSettings(local_timezone=test_timezone)


@pytest.fixture
def recurring_calendar() -> str:
    """Calendar with a timezone block, a recurring meeting, an override and an all-day event."""
    return ics(
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//Example Corp//Test//EN",
        "METHOD:PUBLISH",
        "X-WR-CALNAME:Team",
        "BEGIN:VTIMEZONE",
        "TZID:America/New_York",
        "BEGIN:STANDARD",
        "DTSTART:19701101T020000",
        "RRULE:FREQ=YEARLY;BYMONTH=11;BYDAY=1SU",
        "TZOFFSETFROM:-0400",
        "TZOFFSETTO:-0500",
        "END:STANDARD",
        "END:VTIMEZONE",
        "BEGIN:VEVENT",
        "UID:weekly-sync@example.com",
        "SUMMARY:Weekly sync",
        "DTSTART;TZID=America/New_York:20240108T090000",
        "DTEND;TZID=America/New_York:20240108T093000",
        "RRULE:FREQ=WEEKLY;COUNT=4",
        "EXDATE;TZID=America/New_York:20240122T090000",
        "LOCATION:Room 1",
        "DESCRIPTION:Agenda\\, notes\\nand a long line that the server",
        "  folded",
        "BEGIN:VALARM",
        "ACTION:DISPLAY",
        "TRIGGER:-PT15M",
        "END:VALARM",
        "END:VEVENT",
        "BEGIN:VEVENT",
        "UID:weekly-sync@example.com",
        "RECURRENCE-ID;TZID=America/New_York:20240115T090000",
        "SUMMARY:Weekly sync (moved)",
        "DTSTART;TZID=America/New_York:20240115T100000",
        "DTEND;TZID=America/New_York:20240115T103000",
        "END:VEVENT",
        "BEGIN:VEVENT",
        "UID:holiday@example.com",
        "SUMMARY:Holiday",
        "DTSTART;VALUE=DATE:20240101",
        "END:VEVENT",
        "END:VCALENDAR",
    )


@pytest.fixture
def keyed_calendar() -> str:
    """Calendar whose components all carry a UID, so results are deterministic."""
    return ics(
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "METHOD:REQUEST",
        "BEGIN:VEVENT",
        "UID:standup@example.com",
        "SUMMARY:Standup",
        "DTSTART:20240102T090000Z",
        "DURATION:PT15M",
        "RRULE:FREQ=DAILY;UNTIL=20240105T090000Z",
        "CATEGORIES:Work, Daily",
        "CATEGORIES:Team",
        "GEO:37.386013;-122.082932",
        "END:VEVENT",
        "BEGIN:VTODO",
        "UID:todo-1@example.com",
        "SUMMARY;LANGUAGE=en:File report",
        "DUE:20240110T170000Z",
        "PERCENT-COMPLETE:40",
        "END:VTODO",
        "BEGIN:VFREEBUSY",
        "UID:fb-1@example.com",
        "FREEBUSY;FBTYPE=BUSY-UNAVAILABLE:20240102T160000Z/PT8H30M,20240103T160000Z/20240103T170000Z",
        "END:VFREEBUSY",
        "END:VCALENDAR",
    )


@pytest.fixture(autouse=True)
def clean_test_environment(monkeypatch: Any) -> Generator[None, Any, None]:
    """Keep ICAL_LITE_* variables and the cached settings from leaking between tests."""
    for key in list(os.environ):
        if key.upper().startswith("ICAL_LITE_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()
