"""Test configuration shared by all test suites."""

from typing import Any

import pytest


@pytest.fixture
def sample_ics_content() -> str:
    """Minimal single-event calendar."""
    return (
        "BEGIN:VCALENDAR\r\n"
        "VERSION:2.0\r\n"
        "PRODID:-//Test//Test//EN\r\n"
        "BEGIN:VEVENT\r\n"
        "UID:test-event-1@example.com\r\n"
        "DTSTART:20240115T100000Z\r\n"
        "DTEND:20240115T110000Z\r\n"
        "SUMMARY:Test Event\r\n"
        "END:VEVENT\r\n"
        "END:VCALENDAR\r\n"
    )


def pytest_configure(config: Any) -> None:
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Tests spanning several modules")
