"""Exceptions raised by the iCalendar parser.

Only conditions that must abort a parse are modelled here. Malformed lines,
unknown properties and unbalanced BEGIN/END blocks are tolerated and never
raise.
"""

from typing import Optional


class ICalError(Exception):
    """Base exception for iCalendar parsing errors."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is not None:
            return f"{self.message} (line {self.line_number})"
        return self.message


class ICalParseError(ICalError):
    """A coercion that is required to succeed did not."""


class RRuleParseError(ICalParseError):
    """A recurrence rule could not be built from the component's RRULE text."""


class DateKeyError(ICalParseError, TypeError):
    """An EXDATE or RECURRENCE-ID value cannot be rendered as a calendar-date key.

    The date handler always produces date values for these properties, so this
    signals a broken internal invariant rather than bad user input.
    """


class ICalContentTooLargeError(ICalError):
    """Raised when ICS content exceeds the configured size limit."""
