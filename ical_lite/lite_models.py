"""Data models for parsed iCalendar values - iCal Lite.

Components and the result tree are plain dictionaries keyed by property name;
the structured property values stored in them are the pydantic models below.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

UTC_ZONE = "Etc/UTC"


class DateValue(BaseModel):
    """A parsed DATE or DATE-TIME value.

    ``dt`` is timezone-aware when a zone or offset was resolved, and naive for
    floating times and all-day dates. ``tz`` holds the resolved identifier: an
    IANA name, ``Etc/UTC`` for a trailing ``Z``, a ``+HH:MM`` offset, or the raw
    TZID label when nothing could be resolved.
    """

    dt: datetime
    tz: Optional[str] = None
    date_only: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def calendar_date(self) -> date:
        """Calendar date of the value in its own wall-clock time."""
        return self.dt.date()

    @property
    def is_floating(self) -> bool:
        """True when the value carries no zone information."""
        return self.dt.tzinfo is None

    def date_key(self) -> str:
        """Return the ``YYYY-MM-DD`` key used for EXDATE and recurrence maps."""
        return self.dt.date().isoformat()

    def to_compact(self) -> str:
        """Render as ``YYYYMMDDTHHMMSS``, with a ``Z`` suffix for UTC values."""
        if self.tz == UTC_ZONE and self.dt.tzinfo is not None:
            return self.dt.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        return self.dt.strftime("%Y%m%dT%H%M%S")

    def shifted(self, delta: timedelta) -> "DateValue":
        """Return a copy moved by ``delta`` as elapsed time, keeping tz and date flags."""
        if self.dt.tzinfo is None:
            moved = self.dt + delta
        else:
            moved = (self.dt.astimezone(timezone.utc) + delta).astimezone(self.dt.tzinfo)
        return self.model_copy(update={"dt": moved})

    def isoformat(self) -> str:
        if self.date_only:
            return self.dt.date().isoformat()
        return self.dt.isoformat()


class ParameterizedValue(BaseModel):
    """A text value stored together with the parameters of its source line."""

    params: dict[str, Any] = Field(default_factory=dict)
    value: str = ""


class GeoValue(BaseModel):
    """GEO property: latitude and longitude in decimal degrees."""

    lat: float
    lon: float


class FreeBusyBlock(BaseModel):
    """One FREEBUSY period."""

    type: str = "BUSY"
    start: Union[DateValue, str, None] = None
    end: Union[DateValue, str, None] = None


# Components are mutable mappings while the stack machine owns them.
Component = dict[str, Any]
ResultTree = dict[str, Any]

PropertyValue = Union[
    str,
    int,
    float,
    bool,
    ParameterizedValue,
    DateValue,
    GeoValue,
    list[Any],
    dict[str, Any],
]
