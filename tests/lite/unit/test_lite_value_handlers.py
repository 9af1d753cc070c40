"""Tests for ical_lite.lite_value_handlers module."""

from datetime import datetime, timedelta, timezone

import pytest

from ical_lite.exceptions import DateKeyError
from ical_lite.lite_models import DateValue, FreeBusyBlock, GeoValue, ParameterizedValue
from ical_lite.lite_tokenizer import tokenize_line
from ical_lite.lite_value_handlers import (
    LiteValueHandlers,
    date_key,
    split_list,
    store_value,
    text_value,
)

pytestmark = pytest.mark.unit


class TestModuleHelpers:
    """Tests for the storage helpers."""

    def test_store_value_promotes_second_value_to_list(self):
        curr: dict = {}

        store_value(curr, "attendee", "a")
        store_value(curr, "attendee", "b")
        store_value(curr, "attendee", "c")

        assert curr == {"attendee": ["a", "b", "c"]}

    def test_text_value_bare_for_charset_only(self):
        assert text_value("caf\\, bar", ["CHARSET=utf-8"]) == "caf, bar"

    def test_text_value_wrapped_for_other_parameters(self):
        result = text_value("Réunion", ["LANGUAGE=fr"])

        assert result == ParameterizedValue(params={"LANGUAGE": "fr"}, value="Réunion")

    def test_split_list_trims_items(self):
        assert split_list("A , B,C") == ["A", "B", "C"]
        assert split_list("") == []

    def test_date_key_rejects_non_date_values(self):
        with pytest.raises(DateKeyError) as exc_info:
            date_key("not a date", "exdate")

        assert isinstance(exc_info.value, TypeError)


class TestLiteValueHandlers:
    """Tests for LiteValueHandlers dispatch."""

    def setup_method(self):
        """Set up test fixtures."""
        self.handlers = LiteValueHandlers(local_timezone="America/Los_Angeles")
        self.curr: dict = {"type": "VEVENT"}

    def feed(self, *lines: str, inside_component: bool = True) -> dict:
        for line in lines:
            prop = tokenize_line(line)
            assert prop is not None, line
            self.handlers.handle(prop, self.curr, inside_component)
        return self.curr

    def test_get_is_case_insensitive(self):
        assert self.handlers.get("summary") is not None
        assert self.handlers.get("X-UNKNOWN") is None

    def test_text_properties_use_mapped_field_names(self):
        curr = self.feed(
            "SUMMARY:Planning\\; Q1",
            "TRANSP:OPAQUE",
            "PERCENT-COMPLETE:40",
            "CLASS:PRIVATE",
        )

        assert curr["summary"] == "Planning; Q1"
        assert curr["transparency"] == "OPAQUE"
        assert curr["completion"] == "40"
        assert curr["class"] == "PRIVATE"

    def test_repeated_text_property_becomes_list(self):
        curr = self.feed("COMMENT:first", "COMMENT:second")

        assert curr["comment"] == ["first", "second"]

    def test_dtstart_stores_start_and_datetype(self):
        curr = self.feed("DTSTART;VALUE=DATE:20240101")

        assert curr["start"] == DateValue(dt=datetime(2024, 1, 1), date_only=True)
        assert curr["datetype"] == "date"

    def test_date_properties(self):
        curr = self.feed(
            "DTEND:20240101T100000Z",
            "DUE:20240102T100000Z",
            "DTSTAMP:20231231T000000Z",
            "LAST-MODIFIED:20231230T000000Z",
            "RECURRENCE-ID:20240101T090000Z",
        )

        assert curr["end"].dt == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
        assert curr["due"].dt == datetime(2024, 1, 2, 10, 0, tzinfo=timezone.utc)
        assert isinstance(curr["dtstamp"], DateValue)
        assert isinstance(curr["lastmodified"], DateValue)
        assert isinstance(curr["recurrenceid"], DateValue)

    def test_rrule_keeps_raw_line(self):
        curr = self.feed("RRULE:FREQ=WEEKLY;COUNT=3")

        assert curr["rrule"] == "RRULE:FREQ=WEEKLY;COUNT=3"

    def test_geo_parsed_into_pair(self):
        curr = self.feed("GEO:37.386013;-122.082932")

        assert curr["geo"] == GeoValue(lat=37.386013, lon=-122.082932)

    def test_malformed_geo_kept_as_text(self):
        assert self.feed("GEO:somewhere")["geo"] == "somewhere"

    def test_categories_accumulate_across_lines(self):
        curr = self.feed("CATEGORIES:A, B", "CATEGORIES:C")

        assert curr["categories"] == ["A", "B", "C"]

    def test_freebusy_periods(self):
        curr = self.feed(
            "FREEBUSY;FBTYPE=BUSY-UNAVAILABLE:19970308T160000Z/PT8H30M,19970309T160000Z/19970309T170000Z",
            "FREEBUSY:19970310T160000Z/19970310T163000Z",
        )

        blocks = curr["freebusy"]
        assert [block.type for block in blocks] == ["BUSY-UNAVAILABLE", "BUSY-UNAVAILABLE", "BUSY"]
        first = blocks[0]
        assert isinstance(first, FreeBusyBlock)
        assert first.end.dt - first.start.dt == timedelta(hours=8, minutes=30)
        assert blocks[1].end.dt == datetime(1997, 3, 9, 17, 0, tzinfo=timezone.utc)

    def test_exdate_keys_by_calendar_date_ignoring_time(self):
        curr = self.feed("EXDATE:20240101T090000,20240102T090000")

        assert set(curr["exdate"]) == {"2024-01-01", "2024-01-02"}

    def test_exdate_first_value_for_a_date_is_kept(self):
        curr = self.feed("EXDATE:20240101T090000", "EXDATE:20240101T180000")

        assert curr["exdate"]["2024-01-01"].dt == datetime(2024, 1, 1, 9, 0)

    def test_exdate_with_tzid_keys_by_local_date(self):
        curr = self.feed("EXDATE;TZID=America/New_York:20240101T230000")

        assert list(curr["exdate"]) == ["2024-01-01"]

    def test_unparseable_exdate_is_fatal(self):
        with pytest.raises(DateKeyError):
            self.feed("EXDATE:someday")

    def test_custom_property_inside_component_drops_prefix(self):
        curr = self.feed("X-MICROSOFT-CDO-BUSYSTATUS:BUSY")

        assert curr["MICROSOFT-CDO-BUSYSTATUS"] == "BUSY"

    def test_custom_property_at_top_level_uses_lower_case_name(self):
        curr = self.feed("X-WR-CALNAME:Team", inside_component=False)

        assert curr["x-wr-calname"] == "Team"

    def test_unknown_property_with_parameters_is_wrapped(self):
        curr = self.feed("ORGANIZER;CN=Jane Doe:mailto:jane@example.com")

        assert curr["organizer"] == ParameterizedValue(
            params={"CN": "Jane Doe"}, value="mailto:jane@example.com"
        )
