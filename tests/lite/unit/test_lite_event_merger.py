"""Unit tests for lite_event_merger module."""

from datetime import datetime, timezone
from itertools import count

import pytest

from ical_lite.exceptions import DateKeyError
from ical_lite.lite_event_merger import (
    RECURRENCES_KEY,
    LiteComponentMerger,
    attach_recurrence,
    clear_stray_recurrence_id,
    component_uid,
    merge_component,
    snapshot_recurrence,
)
from ical_lite.lite_models import DateValue, ParameterizedValue

pytestmark = pytest.mark.unit


def utc(*args: int) -> DateValue:
    return DateValue(dt=datetime(*args, tzinfo=timezone.utc), tz="Etc/UTC")


class TestMergeFunctions:
    """Tests for the pure merge helpers."""

    def test_merge_component_last_write_wins_per_field(self):
        existing = {"uid": "a", "summary": "Old", "location": "Room 1"}
        incoming = {"uid": "a", "summary": "New", "description": "Added"}

        merged = merge_component(existing, incoming)

        assert merged == {"uid": "a", "summary": "New", "location": "Room 1", "description": "Added"}
        assert existing["summary"] == "Old"

    def test_snapshot_recurrence_drops_nested_recurrences(self):
        override = {"uid": "a", "summary": "Moved", RECURRENCES_KEY: {"2024-01-01": {}}}

        assert snapshot_recurrence(override) == {"uid": "a", "summary": "Moved"}

    def test_attach_recurrence_keys_by_recurrence_date(self):
        parent = {"uid": "a", "summary": "Weekly"}
        override = {"uid": "a", "summary": "Moved", "recurrenceid": utc(2024, 1, 15, 9, 0)}

        updated = attach_recurrence(parent, override)

        assert updated["summary"] == "Weekly"
        assert updated[RECURRENCES_KEY] == {"2024-01-15": override}
        assert RECURRENCES_KEY not in parent

    def test_attach_recurrence_rejects_text_recurrence_id(self):
        with pytest.raises(DateKeyError):
            attach_recurrence({"uid": "a"}, {"uid": "a", "recurrenceid": "tomorrow"})

    def test_clear_stray_recurrence_id_only_with_rrule(self):
        with_rule = {"uid": "a", "rrule": object(), "recurrenceid": utc(2024, 1, 15)}
        without_rule = {"uid": "a", "recurrenceid": utc(2024, 1, 15)}

        assert "recurrenceid" not in clear_stray_recurrence_id(with_rule)
        assert clear_stray_recurrence_id(without_rule) is without_rule

    def test_component_uid_unwraps_values(self):
        assert component_uid({"uid": "plain"}) == "plain"
        assert component_uid({"uid": ParameterizedValue(params={"X": 1}, value="wrapped")}) == "wrapped"
        assert component_uid({"uid": ["first", "second"]}) == "first"
        assert component_uid({}) is None


class TestLiteComponentMerger:
    """Tests for LiteComponentMerger class."""

    def setup_method(self):
        """Set up test fixtures."""
        ids = count(1)
        self.merger = LiteComponentMerger(uid_factory=lambda: f"generated-{next(ids)}")
        self.tree: dict = {}

    def test_first_sighting_is_stored_with_method(self):
        key = self.merger.reconcile(self.tree, {"uid": "a", "summary": "One"}, method="REQUEST")

        assert key == "a"
        assert self.tree["a"] == {"uid": "a", "summary": "One", "method": "REQUEST"}

    def test_component_without_uid_gets_generated_key(self):
        first = self.merger.reconcile(self.tree, {"summary": "One"}, method="PUBLISH")
        second = self.merger.reconcile(self.tree, {"summary": "Two"})

        assert (first, second) == ("generated-1", "generated-2")
        assert self.tree["generated-1"]["method"] == "PUBLISH"
        assert "method" not in self.tree["generated-2"]

    def test_default_uid_factory_produces_unique_keys(self):
        merger = LiteComponentMerger()

        first = merger.reconcile(self.tree, {"summary": "One"})
        second = merger.reconcile(self.tree, {"summary": "Two"})

        assert first != second

    def test_repeat_without_recurrence_id_merges_fields(self):
        self.merger.reconcile(self.tree, {"uid": "a", "summary": "Old", "location": "Room 1"})
        self.merger.reconcile(self.tree, {"uid": "a", "summary": "New"})

        assert self.tree["a"]["summary"] == "New"
        assert self.tree["a"]["location"] == "Room 1"

    def test_repeat_with_recurrence_id_files_override_without_touching_parent(self):
        self.merger.reconcile(self.tree, {"uid": "a", "summary": "Weekly", "rrule": "rule"})
        override = {"uid": "a", "summary": "Moved", "recurrenceid": utc(2024, 1, 15, 9, 0)}

        self.merger.reconcile(self.tree, override)

        parent = self.tree["a"]
        assert parent["summary"] == "Weekly"
        assert parent[RECURRENCES_KEY]["2024-01-15"] == override
        assert RECURRENCES_KEY not in parent[RECURRENCES_KEY]["2024-01-15"]

    def test_override_before_base_entry(self):
        override = {"uid": "a", "summary": "Moved", "recurrenceid": utc(2024, 1, 15, 9, 0)}
        base = {"uid": "a", "summary": "Weekly", "rrule": "rule"}

        self.merger.reconcile(self.tree, override)
        self.merger.reconcile(self.tree, base)

        parent = self.tree["a"]
        assert parent["summary"] == "Weekly"
        assert "recurrenceid" not in parent
        assert parent[RECURRENCES_KEY]["2024-01-15"]["summary"] == "Moved"
