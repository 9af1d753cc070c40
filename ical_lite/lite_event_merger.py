"""UID reconciliation for finished components - iCal Lite.

A calendar may describe one logical entry through several blocks sharing a
UID: the base entry, later updates to it, and RECURRENCE-ID overrides of
single occurrences. This module folds them into one record.
"""

import logging
import uuid
from collections.abc import Callable
from typing import Any, Optional

from .lite_models import Component, ParameterizedValue, ResultTree
from .lite_value_handlers import date_key

logger = logging.getLogger(__name__)

RECURRENCES_KEY = "recurrences"
RECURRENCE_ID_KEY = "recurrenceid"


def component_uid(component: Component) -> Optional[str]:
    """Return the component's UID as a string, or None when it has none."""
    uid: Any = component.get("uid")
    if isinstance(uid, list):
        uid = uid[0] if uid else None
    if isinstance(uid, ParameterizedValue):
        uid = uid.value
    return str(uid) if uid else None


def merge_component(existing: Component, incoming: Component) -> Component:
    """Overwrite ``existing`` field by field with ``incoming`` (last write wins)."""
    merged = dict(existing)
    merged.update(incoming)
    return merged


def snapshot_recurrence(component: Component) -> Component:
    """Copy an override for the ``recurrences`` map, minus its own recurrences."""
    return {key: value for key, value in component.items() if key != RECURRENCES_KEY}


def attach_recurrence(parent: Component, override: Component) -> Component:
    """Return ``parent`` with ``override`` filed under its RECURRENCE-ID date.

    Raises:
        DateKeyError: If the override's RECURRENCE-ID is not a date value
    """
    key = date_key(override[RECURRENCE_ID_KEY], RECURRENCE_ID_KEY)
    recurrences = dict(parent.get(RECURRENCES_KEY) or {})
    recurrences[key] = snapshot_recurrence(override)
    updated = dict(parent)
    updated[RECURRENCES_KEY] = recurrences
    return updated


def clear_stray_recurrence_id(parent: Component) -> Component:
    """Drop a RECURRENCE-ID left on a parent that now carries its RRULE.

    Happens when an override arrived before its base entry and was
    temporarily stored as the parent.
    """
    if "rrule" in parent and RECURRENCE_ID_KEY in parent:
        return {key: value for key, value in parent.items() if key != RECURRENCE_ID_KEY}
    return parent


class LiteComponentMerger:
    """Files finished top-level components into the result tree."""

    def __init__(self, uid_factory: Optional[Callable[[], str]] = None) -> None:
        """Initialize merger.

        Args:
            uid_factory: Produces identifiers for components without a UID
        """
        self.uid_factory = uid_factory or (lambda: str(uuid.uuid4()))

    def reconcile(
        self,
        tree: ResultTree,
        component: Component,
        method: Any = None,
    ) -> str:
        """Merge ``component`` into ``tree`` and return the key it lives under.

        Args:
            tree: Result tree keyed by UID
            component: Finished component
            method: METHOD of the enclosing calendar, copied onto new entries

        Returns:
            Key of the entry that was created or updated
        """
        uid = component_uid(component)
        if uid is None:
            key = self.uid_factory()
            tree[key] = self._with_method(component, method)
            return key

        has_recurrence_id = RECURRENCE_ID_KEY in component
        if uid not in tree:
            tree[uid] = self._with_method(component, method)
        elif not has_recurrence_id:
            logger.debug("Merging repeated entry for UID %s", uid)
            tree[uid] = merge_component(tree[uid], component)

        if has_recurrence_id:
            tree[uid] = attach_recurrence(tree[uid], component)

        tree[uid] = clear_stray_recurrence_id(tree[uid])
        return uid

    @staticmethod
    def _with_method(component: Component, method: Any) -> Component:
        if method:
            # RFC 5545 section 3.2: the calendar's METHOD applies to its entries
            component["method"] = method
        return component
