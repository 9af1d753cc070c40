"""Component stack machine - iCal Lite.

Consumes tokenized property lines and builds the result tree. BEGIN pushes
the current frame and opens a new one; END closes the current frame,
finalizes it and files it into its parent. Unbalanced BEGIN/END lines are
tolerated.
"""

import logging
from datetime import timedelta
from typing import Optional

from .lite_datetime_utils import DATE_TYPE, is_duration, parse_duration
from .lite_event_merger import LiteComponentMerger
from .lite_models import Component, DateValue, ParameterizedValue, ResultTree
from .lite_rrule import finalize_rrule
from .lite_tokenizer import PropertyLine
from .lite_value_handlers import LiteValueHandlers

logger = logging.getLogger(__name__)

CALENDAR_TYPE = "VCALENDAR"
TYPE_KEY = "type"


def synthesize_end(component: Component) -> None:
    """Fill in ``end`` for a component that has a start but no end.

    RFC 5545 section 3.6.1: an explicit DURATION is added to the start, a
    DATE-TIME start ends at the start itself, and a DATE start lasts one day.
    """
    if component.get("end"):
        return
    start = component.get("start")
    if not isinstance(start, DateValue):
        return

    duration = component.get("duration")
    if isinstance(duration, list) and duration:
        # Repeated DURATION lines: the last one wins
        duration = duration[-1]
    if isinstance(duration, ParameterizedValue):
        duration = duration.value
    if isinstance(duration, str) and is_duration(duration):
        component["end"] = start.shifted(parse_duration(duration))
    elif component.get("datetype") == DATE_TYPE:
        component["end"] = start.shifted(timedelta(days=1))
    else:
        component["end"] = start


def attach_child(parent: Component, child: Component) -> None:
    """Append a nested component to its parent under the lower-cased type name."""
    key = str(child.get(TYPE_KEY, "")).lower()
    children = parent.get(key)
    if isinstance(children, list):
        children.append(child)
    else:
        parent[key] = [child]


class ComponentStackMachine:
    """Builds the result tree from a stream of property lines.

    ``curr`` is the frame properties are stored on: the result tree itself
    while no component is open, otherwise the innermost open component.
    ``stack`` holds the suspended parent frames.
    """

    def __init__(
        self,
        handlers: Optional[LiteValueHandlers] = None,
        merger: Optional[LiteComponentMerger] = None,
        local_timezone: Optional[str] = None,
        strip_calendar_scalars: bool = True,
    ) -> None:
        """Initialize stack machine.

        Args:
            handlers: Property value handlers (a default registry when None)
            merger: UID reconciliation for top-level components
            local_timezone: Zone used for Outlook custom-zone markers
            strip_calendar_scalars: Drop plain text calendar properties on END:VCALENDAR
        """
        self.local_timezone = local_timezone
        self.handlers = handlers or LiteValueHandlers(local_timezone)
        self.merger = merger or LiteComponentMerger()
        self.strip_calendar_scalars = strip_calendar_scalars

        self.tree: ResultTree = {}
        self.stack: list[Component] = []
        self.curr: Component = self.tree

    @property
    def inside_component(self) -> bool:
        return bool(self.stack)

    @property
    def depth(self) -> int:
        return len(self.stack)

    def feed(self, prop: PropertyLine) -> None:
        """Process one tokenized property line.

        Raises:
            ICalParseError: If a closing component cannot be finalized
        """
        name = prop.name.upper()
        if name == "BEGIN":
            self.begin(prop.value)
        elif name == "END":
            self.end(prop.value)
        else:
            self.handlers.handle(prop, self.curr, self.inside_component)

    def begin(self, component_type: str) -> None:
        self.stack.append(self.curr)
        self.curr = {TYPE_KEY: component_type.strip()}

    def end(self, component_type: str) -> None:
        """Close the innermost open component."""
        if not self.stack:
            logger.debug("Ignoring END:%s without an open component", component_type)
            return

        open_type = str(self.curr.get(TYPE_KEY, "")).upper()
        if open_type != component_type.strip().upper():
            logger.debug("END:%s closes open %s component", component_type, open_type)

        if open_type == CALENDAR_TYPE:
            self._close_calendar()
        else:
            self._close_component(open_type)

    def _close_component(self, component_type: str) -> None:
        component = self.curr
        parent = self.stack.pop()

        finalize_rrule(component, component_type, self.local_timezone)
        synthesize_end(component)

        if self._is_top_level(parent):
            self.merger.reconcile(self.tree, component, parent.get("method"))
        else:
            attach_child(parent, component)
        self.curr = parent

    def _close_calendar(self) -> None:
        calendar = self.curr
        parent = self.stack.pop()

        for key, value in calendar.items():
            if key == TYPE_KEY:
                continue
            if self.strip_calendar_scalars and isinstance(value, str):
                continue
            if key not in parent:
                parent[key] = value
        self.curr = parent

    def _is_top_level(self, parent: Component) -> bool:
        return parent is self.tree or str(parent.get(TYPE_KEY, "")).upper() == CALENDAR_TYPE

    def finish(self) -> ResultTree:
        """Return the finished tree, discarding frames left open by missing END lines."""
        if self.stack:
            open_types = [str(frame.get(TYPE_KEY)) for frame in self.stack[1:]]
            open_types.append(str(self.curr.get(TYPE_KEY)))
            logger.debug("Discarding %d unclosed components: %s", len(open_types), open_types)
            self.stack.clear()
            self.curr = self.tree
        self.tree.pop(TYPE_KEY, None)
        return self.tree
