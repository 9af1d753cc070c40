"""iCalendar parse driver - iCal Lite.

Runs the line reader, tokenizer and component stack machine over a complete
text buffer. The work is wrapped in a resumable ``ParseTask`` so large feeds
can be parsed in bounded batches without monopolizing the event loop:

- ``parse_ics`` processes every line in one pass.
- ``parse_ics_async`` yields to the running loop between batches.
- ``parse_ics_with_callback`` schedules batches with ``loop.call_soon`` and
  reports through a ``callback(error, tree)`` invoked exactly once.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Optional

from .config import ParserSettings, get_settings
from .exceptions import ICalContentTooLargeError, ICalError
from .lite_event_merger import LiteComponentMerger
from .lite_line_reader import iter_logical_lines
from .lite_models import ResultTree
from .lite_stack_machine import ComponentStackMachine
from .lite_tokenizer import tokenize_line
from .lite_value_handlers import LiteValueHandlers

logger = logging.getLogger(__name__)

MAX_ICS_SIZE_WARNING = 10 * 1024 * 1024  # 10MB warning threshold

ParseCallback = Callable[[Optional[BaseException], Optional[ResultTree]], None]


def check_content_size(text: str, max_bytes: int) -> int:
    """Validate the encoded size of ``text``.

    Args:
        text: ICS content
        max_bytes: Size limit in bytes, 0 disables the check

    Returns:
        Size of the content in bytes

    Raises:
        ICalContentTooLargeError: If the content exceeds ``max_bytes``
    """
    size = len(text.encode("utf-8", errors="replace"))
    if max_bytes and size > max_bytes:
        logger.error("ICS content too large: %d bytes exceeds %d limit", size, max_bytes)
        raise ICalContentTooLargeError(
            f"ICS content too large: {size} bytes exceeds {max_bytes} limit"
        )
    if size > MAX_ICS_SIZE_WARNING:
        logger.warning(
            "Large ICS content detected: %d bytes (threshold: %d)", size, MAX_ICS_SIZE_WARNING
        )
    return size


class ParseTask:
    """A parse that can be advanced in bounded batches of logical lines."""

    def __init__(self, text: str, settings: Optional[ParserSettings] = None) -> None:
        """Initialize parse task.

        Args:
            text: Complete ICS content
            settings: Parser settings (the global settings when None)

        Raises:
            ICalContentTooLargeError: If the content exceeds the configured size
        """
        self.settings = settings or get_settings()
        check_content_size(text or "", self.settings.max_content_bytes)

        local_timezone = self.settings.local_timezone
        self.machine = ComponentStackMachine(
            handlers=LiteValueHandlers(local_timezone),
            merger=LiteComponentMerger(),
            local_timezone=local_timezone,
            strip_calendar_scalars=self.settings.strip_calendar_scalars,
        )
        self._lines = iter_logical_lines(text or "")
        self._result: Optional[ResultTree] = None
        self.line_number = 0
        self.skipped_lines = 0
        self.batches = 0

    @property
    def done(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> ResultTree:
        """The finished result tree.

        Raises:
            RuntimeError: If the task has not finished yet
        """
        if self._result is None:
            raise RuntimeError("Parse task has not finished")
        return self._result

    def step(self, limit: Optional[int] = None) -> bool:
        """Process up to ``limit`` logical lines (all remaining lines when None).

        Returns:
            True once every line has been processed and the result is available

        Raises:
            ICalError: Fatal parse errors, annotated with the logical line number
        """
        if self.done:
            return True

        self.batches += 1
        processed = 0
        for line in self._lines:
            self.line_number += 1
            self._process_line(line)
            processed += 1
            if limit is not None and processed >= limit:
                return False

        self._result = self.machine.finish()
        logger.debug(
            "Parsed %d lines into %d entries (%d skipped, %d batches)",
            self.line_number,
            len(self._result),
            self.skipped_lines,
            self.batches,
        )
        return True

    def _process_line(self, line: str) -> None:
        prop = tokenize_line(line)
        if prop is None:
            self.skipped_lines += 1
            logger.debug("Skipping malformed line %d: %r", self.line_number, line[:80])
            return
        try:
            self.machine.feed(prop)
        except ICalError as e:
            if e.line_number is None:
                e.line_number = self.line_number
            raise


def parse_ics(text: str, settings: Optional[ParserSettings] = None) -> ResultTree:
    """Parse ICS content in a single pass.

    Args:
        text: Complete ICS content
        settings: Parser settings (the global settings when None)

    Returns:
        Result tree mapping UIDs (or generated identifiers) to components

    Raises:
        ICalError: On fatal parse errors or oversized content
    """
    task = ParseTask(text, settings)
    task.step()
    return task.result


def _resolve_chunk_size(task: ParseTask, chunk_size: Optional[int]) -> int:
    limit = chunk_size if chunk_size is not None else task.settings.chunk_size
    if limit < 1:
        raise ValueError(f"chunk_size must be at least 1, got {limit}")
    return limit


async def parse_ics_async(
    text: str,
    settings: Optional[ParserSettings] = None,
    chunk_size: Optional[int] = None,
) -> ResultTree:
    """Parse ICS content in batches, yielding to the event loop between them.

    Args:
        text: Complete ICS content
        settings: Parser settings (the global settings when None)
        chunk_size: Lines per batch, overriding ``settings.chunk_size``

    Returns:
        Result tree, identical to what ``parse_ics`` returns for the same input
    """
    task = ParseTask(text, settings)
    limit = _resolve_chunk_size(task, chunk_size)
    while not task.step(limit):
        await asyncio.sleep(0)
    return task.result


def parse_ics_with_callback(
    text: str,
    callback: ParseCallback,
    settings: Optional[ParserSettings] = None,
    loop: Optional[asyncio.AbstractEventLoop] = None,
) -> None:
    """Parse ICS content in batches scheduled on ``loop``.

    ``callback(error, tree)`` is invoked exactly once from the loop: with
    ``(None, tree)`` on success, or ``(error, None)`` when the parse fails.
    Without an explicit ``loop`` this must be called from a running loop.

    Args:
        text: Complete ICS content
        callback: Completion callback
        settings: Parser settings (the global settings when None)
        loop: Event loop the batches run on
    """
    if loop is None:
        loop = asyncio.get_running_loop()

    def fail(error: Exception) -> None:
        logger.error("Chunked ICS parse failed: %s", error)
        loop.call_soon(callback, error, None)

    try:
        task = ParseTask(text, settings)
        limit = _resolve_chunk_size(task, None)
    except (ICalError, ValueError) as e:
        fail(e)
        return

    def run_batch() -> None:
        try:
            done = task.step(limit)
        except Exception as e:
            fail(e)
            return
        if done:
            callback(None, task.result)
        else:
            loop.call_soon(run_batch)

    loop.call_soon(run_batch)
