"""Line splitting and RFC 5545 section 3.1 unfolding - iCal Lite."""

import logging
import re
from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)

LF = "\n"
CR = "\r"
CRLF = "\r?\n"

_FOLD_CHARS = (" ", "\t")


def detect_line_break(content: str) -> str:
    """Detect the line-break convention used by ``content``.

    Looks at the first line feed past position 0. Returns ``"\\r?\\n"`` when it
    is preceded by a carriage return, ``"\\n"`` when it is not, ``"\\r"`` when the
    buffer only uses carriage returns, and ``"\\n"`` when there is no break at all.
    """
    index_of_lf = content.find(LF, 1)
    if index_of_lf == -1:
        return CR if CR in content else LF
    if content[index_of_lf - 1] == CR:
        return CRLF
    return LF


def split_physical_lines(content: str) -> list[str]:
    """Split ``content`` into physical lines using its own line-break convention."""
    line_break = detect_line_break(content)
    if line_break == LF:
        lines = content.split(LF)
    elif line_break == CR:
        lines = content.split(CR)
    else:
        lines = re.split(CRLF, content)
    # Stray carriage returns from mixed endings never belong to a value
    return [line.rstrip(CR) for line in lines]


def unfold_lines(lines: Iterable[str]) -> Iterator[str]:
    """Join folded continuation lines onto the line they continue.

    A physical line that starts with a space or tab continues the previous
    one; its single leading whitespace character is dropped and the rest is
    appended without a separator.
    """
    pending = None
    for line in lines:
        if line.startswith(_FOLD_CHARS):
            if pending is None:
                # Continuation with nothing to continue; treat as its own line
                pending = line
            else:
                pending += line[1:]
            continue
        if pending is not None:
            yield pending
        # Blank lines end a fold and carry no property
        pending = line or None
    if pending is not None:
        yield pending


def iter_logical_lines(content: str) -> Iterator[str]:
    """Yield reassembled logical lines of ``content``.

    Each call re-scans the buffer, so iteration can be restarted by calling
    again; no state is kept between calls.
    """
    return unfold_lines(split_physical_lines(content))
