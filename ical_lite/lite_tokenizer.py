"""Property line tokenizer - iCal Lite.

Splits one unfolded content line into ``(name, parameters, value)`` and
provides the text and parameter coercions shared by the value handlers.
"""

import logging
import re
from typing import Any, NamedTuple, Optional, Union

logger = logging.getLogger(__name__)

# NAME(;PARAM=VALUE)*:VALUE, parameter values may be quoted
_CONTENT_LINE_RE = re.compile(
    r'^([\w-]+)((?:;[\w-]+=(?:(?:"[^"]*")|[^":;]+))*):(.*)$',
    re.ASCII,
)
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)$")
_NEWLINE_ESCAPE_RE = re.compile(r"\\[nN]")

# Quoted "(UTC+01:00) City" zone labels carry colons that must stay quoted
_QUOTED_OFFSET_LABEL = '"('

CHARSET_UTF8 = "CHARSET=UTF-8"


class PropertyLine(NamedTuple):
    """A tokenized content line."""

    name: str
    params: list[str]
    value: str
    line: str


def unescape_text(text: Optional[str]) -> str:
    """Unescape a TEXT value per RFC 5545 section 3.3.11.

    Substitutions are applied in order: ``\\,``, ``\\;``, ``\\n``/``\\N``, ``\\\\``.
    """
    if not text:
        return ""
    text = text.replace("\\,", ",").replace("\\;", ";")
    text = _NEWLINE_ESCAPE_RE.sub("\n", text)
    return text.replace("\\\\", "\\")


def parse_value(value: str) -> Union[bool, int, float, str]:
    """Coerce a parameter value: TRUE/FALSE to bool, numeric text to a number."""
    if value == "TRUE":
        return True
    if value == "FALSE":
        return False
    if _NUMBER_RE.match(value):
        try:
            return int(value)
        except ValueError:
            return float(value)
    return value


def parse_parameters(params: Optional[list[str]]) -> dict[str, Any]:
    """Turn ``KEY=VALUE`` tokens into a mapping with coerced values.

    Tokens without ``=`` are ignored. Only the first ``=`` separates key
    from value.
    """
    out: dict[str, Any] = {}
    for element in params or []:
        if "=" in element:
            key, _, raw = element.partition("=")
            out[key] = parse_value(raw)
    return out


def find_parameter(params: Optional[list[str]], key: str) -> Optional[str]:
    """Return the raw value of the first ``key=`` parameter, if any."""
    prefix = f"{key}="
    for element in params or []:
        if element.startswith(prefix):
            return element[len(prefix):]
    return None


def has_only_trivial_parameters(params: Optional[list[str]]) -> bool:
    """True when there are no parameters besides a lone UTF-8 charset marker."""
    if not params:
        return True
    return len(params) == 1 and params[0].upper() == CHARSET_UTF8


def tokenize_line(line: str) -> Optional[PropertyLine]:
    """Tokenize one logical line.

    Quote characters are stripped first unless the line carries a quoted
    UTC-offset zone label.

    Returns:
        PropertyLine, or None when the line is not a content line
    """
    if _QUOTED_OFFSET_LABEL not in line:
        line = line.replace('"', "")

    match = _CONTENT_LINE_RE.match(line)
    if match is None:
        return None

    name, raw_params, value = match.groups()
    # Leading ';' produces an empty first slot
    params = raw_params.split(";")[1:] if raw_params else []
    return PropertyLine(name, params, value, line)
