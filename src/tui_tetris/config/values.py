"""Value types, per-type parsers and table lookup helpers for config settings.

Every parser takes the raw value text plus the line number and full line it
came from, and either returns a typed value or raises :class:`ParseError`
pointing at that line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TypeVar, Union

from .errors import ParseError, ParseErrorKind
from .settings import SettingsTable


T = TypeVar("T")
ValueParser = Callable[[str, int, str], T]

NONE_SENTINEL = "none"


class Mode(Enum):
    CLASSIC = "classic"
    MODERN = "modern"

    def __str__(self) -> str:
        return self.value


class SpecialKey(Enum):
    """Non-character keys, valued by their config-file name."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    LSHIFT = "lshift"
    RSHIFT = "rshift"
    LCTRL = "lctrl"
    RCTRL = "rctrl"
    ESC = "esc"


# A single character or a special key. The space bar is the character " ".
KeyBinding = Union[str, SpecialKey]

SPACE_NAME = "space"


@dataclass(frozen=True)
class RgbColor:
    r: int
    g: int
    b: int

    def __str__(self) -> str:
        return f"rgb {self.r},{self.g},{self.b}"


@dataclass(frozen=True)
class AnsiColor:
    value: int

    def __str__(self) -> str:
        return f"ansi {self.value}"


Color = Union[RgbColor, AnsiColor]


_UNSIGNED_RE = re.compile(r"\+?[0-9]+")

# Integers are read as unsigned 64-bit values; anything larger fails to parse.
UNSIGNED_LIMIT = 2 ** 64


def _parse_unsigned(text: str) -> Optional[int]:
    if _UNSIGNED_RE.fullmatch(text) is None:
        return None
    digits = text.lstrip("+").lstrip("0") or "0"
    # Checked before int(), which refuses very long digit strings outright.
    if len(digits) > len(str(UNSIGNED_LIMIT)):
        return None
    value = int(digits)
    if value >= UNSIGNED_LIMIT:
        return None
    return value


def parse_mode(text: str, line_num: int, line: str) -> Mode:
    lowered = text.lower()
    if lowered in ("c", "classic"):
        return Mode.CLASSIC
    if lowered in ("m", "modern"):
        return Mode.MODERN
    raise ParseError(
        ParseErrorKind.INVALID_VALUE,
        line_num,
        line,
        "Accepted game mode indicators: c, classic, m, modern.",
    )


_NAMED_KEYS = {SPACE_NAME: " ", **{key.value: key for key in SpecialKey}}


def parse_key_binding(text: str, line_num: int, line: str) -> KeyBinding:
    if len(text) == 1:
        return text
    try:
        return _NAMED_KEYS[text]
    except KeyError:
        raise ParseError(
            ParseErrorKind.INVALID_VALUE,
            line_num,
            line,
            "Supported non-single-character values: 'space', 'left', 'right', 'up', "
            "'down', 'lshift', 'rshift', 'lctrl', 'rctrl', and 'esc'.",
        ) from None


def _parse_byte(text: str, line_num: int, line: str, what: str) -> int:
    value = _parse_unsigned(text)
    if value is None or value > 255:
        raise ParseError(
            ParseErrorKind.FAILED_PARSE_VALUE,
            line_num,
            line,
            f"Failed to parse {what}; expected an integer from 0 to 255.",
        )
    return value


def _parse_rgb_triple(text: str, line_num: int, line: str) -> RgbColor:
    parts = [part.strip() for part in text.split(",")]
    if len(parts) > 3:
        raise ParseError(
            ParseErrorKind.INVALID_VALUE,
            line_num,
            line,
            "RGB colors have exactly three components: rgb r,g,b.",
        )
    components = []
    for name, part in zip("RGB", parts + [""] * (3 - len(parts))):
        if not part:
            raise ParseError(ParseErrorKind.MISSING_VALUE, line_num, line, f"Missing {name} value.")
        components.append(_parse_byte(part, line_num, line, f"{name} value"))
    return RgbColor(*components)


def parse_color(text: str, line_num: int, line: str) -> Color:
    """Parse ``rgb r,g,b`` or ``ansi n``."""
    parts = text.split(None, 1)
    if not parts:
        raise ParseError(ParseErrorKind.MISSING_VALUE, line_num, line, "Missing color type.")
    if len(parts) < 2:
        raise ParseError(ParseErrorKind.MISSING_VALUE, line_num, line, "Missing color.")
    color_type, color = parts[0].lower(), parts[1].strip()
    if color_type == "rgb":
        return _parse_rgb_triple(color, line_num, line)
    if color_type == "ansi":
        return AnsiColor(_parse_byte(color, line_num, line, "ANSI color value"))
    raise ParseError(
        ParseErrorKind.INVALID_VALUE,
        line_num,
        line,
        "Accepted color formats are: rgb, ansi.",
    )


def parse_char(text: str, line_num: int, line: str) -> str:
    if not text:
        raise ParseError(ParseErrorKind.MISSING_VALUE, line_num, line, "Missing character value.")
    if len(text) != 1:
        raise ParseError(
            ParseErrorKind.INVALID_VALUE,
            line_num,
            line,
            "Expected a single character value.",
        )
    return text


def parse_bool(text: str, line_num: int, line: str) -> bool:
    lowered = text.lower()
    if lowered in ("1", "t", "true"):
        return True
    if lowered in ("0", "f", "false"):
        return False
    raise ParseError(
        ParseErrorKind.INVALID_VALUE,
        line_num,
        line,
        "Accepted boolean values: 1, t, true, 0, f, false",
    )


def is_none_sentinel(text: str) -> bool:
    return text.lower() == NONE_SENTINEL


def lookup(table: SettingsTable, key: str, default: T, parser: ValueParser) -> T:
    """Parse ``key`` if it was set, otherwise return ``default``."""
    entry = table.get(key)
    if entry is None:
        return default
    return parser(entry.value, entry.line_num, entry.line)


def lookup_optional(
    table: SettingsTable, key: str, default: Optional[T], parser: ValueParser
) -> Optional[T]:
    """Like :func:`lookup`, but the text ``none`` (any case) yields ``None``."""
    entry = table.get(key)
    if entry is None:
        return default
    if is_none_sentinel(entry.value):
        return None
    return parser(entry.value, entry.line_num, entry.line)


def lookup_range(
    table: SettingsTable,
    key: str,
    default: Optional[int],
    minimum: int,
    parse_message: str,
    range_message: str,
    maximum: Optional[int] = None,
    optional: bool = False,
) -> Optional[int]:
    """Integer lookup checked against ``minimum <= value`` (and ``value < maximum``).

    With ``optional=True`` the ``none`` sentinel is accepted and yields ``None``.
    """

    def parse_bounded(text: str, line_num: int, line: str) -> int:
        value = _parse_unsigned(text)
        if value is None:
            raise ParseError(ParseErrorKind.FAILED_PARSE_VALUE, line_num, line, parse_message)
        if value < minimum or (maximum is not None and value >= maximum):
            raise ParseError(ParseErrorKind.INVALID_VALUE, line_num, line, range_message)
        return value

    if optional:
        return lookup_optional(table, key, default, parse_bounded)
    return lookup(table, key, default, parse_bounded)
