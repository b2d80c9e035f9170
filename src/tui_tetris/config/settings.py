"""Line tokenizer for the ``key = value`` config format."""

from __future__ import annotations

from typing import Dict, List, NamedTuple, Tuple

from .errors import ParseError, ParseErrorKind


SETTING_KEYS: Tuple[str, ...] = (
    "fps",
    "board_width",
    "board_height",
    "monochrome",
    "cascade",
    "const_level",
    "ghost_tetromino_character",
    "ghost_tetromino_color",
    "top_border_character",
    "left_border_character",
    "bottom_border_character",
    "right_border_character",
    "tl_corner_character",
    "bl_corner_character",
    "br_corner_character",
    "tr_corner_character",
    "border_color",
    "block_character",
    "block_size",
    "mode",
    "move_left",
    "move_right",
    "rotate_clockwise",
    "rotate_anticlockwise",
    "soft_drop",
    "hard_drop",
    "hold",
    "background_color",
    "i_color",
    "j_color",
    "l_color",
    "s_color",
    "z_color",
    "t_color",
    "o_color",
)

_KNOWN_KEYS = frozenset(SETTING_KEYS)

VALID_SETTINGS = "Valid settings:\n" + ", ".join(SETTING_KEYS)

COMMENT_PREFIX = "#"


class SettingEntry(NamedTuple):
    value: str
    line_num: int
    line: str


SettingsTable = Dict[str, SettingEntry]


def _physical_lines(text: str) -> List[str]:
    # str.splitlines also breaks on form feeds, \x85, \u2028 and friends.
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def tokenize_settings(text: str) -> SettingsTable:
    """Split config text into a table of recognized settings.

    Lines are split on newlines only, with a trailing carriage return dropped.
    Blank or whitespace-only lines and lines starting with ``#`` are skipped.
    Every other line must be ``key = value`` with a non-empty key and value
    around the first ``=``. Raises :class:`ParseError` on the first malformed, unknown or
    duplicate line.
    """
    table: SettingsTable = {}
    for num, line in enumerate(_physical_lines(text)):
        if not line.strip() or line.startswith(COMMENT_PREFIX):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            raise ParseError(
                ParseErrorKind.INVALID_LINE_FORMAT,
                num,
                line,
                "Expected a line of the form 'setting = value'.",
            )
        key = key.strip()
        value = value.strip()
        if not key:
            raise ParseError(
                ParseErrorKind.INVALID_LINE_FORMAT,
                num,
                line,
                "There must be a setting name on the left side of the equals sign.",
            )
        if not value:
            raise ParseError(
                ParseErrorKind.INVALID_LINE_FORMAT,
                num,
                line,
                "There must be a value on the right side of the equals sign.",
            )
        if key not in _KNOWN_KEYS:
            raise ParseError(ParseErrorKind.UNKNOWN_SETTING, num, line, VALID_SETTINGS)
        if key in table:
            first = table[key]
            raise ParseError(
                ParseErrorKind.DUPLICATE_SETTING,
                num,
                line,
                f"'{key}' was already set on line {first.line_num + 1}.",
            )
        table[key] = SettingEntry(value, num, line)
    return table
