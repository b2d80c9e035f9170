"""Assemble a :class:`GameConfig` from config file text.

Each setting is looked up in the tokenized table and parsed with its type's
parser, falling back to the value in ``DEFAULT_CONFIG`` when absent. Then the
cross-field rules run, in order, and at most one of them applies:

1. the board must fit the longest piece at the configured block size, and the
   error points at an explicit block_size, board_height or board_width line
   (in that order of preference) that causes the shortfall;
2. a monochrome color replaces all seven piece colors;
3. otherwise classic mode drops hard drop, hold and the ghost piece.

The first error anywhere aborts the parse.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, Dict, Optional

from ..game.pieces import longest_piece_extent
from .errors import ParseError, ParseErrorKind
from .model import DEFAULT_CONFIG, GameConfig
from .settings import SETTING_KEYS, SettingEntry, SettingsTable, tokenize_settings
from .values import (
    Mode,
    ValueParser,
    lookup,
    lookup_optional,
    lookup_range,
    parse_bool,
    parse_char,
    parse_color,
    parse_key_binding,
    parse_mode,
)


logger = logging.getLogger(__name__)

FieldReader = Callable[[SettingsTable, str], Any]

GLYPH_KEYS = (
    "top_border_character",
    "left_border_character",
    "bottom_border_character",
    "right_border_character",
    "tl_corner_character",
    "bl_corner_character",
    "br_corner_character",
    "tr_corner_character",
    "block_character",
)

BINDING_KEYS = ("move_left", "move_right", "rotate_clockwise", "rotate_anticlockwise", "soft_drop")
OPTIONAL_BINDING_KEYS = ("hard_drop", "hold")

PIECE_COLOR_KEYS = ("i_color", "j_color", "l_color", "s_color", "z_color", "t_color", "o_color")
COLOR_KEYS = ("border_color", "background_color") + PIECE_COLOR_KEYS

# Settings that can be blamed for an undersized board, in order of preference.
_BOARD_SIZE_BLAME_ORDER = ("block_size", "board_height", "board_width")


def _default(key: str) -> Any:
    return getattr(DEFAULT_CONFIG, key)


def _positive(label: str, optional: bool = False) -> FieldReader:
    def read(table: SettingsTable, key: str) -> Any:
        return lookup_range(
            table,
            key,
            _default(key),
            1,
            f"Failed to parse {label} value.",
            f"{label[0].upper()}{label[1:]} value is not greater than or equal to 1.",
            optional=optional,
        )

    return read


def _plain(parser: ValueParser) -> FieldReader:
    return lambda table, key: lookup(table, key, _default(key), parser)


def _optional(parser: ValueParser) -> FieldReader:
    return lambda table, key: lookup_optional(table, key, _default(key), parser)


_FIELD_READERS: Dict[str, FieldReader] = {
    "fps": _positive("FPS"),
    "board_width": _positive("board width"),
    "board_height": _positive("board height"),
    "block_size": _positive("block size"),
    "const_level": _positive("constant level", optional=True),
    "mode": _plain(parse_mode),
    "cascade": _plain(parse_bool),
    "monochrome": _optional(parse_color),
    "ghost_tetromino_character": _optional(parse_char),
    "ghost_tetromino_color": _optional(parse_color),
    **dict.fromkeys(BINDING_KEYS, _plain(parse_key_binding)),
    **dict.fromkeys(OPTIONAL_BINDING_KEYS, _optional(parse_key_binding)),
    **dict.fromkeys(GLYPH_KEYS, _plain(parse_char)),
    **dict.fromkeys(COLOR_KEYS, _plain(parse_color)),
}


def _parse_fields(table: SettingsTable) -> Dict[str, Any]:
    # The reported error is the first bad setting in SETTING_KEYS order, not file order.
    return {key: _FIELD_READERS[key](table, key) for key in SETTING_KEYS}


def _board_size_culprit(
    table: SettingsTable, fields: Dict[str, Any], minimum: int
) -> Optional[SettingEntry]:
    explicit = [key for key in _BOARD_SIZE_BLAME_ORDER if key in table]
    for key in explicit:
        if key == "block_size":
            # A block size of 1 cannot be lowered, so it is never the cause.
            if fields[key] > 1:
                return table[key]
        elif fields[key] < minimum:
            return table[key]
    return table[explicit[0]] if explicit else None


def _check_board_size(table: SettingsTable, fields: Dict[str, Any]) -> None:
    minimum = longest_piece_extent() * fields["block_size"]
    if fields["board_width"] >= minimum and fields["board_height"] >= minimum:
        return
    entry = _board_size_culprit(table, fields, minimum)
    if entry is None:
        raise RuntimeError(
            f"default board {fields['board_width']}x{fields['board_height']} cannot fit pieces "
            f"at block size {fields['block_size']}"
        )
    raise ParseError(
        ParseErrorKind.INVALID_VALUE,
        entry.line_num,
        entry.line,
        f"Board width and height must be at least {minimum} "
        f"({longest_piece_extent()} times the block size) to fit every piece.",
    )


def assemble_config(table: SettingsTable) -> GameConfig:
    """Build a config from an already tokenized settings table."""
    fields = _parse_fields(table)
    _check_board_size(table, fields)
    monochrome = fields["monochrome"]
    if monochrome is not None:
        logger.info("Monochrome color %s overrides all piece colors", monochrome)
        for key in PIECE_COLOR_KEYS:
            fields[key] = monochrome
    elif fields["mode"] is Mode.CLASSIC:
        logger.info("Classic mode: disabling hard drop, hold and ghost piece")
        fields.update(
            hard_drop=None,
            hold=None,
            ghost_tetromino_character=None,
            ghost_tetromino_color=None,
        )
    return GameConfig(**fields)


def parse_config(text: str) -> GameConfig:
    """Parse config file text into a :class:`GameConfig`.

    Raises :class:`ParseError` for the first invalid line.
    """
    table = tokenize_settings(text)
    logger.debug("Read %d of %d settings", len(table), len(dataclasses.fields(GameConfig)))
    return assemble_config(table)
