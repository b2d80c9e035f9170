"""Config file support for TUI Tetris.

The file is plain ``key = value`` text. :func:`parse_config` turns it into an
immutable :class:`GameConfig` or raises :class:`ParseError` for the first bad
line; :func:`serialize_config` writes a config back out.
"""

from .errors import ParseError, ParseErrorKind
from .model import DEFAULT_CONFIG, GameConfig
from .parser import assemble_config, parse_config
from .serializer import serialize_config
from .settings import SETTING_KEYS, SettingEntry, tokenize_settings
from .values import AnsiColor, Color, KeyBinding, Mode, RgbColor, SpecialKey

__all__ = [
    "ParseError",
    "ParseErrorKind",
    "DEFAULT_CONFIG",
    "GameConfig",
    "assemble_config",
    "parse_config",
    "serialize_config",
    "SETTING_KEYS",
    "SettingEntry",
    "tokenize_settings",
    "AnsiColor",
    "Color",
    "KeyBinding",
    "Mode",
    "RgbColor",
    "SpecialKey",
]
