"""Render a :class:`GameConfig` back into config file text.

The output lists every setting once, in canonical order, in the same grammar
the parser reads, so ``parse_config(serialize_config(c)) == c`` for any
config the parser can produce.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from .model import GameConfig
from .values import NONE_SENTINEL, SPACE_NAME, SpecialKey


def format_key_binding(binding: Any) -> str:
    if isinstance(binding, SpecialKey):
        return binding.value
    if binding == " ":
        return SPACE_NAME
    return binding


def format_value(value: Any) -> str:
    if value is None:
        return NONE_SENTINEL
    if isinstance(value, bool):
        return "t" if value else "f"
    if isinstance(value, SpecialKey) or value == " ":
        return format_key_binding(value)
    # Mode, colors, ints and single characters all render through str().
    return str(value)


def serialize_config(config: GameConfig) -> str:
    lines = [
        f"{field.name} = {format_value(getattr(config, field.name))}"
        for field in dataclasses.fields(config)
    ]
    return "\n".join(lines) + "\n"
