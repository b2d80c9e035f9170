from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..game.pieces import TetrominoType
from .values import Color, KeyBinding, Mode, RgbColor, SpecialKey


@dataclass(frozen=True)
class GameConfig:
    """Typed game settings; field order is the canonical config file order."""

    fps: int = 60
    board_width: int = 10
    board_height: int = 20
    monochrome: Optional[Color] = None
    cascade: bool = False
    const_level: Optional[int] = None
    ghost_tetromino_character: Optional[str] = "□"
    ghost_tetromino_color: Optional[Color] = RgbColor(240, 240, 240)
    top_border_character: str = "═"
    left_border_character: str = "║"
    bottom_border_character: str = "═"
    right_border_character: str = "║"
    tl_corner_character: str = "╔"
    bl_corner_character: str = "╚"
    br_corner_character: str = "╝"
    tr_corner_character: str = "╗"
    border_color: Color = RgbColor(255, 255, 255)
    block_character: str = "■"
    block_size: int = 1
    mode: Mode = Mode.MODERN
    move_left: KeyBinding = SpecialKey.LEFT
    move_right: KeyBinding = SpecialKey.RIGHT
    rotate_clockwise: KeyBinding = SpecialKey.LSHIFT
    rotate_anticlockwise: KeyBinding = SpecialKey.UP
    soft_drop: KeyBinding = SpecialKey.DOWN
    hard_drop: Optional[KeyBinding] = " "
    hold: Optional[KeyBinding] = "c"
    background_color: Color = RgbColor(0, 0, 0)
    i_color: Color = RgbColor(0, 240, 240)
    j_color: Color = RgbColor(0, 0, 240)
    l_color: Color = RgbColor(240, 160, 0)
    s_color: Color = RgbColor(0, 240, 0)
    z_color: Color = RgbColor(240, 0, 0)
    t_color: Color = RgbColor(160, 0, 240)
    o_color: Color = RgbColor(240, 240, 0)

    def piece_color(self, kind: TetrominoType) -> Color:
        return getattr(self, f"{TetrominoType(kind).name.lower()}_color")


DEFAULT_CONFIG = GameConfig()
