"""Piece model for TUI Tetris.

Exports:
- TetrominoType: Enum of the seven piece kinds in canonical order
- BASE_SHAPES: Block layout of each piece
- decode_sequence_number / encode_sequence: Index <-> bag ordering bijection
- PieceBag: 7-bag randomizer built on the decoder
"""

from .pieces import BASE_SHAPES, TetrominoType, longest_piece_extent
from .sequence import SEQUENCE_COUNT, decode_sequence_number, encode_sequence
from .bag import PieceBag

__all__ = [
    "BASE_SHAPES",
    "TetrominoType",
    "longest_piece_extent",
    "SEQUENCE_COUNT",
    "decode_sequence_number",
    "encode_sequence",
    "PieceBag",
]
