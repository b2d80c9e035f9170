from __future__ import annotations

from enum import IntEnum
from typing import Dict

import numpy as np


class TetrominoType(IntEnum):
    """Piece kinds in canonical order; the value is the symbol's rank."""

    I = 0
    J = 1
    L = 2
    S = 3
    Z = 4
    T = 5
    O = 6


Shape = np.ndarray


BASE_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: np.array([[1, 1, 1, 1]], dtype=np.int8),
    TetrominoType.J: np.array([[1, 0, 0], [1, 1, 1]], dtype=np.int8),
    TetrominoType.L: np.array([[0, 0, 1], [1, 1, 1]], dtype=np.int8),
    TetrominoType.S: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.int8),
    TetrominoType.Z: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.int8),
    TetrominoType.T: np.array([[0, 1, 0], [1, 1, 1]], dtype=np.int8),
    TetrominoType.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
}


def longest_piece_extent() -> int:
    """Largest span, in blocks, of any piece in any rotation."""
    # Rotation swaps the axes, so the longest side of the bounding box covers every rotation.
    return int(max(max(shape.shape) for shape in BASE_SHAPES.values()))
