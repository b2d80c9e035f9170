"""Bijection between bag indices and orderings of the seven tetrominoes.

An index in ``[0, 5040)`` is read as a number in the factorial number system
(a Lehmer code). Its leading digit (index // 6!) picks one of the seven pieces,
the next digit (remainder // 5!) picks among the six still unused, and so on
down to a binary choice; the last piece is whatever remains.
"""

from __future__ import annotations

from math import factorial
from numbers import Integral
from typing import List, Sequence, Tuple

from .pieces import TetrominoType


PIECE_COUNT = len(TetrominoType)
SEQUENCE_COUNT = factorial(PIECE_COUNT)  # 5040

# Place values of the Lehmer digits: 720, 120, 24, 6, 2, 1.
_PLACE_VALUES: Tuple[int, ...] = tuple(factorial(n) for n in range(PIECE_COUNT - 1, 0, -1))

PieceSequence = Tuple[TetrominoType, ...]


def _check_index(sequence_number: int) -> None:
    if isinstance(sequence_number, bool) or not isinstance(sequence_number, Integral):
        raise TypeError(f"sequence number must be an int, got {type(sequence_number).__name__}")
    if not 0 <= sequence_number < SEQUENCE_COUNT:
        raise ValueError(
            f"sequence number {sequence_number} is outside [0, {SEQUENCE_COUNT})"
        )


def decode_sequence_number(sequence_number: int) -> PieceSequence:
    """Return the piece ordering identified by ``sequence_number``.

    Raises ``ValueError`` for indices outside ``[0, 5040)`` and ``TypeError`` for
    anything that is not an integer (``bool`` included).
    """
    _check_index(sequence_number)
    unused: List[TetrominoType] = list(TetrominoType)
    result: List[TetrominoType] = []
    remainder = int(sequence_number)
    for place_value in _PLACE_VALUES:
        digit, remainder = divmod(remainder, place_value)
        result.append(unused.pop(digit))
    # Six digits consume six pieces; the seventh is determined by elimination.
    result.append(unused.pop())
    return tuple(result)


def encode_sequence(pieces: Sequence[TetrominoType]) -> int:
    """Inverse of :func:`decode_sequence_number`."""
    kinds = [TetrominoType(p) for p in pieces]
    if len(kinds) != PIECE_COUNT or len(set(kinds)) != PIECE_COUNT:
        raise ValueError(f"expected each of the {PIECE_COUNT} pieces exactly once, got {kinds}")
    unused: List[TetrominoType] = list(TetrominoType)
    index = 0
    for kind, place_value in zip(kinds, _PLACE_VALUES):
        digit = unused.index(kind)
        unused.pop(digit)
        index += digit * place_value
    return index
