from __future__ import annotations

import random
from collections import deque
from typing import Deque, List, Optional

from .pieces import TetrominoType
from .sequence import SEQUENCE_COUNT, PieceSequence, decode_sequence_number


class PieceBag:
    """7-bag randomizer.

    Each bag is one uniformly drawn sequence index decoded into an ordering of
    all seven pieces, so every piece appears exactly once per seven draws. No
    shuffle state is kept beyond the pieces not yet handed out.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random(seed)
        self._queue: Deque[TetrominoType] = deque()
        self.bags_drawn = 0

    def _draw_bag(self) -> PieceSequence:
        sequence = decode_sequence_number(self.rng.randrange(SEQUENCE_COUNT))
        self._queue.extend(sequence)
        self.bags_drawn += 1
        return sequence

    def next_piece(self) -> TetrominoType:
        if not self._queue:
            self._draw_bag()
        return self._queue.popleft()

    def preview(self, count: int) -> List[TetrominoType]:
        """Upcoming pieces without consuming them; draws further bags as needed."""
        if count < 0:
            raise ValueError("preview count must be non-negative")
        while len(self._queue) < count:
            self._draw_bag()
        return list(self._queue)[:count]

    def __iter__(self) -> "PieceBag":
        return self

    def __next__(self) -> TetrominoType:
        return self.next_piece()
