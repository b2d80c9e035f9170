import unittest

from tui_tetris.game import SEQUENCE_COUNT, TetrominoType, decode_sequence_number, encode_sequence


class TestDecodeSequenceNumber(unittest.TestCase):
    """
    Exhaustive checks of the index -> bag ordering decoder over all 5040 inputs.
    """

    def test_every_sequence_holds_each_piece_once(self):
        for n in range(SEQUENCE_COUNT):
            sequence = decode_sequence_number(n)
            self.assertEqual(len(sequence), 7)
            self.assertEqual(set(sequence), set(TetrominoType), f"duplicate piece for sn {n}: {sequence}")

    def test_no_duplicate_sequences(self):
        sequences = {decode_sequence_number(n) for n in range(SEQUENCE_COUNT)}
        self.assertEqual(len(sequences), SEQUENCE_COUNT)

    def test_encode_inverts_decode(self):
        for n in range(SEQUENCE_COUNT):
            self.assertEqual(encode_sequence(decode_sequence_number(n)), n)

    def test_deterministic(self):
        self.assertEqual(decode_sequence_number(1234), decode_sequence_number(1234))

    def test_boundaries(self):
        T = TetrominoType
        self.assertEqual(decode_sequence_number(0), (T.I, T.J, T.L, T.S, T.Z, T.T, T.O))
        self.assertEqual(decode_sequence_number(1), (T.I, T.J, T.L, T.S, T.Z, T.O, T.T))
        self.assertEqual(decode_sequence_number(5039), (T.O, T.T, T.Z, T.S, T.L, T.J, T.I))
        # First digit ranges: 720 indices per leading piece.
        self.assertEqual(decode_sequence_number(719)[0], T.I)
        self.assertEqual(decode_sequence_number(720)[0], T.J)
        self.assertEqual(decode_sequence_number(4320)[0], T.O)
        # Second digit picks among the unused pieces: 720 + 120 -> J first, then L.
        self.assertEqual(decode_sequence_number(840)[:2], (T.J, T.L))

    def test_rejects_out_of_range(self):
        for bad in (-1, SEQUENCE_COUNT, 10_000):
            with self.assertRaises(ValueError):
                decode_sequence_number(bad)

    def test_rejects_non_integers(self):
        for bad in (1.0, "3", True):
            with self.assertRaises(TypeError):
                decode_sequence_number(bad)

    def test_encode_rejects_repeated_pieces(self):
        T = TetrominoType
        with self.assertRaises(ValueError):
            encode_sequence((T.I, T.I, T.L, T.S, T.Z, T.T, T.O))
        with self.assertRaises(ValueError):
            encode_sequence((T.I, T.J))


if __name__ == '__main__':
    unittest.main()
