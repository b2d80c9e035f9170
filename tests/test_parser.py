import dataclasses
import unittest

from tui_tetris.config import (
    DEFAULT_CONFIG,
    AnsiColor,
    GameConfig,
    Mode,
    ParseError,
    ParseErrorKind,
    RgbColor,
    SETTING_KEYS,
    SpecialKey,
    parse_config,
)
from tui_tetris.game import TetrominoType


PIECE_COLOR_KEYS = ("i_color", "j_color", "l_color", "s_color", "z_color", "t_color", "o_color")


class TestParseConfig(unittest.TestCase):
    """
    Tests for assembling a GameConfig from text: defaults, per-field parsing and the
    cross-field rules (board size, then monochrome, then classic mode).
    """

    def test_empty_text_gives_defaults(self):
        self.assertEqual(parse_config(""), DEFAULT_CONFIG)
        self.assertEqual(parse_config("# only a comment\n\n"), DEFAULT_CONFIG)

    def test_default_values(self):
        cfg = DEFAULT_CONFIG
        self.assertEqual((cfg.fps, cfg.board_width, cfg.board_height), (60, 10, 20))
        self.assertIs(cfg.mode, Mode.MODERN)
        self.assertEqual(cfg.hard_drop, " ")
        self.assertEqual(cfg.hold, "c")
        self.assertIs(cfg.rotate_clockwise, SpecialKey.LSHIFT)
        self.assertIsNone(cfg.monochrome)
        self.assertIsNone(cfg.const_level)
        self.assertEqual(cfg.border_color, RgbColor(255, 255, 255))
        self.assertEqual(cfg.background_color, RgbColor(0, 0, 0))
        self.assertEqual(cfg.block_size, 1)

    def test_field_order_matches_setting_keys(self):
        self.assertEqual(tuple(f.name for f in dataclasses.fields(GameConfig)), SETTING_KEYS)

    def test_config_is_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.fps = 30

    def test_parses_fields(self):
        cfg = parse_config(
            "fps = 30\n"
            "board_width = 12\n"
            "cascade = t\n"
            "const_level = 5\n"
            "move_left = a\n"
            "hard_drop = none\n"
            "ghost_tetromino_character = NONE\n"
            "block_character = #\n"
            "i_color = ansi 51\n"
        )
        self.assertEqual(cfg.fps, 30)
        self.assertEqual(cfg.board_width, 12)
        self.assertIs(cfg.cascade, True)
        self.assertEqual(cfg.const_level, 5)
        self.assertEqual(cfg.move_left, "a")
        self.assertIsNone(cfg.hard_drop)
        self.assertIsNone(cfg.ghost_tetromino_character)
        self.assertEqual(cfg.block_character, "#")
        self.assertEqual(cfg.i_color, AnsiColor(51))
        self.assertEqual(cfg.piece_color(TetrominoType.I), AnsiColor(51))
        self.assertEqual(cfg.piece_color(TetrominoType.O), DEFAULT_CONFIG.o_color)

    def test_malformed_line(self):
        with self.assertRaises(ParseError) as ctx:
            parse_config("foo")
        self.assertEqual(ctx.exception.kind, ParseErrorKind.INVALID_LINE_FORMAT)

    def test_duplicate_fps(self):
        with self.assertRaises(ParseError) as ctx:
            parse_config("fps = 60\nfps = 30")
        self.assertEqual(ctx.exception.kind, ParseErrorKind.DUPLICATE_SETTING)
        self.assertEqual(ctx.exception.line_num, 1)

    def test_unknown_setting(self):
        with self.assertRaises(ParseError) as ctx:
            parse_config("not_a_setting = 1")
        self.assertEqual(ctx.exception.kind, ParseErrorKind.UNKNOWN_SETTING)
        self.assertIn("Valid settings", ctx.exception.correction)

    def test_out_of_range_values(self):
        for text in ("fps = 0", "board_height = 0", "block_size = 0", "const_level = 0"):
            with self.assertRaises(ParseError) as ctx:
                parse_config(text)
            self.assertEqual(ctx.exception.kind, ParseErrorKind.INVALID_VALUE, text)

    def test_unparsable_numbers(self):
        overflow = "fps = 99999999999999999999999999"
        for text in ("fps = fast", "fps = -5", "fps = 1.5", "const_level = one", overflow):
            with self.assertRaises(ParseError) as ctx:
                parse_config(text)
            self.assertEqual(ctx.exception.kind, ParseErrorKind.FAILED_PARSE_VALUE, text)

    def test_first_bad_setting_in_canonical_order_wins(self):
        with self.assertRaises(ParseError) as ctx:
            parse_config("o_color = rgb 1\nfps = 0")
        self.assertEqual(ctx.exception.line, "fps = 0")

    def test_narrow_board_blames_board_width(self):
        with self.assertRaises(ParseError) as ctx:
            parse_config("# narrow\nboard_width = 3\nblock_size = 1\n")
        self.assertEqual(ctx.exception.kind, ParseErrorKind.INVALID_VALUE)
        self.assertEqual(ctx.exception.line_num, 1)
        self.assertEqual(ctx.exception.line, "board_width = 3")

    def test_board_size_blame_order(self):
        # The tall enough height is set but only the width falls short.
        with self.assertRaises(ParseError) as ctx:
            parse_config("board_width = 3\nboard_height = 30\n")
        self.assertEqual(ctx.exception.line, "board_width = 3")
        with self.assertRaises(ParseError) as ctx:
            parse_config("board_width = 3\nboard_height = 3\n")
        self.assertEqual(ctx.exception.line, "board_height = 3")
        with self.assertRaises(ParseError) as ctx:
            parse_config("board_width = 7\nblock_size = 2\n")
        self.assertEqual(ctx.exception.line, "block_size = 2")
        with self.assertRaises(ParseError) as ctx:
            parse_config("block_size = 3\n")
        self.assertEqual(ctx.exception.line, "block_size = 3")

    def test_board_must_fit_longest_piece(self):
        cfg = parse_config("board_width = 4\nboard_height = 4\n")
        self.assertEqual((cfg.board_width, cfg.board_height), (4, 4))
        cfg = parse_config("block_size = 2\nboard_width = 8\n")
        self.assertEqual(cfg.block_size, 2)
        with self.assertRaises(ParseError):
            parse_config("block_size = 2\nboard_width = 7\n")

    def test_monochrome_overrides_piece_colors_only(self):
        cfg = parse_config("monochrome = rgb 10,10,10\nborder_color = ansi 7\ni_color = rgb 1,2,3\n")
        for key in PIECE_COLOR_KEYS:
            self.assertEqual(getattr(cfg, key), RgbColor(10, 10, 10), key)
        self.assertEqual(cfg.monochrome, RgbColor(10, 10, 10))
        self.assertEqual(cfg.border_color, AnsiColor(7))
        self.assertEqual(cfg.background_color, DEFAULT_CONFIG.background_color)

    def test_classic_mode_strips_modern_features(self):
        cfg = parse_config("mode = classic\nhold = v\nhard_drop = x\n")
        self.assertIs(cfg.mode, Mode.CLASSIC)
        self.assertIsNone(cfg.hold)
        self.assertIsNone(cfg.hard_drop)
        self.assertIsNone(cfg.ghost_tetromino_character)
        self.assertIsNone(cfg.ghost_tetromino_color)

    def test_monochrome_and_classic_are_exclusive(self):
        cfg = parse_config("mode = c\nmonochrome = ansi 15\nhold = v\n")
        self.assertIs(cfg.mode, Mode.CLASSIC)
        self.assertEqual(cfg.hold, "v")
        self.assertEqual(cfg.t_color, AnsiColor(15))

    def test_board_size_checked_before_other_rules(self):
        with self.assertRaises(ParseError) as ctx:
            parse_config("monochrome = ansi 1\nmode = classic\nboard_height = 2\n")
        self.assertEqual(ctx.exception.line, "board_height = 2")

    def test_field_error_reported_before_cross_field_rules(self):
        with self.assertRaises(ParseError) as ctx:
            parse_config("board_width = 2\nhold = enter\n")
        self.assertEqual(ctx.exception.line, "hold = enter")


class TestUndersizedDefaults(unittest.TestCase):

    def test_defaults_alone_are_an_internal_error(self):
        from unittest import mock

        broken = GameConfig(board_width=2)
        with mock.patch("tui_tetris.config.parser.DEFAULT_CONFIG", broken):
            with self.assertRaises(RuntimeError):
                parse_config("fps = 30")


if __name__ == '__main__':
    unittest.main()
