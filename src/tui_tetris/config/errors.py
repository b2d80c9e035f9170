from __future__ import annotations

from enum import Enum
from typing import Optional


class ParseErrorKind(Enum):
    INVALID_LINE_FORMAT = "Invalid line format"
    UNKNOWN_SETTING = "Unknown setting"
    INVALID_VALUE = "Invalid value"
    DUPLICATE_SETTING = "Duplicate setting"
    FAILED_PARSE_VALUE = "Failed to parse value"
    MISSING_VALUE = "Missing value"

    def __str__(self) -> str:
        return self.value


class ParseError(Exception):
    """A config file problem tied to a single line.

    ``line_num`` is 0-based; the rendered message shows it 1-based.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        line_num: int,
        line: str,
        correction: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.line_num = line_num
        self.line = str(line)
        self.correction = correction
        super().__init__(self.kind, self.line_num, self.line, self.correction)

    def __str__(self) -> str:
        text = f"Error on line {self.line_num + 1}: {self.line}\n{self.kind}"
        if self.correction is not None:
            text += f"\n{self.correction}"
        return text
