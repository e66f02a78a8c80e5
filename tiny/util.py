from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import List, Tuple

from tiny.type import Type


@dataclass
class Span:
    ln: Tuple[int, int]
    col: Tuple[int, int]

    @property
    def start_ln(self) -> int:
        return self.ln[0]

    @property
    def end_ln(self) -> int:
        return self.ln[1]

    @property
    def start_col(self) -> int:
        return self.col[0]

    @property
    def end_col(self) -> int:
        return self.col[1]

    @property
    def multiline(self) -> bool:
        return self.start_ln != self.end_ln

    @property
    def lines_str(self) -> str:
        if self.multiline:
            return f"lines [{self.start_ln}-{self.end_ln}]"
        return f"line [{self.start_ln}]"

    @classmethod
    def default(cls):
        return cls(-1, (0, -1))

    def __init__(self, line_no: int | Tuple[int, int], span: Tuple[int, int]) -> None:
        if isinstance(line_no, int):
            self.ln = (line_no, line_no)
        else:
            self.ln = line_no
        self.col = span

    def __and__(self, other: Span) -> Span:
        # Determine the correct columns based on the starting line
        if self.start_ln < other.start_ln:
            col = (self.start_col, other.end_col)
        elif self.start_ln > other.start_ln:
            col = (other.start_col, self.end_col)
        else:
            col = (
                min(self.start_col, other.start_col),
                max(self.end_col, other.end_col),
            )

        return Span(
            line_no=(
                min(self.start_ln, other.start_ln),
                max(self.end_ln, other.end_ln),
            ),
            span=col,
        )


class LineIndex:
    """Translate character offsets of a program into line numbers and columns.

    Lines are split the same way `str.splitlines` splits them, so spans computed here
    line up with the lines that `Communicator.create_message` displays.
    """

    def __init__(self, program: str) -> None:
        self.line_starts: List[int] = [0]
        for line in program.splitlines(keepends=True):
            self.line_starts.append(self.line_starts[-1] + len(line))

    def span(self, start: int, end: int) -> Span:
        """Give the Span of `program[start:end]`, assuming it does not cross a line break."""
        line_no = bisect_right(self.line_starts, start)
        # An offset at the very end of the program belongs to the last line
        line_no = min(line_no, max(1, len(self.line_starts) - 1))
        line_start = self.line_starts[line_no - 1]
        return Span(line_no, (start - line_start, end - line_start))


# Only binary operators exist, lower numbers bind tighter
operator_precedence = {
    Type.LESSTHAN: 9,
    Type.EQUAL: 9,
    Type.PLUS: 6,
    Type.MINUS: 6,
    Type.MULT: 5,
    Type.DIV: 5,
}

# `exp` allows at most one relational operator, so these never chain without brackets
non_associative = (Type.LESSTHAN, Type.EQUAL)


class Colors:
    RED = "\033[31m"
    ENDC = "\033[m"
