from dataclasses import dataclass
from typing import Optional, Tuple

from tiny.error.error import CompilerException, UnrecoverableError
from tiny.token import Token
from tiny.type import Type


class ParserException(CompilerException):
    pass


class ParserError(UnrecoverableError):
    class_name = "SyntaxError"
    stage = ParserException


@dataclass
class UnexpectedTokenError(ParserError):
    got: Optional[Token]
    position: int
    expected: Tuple[Type, ...]

    @property
    def found(self) -> str:
        if self.got is None:
            return "end of input"
        return repr(self.got.text)

    @property
    def expected_str(self) -> str:
        options = [kind.article_str() for kind in self.expected]
        if len(options) == 1:
            return options[0]
        return "one of " + ", ".join(options[:-1]) + " or " + options[-1]

    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected {self.found} at token {self.position} on {self.span.lines_str}.",
            f"Expected {self.expected_str}, but got {self.found} instead.",
        )


@dataclass
class NestingTooDeepError(ParserError):
    position: int

    def __str__(self) -> str:
        return self.create_error(
            f"Program nested too deeply at token {self.position} on {self.span.lines_str}.",
            "Reduce the nesting of brackets or statements.",
        )
