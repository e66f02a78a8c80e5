from dataclasses import dataclass

from tiny.error.error import CompilerException, UnrecoverableError


class ScannerException(CompilerException):
    pass


class ScannerError(UnrecoverableError):
    class_name = "ScannerError"
    stage = ScannerException


@dataclass
class UnexpectedCharacterError(ScannerError):
    char: str
    position: int

    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected character {self.char!r} at position {self.position} on {self.span.lines_str}."
        )


@dataclass
class UnterminatedCommentError(ScannerError):
    def __str__(self) -> str:
        return self.create_error(
            f"The comment opened on {self.span.lines_str} is never closed.",
            "Comments run from '{' up to and including the next '}'.",
        )


@dataclass
class UnmatchedCloseBraceError(ScannerError):
    def __str__(self) -> str:
        return self.create_error(
            f"Found '}}' without an opening '{{' on {self.span.lines_str}."
        )
