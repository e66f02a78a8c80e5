from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from tiny.error.communicator import Communicator
from tiny.util import Span


# Python exceptions to differentiate the stage in which errors are thrown
class CompilerException(Exception):
    def __init__(self, message: str, error: Optional[CompilerError] = None) -> None:
        super().__init__(message)
        self.error = error


@dataclass
class CompilerError:
    program: str
    span: Span

    class_name: ClassVar[str] = "CompilerError"
    stage: ClassVar[type[CompilerException]] = CompilerException

    # Defined here so that the generated __init__ of every subclass calls the hook
    def __post_init__(self) -> None:
        pass

    def create_error(self, before: str = "", after: str = "") -> str:
        return Communicator.create_message(
            self.program, self.span, self.class_name, before, after
        )

    # Give the characters that caused the error to be thrown
    @property
    def error_chars(self) -> str:
        lines = self.program.splitlines()
        if not 0 < self.span.start_ln <= len(lines):
            return ""
        error_line = lines[self.span.start_ln - 1]
        return error_line[self.span.start_col : self.span.end_col]


class UnrecoverableError(CompilerError):
    # Raise the error as soon as it is created, the first error aborts the stage
    def __post_init__(self) -> None:
        Communicator.communicate(self)
