from __future__ import annotations

from dataclasses import dataclass, field

from tiny.type import Type
from tiny.util import Span


@dataclass(frozen=True)
class Token:
    text: str
    type: Type = field(repr=False)
    span: Span = field(repr=False, compare=False, default_factory=Span.default)
    offset: int = field(repr=False, compare=False, default=-1)

    @property
    def kind(self) -> Type:
        return self.type

    @property
    def literal(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text
