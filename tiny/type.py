from enum import Enum
from types import MappingProxyType


class Type(Enum):
    SEMICOLON = ";"
    IF = "if"
    THEN = "then"
    ELSE = "else"
    END = "end"
    REPEAT = "repeat"
    UNTIL = "until"
    IDENTIFIER = "id"
    ASSIGN = ":="
    READ = "read"
    WRITE = "write"
    LESSTHAN = "<"
    EQUAL = "="
    PLUS = "+"
    MINUS = "-"
    MULT = "*"
    DIV = "/"
    OPENBRACKET = "("
    CLOSEDBRACKET = ")"
    NUMBER = "num"

    def to_type(type_str: str):
        return Type[type_str]

    def __str__(self) -> str:
        match self:
            case Type.IDENTIFIER:
                return "identifier"
            case Type.NUMBER:
                return "number"
        return repr(self.value)

    def article_str(self) -> str:
        match self:
            case Type.IDENTIFIER | Type.IF | Type.ELSE | Type.END | Type.UNTIL:
                return f"an {self}"
            case _:
                return f"a {self}"


KEYWORDS = MappingProxyType(
    {
        "if": Type.IF,
        "then": Type.THEN,
        "else": Type.ELSE,
        "end": Type.END,
        "repeat": Type.REPEAT,
        "until": Type.UNTIL,
        "read": Type.READ,
        "write": Type.WRITE,
    }
)

SYMBOLS = MappingProxyType(
    {
        ";": Type.SEMICOLON,
        ":=": Type.ASSIGN,
        "<": Type.LESSTHAN,
        "=": Type.EQUAL,
        "+": Type.PLUS,
        "-": Type.MINUS,
        "*": Type.MULT,
        "/": Type.DIV,
        "(": Type.OPENBRACKET,
        ")": Type.CLOSEDBRACKET,
    }
)
