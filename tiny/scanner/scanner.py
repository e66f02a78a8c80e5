import re
from typing import List, Tuple

from tiny.token import Token
from tiny.type import KEYWORDS, Type
from tiny.util import LineIndex

from tiny.error.scanner_error import (  # isort:skip
    UnexpectedCharacterError,
    UnmatchedCloseBraceError,
    UnterminatedCommentError,
)


class Scanner:
    def __init__(self, program: str) -> None:
        self.og_program = program
        self.lines = LineIndex(program)

        self.pattern = re.compile(
            r"""
                (?P<COMMENT>\{[^}]*\})| # Comments do not nest, the first } closes
                (?P<COMMENT_OPEN>\{)| # Only matches if no } follows
                (?P<COMMENT_CLOSE>\})|
                (?P<ASSIGN>\:\=)|
                (?P<SEMICOLON>\;)|
                (?P<LESSTHAN>\<)|
                (?P<EQUAL>\=)|
                (?P<PLUS>\+)|
                (?P<MINUS>\-)|
                (?P<MULT>\*)|
                (?P<DIV>\/)|
                (?P<OPENBRACKET>\()|
                (?P<CLOSEDBRACKET>\))|
                (?P<WORD>[a-zA-Z]+)| # Keyword or identifier
                (?P<NUMBER>[0-9]+)|
                (?P<SPACE>[\ \t\r\n\f\v]+)|
                (?P<ERROR>.)
            """,
            flags=re.X | re.S,
        )

    def scan(self) -> List[Token]:
        """Extract the list of tokens from the program passed to `Scanner(program)`.

        Scanning stops at the first illegal character or malformed comment, by raising
        a ScannerException that holds the corresponding ScannerError.

        Returns:
            List[Token]: A list of Token instances, in the order they occur in the program.
        """
        tokens = []
        for match in self.pattern.finditer(self.og_program):
            kind = match.lastgroup
            if kind in ("SPACE", "COMMENT"):
                continue

            start, end = match.span()
            span = self.lines.span(start, end)
            match kind:
                case "COMMENT_OPEN":
                    UnterminatedCommentError(self.og_program, span)
                case "COMMENT_CLOSE":
                    UnmatchedCloseBraceError(self.og_program, span)
                case "ERROR":
                    UnexpectedCharacterError(self.og_program, span, match[0], start)
                case "WORD":
                    token_type = KEYWORDS.get(match[0], Type.IDENTIFIER)
                    tokens.append(Token(match[0], token_type, span, start))
                case "NUMBER":
                    tokens.append(Token(match[0], Type.NUMBER, span, start))
                case _:
                    tokens.append(Token(match[0], Type.to_type(kind), span, start))
        return tokens


def token_table(tokens: List[Token]) -> List[Tuple[str, str]]:
    """Give a (kind, literal) row per token, e.g. for displaying the scanner output."""
    return [(token.type.name, token.text) for token in tokens]
