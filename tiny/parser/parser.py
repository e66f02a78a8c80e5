from typing import List, Optional, Tuple

from tiny.error.parser_error import NestingTooDeepError, UnexpectedTokenError
from tiny.token import Token
from tiny.type import Type
from tiny.util import LineIndex, Span

from tiny.tree.tree import (  # isort:skip
    AssignNode,
    ExpNode,
    IfNode,
    Node,
    NumberNode,
    Op2Node,
    ReadNode,
    RepeatNode,
    StmtNode,
    StmtSeqNode,
    VariableNode,
    WriteNode,
)

STMT_START = (Type.IF, Type.REPEAT, Type.IDENTIFIER, Type.READ, Type.WRITE)
FACTOR_START = (Type.OPENBRACKET, Type.IDENTIFIER, Type.NUMBER)

RELATIONAL_OPERATORS = (Type.LESSTHAN, Type.EQUAL)
ADDITIVE_OPERATORS = (Type.PLUS, Type.MINUS)
MULTIPLICATIVE_OPERATORS = (Type.MULT, Type.DIV)


class Parser:
    def __init__(self, program: str) -> None:
        self.og_program = program
        self.tokens: List[Token] = []
        self.i = 0

    def parse(self, tokens: List[Token], require_eof: bool = False) -> StmtSeqNode:
        """Given a list of Tokens from the scanner, apply the TINY grammar
        to produce a Syntax Tree.

        Parsing aborts with a ParserException on the first token that does not fit the
        grammar, or when the program is nested deeper than the recursion limit. Tokens that remain after the outermost statement sequence are only
        rejected if `require_eof` is set.

        Args:
            tokens (List[Token]): A list of tokens, produced by `Scanner(program).scan()`
            require_eof (bool): Whether all tokens must be consumed. Defaults to False.

        Returns:
            StmtSeqNode: The root of the Syntax Tree.
        """
        self.tokens = tokens
        self.i = 0

        try:
            tree = self.parse_stmt_seq()
        except RecursionError:
            tree = None
        if tree is None:
            # Raised outside of the except block, so the RecursionError is not chained
            NestingTooDeepError(self.og_program, self.error_span(), self.i)
        if require_eof and self.current is not None:
            # Only a `;` could have continued the outermost sequence
            self.error((Type.SEMICOLON,))
        return tree

    @property
    def current(self) -> Optional[Token]:
        if self.i < len(self.tokens):
            return self.tokens[self.i]
        return None

    @property
    def current_type(self) -> Optional[Type]:
        return self.current.type if self.current is not None else None

    def check(self, *token_types: Type) -> bool:
        return self.current_type in token_types

    def match(self, token_type: Type) -> Token:
        if not self.check(token_type):
            self.error((token_type,))
        token = self.current
        self.i += 1
        return token

    def error(self, expected: Tuple[Type, ...]) -> None:
        UnexpectedTokenError(
            self.og_program, self.error_span(), self.current, self.i, expected
        )

    def error_span(self) -> Span:
        if self.current is not None:
            return self.current.span
        # At the end of input, point directly after the final token
        if self.tokens and self.tokens[-1].offset >= 0:
            end = self.tokens[-1].offset + len(self.tokens[-1].text)
            return LineIndex(self.og_program).span(end, end)
        if self.tokens:
            last = self.tokens[-1].span
            return Span(last.end_ln, (last.end_col, last.end_col))
        return Span(1, (0, 0))

    @staticmethod
    def span_of(first: Token | Node, last: Token | Node) -> Optional[Span]:
        if first.span is None or last.span is None:
            return None
        return first.span & last.span

    def parse_stmt_seq(self) -> StmtSeqNode:
        stmts = [self.parse_stmt()]
        while self.check(Type.SEMICOLON):
            self.match(Type.SEMICOLON)
            stmts.append(self.parse_stmt())
        return StmtSeqNode(stmts, span=self.span_of(stmts[0], stmts[-1]))

    def parse_stmt(self) -> StmtNode:
        match self.current_type:
            case Type.IF:
                return self.parse_if_stmt()
            case Type.REPEAT:
                return self.parse_repeat_stmt()
            case Type.IDENTIFIER:
                return self.parse_assign_stmt()
            case Type.READ:
                return self.parse_read_stmt()
            case Type.WRITE:
                return self.parse_write_stmt()
        self.error(STMT_START)

    def parse_if_stmt(self) -> IfNode:
        if_token = self.match(Type.IF)
        cond = self.parse_exp()
        self.match(Type.THEN)
        body = self.parse_stmt_seq()
        else_body = None
        if self.check(Type.ELSE):
            self.match(Type.ELSE)
            else_body = self.parse_stmt_seq()
        end_token = self.match(Type.END)
        return IfNode(cond, body, else_body, span=self.span_of(if_token, end_token))

    def parse_repeat_stmt(self) -> RepeatNode:
        repeat_token = self.match(Type.REPEAT)
        body = self.parse_stmt_seq()
        self.match(Type.UNTIL)
        cond = self.parse_exp()
        return RepeatNode(body, cond, span=self.span_of(repeat_token, cond))

    def parse_assign_stmt(self) -> AssignNode:
        id_token = self.match(Type.IDENTIFIER)
        self.match(Type.ASSIGN)
        exp = self.parse_exp()
        return AssignNode(id_token, exp, span=self.span_of(id_token, exp))

    def parse_read_stmt(self) -> ReadNode:
        read_token = self.match(Type.READ)
        id_token = self.match(Type.IDENTIFIER)
        return ReadNode(id_token, span=self.span_of(read_token, id_token))

    def parse_write_stmt(self) -> WriteNode:
        write_token = self.match(Type.WRITE)
        exp = self.parse_exp()
        return WriteNode(exp, span=self.span_of(write_token, exp))

    def parse_exp(self) -> ExpNode:
        left = self.parse_simple_exp()
        # At most one relational operator, `a < b < c` is not an expression
        if self.check(*RELATIONAL_OPERATORS):
            operator = self.match(self.current.type)
            right = self.parse_simple_exp()
            left = Op2Node(left, operator, right, span=self.span_of(left, right))
        return left

    def parse_simple_exp(self) -> ExpNode:
        return self.parse_binary(self.parse_term, ADDITIVE_OPERATORS)

    def parse_term(self) -> ExpNode:
        return self.parse_binary(self.parse_factor, MULTIPLICATIVE_OPERATORS)

    def parse_binary(self, parse_operand, operators: Tuple[Type, ...]) -> ExpNode:
        """Parse `operand (operator operand)*` into a left-nested tree, such that
        `a - b - c` becomes `(a - b) - c`.
        """
        left = parse_operand()
        while self.check(*operators):
            operator = self.match(self.current.type)
            right = parse_operand()
            left = Op2Node(left, operator, right, span=self.span_of(left, right))
        return left

    def parse_factor(self) -> ExpNode:
        match self.current_type:
            case Type.OPENBRACKET:
                self.match(Type.OPENBRACKET)
                exp = self.parse_exp()
                self.match(Type.CLOSEDBRACKET)
                return exp
            case Type.IDENTIFIER:
                id_token = self.match(Type.IDENTIFIER)
                return VariableNode(id_token, span=id_token.span)
            case Type.NUMBER:
                number_token = self.match(Type.NUMBER)
                return NumberNode(number_token, span=number_token.span)
        self.error(FACTOR_START)
