from enum import Enum, auto
from typing import Iterator, List

from tiny.token import Token
from tiny.tree.visitor import NodeVisitor
from tiny.type import Type
from tiny.util import non_associative, operator_precedence

from tiny.tree.tree import (  # isort:skip
    AssignNode,
    IfNode,
    Node,
    NumberNode,
    Op2Node,
    ReadNode,
    RepeatNode,
    StmtSeqNode,
    VariableNode,
    WriteNode,
)

LEFT_ATTACHED_TOKENS = {
    Type.OPENBRACKET,  # (
}

RIGHT_ATTACHED_TOKENS = {
    Type.CLOSEDBRACKET,  # )
    Type.SEMICOLON,
}


class PrintingInfo(Enum):
    NEWLINE = auto()
    INDENT = auto()
    UNINDENT = auto()


INDENT = " " * 4

PrintingItem = Token | PrintingInfo | Node


def keyword(token_type: Type) -> Token:
    return Token(token_type.value, token_type)


class Printer(NodeVisitor):
    """Pretty-print a syntax tree back into TINY source code.

    Brackets are only placed where precedence or associativity requires them, so
    scanning and parsing the output gives back an equal tree.

    Every `visit_*` method expands a node into a flat list of Tokens, printing
    information and child nodes. `print` expands the child nodes with an explicit
    stack, so long operator chains do not exhaust the recursion limit.
    """

    def print(self, tree: Node) -> str:
        depth = 0
        lines = []
        line = ""
        last_token = None
        for token in self.tokens(tree):
            match token:
                case PrintingInfo.INDENT:
                    depth += 1
                case PrintingInfo.UNINDENT:
                    depth -= 1
                case PrintingInfo.NEWLINE:
                    lines.append(line)
                    line = ""
                case _:
                    if not line:
                        line = INDENT * depth
                    elif (
                        last_token.type not in LEFT_ATTACHED_TOKENS
                        and token.type not in RIGHT_ATTACHED_TOKENS
                    ):
                        line += " "
                    line += token.text
                    last_token = token
        lines.append(line)
        return "\n".join(lines).strip()

    def tokens(self, tree: Node) -> Iterator[Token | PrintingInfo]:
        pending: List[PrintingItem] = [tree]
        while pending:
            item = pending.pop()
            if isinstance(item, Node):
                pending.extend(reversed(self.visit(item)))
            else:
                yield item

    def visit_StmtSeqNode(self, node: StmtSeqNode) -> List[PrintingItem]:
        items = []
        for i, stmt in enumerate(node.stmts):
            if i:
                items += [keyword(Type.SEMICOLON), PrintingInfo.NEWLINE]
            items.append(stmt)
        return items

    def visit_IfNode(self, node: IfNode) -> List[PrintingItem]:
        items = [keyword(Type.IF), node.cond, keyword(Type.THEN), *self.block(node.body)]
        if node.else_body:
            items += [keyword(Type.ELSE), *self.block(node.else_body)]
        items.append(keyword(Type.END))
        return items

    def visit_RepeatNode(self, node: RepeatNode) -> List[PrintingItem]:
        return [
            keyword(Type.REPEAT),
            *self.block(node.body),
            keyword(Type.UNTIL),
            node.cond,
        ]

    def visit_AssignNode(self, node: AssignNode) -> List[PrintingItem]:
        return [node.id, keyword(Type.ASSIGN), node.exp]

    def visit_ReadNode(self, node: ReadNode) -> List[PrintingItem]:
        return [keyword(Type.READ), node.id]

    def visit_WriteNode(self, node: WriteNode) -> List[PrintingItem]:
        return [keyword(Type.WRITE), node.exp]

    def visit_Op2Node(self, node: Op2Node) -> List[PrintingItem]:
        return [
            *self.operand(node, node.left, right=False),
            node.operator,
            *self.operand(node, node.right, right=True),
        ]

    def visit_VariableNode(self, node: VariableNode) -> List[PrintingItem]:
        return [node.id]

    def visit_NumberNode(self, node: NumberNode) -> List[PrintingItem]:
        return [node.value]

    def block(self, body: StmtSeqNode) -> List[PrintingItem]:
        return [
            PrintingInfo.INDENT,
            PrintingInfo.NEWLINE,
            body,
            PrintingInfo.UNINDENT,
            PrintingInfo.NEWLINE,
        ]

    def operand(self, parent: Op2Node, child: Node, right: bool) -> List[PrintingItem]:
        if self.needs_brackets(parent, child, right):
            return [keyword(Type.OPENBRACKET), child, keyword(Type.CLOSEDBRACKET)]
        return [child]

    @staticmethod
    def needs_brackets(parent: Op2Node, child: Node, right: bool) -> bool:
        if not isinstance(child, Op2Node):
            return False
        parent_prec = operator_precedence[parent.operator.type]
        child_prec = operator_precedence[child.operator.type]
        if child_prec != parent_prec:
            return child_prec > parent_prec
        # Equal precedence: the grammar only chains to the left, and never for `<` and `=`
        return right or parent.operator.type in non_associative
