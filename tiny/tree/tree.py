from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import ClassVar, Iterator, List, Optional, Tuple

from tiny.token import Token
from tiny.util import Span


class NodeKind(Enum):
    STMT_SEQ = "stmt_seq"
    IF = "if_stmt"
    REPEAT = "repeat_stmt"
    ASSIGN = "assign_stmt"
    READ = "read_stmt"
    WRITE = "write_stmt"
    OP = "op"
    ID = "id"
    CONST = "const"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class Node:
    span: Span = field(repr=False, kw_only=True, compare=False, default=None)

    kind: ClassVar[NodeKind]

    def __str__(self) -> str:
        from tiny.tree.printer import Printer

        printer = Printer()
        return printer.print(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented

        # Operator chains can be thousands of nodes deep, so compare without recursion
        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left.__class__ is not right.__class__:
                return False
            for (_name, left_value), (_name, right_value) in zip(
                left.iter_fields(), right.iter_fields()
            ):
                if isinstance(left_value, list) and isinstance(right_value, list):
                    if len(left_value) != len(right_value):
                        return False
                    pairs = zip(left_value, right_value)
                else:
                    pairs = [(left_value, right_value)]
                for left_item, right_item in pairs:
                    if isinstance(left_item, Node) and isinstance(right_item, Node):
                        pending.append((left_item, right_item))
                    elif left_item != right_item:
                        return False
        return True

    def __contains__(self, element: Node) -> bool:
        return any(node == element for node in self.walk())

    def walk(self) -> Iterator[Node]:
        """Yield this node and all of its descendants in source order (pre-order)."""
        pending = [self]
        while pending:
            node = pending.pop()
            yield node
            pending.extend(reversed(node.children))

    def iter_fields(self) -> Iterator[Tuple[str, object]]:
        for _field in fields(self):
            if _field.name != "span":
                yield _field.name, getattr(self, _field.name)

    @property
    def metadata(self) -> Optional[str]:
        return None

    @property
    def children(self) -> List[Node]:
        """The child nodes in source order. Tokens are exposed via `metadata` instead."""
        children = []
        for _name, value in self.iter_fields():
            if isinstance(value, list):
                children.extend(item for item in value if isinstance(item, Node))
            elif isinstance(value, Node):
                children.append(value)
        return children


@dataclass(eq=False)
class StmtSeqNode(Node):
    stmts: List[Node]

    kind = NodeKind.STMT_SEQ


@dataclass(eq=False)
class IfNode(Node):
    cond: Node
    body: StmtSeqNode
    else_body: Optional[StmtSeqNode] = None

    kind = NodeKind.IF


@dataclass(eq=False)
class RepeatNode(Node):
    body: StmtSeqNode
    cond: Node

    kind = NodeKind.REPEAT


@dataclass(eq=False)
class AssignNode(Node):
    id: Token
    exp: Node

    kind = NodeKind.ASSIGN

    @property
    def metadata(self) -> str:
        return self.id.text


@dataclass(eq=False)
class ReadNode(Node):
    id: Token

    kind = NodeKind.READ

    @property
    def metadata(self) -> str:
        return self.id.text


@dataclass(eq=False)
class WriteNode(Node):
    exp: Node

    kind = NodeKind.WRITE


@dataclass(eq=False)
class Op2Node(Node):
    left: Node
    operator: Token
    right: Node

    kind = NodeKind.OP

    @property
    def metadata(self) -> str:
        return self.operator.text


@dataclass(eq=False)
class VariableNode(Node):
    id: Token

    kind = NodeKind.ID

    @property
    def metadata(self) -> str:
        return self.id.text


@dataclass(eq=False)
class NumberNode(Node):
    value: Token

    kind = NodeKind.CONST

    @property
    def metadata(self) -> str:
        return self.value.text

    @property
    def int_value(self) -> int:
        return int(self.value.text)


StmtNode = IfNode | RepeatNode | AssignNode | ReadNode | WriteNode

ExpNode = Op2Node | VariableNode | NumberNode
