import pytest

from tiny import DiagramExporter, Parser, Scanner, Token, Type
from tiny.tree.tree import NodeKind, StmtSeqNode, VariableNode
from tests.test_util import open_file


def parse(program: str) -> StmtSeqNode:
    tokens = Scanner(program).scan()
    return Parser(program).parse(tokens)


def test_print(valid_file: str):
    # Ensure that
    # 1. the pretty print results in the same tree as the original program
    # 2. the pretty print gives the same tokens as for the original program
    program: str = open_file(valid_file)
    original_tree = parse(program)

    program_pprint = str(original_tree)
    pprint_tree = parse(program_pprint)

    assert original_tree == pprint_tree
    assert str(original_tree) == str(pprint_tree)


def test_print_layout():
    tree = parse("if x<1 then write x else read y end;write(1+2)*3")
    assert str(tree) == (
        "if x < 1 then\n"
        "    write x\n"
        "else\n"
        "    read y\n"
        "end;\n"
        "write (1 + 2) * 3"
    )


def test_print_repeat():
    tree = parse("repeat x := x - 1; write x until x = 0")
    assert str(tree) == "repeat\n    x := x - 1;\n    write x\nuntil x = 0"


@pytest.mark.parametrize(
    "program",
    [
        "write a - (b - c)",
        "write a - b - c",
        "write a * (b + c)",
        "write (a < b) = c",
        "write a < (b = c)",
        "write a + b < c * d",
        "write a / (b / c) * d",
    ],
)
def test_print_brackets(program: str):
    assert str(parse(program)) == program


def test_print_redundant_brackets():
    assert str(parse("write ((a + b)) - (c)")) == "write a + b - c"


def test_kinds(factorial_program: str):
    tree = parse(factorial_program)
    assert tree.kind == NodeKind.STMT_SEQ
    assert [stmt.kind for stmt in tree.children] == [NodeKind.READ, NodeKind.IF]
    assert [stmt.kind for stmt in tree.stmts[1].body.children] == [
        NodeKind.ASSIGN,
        NodeKind.REPEAT,
        NodeKind.WRITE,
    ]


def test_children():
    tree = parse("if a then b := 1 else read c end; if a then read b end")
    with_else, without_else = tree.children
    assert len(with_else.children) == 3
    assert len(without_else.children) == 2

    assign = with_else.body.children[0]
    assert assign.metadata == "b"
    # The identifier is metadata, not a child
    assert [child.kind for child in assign.children] == [NodeKind.CONST]

    read = with_else.else_body.children[0]
    assert read.children == []
    assert read.metadata == "c"


def test_metadata():
    (write,) = parse("write x + 10").stmts
    assert write.metadata is None
    assert write.exp.metadata == "+"
    left, right = write.exp.children
    assert (left.kind, left.metadata) == (NodeKind.ID, "x")
    assert (right.kind, right.metadata) == (NodeKind.CONST, "10")
    assert right.int_value == 10


def test_contains():
    tree = parse("read x; repeat y := y * x until y = 0")
    assert VariableNode(Token("x", Type.IDENTIFIER)) in tree
    assert VariableNode(Token("z", Type.IDENTIFIER)) not in tree


def test_export():
    tree = parse("read x; write x + 1")
    assert DiagramExporter().export(tree) == {
        "text": {"name": "stmt_seq", "title": ""},
        "children": [
            {"text": {"name": "read_stmt", "title": "x"}, "children": []},
            {
                "text": {"name": "write_stmt", "title": ""},
                "children": [
                    {
                        "text": {"name": "op", "title": "+"},
                        "children": [
                            {"text": {"name": "id", "title": "x"}, "children": []},
                            {"text": {"name": "const", "title": "1"}, "children": []},
                        ],
                    }
                ],
            },
        ],
    }


def test_export_valid(valid_file: str):
    # Every node of the tree shows up exactly once in the exported structure
    def count(structure) -> int:
        return 1 + sum(count(child) for child in structure["children"])

    def count_nodes(node) -> int:
        return 1 + sum(count_nodes(child) for child in node.children)

    tree = parse(open_file(valid_file))
    assert count(DiagramExporter().export(tree)) == count_nodes(tree)


def test_long_operator_chain():
    # Equality, printing and exporting do not recurse along the left-nested chain
    program = "write " + " + ".join(["1"] * 3000)
    tree = parse(program)
    assert tree == parse(program)
    assert str(tree) == program

    structure = DiagramExporter().export(tree)
    exported = 0
    pending = [structure]
    while pending:
        exported += 1
        pending.extend(pending.pop()["children"])
    assert exported == len(list(tree.walk()))
