from typing import Any, Dict

from tiny.tree.tree import Node
from tiny.tree.visitor import NodeVisitor


class DiagramExporter(NodeVisitor):
    """Convert a syntax tree into the nested node structure consumed by tree diagram
    renderers such as Treant.js:

    >>> DiagramExporter().export(tree)
    {'text': {'name': 'stmt_seq', 'title': ''}, 'children': [...]}

    Every node becomes a dictionary with its kind as `name`, its metadata (or an empty
    string) as `title`, and its children in source order.
    """

    def export(self, tree: Node) -> Dict[str, Any]:
        root = self.visit(tree)
        # Fill in the children with an explicit stack, operator chains can be very deep
        pending = [(tree, root)]
        while pending:
            node, structure = pending.pop()
            for child in node.children:
                child_structure = self.visit(child)
                structure["children"].append(child_structure)
                pending.append((child, child_structure))
        return root

    def visit_children(self, node: Node) -> Dict[str, Any]:
        return {
            "text": {
                "name": str(node.kind),
                "title": node.metadata or "",
            },
            "children": [],
        }
