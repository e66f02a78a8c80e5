from tiny.token import Token
from tiny.tree.tree import Node


class NodeVisitor:
    """
    For visiting nodes in our syntax tree
    """

    def visit(self, node: Node | Token, *args, **kwargs):
        """Visit a node."""
        method = "visit_" + node.__class__.__name__
        visitor = getattr(self, method, self.visit_children)
        return visitor(node, *args, **kwargs)

    def visit_children(self, node: Node | Token, *args, **kwargs):
        """Called if no explicit visitor function exists for a node."""
        if isinstance(node, Token):
            return
        for field, value in node.iter_fields():
            if isinstance(value, list):
                for item in value:
                    if isinstance(item, (Node, Token)):
                        self.visit(item, *args, **kwargs)
            elif isinstance(value, (Node, Token)):
                self.visit(value, *args, **kwargs)
