"""
Human-readable dumps of tokens and both syntax trees.

Each tree dump has one line per node, indented in proportion to depth.
"""

from typing import List
from .token import Token
from .traversal import SourceVisitor, TargetVisitor


class _TreePrinter:
    def __init__(self, indent_size: int = 2):
        self.indent_size = indent_size
        self.lines: List[str] = []

    def _print_with_indent(self, text: str, depth: int):
        self.lines.append(f"{' ' * (depth * self.indent_size)}{text}")

    def render(self, root) -> str:
        self.lines = []
        self.walk(root)
        return "\n".join(self.lines)


class SourceTreePrinter(_TreePrinter, SourceVisitor):
    """Prints the source AST."""

    def visit_program(self, node, parent, depth):
        self._print_with_indent("Program", depth)

    def visit_call_expression(self, node, parent, depth):
        self._print_with_indent(f"CallExpression {node.name}", depth)

    def visit_number_literal(self, node, parent, depth):
        self._print_with_indent(f"NumberLiteral {node.value}", depth)


class TargetTreePrinter(_TreePrinter, TargetVisitor):
    """Prints the target AST."""

    def visit_program(self, node, parent, depth):
        self._print_with_indent("Program", depth)

    def visit_expression_statement(self, node, parent, depth):
        self._print_with_indent("ExpressionStatement", depth)

    def visit_call_expression(self, node, parent, depth):
        self._print_with_indent("CallExpression", depth)

    def visit_identifier(self, node, parent, depth):
        self._print_with_indent(f"Identifier {node.name}", depth)

    def visit_number_literal(self, node, parent, depth):
        self._print_with_indent(f"NumberLiteral {node.value}", depth)


def format_tokens(tokens: List[Token]) -> str:
    return "\n".join(str(token) for token in tokens)
