"""
C-like code generator for the target AST.

Rendering is purely recursive and keeps no state between calls, so the same
tree always produces the same text:

    int main() {
        add(2, subtract(4, 2));
    }
"""

from typing import Callable, Dict
from .target_nodes import (
    CallExpression, ExpressionStatement, Identifier, NumberLiteral, Program,
    TargetNode, TargetNodeType,
)
from .errors import InternalConsistencyError


class CodeGenerator:
    def __init__(self, indent_size: int = 4, entry_point: str = "main",
                 return_type: str = "int"):
        self.indent = " " * indent_size
        self.entry_point = entry_point
        self.return_type = return_type
        self._emitters: Dict[TargetNodeType, Callable[[TargetNode], str]] = {
            TargetNodeType.PROGRAM: self.emit_program,
            TargetNodeType.EXPRESSION_STATEMENT: self.emit_expression_statement,
            TargetNodeType.CALL_EXPRESSION: self.emit_call_expression,
            TargetNodeType.IDENTIFIER: self.emit_identifier,
            TargetNodeType.NUMBER_LITERAL: self.emit_number_literal,
        }

    def generate(self, program: Program) -> str:
        return self.emit(program) + "\n"

    def emit(self, node: TargetNode) -> str:
        emitter = self._emitters.get(getattr(node, "node_type", None))
        if emitter is None:
            raise InternalConsistencyError(
                f"unknown node variant during code generation: {type(node).__name__}")
        return emitter(node)

    def emit_program(self, node: Program) -> str:
        lines = [f"{self.return_type} {self.entry_point}() {{"]
        lines += [self.indent + self.emit(stmt) for stmt in node.body]
        lines.append("}")
        return "\n".join(lines)

    def emit_expression_statement(self, node: ExpressionStatement) -> str:
        return f"{self.emit(node.expression)};"

    def emit_call_expression(self, node: CallExpression) -> str:
        args = ", ".join(self.emit(param) for param in node.params)
        return f"{self.emit(node.callee)}({args})"

    def emit_identifier(self, node: Identifier) -> str:
        return node.name

    def emit_number_literal(self, node: NumberLiteral) -> str:
        return str(node.value)
