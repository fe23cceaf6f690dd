"""
AST definitions for the generated C-like program.

Unlike the source language, the target separates statements from
expressions: top-level calls sit inside an ExpressionStatement, nested calls
do not.
"""

from enum import Enum, auto
from typing import List, Union


class TargetNodeType(Enum):
    PROGRAM = auto()
    EXPRESSION_STATEMENT = auto()
    CALL_EXPRESSION = auto()
    IDENTIFIER = auto()
    NUMBER_LITERAL = auto()


class TargetNode:
    """Base class for all target AST nodes."""

    node_type: TargetNodeType

    def children(self) -> List["TargetNode"]:
        return []

    def __eq__(self, other):
        if not isinstance(other, TargetNode):
            return NotImplemented
        return self.node_type == other.node_type and vars(self) == vars(other)

    __hash__ = None


class Identifier(TargetNode):
    node_type = TargetNodeType.IDENTIFIER

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"Identifier({self.name!r})"


class NumberLiteral(TargetNode):
    node_type = TargetNodeType.NUMBER_LITERAL

    def __init__(self, value: int):
        self.value = value

    def __repr__(self):
        return f"NumberLiteral({self.value})"


class CallExpression(TargetNode):
    node_type = TargetNodeType.CALL_EXPRESSION

    def __init__(self, callee: Identifier, params: List["Expression"] = None):
        self.callee = callee
        self.params = params if params is not None else []

    def children(self) -> List[TargetNode]:
        return [self.callee] + list(self.params)

    def __repr__(self):
        return f"CallExpression({self.callee!r}, {self.params!r})"


Expression = Union[CallExpression, NumberLiteral]


class ExpressionStatement(TargetNode):
    """A call used as a statement."""

    node_type = TargetNodeType.EXPRESSION_STATEMENT

    def __init__(self, expression: CallExpression):
        self.expression = expression

    def children(self) -> List[TargetNode]:
        return [self.expression]

    def __repr__(self):
        return f"ExpressionStatement({self.expression!r})"


class Program(TargetNode):
    node_type = TargetNodeType.PROGRAM

    def __init__(self, body: List[ExpressionStatement] = None):
        self.body = body if body is not None else []

    def children(self) -> List[TargetNode]:
        return list(self.body)

    def __repr__(self):
        return f"Program({self.body!r})"
