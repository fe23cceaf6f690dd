"""
Depth-first tree traversal shared by the printers and the transformer.

A Traverser is driven by a table of callbacks keyed on node type. Each
callback receives ``(node, parent, depth)``; the root has no parent and
depth 0. Callbacks run before the node's children are visited.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional
from .ast_nodes import ASTNode, NodeType, Program
from .target_nodes import TargetNode, TargetNodeType
from .errors import InternalConsistencyError

Callback = Callable[[Any, Optional[Any], int], None]


class Traverser:
    """Pre-order walker over a closed set of node types."""

    def __init__(self, callbacks: Dict[Any, Callback]):
        self.callbacks = callbacks

    def traverse(self, root):
        self.visit(root, None, 0)

    def visit(self, node, parent, depth: int):
        callback = self.callbacks.get(getattr(node, "node_type", None))
        if callback is None:
            raise InternalConsistencyError(
                f"unknown node variant during traversal: {type(node).__name__}")

        callback(node, parent, depth)
        for child in node.children():
            self.visit(child, node, depth + 1)


class SourceVisitor(ABC):
    """Base class for consumers of the source AST."""

    def callbacks(self) -> Dict[NodeType, Callback]:
        return {
            NodeType.PROGRAM: self.visit_program,
            NodeType.CALL_EXPRESSION: self.visit_call_expression,
            NodeType.NUMBER_LITERAL: self.visit_number_literal,
        }

    def walk(self, program: Program):
        Traverser(self.callbacks()).traverse(program)

    @abstractmethod
    def visit_program(self, node, parent: Optional[ASTNode], depth: int): pass

    @abstractmethod
    def visit_call_expression(self, node, parent: Optional[ASTNode], depth: int): pass

    @abstractmethod
    def visit_number_literal(self, node, parent: Optional[ASTNode], depth: int): pass


class TargetVisitor(ABC):
    """Base class for consumers of the target AST."""

    def callbacks(self) -> Dict[TargetNodeType, Callback]:
        return {
            TargetNodeType.PROGRAM: self.visit_program,
            TargetNodeType.EXPRESSION_STATEMENT: self.visit_expression_statement,
            TargetNodeType.CALL_EXPRESSION: self.visit_call_expression,
            TargetNodeType.IDENTIFIER: self.visit_identifier,
            TargetNodeType.NUMBER_LITERAL: self.visit_number_literal,
        }

    def walk(self, program: TargetNode):
        Traverser(self.callbacks()).traverse(program)

    @abstractmethod
    def visit_program(self, node, parent: Optional[TargetNode], depth: int): pass

    @abstractmethod
    def visit_expression_statement(self, node, parent: Optional[TargetNode], depth: int): pass

    @abstractmethod
    def visit_call_expression(self, node, parent: Optional[TargetNode], depth: int): pass

    @abstractmethod
    def visit_identifier(self, node, parent: Optional[TargetNode], depth: int): pass

    @abstractmethod
    def visit_number_literal(self, node, parent: Optional[TargetNode], depth: int): pass


class _Counter:
    def __init__(self):
        self.counts: Dict[Any, int] = {}

    def __call__(self, node, parent, depth):
        self.counts[node.node_type] = self.counts.get(node.node_type, 0) + 1


def count_nodes(root) -> Dict[Any, int]:
    """Count the nodes of either tree, grouped by node type."""
    counter = _Counter()
    node_types = NodeType if isinstance(root, ASTNode) else TargetNodeType
    Traverser({node_type: counter for node_type in node_types}).traverse(root)
    return counter.counts
