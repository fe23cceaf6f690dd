"""
Transformation of the source AST into the target AST.

The traversal visits parents before children, so by the time a node is
visited its parent has already registered where its children go. The
context maps a source node id to that list.
"""

from typing import Dict, List, Optional
from . import ast_nodes as source
from . import target_nodes as target
from .ast_nodes import NodeType
from .traversal import SourceVisitor
from .errors import InternalConsistencyError


class Transformer(SourceVisitor):
    """Builds a target Program from a source Program."""

    def __init__(self):
        self.context: Dict[int, List[target.TargetNode]] = {}
        self.result: Optional[target.Program] = None

    def transform(self, program: source.Program) -> target.Program:
        self.context = {}
        self.result = None
        self.walk(program)
        return self.result

    def register(self, node: source.ASTNode, children: List[target.TargetNode]):
        """Record where nodes derived from the children of ``node`` go."""
        if node.node_id is None:
            raise InternalConsistencyError(
                f"{type(node).__name__} is not registered in a node arena")
        self.context[node.node_id] = children

    def insertion_target(self, node: Optional[source.ASTNode]) -> List[target.TargetNode]:
        if node is None:
            raise InternalConsistencyError("non-root node visited without a parent")
        try:
            return self.context[node.node_id]
        except KeyError:
            raise InternalConsistencyError(
                f"no insertion target registered for node {node.node_id}") from None

    def visit_program(self, node, parent, depth):
        self.result = target.Program()
        self.register(node, self.result.body)

    def visit_call_expression(self, node, parent, depth):
        call = target.CallExpression(target.Identifier(node.name))
        self.register(node, call.params)
        siblings = self.insertion_target(parent)

        if parent.node_type == NodeType.CALL_EXPRESSION:
            siblings.append(call)
        else:
            siblings.append(target.ExpressionStatement(call))

    def visit_number_literal(self, node, parent, depth):
        self.insertion_target(parent).append(target.NumberLiteral(node.value))
