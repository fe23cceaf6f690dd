"""
Abstract Syntax Tree (AST) definitions for lisp2c source programs.

The variant set is closed and every node carries a NodeType tag, so
consumers dispatch on the tag instead of inspecting classes. Nodes are
registered in a NodeArena that hands out small integer ids; a node's parent
is recorded as the parent's id, never as a second reference to it.
"""

from enum import Enum, auto
from typing import List, Optional, Union


class NodeType(Enum):
    PROGRAM = auto()
    CALL_EXPRESSION = auto()
    NUMBER_LITERAL = auto()


class ASTNode:
    """Base class for all source AST nodes."""

    node_type: NodeType

    def __init__(self, line: int = 0, column: int = 0):
        self.line = line
        self.column = column
        self.node_id: Optional[int] = None
        self.parent_id: Optional[int] = None

    def children(self) -> List["ASTNode"]:
        return []


class NumberLiteral(ASTNode):
    """Unsigned integer argument."""

    node_type = NodeType.NUMBER_LITERAL

    def __init__(self, value: int, line: int = 0, column: int = 0):
        super().__init__(line, column)
        self.value = value

    def __repr__(self):
        return f"NumberLiteral({self.value})"


class CallExpression(ASTNode):
    """Parenthesized call: (name arg*)."""

    node_type = NodeType.CALL_EXPRESSION

    def __init__(self, name: str, params: List["Argument"],
                 line: int = 0, column: int = 0):
        super().__init__(line, column)
        self.name = name
        self.params = params

    def children(self) -> List[ASTNode]:
        return list(self.params)

    def __repr__(self):
        return f"CallExpression({self.name!r}, {self.params!r})"


Argument = Union[CallExpression, NumberLiteral]


class Program(ASTNode):
    """Root program node containing all top-level calls."""

    node_type = NodeType.PROGRAM

    def __init__(self, body: List[CallExpression], arena: "NodeArena"):
        super().__init__(1, 1)
        self.body = body
        self.arena = arena

    def children(self) -> List[ASTNode]:
        return list(self.body)

    def parent_of(self, node: ASTNode) -> Optional[ASTNode]:
        return self.arena.parent_of(node)

    def __repr__(self):
        return f"Program({self.body!r})"


class NodeArena:
    """
    Registry of every node in one source tree, indexed by node id.

    Ids are assigned in construction order. Since the parser builds the tree
    bottom-up, children always have smaller ids than their parent.
    """

    def __init__(self):
        self.nodes: List[ASTNode] = []

    def add(self, node: ASTNode) -> ASTNode:
        node.node_id = len(self.nodes)
        self.nodes.append(node)
        return node

    def adopt(self, parent: ASTNode, children: List[ASTNode]):
        """Record ``parent`` as the parent of each of ``children``."""
        for child in children:
            child.parent_id = parent.node_id

    def get(self, node_id: int) -> ASTNode:
        return self.nodes[node_id]

    def parent_of(self, node: ASTNode) -> Optional[ASTNode]:
        if node.parent_id is None:
            return None
        return self.nodes[node.parent_id]

    def __len__(self):
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)
