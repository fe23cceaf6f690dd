"""
Token class for representing lexical tokens.
"""

from .token_types import TokenType


class Token:
    """Represents a single lexical token with position information."""

    def __init__(self, token_type, value, line=1, column=1, filename=None):
        self.type = token_type
        self.value = value
        self.line = line
        self.column = column
        self.filename = filename

    def __str__(self):
        return f"Token({self.type.name}, {repr(self.value)}, {self.line}:{self.column})"

    def __repr__(self):
        return self.__str__()

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def is_type(self, token_type):
        """Check if token is of specified type."""
        return self.type == token_type

    def is_paren(self, char):
        """Check if token is the given parenthesis."""
        return self.type == TokenType.PAREN and self.value == char

    def is_open(self):
        return self.is_paren("(")

    def is_close(self):
        return self.is_paren(")")
