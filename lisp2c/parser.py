"""
Parser for the lisp2c call-expression language.

Grammar:

    Program        := CallExpression*
    CallExpression := '(' Name Argument* ')'
    Argument       := Number | CallExpression

Recursive descent with one token of lookahead and no backtracking. The
first error aborts the parse.
"""

import sys
from typing import List, Optional
from .token import Token
from .token_types import TokenType
from .ast_nodes import Argument, CallExpression, NodeArena, NumberLiteral, Program
from .errors import ParseError

DEFAULT_MAX_DEPTH = 200
DEFAULT_MAX_INTEGER = 2 ** 63 - 1


def max_depth_ceiling() -> int:
    """Deepest nesting the recursive stages survive under the current recursion limit."""
    # The code generator uses about three frames per nesting level.
    return sys.getrecursionlimit() // 4


def check_max_depth(max_depth: int) -> int:
    ceiling = max_depth_ceiling()
    if not 1 <= max_depth <= ceiling:
        raise ValueError(f"max_depth must be between 1 and {ceiling}, got {max_depth}")
    return max_depth


class Parser:
    """Recursive descent parser producing a source Program."""

    def __init__(self, tokens: List[Token], filename: Optional[str] = None,
                 max_depth: int = DEFAULT_MAX_DEPTH,
                 max_integer: int = DEFAULT_MAX_INTEGER):
        self.tokens = tokens
        self.filename = filename
        self.max_depth = check_max_depth(max_depth)
        self.max_integer = max_integer
        self.current = 0
        self.arena = NodeArena()

    def is_at_end(self) -> bool:
        """Check if every token has been consumed."""
        return self.current >= len(self.tokens)

    def peek(self) -> Optional[Token]:
        """Get current token without advancing, or None at the end."""
        if self.is_at_end():
            return None
        return self.tokens[self.current]

    def advance(self) -> Token:
        """Consume current token and return it."""
        token = self.tokens[self.current]
        self.current += 1
        return token

    def error(self, message: str, token: Token) -> ParseError:
        error = ParseError.at(message, token)
        if error.filename is None:
            error.filename = self.filename
        return error

    def parse(self) -> Program:
        """Parse every token into a Program."""
        body = []

        while not self.is_at_end():
            token = self.peek()
            if not token.is_open():
                raise self.error("program must start with '('", token)
            body.append(self.call_expression(1))

        program = self.arena.add(Program(body, self.arena))
        self.arena.adopt(program, body)
        return program

    def call_expression(self, depth: int) -> CallExpression:
        """Parse a call whose '(' is the current token."""
        open_paren = self.advance()
        if depth > self.max_depth:
            raise self.error("maximum nesting depth exceeded", open_paren)

        name_token = self.peek()
        if name_token is None or not name_token.is_type(TokenType.NAME):
            raise self.error("expecting function name after '('", name_token or open_paren)
        self.advance()

        params: List[Argument] = []
        while True:
            token = self.peek()
            if token is None:
                raise self.error("missing ')' to end call expression", open_paren)

            if token.is_close():
                self.advance()
                break
            if token.is_open():
                params.append(self.call_expression(depth + 1))
            elif token.is_type(TokenType.NUMBER):
                params.append(self.number_literal())
            else:
                raise self.error("unexpected name in argument list", token)

        node = self.arena.add(CallExpression(name_token.value, params,
                                             open_paren.line, open_paren.column))
        self.arena.adopt(node, params)
        return node

    def number_literal(self) -> NumberLiteral:
        token = self.advance()
        digits = token.value.lstrip("0") or "0"
        # Compare lengths first: int() refuses very long digit strings.
        if len(digits) > len(str(self.max_integer)) or int(digits) > self.max_integer:
            raise self.error("integer literal out of range", token)
        return self.arena.add(NumberLiteral(int(digits), token.line, token.column))
