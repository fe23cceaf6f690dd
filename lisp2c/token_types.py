"""
Token definitions for the lisp2c call-expression language.
"""

from enum import Enum, auto


class TokenType(Enum):
    # Punctuation
    PAREN = auto()

    # Identifiers
    NAME = auto()

    # Literals
    NUMBER = auto()


PARENS = frozenset("()")
WHITESPACE = frozenset(" \t\r\n")
LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
DIGITS = frozenset("0123456789")
