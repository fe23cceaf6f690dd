"""
Lexical analyzer for the lisp2c call-expression language.

The lexer is a three-state machine that looks at one character at a time.
Switching from LOOKING into a name or number run does not consume the
character, and neither does leaving a run: the character is examined again
in the next state.
"""

from enum import Enum, auto
from typing import List, Optional
from .token import Token
from .token_types import TokenType, PARENS, WHITESPACE, LETTERS, DIGITS
from .errors import LexError


class LexState(Enum):
    LOOKING = auto()
    IN_NAME = auto()
    IN_NUMBER = auto()


class Lexer:
    """
    Tokenizer for lisp2c source text.
    Produces the complete token list eagerly and fails on the first bad character.
    """

    def __init__(self, source_code: str, filename: Optional[str] = None):
        self.source = source_code
        self.filename = filename
        self.position = 0
        self.line = 1
        self.column = 1
        self.state = LexState.LOOKING
        self.buffer = ""
        self.buffer_line = 1
        self.buffer_column = 1
        self.tokens = []

    def current_char(self) -> Optional[str]:
        """Get current character or None if at end."""
        if self.position >= len(self.source):
            return None
        return self.source[self.position]

    def advance(self) -> Optional[str]:
        """Consume the current character and return it."""
        if self.position >= len(self.source):
            return None

        char = self.source[self.position]
        self.position += 1

        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def create_token(self, token_type: TokenType, value: str,
                     line: int, column: int) -> Token:
        return Token(token_type, value, line, column, self.filename)

    def begin_run(self, state: LexState):
        """Enter a name or number run starting at the current character."""
        self.state = state
        self.buffer = ""
        self.buffer_line = self.line
        self.buffer_column = self.column

    def flush_run(self):
        """Emit the buffered run as a token and go back to LOOKING."""
        token_type = TokenType.NAME if self.state == LexState.IN_NAME else TokenType.NUMBER
        self.tokens.append(self.create_token(token_type, self.buffer,
                                             self.buffer_line, self.buffer_column))
        self.state = LexState.LOOKING
        self.buffer = ""

    def step_looking(self, char: str):
        if char in WHITESPACE:
            self.advance()
        elif char in PARENS:
            self.tokens.append(self.create_token(TokenType.PAREN, char,
                                                 self.line, self.column))
            self.advance()
        elif char in LETTERS:
            self.begin_run(LexState.IN_NAME)
        elif char in DIGITS:
            self.begin_run(LexState.IN_NUMBER)
        else:
            raise LexError("unexpected character", char,
                           self.line, self.column, self.filename)

    def step_run(self, char: str, accepted: frozenset):
        if char in accepted:
            self.buffer += char
            self.advance()
        else:
            self.flush_run()

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source text.

        A name or number still being read when the input ends is emitted as
        the final token.
        """
        self.tokens = []
        self.state = LexState.LOOKING

        while self.position < len(self.source):
            char = self.current_char()

            if self.state == LexState.LOOKING:
                self.step_looking(char)
            elif self.state == LexState.IN_NAME:
                self.step_run(char, LETTERS)
            else:
                self.step_run(char, DIGITS)

        if self.state != LexState.LOOKING:
            self.flush_run()

        return self.tokens
