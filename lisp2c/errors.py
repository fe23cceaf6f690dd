"""
Error handling for the lisp2c compiler.

Every stage raises on the first problem it finds; ErrorReporter only collects
and presents those errors for a hosting program such as the command line.
"""

import sys


class CompilerError(Exception):
    """Base class for all lisp2c errors."""

    def __init__(self, message, line=None, column=None, filename=None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename

    def __str__(self):
        location = ""
        if self.filename:
            location += f"File \"{self.filename}\""
        if self.line is not None:
            location += f", line {self.line}" if location else f"line {self.line}"
        if self.column is not None:
            location += f", column {self.column}"

        if location:
            return f"{self.__class__.__name__}: {location}\n  {self.message}"
        return f"{self.__class__.__name__}: {self.message}"


class LexError(CompilerError):
    """Error during tokenization."""

    def __init__(self, message, char=None, line=None, column=None, filename=None):
        super().__init__(message, line, column, filename)
        self.char = char

    def __str__(self):
        text = super().__str__()
        if self.char is not None:
            text += f" {self.char!r}"
        return text


class ParseError(CompilerError):
    """Error during parsing."""

    @classmethod
    def at(cls, message, token):
        """Build an error located at ``token``."""
        return cls(message, token.line, token.column, token.filename)


class InternalConsistencyError(CompilerError):
    """A fault that well-formed trees cannot produce."""
    pass


class ErrorReporter:
    """Collects compiler errors and prints them for the user."""

    def __init__(self):
        self.errors = []

    def report(self, error):
        """Record an error raised by the compiler."""
        self.errors.append(error)
        return error

    def error(self, message, line=None, column=None, filename=None):
        """Report a plain error not raised by a compiler stage."""
        return self.report(CompilerError(message, line, column, filename))

    def has_errors(self):
        """Check if there are any errors."""
        return len(self.errors) > 0

    def print_errors(self):
        """Print all errors to stderr."""
        for error in self.errors:
            print(str(error), file=sys.stderr)

