"""
lisp2c
A miniature compiler from Lisp-style call expressions to C-like source.

    (add 2 (subtract 4 2))   ->   add(2, subtract(4, 2));

Version: 0.1.0
"""

__version__ = "0.1.0"

from typing import Optional

from .lexer import Lexer
from .parser import Parser
from .transformer import Transformer
from .codegen import CodeGenerator
from .compiler import Compiler, CompilerOptions, CompileResult
from .errors import (
    CompilerError, LexError, ParseError, InternalConsistencyError, ErrorReporter,
)
from .token_types import TokenType
from .token import Token

__all__ = [
    "Lexer",
    "Parser",
    "Transformer",
    "CodeGenerator",
    "Compiler",
    "CompilerOptions",
    "CompileResult",
    "CompilerError",
    "LexError",
    "ParseError",
    "InternalConsistencyError",
    "ErrorReporter",
    "TokenType",
    "Token",
    "compile_source",
    "compile_file",
]


def compile_source(source_code: str, filename: str = "<string>",
                   options: Optional[CompilerOptions] = None) -> str:
    """
    Compile source text to C-like code.

    Args:
        source_code: The program text
        filename: Name used in error locations
        options: Output and limit settings; defaults when omitted

    Returns:
        The generated code

    Raises:
        CompilerError: on the first lexical or syntax error
    """
    return Compiler(options).compile(source_code, filename).code


def compile_file(filename: str, options: Optional[CompilerOptions] = None) -> str:
    """
    Compile a source file to C-like code.

    Raises:
        OSError: if the file cannot be read
        CompilerError: on the first lexical or syntax error
    """
    with open(filename, 'r', encoding='utf-8') as file:
        source_code = file.read()
    return compile_source(source_code, filename, options)
