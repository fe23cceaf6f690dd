"""
Compiler driver: source text -> tokens -> source AST -> target AST -> code.

Each stage consumes the complete output of the previous one. Any error
raised by a stage aborts the compile and reaches the caller unchanged.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from .token import Token
from .lexer import Lexer
from .parser import Parser, DEFAULT_MAX_DEPTH, DEFAULT_MAX_INTEGER, check_max_depth
from .transformer import Transformer
from .codegen import CodeGenerator
from . import ast_nodes
from . import target_nodes


@dataclass
class CompilerOptions:
    indent_size: int = 4
    entry_point: str = "main"
    return_type: str = "int"
    max_depth: int = DEFAULT_MAX_DEPTH
    max_integer: int = DEFAULT_MAX_INTEGER

    def __post_init__(self):
        check_max_depth(self.max_depth)


@dataclass
class CompileResult:
    """Every intermediate product of one compile call."""
    tokens: List[Token] = field(default_factory=list)
    source_ast: Optional[ast_nodes.Program] = None
    target_ast: Optional[target_nodes.Program] = None
    code: str = ""


class Compiler:
    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def tokenize(self, source: str, filename: Optional[str] = None) -> List[Token]:
        return Lexer(source, filename).tokenize()

    def parse(self, tokens: List[Token], filename: Optional[str] = None) -> ast_nodes.Program:
        parser = Parser(tokens, filename,
                        max_depth=self.options.max_depth,
                        max_integer=self.options.max_integer)
        return parser.parse()

    def generate(self, program: target_nodes.Program) -> str:
        generator = CodeGenerator(indent_size=self.options.indent_size,
                                  entry_point=self.options.entry_point,
                                  return_type=self.options.return_type)
        return generator.generate(program)

    def compile(self, source: str, filename: str = "<string>") -> CompileResult:
        result = CompileResult()
        result.tokens = self.tokenize(source, filename)
        result.source_ast = self.parse(result.tokens, filename)
        result.target_ast = Transformer().transform(result.source_ast)
        result.code = self.generate(result.target_ast)
        return result
