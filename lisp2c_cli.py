#!/usr/bin/env python3
"""
lisp2c Command Line Interface

Compiles Lisp-style call expressions to C-like source, or only checks
their syntax.
"""

import sys
import argparse
from typing import List, Optional

import lisp2c
from lisp2c.compiler import Compiler, CompilerOptions
from lisp2c.errors import CompilerError, ErrorReporter
from lisp2c.parser import check_max_depth
from lisp2c.printer import SourceTreePrinter, TargetTreePrinter, format_tokens


def read_source(file_path: str, reporter: ErrorReporter) -> Optional[str]:
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        reporter.error(f"File '{file_path}' not found.")
    except OSError as e:
        reporter.error(f"Error reading file '{file_path}': {e}")
    return None


def print_debug(result):
    """Print tokens and both trees to stderr."""
    stream = sys.stderr
    print("Tokens:", file=stream)
    print(format_tokens(result.tokens), file=stream)
    print(file=stream)
    print("Source AST:", file=stream)
    print(SourceTreePrinter().render(result.source_ast), file=stream)
    print(file=stream)
    print("Target AST:", file=stream)
    print(TargetTreePrinter().render(result.target_ast), file=stream)
    print(file=stream)


def compile_text(source: str, filename: str, options: CompilerOptions,
                 reporter: ErrorReporter, output: Optional[str] = None,
                 debug: bool = False) -> bool:
    """Compile source text and write the code to ``output`` or stdout."""
    try:
        result = Compiler(options).compile(source, filename)
    except CompilerError as e:
        reporter.report(e)
        return False

    if debug:
        print_debug(result)

    if output:
        try:
            with open(output, 'w', encoding='utf-8') as f:
                f.write(result.code)
        except OSError as e:
            reporter.error(f"Error writing file '{output}': {e}")
            return False
    else:
        sys.stdout.write(result.code)
    return True


def check_syntax(file_path: str, reporter: ErrorReporter) -> bool:
    """Tokenize and parse a file without generating code."""
    source = read_source(file_path, reporter)
    if source is None:
        return False

    compiler = Compiler()
    try:
        compiler.parse(compiler.tokenize(source, file_path), file_path)
    except CompilerError as e:
        reporter.report(e)
        return False

    print(f"Syntax OK: {file_path}")
    return True


def options_from_args(args) -> CompilerOptions:
    defaults = CompilerOptions()
    return CompilerOptions(
        indent_size=getattr(args, 'indent', defaults.indent_size),
        entry_point=getattr(args, 'entry_point', defaults.entry_point),
        max_depth=getattr(args, 'max_depth', defaults.max_depth),
    )


def depth_argument(text: str) -> int:
    try:
        return check_max_depth(int(text))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--indent', type=int, default=argparse.SUPPRESS,
                        help='Spaces per indentation level (default: 4)')
    common.add_argument('--entry-point', dest='entry_point', default=argparse.SUPPRESS,
                        help='Name of the generated entry function (default: main)')
    common.add_argument('--max-depth', dest='max_depth', type=depth_argument,
                        default=argparse.SUPPRESS,
                        help='Deepest allowed call nesting (default: 200)')
    common.add_argument('--debug', action='store_true', default=argparse.SUPPRESS,
                        help='Print tokens and syntax trees to stderr')

    parser = argparse.ArgumentParser(
        prog='lisp2c',
        description="Compile Lisp-style call expressions to C-like code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        parents=[common],
        epilog="""
Examples:
  %(prog)s compile prog.lisp            # Print generated code
  %(prog)s compile prog.lisp -o prog.c  # Write generated code to a file
  %(prog)s check prog.lisp              # Check syntax
  %(prog)s -c "(add 2 2)"               # Compile source given inline
        """
    )

    parser.add_argument(
        '-c', '--command',
        help='Compile the given source text'
    )

    parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'lisp2c {lisp2c.__version__}'
    )

    subparsers = parser.add_subparsers(dest='subcommand', help='Commands')

    compile_parser = subparsers.add_parser('compile', parents=[common],
                                           help='Compile a source file')
    compile_parser.add_argument('file', help='Source file to compile')
    compile_parser.add_argument('-o', '--output', help='Output file (default: stdout)')

    check_parser = subparsers.add_parser('check', help='Check syntax of a source file')
    check_parser.add_argument('file', help='Source file to check')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the lisp2c CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    reporter = ErrorReporter()
    debug = getattr(args, 'debug', False)

    if args.subcommand == 'compile':
        source = read_source(args.file, reporter)
        success = source is not None and compile_text(
            source, args.file, options_from_args(args), reporter, args.output, debug)
    elif args.subcommand == 'check':
        success = check_syntax(args.file, reporter)
    elif args.command is not None:
        success = compile_text(args.command, "<command>", options_from_args(args),
                               reporter, debug=debug)
    else:
        parser.print_help()
        return 1

    reporter.print_errors()
    return 0 if success and not reporter.has_errors() else 1


if __name__ == '__main__':
    sys.exit(main())
