"""CLI entry point for the loxcore interpreter.

Usage:
    python -m loxcore [-v|-vv|-vvv] [script.lox]
    python -m loxcore [-v...] --emit-ast <script.lox>
    python -m loxcore [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given .lox file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Without a script an interactive prompt is started; errors on one line do
not end the session. Debug information is written to `debug.txt` in the
current directory when verbosity is greater than zero.

Exit codes follow the sysexits convention: 65 for syntax errors, 70 for
runtime errors.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast_json import ast_to_obj, program_from_obj
from .errors import LoxSyntaxError
from .interpreter import Interpreter
from .parser import parse_program
from .reporter import ErrorReporter

EX_DATAERR = 65
EX_SOFTWARE = 70


def exit_code(reporter: ErrorReporter) -> int:
    if reporter.had_error:
        return EX_DATAERR
    if reporter.had_runtime_error:
        return EX_SOFTWARE
    return 0


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def run(source: str, interpreter: Interpreter) -> None:
    try:
        statements = parse_program(source)
    except LoxSyntaxError as e:
        interpreter.reporter.syntax_error(e)
        return
    interpreter.interpret(statements)


def run_prompt(interpreter: Interpreter) -> None:
    while True:
        try:
            line = input('> ')
        except EOFError:
            print()
            break
        run(line, interpreter)
        interpreter.reporter.reset()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="loxcore interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='LOX_FILE', help='emit AST JSON for the given .lox file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('script', nargs='?', help='program file (.lox) to execute')
    args = parser.parse_args(argv)

    reporter = ErrorReporter()

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        source = read_source(program_file)
        try:
            statements = parse_program(source)
        except LoxSyntaxError as e:
            reporter.syntax_error(e)
            sys.exit(EX_DATAERR)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(ast_to_obj(statements), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    interpreter = Interpreter(reporter=reporter, debug_level=args.v)
    try:
        # Execute from AST JSON
        if args.ast:
            ast_path = Path(args.ast)
            if not ast_path.exists():
                print(f"Error: file {ast_path} not found", file=sys.stderr)
                sys.exit(1)
            try:
                with open(ast_path, 'r', encoding='utf-8') as f:
                    statements = program_from_obj(json.load(f))
            except (ValueError, TypeError) as e:
                print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
                sys.exit(1)
            interpreter.interpret(statements)
        elif args.script:
            run(read_source(Path(args.script)), interpreter)
        else:
            run_prompt(interpreter)
    finally:
        interpreter.close()

    code = exit_code(reporter)
    if code:
        sys.exit(code)


if __name__ == '__main__':
    main()
