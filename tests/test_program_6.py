from pathlib import Path

from loxcore.interpreter import Interpreter
from loxcore.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_6_expression_statements_are_silent(capsys):
    with open(EXAMPLES / 'program_6.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_program(source)
    interp = Interpreter()
    interp.interpret(statements)
    out = capsys.readouterr().out.strip()
    assert out == 'only line'
