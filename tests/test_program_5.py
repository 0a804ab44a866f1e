from pathlib import Path

from loxcore.interpreter import Interpreter
from loxcore.parser import parse_program
from loxcore.reporter import ErrorReporter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_5_runtime_error_aborts(capsys):
    """Program 5 fails on its second statement.

    The first line is printed, the failing line reports through the error
    stream with its line number, and the third line never runs.
    """
    with open(EXAMPLES / 'program_5.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_program(source)
    reporter = ErrorReporter()
    interp = Interpreter(reporter=reporter)
    assert not interp.interpret(statements)
    captured = capsys.readouterr()
    assert captured.out.strip() == 'before'
    assert captured.err.strip().split('\n') == [
        'Operands must be two numbers or two strings.',
        '[line 3]',
    ]
    assert reporter.had_runtime_error
