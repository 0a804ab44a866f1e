# loxcore language package
# This package provides the evaluation core of a small Lox-style interpreter.
from .errors import LoxRuntimeError, LoxSyntaxError
from .interpreter import Interpreter, run_source
from .parser import parse_program
from .reporter import ErrorReporter
from .values import NIL, BoolVal, NumberVal, TextVal, is_equal, is_truthy, stringify

__all__ = [
    'Interpreter',
    'run_source',
    'parse_program',
    'ErrorReporter',
    'LoxRuntimeError',
    'LoxSyntaxError',
    'NIL',
    'BoolVal',
    'NumberVal',
    'TextVal',
    'is_equal',
    'is_truthy',
    'stringify',
]
