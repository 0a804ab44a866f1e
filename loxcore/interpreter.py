"""Tree-walking evaluator for loxcore.

The interpreter reduces expression trees to runtime values, executes
statements for their output, and runs statement batches on behalf of a
host. Runtime type errors are raised as `LoxRuntimeError` from deep inside
an expression and are caught exactly once, by `interpret`, which stops the
batch and hands the error to the reporter.
"""

from __future__ import annotations

import math
import sys
from typing import Iterable, Optional, TextIO

from .ast import Binary, Expr, Expression, Grouping, Literal, Print, Stmt, Unary
from .errors import LoxRuntimeError
from .parser import parse_program
from .reporter import ErrorReporter
from .tokens import Token, TokenType
from .values import (
    BoolVal, NumberVal, TextVal, Value,
    is_equal, is_truthy, stringify, type_name,
)


def divide(left: float, right: float) -> float:
    """IEEE 754 division: x/0 is a signed infinity and 0/0 is NaN."""
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


class Interpreter:
    """Evaluates loxcore syntax trees."""
    def __init__(
        self,
        out: Optional[TextIO] = None,
        reporter: Optional[ErrorReporter] = None,
        debug_level: int = 0,
        debug_file: Optional[str] = 'debug.txt',
    ):
        self.out = out
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w') if debug_level > 0 and debug_file else None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def interpret(self, statements: Iterable[Stmt]) -> bool:
        """Run a statement batch, stopping at the first runtime error.

        Returns True if every statement ran. On failure the error goes to
        the reporter, the rest of the batch is skipped and False is
        returned; the error is not re-raised.
        """
        try:
            for stmt in statements:
                self.execute(stmt)
        except LoxRuntimeError as error:
            if self.debug_level >= 1:
                self.debug(f"runtime error at line {error.token.line}: {error.message}")
            self.reporter.runtime_error(error)
            return False
        return True

    def execute(self, stmt: Stmt) -> None:
        if self.debug_level >= 1:
            self.debug(f"execute {type(stmt).__name__}")
        if isinstance(stmt, Print):
            value = self.evaluate(stmt.expression)
            text = stringify(value)
            if self.debug_level >= 2:
                self.debug(f"print {type_name(value)} -> {text!r}")
            print(text, file=self.out if self.out is not None else sys.stdout)
            return None
        if isinstance(stmt, Expression):
            value = self.evaluate(stmt.expression)
            if self.debug_level >= 2:
                self.debug(f"discard {type_name(value)} {stringify(value)!r}")
            return None
        raise NotImplementedError(f"execute: unexpected node type {type(stmt).__name__}")

    def evaluate(self, expr: Expr) -> Value:
        if isinstance(expr, Literal):
            return expr.value
        if isinstance(expr, Grouping):
            return self.evaluate(expr.expression)
        if isinstance(expr, Unary):
            right = self.evaluate(expr.right)
            result = self.apply_unary_op(expr.operator, right)
            if self.debug_level >= 3:
                self.debug(f"{expr.operator.lexeme}{stringify(right)} -> {stringify(result)}")
            return result
        if isinstance(expr, Binary):
            # both sides are evaluated before any operand check
            left = self.evaluate(expr.left)
            right = self.evaluate(expr.right)
            result = self.apply_binary_op(expr.operator, left, right)
            if self.debug_level >= 3:
                self.debug(
                    f"{stringify(left)} {expr.operator.lexeme} {stringify(right)} -> {stringify(result)}"
                )
            return result
        raise NotImplementedError(f"evaluate: unexpected node type {type(expr).__name__}")

    def apply_unary_op(self, operator: Token, right: Value) -> Value:
        if operator.type == TokenType.BANG:
            return BoolVal(not is_truthy(right))
        if operator.type == TokenType.MINUS:
            check_number_operand(operator, right)
            return NumberVal(-right.value)
        raise NotImplementedError(f"unknown unary operator {operator.type}")

    def apply_binary_op(self, operator: Token, left: Value, right: Value) -> Value:
        op = operator.type
        if op == TokenType.BANG_EQUAL:
            return BoolVal(not is_equal(left, right))
        if op == TokenType.EQUAL_EQUAL:
            return BoolVal(is_equal(left, right))
        if op == TokenType.PLUS:
            if isinstance(left, NumberVal) and isinstance(right, NumberVal):
                return NumberVal(left.value + right.value)
            if isinstance(left, TextVal) and isinstance(right, TextVal):
                return TextVal(left.value + right.value)
            raise LoxRuntimeError(operator, "Operands must be two numbers or two strings.")

        check_number_operands(operator, left, right)
        a, b = left.value, right.value
        if op == TokenType.GREATER:
            return BoolVal(a > b)
        if op == TokenType.GREATER_EQUAL:
            return BoolVal(a >= b)
        if op == TokenType.LESS:
            return BoolVal(a < b)
        if op == TokenType.LESS_EQUAL:
            return BoolVal(a <= b)
        if op == TokenType.MINUS:
            return NumberVal(a - b)
        if op == TokenType.SLASH:
            return NumberVal(divide(a, b))
        if op == TokenType.STAR:
            return NumberVal(a * b)
        raise NotImplementedError(f"unknown binary operator {op}")


def check_number_operand(operator: Token, operand: Value):
    if isinstance(operand, NumberVal):
        return
    raise LoxRuntimeError(operator, "Operand must be a number.")


def check_number_operands(operator: Token, left: Value, right: Value):
    if isinstance(left, NumberVal) and isinstance(right, NumberVal):
        return
    raise LoxRuntimeError(operator, "Operands must be numbers.")


def run_source(source: str, reporter: Optional[ErrorReporter] = None, debug_level: int = 0) -> bool:
    """Convenience function to parse and run a program from source text."""
    interpreter = Interpreter(reporter=reporter, debug_level=debug_level)
    try:
        return interpreter.interpret(parse_program(source))
    finally:
        interpreter.close()
