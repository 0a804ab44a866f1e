"""Parser for loxcore source text.

The grammar below covers the statements and expressions the interpreter
evaluates: `print` and expression statements over literals, grouping,
unary and binary operators. A Lark LALR parser builds the parse tree and
`ASTTransformer` turns it into the frozen nodes defined in `loxcore.ast`.

Operators are named terminals so that their tokens survive into the tree;
the interpreter needs them to report the line of a failing operation.

The `parse_program` function is the public entry point and returns the
program as a list of statements.
"""

from __future__ import annotations

from typing import List

from lark import Lark, Transformer, UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from .ast import Binary, Expression, Grouping, Literal, Print, Stmt, Unary
from .errors import LoxSyntaxError
from .tokens import Token, TokenType
from .values import from_python


LOX_GRAMMAR = r"""
    start: statement*

    ?statement: print_stmt
              | expr_stmt

    print_stmt: "print" expression ";"
    expr_stmt: expression ";"

    // Expressions with precedence, lowest first
    ?expression: equality
    ?equality: comparison
             | equality (BANG_EQUAL | EQUAL_EQUAL) comparison -> binary
    ?comparison: term
               | comparison (GREATER | GREATER_EQUAL | LESS | LESS_EQUAL) term -> binary
    ?term: factor
         | term (MINUS | PLUS) factor -> binary
    ?factor: unary
           | factor (SLASH | STAR) unary -> binary
    ?unary: (BANG | MINUS) unary -> prefix
          | primary
    ?primary: NUMBER -> number
            | STRING -> string
            | "true" -> true
            | "false" -> false
            | "nil" -> nil
            | "(" expression ")" -> grouping

    // Tokens
    BANG_EQUAL: "!="
    EQUAL_EQUAL: "=="
    GREATER_EQUAL: ">="
    LESS_EQUAL: "<="
    BANG: "!"
    GREATER: ">"
    LESS: "<"
    MINUS: "-"
    PLUS: "+"
    SLASH: "/"
    STAR: "*"
    NUMBER: /[0-9]+(\.[0-9]+)?/
    STRING: /"[^"]*"/

    %import common.WS
    %ignore WS

    // Comments
    LINE_COMMENT: /\/\/[^\n]*/
    %ignore LINE_COMMENT
"""


LOX_PARSER = Lark(
    LOX_GRAMMAR,
    parser='lalr',
    propagate_positions=True,
    maybe_placeholders=False,
)


def to_operator(token) -> Token:
    """Convert a Lark operator token into a loxcore `Token`."""
    return Token(TokenType[token.type], str(token), token.line, token.column)


class ASTTransformer(Transformer):
    """Transforms the raw parse tree into loxcore statements."""

    def start(self, items):
        return list(items)

    def print_stmt(self, items):
        return Print(items[0])

    def expr_stmt(self, items):
        return Expression(items[0])

    # Expressions
    def binary(self, items):
        left, op, right = items
        return Binary(left, to_operator(op), right)

    def prefix(self, items):
        op, right = items
        return Unary(to_operator(op), right)

    def grouping(self, items):
        return Grouping(items[0])

    def number(self, items):
        return Literal(from_python(float(items[0])))

    def string(self, items):
        # strip the quotes; there are no escape sequences
        return Literal(from_python(str(items[0])[1:-1]))

    def true(self, items):
        return Literal(from_python(True))

    def false(self, items):
        return Literal(from_python(False))

    def nil(self, items):
        return Literal(from_python(None))


def describe_error(err: UnexpectedInput) -> str:
    if isinstance(err, UnexpectedEOF):
        return "Unexpected end of input."
    if isinstance(err, UnexpectedCharacters):
        return f"Unexpected character {err.char!r}."
    if isinstance(err, UnexpectedToken):
        if err.token.type == '$END':
            return "Unexpected end of input."
        return f"Unexpected token {str(err.token)!r}."
    return "Invalid syntax."


def parse_program(source: str) -> List[Stmt]:
    """Parse loxcore source code into a list of statements.

    Raises `LoxSyntaxError` with the line and column of the first problem.
    """
    try:
        tree = LOX_PARSER.parse(source)
    except UnexpectedInput as err:
        line = getattr(err, 'line', -1)
        column = getattr(err, 'column', -1)
        raise LoxSyntaxError(describe_error(err), line, column) from err
    return ASTTransformer().transform(tree)
