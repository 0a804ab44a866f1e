"""Syntax tree definitions for loxcore.

The parser builds these nodes and the interpreter walks them. Nodes are
frozen dataclasses: once a tree is built nothing in it changes, so the
same tree can be evaluated any number of times with the same result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from .tokens import Token
from .values import Value


@dataclass(frozen=True)
class Node:
    """Base class for all syntax tree nodes."""
    pass


# Expressions

@dataclass(frozen=True)
class Literal(Node):
    value: Value


@dataclass(frozen=True)
class Grouping(Node):
    expression: Expr


@dataclass(frozen=True)
class Unary(Node):
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Binary(Node):
    left: Expr
    operator: Token
    right: Expr


# Statements

@dataclass(frozen=True)
class Expression(Node):
    expression: Expr


@dataclass(frozen=True)
class Print(Node):
    expression: Expr


Expr = Union[Literal, Grouping, Unary, Binary]
Stmt = Union[Expression, Print]
Program = List[Stmt]
