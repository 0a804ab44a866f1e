"""JSON serialization/deserialization for loxcore syntax trees.

This module converts between the syntax tree dataclasses and plain Python
dict/list structures suitable for JSON encoding. A serialized program can
be handed straight to the interpreter without going through the parser.
Loading checks that every node sits in a position it may occupy, so a
badly shaped file fails with `ValueError` instead of reaching the
interpreter.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List

from .ast import Binary, Expr, Expression, Grouping, Literal, Print, Stmt, Unary
from .tokens import LEXEMES, Token, TokenType
from .values import BoolVal, NilVal, NumberVal, TextVal, Value, from_python

UNARY_OPERATORS = {TokenType.BANG, TokenType.MINUS}


def value_to_obj(v: Value) -> Dict[str, Any]:
    if isinstance(v, NilVal):
        return {"kind": "nil"}
    if isinstance(v, BoolVal):
        return {"kind": "boolean", "value": v.value}
    if isinstance(v, NumberVal):
        # JSON has no literal for non-finite numbers
        if not math.isfinite(v.value):
            return {"kind": "number", "value": repr(v.value)}
        return {"kind": "number", "value": v.value}
    if isinstance(v, TextVal):
        return {"kind": "string", "value": v.value}
    raise TypeError(f"Unsupported value for serialization: {type(v).__name__}")


def value_from_obj(o: Any) -> Value:
    if not isinstance(o, dict):
        raise ValueError(f"Invalid value object: {o!r}")
    kind = o.get("kind")
    if kind == "nil":
        return from_python(None)
    if kind not in ("boolean", "number", "string"):
        raise ValueError(f"Unknown value kind: {kind}")
    raw = o.get("value")
    if kind == "number" and isinstance(raw, str):
        # non-finite numbers are written as 'inf', '-inf' or 'nan'
        raw = float(raw)
    if kind == "boolean" and isinstance(raw, bool):
        return from_python(raw)
    if kind == "number" and isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return from_python(float(raw))
    if kind == "string" and isinstance(raw, str):
        return from_python(raw)
    raise ValueError(f"Invalid {kind} value: {raw!r}")


def token_to_obj(t: Token) -> Dict[str, Any]:
    return {"type": t.type.name, "lexeme": t.lexeme, "line": t.line, "column": t.column}


def token_from_obj(o: Any) -> Token:
    if not isinstance(o, dict):
        raise ValueError(f"Invalid operator object: {o!r}")
    try:
        kind = TokenType[o.get("type")]
    except KeyError:
        raise ValueError(f"Unknown operator type: {o.get('type')}")
    return Token(kind, o.get("lexeme", LEXEMES[kind]), int(o.get("line", 0)), int(o.get("column", 0)))


def ast_to_obj(node: Any) -> Any:
    if isinstance(node, list):
        return {"type": "Program", "body": [ast_to_obj(n) for n in node]}
    if isinstance(node, Print):
        return {"type": "Print", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Expression):
        return {"type": "Expression", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Literal):
        return {"type": "Literal", "value": value_to_obj(node.value)}
    if isinstance(node, Grouping):
        return {"type": "Grouping", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Unary):
        return {"type": "Unary", "operator": token_to_obj(node.operator), "right": ast_to_obj(node.right)}
    if isinstance(node, Binary):
        return {
            "type": "Binary",
            "left": ast_to_obj(node.left),
            "operator": token_to_obj(node.operator),
            "right": ast_to_obj(node.right),
        }

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def _node_type(obj: Any) -> Any:
    if not isinstance(obj, dict):
        raise ValueError(f"Invalid AST object: {obj!r}")
    return obj.get("type")


def _field(obj: Dict[str, Any], name: str) -> Any:
    if name not in obj:
        raise ValueError(f"{obj.get('type')} node is missing '{name}'")
    return obj[name]


def expr_from_obj(obj: Any) -> Expr:
    """Load a node that sits in an expression position."""
    t = _node_type(obj)
    if t == "Literal":
        return Literal(value_from_obj(_field(obj, "value")))
    if t == "Grouping":
        return Grouping(expr_from_obj(_field(obj, "expression")))
    if t == "Unary":
        op = token_from_obj(_field(obj, "operator"))
        if op.type not in UNARY_OPERATORS:
            raise ValueError(f"{op.type} is not a unary operator")
        return Unary(op, expr_from_obj(_field(obj, "right")))
    if t == "Binary":
        left = expr_from_obj(_field(obj, "left"))
        op = token_from_obj(_field(obj, "operator"))
        if op.type == TokenType.BANG:
            raise ValueError(f"{op.type} is not a binary operator")
        return Binary(left, op, expr_from_obj(_field(obj, "right")))
    raise ValueError(f"Expected an expression, got: {t}")


def stmt_from_obj(obj: Any) -> Stmt:
    """Load a node that sits in a statement position."""
    t = _node_type(obj)
    if t == "Print":
        return Print(expr_from_obj(_field(obj, "expression")))
    if t == "Expression":
        return Expression(expr_from_obj(_field(obj, "expression")))
    raise ValueError(f"Expected a statement, got: {t}")


def program_from_obj(obj: Any) -> List[Stmt]:
    """Load a whole program; the top-level object must be a Program."""
    t = _node_type(obj)
    if t != "Program":
        raise ValueError(f"Expected a Program, got: {t}")
    body = _field(obj, "body")
    if not isinstance(body, list):
        raise ValueError("Program body must be a list")
    return [stmt_from_obj(n) for n in body]


def ast_from_obj(obj: Any) -> Any:
    t = _node_type(obj)
    if t == "Program":
        return program_from_obj(obj)
    if t in ("Print", "Expression"):
        return stmt_from_obj(obj)
    if t in ("Literal", "Grouping", "Unary", "Binary"):
        return expr_from_obj(obj)

    raise ValueError(f"Unknown AST node type: {t}")
