from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=
    MINUS = auto()  # -
    PLUS = auto()  # +
    SLASH = auto()  # /
    STAR = auto()  # *

    def __str__(self):
        return self.name

    __repr__ = __str__


LEXEMES = {
    TokenType.BANG: "!",
    TokenType.BANG_EQUAL: "!=",
    TokenType.EQUAL_EQUAL: "==",
    TokenType.GREATER: ">",
    TokenType.GREATER_EQUAL: ">=",
    TokenType.LESS: "<",
    TokenType.LESS_EQUAL: "<=",
    TokenType.MINUS: "-",
    TokenType.PLUS: "+",
    TokenType.SLASH: "/",
    TokenType.STAR: "*",
}


@dataclass(frozen=True)
class Token:
    """An operator token. Only the location fields are used for reporting."""
    type: TokenType
    lexeme: str
    line: int
    column: int = 0

    def __str__(self):
        return f"<{self.type}: {self.lexeme!r} at {self.line}:{self.column}>"


def operator(kind: TokenType, line: int = 1, column: int = 0) -> Token:
    """Build an operator token with its canonical lexeme.

    Convenience for hosts that construct syntax trees without the parser.
    """
    return Token(kind, LEXEMES[kind], line, column)
