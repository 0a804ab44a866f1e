from loxcore.tokens import Token


class LoxRuntimeError(Exception):
    """Raised when an operator is applied to values it does not accept."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


class LoxSyntaxError(Exception):
    """Raised by the parser when source text does not match the grammar."""
    def __init__(self, message: str, line: int, column: int):
        super().__init__(f"{line}:{column}: {message}")
        self.message = message
        self.line = line
        self.column = column
