import sys
from typing import Optional, TextIO

from loxcore.errors import LoxRuntimeError, LoxSyntaxError


class ErrorReporter:
    """Collects and displays errors on behalf of the host.

    The host owns the reporter and reads its flags afterwards, e.g. to pick
    a process exit code.
    """
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.had_error = False
        self.had_runtime_error = False

    def _write(self, text: str):
        print(text, file=self.stream if self.stream is not None else sys.stderr)

    def runtime_error(self, error: LoxRuntimeError):
        self._write(f"{error.message}\n[line {error.token.line}]")
        self.had_runtime_error = True

    def syntax_error(self, error: LoxSyntaxError):
        self._write(f"[line {error.line}] Error: {error.message}")
        self.had_error = True

    def reset(self):
        self.had_error = False
        self.had_runtime_error = False
