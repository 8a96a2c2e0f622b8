"""Error types and the reporter that prints and records errors."""

from __future__ import annotations

import sys
from typing import TextIO

from .tokens import Token, TokenType


class LoxRuntimeError(Exception):
    """An error raised while a program runs, tied to a token."""

    def __init__(self, token: Token, message: str) -> None:
        super().__init__(message)
        self.token = token
        self.message = message


class ParseError(Exception):
    """Raised by the parser to unwind after a syntax error."""


class ErrorReporter:
    """Prints error messages and remembers whether any occurred."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err
        self.had_error = False
        self.had_runtime_error = False

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def report(self, line: int, where: str, message: str) -> None:
        """Print a static error and mark that one happened."""
        print(f"[line {line}] Error{where}: {message}", file=self.err)
        self.had_error = True

    def error(self, line: int, message: str) -> None:
        """Report an error at a line without a location."""
        self.report(line, "", message)

    def token_error(self, token: Token, message: str) -> None:
        """Report an error located at a token."""
        if token.type is TokenType.EOF:
            self.report(token.line, " at end", message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def runtime_error(self, error: LoxRuntimeError) -> None:
        """Print a runtime error and mark that one happened."""
        self.out.write(f"{error.message}\n[line {error.token.line}]")
        self.had_runtime_error = True

    def reset(self) -> None:
        """Forget previously reported errors."""
        self.had_error = False
        self.had_runtime_error = False