"""Variable scopes chained from the innermost block out to the globals."""

from __future__ import annotations

from typing import Any

from .errors import LoxRuntimeError
from .tokens import Token


class Environment:
    """A mapping of variable names to values with an optional enclosing scope."""

    def __init__(self, enclosing: Environment | None = None) -> None:
        self.enclosing = enclosing
        self._values: dict[str, Any] = {}

    def define(self, name: str, value: Any) -> None:
        """Bind a name in this scope; an existing binding here is kept."""
        self._values.setdefault(name, value)

    def get(self, name: Token) -> Any:
        """Look a variable up in this scope and then in the enclosing ones."""
        scope: Environment | None = self
        while scope is not None:
            if name.lexeme in scope._values:
                return scope._values[name.lexeme]
            scope = scope.enclosing
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def assign(self, name: Token, value: Any) -> None:
        """Rebind the nearest existing variable of that name."""
        scope: Environment | None = self
        while scope is not None:
            if name.lexeme in scope._values:
                scope._values[name.lexeme] = value
                return
            scope = scope.enclosing
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")