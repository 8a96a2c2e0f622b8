"""Token types, tokens and literal values produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

LiteralValue = Union[None, float, str, bool]


class TokenType(Enum):
    """Every kind of token the scanner can produce."""

    # Single-character tokens.
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character tokens.
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Literals.
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords.
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()

    @property
    def display(self) -> str:
        """The name shown for this type in token dumps."""
        return "__EOF__" if self is TokenType.EOF else self.name


def display_literal(value: LiteralValue) -> str:
    """Render a literal value the way token dumps show it."""
    if value is None:
        return "Nil"
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, (int, float)):
        return f"{float(value):f}"
    return str(value)


@dataclass(frozen=True)
class Token:
    """A lexeme with its type, literal value and source line."""

    type: TokenType
    lexeme: str
    literal: LiteralValue
    line: int

    def __str__(self) -> str:
        text = f"{self.type.display} lexeme: [{self.lexeme}]"
        literal_repr = display_literal(self.literal)
        if literal_repr != "Nil":
            text += f" literal: {{{literal_repr}}}"
        return text