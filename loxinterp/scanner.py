"""Turns source text into a list of tokens."""

from __future__ import annotations

import string

from .errors import ErrorReporter
from .tokens import LiteralValue, Token, TokenType

KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

_SINGLE = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

_WITH_EQUAL = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

_DIGITS = frozenset(string.digits)
_ALPHA = frozenset(string.ascii_letters)


class Scanner:
    """Scans a source string into tokens, reporting lexical errors."""

    def __init__(self, source: str, reporter: ErrorReporter | None = None) -> None:
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source; the last token is always EOF."""
        while not self._at_end():
            self._start = self._current
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        return list(self._tokens)

    def _at_end(self) -> bool:
        return self._current >= len(self.source)

    def _scan_token(self) -> None:
        c = self._advance()
        if c in _SINGLE:
            self._add_token(_SINGLE[c])
        elif c in _WITH_EQUAL:
            single, double = _WITH_EQUAL[c]
            self._add_token(double if self._match("=") else single)
        elif c == "/":
            if self._match("/"):
                while self._peek() != "\n" and not self._at_end():
                    self._advance()
            elif self._match("*"):
                while not self._at_end() and not (
                    self._peek() == "*" and self._peek_next() == "/"
                ):
                    self._advance()
                # Step over the closing "*/".
                self._current = min(self._current + 2, len(self.source))
            else:
                self._add_token(TokenType.SLASH)
        elif c in " \r\t":
            pass
        elif c == "\n":
            self._line += 1
        elif c == '"':
            self._string()
        elif c in _DIGITS:
            self._number()
        elif c in _ALPHA:
            self._identifier()
        else:
            self.reporter.error(self._line, "Unexpected character.")

    def _identifier(self) -> None:
        while self._peek() in _ALPHA:
            self._advance()
        text = self.source[self._start:self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _number(self) -> None:
        while self._peek() in _DIGITS:
            self._advance()
        if self._peek() == "." and self._peek_next() in _DIGITS:
            self._advance()
            while self._peek() in _DIGITS:
                self._advance()
        self._add_token(TokenType.NUMBER, float(self.source[self._start:self._current]))

    def _string(self) -> None:
        while self._peek() != '"' and not self._at_end():
            if self._peek() != "\n":
                self._line += 1
            self._advance()

        if self._at_end():
            self.reporter.error(self._line, "Unterminated string.")
            return

        self._advance()
        self._add_token(TokenType.STRING, self.source[self._start + 1:self._current - 1])

    def _peek(self) -> str:
        return "\0" if self._at_end() else self.source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self.source):
            return "\0"
        return self.source[self._current + 1]

    def _match(self, expected: str) -> bool:
        if self._at_end() or self.source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _advance(self) -> str:
        c = self.source[self._current]
        self._current += 1
        return c

    def _add_token(self, token_type: TokenType, literal: LiteralValue = None) -> None:
        text = self.source[self._start:self._current]
        self._tokens.append(Token(token_type, text, literal, self._line))