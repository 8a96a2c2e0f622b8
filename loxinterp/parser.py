"""Recursive-descent parser turning tokens into statements."""

from __future__ import annotations

from typing import Iterable, Optional

from .errors import ErrorReporter, ParseError
from .syntax import (
    Assign,
    Binary,
    Block,
    Expr,
    Expression,
    Grouping,
    If,
    Literal,
    Logical,
    Print,
    Stmt,
    Unary,
    Var,
    Variable,
    While,
)
from .tokens import Token, TokenType

_STATEMENT_STARTS = frozenset(
    {
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    }
)


class Parser:
    """Parses a token list; declarations that fail to parse become None."""

    def __init__(self, tokens: Iterable[Token], reporter: ErrorReporter | None = None) -> None:
        self._tokens = list(tokens)
        if not self._tokens or self._tokens[-1].type is not TokenType.EOF:
            line = self._tokens[-1].line if self._tokens else 1
            self._tokens.append(Token(TokenType.EOF, "", None, line))
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self._current = 0

    def parse(self) -> list[Optional[Stmt]]:
        """Parse every declaration up to the end of input."""
        statements: list[Optional[Stmt]] = []
        while not self._at_end():
            statements.append(self._declaration())
        return statements

    # Statements.

    def _declaration(self) -> Optional[Stmt]:
        try:
            if self._match(TokenType.VAR):
                return self._var_declaration()
            return self._statement()
        except ParseError:
            self._synchronize()
            return None

    def _var_declaration(self) -> Stmt:
        name = self._consume(TokenType.IDENTIFIER, "Expect variable name.")
        initializer = self._expression() if self._match(TokenType.EQUAL) else None
        self._consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return Var(name, initializer)

    def _statement(self) -> Stmt:
        if self._match(TokenType.PRINT):
            return self._print_statement()
        if self._match(TokenType.LEFT_BRACE):
            return Block(self._block())
        if self._match(TokenType.IF):
            return self._if_statement()
        if self._match(TokenType.WHILE):
            return self._while_statement()
        if self._match(TokenType.FOR):
            return self._for_statement()
        return self._expression_statement()

    def _for_statement(self) -> Stmt:
        self._consume(TokenType.LEFT_PAREN, "Expect '(' after 'for'.")

        initializer: Optional[Stmt]
        if self._match(TokenType.SEMICOLON):
            initializer = None
        elif self._match(TokenType.VAR):
            initializer = self._var_declaration()
        else:
            initializer = self._expression_statement()

        condition = None if self._check(TokenType.SEMICOLON) else self._expression()
        self._consume(TokenType.SEMICOLON, "Expect ';' after loop condition.")

        increment = None if self._check(TokenType.RIGHT_PAREN) else self._expression()
        self._consume(TokenType.RIGHT_PAREN, "Expect ')' after for clauses.")

        body = self._statement()
        if increment is not None:
            body = Block([body, Expression(increment)])
        if condition is None:
            condition = Literal(True)
        body = While(condition, body)
        if initializer is not None:
            body = Block([initializer, body])
        return body

    def _while_statement(self) -> Stmt:
        self._consume(TokenType.LEFT_PAREN, "Expect '(' after 'while'.")
        condition = self._expression()
        self._consume(TokenType.RIGHT_PAREN, "Expect ')' after 'while'.")
        return While(condition, self._statement())

    def _if_statement(self) -> Stmt:
        self._consume(TokenType.LEFT_PAREN, "Expect '(' after if.")
        condition = self._expression()
        self._consume(TokenType.RIGHT_PAREN, "Expect ') after if condition.")
        then_branch = self._statement()
        else_branch = self._statement() if self._match(TokenType.ELSE) else None
        return If(condition, then_branch, else_branch)

    def _block(self) -> list[Optional[Stmt]]:
        statements: list[Optional[Stmt]] = []
        while not self._check(TokenType.RIGHT_BRACE) and not self._at_end():
            statements.append(self._declaration())
        self._consume(TokenType.RIGHT_BRACE, "Expect '}' after block")
        return statements

    def _print_statement(self) -> Stmt:
        value = self._expression()
        self._consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return Print(value)

    def _expression_statement(self) -> Stmt:
        value = self._expression()
        self._consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return Expression(value)

    # Expressions.

    def _expression(self) -> Expr:
        expr = self._assignment()
        while self._match(TokenType.COMMA):
            expr = self._assignment()
        return expr

    def _assignment(self) -> Expr:
        expr = self._logic_or()
        if self._match(TokenType.EQUAL):
            equals = self._previous()
            value = self._assignment()
            if isinstance(expr, Variable):
                return Assign(expr.name, value)
            self._error(equals, "Invalid assignment target")
        return expr

    def _logic_or(self) -> Expr:
        expr = self._logic_and()
        while self._match(TokenType.OR):
            op = self._previous()
            expr = Logical(expr, op, self._logic_and())
        return expr

    def _logic_and(self) -> Expr:
        expr = self._equality()
        while self._match(TokenType.AND):
            op = self._previous()
            expr = Logical(expr, op, self._equality())
        return expr

    def _equality(self) -> Expr:
        expr = self._comparison()
        while self._match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            op = self._previous()
            expr = Binary(expr, op, self._comparison())
        return expr

    def _comparison(self) -> Expr:
        expr = self._term()
        while self._match(
            TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL
        ):
            op = self._previous()
            expr = Binary(expr, op, self._term())
        return expr

    def _term(self) -> Expr:
        expr = self._factor()
        while self._match(TokenType.PLUS, TokenType.MINUS):
            op = self._previous()
            # The right operand is a whole term, so these operators group to the right.
            expr = Binary(expr, op, self._term())
        return expr

    def _factor(self) -> Expr:
        expr = self._unary()
        while self._match(TokenType.SLASH, TokenType.STAR):
            op = self._previous()
            expr = Binary(expr, op, self._unary())
        return expr

    def _unary(self) -> Expr:
        if self._match(TokenType.BANG, TokenType.MINUS):
            op = self._previous()
            return Unary(op, self._unary())
        return self._primary()

    def _primary(self) -> Expr:
        if self._match(TokenType.LEFT_PAREN):
            expr = self._expression()
            self._consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)
        if self._match(TokenType.IDENTIFIER):
            return Variable(self._previous())
        if self._match(TokenType.FALSE):
            return Literal(False)
        if self._match(TokenType.TRUE):
            return Literal(True)
        if self._match(TokenType.NIL):
            return Literal(None)
        if self._match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self._previous().literal)
        raise self._error(self._peek(), "Expect expression.")

    # Token stream helpers.

    def _match(self, *types: TokenType) -> bool:
        if any(self._check(token_type) for token_type in types):
            self._advance()
            return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        return not self._at_end() and self._peek().type is token_type

    def _at_end(self) -> bool:
        return self._current >= len(self._tokens) - 1

    def _peek(self) -> Token:
        return self._tokens[self._current]

    def _previous(self) -> Token:
        return self._tokens[self._current - 1]

    def _advance(self) -> Token:
        if not self._at_end():
            self._current += 1
        return self._previous()

    def _consume(self, token_type: TokenType, message: str) -> Token:
        if self._check(token_type):
            return self._advance()
        raise self._error(self._peek(), message)

    def _error(self, token: Token, message: str) -> ParseError:
        self.reporter.token_error(token, message)
        return ParseError(message)

    def _synchronize(self) -> None:
        self._advance()
        while not self._at_end():
            if self._previous().type is TokenType.SEMICOLON:
                return
            if self._peek().type in _STATEMENT_STARTS:
                return
            self._advance()