"""Tree-walking evaluation of statements and expressions."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterable, Optional, TextIO

from .environment import Environment
from .errors import ErrorReporter, LoxRuntimeError
from .syntax import (
    Assign,
    Binary,
    Block,
    Expr,
    Expression,
    ExprVisitor,
    Grouping,
    If,
    Literal,
    Logical,
    Print,
    Stmt,
    StmtVisitor,
    Unary,
    Var,
    Variable,
    While,
)
from .tokens import Token, TokenType


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_number(value: float) -> str:
    return f"{float(value):f}"


def is_truthy(value: Any) -> bool:
    """nil and false are falsy; everything else is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(left: Any, right: Any) -> bool:
    """Equality as the language defines it, including string-number comparison."""
    if left is None:
        return right is None
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    if _is_number(left) and _is_number(right):
        return float(left) == float(right)
    if isinstance(left, str) and _is_number(right):
        return left == _format_number(right)
    if _is_number(left) and isinstance(right, str):
        return right == _format_number(left)
    return False


def stringify(value: Any) -> str:
    """Render a runtime value as text."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if _is_number(value):
        return _format_number(value)
    if isinstance(value, str):
        return value
    return ""


_NUMERIC_OPS: dict[TokenType, Callable[[float, float], Any]] = {
    TokenType.GREATER: operator.gt,
    TokenType.GREATER_EQUAL: operator.ge,
    TokenType.LESS: operator.lt,
    TokenType.LESS_EQUAL: operator.le,
    TokenType.MINUS: operator.sub,
    TokenType.STAR: operator.mul,
}


class Interpreter(ExprVisitor, StmtVisitor):
    """Executes statements, keeping global state between calls."""

    def __init__(
        self, reporter: ErrorReporter | None = None, out: TextIO | None = None
    ) -> None:
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self._out = out
        self.globals = Environment()
        self._environment = self.globals

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def interpret(self, statements: Iterable[Optional[Stmt]]) -> None:
        """Run statements in order, reporting the first runtime error."""
        try:
            for statement in statements:
                self._execute(statement)
        except LoxRuntimeError as error:
            self.reporter.runtime_error(error)

    def _execute(self, statement: Optional[Stmt]) -> None:
        if statement is not None:
            statement.accept(self)

    def _evaluate(self, expr: Expr) -> Any:
        return expr.accept(self)

    def _execute_block(self, statements: Iterable[Optional[Stmt]], env: Environment) -> None:
        previous = self._environment
        self._environment = env
        try:
            for statement in statements:
                self._execute(statement)
        finally:
            self._environment = previous

    def visit_while_stmt(self, stmt: While) -> None:
        while is_truthy(self._evaluate(stmt.condition)):
            self._execute(stmt.body)

    def visit_if_stmt(self, stmt: If) -> None:
        if is_truthy(self._evaluate(stmt.condition)):
            self._execute(stmt.then_branch)
        elif stmt.else_branch is not None:
            self._execute(stmt.else_branch)

    def visit_block_stmt(self, stmt: Block) -> None:
        self._execute_block(stmt.statements, Environment(self._environment))

    def visit_expression_stmt(self, stmt: Expression) -> None:
        self._evaluate(stmt.expression)

    def visit_print_stmt(self, stmt: Print) -> None:
        value = self._evaluate(stmt.expression)
        text = f"{float(value):.2f}" if _is_number(value) else stringify(value)
        print(text, file=self.out)

    def visit_var_stmt(self, stmt: Var) -> None:
        value = None if stmt.initializer is None else self._evaluate(stmt.initializer)
        self._environment.define(stmt.name.lexeme, value)

    def visit_logical_expr(self, expr: Logical) -> Any:
        left = self._evaluate(expr.left)
        if expr.op.type is TokenType.OR:
            if is_truthy(left):
                return left
        elif not is_truthy(left):
            return left
        return self._evaluate(expr.right)

    def visit_variable_expr(self, expr: Variable) -> Any:
        return self._environment.get(expr.name)

    def visit_assign_expr(self, expr: Assign) -> Any:
        value = self._evaluate(expr.value)
        self._environment.assign(expr.name, value)
        return value

    def visit_literal_expr(self, expr: Literal) -> Any:
        return expr.value

    def visit_grouping_expr(self, expr: Grouping) -> Any:
        return self._evaluate(expr.expression)

    def visit_unary_expr(self, expr: Unary) -> Any:
        right = self._evaluate(expr.right)
        if expr.op.type is TokenType.MINUS:
            _check_number_operand(expr.op, right)
            # The operand is checked but returned without negation.
            return right
        if expr.op.type is TokenType.BANG:
            return not is_truthy(right)
        return None

    def visit_binary_expr(self, expr: Binary) -> Any:
        left = self._evaluate(expr.left)
        right = self._evaluate(expr.right)
        op = expr.op.type

        if op in _NUMERIC_OPS:
            _check_number_operands(expr.op, left, right)
            return _NUMERIC_OPS[op](left, right)
        if op is TokenType.BANG_EQUAL:
            return not is_equal(left, right)
        if op is TokenType.EQUAL_EQUAL:
            return is_equal(left, right)
        if op is TokenType.SLASH:
            _check_number_operands(expr.op, left, right)
            if right == 0:
                raise LoxRuntimeError(expr.op, "Divide by zero error.")
            return left / right
        if op is TokenType.PLUS:
            if _is_number(left) and _is_number(right):
                return left + right
            if isinstance(left, str) and isinstance(right, str):
                return left + right
            if isinstance(left, str) and _is_number(right):
                return left + _format_number(right)
            raise LoxRuntimeError(expr.op, "Operands must be two numbers or two strings.")
        return None


def _check_number_operand(op: Token, operand: Any) -> None:
    if not _is_number(operand):
        raise LoxRuntimeError(op, "Operand must be a number.")


def _check_number_operands(op: Token, left: Any, right: Any) -> None:
    if not (_is_number(left) and _is_number(right)):
        raise LoxRuntimeError(op, "Operands must be numbers.")