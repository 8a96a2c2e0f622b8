"""Renders syntax trees as readable text."""

from __future__ import annotations

import sys
from typing import TextIO

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
from .tokens import display_literal


class AstPrinter(ExprVisitor, StmtVisitor):
    """Turns statements and expressions into a debugging representation."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def print(self, stmt: Stmt) -> None:
        """Write the rendering of a statement followed by a newline."""
        print(self.stringify(stmt), file=self.out)

    def stringify(self, stmt: Stmt) -> str:
        """Render a statement."""
        return stmt.accept(self)

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name, *(expr.accept(self) for expr in exprs)]
        return "(" + " ".join(parts) + ")"

    def visit_expression_stmt(self, stmt: Expression) -> str:
        return "EXPR STATEMENT: " + stmt.expression.accept(self)

    def visit_if_stmt(self, stmt: If) -> str:
        then_branch = stmt.then_branch.accept(self)
        condition = stmt.condition.accept(self)
        message = "IF STATEMENT () " + condition + " then " + then_branch
        if stmt.else_branch is not None:
            message += "else " + stmt.else_branch.accept(self)
        return message

    def visit_block_stmt(self, stmt: Block) -> str:
        lines = "".join(
            "\t" + inner.accept(self) + "\n" for inner in stmt.statements if inner is not None
        )
        return "BLOCK STATEMENT: {\n" + lines + "}"

    def visit_print_stmt(self, stmt: Print) -> str:
        return "PRINT STATEMENT: " + stmt.expression.accept(self)

    def visit_var_stmt(self, stmt: Var) -> str:
        return "VAR STATEMENT: " + stmt.name.lexeme

    def visit_while_stmt(self, stmt: While) -> str:
        condition = stmt.condition.accept(self)
        body = stmt.body.accept(self)
        return "WHILE STATEMENT: (" + condition + ")\n{\n" + body + "}\n"

    def visit_binary_expr(self, expr: Binary) -> str:
        return self._parenthesize(expr.op.lexeme, expr.left, expr.right)

    def visit_assign_expr(self, expr: Assign) -> str:
        return "(" + expr.name.lexeme + ") <- " + expr.value.accept(self)

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return self._parenthesize("group", expr.expression)

    def visit_literal_expr(self, expr: Literal) -> str:
        return display_literal(expr.value)

    def visit_unary_expr(self, expr: Unary) -> str:
        return self._parenthesize(expr.op.lexeme, expr.right)

    def visit_logical_expr(self, expr: Logical) -> str:
        return self._parenthesize(expr.op.lexeme, expr.left, expr.right)

    def visit_variable_expr(self, expr: Variable) -> str:
        return "`" + expr.name.lexeme + "`"