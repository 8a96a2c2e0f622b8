"""Expression and statement syntax trees with their visitor interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from .tokens import LiteralValue, Token


class ExprVisitor(ABC):
    """Operations over every kind of expression."""

    @abstractmethod
    def visit_binary_expr(self, expr: Binary) -> Any: ...

    @abstractmethod
    def visit_assign_expr(self, expr: Assign) -> Any: ...

    @abstractmethod
    def visit_grouping_expr(self, expr: Grouping) -> Any: ...

    @abstractmethod
    def visit_literal_expr(self, expr: Literal) -> Any: ...

    @abstractmethod
    def visit_logical_expr(self, expr: Logical) -> Any: ...

    @abstractmethod
    def visit_unary_expr(self, expr: Unary) -> Any: ...

    @abstractmethod
    def visit_variable_expr(self, expr: Variable) -> Any: ...


class StmtVisitor(ABC):
    """Operations over every kind of statement."""

    @abstractmethod
    def visit_expression_stmt(self, stmt: Expression) -> Any: ...

    @abstractmethod
    def visit_if_stmt(self, stmt: If) -> Any: ...

    @abstractmethod
    def visit_block_stmt(self, stmt: Block) -> Any: ...

    @abstractmethod
    def visit_print_stmt(self, stmt: Print) -> Any: ...

    @abstractmethod
    def visit_var_stmt(self, stmt: Var) -> Any: ...

    @abstractmethod
    def visit_while_stmt(self, stmt: While) -> Any: ...


class Expr(ABC):
    """Base of all expression nodes."""

    @abstractmethod
    def accept(self, visitor: ExprVisitor) -> Any:
        """Dispatch to the visitor method for this node."""


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    op: Token
    right: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_binary_expr(self)


@dataclass(frozen=True)
class Assign(Expr):
    name: Token
    value: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_assign_expr(self)


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_grouping_expr(self)


@dataclass(frozen=True)
class Literal(Expr):
    value: LiteralValue

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_literal_expr(self)


@dataclass(frozen=True)
class Logical(Expr):
    left: Expr
    op: Token
    right: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_logical_expr(self)


@dataclass(frozen=True)
class Unary(Expr):
    op: Token
    right: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_unary_expr(self)


@dataclass(frozen=True)
class Variable(Expr):
    name: Token

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_variable_expr(self)


class Stmt(ABC):
    """Base of all statement nodes."""

    @abstractmethod
    def accept(self, visitor: StmtVisitor) -> Any:
        """Dispatch to the visitor method for this node."""


@dataclass(frozen=True)
class Expression(Stmt):
    expression: Expr

    def accept(self, visitor: StmtVisitor) -> Any:
        return visitor.visit_expression_stmt(self)


@dataclass(frozen=True)
class If(Stmt):
    condition: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt] = None

    def accept(self, visitor: StmtVisitor) -> Any:
        return visitor.visit_if_stmt(self)


@dataclass(frozen=True)
class Block(Stmt):
    statements: list[Optional[Stmt]]

    def accept(self, visitor: StmtVisitor) -> Any:
        return visitor.visit_block_stmt(self)


@dataclass(frozen=True)
class Print(Stmt):
    expression: Expr

    def accept(self, visitor: StmtVisitor) -> Any:
        return visitor.visit_print_stmt(self)


@dataclass(frozen=True)
class Var(Stmt):
    name: Token
    initializer: Optional[Expr] = None

    def accept(self, visitor: StmtVisitor) -> Any:
        return visitor.visit_var_stmt(self)


@dataclass(frozen=True)
class While(Stmt):
    condition: Expr
    body: Stmt

    def accept(self, visitor: StmtVisitor) -> Any:
        return visitor.visit_while_stmt(self)