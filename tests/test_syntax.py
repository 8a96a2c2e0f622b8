import pytest

from loxinterp.syntax import (
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
from loxinterp.tokens import Token, TokenType


class Recorder(ExprVisitor, StmtVisitor):
    def visit_binary_expr(self, expr):
        return ("binary", expr)

    def visit_assign_expr(self, expr):
        return ("assign", expr)

    def visit_grouping_expr(self, expr):
        return ("grouping", expr)

    def visit_literal_expr(self, expr):
        return ("literal", expr)

    def visit_logical_expr(self, expr):
        return ("logical", expr)

    def visit_unary_expr(self, expr):
        return ("unary", expr)

    def visit_variable_expr(self, expr):
        return ("variable", expr)

    def visit_expression_stmt(self, stmt):
        return ("expression", stmt)

    def visit_if_stmt(self, stmt):
        return ("if", stmt)

    def visit_block_stmt(self, stmt):
        return ("block", stmt)

    def visit_print_stmt(self, stmt):
        return ("print", stmt)

    def visit_var_stmt(self, stmt):
        return ("var", stmt)

    def visit_while_stmt(self, stmt):
        return ("while", stmt)


NAME = Token(TokenType.IDENTIFIER, "x", None, 1)
PLUS = Token(TokenType.PLUS, "+", None, 1)
OR = Token(TokenType.OR, "or", None, 1)
MINUS = Token(TokenType.MINUS, "-", None, 1)


def test_accept_dispatches_to_matching_method():
    one = Literal(1.0)
    nodes = [
        ("binary", Binary(one, PLUS, one)),
        ("assign", Assign(NAME, one)),
        ("grouping", Grouping(one)),
        ("literal", one),
        ("logical", Logical(one, OR, one)),
        ("unary", Unary(MINUS, one)),
        ("variable", Variable(NAME)),
        ("expression", Expression(one)),
        ("if", If(one, Print(one))),
        ("block", Block([Print(one)])),
        ("print", Print(one)),
        ("var", Var(NAME, one)),
        ("while", While(one, Print(one))),
    ]
    recorder = Recorder()
    for kind, node in nodes:
        result_kind, visited = node.accept(recorder)
        assert result_kind == kind
        assert visited is node


def test_nodes_compare_by_value():
    assert Binary(Literal(2.0), PLUS, Variable(NAME)) == Binary(
        Literal(2.0), PLUS, Variable(NAME)
    )
    assert Literal("a") != Literal("b")


def test_optional_children_default_to_none():
    assert If(Literal(1.0), Print(Literal(1.0))).else_branch is None
    assert Var(NAME).initializer is None


def test_block_keeps_statement_order():
    first, second = Print(Literal(1.0)), Print(Literal(2.0))
    block = Block([first, second])
    assert block.statements == [first, second]


def test_base_classes_are_abstract():
    with pytest.raises(TypeError):
        Expr()
    with pytest.raises(TypeError):
        Stmt()


def test_incomplete_visitor_cannot_be_created():
    class Partial(ExprVisitor):
        def visit_binary_expr(self, expr):
            return None

    node = Grouping(Literal(1.0))
    with pytest.raises(TypeError):
        node.accept(Partial())
    assert node.accept(Recorder()) == ("grouping", node)