import pytest
from boolfold.structures.nodes import (
    BinaryExpression,
    BinaryOperator,
    CallExpression,
    ExpressionStatement,
    Literal,
    ParenExpression,
    PathExpression,
    UnaryExpression,
    UnaryOperator,
)
from boolfold.structures.tree import SyntaxTree


class TreeBuilder:
    """Shorthands for assembling small syntax trees."""

    def __init__(self):
        self.tree = SyntaxTree()

    def lit(self, value) -> int:
        return self.tree.add(Literal(value))

    def path(self, name: str) -> int:
        return self.tree.add(PathExpression(name))

    def call(self, name: str, *arguments: int) -> int:
        return self.tree.add(CallExpression(), self.path(name), *arguments)

    def binary(self, operation: BinaryOperator, left, right) -> int:
        return self.tree.add(BinaryExpression(operation), left, right)

    def and_(self, left, right) -> int:
        return self.binary(BinaryOperator.logical_and, left, right)

    def or_(self, left, right) -> int:
        return self.binary(BinaryOperator.logical_or, left, right)

    def not_(self, operand) -> int:
        return self.tree.add(UnaryExpression.of(UnaryOperator.not_), operand)

    def paren(self, inner) -> int:
        return self.tree.add(ParenExpression(), inner)

    def statement(self, expression) -> int:
        return self.tree.add(ExpressionStatement(), expression)


@pytest.fixture
def build() -> TreeBuilder:
    return TreeBuilder()
