"""Module defining the statements which separate independent expressions."""
from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, TypeVar

from .expressions import SyntaxNode

T = TypeVar("T")

if TYPE_CHECKING:
    from boolfold.structures.visitors.interfaces import SyntaxNodeVisitorInterface


class Statement(SyntaxNode, ABC):
    """Abstract base class for statements."""


@dataclass(frozen=True)
class LetStatement(Statement):
    """Represents `let name = initializer;` with an optional initializer."""

    INITIALIZER: ClassVar[int] = 0

    name: str

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_let_statement(node)


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    """Represents an expression terminated by a semicolon."""

    EXPRESSION: ClassVar[int] = 0

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_expression_statement(node)
