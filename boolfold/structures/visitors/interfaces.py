"""Module for visitor ABCs."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

T = TypeVar("T")

if TYPE_CHECKING:
    from boolfold.structures.tree import SyntaxTree


class SyntaxNodeVisitorInterface(ABC, Generic[T]):
    """
    Interface for visiting the nodes of a SyntaxTree.

    There is one handler per node kind, so a visitor can only be instantiated once it handles all of them.
    Handlers receive the id of the visited node and look up payload and children in the tree.
    """

    def __init__(self, tree: SyntaxTree):
        self._tree = tree

    @property
    def tree(self) -> SyntaxTree:
        """Return the tree visited."""
        return self._tree

    def visit(self, node: int) -> T:
        """Visit a node, dispatching to the correct handler."""
        return self._tree[node].accept(self, node)

    @abstractmethod
    def visit_literal(self, node: int) -> T:
        """Visit a Literal."""

    @abstractmethod
    def visit_binary_expression(self, node: int) -> T:
        """Visit a BinaryExpression."""

    @abstractmethod
    def visit_unary_expression(self, node: int) -> T:
        """Visit a UnaryExpression."""

    @abstractmethod
    def visit_paren_expression(self, node: int) -> T:
        """Visit a ParenExpression."""

    @abstractmethod
    def visit_array_expression(self, node: int) -> T:
        """Visit an ArrayExpression."""

    @abstractmethod
    def visit_tuple_expression(self, node: int) -> T:
        """Visit a TupleExpression."""

    @abstractmethod
    def visit_struct_literal(self, node: int) -> T:
        """Visit a StructLiteral."""

    @abstractmethod
    def visit_field_access(self, node: int) -> T:
        """Visit a FieldAccess."""

    @abstractmethod
    def visit_path_expression(self, node: int) -> T:
        """Visit a PathExpression."""

    @abstractmethod
    def visit_qualified_path_expression(self, node: int) -> T:
        """Visit a QualifiedPathExpression."""

    @abstractmethod
    def visit_unit_expression(self, node: int) -> T:
        """Visit a UnitExpression."""

    @abstractmethod
    def visit_block_expression(self, node: int) -> T:
        """Visit a BlockExpression."""

    @abstractmethod
    def visit_cast_expression(self, node: int) -> T:
        """Visit a CastExpression."""

    @abstractmethod
    def visit_call_expression(self, node: int) -> T:
        """Visit a CallExpression."""

    @abstractmethod
    def visit_for_expression(self, node: int) -> T:
        """Visit a ForExpression."""

    @abstractmethod
    def visit_if_expression(self, node: int) -> T:
        """Visit an IfExpression."""

    @abstractmethod
    def visit_index_expression(self, node: int) -> T:
        """Visit an IndexExpression."""

    @abstractmethod
    def visit_lambda_expression(self, node: int) -> T:
        """Visit a LambdaExpression."""

    @abstractmethod
    def visit_loop_expression(self, node: int) -> T:
        """Visit a LoopExpression."""

    @abstractmethod
    def visit_macro_expression(self, node: int) -> T:
        """Visit a MacroExpression."""

    @abstractmethod
    def visit_match_expression(self, node: int) -> T:
        """Visit a MatchExpression."""

    @abstractmethod
    def visit_method_call_expression(self, node: int) -> T:
        """Visit a MethodCallExpression."""

    @abstractmethod
    def visit_range_expression(self, node: int) -> T:
        """Visit a RangeExpression."""

    @abstractmethod
    def visit_while_expression(self, node: int) -> T:
        """Visit a WhileExpression."""

    @abstractmethod
    def visit_break_expression(self, node: int) -> T:
        """Visit a BreakExpression."""

    @abstractmethod
    def visit_continue_expression(self, node: int) -> T:
        """Visit a ContinueExpression."""

    @abstractmethod
    def visit_return_expression(self, node: int) -> T:
        """Visit a ReturnExpression."""

    @abstractmethod
    def visit_try_expression(self, node: int) -> T:
        """Visit a TryExpression."""

    @abstractmethod
    def visit_let_statement(self, node: int) -> T:
        """Visit a LetStatement."""

    @abstractmethod
    def visit_expression_statement(self, node: int) -> T:
        """Visit an ExpressionStatement."""
