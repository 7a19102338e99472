"""Module classifying expressions by their side effects."""
from typing import Optional

from boolfold.structures.nodes import ArrayExpression, FieldAccess, ParenExpression, StructLiteral
from boolfold.structures.tristate import PurityValue
from boolfold.structures.visitors.interfaces import SyntaxNodeVisitorInterface


class PurityAnalyzer(SyntaxNodeVisitorInterface[PurityValue]):
    """
    Check if an expression is functionally pure (has no side effects and throws no errors).

    The analysis is purely syntactic and conservative: whenever the purity depends on semantics,
    e.g. on a possibly overloaded operator, the result is unknown. Callers must not discard
    expressions which are not pure, see may_discard.
    """

    def is_pure(self, node: Optional[int]) -> PurityValue:
        """Return the purity of the given node; an empty slot is unknown."""
        if node is None:
            return PurityValue.unknown
        return self.visit(node)

    def visit_array_expression(self, node: int) -> PurityValue:
        if self._tree[node].repeat:
            # [expr; size], size is a compile-time constant
            return self.is_pure(self._tree.child(node, ArrayExpression.VALUE))
        return self._all_pure(node)

    def visit_tuple_expression(self, node: int) -> PurityValue:
        return self._all_pure(node)

    def visit_struct_literal(self, node: int) -> PurityValue:
        expr: StructLiteral = self._tree[node]
        if expr.has_spread:
            # TODO: handle the update case `Point { y: 0, ..base }`
            return PurityValue.unknown
        return PurityValue.all_of(self.is_pure(self._tree.child(node, slot)) for slot in range(len(expr.fields)))

    def visit_field_access(self, node: int) -> PurityValue:
        return self.is_pure(self._tree.child(node, FieldAccess.BASE))

    def visit_paren_expression(self, node: int) -> PurityValue:
        return self.is_pure(self._tree.child(node, ParenExpression.INNER))

    def _impure(self, node: int) -> PurityValue:
        return PurityValue.impure

    # Changes execution flow
    visit_break_expression = _impure
    visit_continue_expression = _impure
    visit_return_expression = _impure
    visit_try_expression = _impure

    def _pure(self, node: int) -> PurityValue:
        return PurityValue.pure

    visit_path_expression = _pure
    visit_qualified_path_expression = _pure
    visit_literal = _pure
    visit_unit_expression = _pure

    def _unknown(self, node: int) -> PurityValue:
        return PurityValue.unknown

    visit_binary_expression = _unknown  # operator may be overloaded
    visit_block_expression = _unknown  # would require analyzing every statement
    visit_cast_expression = _unknown  # may panic
    visit_call_expression = _unknown  # callee and all arguments must be pure
    visit_for_expression = _unknown
    visit_if_expression = _unknown
    visit_index_expression = _unknown  # Index may be overloaded, panics if out of bounds
    visit_lambda_expression = _unknown
    visit_loop_expression = _unknown
    visit_macro_expression = _unknown
    visit_match_expression = _unknown
    visit_method_call_expression = _unknown
    visit_range_expression = _unknown
    visit_unary_expression = _unknown  # operator may be overloaded
    visit_while_expression = _unknown
    visit_let_statement = _unknown
    visit_expression_statement = _unknown

    def _all_pure(self, node: int) -> PurityValue:
        return PurityValue.all_of(self.is_pure(child) for child in self._tree.children(node))
