"""Module evaluating boolean expressions made of literals and logic operators."""
from typing import Optional

from boolfold.structures.nodes import BinaryExpression, BinaryOperator, Literal, ParenExpression, UnaryExpression, UnaryOperator
from boolfold.structures.tristate import BoolValue
from boolfold.structures.visitors.interfaces import SyntaxNodeVisitorInterface


class BooleanEvaluator(SyntaxNodeVisitorInterface[BoolValue]):
    """
    Compute the value of boolean expressions, if it is statically known.

    Only boolean literals, parentheses, `!`, `&&`, `||` and `^` take part in the evaluation.
    `&&` and `||` are evaluated short-circuit, so `false && <anything>` is false even if the
    right operand is missing. Everything else, including comparisons and paths, is unknown.
    """

    def evaluate(self, node: Optional[int]) -> BoolValue:
        """Return the value of the given node; an empty slot is unknown."""
        if node is None:
            return BoolValue.unknown
        return self.visit(node)

    def visit_literal(self, node: int) -> BoolValue:
        literal: Literal = self._tree[node]
        return BoolValue.from_bool(literal.value) if literal.is_boolean else BoolValue.unknown

    def visit_binary_expression(self, node: int) -> BoolValue:
        left = self._tree.child(node, BinaryExpression.LEFT)
        right = self._tree.child(node, BinaryExpression.RIGHT)
        match self._tree[node].operation:
            case BinaryOperator.logical_and:
                if (lhs := self.evaluate(left)) is not BoolValue.true:
                    return lhs
                return self.evaluate(right)
            case BinaryOperator.logical_or:
                if (lhs := self.evaluate(left)) is not BoolValue.false:
                    return lhs
                return self.evaluate(right)
            case BinaryOperator.bitwise_xor:
                if (lhs := self.evaluate(left)) is BoolValue.unknown:
                    return lhs
                return lhs ^ self.evaluate(right)
            case _:
                return BoolValue.unknown

    def visit_unary_expression(self, node: int) -> BoolValue:
        expr: UnaryExpression = self._tree[node]
        if expr.operation != UnaryOperator.not_:
            return BoolValue.unknown
        return ~self.evaluate(self._tree.child(node, UnaryExpression.OPERAND))

    def visit_paren_expression(self, node: int) -> BoolValue:
        return self.evaluate(self._tree.child(node, ParenExpression.INNER))

    def _unknown(self, node: int) -> BoolValue:
        return BoolValue.unknown

    visit_array_expression = _unknown
    visit_tuple_expression = _unknown
    visit_struct_literal = _unknown
    visit_field_access = _unknown
    visit_path_expression = _unknown
    visit_qualified_path_expression = _unknown
    visit_unit_expression = _unknown
    visit_block_expression = _unknown
    visit_cast_expression = _unknown
    visit_call_expression = _unknown
    visit_for_expression = _unknown
    visit_if_expression = _unknown
    visit_index_expression = _unknown
    visit_lambda_expression = _unknown
    visit_loop_expression = _unknown
    visit_macro_expression = _unknown
    visit_match_expression = _unknown
    visit_method_call_expression = _unknown
    visit_range_expression = _unknown
    visit_while_expression = _unknown
    visit_break_expression = _unknown
    visit_continue_expression = _unknown
    visit_return_expression = _unknown
    visit_try_expression = _unknown
    visit_let_statement = _unknown
    visit_expression_statement = _unknown
