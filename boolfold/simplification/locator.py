"""Module searching the outermost simplifiable boolean expression around a node."""
from typing import Optional

from boolfold.simplification.evaluation import BooleanEvaluator
from boolfold.simplification.purity import PurityAnalyzer
from boolfold.structures.nodes import SHORT_CIRCUIT_OPERATORS, BinaryExpression, BinaryOperator, Literal
from boolfold.structures.tree import SyntaxTree
from boolfold.structures.tristate import BoolValue, may_discard

# The value x for which `e op x` equals `e`.
_IDENTITY_ELEMENTS = {BinaryOperator.logical_and: BoolValue.true, BinaryOperator.logical_or: BoolValue.false}


class SimplificationLocator:
    """Find expressions which can be simplified by constant folding and short-circuit rules."""

    def __init__(self, tree: SyntaxTree):
        self._tree = tree
        self._evaluator = BooleanEvaluator(tree)
        self._purity = PurityAnalyzer(tree)

    def find_target(self, node: int) -> Optional[int]:
        """
        Return the outermost simplifiable expression enclosing the given node.

        The search starts at the innermost expression at the given node, i.e. the node itself or its
        closest expression ancestor, and stops at the first ancestor which is no expression (a statement).
        """
        target = None
        for ancestor in self._expression_ancestors(node):
            if self.is_simplifiable(ancestor):
                target = ancestor
        return target

    def is_simplifiable(self, node: int) -> bool:
        """Check whether the given expression can be simplified by the rewriter."""
        expr = self._tree[node]
        if not isinstance(expr, Literal) and self._evaluator.evaluate(node).is_known:
            return True
        if not isinstance(expr, BinaryExpression) or expr.operation not in SHORT_CIRCUIT_OPERATORS:
            return False
        left = self._tree.child(node, BinaryExpression.LEFT)
        right = self._tree.child(node, BinaryExpression.RIGHT)
        if left is None or right is None:
            return False
        left_value, right_value = self._evaluator.evaluate(left), self._evaluator.evaluate(right)
        if left_value.is_known:
            return True
        if right_value is _IDENTITY_ELEMENTS[expr.operation]:
            # Only the constant right operand is dropped.
            return True
        return may_discard(self._purity.is_pure(left)) and may_discard(self._purity.is_pure(right)) and right_value.is_known

    def _expression_ancestors(self, node: int):
        """Iterate the innermost expression at the given node and all its expression ancestors."""
        ancestors = self._tree.ancestors(node)
        for ancestor in ancestors:
            if self._tree.is_expression(ancestor):
                yield ancestor
                break
        for ancestor in ancestors:
            if not self._tree.is_expression(ancestor):
                return
            yield ancestor
