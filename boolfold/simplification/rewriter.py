"""Module replacing a simplifiable expression by its simplified form."""
import logging

from boolfold.backend.expressiongenerator import ExpressionGenerator
from boolfold.simplification.evaluation import BooleanEvaluator
from boolfold.structures.factory import NodeFactory
from boolfold.structures.nodes import SHORT_CIRCUIT_OPERATORS, BinaryExpression, BinaryOperator
from boolfold.structures.tree import SyntaxTree
from boolfold.structures.tristate import BoolValue


class SimplificationError(Exception):
    """Base class of all errors raised while simplifying."""
    pass


class InconsistentSimplificationError(SimplificationError):
    """Used to indicate that an expression deemed simplifiable can not be rewritten."""
    pass


class BooleanRewriter:
    """
    Rewrite simplifiable boolean expressions.

    - `<constant expression> -> true|false`
    - `true && e -> e`, `false || e -> e`
    - `e && true -> e`, `e || false -> e`
    - `e && false -> false`, `e || true -> true`
    """

    def __init__(self, tree: SyntaxTree):
        self._tree = tree
        self._evaluator = BooleanEvaluator(tree)
        self._factory = NodeFactory(tree)

    def rewrite(self, target: int) -> int:
        """
        Replace the given expression with its simplified form.

        :param target: An expression for which SimplificationLocator.is_simplifiable holds.
        :return: The id of the node now occupying the position of the target.
        :raises:
            InconsistentSimplificationError: Thrown if the target can not be simplified. The tree is left untouched.
        """
        if (value := self._evaluator.evaluate(target)).is_known:
            return self._replace(target, self._factory.create_boolean(value.to_bool()))

        expr = self._tree[target]
        if not isinstance(expr, BinaryExpression) or expr.operation not in SHORT_CIRCUIT_OPERATORS:
            raise InconsistentSimplificationError(f"Can't simplify '{self._render(target)}' of unknown value.")
        left = self._tree.child(target, BinaryExpression.LEFT)
        right = self._tree.child(target, BinaryExpression.RIGHT)
        if left is None or right is None:
            raise InconsistentSimplificationError(f"Can't simplify '{self._render(target)}' with a missing operand.")

        if (left_value := self._evaluator.evaluate(left)).is_known:
            # A left operand deciding the whole expression is handled by the evaluation above.
            expected = BoolValue.true if expr.operation == BinaryOperator.logical_and else BoolValue.false
            if left_value is not expected:
                raise InconsistentSimplificationError(f"Left operand of '{self._render(target)}' should be {expected.value}, got {left_value.value}.")
            return self._replace(target, right)

        match expr.operation, self._evaluator.evaluate(right):
            case BinaryOperator.logical_and, BoolValue.false:
                return self._replace(target, self._factory.create_boolean(False))
            case BinaryOperator.logical_and, BoolValue.true:
                return self._replace(target, left)
            case BinaryOperator.logical_or, BoolValue.false:
                return self._replace(target, left)
            case BinaryOperator.logical_or, BoolValue.true:
                return self._replace(target, self._factory.create_boolean(True))
            case _:
                raise InconsistentSimplificationError(f"Can't simplify '{self._render(target)}', neither operand has a known value.")

    def _replace(self, replacee: int, replacement: int) -> int:
        if logging.getLogger().isEnabledFor(logging.DEBUG):
            logging.debug(f"[{self.__class__.__name__}] Substituting '{self._render(replacee)}' with '{self._render(replacement)}'")
        self._tree.replace(replacee, replacement)
        return replacement

    def _render(self, node: int) -> str:
        return ExpressionGenerator.render(self._tree, node)
