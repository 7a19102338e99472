"""Module implementing tests for the boolean evaluation."""
import pytest
from boolfold.simplification.evaluation import BooleanEvaluator
from boolfold.structures.nodes import BinaryOperator, UnaryExpression, UnaryOperator
from boolfold.structures.tristate import BoolValue


def _evaluate(build, node) -> BoolValue:
    return BooleanEvaluator(build.tree).evaluate(node)


@pytest.mark.parametrize(["value", "expected"], [(True, BoolValue.true), (False, BoolValue.false), (1, BoolValue.unknown), ("true", BoolValue.unknown)])
def test_literal(build, value, expected):
    assert _evaluate(build, build.lit(value)) is expected


def test_empty_slot(build):
    assert BooleanEvaluator(build.tree).evaluate(None) is BoolValue.unknown


@pytest.mark.parametrize(
    ["left", "right", "expected"],
    [
        (True, True, BoolValue.true),
        (True, False, BoolValue.false),
        (False, True, BoolValue.false),
        (False, False, BoolValue.false),
    ],
)
def test_logical_and(build, left, right, expected):
    assert _evaluate(build, build.and_(build.lit(left), build.lit(right))) is expected


@pytest.mark.parametrize(
    ["left", "right", "expected"],
    [
        (True, True, BoolValue.true),
        (True, False, BoolValue.true),
        (False, True, BoolValue.true),
        (False, False, BoolValue.false),
    ],
)
def test_logical_or(build, left, right, expected):
    assert _evaluate(build, build.or_(build.lit(left), build.lit(right))) is expected


class TestShortCircuit:
    """The right operand is only evaluated if the left one does not decide the result."""

    def test_false_and_anything(self, build):
        assert _evaluate(build, build.and_(build.lit(False), build.call("foo"))) is BoolValue.false

    def test_true_or_anything(self, build):
        assert _evaluate(build, build.or_(build.lit(True), build.path("x"))) is BoolValue.true

    def test_missing_right_operand(self, build):
        assert _evaluate(build, build.and_(build.lit(False), None)) is BoolValue.false
        assert _evaluate(build, build.and_(build.lit(True), None)) is BoolValue.unknown
        assert _evaluate(build, build.or_(build.lit(True), None)) is BoolValue.true

    def test_unknown_left_operand(self, build):
        assert _evaluate(build, build.and_(build.path("x"), build.lit(False))) is BoolValue.unknown
        assert _evaluate(build, build.or_(build.path("x"), build.lit(True))) is BoolValue.unknown

    def test_known_left_unknown_right(self, build):
        assert _evaluate(build, build.and_(build.lit(True), build.path("x"))) is BoolValue.unknown


@pytest.mark.parametrize(
    ["left", "right", "expected"],
    [
        (True, True, BoolValue.false),
        (True, False, BoolValue.true),
        (False, True, BoolValue.true),
        (False, False, BoolValue.false),
        (True, None, BoolValue.unknown),
        (None, False, BoolValue.unknown),
    ],
)
def test_xor(build, left, right, expected):
    operands = [build.lit(value) if value is not None else build.path("x") for value in (left, right)]
    assert _evaluate(build, build.binary(BinaryOperator.bitwise_xor, *operands)) is expected


def test_double_negation(build):
    assert _evaluate(build, build.not_(build.not_(build.lit(True)))) is BoolValue.true


def test_negation_of_unknown(build):
    assert _evaluate(build, build.not_(build.path("x"))) is BoolValue.unknown
    assert _evaluate(build, build.not_(None)) is BoolValue.unknown


def test_other_unary_operators(build):
    negative = build.tree.add(UnaryExpression.of(UnaryOperator.minus), build.lit(True))
    assert _evaluate(build, negative) is BoolValue.unknown


def test_parentheses(build):
    assert _evaluate(build, build.paren(build.or_(build.lit(False), build.paren(build.lit(True))))) is BoolValue.true


@pytest.mark.parametrize("operation", [BinaryOperator.equal, BinaryOperator.not_equal, BinaryOperator.bitwise_and, BinaryOperator.bitwise_or])
def test_other_binary_operators(build, operation):
    assert _evaluate(build, build.binary(operation, build.lit(True), build.lit(True))) is BoolValue.unknown


def test_comparisons_are_not_evaluated(build):
    left = build.paren(build.binary(BinaryOperator.equal, build.lit(1), build.lit(1)))
    right = build.paren(build.binary(BinaryOperator.equal, build.lit(2), build.lit(2)))
    assert _evaluate(build, build.and_(left, right)) is BoolValue.unknown


def test_other_kinds(build):
    assert _evaluate(build, build.call("is_ready")) is BoolValue.unknown
    assert _evaluate(build, build.path("flag")) is BoolValue.unknown
