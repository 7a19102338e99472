"""Module implementing tests for node payloads and operators."""
import pytest
from boolfold.structures.nodes import BinaryOperator, Literal, StructLiteral, UnaryExpression, UnaryOperator, UnaryToken


@pytest.mark.parametrize(
    ["tokens", "operation"],
    [
        ({UnaryToken.ampersand}, UnaryOperator.ref),
        ({UnaryToken.ampersand, UnaryToken.mut}, UnaryOperator.ref_mut),
        ({UnaryToken.asterisk}, UnaryOperator.deref),
        ({UnaryToken.minus}, UnaryOperator.minus),
        ({UnaryToken.exclamation}, UnaryOperator.not_),
        ({UnaryToken.box}, UnaryOperator.box),
        (set(), None),
        ({UnaryToken.mut}, None),
        ({UnaryToken.exclamation, UnaryToken.minus}, None),
    ],
)
def test_unary_operator_from_tokens(tokens, operation):
    assert UnaryExpression(frozenset(tokens)).operation == operation


@pytest.mark.parametrize("operation", list(UnaryOperator))
def test_unary_expression_of(operation):
    assert UnaryExpression.of(operation).operation == operation


def test_binary_operator_shorthands():
    assert str(BinaryOperator.logical_and) == "&&"
    assert str(BinaryOperator.logical_or) == "||"
    assert str(BinaryOperator.bitwise_xor) == "^"
    assert all(str(operation) for operation in BinaryOperator)


@pytest.mark.parametrize(["value", "is_boolean"], [(True, True), (False, True), (1, False), (0, False), ("true", False), (1.0, False)])
def test_literal_is_boolean(value, is_boolean):
    assert Literal(value).is_boolean == is_boolean


def test_struct_spread_slot():
    assert StructLiteral("Point", ("x", "y"), has_spread=True).spread_slot == 2
    assert StructLiteral("Unit").spread_slot == 0


def _all_node_kinds():
    from boolfold.structures import nodes

    return [
        nodes.Literal(True),
        nodes.BinaryExpression(BinaryOperator.plus),
        UnaryExpression.of(UnaryOperator.not_),
        nodes.ParenExpression(),
        nodes.ArrayExpression(),
        nodes.TupleExpression(),
        StructLiteral("Point"),
        nodes.FieldAccess("x"),
        nodes.PathExpression("a"),
        nodes.QualifiedPathExpression("<T as Trait>::f"),
        nodes.UnitExpression(),
        nodes.BlockExpression(),
        nodes.CastExpression("u8"),
        nodes.CallExpression(),
        nodes.ForExpression("i"),
        nodes.IfExpression(),
        nodes.IndexExpression(),
        nodes.LambdaExpression(("x",)),
        nodes.LoopExpression(),
        nodes.MacroExpression("vec"),
        nodes.MatchExpression(("_",)),
        nodes.MethodCallExpression("len"),
        nodes.RangeExpression(),
        nodes.WhileExpression(),
        nodes.BreakExpression(),
        nodes.ContinueExpression(),
        nodes.ReturnExpression(),
        nodes.TryExpression(),
        nodes.LetStatement("x"),
        nodes.ExpressionStatement(),
    ]


def test_every_kind_has_its_own_handler():
    """Each node kind dispatches to a distinct abstract handler of the visitor interface."""
    from boolfold.structures.visitors.interfaces import SyntaxNodeVisitorInterface

    handlers = sorted(SyntaxNodeVisitorInterface.__abstractmethods__)
    handler_table = {name: (lambda handler: lambda self, node: handler)(name) for name in handlers}
    recorder = type(SyntaxNodeVisitorInterface)("Recorder", (SyntaxNodeVisitorInterface,), handler_table)(None)
    dispatched = [payload.accept(recorder, 0) for payload in _all_node_kinds()]
    assert sorted(dispatched) == handlers


@pytest.mark.parametrize(["left", "right"], [(True, 1), (False, 0), (1, 1.0), (False, "")])
def test_literal_equality_respects_type(left, right):
    assert Literal(left) != Literal(right)
    assert Literal(left) == Literal(left) and hash(Literal(left)) == hash(Literal(left))
