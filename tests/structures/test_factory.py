"""Module implementing tests for the node factory."""
import pytest
from boolfold.backend.expressiongenerator import ExpressionGenerator
from boolfold.structures.factory import NodeFactory
from boolfold.structures.nodes import Literal, UnitExpression
from boolfold.structures.tree import SyntaxTree


@pytest.mark.parametrize(
    ["text", "value"],
    [
        ("true", True),
        ("false", False),
        (" true ", True),
        ("42", 42),
        ("-7", -7),
        ("1.5", 1.5),
        ('"text"', "text"),
        ('"a\\nb"', "a\nb"),
    ],
)
def test_create_literal(text, value):
    tree = SyntaxTree()
    node = NodeFactory(tree).create_expression(text)
    assert tree[node] == Literal(value)
    assert type(tree[node].value) is type(value)
    assert tree.parent(node) is None


def test_create_unit():
    tree = SyntaxTree()
    assert tree[NodeFactory(tree).create_expression("()")] == UnitExpression()


@pytest.mark.parametrize("text", ["x", "foo()", "true && false", "", "tru"])
def test_create_expression_rejects_non_literals(text):
    with pytest.raises(ValueError):
        NodeFactory(SyntaxTree()).create_expression(text)


@pytest.mark.parametrize("value", [True, False])
def test_create_boolean(value):
    tree = SyntaxTree()
    node = NodeFactory(tree).create_boolean(value)
    assert tree[node].value is value


@pytest.mark.parametrize(
    ["text", "value"],
    [
        ('"é"', "é"),
        ('"日本"', "日本"),
        ('"caf\\u{e9}"', "café"),
        ('"\\x41"', "A"),
        ('"\\0\\t\\\'"', "\0\t'"),
        ('"say \\"hi\\""', 'say "hi"'),
        ('"back\\\\slash"', "back\\slash"),
    ],
)
def test_string_escapes(text, value):
    tree = SyntaxTree()
    assert tree[NodeFactory(tree).create_expression(text)].value == value


def test_unknown_escape():
    with pytest.raises(ValueError):
        NodeFactory(SyntaxTree()).create_expression('"\\q"')


@pytest.mark.parametrize("value", ["é", "日本", 'say "hi"\n', "tab\tback\\slash\r\0"])
def test_string_round_trip(value):
    tree = SyntaxTree()
    text = ExpressionGenerator.render(tree, tree.add(Literal(value)))
    assert tree[NodeFactory(tree).create_expression(text)] == Literal(value)
