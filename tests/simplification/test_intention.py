"""Module implementing tests for the caret based simplification action."""
import pytest
from boolfold.backend.expressiongenerator import ExpressionGenerator
from boolfold.simplification.intention import NotApplicableError, SimplifyBooleanExpressionIntention
from boolfold.simplification.rewriter import SimplificationError


@pytest.fixture
def intention() -> SimplifyBooleanExpressionIntention:
    return SimplifyBooleanExpressionIntention()


def test_texts(intention):
    assert intention.text == "Simplify boolean expression"
    assert intention.family_name == "Simplify boolean expression"


def test_not_applicable_is_simplification_error():
    assert issubclass(NotApplicableError, SimplificationError)


class TestOffsets:
    """true && x"""

    @pytest.fixture
    def tree(self, build):
        build.and_(build.lit(True), build.path("x"))
        return build.tree

    @pytest.mark.parametrize("offset", [0, 2, 4, 5, 8, 9])
    def test_applicable(self, intention, tree, offset):
        assert intention.is_applicable(tree, offset)

    def test_out_of_text(self, intention, tree):
        assert not intention.is_applicable(tree, 42)
        with pytest.raises(NotApplicableError):
            intention.invoke(tree, 42)

    def test_invoke(self, intention, tree):
        result = intention.invoke(tree, 0)
        assert ExpressionGenerator.render(tree) == "x" and tree.root == result

    def test_idempotent(self, intention, tree):
        intention.invoke(tree, 0)
        assert not intention.is_applicable(tree, 0)
        with pytest.raises(NotApplicableError):
            intention.invoke(tree, 0)
        assert ExpressionGenerator.render(tree) == "x"


def test_element_at(intention, build):
    x = build.path("x")
    build.or_(build.call("a"), x)
    assert intention.element_at(build.tree, len("a() || ")) == x
    assert intention.element_at(build.tree, len("a() || x")) == x


def test_invoke_at_outermost(intention, build):
    literal = build.lit(False)
    statement = build.statement(build.not_(build.paren(build.or_(literal, build.lit(False)))))
    intention.invoke_at(build.tree, literal)
    assert ExpressionGenerator.render(build.tree, statement) == "true;"


def test_not_applicable(intention, build):
    x = build.path("x")
    build.statement(build.or_(x, build.path("y")))
    assert not intention.is_applicable_at(build.tree, x)
    assert intention.find_applicable_context(build.tree, x) is None
    with pytest.raises(NotApplicableError):
        intention.invoke_at(build.tree, x)


def test_invoke_logs(intention, build, caplog):
    literal = build.lit(True)
    build.and_(literal, build.path("x"))
    with caplog.at_level("INFO"):
        intention.invoke_at(build.tree, literal)
    assert "Simplifying 'true && x'" in caplog.text


def test_tree_without_unique_root(intention, build):
    """Two sibling statements without an enclosing block."""
    build.statement(build.and_(build.lit(True), build.path("x")))
    build.statement(build.path("y"))
    assert intention.element_at(build.tree, 0) is None
    assert not intention.is_applicable(build.tree, 0)
    with pytest.raises(NotApplicableError):
        intention.invoke(build.tree, 0)
