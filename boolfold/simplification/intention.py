"""Module providing the simplification as an action which can be invoked at the caret."""
import logging
from typing import Optional

from boolfold.backend.expressiongenerator import ExpressionGenerator
from boolfold.simplification.locator import SimplificationLocator
from boolfold.simplification.rewriter import BooleanRewriter, SimplificationError
from boolfold.structures.tree import SyntaxTree


class NotApplicableError(SimplificationError):
    """Indicates that the action was invoked where no expression can be simplified."""
    pass


class SimplifyBooleanExpressionIntention:
    """
    Simplify the outermost boolean expression around the caret, e.g. `!!true -> true` or `true && x -> x`.

    Hosts either pass a caret offset into the text generated for the root of the tree, or the node
    the caret was already resolved to.
    """

    text = "Simplify boolean expression"
    family_name = "Simplify boolean expression"

    def find_applicable_context(self, tree: SyntaxTree, element: int) -> Optional[int]:
        """Return the expression the action would rewrite for the given element, if any."""
        return SimplificationLocator(tree).find_target(element)

    def is_applicable_at(self, tree: SyntaxTree, element: int) -> bool:
        """Check whether the action is available at the given element."""
        return self.find_applicable_context(tree, element) is not None

    def invoke_at(self, tree: SyntaxTree, element: int) -> int:
        """
        Simplify the outermost simplifiable expression around the given element.

        :return: The id of the node replacing the simplified expression.
        :raises:
            NotApplicableError: Thrown if no expression around the element can be simplified.
            InconsistentSimplificationError: Thrown if the located expression can not be rewritten.
        """
        if (target := self.find_applicable_context(tree, element)) is None:
            raise NotApplicableError(f"No simplifiable boolean expression at node {element}.")
        logging.info(f"Simplifying '{ExpressionGenerator.render(tree, target)}'")
        return BooleanRewriter(tree).rewrite(target)

    def is_applicable(self, tree: SyntaxTree, offset: int) -> bool:
        """Check whether the action is available at the given caret offset."""
        element = self.element_at(tree, offset)
        return element is not None and self.is_applicable_at(tree, element)

    def invoke(self, tree: SyntaxTree, offset: int) -> int:
        """Simplify the outermost simplifiable expression around the given caret offset."""
        if (element := self.element_at(tree, offset)) is None:
            raise NotApplicableError(f"No element at offset {offset}.")
        return self.invoke_at(tree, element)

    @staticmethod
    def element_at(tree: SyntaxTree, offset: int) -> Optional[int]:
        """
        Return the innermost node at the given caret offset into the text of the tree root.

        A tree without a unique root has no text to place the caret in, so no node is returned.
        """
        if tree.root is None:
            return None
        generator = ExpressionGenerator(tree)
        generator.generate()
        return generator.element_at(offset)
