"""Module implementing a pass simplifying every boolean expression of a tree."""
import logging
from typing import Optional

from boolfold.simplification.intention import SimplifyBooleanExpressionIntention
from boolfold.structures.tree import SyntaxTree
from boolfold.util.options import Options


class SimplifyBooleanStage:
    """
    Stage applying the boolean simplification until no expression of the tree can be simplified.

    Every rewrite removes at least one node, so the stage always reaches a fixed point. The option
    simplify-boolean.max_iterations bounds the number of rewrites nevertheless.
    """

    name = "simplify-boolean"

    def __init__(self, intention: Optional[SimplifyBooleanExpressionIntention] = None):
        self._intention = intention if intention is not None else SimplifyBooleanExpressionIntention()

    def run(self, tree: SyntaxTree, options: Options) -> int:
        """Simplify the given tree in place and return the number of rewrites."""
        max_iterations = options.getint("simplify-boolean.max_iterations")
        iteration_count = 0
        while (element := self._find_applicable_element(tree)) is not None:
            if iteration_count >= max_iterations:
                logging.warning(f"Exceeded max iteration count for {self.name}")
                break
            self._intention.invoke_at(tree, element)
            iteration_count += 1
        else:
            logging.info(f"Boolean simplification took {iteration_count} iterations")
        return iteration_count

    def _find_applicable_element(self, tree: SyntaxTree) -> Optional[int]:
        for node in tree.iter_postorder():
            if tree.is_expression(node) and self._intention.is_applicable_at(tree, node):
                return node
        return None
