"""Module generating Rust-like source text for syntax trees."""
from typing import Dict, List, Optional, Tuple

from boolfold.structures.nodes import StructLiteral
from boolfold.structures.nodes.expressions import STRING_ESCAPES
from boolfold.structures.nodes.operators import UNARY_SYNTAX
from boolfold.structures.tree import SyntaxTree
from boolfold.structures.visitors.interfaces import SyntaxNodeVisitorInterface


class ExpressionGenerator(SyntaxNodeVisitorInterface[None]):
    """
    Generate source text for the nodes of a SyntaxTree.

    Parentheses are only emitted for ParenExpressions, so the text mirrors the structure of the tree.
    While generating, the span of every node in the text is recorded. This allows to map a caret offset
    back to the node it points at.
    """

    def __init__(self, tree: SyntaxTree):
        super().__init__(tree)
        self._buffer: List[str] = []
        self._length = 0
        self._spans: Dict[int, Tuple[int, int]] = {}

    @classmethod
    def render(cls, tree: SyntaxTree, node: Optional[int] = None) -> str:
        """Return the text of the given node, or of the root if no node is given."""
        return cls(tree).generate(node)

    def generate(self, node: Optional[int] = None) -> str:
        """Generate the text of the given node (default: the root of the tree) and record all spans."""
        if node is None and (node := self._tree.root) is None:
            raise ValueError("The tree has no unique root to generate code for.")
        self._buffer, self._length, self._spans = [], 0, {}
        self.visit(node)
        return "".join(self._buffer)

    @property
    def spans(self) -> Dict[int, Tuple[int, int]]:
        """Return the [start, end) offsets of every node generated last."""
        return self._spans

    def element_at(self, offset: int) -> Optional[int]:
        """
        Return the innermost node at the given caret offset of the text generated last.

        A caret placed directly behind a node, e.g. at the end of the text, refers to that node.
        """
        for position in (offset, offset - 1):
            containing = [node for node, (start, end) in self._spans.items() if start <= position < end]
            if containing:
                return max(containing, key=lambda node: sum(1 for _ in self._tree.ancestors(node)))
        return None

    def visit(self, node: int) -> None:
        start = self._length
        super().visit(node)
        self._spans[node] = (start, self._length)

    def visit_literal(self, node: int):
        value = self._tree[node].value
        if isinstance(value, bool):
            self._write("true" if value else "false")
        elif isinstance(value, str):
            escaped = "".join(STRING_ESCAPES.get(char, char) for char in value)
            self._write(f'"{escaped}"')
        else:
            self._write(str(value))

    def visit_binary_expression(self, node: int):
        self._emit(self._tree.child(node, 0))
        self._write(f" {self._tree[node].operation}")
        if (right := self._tree.child(node, 1)) is not None:
            self._write(" ")
            self._emit(right)

    def visit_unary_expression(self, node: int):
        expr = self._tree[node]
        if (operation := expr.operation) is not None:
            self._write(UNARY_SYNTAX[operation])
        else:
            self._write(" ".join(sorted(token.value for token in expr.tokens)) + " ")
        self._emit(self._tree.child(node, 0))

    def visit_paren_expression(self, node: int):
        self._write("(")
        self._emit(self._tree.child(node, 0))
        self._write(")")

    def visit_array_expression(self, node: int):
        self._write("[")
        if self._tree[node].repeat:
            self._emit(self._tree.child(node, 0))
            self._write("; ")
            self._emit(self._tree.child(node, 1))
        else:
            self._emit_list(self._tree.children(node))
        self._write("]")

    def visit_tuple_expression(self, node: int):
        elements = self._tree.children(node)
        self._write("(")
        self._emit_list(elements)
        self._write(",)" if len(elements) == 1 else ")")

    def visit_struct_literal(self, node: int):
        expr: StructLiteral = self._tree[node]
        self._write(f"{expr.name} {{")
        for slot, field in enumerate(expr.fields):
            self._write(f" {field}" if slot == 0 else f", {field}")
            if (value := self._tree.child(node, slot)) is not None:
                self._write(": ")
                self._emit(value)
        if expr.has_spread:
            self._write(" .." if not expr.fields else ", ..")
            self._emit(self._tree.child(node, expr.spread_slot))
        self._write(" }" if expr.fields or expr.has_spread else "}")

    def visit_field_access(self, node: int):
        self._emit(self._tree.child(node, 0))
        self._write(f".{self._tree[node].field}")

    def visit_path_expression(self, node: int):
        self._write(self._tree[node].path)

    def visit_qualified_path_expression(self, node: int):
        self._write(self._tree[node].path)

    def visit_unit_expression(self, node: int):
        self._write("()")

    def visit_block_expression(self, node: int):
        if self._tree[node].unsafe:
            self._write("unsafe ")
        children = self._tree.children(node)
        if not children:
            self._write("{}")
            return
        self._write("{")
        for child in children:
            self._write(" ")
            self._emit(child)
        self._write(" }")

    def visit_cast_expression(self, node: int):
        self._emit(self._tree.child(node, 0))
        self._write(f" as {self._tree[node].type_name}")

    def visit_call_expression(self, node: int):
        self._emit(self._tree.child(node, 0))
        self._write("(")
        self._emit_list(self._children_from(node, 1))
        self._write(")")

    def visit_for_expression(self, node: int):
        self._write(f"for {self._tree[node].pattern} in ")
        self._emit(self._tree.child(node, 0))
        self._write(" ")
        self._emit(self._tree.child(node, 1))

    def visit_if_expression(self, node: int):
        self._write("if ")
        self._emit(self._tree.child(node, 0))
        self._write(" ")
        self._emit(self._tree.child(node, 1))
        if (otherwise := self._tree.child(node, 2)) is not None:
            self._write(" else ")
            self._emit(otherwise)

    def visit_index_expression(self, node: int):
        self._emit(self._tree.child(node, 0))
        self._write("[")
        self._emit(self._tree.child(node, 1))
        self._write("]")

    def visit_lambda_expression(self, node: int):
        self._write(f"|{', '.join(self._tree[node].parameters)}| ")
        self._emit(self._tree.child(node, 0))

    def visit_loop_expression(self, node: int):
        self._write("loop ")
        self._emit(self._tree.child(node, 0))

    def visit_macro_expression(self, node: int):
        self._write(f"{self._tree[node].name}!(")
        self._emit_list(self._tree.children(node))
        self._write(")")

    def visit_match_expression(self, node: int):
        self._write("match ")
        self._emit(self._tree.child(node, 0))
        self._write(" {")
        for slot, pattern in enumerate(self._tree[node].patterns, start=1):
            self._write(f" {pattern} => ")
            self._emit(self._tree.child(node, slot))
            self._write(",")
        self._write(" }")

    def visit_method_call_expression(self, node: int):
        self._emit(self._tree.child(node, 0))
        self._write(f".{self._tree[node].method}(")
        self._emit_list(self._children_from(node, 1))
        self._write(")")

    def visit_range_expression(self, node: int):
        self._emit(self._tree.child(node, 0))
        self._write("..=" if self._tree[node].inclusive else "..")
        self._emit(self._tree.child(node, 1))

    def visit_while_expression(self, node: int):
        self._write("while ")
        self._emit(self._tree.child(node, 0))
        self._write(" ")
        self._emit(self._tree.child(node, 1))

    def visit_break_expression(self, node: int):
        self._write("break")
        if (value := self._tree.child(node, 0)) is not None:
            self._write(" ")
            self._emit(value)

    def visit_continue_expression(self, node: int):
        self._write("continue")

    def visit_return_expression(self, node: int):
        self._write("return")
        if (value := self._tree.child(node, 0)) is not None:
            self._write(" ")
            self._emit(value)

    def visit_try_expression(self, node: int):
        self._emit(self._tree.child(node, 0))
        self._write("?")

    def visit_let_statement(self, node: int):
        self._write(f"let {self._tree[node].name}")
        if (initializer := self._tree.child(node, 0)) is not None:
            self._write(" = ")
            self._emit(initializer)
        self._write(";")

    def visit_expression_statement(self, node: int):
        self._emit(self._tree.child(node, 0))
        self._write(";")

    def _write(self, text: str):
        self._buffer.append(text)
        self._length += len(text)

    def _emit(self, node: Optional[int]):
        """Generate the given node, an empty slot generates nothing."""
        if node is not None:
            self.visit(node)

    def _emit_list(self, nodes: Tuple[int, ...]):
        for index, node in enumerate(nodes):
            if index:
                self._write(", ")
            self.visit(node)

    def _children_from(self, node: int, first_slot: int) -> Tuple[int, ...]:
        return tuple(child for child in self._tree.children(node) if self._tree.slot(child) >= first_slot)
