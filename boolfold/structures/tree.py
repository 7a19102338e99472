"""Module implementing the syntax tree as an arena of nodes backed by networkx."""

from __future__ import annotations

from itertools import count
from typing import Iterator, Optional, Tuple

from networkx import DiGraph, descendants, dfs_postorder_nodes, dfs_preorder_nodes

from .nodes import Expression, SyntaxNode


class SyntaxTree:
    """
    A tree of syntax nodes addressed by stable integer ids.

    Every node stores its payload, every edge leads from a parent to one of its children and stores the
    slot the child occupies. Slots of optional children, e.g. the right operand of an incomplete binary
    expression, may stay empty.
    """

    def __init__(self):
        """Init a new empty tree."""
        self._graph = DiGraph()
        self._ids = count()

    def __getitem__(self, node: int) -> SyntaxNode:
        """Return the payload of the given node."""
        self._check_node(node)
        return self._graph.nodes[node]["payload"]

    def __contains__(self, node: int) -> bool:
        """Check whether the given node id is (still) part of the tree."""
        return self._graph.has_node(node)

    def __len__(self) -> int:
        """Return the amount of nodes in the tree."""
        return len(self._graph)

    def __iter__(self) -> Iterator[int]:
        """Iterate all node ids in the tree."""
        yield from self._graph.nodes

    # Tree construction

    def add(self, payload: SyntaxNode, *children: Optional[int]) -> int:
        """
        Add a new node with the given payload and return its id.

        :param payload: The payload of the new node.
        :param children: Detached nodes becoming the children of the new node, their position is their slot.
            None leaves the corresponding slot empty.
        :return: The id of the new node.
        """
        node = next(self._ids)
        self._graph.add_node(node, payload=payload)
        for slot, child in enumerate(children):
            if child is not None:
                self.attach(node, child, slot)
        return node

    def attach(self, parent: int, child: int, slot: int):
        """Make the detached child the child of the given parent at the given slot."""
        self._check_node(parent)
        self._check_node(child)
        if self.parent(child) is not None:
            raise ValueError(f"Node {child} is already attached to {self.parent(child)}.")
        if self.child(parent, slot) is not None:
            raise ValueError(f"Slot {slot} of node {parent} is already occupied.")
        if child == parent or child in self.ancestors(parent):
            raise ValueError(f"Attaching {child} to {parent} would introduce a cycle.")
        self._graph.add_edge(parent, child, slot=slot)

    def detach(self, node: int) -> Tuple[Optional[int], Optional[int]]:
        """Detach the given node from its parent and return the former parent and slot."""
        parent, slot = self.parent(node), self.slot(node)
        if parent is not None:
            self._graph.remove_edge(parent, node)
        return parent, slot

    def remove(self, node: int):
        """Remove the given node and all its descendants from the tree."""
        self.detach(node)
        self._graph.remove_nodes_from(list(self.iter_subtree(node)))

    def replace(self, replacee: int, replacement: int):
        """
        Replace the given node with another node at the same position.

        The replacement is either a detached node, e.g. a freshly created literal, or a node inside the
        subtree of the replacee, which is moved to the position of the replacee. All other nodes of the
        replaced subtree are removed from the tree.
        """
        self._check_node(replacee)
        self._check_node(replacement)
        if replacement == replacee:
            raise ValueError(f"Can not replace node {replacee} with itself.")
        if self.parent(replacement) is not None and replacee not in self.ancestors(replacement):
            raise ValueError(f"Replacement {replacement} is attached outside of the replaced subtree.")
        self.detach(replacement)
        parent, slot = self.detach(replacee)
        self.remove(replacee)
        if parent is not None:
            self.attach(parent, replacement, slot)

    # Navigation

    def get_roots(self) -> Tuple[int, ...]:
        """Return all nodes without parent."""
        return tuple(node for node, d in self._graph.in_degree() if not d)

    @property
    def root(self) -> Optional[int]:
        """Return the root of the tree, if there is exactly one."""
        roots = self.get_roots()
        return roots[0] if len(roots) == 1 else None

    def parent(self, node: int) -> Optional[int]:
        """Return the parent of the given node, if any."""
        self._check_node(node)
        return next(self._graph.predecessors(node), None)

    def slot(self, node: int) -> Optional[int]:
        """Return the slot the given node occupies in its parent, if any."""
        if (parent := self.parent(node)) is None:
            return None
        return self._graph.edges[parent, node]["slot"]

    def children(self, node: int) -> Tuple[int, ...]:
        """Return the children of the given node ordered by their slot."""
        self._check_node(node)
        return tuple(sorted(self._graph.successors(node), key=lambda child: self._graph.edges[node, child]["slot"]))

    def child(self, node: int, slot: int) -> Optional[int]:
        """Return the child at the given slot or None if the slot is empty."""
        self._check_node(node)
        for child in self._graph.successors(node):
            if self._graph.edges[node, child]["slot"] == slot:
                return child
        return None

    def ancestors(self, node: int) -> Iterator[int]:
        """Iterate the given node and all its ancestors, moving towards the root."""
        current: Optional[int] = node
        while current is not None:
            yield current
            current = self.parent(current)

    def is_expression(self, node: int) -> bool:
        """Check whether the given node is an expression."""
        return isinstance(self[node], Expression)

    def iter_subtree(self, node: int) -> Iterator[int]:
        """Iterate the given node and all its descendants."""
        self._check_node(node)
        yield node
        yield from descendants(self._graph, node)

    def iter_preorder(self, source: Optional[int] = None) -> Iterator[int]:
        """Iterate all nodes in pre order, starting at the given source if any."""
        yield from dfs_preorder_nodes(self._graph, source)

    def iter_postorder(self, source: Optional[int] = None) -> Iterator[int]:
        """Iterate all nodes in post order, starting at the given source if any."""
        yield from dfs_postorder_nodes(self._graph, source)

    def export(self) -> DiGraph:
        """Export a printable version of the tree."""
        buffer_graph = DiGraph()
        for node, payload in self._graph.nodes(data="payload"):
            buffer_graph.add_node(node, label=f"{node}: {payload}", shape="box")
        for parent, child, slot in self._graph.edges(data="slot"):
            buffer_graph.add_edge(parent, child, label=str(slot))
        return buffer_graph

    def _check_node(self, node: int):
        if not self._graph.has_node(node):
            raise ValueError(f"Node {node} is not part of the tree.")
