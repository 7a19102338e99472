"""Module handling conversion to dot-format."""

from networkx import DiGraph

HEADER = "digraph  {"
FOOTER = "}"


class ToDotConverter:
    """Class in charge of writing a networkx DiGraph, e.g. an exported SyntaxTree, into dot-format"""

    ATTRIBUTES = {"color", "fillcolor", "label", "shape", "style", "dir"}

    def __init__(self, graph: DiGraph):
        self._graph = graph

    @classmethod
    def write(cls, graph: DiGraph) -> str:
        """Return the dot-format of the given graph."""
        converter = cls(graph)
        return converter._create_dot()

    def _create_dot(self) -> str:
        lines = [HEADER]
        lines.extend(f"{node} [{self._get_attributes(data)}];" for node, data in self._graph.nodes(data=True))
        lines.extend(f"{source} -> {sink} [{self._get_attributes(data)}];" for source, sink, data in self._graph.edges(data=True))
        lines.append(FOOTER)
        return "\n".join(lines)

    def _get_attributes(self, data) -> str:
        return ", ".join(f"{key}={self._process(str(value))}" for key, value in sorted(data.items()) if key in self.ATTRIBUTES)

    @staticmethod
    def _process(value: str) -> str:
        """Ensure that attribute string fulfills dot-notation."""
        value = value.replace('"', '\\"').replace("\n", "\\n")
        return f'"{value}"'
