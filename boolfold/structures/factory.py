"""Module in charge of creating new nodes from the textual representation of literals."""
import re
from typing import Union

from .nodes import Literal, UnitExpression
from .nodes.expressions import STRING_ESCAPES
from .tree import SyntaxTree

_INTEGER = re.compile(r"^-?\d+$")
_FLOAT = re.compile(r"^-?\d+\.\d+$")
_STRING = re.compile(r'^"(?P<content>(?:[^"\\]|\\.)*)"$')
_ESCAPE = re.compile(r"\\(?:u\{(?P<unicode>[0-9a-fA-F]{1,6})\}|x(?P<ascii>[0-7][0-9a-fA-F])|(?P<simple>.))")
_UNESCAPES = {escape[1]: char for char, escape in STRING_ESCAPES.items()} | {"'": "'"}


class NodeFactory:
    """Create detached nodes in a tree, ready to be used as replacements."""

    def __init__(self, tree: SyntaxTree):
        self._tree = tree

    def create_expression(self, text: str) -> int:
        """
        Create a literal expression from its textual representation.

        :param text: The literal text, e.g. `true`, `42`, `1.5`, `"text"` or `()`.
        :return: The id of the new, detached node.
        :raises:
            ValueError: Thrown if the text is not a literal.
        """
        text = text.strip()
        if text == "()":
            return self._tree.add(UnitExpression())
        return self._tree.add(Literal(self._parse_literal(text)))

    def create_boolean(self, value: bool) -> int:
        """Create a boolean literal with the given value."""
        return self.create_expression(str(value).lower())

    @staticmethod
    def _parse_literal(text: str) -> Union[bool, int, float, str]:
        if text in ("true", "false"):
            return text == "true"
        if _INTEGER.match(text):
            return int(text)
        if _FLOAT.match(text):
            return float(text)
        if match := _STRING.match(text):
            return _ESCAPE.sub(_unescape, match.group("content"))
        raise ValueError(f"'{text}' is not a literal expression.")


def _unescape(escape: re.Match) -> str:
    """Return the character of an escape sequence like `\\n`, `\\x41` or `\\u{e9}`."""
    if (code := escape.group("unicode") or escape.group("ascii")) is not None:
        return chr(int(code, 16))
    if (char := _UNESCAPES.get(escape.group("simple"))) is None:
        raise ValueError(f"Unknown escape sequence '{escape.group(0)}'.")
    return char
