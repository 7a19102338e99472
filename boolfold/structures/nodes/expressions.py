"""Module defining the expression vocabulary of the syntax tree.

Every node of a SyntaxTree carries one of the payloads below. Payloads only hold the
information of the node itself, e.g. an operator or a name. Child expressions are
edges of the tree, each stored at a fixed slot of its parent:

literal          <-  bool | int | float | str
binary           <-  expression(0) op expression(1)?
unary            <-  op expression(0)?
paren            <-  ( expression(0) )
array            <-  [ expression(0), expression(1), ... ] | [ expression(0) ; size(1) ]
tuple            <-  ( expression(0), expression(1), ... )
struct           <-  name { field: expression(i), ..., .. base(len(fields)) }
field access     <-  expression(0) . field
call             <-  expression(0) ( expression(1), ... )
method call      <-  expression(0) . method ( expression(1), ... )
index            <-  expression(0) [ expression(1) ]
range            <-  expression(0)? .. expression(1)?
if               <-  if expression(0) block(1) else expression(2)?
while            <-  while expression(0) block(1)
for              <-  for pattern in expression(0) block(1)
loop             <-  loop block(0)
match            <-  match expression(0) { pattern => expression(i), ... }
break/return     <-  keyword expression(0)?
try              <-  expression(0) ?
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, FrozenSet, Optional, Tuple, TypeVar, Union

from .operators import OPERATOR_TOKENS, BinaryOperator, UnaryOperator, UnaryToken

T = TypeVar("T")

if TYPE_CHECKING:
    from boolfold.structures.visitors.interfaces import SyntaxNodeVisitorInterface


class SyntaxNode(ABC):
    """Interface for the payload of every node in a syntax tree."""

    @abstractmethod
    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        """Invoke the appropriate visitor for the node carrying this payload."""


class Expression(SyntaxNode, ABC):
    """Abstract base class for expression types."""


# Characters written as escape sequences inside string literals.
STRING_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}


@dataclass(frozen=True, eq=False)
class Literal(Expression):
    """Represents a literal like `true`, `42` or `"text"`."""

    value: Union[bool, int, float, str]

    def __eq__(self, other) -> bool:
        """Literals are equal if their values are of the same type, so `true` never equals `1`."""
        return isinstance(other, Literal) and type(self.value) is type(other.value) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self.value), self.value))

    @property
    def is_boolean(self) -> bool:
        """Check whether the literal is one of the boolean constants."""
        return isinstance(self.value, bool)

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_literal(node)


@dataclass(frozen=True)
class BinaryExpression(Expression):
    """Represents an operation with a left and an (optional) right operand."""

    LEFT: ClassVar[int] = 0
    RIGHT: ClassVar[int] = 1

    operation: BinaryOperator

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_binary_expression(node)


@dataclass(frozen=True)
class UnaryExpression(Expression):
    """Represents a prefix operation; the operator is spelled by the tokens present on the node."""

    OPERAND: ClassVar[int] = 0

    tokens: FrozenSet[UnaryToken]

    @classmethod
    def of(cls, operation: UnaryOperator) -> UnaryExpression:
        """Create a unary expression spelling the given operator."""
        return cls(OPERATOR_TOKENS[operation])

    @property
    def operation(self) -> Optional[UnaryOperator]:
        """Return the operator of the expression or None if the tokens are ambiguous."""
        return UnaryOperator.from_tokens(self.tokens)

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_unary_expression(node)


@dataclass(frozen=True)
class ParenExpression(Expression):
    """Represents a parenthesized expression."""

    INNER: ClassVar[int] = 0

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_paren_expression(node)


@dataclass(frozen=True)
class ArrayExpression(Expression):
    """Represents an array literal, either a list of elements or the repeat form `[expr; size]`."""

    VALUE: ClassVar[int] = 0
    SIZE: ClassVar[int] = 1

    repeat: bool = False

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_array_expression(node)


@dataclass(frozen=True)
class TupleExpression(Expression):
    """Represents a tuple of at least one element."""

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_tuple_expression(node)


@dataclass(frozen=True)
class StructLiteral(Expression):
    """
    Represents a struct literal like `Point { x: 1, y }` or `Point { y: 0, ..base }`.

    The value of the i-th field is stored at slot i, shorthand fields leave their slot empty.
    The update base of a literal with spread is stored behind the last field.
    """

    name: str
    fields: Tuple[str, ...] = ()
    has_spread: bool = False

    @property
    def spread_slot(self) -> int:
        """Return the slot of the update base."""
        return len(self.fields)

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_struct_literal(node)


@dataclass(frozen=True)
class FieldAccess(Expression):
    """Represents the access of a named or positional field, e.g. `point.x` or `pair.0`."""

    BASE: ClassVar[int] = 0

    field: str

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_field_access(node)


@dataclass(frozen=True)
class PathExpression(Expression):
    """Represents a path like `x` or `std::f64::consts::PI`."""

    path: str

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_path_expression(node)


@dataclass(frozen=True)
class QualifiedPathExpression(Expression):
    """Represents a qualified path like `<T as Default>::default`."""

    path: str

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_qualified_path_expression(node)


@dataclass(frozen=True)
class UnitExpression(Expression):
    """Represents the unit value `()`."""

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_unit_expression(node)


@dataclass(frozen=True)
class BlockExpression(Expression):
    """Represents a block; its children are statements optionally followed by a tail expression."""

    unsafe: bool = False

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_block_expression(node)


@dataclass(frozen=True)
class CastExpression(Expression):
    """Represents a cast like `x as u8`."""

    OPERAND: ClassVar[int] = 0

    type_name: str

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_cast_expression(node)


@dataclass(frozen=True)
class CallExpression(Expression):
    """Represents a call; slot 0 holds the callee, the arguments follow."""

    CALLEE: ClassVar[int] = 0

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_call_expression(node)


@dataclass(frozen=True)
class ForExpression(Expression):
    """Represents a for loop over the iterable in slot 0 with the body in slot 1."""

    ITERABLE: ClassVar[int] = 0
    BODY: ClassVar[int] = 1

    pattern: str

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_for_expression(node)


@dataclass(frozen=True)
class IfExpression(Expression):
    """Represents a conditional with an optional else branch."""

    CONDITION: ClassVar[int] = 0
    THEN: ClassVar[int] = 1
    ELSE: ClassVar[int] = 2

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_if_expression(node)


@dataclass(frozen=True)
class IndexExpression(Expression):
    """Represents an indexing operation `base[index]`."""

    BASE: ClassVar[int] = 0
    INDEX: ClassVar[int] = 1

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_index_expression(node)


@dataclass(frozen=True)
class LambdaExpression(Expression):
    """Represents a closure like `|a, b| a + b`."""

    BODY: ClassVar[int] = 0

    parameters: Tuple[str, ...] = ()

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_lambda_expression(node)


@dataclass(frozen=True)
class LoopExpression(Expression):
    """Represents an endless `loop`."""

    BODY: ClassVar[int] = 0

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_loop_expression(node)


@dataclass(frozen=True)
class MacroExpression(Expression):
    """Represents a macro invocation like `vec!(1, 2)`; the arguments are the children."""

    name: str

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_macro_expression(node)


@dataclass(frozen=True)
class MatchExpression(Expression):
    """Represents a match; slot 0 holds the scrutinee, slot i + 1 the body of the i-th arm."""

    SCRUTINEE: ClassVar[int] = 0

    patterns: Tuple[str, ...] = ()

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_match_expression(node)


@dataclass(frozen=True)
class MethodCallExpression(Expression):
    """Represents a method call; slot 0 holds the receiver, the arguments follow."""

    RECEIVER: ClassVar[int] = 0

    method: str

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_method_call_expression(node)


@dataclass(frozen=True)
class RangeExpression(Expression):
    """Represents a range with optional bounds, e.g. `a..b`, `..=b` or `a..`."""

    START: ClassVar[int] = 0
    END: ClassVar[int] = 1

    inclusive: bool = False

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_range_expression(node)


@dataclass(frozen=True)
class WhileExpression(Expression):
    """Represents a while loop."""

    CONDITION: ClassVar[int] = 0
    BODY: ClassVar[int] = 1

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_while_expression(node)


@dataclass(frozen=True)
class BreakExpression(Expression):
    """Represents `break`, optionally with a value."""

    VALUE: ClassVar[int] = 0

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_break_expression(node)


@dataclass(frozen=True)
class ContinueExpression(Expression):
    """Represents `continue`."""

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_continue_expression(node)


@dataclass(frozen=True)
class ReturnExpression(Expression):
    """Represents `return`, optionally with a value."""

    VALUE: ClassVar[int] = 0

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_return_expression(node)


@dataclass(frozen=True)
class TryExpression(Expression):
    """Represents the error propagation operator `expr?`."""

    OPERAND: ClassVar[int] = 0

    def accept(self, visitor: SyntaxNodeVisitorInterface[T], node: int) -> T:
        return visitor.visit_try_expression(node)
