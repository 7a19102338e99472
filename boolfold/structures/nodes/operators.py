"""Module declaring the operators of binary and unary expressions."""

from __future__ import annotations

from enum import Enum, auto
from typing import Dict, FrozenSet, Optional


class BinaryOperator(Enum):
    """Enumerator of all binary operators."""

    plus = auto()
    minus = auto()
    multiply = auto()
    divide = auto()
    modulo = auto()
    bitwise_and = auto()
    bitwise_or = auto()
    bitwise_xor = auto()
    left_shift = auto()
    right_shift = auto()
    logical_and = auto()
    logical_or = auto()
    equal = auto()
    not_equal = auto()
    less = auto()
    less_or_equal = auto()
    greater = auto()
    greater_or_equal = auto()
    assign = auto()
    plus_assign = auto()
    minus_assign = auto()
    multiply_assign = auto()
    divide_assign = auto()
    modulo_assign = auto()
    bitwise_and_assign = auto()
    bitwise_or_assign = auto()
    bitwise_xor_assign = auto()
    left_shift_assign = auto()
    right_shift_assign = auto()

    def __str__(self) -> str:
        return SHORTHANDS[self]


SHORTHANDS = {
    BinaryOperator.plus: "+",
    BinaryOperator.minus: "-",
    BinaryOperator.multiply: "*",
    BinaryOperator.divide: "/",
    BinaryOperator.modulo: "%",
    BinaryOperator.bitwise_and: "&",
    BinaryOperator.bitwise_or: "|",
    BinaryOperator.bitwise_xor: "^",
    BinaryOperator.left_shift: "<<",
    BinaryOperator.right_shift: ">>",
    BinaryOperator.logical_and: "&&",
    BinaryOperator.logical_or: "||",
    BinaryOperator.equal: "==",
    BinaryOperator.not_equal: "!=",
    BinaryOperator.less: "<",
    BinaryOperator.less_or_equal: "<=",
    BinaryOperator.greater: ">",
    BinaryOperator.greater_or_equal: ">=",
    BinaryOperator.assign: "=",
    BinaryOperator.plus_assign: "+=",
    BinaryOperator.minus_assign: "-=",
    BinaryOperator.multiply_assign: "*=",
    BinaryOperator.divide_assign: "/=",
    BinaryOperator.modulo_assign: "%=",
    BinaryOperator.bitwise_and_assign: "&=",
    BinaryOperator.bitwise_or_assign: "|=",
    BinaryOperator.bitwise_xor_assign: "^=",
    BinaryOperator.left_shift_assign: "<<=",
    BinaryOperator.right_shift_assign: ">>=",
}

SHORT_CIRCUIT_OPERATORS = {BinaryOperator.logical_and, BinaryOperator.logical_or}


class UnaryToken(Enum):
    """Tokens which may prefix the operand of a unary expression."""

    ampersand = "&"
    mut = "mut"
    asterisk = "*"
    minus = "-"
    exclamation = "!"
    box = "box"


class UnaryOperator(Enum):
    """Enumerator of all unary operators."""

    ref = auto()  # `&a`
    ref_mut = auto()  # `&mut a`
    deref = auto()  # `*a`
    minus = auto()  # `-a`
    not_ = auto()  # `!a`
    box = auto()  # `box a`

    @classmethod
    def from_tokens(cls, tokens: FrozenSet[UnaryToken]) -> Optional[UnaryOperator]:
        """
        Return the operator spelled by the given tokens.

        :param tokens: The tokens present on a unary expression.
        :return: The matching operator or None if the tokens spell no operator (or more than one).
        """
        return _TOKENS_TO_OPERATOR.get(frozenset(tokens))


OPERATOR_TOKENS: Dict[UnaryOperator, FrozenSet[UnaryToken]] = {
    UnaryOperator.ref: frozenset({UnaryToken.ampersand}),
    UnaryOperator.ref_mut: frozenset({UnaryToken.ampersand, UnaryToken.mut}),
    UnaryOperator.deref: frozenset({UnaryToken.asterisk}),
    UnaryOperator.minus: frozenset({UnaryToken.minus}),
    UnaryOperator.not_: frozenset({UnaryToken.exclamation}),
    UnaryOperator.box: frozenset({UnaryToken.box}),
}

_TOKENS_TO_OPERATOR: Dict[FrozenSet[UnaryToken], UnaryOperator] = {tokens: operator for operator, tokens in OPERATOR_TOKENS.items()}

UNARY_SYNTAX = {
    UnaryOperator.ref: "&",
    UnaryOperator.ref_mut: "&mut ",
    UnaryOperator.deref: "*",
    UnaryOperator.minus: "-",
    UnaryOperator.not_: "!",
    UnaryOperator.box: "box ",
}
