from .expressions import (
    ArrayExpression,
    BinaryExpression,
    BlockExpression,
    BreakExpression,
    CallExpression,
    CastExpression,
    ContinueExpression,
    Expression,
    FieldAccess,
    ForExpression,
    IfExpression,
    IndexExpression,
    LambdaExpression,
    Literal,
    LoopExpression,
    MacroExpression,
    MatchExpression,
    MethodCallExpression,
    ParenExpression,
    PathExpression,
    QualifiedPathExpression,
    RangeExpression,
    ReturnExpression,
    StructLiteral,
    SyntaxNode,
    TryExpression,
    TupleExpression,
    UnaryExpression,
    UnitExpression,
    WhileExpression,
)
from .operators import SHORT_CIRCUIT_OPERATORS, BinaryOperator, UnaryOperator, UnaryToken
from .statements import ExpressionStatement, LetStatement, Statement
