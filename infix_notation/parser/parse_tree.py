# infix_notation/parser/parse_tree.py
"""
Parse tree for the left-recursion-free expression grammar::

    Expr         -> Term ExprTail
    ExprTail     -> (+|-) Term ExprTail | epsilon
    Term         -> Power TermTail
    TermTail     -> (*|/) Power TermTail | epsilon
    Power        -> PowerOperand ^ Power | PowerOperand
    PowerOperand -> Atom | ( Expr )

Every production alternative has its own frozen dataclass, so a node always
holds exactly the children its rule derives. Alternatives of the same
nonterminal share a ``kind``.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import ClassVar, List, Tuple, Union


class NodeKind(Enum):
    EXPR = "Expr"
    EXPR_TAIL = "ExprTail"
    TERM = "Term"
    TERM_TAIL = "TermTail"
    POWER = "Power"
    POWER_OPERAND = "PowerOperand"
    LPAREN = "LParen"
    RPAREN = "RParen"
    POWER_OP = "PowerOp"
    MUL_OP = "MulOp"
    DIV_OP = "DivOp"
    ADD_OP = "AddOp"
    SUB_OP = "SubOp"
    ATOM = "Atom"
    EPSILON = "Epsilon"

    @property
    def is_terminal(self) -> bool:
        return self not in NONTERMINALS


NONTERMINALS = frozenset({
    NodeKind.EXPR, NodeKind.EXPR_TAIL, NodeKind.TERM,
    NodeKind.TERM_TAIL, NodeKind.POWER, NodeKind.POWER_OPERAND,
})

OPERATOR_KINDS = frozenset({
    NodeKind.POWER_OP, NodeKind.MUL_OP, NodeKind.DIV_OP,
    NodeKind.ADD_OP, NodeKind.SUB_OP,
})


class ParseTreeNode:
    """Common interface of all parse tree variants."""
    kind: ClassVar[NodeKind]

    @property
    def text(self) -> str:
        return ""

    @property
    def children(self) -> Tuple["ParseTreeNode", ...]:
        return tuple(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class Terminal(ParseTreeNode):
    kind: NodeKind
    lexeme: str
    column: int = 0

    def __post_init__(self):
        if not self.kind.is_terminal or self.kind is NodeKind.EPSILON:
            raise ValueError(f"{self.kind.value} is not a lexeme-carrying terminal")

    @property
    def text(self) -> str:
        return self.lexeme

    @property
    def children(self) -> Tuple[ParseTreeNode, ...]:
        return ()


@dataclass(frozen=True)
class Epsilon(ParseTreeNode):
    kind: ClassVar[NodeKind] = NodeKind.EPSILON


@dataclass(frozen=True)
class AtomOperand(ParseTreeNode):
    kind: ClassVar[NodeKind] = NodeKind.POWER_OPERAND
    atom: Terminal


@dataclass(frozen=True)
class GroupedOperand(ParseTreeNode):
    kind: ClassVar[NodeKind] = NodeKind.POWER_OPERAND
    lparen: Terminal
    expr: "Expr"
    rparen: Terminal


PowerOperand = Union[AtomOperand, GroupedOperand]


@dataclass(frozen=True)
class Power(ParseTreeNode):
    kind: ClassVar[NodeKind] = NodeKind.POWER
    operand: PowerOperand


@dataclass(frozen=True)
class RaisedPower(ParseTreeNode):
    kind: ClassVar[NodeKind] = NodeKind.POWER
    operand: PowerOperand
    op: Terminal
    exponent: "PowerNode"


PowerNode = Union[Power, RaisedPower]


@dataclass(frozen=True)
class TermTailEnd(ParseTreeNode):
    kind: ClassVar[NodeKind] = NodeKind.TERM_TAIL
    epsilon: Epsilon = Epsilon()


@dataclass(frozen=True)
class TermTail(ParseTreeNode):
    kind: ClassVar[NodeKind] = NodeKind.TERM_TAIL
    op: Terminal
    power: PowerNode
    rest: "TermTailNode"


TermTailNode = Union[TermTail, TermTailEnd]


@dataclass(frozen=True)
class Term(ParseTreeNode):
    kind: ClassVar[NodeKind] = NodeKind.TERM
    power: PowerNode
    tail: TermTailNode


@dataclass(frozen=True)
class ExprTailEnd(ParseTreeNode):
    kind: ClassVar[NodeKind] = NodeKind.EXPR_TAIL
    epsilon: Epsilon = Epsilon()


@dataclass(frozen=True)
class ExprTail(ParseTreeNode):
    kind: ClassVar[NodeKind] = NodeKind.EXPR_TAIL
    op: Terminal
    term: Term
    rest: "ExprTailNode"


ExprTailNode = Union[ExprTail, ExprTailEnd]


@dataclass(frozen=True)
class Expr(ParseTreeNode):
    kind: ClassVar[NodeKind] = NodeKind.EXPR
    term: Term
    tail: ExprTailNode


def format_tree(node: ParseTreeNode, indent: str = "  ") -> str:
    """Render ``node`` as an indented outline, one grammar symbol per line."""
    lines: List[str] = []
    stack = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        label = current.kind.value
        if current.text:
            label = f"{label} {current.text!r}"
        lines.append(f"{indent * depth}{label}")
        stack.extend((child, depth + 1) for child in reversed(current.children))
    return "\n".join(lines)
