# infix_notation/notation/generators.py
"""
Tree walkers that re-linearize a parse tree into parenthesized infix,
postfix and prefix notation.

The grammar stores a left-associative chain ``e0 op1 e1 ... opn en`` as a
head operand followed by a right-nested list of tail nodes. Walking that list
naively would associate to the right, so every generator first flattens it
into ``(e0, [(op1, e1), ..., (opn, en)])`` and then emits the operators in the
left-associative order its notation needs. Exponentiation chains are
right-nested in the tree and right-associative in meaning; they are flattened
too, so a long ``a^b^c^...`` chain is one rendering step rather than one per
operator.
"""

from typing import Callable, List, NamedTuple, Sequence, Tuple, Union

from ..parser.parse_tree import (
    AtomOperand, Expr, ExprTail, ParseTreeNode, PowerNode, PowerOperand,
    RaisedPower, Term, TermTail, Terminal,
)
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

ChainHead = Union[Term, PowerNode]
Chain = Tuple[ChainHead, List[Tuple[str, ChainHead]]]


def flatten_chain(node: Union[Expr, Term]) -> Chain:
    """Return the head operand and the (operator, operand) links of a chain."""
    if isinstance(node, Expr):
        head, tail = node.term, node.tail
    else:
        head, tail = node.power, node.tail
    links = []
    while isinstance(tail, (ExprTail, TermTail)):
        operand = tail.term if isinstance(tail, ExprTail) else tail.power
        links.append((tail.op.text, operand))
        tail = tail.rest
    return head, links


def flatten_power(node: PowerNode) -> Tuple[List[PowerOperand], List[str]]:
    """Return the operands and '^' operators of a right-nested power chain."""
    operands: List[PowerOperand] = []
    operators: List[str] = []
    while isinstance(node, RaisedPower):
        operands.append(node.operand)
        operators.append(node.op.text)
        node = node.exponent
    operands.append(node.operand)
    return operands, operators


def strip_outer_parens(text: str) -> str:
    """Drop one pair of parentheses if it encloses the whole of ``text``."""
    if not (text.startswith("(") and text.endswith(")")):
        return text
    depth = 0
    for index, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return text[1:-1] if index == len(text) - 1 else text
    return text


class Step(NamedTuple):
    """Subtrees a node needs rendered first, and how to join their renderings."""
    parts: Sequence[ParseTreeNode]
    combine: Callable[[List[str]], str]


class NotationGenerator:
    """
    Base visitor shared by the three notations.

    ``visit`` dispatches on the node kind to ``visit_<kind>``, which returns a
    ``Step`` rather than a string. The steps are evaluated bottom-up on an
    explicit stack, so deeply nested groups cost no interpreter frames.
    Subclasses only decide how an atom, an operator chain and a power chain
    are written. Generators hold no per-call state, so one instance can
    render any number of trees, from any thread.
    """

    name = "notation"

    def generate(self, tree: ParseTreeNode) -> str:
        result = self.visit(tree)
        logger.debug("Rendered %s form: %s", self.name, result)
        return result

    def visit(self, node: ParseTreeNode) -> str:
        # Each entry: the node's step and the renderings of its finished parts.
        stack: List[Tuple[Step, List[str]]] = [(self.step(node), [])]
        while True:
            step, rendered = stack[-1]
            if len(rendered) < len(step.parts):
                stack.append((self.step(step.parts[len(rendered)]), []))
                continue
            stack.pop()
            text = step.combine(rendered)
            if not stack:
                return text
            stack[-1][1].append(text)

    def step(self, node: ParseTreeNode) -> Step:
        method = getattr(self, f"visit_{node.kind.name.lower()}", self.visit_default)
        return method(node)

    def visit_default(self, node: ParseTreeNode) -> Step:
        raise TypeError(f"{type(self).__name__} cannot render a {node.kind.value} node")

    def visit_expr(self, node: Expr) -> Step:
        return self._chain_step(node)

    def visit_term(self, node: Term) -> Step:
        return self._chain_step(node)

    def visit_power(self, node: PowerNode) -> Step:
        operands, operators = flatten_power(node)
        if not operators:
            return Step(operands, lambda rendered: rendered[0])
        return Step(operands, lambda rendered: self.render_power(rendered, operators))

    def visit_power_operand(self, node: PowerOperand) -> Step:
        # Source parentheses are dropped; each notation regenerates grouping.
        child = node.atom if isinstance(node, AtomOperand) else node.expr
        return Step([child], lambda rendered: rendered[0])

    def visit_atom(self, node: Terminal) -> Step:
        return Step((), lambda rendered: self.render_atom(node.text))

    def _chain_step(self, node: Union[Expr, Term]) -> Step:
        head, links = flatten_chain(node)
        operators = [op for op, _ in links]

        def combine(rendered: List[str]) -> str:
            if not operators:
                return rendered[0]
            return self.render_chain(rendered[0], list(zip(operators, rendered[1:])))

        return Step([head] + [operand for _, operand in links], combine)

    def render_atom(self, text: str) -> str:
        return text

    def render_chain(self, first: str, links: List[Tuple[str, str]]) -> str:
        raise NotImplementedError

    def render_power(self, operands: List[str], operators: List[str]) -> str:
        raise NotImplementedError


class ParenthesizedGenerator(NotationGenerator):
    """Infix with every binary operation wrapped in its own parentheses."""

    name = "fully-parenthesized"

    def __init__(self, strip_outer_parens: bool = True):
        self.strip_outer_parens = strip_outer_parens

    def generate(self, tree: ParseTreeNode) -> str:
        result = self.visit(tree)
        if self.strip_outer_parens:
            result = strip_outer_parens(result)
        logger.debug("Rendered %s form: %s", self.name, result)
        return result

    def render_chain(self, first: str, links: List[Tuple[str, str]]) -> str:
        parts = ["(" * len(links), first]
        for op, operand in links:
            parts.append(f"{op}{operand})")
        return "".join(parts)

    def render_power(self, operands: List[str], operators: List[str]) -> str:
        result = operands[-1]
        for operand, op in zip(reversed(operands[:-1]), reversed(operators)):
            result = f"({operand}{op}{result})"
        return result


class PostfixGenerator(NotationGenerator):
    """Reverse Polish notation, tokens separated by single spaces."""

    name = "postfix"

    def render_chain(self, first: str, links: List[Tuple[str, str]]) -> str:
        parts = [first]
        for op, operand in links:
            parts.extend((operand, op))
        return " ".join(parts)

    def render_power(self, operands: List[str], operators: List[str]) -> str:
        result = operands[-1]
        for operand, op in zip(reversed(operands[:-1]), reversed(operators)):
            result = f"{operand} {result} {op}"
        return result


class PrefixGenerator(NotationGenerator):
    """Polish notation, tokens separated by single spaces."""

    name = "prefix"

    def render_chain(self, first: str, links: List[Tuple[str, str]]) -> str:
        (op, operand), rest = links[0], links[1:]
        result = f"{op} {first} {operand}"
        for op, operand in rest:
            result = f"{op} {result} {operand}"
        return result

    def render_power(self, operands: List[str], operators: List[str]) -> str:
        result = operands[-1]
        for operand, op in zip(reversed(operands[:-1]), reversed(operators)):
            result = f"{op} {operand} {result}"
        return result


PARENTHESIZED = ParenthesizedGenerator()
POSTFIX = PostfixGenerator()
PREFIX = PrefixGenerator()


def fully_parenthesize(tree: ParseTreeNode, strip_outer: bool = True) -> str:
    generator = PARENTHESIZED if strip_outer else ParenthesizedGenerator(strip_outer_parens=False)
    return generator.generate(tree)


def to_postfix(tree: ParseTreeNode) -> str:
    return POSTFIX.generate(tree)


def to_prefix(tree: ParseTreeNode) -> str:
    return PREFIX.generate(tree)
