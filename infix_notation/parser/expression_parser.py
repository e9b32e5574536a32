# infix_notation/parser/expression_parser.py

from typing import Dict, List, Optional

from .config import ParserConfig, DEFAULT_CONFIG
from .error_handler import ParseError
from .parse_tree import (
    AtomOperand, Expr, ExprTail, ExprTailEnd, GroupedOperand, NodeKind,
    Power, PowerNode, PowerOperand, RaisedPower, Term, TermTail, TermTailEnd,
    Terminal,
)
from .token_stream import TokenKind, TokenStream
from .tokenizer import Tokenizer
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

ADDITIVE_OPERATORS = {
    TokenKind.PLUS: NodeKind.ADD_OP,
    TokenKind.MINUS: NodeKind.SUB_OP,
}
MULTIPLICATIVE_OPERATORS = {
    TokenKind.TIMES: NodeKind.MUL_OP,
    TokenKind.DIVIDE: NodeKind.DIV_OP,
}


class _OpenExpr:
    """
    An Expr whose operands are still being read.

    The three operator levels are kept as flat lists and folded into the
    grammar's nested shape once each level is complete. ``lparen`` is None
    for the outermost expression. ``raised`` records whether the group this
    frame becomes is the base of a '^'.
    """

    def __init__(self, lparen: Optional[Terminal] = None, raised: bool = False):
        self.lparen = lparen
        self.raised = raised
        self.operands: List[PowerOperand] = []
        self.power_ops: List[Terminal] = []
        self.powers: List[PowerNode] = []
        self.term_ops: List[Terminal] = []
        self.terms: List[Term] = []
        self.expr_ops: List[Terminal] = []

    def close_power(self) -> None:
        node: PowerNode = Power(self.operands[-1])
        # '^' is right-associative: fold from the last operand back to the first.
        for operand, op in zip(reversed(self.operands[:-1]), reversed(self.power_ops)):
            node = RaisedPower(operand, op, node)
        self.powers.append(node)
        self.operands, self.power_ops = [], []

    def close_term(self) -> None:
        tail = TermTailEnd()
        for op, power in zip(reversed(self.term_ops), reversed(self.powers[1:])):
            tail = TermTail(op, power, tail)
        self.terms.append(Term(self.powers[0], tail))
        self.powers, self.term_ops = [], []

    def close_expr(self) -> Expr:
        tail = ExprTailEnd()
        for op, term in zip(reversed(self.expr_ops), reversed(self.terms[1:])):
            tail = ExprTail(op, term, tail)
        return Expr(self.terms[0], tail)


class ExpressionParser:
    """
    A recursive descent parser for infix arithmetic expressions, with the
    recursion unrolled.

    Operands are read left to right. Each operand is attached to the open
    expression on top of a frame stack, and the operator that follows it
    decides which grammar level continues: '^' extends the Power, '*' or '/'
    the Term, '+' or '-' the Expr. Anything else completes the expression.
    A '(' pushes a new frame and its ')' pops it, so neither long operator
    chains nor deep nesting cost interpreter frames. Deep nesting is only
    limited when ``ParserConfig.max_nesting_level`` is set.

    The first mismatch raises ``ParseError``; nothing is skipped or retried.
    """

    def __init__(self, tokens: TokenStream, config: Optional[ParserConfig] = None):
        self.tokens = tokens
        self.config = config or DEFAULT_CONFIG

    def parse(self) -> Expr:
        if not self.tokens.has_more:
            raise ParseError("Empty expression", expected="operand", found=None, column=1)
        logger.debug("Starting parse of %d tokens", len(self.tokens))
        result = self.parse_expr()
        if self.tokens.has_more:
            token = self.tokens.peek()
            raise ParseError(
                f"Unexpected token '{token.value}' after expression",
                expected="end of expression", found=token.value, column=token.column
            )
        logger.debug("Completed parse: %s", result.kind.value)
        return result

    def parse_expr(self) -> Expr:
        frames = [_OpenExpr()]
        while True:
            raised = self._power_follows()
            if self._next_kind() is TokenKind.LEFT_PAREN:
                frames.append(self._open_group(raised, len(frames)))
                continue
            operand: PowerOperand = self.parse_atom_operand()
            while self._attach(frames[-1], operand, raised):
                frame = frames.pop()
                expr = frame.close_expr()
                if not frames:
                    return expr
                rparen = self._match(TokenKind.RIGHT_PAREN, NodeKind.RPAREN, "')'")
                logger.debug("Parsed parenthesized group opened at column %d", frame.lparen.column)
                operand = GroupedOperand(frame.lparen, expr, rparen)
                raised = frame.raised

    def parse_atom_operand(self) -> AtomOperand:
        token = self.tokens.peek()
        if token is None:
            raise ParseError(
                "Expected operand, got end of expression",
                expected="operand", found=None, column=self._end_column()
            )
        if token.kind is not TokenKind.ATOM:
            raise ParseError(
                f"Expected operand, got '{token.value}'",
                expected="operand", found=token.value, column=token.column
            )
        return AtomOperand(self._match(TokenKind.ATOM, NodeKind.ATOM, "atom"))

    def _open_group(self, raised: bool, level: int) -> _OpenExpr:
        opening = self.tokens.peek()
        limit = self.config.max_nesting_level
        if limit is not None and level > limit:
            raise ParseError(
                f"Maximum nesting level ({limit}) exceeded",
                expected=None, found=opening.value, column=opening.column
            )
        lparen = self._match(TokenKind.LEFT_PAREN, NodeKind.LPAREN, "'('")
        return _OpenExpr(lparen, raised)

    def _attach(self, frame: _OpenExpr, operand: PowerOperand, raised: bool) -> bool:
        """Add ``operand`` to ``frame`` and consume the operator after it.

        Returns True when no operator follows, i.e. the frame's Expr is complete.
        """
        frame.operands.append(operand)
        if raised:
            frame.power_ops.append(self._match(TokenKind.POWER, NodeKind.POWER_OP, "'^'"))
            return False
        frame.close_power()
        if self._next_kind() in MULTIPLICATIVE_OPERATORS:
            frame.term_ops.append(self._match_operator(MULTIPLICATIVE_OPERATORS))
            return False
        frame.close_term()
        if self._next_kind() in ADDITIVE_OPERATORS:
            frame.expr_ops.append(self._match_operator(ADDITIVE_OPERATORS))
            return False
        return True

    def _power_follows(self) -> bool:
        """
        Decide whether the operand starting at the cursor is the base of a '^'.

        For an atom this is the token right after it. For a parenthesized group
        it is the token after the ')' that closes the group, found by depth
        counting so that inner groups are stepped over.
        """
        token = self.tokens.peek()
        if token is None:
            return False
        if token.kind is TokenKind.ATOM:
            following = self.tokens.peek(2)
        elif token.kind is TokenKind.LEFT_PAREN:
            closing = self.tokens.find_matching_paren()
            if closing is None:
                raise ParseError(
                    "Unmatched '('",
                    expected="')'", found=None, column=token.column
                )
            following = self.tokens.token_at(closing + 1)
        else:
            return False
        return following is not None and following.kind is TokenKind.POWER

    def _match(self, token_kind: TokenKind, node_kind: NodeKind, description: str) -> Terminal:
        token = self.tokens.peek()
        if token is None:
            raise ParseError(
                f"Expected {description}, got end of expression",
                expected=description, found=None, column=self._end_column()
            )
        if token.kind is not token_kind:
            raise ParseError(
                f"Expected {description}, got '{token.value}'",
                expected=description, found=token.value, column=token.column
            )
        self.tokens.consume()
        return Terminal(node_kind, token.value, token.column)

    def _match_operator(self, operators: Dict[TokenKind, NodeKind]) -> Terminal:
        token = self.tokens.peek()
        return self._match(token.kind, operators[token.kind], f"'{token.value}'")

    def _next_kind(self) -> Optional[TokenKind]:
        token = self.tokens.peek()
        return token.kind if token is not None else None

    def _end_column(self) -> int:
        if not len(self.tokens):
            return 1
        last = self.tokens.tokens[-1]
        return last.column + len(last.value)


def parse(tokens: TokenStream, config: Optional[ParserConfig] = None) -> Expr:
    return ExpressionParser(tokens, config).parse()


def parse_expression(expr_text: str, config: Optional[ParserConfig] = None) -> Expr:
    """Tokenize and parse ``expr_text``; raises LexError or ParseError."""
    return parse(Tokenizer.create_token_stream(expr_text), config)
