# infix_notation/parser/__init__.py

from .token_stream import Token, TokenKind, TokenStream
from .tokenizer import Tokenizer, tokenize
from .error_handler import ErrorHandler, NotationError, LexError, ParseError, InputTooLongError
from .config import ParserConfig, DEFAULT_CONFIG
from .parse_tree import (
    NodeKind,
    ParseTreeNode,
    Terminal,
    Epsilon,
    Expr,
    ExprTail,
    ExprTailEnd,
    Term,
    TermTail,
    TermTailEnd,
    Power,
    RaisedPower,
    AtomOperand,
    GroupedOperand,
    format_tree,
)
from .expression_parser import ExpressionParser, parse, parse_expression

__all__ = [
    'Token',
    'TokenKind',
    'TokenStream',
    'Tokenizer',
    'tokenize',
    'ErrorHandler',
    'NotationError',
    'LexError',
    'ParseError',
    'InputTooLongError',
    'ParserConfig',
    'DEFAULT_CONFIG',
    'NodeKind',
    'ParseTreeNode',
    'Terminal',
    'Epsilon',
    'Expr',
    'ExprTail',
    'ExprTailEnd',
    'Term',
    'TermTail',
    'TermTailEnd',
    'Power',
    'RaisedPower',
    'AtomOperand',
    'GroupedOperand',
    'format_tree',
    'ExpressionParser',
    'parse',
    'parse_expression',
]
