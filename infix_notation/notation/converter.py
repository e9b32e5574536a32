# infix_notation/notation/converter.py

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..parser.config import ParserConfig, DEFAULT_CONFIG
from ..parser.error_handler import ErrorHandler, InputTooLongError, NotationError
from ..parser.expression_parser import parse_expression
from ..parser.parse_tree import Expr
from ..utils.logging_config import get_logger, PerformanceTimer
from .generators import fully_parenthesize, to_postfix, to_prefix

logger = get_logger(__name__)


@dataclass(frozen=True)
class Notations:
    parenthesized: str
    postfix: str
    prefix: str

    def as_dict(self) -> Dict[str, str]:
        return {
            "parenthesized": self.parenthesized,
            "postfix": self.postfix,
            "prefix": self.prefix,
        }


class ConversionCache:
    """Cache for converted expressions to avoid redundant parsing."""
    def __init__(self):
        self.cache = {}
        self.hits = 0
        self.misses = 0

    @staticmethod
    def _key(expr_text: str, config: ParserConfig):
        return (expr_text, config.strip_outer_parens, config.max_nesting_level, config.max_length)

    def get(self, expr_text: str, config: ParserConfig) -> Optional[Dict[str, Any]]:
        result = self.cache.get(self._key(expr_text, config))
        if result is None:
            self.misses += 1
        else:
            self.hits += 1
        return result

    def put(self, expr_text: str, config: ParserConfig, result: Dict[str, Any]) -> None:
        self.cache[self._key(expr_text, config)] = result

    def clear(self) -> None:
        self.cache.clear()
        self.hits = 0
        self.misses = 0

    def stats(self) -> Dict[str, int]:
        return {"size": len(self.cache), "hits": self.hits, "misses": self.misses}


_conversion_cache = ConversionCache()


def get_conversion_cache() -> ConversionCache:
    return _conversion_cache


def _copy_result(result: Dict[str, Any]) -> Dict[str, Any]:
    # Callers own what they receive; the cached entry stays untouched.
    return dict(result, errors=list(result["errors"]))


def render(tree: Expr, config: Optional[ParserConfig] = None) -> Notations:
    """Render an already parsed tree in all three notations."""
    config = config or DEFAULT_CONFIG
    return Notations(
        parenthesized=fully_parenthesize(tree, strip_outer=config.strip_outer_parens),
        postfix=to_postfix(tree),
        prefix=to_prefix(tree),
    )


def convert(expr_text: str, config: Optional[ParserConfig] = None) -> Notations:
    """
    Convert an infix expression to its three notations.

    Raises:
        InputTooLongError: the text exceeds ``config.max_length``
        LexError: the text contains a character outside the token alphabet
        ParseError: the tokens do not form an expression
    """
    config = config or DEFAULT_CONFIG
    if len(expr_text) > config.max_length:
        raise InputTooLongError(len(expr_text), config.max_length)
    with PerformanceTimer(f"convert {expr_text[:40]!r}"):
        tree = parse_expression(expr_text, config)
        return render(tree, config)


def convert_full(expr_text: str, config: Optional[ParserConfig] = None) -> Dict[str, Any]:
    """
    Convert ``expr_text`` and report failures as data instead of raising.

    The result holds the raw text, the parse tree (None on failure), the
    three notations (None on failure) and a list of formatted errors. Each call
    returns a fresh dict, also when the result comes from the cache.
    """
    config = config or DEFAULT_CONFIG
    if config.cache_results:
        cached = _conversion_cache.get(expr_text, config)
        if cached is not None:
            return _copy_result(cached)

    error_handler = ErrorHandler()
    tree = None
    notations = None
    try:
        if len(expr_text) > config.max_length:
            raise InputTooLongError(len(expr_text), config.max_length)
        with PerformanceTimer(f"convert {expr_text[:40]!r}"):
            tree = parse_expression(expr_text, config)
            notations = render(tree, config)
    except NotationError as e:
        logger.debug("Conversion of %r failed: %s", expr_text, e)
        error_handler.add_exception(e, line=1)

    result = {
        "raw": expr_text,
        "parse_tree": tree,
        "parenthesized": notations.parenthesized if notations else None,
        "postfix": notations.postfix if notations else None,
        "prefix": notations.prefix if notations else None,
        "errors": error_handler.get_formatted_errors(),
    }
    if config.cache_results:
        _conversion_cache.put(expr_text, config, result)
        return _copy_result(result)
    return result
