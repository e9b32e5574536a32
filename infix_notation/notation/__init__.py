# infix_notation/notation/__init__.py

from .generators import (
    NotationGenerator,
    ParenthesizedGenerator,
    PostfixGenerator,
    PrefixGenerator,
    flatten_chain,
    flatten_power,
    strip_outer_parens,
    fully_parenthesize,
    to_postfix,
    to_prefix,
)
from .converter import Notations, convert, convert_full, render, get_conversion_cache

__all__ = [
    'NotationGenerator',
    'ParenthesizedGenerator',
    'PostfixGenerator',
    'PrefixGenerator',
    'flatten_chain',
    'flatten_power',
    'strip_outer_parens',
    'fully_parenthesize',
    'to_postfix',
    'to_prefix',
    'Notations',
    'convert',
    'convert_full',
    'render',
    'get_conversion_cache',
]
