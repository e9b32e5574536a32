"""
Pytest fixtures for the infix_notation tests.
"""

import pytest
import pandas as pd

from infix_notation.notation.converter import get_conversion_cache
from infix_notation.parser.config import ParserConfig


@pytest.fixture(autouse=True)
def clear_conversion_cache():
    """Every test starts with an empty conversion cache."""
    get_conversion_cache().clear()
    yield
    get_conversion_cache().clear()


@pytest.fixture
def config():
    return ParserConfig()


@pytest.fixture
def uncached_config():
    return ParserConfig(cache_results=False)


@pytest.fixture
def expression_data():
    """A mix of valid and invalid expressions for batch conversion."""
    return pd.DataFrame({
        'id': [1, 2, 3, 4, 5],
        'expression': ['a+b+c', 'a^b^c', 'a+', '(a+b)*c', 'a#b'],
    })


@pytest.fixture
def expected_results():
    """Known renderings as (parenthesized, postfix, prefix)."""
    return {
        'a+b+c': ('(a+b)+c', 'a b + c +', '+ + a b c'),
        'a-b-c': ('(a-b)-c', 'a b - c -', '- - a b c'),
        'a^b^c': ('a^(b^c)', 'a b c ^ ^', '^ a ^ b c'),
        'a+b*c^d': ('a+(b*(c^d))', 'a b c d ^ * +', '+ a * b ^ c d'),
        '(a+b)*c': ('(a+b)*c', 'a b + c *', '* + a b c'),
        '(a+(b*c))^2': ('(a+(b*c))^2', 'a b c * + 2 ^', '^ + a * b c 2'),
    }
