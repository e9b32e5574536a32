from dataclasses import dataclass
from typing import Optional


@dataclass
class ParserConfig:
    """Configuration for tokenizer, parser and converter behavior"""
    max_length: int = 999
    # None leaves parenthesis depth bounded only by max_length.
    max_nesting_level: Optional[int] = None
    strip_outer_parens: bool = True
    cache_results: bool = True


DEFAULT_CONFIG = ParserConfig()
