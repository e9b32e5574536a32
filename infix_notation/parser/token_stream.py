# infix_notation/parser/token_stream.py

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class TokenKind(Enum):
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    POWER = "^"
    TIMES = "*"
    DIVIDE = "/"
    PLUS = "+"
    MINUS = "-"
    ATOM = "atom"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str
    column: int


class TokenStream:
    """Token stream with lookahead and a depth-aware parenthesis scan."""

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.position = 0

    def peek(self, lookahead: int = 1) -> Optional[Token]:
        """Look ahead n tokens without consuming"""
        if self.position + lookahead - 1 < len(self.tokens):
            return self.tokens[self.position + lookahead - 1]
        return None

    def consume(self) -> Optional[Token]:
        """Consume and return next token"""
        if self.position < len(self.tokens):
            token = self.tokens[self.position]
            self.position += 1
            return token
        return None

    def find_matching_paren(self, index: Optional[int] = None) -> Optional[int]:
        """
        Return the index of the ')' that closes the '(' at ``index``.

        ``index`` defaults to the current position. Nesting depth is tracked so
        inner groups are skipped; None means the group is never closed.
        """
        if index is None:
            index = self.position
        depth = 0
        for i in range(index, len(self.tokens)):
            kind = self.tokens[i].kind
            if kind is TokenKind.LEFT_PAREN:
                depth += 1
            elif kind is TokenKind.RIGHT_PAREN:
                depth -= 1
                if depth == 0:
                    return i
        return None

    def token_at(self, index: int) -> Optional[Token]:
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return None

    @property
    def has_more(self) -> bool:
        """Check if more tokens are available"""
        return self.position < len(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self):
        return iter(self.tokens)
