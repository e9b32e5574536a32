# infix_notation/parser/tokenizer.py

import string
from typing import List

from .error_handler import LexError
from .token_stream import Token, TokenKind, TokenStream
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)

SINGLE_CHAR_TOKENS = {
    '(': TokenKind.LEFT_PAREN,
    ')': TokenKind.RIGHT_PAREN,
    '^': TokenKind.POWER,
    '*': TokenKind.TIMES,
    '/': TokenKind.DIVIDE,
    '+': TokenKind.PLUS,
    '-': TokenKind.MINUS,
}


class Tokenizer:
    """Tokenizer for whitespace-free infix arithmetic expressions."""

    @staticmethod
    def create_token_stream(text: str) -> TokenStream:
        tokens: List[Token] = []
        pos = 0
        while pos < len(text):
            char = text[pos]
            if char in LETTERS or char in DIGITS:
                # Letters and digits never share an atom: "2a" is two atoms.
                run = LETTERS if char in LETTERS else DIGITS
                start = pos
                while pos < len(text) and text[pos] in run:
                    pos += 1
                tokens.append(Token(TokenKind.ATOM, text[start:pos], start + 1))
                continue
            kind = SINGLE_CHAR_TOKENS.get(char)
            if kind is None:
                logger.debug("Rejecting character %r at column %d", char, pos + 1)
                raise LexError(char, pos + 1)
            tokens.append(Token(kind, char, pos + 1))
            pos += 1
        logger.debug("Tokenized %r into %d tokens", text, len(tokens))
        return TokenStream(tokens)


def tokenize(text: str) -> TokenStream:
    return Tokenizer.create_token_stream(text)
