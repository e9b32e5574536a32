# infix_notation/parser/error_handler.py

from typing import List, Optional, Tuple


class NotationError(Exception):
    """Base class for every failure raised while converting an expression."""
    def __init__(self, message: str, column: int = 0):
        self.message = message
        self.column = column
        super().__init__(f"Error at column {column}: {message}" if column else f"Error: {message}")


class LexError(NotationError):
    """Raised when the input contains a character outside the token alphabet."""
    def __init__(self, char: str, column: int):
        self.char = char
        super().__init__(f"Unrecognized character {char!r}", column)


class ParseError(NotationError):
    """Custom exception for parsing errors"""
    def __init__(self, message: str, expected: Optional[str] = None,
                 found: Optional[str] = None, column: int = 0):
        self.expected = expected
        self.found = found
        super().__init__(message, column)


class InputTooLongError(NotationError):
    def __init__(self, length: int, max_length: int):
        self.length = length
        self.max_length = max_length
        super().__init__(f"Expression is {length} characters long; the limit is {max_length}")


class ErrorHandler:
    """
    Centralized error collection for batch conversions.

    Single conversions raise on the first failure. When many expressions are
    converted together the failures are collected here instead, keyed by the
    row ("line") they came from and the column inside that expression.
    """
    def __init__(self):
        self.errors = []

    def add_error(self, message: str, line: int = 0, column: int = 0) -> None:
        """Add an error with position information"""
        self.errors.append((message, line, column))

    def add_exception(self, error: NotationError, line: int = 0) -> None:
        self.add_error(error.message, line, error.column)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def get_errors(self) -> List[Tuple[str, int, int]]:
        return self.errors

    def get_formatted_errors(self) -> List[str]:
        """Get formatted error messages"""
        return [f"Error at line {line}, column {col}: {msg}" for msg, line, col in self.errors]

    def clear(self) -> None:
        """Clear all errors"""
        self.errors = []
