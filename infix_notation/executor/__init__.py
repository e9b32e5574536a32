# infix_notation/executor/__init__.py

from .batch import convert_frame, convert_series, OUTPUT_COLUMNS

__all__ = [
    'convert_frame',
    'convert_series',
    'OUTPUT_COLUMNS',
]
