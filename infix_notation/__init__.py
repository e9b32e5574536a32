# infix_notation/__init__.py

from .parser import *
from .notation import *
from .executor import *
from . import parser, notation, executor

__version__ = "0.1.0"

__all__ = (
    parser.__all__ +
    notation.__all__ +
    executor.__all__
)
