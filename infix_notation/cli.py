# infix_notation/cli.py
"""
Command-line front end.

Reads one infix expression (from ``--expression`` or a prompted line on
stdin) and prints its fully-parenthesized, postfix and prefix forms.
"""

import argparse
import sys
from typing import List, Optional, TextIO

from .notation.converter import render
from .parser.config import ParserConfig
from .parser.error_handler import InputTooLongError, NotationError
from .parser.expression_parser import parse_expression
from .parser.parse_tree import format_tree
from .utils.logging_config import get_logger, init_default_logging

logger = get_logger(__name__)

PROMPT = (
    "\nPlease enter an arithmetic expression in infix form. The expression may\n"
    "contain integer numbers, variable names, parentheses, and the operators\n"
    "^ (exponentiation), * (multiplication), / (division), + (addition), and\n"
    "- (subtraction). Variable names may contain lower-case letters and\n"
    "upper-case letters, but may not contain any other type of character. The\n"
    "expression must not contain any spaces.\n"
    "\nExample:\n"
    "   (a+3)+var^(b+282*c)\n\n"
    ">> "
)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="infix-notation",
        description="Show an infix arithmetic expression in fully-parenthesized, postfix and prefix form."
    )
    parser.add_argument("-e", "--expression",
                        help="Expression to convert; prompts on stdin when omitted")
    parser.add_argument("--tree", action="store_true",
                        help="Also print the parse tree")
    parser.add_argument("--max-length", type=int, default=ParserConfig.max_length,
                        help="Longest accepted expression (default: %(default)s)")
    parser.add_argument("--log-level", default=None,
                        help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    return parser


def read_expression(stream: TextIO, out: TextIO, max_length: int) -> Optional[str]:
    """Prompt for and read one line, keeping at most ``max_length`` characters."""
    out.write(PROMPT)
    out.flush()
    line = stream.readline()
    if not line:
        return None
    line = line[:max_length]
    newline = line.find("\n")
    return line if newline == -1 else line[:newline]


def main(argv: Optional[List[str]] = None, stdin: TextIO = None, stdout: TextIO = None,
         stderr: TextIO = None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_arg_parser().parse_args(argv)
    init_default_logging(args.log_level)
    config = ParserConfig(max_length=args.max_length)

    if args.expression is not None:
        expression = args.expression
    else:
        expression = read_expression(stdin, stdout, config.max_length)
        if expression is None:
            stderr.write("Error receiving input!\n")
            return 1

    try:
        if len(expression) > config.max_length:
            raise InputTooLongError(len(expression), config.max_length)
        tree = parse_expression(expression, config)
        notations = render(tree, config)
    except NotationError as e:
        logger.debug("Rejected input %r", expression)
        stderr.write(f"{e}\n")
        return 1

    if args.tree:
        stdout.write("\nThe parse tree of the expression:\n")
        stdout.write(format_tree(tree) + "\n")
    stdout.write("\nThe fully-parenthesized form of the expression:\n")
    stdout.write(f"     {notations.parenthesized}\n")
    stdout.write("\nThe expression with postfix binary operators:\n")
    stdout.write(f"     {notations.postfix}\n")
    stdout.write("\nThe expression with prefix binary operators:\n")
    stdout.write(f"     {notations.prefix}\n\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
