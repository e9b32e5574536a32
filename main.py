"""
Main Application (main.py):
Prompts for one infix arithmetic expression and prints it in three forms:

Fully-parenthesized infix, e.g. (a+3)+(var^(b+(282*c))),
Postfix (operators after their operands), e.g. a 3 + var b 282 c * + ^ +,
Prefix (operators before their operands), e.g. + + a 3 ^ var + b * 282 c.

Run ``python main.py -e "a+b*c"`` to skip the prompt.
"""

import sys

from infix_notation.cli import main

if __name__ == "__main__":
    sys.exit(main())
