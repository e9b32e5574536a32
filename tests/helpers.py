"""
Reference evaluators and expression strategies shared by the tests.

The evaluators apply the same numpy float64 operations in the order each
notation dictates, so two notations of one expression must produce
bit-identical results (including inf and nan).
"""

import operator
import re

import numpy as np
from hypothesis import strategies as st

ATOM_RE = re.compile(r"[A-Za-z]+|[0-9]+")

OPERATIONS = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': operator.truediv,
    '^': operator.pow,
}


def atom_values(text, seed=0):
    rng = np.random.RandomState(seed)
    values = {}
    for atom in ATOM_RE.findall(text):
        if atom in values:
            continue
        if atom.isdigit():
            values[atom] = np.float64(int(atom))
        else:
            values[atom] = np.float64(rng.uniform(0.5, 2.0))
    return values


def evaluate_infix(text, values):
    """Evaluate infix text with Python's own precedence rules ('^' as '**')."""
    source = ATOM_RE.sub(lambda m: f"_v[{m.group(0)!r}]", text).replace('^', '**')
    with np.errstate(all='ignore'):
        return eval(source, {"_v": values})


def evaluate_postfix(text, values):
    stack = []
    with np.errstate(all='ignore'):
        for token in text.split():
            if token in OPERATIONS:
                right = stack.pop()
                left = stack.pop()
                stack.append(OPERATIONS[token](left, right))
            else:
                stack.append(values[token])
    assert len(stack) == 1
    return stack[0]


def evaluate_prefix(text, values):
    stack = []
    with np.errstate(all='ignore'):
        for token in reversed(text.split()):
            if token in OPERATIONS:
                left = stack.pop()
                right = stack.pop()
                stack.append(OPERATIONS[token](left, right))
            else:
                stack.append(values[token])
    assert len(stack) == 1
    return stack[0]


def same_value(left, right):
    if np.isnan(left) and np.isnan(right):
        return True
    return left == right


atoms = st.sampled_from(["a", "b", "c", "x", "y", "var", "2", "3", "10"])


def _combine(children):
    return st.one_of(
        st.tuples(children, st.sampled_from("+-*/^"), children).map(lambda t: "".join(t)),
        children.map(lambda inner: f"({inner})"),
    )


# Any two valid expressions joined by a binary operator form a valid expression.
expressions = st.recursive(atoms, _combine, max_leaves=12)
