"""Shared fixtures for the setalgebra test suite.

Semantic checks go through the Boolean abstraction: two expressions are equal
as sets for all interpretations of their terms if and only if their SymPy
translations agree on all truth assignments.
"""

import itertools
import random

import pytest
import sympy

from setalgebra import Complement, Expression, Intersect, N, Term, U, Union
from setalgebra.abstraction import BooleanAbstraction


def _equivalent(f: Expression, g: Expression) -> bool:
    abstraction = BooleanAbstraction()
    f_as_sympy = abstraction.to_sympy(f)
    g_as_sympy = abstraction.to_sympy(g)
    symbols = sorted(f_as_sympy.free_symbols | g_as_sympy.free_symbols, key=str)
    for values in itertools.product((sympy.true, sympy.false), repeat=len(symbols)):
        assignment = dict(zip(symbols, values))
        if bool(f_as_sympy.xreplace(assignment)) != bool(g_as_sympy.xreplace(assignment)):
            return False
    return True


def _random_expression(rng: random.Random, depth: int) -> Expression:
    if depth == 0 or rng.random() < 0.2:
        choice = rng.random()
        if choice < 0.05:
            return U
        if choice < 0.1:
            return N
        return Term(rng.choice('abcd'))
    op = rng.choice((Union, Intersect, Complement))
    if op is Complement:
        return Complement(_random_expression(rng, depth - 1))
    return op(*(_random_expression(rng, depth - 1) for _ in range(rng.randint(2, 4))))


@pytest.fixture
def equivalent():
    """Provide a semantic equivalence test for expressions.

    Returns:
        Callable[[Expression, Expression], bool]: Truth table comparison of
        the Boolean abstractions
    """
    return _equivalent


@pytest.fixture(scope="session")
def random_expressions():
    """Provide a reproducible sample of random expressions over the terms
    a, b, c, d, including absolute sets.

    Returns:
        List[Expression]: 80 expressions of depth at most 3 with up to
        four arguments per operator
    """
    rng = random.Random(20240229)
    return [_random_expression(rng, 3) for _ in range(80)]


@pytest.fixture
def abcd():
    """Provide the terms a, b, c, d.

    Returns:
        Tuple[Term, ...]: Four distinct terms
    """
    return Term('a'), Term('b'), Term('c'), Term('d')
