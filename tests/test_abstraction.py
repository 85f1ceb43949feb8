# tests/test_abstraction.py

import pytest
import sympy

from setalgebra import Complement, Intersect, N, Term, U, Union
from setalgebra.abstraction import BooleanAbstraction


class TestBooleanAbstraction:
    """Translation between expressions and SymPy Boolean expressions."""

    def test_to_sympy(self, abcd):
        a, b, c, _ = abcd
        x, y, z = sympy.symbols('a b c')
        f = Intersect(Union(a, Complement(b)), c, U)
        assert BooleanAbstraction().to_sympy(f) == (x | ~y) & z

    def test_absolute_sets(self):
        abstraction = BooleanAbstraction()
        assert abstraction.to_sympy(U) is sympy.true
        assert abstraction.to_sympy(N) is sympy.false
        assert abstraction.from_sympy(sympy.true) is U
        assert abstraction.from_sympy(sympy.false) is N

    def test_terms_are_remembered(self):
        abstraction = BooleanAbstraction()
        p = Term(('p', 1))
        symbol = abstraction.to_sympy(p)
        assert abstraction.from_sympy(symbol) is p
        assert abstraction.to_sympy(p) is symbol

    def test_from_sympy_uses_negation_normal_form(self):
        x, y = sympy.symbols('x y')
        f = BooleanAbstraction().from_sympy(~(x & y))
        assert f == Union(Complement(Term('x')), Complement(Term('y'))) \
            or f == Union(Complement(Term('y')), Complement(Term('x')))

    def test_from_sympy_eliminates_other_operators(self, equivalent):
        x, y, z = sympy.symbols('x y z')
        abstraction = BooleanAbstraction()
        f = abstraction.from_sympy(sympy.Implies(x, y ^ z))
        assert set(f.terms()) == {Term('x'), Term('y'), Term('z')}
        g = Union(Complement(Term('x')),
                  Intersect(Term('y'), Complement(Term('z'))),
                  Intersect(Complement(Term('y')), Term('z')))
        assert equivalent(f, g)

    def test_from_sympy_rejects_non_boolean_expressions(self):
        x = sympy.Symbol('x')
        with pytest.raises(ValueError, match='cannot translate'):
            BooleanAbstraction().from_sympy(sympy.Eq(x, 1))

    def test_round_trip_is_equivalent(self, random_expressions, equivalent):
        abstraction = BooleanAbstraction()
        for f in random_expressions:
            assert equivalent(abstraction.from_sympy(abstraction.to_sympy(f)), f), f
