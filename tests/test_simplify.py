# tests/test_simplify.py

import pytest

from setalgebra import Complement, Intersect, N, Term, U, Union, simplify
from setalgebra.simplify import Simplify


def _subexpressions(f):
    yield f
    for child in f.children:
        yield from _subexpressions(child)


class TestLaws:
    """Each law of set algebra applied in isolation."""

    def test_leaves_are_unchanged(self, abcd):
        a = abcd[0]
        assert simplify(a) is a
        assert simplify(U) is U
        assert simplify(N) is N

    def test_involution(self, abcd):
        a = abcd[0]
        assert simplify(Complement(Complement(a))) == a
        assert simplify(~~~a) == ~a
        assert simplify(~~~~a) == a

    def test_complement_of_absolute_sets(self):
        assert simplify(Complement(U)) is N
        assert simplify(Complement(N)) is U
        assert simplify(~~U) is U

    def test_complement_of_absolute_sets_is_folded(self, abcd):
        a = abcd[0]
        assert not isinstance(simplify(Complement(U)), Complement)
        assert simplify(Union(a, Complement(U))) == a
        assert simplify(Intersect(a, Complement(N))) == a
        assert simplify(Intersect(a, Complement(U))) is N

    def test_empty_results_are_neutral_elements(self):
        assert simplify(Union(N, Complement(U))) is N
        assert simplify(Intersect(U, Complement(N), U)) is U

    def test_de_morgan(self, abcd):
        a, b, _, _ = abcd
        assert simplify(~Union(a, b)) == Intersect(~a, ~b)
        assert simplify(~Intersect(a, b)) == Union(~a, ~b)
        assert simplify(~Intersect(~a, ~b)) == Union(a, b)

    def test_de_morgan_result_is_simplified(self, abcd):
        a, b, _, _ = abcd
        assert simplify(~Union(a, N)) == ~a
        assert simplify(~Union(a, ~a)) is N
        assert simplify(~Intersect(a, Union(b, ~a))) == Union(~a, Intersect(~b, a))

    def test_flattening(self, abcd):
        a, b, c, _ = abcd
        assert simplify(Intersect(a, Intersect(b, c))) == Intersect(a, b, c)
        assert simplify(Union(Union(a, b), Union(c, Union(a, b)))) == Union(a, b, c)

    def test_identity(self, abcd):
        a, b, _, _ = abcd
        assert simplify(Union(a, N)) == a
        assert simplify(Intersect(U, a, b)) == Intersect(a, b)

    @pytest.mark.parametrize("op", [Union, Intersect])
    def test_only_neutral_elements(self, op):
        neutral = op.neutral_element()
        assert simplify(op(neutral, neutral)) is neutral

    def test_annihilation(self, abcd):
        a, b, _, _ = abcd
        assert simplify(Union(a, U, b)) is U
        assert simplify(Intersect(a, N)) is N
        assert simplify(Intersect(a, Union(b, U))) == a

    def test_idempotence(self, abcd):
        a, b, c, _ = abcd
        assert simplify(Union(a, a)) == a
        assert simplify(Intersect(a, b, a)) == Intersect(a, b)
        assert simplify(Union(a, ~b, ~b, c)) == Union(a, ~b, c)

    def test_duplicates_up_to_argument_order(self, abcd):
        a, b, c, _ = abcd
        f = simplify(Union(Intersect(a, b), c, Intersect(b, a)))
        assert f == Union(Intersect(a, b), c)

    def test_complement_law(self, abcd):
        a, b, _, _ = abcd
        assert simplify(Union(a, b, ~a)) is U
        assert simplify(Intersect(~b, a, b)) is N

    def test_absorption(self, abcd):
        a, b, c, _ = abcd
        assert simplify(Union(a, Intersect(a, b))) == a
        assert simplify(Intersect(a, Union(a, b))) == a
        assert simplify(Union(~a, Intersect(b, ~a, c), c)) == Union(~a, c)

    def test_absorption_between_composites_is_not_detected(self, abcd):
        a, b, c, _ = abcd
        f = Union(Intersect(a, b), Intersect(a, b, c))
        assert simplify(f) == f

    def test_order_of_surviving_arguments_is_preserved(self, abcd):
        a, b, c, d = abcd
        assert simplify(Union(d, N, b, Union(c, a))) == Union(d, b, c, a)


class TestScenarios:
    """Complete simplifications of small expressions."""

    def test_complement_law_inside_union(self, abcd):
        a, b, _, _ = abcd
        assert simplify(Union(a, Intersect(b, Complement(b)))) == a

    def test_double_complement_inside_intersect(self, abcd):
        a, b, _, _ = abcd
        assert simplify(Intersect(a, Complement(Complement(b)))) == Intersect(a, b)

    def test_arguments_are_simplified_first(self, abcd):
        a, b, c, _ = abcd
        f = Union(Intersect(a, U), Intersect(Union(b, N), c), Complement(Complement(a)))
        assert simplify(f) == Union(a, Intersect(b, c))

    def test_input_is_not_modified(self, abcd):
        a, b, _, _ = abcd
        f = Union(a, Union(b, N))
        simplify(f)
        assert f == Union(a, Union(b, N))

    def test_method_and_callable(self, abcd):
        a, b, _, _ = abcd
        f = Union(a, Intersect(a, b))
        assert f.simplify() == Simplify()(f) == simplify(f) == a

    def test_terms_with_non_string_identifiers(self):
        p, q = Term(1), Term('1')
        assert simplify(Union(p, Complement(q))) == Union(p, Complement(q))
        assert simplify(Union(p, Complement(Term(1)))) is U


class TestProperties:
    """Properties of simplification on random expressions."""

    def test_result_is_equivalent(self, random_expressions, equivalent):
        for f in random_expressions:
            assert equivalent(simplify(f), f), f

    def test_result_is_stable(self, random_expressions):
        for f in random_expressions:
            g = simplify(f)
            assert simplify(g) == g, f

    def test_result_has_no_absolute_sets_below_the_top(self, random_expressions):
        for f in random_expressions:
            g = simplify(f)
            if g in (U, N):
                continue
            assert all(h is not U and h is not N for h in _subexpressions(g)), f

    def test_complements_are_only_applied_to_terms(self, random_expressions):
        for f in random_expressions:
            for h in _subexpressions(simplify(f)):
                if isinstance(h, Complement):
                    assert isinstance(h.arg, Term), f

    def test_nested_operators_differ(self, random_expressions):
        for f in random_expressions:
            for h in _subexpressions(simplify(f)):
                if isinstance(h, (Union, Intersect)):
                    assert not any(isinstance(arg, h.op) for arg in h.args), f


class TestAbsoluteSetLaws:
    """Identity, annihilation, and idempotence hold for arbitrary arguments."""

    def test_identity(self, random_expressions):
        for f in random_expressions:
            assert simplify(Union(f, N)) == simplify(f), f
            assert simplify(Intersect(U, f)) == simplify(f), f

    def test_annihilation(self, random_expressions):
        for f in random_expressions:
            assert simplify(Union(f, U)) is U, f
            assert simplify(Intersect(N, f)) is N, f

    def test_idempotence(self, random_expressions):
        for f in random_expressions:
            assert simplify(Union(f, f)) == simplify(f), f
            assert simplify(Intersect(f, f)) == simplify(f), f
