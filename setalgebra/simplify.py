"""This module :mod:`setalgebra.simplify` implements the simplification of
expressions via the laws of set algebra. Simplification proceeds bottom-up.
Every level is rewritten into a locally minimal equivalent, given that its
arguments have already been simplified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .expressions import (
    Complement, Expression, Intersect, _Null, Term, Union, _Universal)


@dataclass(frozen=True)
class Simplify:
    """Simplification using the following laws of set algebra, where ``K`` is
    one of :class:`.Union`, :class:`.Intersect`:

    1. Involution: ``Complement(Complement(a))`` becomes ``a``.

    2. De Morgan: ``Complement(Union(a, b))`` becomes
       ``Intersect(Complement(a), Complement(b))``, and dually.

    3. Complement of absolute sets: ``Complement(U)`` becomes ``N``, and
       dually. No complement of an absolute set survives simplification.

    4. Associativity: ``K(..., K(*args), ...)`` becomes ``K(..., *args, ...)``.

    5. Identity: ``N`` is removed from unions and ``U`` from intersections.

    6. Annihilation: ``Union(..., U, ...)`` becomes ``U`` and
       ``Intersect(..., N, ...)`` becomes ``N``.

    7. Idempotence: duplicate arguments are removed. Arguments are considered
       duplicates when their string representations with sorted arguments
       are equal.

    8. Complement: ``Union(..., t, ..., Complement(t), ...)`` becomes ``U`` and
       ``Intersect(..., t, ..., Complement(t), ...)`` becomes ``N``.

    9. Absorption: ``Union(..., t, ..., Intersect(..., t, ...), ...)`` becomes
       ``Union(..., t, ...)``, and dually. Here `t` is a literal, i.e., a term
       or the complement of a term. Redundancy between two intersections
       within a union is not detected:

       >>> from setalgebra import TT
       >>> a, b, c = TT.get('a', 'b', 'c')
       >>> simplify(Union(a & b, Intersect(a, b, c)))
       Union(Intersect(a, b), Intersect(a, b, c))

    Otherwise, the order of arguments is preserved. Empty unions and
    intersections, which arise only from the identity law, become their
    neutral elements ``N`` and ``U``, respectively. In particular, a union of
    empty sets is empty, not universal:

    >>> from setalgebra import N, U
    >>> simplify(Union(N, Complement(U)))
    N
    >>> simplify(Intersect(U, Complement(N)))
    U

    Unary unions and intersections are replaced with their argument.

    The simplifier should be called via :func:`.simplify`.
    """

    def __call__(self, f: Expression) -> Expression:
        return self.simplify(f)

    def simplify(self, f: Expression) -> Expression:
        """Simplify `f`.

        >>> from setalgebra import TT, U
        >>> a, b = TT.get('a', 'b')
        >>> Simplify().simplify(~Union(a, ~b, ~U))
        Intersect(Complement(a), b)
        """
        match f:
            case Term() | _Universal() | _Null():
                return f
            case Complement():
                return self._simpl_complement(f)
            case Union() | Intersect():
                return self._simpl_union_intersect(f.op, (self.simplify(arg) for arg in f.args))
            case _:
                assert False, type(f)

    def _simpl_complement(self, f: Complement) -> Expression:
        arg = self.simplify(f.arg)
        match arg:
            case Union() | Intersect():
                args = (self.simplify(Complement(arg_arg)) for arg_arg in arg.args)
                return self._simpl_union_intersect(arg.dual(), args)
            case Complement():
                return arg.arg
            case _Universal() | _Null():
                return arg.dual()()
            case Term():
                return Complement(arg)
            case _:
                assert False, type(arg)

    def _simpl_union_intersect(self, gand: type[Union] | type[Intersect],
                               simplified_args: Iterable[Expression]) -> Expression:
        """Build a simplified `gand` of `simplified_args`, which must already
        be simplified.
        """
        flat_args: list[Expression] = []
        for arg in simplified_args:
            if isinstance(arg, gand):
                flat_args.extend(arg.args)
            elif isinstance(arg, gand.neutral()):
                continue
            elif isinstance(arg, gand.definite()):
                return gand.definite_element()
            else:
                flat_args.append(arg)
        seen: set[str] = set()
        unique_args: list[Expression] = []
        for arg in flat_args:
            key = arg.to_string(sort=True)
            if key not in seen:
                seen.add(key)
                unique_args.append(arg)
        terms = {arg for arg in unique_args if isinstance(arg, Term)}
        for arg in unique_args:
            if isinstance(arg, Complement) and arg.arg in terms:
                return gand.definite_element()
        literals = {arg for arg in unique_args if Expression.is_literal(arg)}
        final_args = [arg for arg in unique_args
                      if Expression.is_literal(arg) or literals.isdisjoint(arg.args)]
        if not final_args:
            return gand.neutral_element()
        if len(final_args) == 1:
            return final_args[0]
        return gand(*final_args)


def simplify(f: Expression) -> Expression:
    """Simplify `f` using the laws of set algebra. The result is equivalent to
    `f`. For details on the laws see :class:`Simplify`.

    >>> from setalgebra import TT, Complement, Intersect, N, U
    >>> a, b = TT.get('a', 'b')
    >>> simplify(Union(a, Intersect(a, b)))
    a
    >>> simplify(Complement(Intersect(Complement(a), Complement(b))))
    Union(a, b)
    >>> simplify(Intersect(Union(a, N), Union(b, ~b)))
    a
    >>> simplify(Union(N, N))
    N
    """
    return Simplify().simplify(f)
