"""This module :mod:`setalgebra.abstraction` relates set algebra to Boolean
algebra. The Boolean abstraction of an expression replaces terms with
propositional variables, :class:`.Union` with disjunction, :class:`.Intersect`
with conjunction, and :class:`.Complement` with negation. Technically, we use
the Boolean expressions of `SymPy <https://www.sympy.org/>`_. Two expressions
are equal as sets for all interpretations of their terms if and only if their
Boolean abstractions are logically equivalent.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import sympy
from sympy.logic import boolalg

from .expressions import Complement, Expression, Intersect, N, _Null, Term, U, Union, _Universal


@dataclass
class BooleanAbstraction:
    """Translation between expressions and SymPy Boolean expressions. An
    instance remembers the correspondence between terms and symbols
    established so far, so that translations in both directions are inverse
    to each other.

    >>> from setalgebra import TT
    >>> a, b, c = TT.get('a', 'b', 'c')
    >>> abstraction = BooleanAbstraction()
    >>> f = abstraction.to_sympy(Union(a, Intersect(~b, c)))
    >>> x, y, z = sympy.symbols('a b c')
    >>> f == x | (~y & z)
    True
    >>> abstraction.from_sympy(~x)
    Complement(a)
    >>> abstraction.from_sympy(sympy.Implies(x, y)).to_cnf() in (Union(~a, b), Union(b, ~a))
    True
    """

    _terms_to_sympy: dict[Term, sympy.Symbol] = field(default_factory=dict)
    _sympy_to_terms: dict[sympy.Symbol, Term] = field(default_factory=dict)

    def from_sympy(self, f: boolalg.Boolean) -> Expression:
        """Translate the SymPy Boolean expression `f` into an expression.
        Boolean operators other than ``And``, ``Or``, ``Not`` are eliminated
        first by a conversion to negation normal form.

        :raises ValueError:
          `f` contains subexpressions that are not Boolean.
        """
        return self._from_nnf(boolalg.to_nnf(f, simplify=False))

    def _from_nnf(self, f: boolalg.Boolean) -> Expression:
        match f:
            case sympy.Symbol():
                try:
                    return self._sympy_to_terms[f]
                except KeyError:
                    term = Term(f.name)
                    self._sympy_to_terms[f] = term
                    self._terms_to_sympy[term] = f
                    return term
            case sympy.Not():
                return Complement(self._from_nnf(f.args[0]))
            case sympy.And():
                return Intersect(*(self._from_nnf(arg) for arg in f.args))
            case sympy.Or():
                return Union(*(self._from_nnf(arg) for arg in f.args))
            case boolalg.BooleanTrue():
                return U
            case boolalg.BooleanFalse():
                return N
            case _:
                raise ValueError(f'cannot translate {f} of type {type(f)}')

    def to_sympy(self, f: Expression) -> boolalg.Boolean:
        """Translate the expression `f` into a SymPy Boolean expression.
        Terms are translated into symbols named after the string
        representation of their identifiers.
        """
        match f:
            case Term():
                try:
                    return self._terms_to_sympy[f]
                except KeyError:
                    symbol = sympy.Symbol(str(f.term))
                    self._terms_to_sympy[f] = symbol
                    self._sympy_to_terms[symbol] = f
                    return symbol
            case Complement():
                return sympy.Not(self.to_sympy(f.arg))
            case Union():
                return sympy.Or(*(self.to_sympy(arg) for arg in f.args))
            case Intersect():
                return sympy.And(*(self.to_sympy(arg) for arg in f.args))
            case _Universal():
                return sympy.true
            case _Null():
                return sympy.false
            case _:
                assert False, type(f)
