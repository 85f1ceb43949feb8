from __future__ import annotations

from abc import abstractmethod
from typing import Any, Final, Iterator, Optional, Self
from typing_extensions import TypeIs


class Expression:
    r"""This abstract base class implements representations of and methods on
    expressions of set algebra recursively built using the following
    operators:

    1. The absolute sets :math:`\mathbb{U}` and :math:`\emptyset`

    2. Complement :math:`{}'`

    3. Union :math:`\cup` and intersection :math:`\cap`

    The leaves of expressions other than absolute sets are instances of
    :class:`.Term`, which are atomic named sets.

    As an abstract base class, :class:`Expression` cannot be instantiated.
    Expressions are immutable. All transformations like :meth:`simplify` and
    :meth:`to_cnf` create new expressions.
    """

    _hash: Optional[int]

    @property
    def op(self) -> type[Self]:
        """Operator. This property can be used with instances of subclasses of
        :class:`Expression`. It yields the respective subclass.
        """
        return type(self)

    @property
    def args(self) -> tuple[Any, ...]:
        """The arguments of an expression as a tuple.

        .. seealso::
            * :attr:`children` -- the subexpressions
            * :attr:`Complement.arg <.operators.Complement.arg>` -- argument \
                of a complement
            * :attr:`Term.term <.term.Term.term>` -- identifier of a term
        """
        return self._args

    @args.setter
    def args(self, args: tuple[Any, ...]) -> None:
        self._args = args

    @property
    def children(self) -> tuple[Expression, ...]:
        """The subexpressions as a tuple. Leaves have no children.

        >>> from setalgebra import TT, Union
        >>> a, b = TT.get('a', 'b')
        >>> Union(a, ~b).children
        (a, Complement(b))
        >>> a.children
        ()
        """
        return self.args

    def __and__(self, other: Expression) -> Expression:
        """Override the :obj:`& <object.__and__>` operator to apply
        :class:`.Intersect`.

        >>> from setalgebra import TT
        >>> a, b, c = TT.get('a', 'b', 'c')
        >>> a & b & c
        Intersect(Intersect(a, b), c)
        """
        return Intersect(self, other)

    def __eq__(self, other: object) -> bool:
        """A recursive test for structural equality of `self` and `other`.
        Arguments of :class:`.Union` and :class:`.Intersect` are compared in
        order.

        >>> from setalgebra import Term, Union
        >>> Union(Term('a'), Term('b')) == Union(Term('a'), Term('b'))
        True
        >>> Union(Term('a'), Term('b')) == Union(Term('b'), Term('a'))
        False
        """
        if self is other:
            return True
        if not isinstance(other, Expression):
            return False
        if self.op is not other.op:
            return False
        if hash(self) != hash(other):
            return False
        return self.args == other.args

    def __getnewargs__(self) -> tuple[Any, ...]:
        return self.args

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.op.__name__, self.args))
        return self._hash

    @abstractmethod
    def __init__(self, *args: object) -> None:
        """This abstract base class is not supposed to have instances itself.
        Technically this is enforced via this abstract initializer.
        """
        self._hash = None

    def __invert__(self) -> Expression:
        """Override the :obj:`~ <object.__invert__>` operator to apply
        :class:`.Complement`.

        >>> from setalgebra import TT
        >>> a, = TT.get('a')
        >>> ~ a
        Complement(a)
        """
        return Complement(self)

    def __or__(self, other: Expression) -> Expression:
        """Override the :obj:`| <object.__or__>` operator to apply
        :class:`.Union`.

        >>> from setalgebra import TT
        >>> a, b, c = TT.get('a', 'b', 'c')
        >>> a | b & c
        Union(a, Intersect(b, c))
        """
        return Union(self, other)

    def __repr__(self) -> str:
        """A representation of `self` that is suitable for use as an input.
        """
        r = self.op.__name__
        r += '('
        if self.args:
            r += self.args[0].__repr__()
            for a in self.args[1:]:
                r += ', ' + a.__repr__()
        r += ')'
        return r

    def __str__(self) -> str:
        """Representation of the expression used in printing.

        >>> from setalgebra import TT, U
        >>> a, b = TT.get('a', 'b')
        >>> print(a | ~(b & U))
        (a ∪ (b ∩ 𝕌)')
        """
        return self.to_string()

    def depth(self) -> int:
        """The depth of `self` as a tree, where leaves have depth 0.

        >>> from setalgebra import TT
        >>> a, b = TT.get('a', 'b')
        >>> (a | ~(a & b)).depth()
        3
        >>> a.depth()
        0
        """
        return max((child.depth() + 1 for child in self.children), default=0)

    @staticmethod
    def is_complement(f: Expression) -> TypeIs[Complement]:
        return isinstance(f, Complement)

    def is_cnf(self) -> bool:
        """Test whether `self` is a conjunctive normal form, i.e., either a
        clause or an :class:`.Intersect` of clauses, where a clause is either
        a literal or a :class:`.Union` of literals. The absolute sets are
        conjunctive normal forms as well.

        >>> from setalgebra import TT, Intersect, Union
        >>> a, b, c = TT.get('a', 'b', 'c')
        >>> Intersect(Union(a, ~b), c).is_cnf()
        True
        >>> Union(a, Intersect(b, c)).is_cnf()
        False
        """
        return self._is_normal_form(Intersect)

    def is_dnf(self) -> bool:
        """Test whether `self` is a disjunctive normal form. This is dual to
        :meth:`is_cnf`.

        >>> from setalgebra import TT, Intersect, Union
        >>> a, b, c = TT.get('a', 'b', 'c')
        >>> Union(a, Intersect(b, c)).is_dnf()
        True
        """
        return self._is_normal_form(Union)

    def _is_normal_form(self, outer: type[Union] | type[Intersect]) -> bool:
        def is_clause(f: Expression) -> bool:
            if Expression.is_literal(f):
                return True
            if isinstance(f, outer.dual()):
                return all(Expression.is_literal(arg) for arg in f.args)
            return False

        if Expression.is_universal(self) or Expression.is_null(self):
            return True
        if isinstance(self, outer):
            return all(is_clause(arg) for arg in self.args)
        return is_clause(self)

    @staticmethod
    def is_intersect(f: Expression) -> TypeIs[Intersect]:
        return isinstance(f, Intersect)

    @staticmethod
    def is_literal(f: Expression) -> bool:
        """A literal is either a :class:`.Term` or the :class:`.Complement` of a
        :class:`.Term`.
        """
        if isinstance(f, Complement):
            return isinstance(f.arg, Term)
        return isinstance(f, Term)

    @staticmethod
    def is_null(f: Expression) -> TypeIs[_Null]:
        return isinstance(f, _Null)

    @staticmethod
    def is_term(f: Expression) -> TypeIs[Term]:
        return isinstance(f, Term)

    @staticmethod
    def is_union(f: Expression) -> TypeIs[Union]:
        return isinstance(f, Union)

    @staticmethod
    def is_universal(f: Expression) -> TypeIs[_Universal]:
        return isinstance(f, _Universal)

    def simplify(self) -> Expression:
        """Simplification using the laws of set algebra. The result is
        equivalent to `self`.

        >>> from setalgebra import TT, Intersect, Union
        >>> a, b = TT.get('a', 'b')
        >>> Union(a, Intersect(a, b)).simplify()
        a

        .. seealso::
            :class:`Simplify <setalgebra.simplify.Simplify>` -- the laws that \
                are applied
        """
        from ..simplify import simplify
        return simplify(self)

    def terms(self) -> Iterator[Term]:
        """An iterator over all instances of :class:`.Term` occurring in
        `self`, in order of occurrence and with repetitions.

        >>> from setalgebra import TT, U
        >>> a, b = TT.get('a', 'b')
        >>> f = (a | ~b) & (b | U)
        >>> list(f.terms())
        [a, b, b]
        >>> from collections import Counter
        >>> Counter(f.terms())
        Counter({b: 2, a: 1})
        """
        match self:
            case Term():
                yield self
            case _:
                for child in self.children:
                    yield from child.terms()

    def to_cnf(self) -> Expression:
        """Convert to Conjunctive Normal Form.

        >>> from setalgebra import TT, Intersect, Union
        >>> a, b, c = TT.get('a', 'b', 'c')
        >>> Union(a, Intersect(b, c)).to_cnf()
        Intersect(Union(a, b), Union(a, c))

        .. seealso::
            :func:`cnf <setalgebra.cnf.cnf>` -- the same with options
        """
        from ..cnf import cnf
        return cnf(self)

    def to_dnf(self) -> Expression:
        """Convert to Disjunctive Normal Form.

        >>> from setalgebra import TT, Intersect, Union
        >>> a, b, c = TT.get('a', 'b', 'c')
        >>> Intersect(a, Union(b, c)).to_dnf()
        Union(Intersect(a, b), Intersect(a, c))

        .. seealso::
            :func:`dnf <setalgebra.cnf.dnf>` -- the same with options
        """
        from ..cnf import dnf
        return dnf(self)

    def to_string(self, sort: bool = False) -> str:
        """A canonical string representation. If `sort` is :obj:`True`, the
        arguments of all unions and intersections are sorted
        lexicographically with respect to their string representations.
        Expressions that are equal up to the order of those arguments then have
        equal string representations.

        >>> from setalgebra import TT, N, Union
        >>> a, b, c = TT.get('a', 'b', 'c')
        >>> f = Union(c, ~(b & a), N)
        >>> f.to_string()
        "(c ∪ (b ∩ a)' ∪ ∅)"
        >>> f.to_string(sort=True)
        "((a ∩ b)' ∪ c ∪ ∅)"
        """
        SYMBOL: Final = {
            Union: '∪', Intersect: '∩', Complement: "'", _Universal: '𝕌', _Null: '∅'}
        SPACING: Final = ' '
        match self:
            case Union() | Intersect():
                L = [arg.to_string(sort=sort) for arg in self.args]
                if sort:
                    L.sort()
                return '(' + f'{SPACING}{SYMBOL[self.op]}{SPACING}'.join(L) + ')'
            case Complement():
                return f'{self.arg.to_string(sort=sort)}{SYMBOL[Complement]}'
            case _Universal() | _Null():
                return SYMBOL[self.op]
            case Term():
                return str(self.term)
            case _:
                assert False, type(self)


# The following imports are intentionally late to avoid circularity.
from .operators import Complement, Intersect, _Null, Union, _Universal
from .term import Term
