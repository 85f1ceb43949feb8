"""We introduce the operators of set algebra as subclasses of
:class:`.Expression`: the absolute sets :data:`U` and :data:`N` as operators of
arity 0, and :class:`Complement`, :class:`Union`, :class:`Intersect`.
"""
from __future__ import annotations

from enum import Enum
from typing import ClassVar, final, Iterable, Optional

from .expression import Expression


class InvalidKind(ValueError):
    """Raised by :meth:`Operator.from_kind` when the kind is not one of the
    members of :class:`Kind`.
    """
    pass


class InvalidArity(ValueError):
    """Raised when :class:`Union` or :class:`Intersect` are constructed with
    less than two arguments, or when :class:`Complement` is constructed with a
    number of arguments different from one.
    """
    pass


class Kind(Enum):
    """The kinds of operator nodes. The values are accepted as well by
    :meth:`Operator.from_kind`.
    """
    UNION = 'UNION'
    INTERSECT = 'INTERSECT'
    COMPLEMENT = 'COMPLEMENT'


class Operator(Expression):
    r"""A class whose instances are expressions in the sense that their
    toplevel operator is one of :math:`\cup`, :math:`\cap`, :math:`{}'`.
    """

    kind: ClassVar[Kind]

    @staticmethod
    def from_kind(kind: Kind | str, children: Iterable[Expression]) -> Operator:
        """Construct an operator node from its `kind` and a sequence of
        `children`.

        >>> from setalgebra import Term
        >>> a, b = Term('a'), Term('b')
        >>> Operator.from_kind(Kind.INTERSECT, [a, b])
        Intersect(a, b)
        >>> Operator.from_kind('COMPLEMENT', [a])
        Complement(a)
        >>> Operator.from_kind('DIFFERENCE', [a, b])
        Traceback (most recent call last):
        ...
        setalgebra.expressions.operators.InvalidKind: 'DIFFERENCE' is not an operator kind
        >>> Operator.from_kind(Kind.UNION, [a])
        Traceback (most recent call last):
        ...
        setalgebra.expressions.operators.InvalidArity: Union requires at least 2 arguments; 1 given
        """
        try:
            kind = Kind(kind)
        except ValueError:
            raise InvalidKind(f'{kind!r} is not an operator kind') from None
        match kind:
            case Kind.UNION:
                return Union(*children)
            case Kind.INTERSECT:
                return Intersect(*children)
            case Kind.COMPLEMENT:
                return Complement(*children)
            case _:
                assert False, kind

    def _check_args(self, args: tuple[object, ...], unary: bool = False) -> None:
        name = self.__class__.__name__
        if unary and len(args) != 1:
            raise InvalidArity(f'{name} requires exactly 1 argument; {len(args)} given')
        if not unary and len(args) < 2:
            raise InvalidArity(f'{name} requires at least 2 arguments; {len(args)} given')
        for arg in args:
            if not isinstance(arg, Expression):
                raise ValueError(f'arguments must be expressions; {arg!r} is {type(arg)}')


@final
class Union(Operator):
    r"""A class whose instances are unions in the sense that their toplevel
    operator represents :math:`\cup`. Unions have at least two arguments.
    Nested unions are not flattened on construction.

    >>> from setalgebra import TT
    >>> a, b, c = TT.get('a', 'b', 'c')
    >>> Union(a, b, c)
    Union(a, b, c)
    >>> Union(a, Union(b, c))
    Union(a, Union(b, c))
    >>> Union(a)
    Traceback (most recent call last):
    ...
    setalgebra.expressions.operators.InvalidArity: Union requires at least 2 arguments; 1 given

    .. seealso::
        * :meth:`|, __or__() <.expression.Expression.__or__>` -- \
            infix notation of :class:`Union`
        * :attr:`args <.expression.Expression.args>` -- all arguments as a tuple
    """

    kind = Kind.UNION

    def __init__(self, *args: Expression) -> None:
        super().__init__()
        self._check_args(args)
        self.args = args

    @classmethod
    def dual(cls) -> type[Intersect]:
        r"""A class method yielding the class :class:`Intersect`, which
        implements the dual operator :math:`\cap` of :math:`\cup`.
        """
        return Intersect

    @classmethod
    def definite(cls) -> type[_Universal]:
        r"""A class method yielding the class :class:`_Universal`, which is the
        operator of the absolute set :data:`U`. The definite absorbs all other
        arguments of a union.
        """
        return _Universal

    @classmethod
    def definite_element(cls) -> _Universal:
        """A class method yielding the unique instance :data:`U` of
        :class:`_Universal`.
        """
        return _Universal()

    @classmethod
    def neutral(cls) -> type[_Null]:
        r"""A class method yielding the class :class:`_Null`, which is the
        operator of the absolute set :data:`N`. The neutral is the dual of the
        definite.
        """
        return _Null

    @classmethod
    def neutral_element(cls) -> _Null:
        """A class method yielding the unique instance :data:`N` of
        :class:`_Null`.
        """
        return _Null()


@final
class Intersect(Operator):
    r"""A class whose instances are intersections in the sense that their
    toplevel operator represents :math:`\cap`. Intersections have at least two
    arguments.

    >>> from setalgebra import TT
    >>> a, b = TT.get('a', 'b')
    >>> Intersect(a, ~b)
    Intersect(a, Complement(b))
    >>> Intersect()
    Traceback (most recent call last):
    ...
    setalgebra.expressions.operators.InvalidArity: Intersect requires at least 2 arguments; 0 given

    .. seealso::
        * :meth:`&, __and__() <.expression.Expression.__and__>` -- \
            infix notation of :class:`Intersect`
        * :attr:`args <.expression.Expression.args>` -- all arguments as a tuple
    """

    kind = Kind.INTERSECT

    def __init__(self, *args: Expression) -> None:
        super().__init__()
        self._check_args(args)
        self.args = args

    @classmethod
    def dual(cls) -> type[Union]:
        r"""A class method yielding the class :class:`Union`, which implements
        the dual operator :math:`\cup` of :math:`\cap`.
        """
        return Union

    @classmethod
    def definite(cls) -> type[_Null]:
        r"""A class method yielding the class :class:`_Null`, which is the
        operator of the absolute set :data:`N`. The definite annihilates all
        other arguments of an intersection.
        """
        return _Null

    @classmethod
    def definite_element(cls) -> _Null:
        """A class method yielding the unique instance :data:`N` of
        :class:`_Null`.
        """
        return _Null()

    @classmethod
    def neutral(cls) -> type[_Universal]:
        r"""A class method yielding the class :class:`_Universal`, which is the
        operator of the absolute set :data:`U`. The neutral is the dual of the
        definite.
        """
        return _Universal

    @classmethod
    def neutral_element(cls) -> _Universal:
        """A class method yielding the unique instance :data:`U` of
        :class:`_Universal`.
        """
        return _Universal()


@final
class Complement(Operator):
    """A class whose instances are complements in the sense that their
    toplevel operator represents :math:`{}'`.

    >>> from setalgebra import TT
    >>> a, b = TT.get('a', 'b')
    >>> Complement(Union(a, b))
    Complement(Union(a, b))
    >>> Complement(a, b)
    Traceback (most recent call last):
    ...
    setalgebra.expressions.operators.InvalidArity: Complement requires exactly 1 argument; 2 given

    .. seealso::
        * :meth:`~, __invert__() <.expression.Expression.__invert__>` -- \
            short notation of :class:`Complement`
    """

    kind = Kind.COMPLEMENT

    def __init__(self, *args: Expression) -> None:
        super().__init__()
        self._check_args(args, unary=True)
        self.args = args

    @property
    def arg(self) -> Expression:
        """The one argument of the operator :math:`{}'`.
        """
        return self.args[0]


class AbsoluteSet(Expression):
    """The common superclass of the singleton classes :class:`_Universal` and
    :class:`_Null`.
    """
    pass


@final
class _Universal(AbsoluteSet):
    """A singleton class whose sole instance represents the universal set.

    >>> _Universal()
    U
    >>> _Universal() is _Universal()
    True
    """

    # This is a quite basic implementation of a singleton class. It does not
    # support subclassing.

    _instance: Optional[_Universal] = None

    def __init__(self) -> None:
        super().__init__()
        self.args = ()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'U'

    @classmethod
    def dual(cls) -> type[_Null]:
        """A class method yielding the class :class:`_Null`, whose instance is
        the complement of the universal set.
        """
        return _Null


U: _Universal = _Universal()
"""Support use as a constant without parentheses.

>>> U is _Universal()
True
"""


@final
class _Null(AbsoluteSet):
    """A singleton class whose sole instance represents the empty set.

    >>> _Null()
    N
    >>> _Null() is _Null()
    True
    """

    _instance: Optional[_Null] = None

    def __init__(self) -> None:
        super().__init__()
        self.args = ()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'N'

    @classmethod
    def dual(cls) -> type[_Universal]:
        """A class method yielding the class :class:`_Universal`, whose
        instance is the complement of the empty set.
        """
        return _Universal


N: _Null = _Null()
"""Support use as a constant without parentheses.

>>> N is _Null()
True
"""
