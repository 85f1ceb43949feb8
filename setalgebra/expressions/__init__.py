r"""Implementation of expressions of set algebra.

An abstract base class :class:`Expression` implements representations of and
methods on expressions recursively built using the operators of set algebra:

1. Absolute sets :math:`\mathbb{U}` and :math:`\emptyset`

2. Complement :math:`{}'`

3. Union :math:`\cup` and intersection :math:`\cap`

Operators are mapped to classes as follows:

+--------------------------+-----------------------+------------------------+----------------------+-----------------------+
| :math:`\mathbb{U}`       | :math:`\emptyset`     | :math:`{}'`            | :math:`\cup`         | :math:`\cap`          |
+--------------------------+-----------------------+------------------------+----------------------+-----------------------+
| :class:`_Universal`      | :class:`_Null`        | :class:`Complement`    | :class:`Union`       | :class:`Intersect`    |
+--------------------------+-----------------------+------------------------+----------------------+-----------------------+

The absolute sets are operators of arity 0. As such, they are implemented as
singleton classes :class:`_Universal` and :class:`_Null` with unique instances
:data:`U` and :data:`N`, respectively.

>>> U is _Universal()
True

The leaves of expressions are terms, i.e., atomic named sets. They can be
obtained from the set :data:`TT` of all terms:

>>> a, b, c = TT.get('a', 'b', 'c')
>>> f = Union(a, Intersect(b, c), N)
>>> f
Union(a, Intersect(b, c), N)
>>> print(f)
(a ∪ (b ∩ c) ∪ ∅)

Transformations compute new expressions:

>>> f.simplify()
Union(a, Intersect(b, c))
>>> f.to_cnf()
Intersect(Union(a, b), Union(a, c))
>>> f
Union(a, Intersect(b, c), N)
"""  # noqa

from .expression import Expression  # noqa

from .term import Term, TermSet, TT  # noqa

from .operators import (AbsoluteSet, Complement, Intersect, InvalidArity,  # noqa
                        InvalidKind, Kind, N, _Null, Operator, U, Union, _Universal)


__all__ = [
    'Expression',

    'Term', 'TT',

    'Complement', 'Intersect', 'Union', 'U', 'N',

    'Kind', 'Operator', 'InvalidArity', 'InvalidKind'
]
