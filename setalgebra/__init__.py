__version__ = '0.1.0'

__status__ = 'Prototype'

from . import expressions

from .expressions import (Expression, Term, TT, Complement, Intersect, Union,  # noqa
                          U, N, Kind, Operator, InvalidArity, InvalidKind)

from .simplify import simplify  # noqa

from .cnf import cnf, distribute, dnf  # noqa

__all__ = expressions.__all__ + ['simplify', 'cnf', 'dnf', 'distribute']
