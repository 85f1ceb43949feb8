"""Terms are the atomic named sets at the leaves of expressions. Each term
wraps an opaque hashable identifier.
"""

from __future__ import annotations

from typing import ClassVar, final, Hashable, Optional

from .expression import Expression


class TermSet:
    """The infinite set of all terms. Terms are uniquely identified by their
    identifier, which is typically a :external:class:`str`. This class is a
    singleton, whose single instance is assigned to :data:`.TT`.
    """

    _instance: ClassVar[Optional[TermSet]] = None

    def __getitem__(self, index: Hashable) -> Term:
        """Obtain the term with identifier `index`.

        >>> TT['x']
        x
        >>> TT['x'] == Term('x')
        True
        """
        return Term(index)

    def __new__(cls) -> TermSet:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '{...}'

    def get(self, *args: Hashable) -> tuple[Term, ...]:
        """Obtain several terms simultaneously by their identifiers.

        >>> a, b = TT.get('a', 'b')
        >>> a, b
        (a, b)
        """
        return tuple(self[identifier] for identifier in args)


TT = TermSet()


@final
class Term(Expression):
    """An atomic named set. Two terms are equal if and only if their
    identifiers are equal.

    >>> Term('beep')
    beep
    >>> Term('beep').term
    'beep'
    >>> Term(1) == Term(1), Term(1) == Term('1')
    (True, False)
    """

    def __init__(self, term: Hashable) -> None:
        super().__init__()
        self.args = (term,)

    def __repr__(self) -> str:
        return str(self.term)

    @property
    def children(self) -> tuple[Expression, ...]:
        return ()

    @property
    def term(self) -> Hashable:
        """The identifier of the term.
        """
        return self.args[0]
