"""This module :mod:`setalgebra.cnf` provides conjunctive and disjunctive
normal form computations via the distributive law. The expansion is
combinatorial and not guaranteed to produce a minimal number of clauses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time
from typing import Optional

from .expressions import Expression, Intersect, Union
from .simplify import simplify
from .support.excepthook import NoTraceException
from .support.logging import DeltaTimeFormatter, ProgressRate, Timer

# Create logger
delta_time_formatter = DeltaTimeFormatter(
    '%(asctime)s - %(name)s - %(levelname)-5s - %(delta)s: %(message)s')

stream_handler = logging.StreamHandler()
stream_handler.setFormatter(delta_time_formatter)

logger = logging.getLogger(__name__)
logger.propagate = False
logger.addHandler(stream_handler)
logger.setLevel(logging.WARNING)

progress = ProgressRate()


class ResourceExhausted(NoTraceException):
    """Raised when a normal form computation exceeds the recursion limit or
    the available memory. This happens for very deep expressions, or when the
    distributive law produces too many clauses.
    """
    pass


@dataclass
class Options:
    """This class holds options that can be provided to
    :meth:`.ConjunctiveNormalForm.__call__`.
    """

    log_level: int = logging.NOTSET
    """The `log_level` of the logger used by :class:`.ConjunctiveNormalForm`.
    With the default :data:`logging.NOTSET` the current level is kept.
    """

    log_rate: float = 0.5
    """The minimal timespan (in s) between two progress messages of the
    distributive law. Other messages are not throttled.
    """


def distribute(f: Expression) -> Expression:
    """Apply the distributive law to the toplevel of `f`, if `f` is a
    :class:`.Union` or :class:`.Intersect` with at least one argument of the
    dual operator. Otherwise `f` is returned unchanged.

    >>> from setalgebra import TT
    >>> a, b, c, d = TT.get('a', 'b', 'c', 'd')
    >>> distribute(Union(a, Intersect(b, c)))
    Intersect(Union(a, b), Union(a, c))
    >>> distribute(Intersect(Union(a, b), Union(c, d)))
    Union(Intersect(c, a), Intersect(c, b), Intersect(d, a), Intersect(d, b))
    >>> distribute(Union(a, b))
    Union(a, b)

    Note that the arguments are not distributed:

    >>> distribute(Union(a, Union(b, Intersect(c, d))))
    Union(a, Union(b, Intersect(c, d)))
    """
    if not isinstance(f, (Union, Intersect)):
        return f
    gand = f.op
    dual = gand.dual()
    accumulator_args = [arg for arg in f.args if not isinstance(arg, dual)]
    dual_args = [arg for arg in f.args if isinstance(arg, dual)]
    if not dual_args:
        return f
    left: Expression
    match len(accumulator_args):
        case 0:
            left = dual_args.pop(0)
        case 1:
            left = accumulator_args[0]
        case _:
            left = gand(*accumulator_args)
    accum = left
    for right in dual_args:
        if logger.isEnabledFor(logging.INFO) and progress.due():
            logger.info(f'distributing {gand.__name__} over {len(right.args)} arguments')
        distributed_args = []
        for arg in right.args:
            distributed_arg = gand(accum, arg)
            if isinstance(accum, dual):
                distributed_arg = distribute(distributed_arg)
            distributed_args.append(distributed_arg)
        accum = simplify(dual(*distributed_args))
    return simplify(accum)


@dataclass
class ConjunctiveNormalForm:
    """Conjunctive normal form computation. With `dualize` set, disjunctive
    normal forms are computed instead.
    """

    dualize: bool = False

    options: Optional[Options] = None
    """The options that have been passed to :meth:`.__call__`.
    """

    time_total: Optional[float] = field(default=None, compare=False)
    """The wall time in seconds spent in the last call of :meth:`.__call__`.
    """

    def __call__(self, f: Expression, **options) -> Expression:
        """Compute a conjunctive normal form of `f`, or a disjunctive normal
        form if :attr:`dualize` is set.

        :param `**options`:
          Keyword arguments with keywords corresponding to attributes of
          :class:`.Options`.

        :raises ResourceExhausted:
          The recursion limit or the memory has been exceeded.
        """
        timer = Timer()
        delta_time_formatter.set_reference_time(time.time())
        self.options = Options(**options)
        progress.restart(self.options.log_rate)
        save_level = logger.getEffectiveLevel()
        try:
            logger.setLevel(self.options.log_level or save_level)
            logger.info(f'{self.options}')
            result = self.normal_form(f)
            logger.info('finished')
        except KeyboardInterrupt:
            logger.info('keyboard interrupt')
            raise NoTraceException('KeyboardInterrupt')
        except (RecursionError, MemoryError) as exc:
            kind = 'disjunctive' if self.dualize else 'conjunctive'
            raise ResourceExhausted(
                f'{kind} normal form: resources exhausted ({type(exc).__name__})') from exc
        finally:
            logger.setLevel(save_level)
        self.time_total = timer.get()
        return result

    def normal_form(self, f: Expression) -> Expression:
        """Recursively compute the normal form of `f` without touching logging
        or options.
        """
        f = simplify(f)
        match f:
            case Union() | Intersect():
                args = [self.normal_form(arg) for arg in f.args]
                if isinstance(f, self.outer().dual()) \
                        and any(isinstance(arg, self.outer()) for arg in args):
                    logger.debug(f'distributing {f}')
                    return simplify(distribute(f.op(*args)))
                return simplify(f.op(*args))
            case _:
                return f

    def outer(self) -> type[Union] | type[Intersect]:
        """The toplevel operator of the normal forms computed, which is
        :class:`.Intersect` for conjunctive normal forms.
        """
        return Union if self.dualize else Intersect


def cnf(f: Expression, **options) -> Expression:
    """Compute a conjunctive normal form of `f`, i.e., an equivalent
    intersection of unions of literals. Options are described in
    :class:`Options`.

    >>> from setalgebra import TT
    >>> a, b, c, d, e = TT.get('a', 'b', 'c', 'd', 'e')
    >>> cnf(Union(a, Intersect(b, c)))
    Intersect(Union(a, b), Union(a, c))
    >>> cnf(Union(~a, Intersect(a, b)))
    Union(Complement(a), b)
    >>> cnf(Union(a, Intersect(b, c), Intersect(d, e)))
    Intersect(Union(d, a, b), Union(d, a, c), Union(e, a, b), Union(e, a, c))
    """
    return ConjunctiveNormalForm()(f, **options)


def dnf(f: Expression, **options) -> Expression:
    """Compute a disjunctive normal form of `f`, i.e., an equivalent union of
    intersections of literals. This is dual to :func:`cnf`.

    >>> from setalgebra import TT
    >>> a, b, c = TT.get('a', 'b', 'c')
    >>> dnf(~Union(a, Intersect(b, c)))
    Union(Intersect(Complement(a), Complement(b)), Intersect(Complement(a), Complement(c)))
    """
    return ConjunctiveNormalForm(dualize=True)(f, **options)
