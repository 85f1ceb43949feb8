"""Uncaught instances of :class:`NoTraceException` print a one-line message
instead of a traceback, both in the plain Python shell and in IPython. The
hooks are installed when this module is imported.
"""

import sys
from typing import Any, Optional
from types import TracebackType


class NoTraceException(Exception):
    """An exception that prints an error message and exits without a
    traceback. This is used for situations that do not require inspection of
    the code, like interrupting or exhausting the resources of a normal form
    computation that blows up combinatorially. Such situations are considered
    normal during interactive use.

    >>> message(NoTraceException('KeyboardInterrupt'))
    'KeyboardInterrupt'
    >>> class Exhausted(NoTraceException):
    ...     pass
    >>> message(Exhausted('cnf: too many clauses'))
    'Exhausted: cnf: too many clauses'
    """
    pass


def message(exc: NoTraceException) -> str:
    """The text printed for `exc`. Subclasses are named in front of the
    message.
    """
    text = str(exc.args[0]) if exc.args else ''
    if type(exc) is NoTraceException:
        return text or NoTraceException.__name__
    return f'{type(exc).__name__}: {text}' if text else type(exc).__name__


def handler(exc: NoTraceException, tb: Optional[TracebackType]) -> None:
    print(message(exc), file=sys.stderr, flush=True)


# Python shell

def excepthook(exc_type: type[BaseException], exc: BaseException,
               tb: Optional[TracebackType]) -> None:
    if isinstance(exc, NoTraceException):
        handler(exc, tb)
    else:
        sys_excepthook(exc_type, exc, tb)


# To be executed at import:

sys_excepthook = sys.excepthook
sys.excepthook = excepthook


# IPython:

def ipy_custom_exc(ipy: Any, exc_type: type[NoTraceException],
                   exc: NoTraceException, tb: TracebackType, tb_offset=None) -> None:
    handler(exc, tb)


# To be executed at import:

try:
    import IPython
except ImportError:
    ipy = None
else:
    ipy = IPython.get_ipython()

if ipy is not None:
    ipy.set_custom_exc((NoTraceException,), ipy_custom_exc)
