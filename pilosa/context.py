#
# The per-thread arithmetic context: division precision and status flags
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

import copy
import threading
from enum import IntFlag, IntEnum

import attr

__all__ = ('Context', 'DefaultContext', 'get_context', 'set_context', 'local_context',
           'Flags', 'Compare', 'DEFAULT_PRECISION')


# The number of fractional digits a non-terminating quotient is truncated to.
DEFAULT_PRECISION = 15


# Result of comparisons.  Decimal numbers are totally ordered; UNORDERED only arises
# comparing against a NaN of another numeric type.
class Compare(IntEnum):
    LESS_THAN = 0
    EQUAL = 1
    GREATER_THAN = 2
    UNORDERED = 3


# Operation status flags.
class Flags(IntFlag):
    INEXACT = 0x01


def _check_precision(instance, attribute, value):
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError('precision must be an integer')
    if value < 0:
        raise ValueError('precision cannot be negative')


@attr.s(slots=True, kw_only=True, eq=False, repr=False)
class Context:
    '''The execution context for operations.  Carries the number of fractional digits
    division truncates non-terminating quotients to, and the raised status flags.
    Attributes are validated and converted on assignment as well as on construction.'''

    # Quotients that do not terminate are truncated (never rounded) after this many
    # digits to the right of the decimal point, so their error is below
    # 10^-precision.  Quotients by an exact power of ten are never truncated.
    precision = attr.ib(default=DEFAULT_PRECISION, validator=_check_precision,
                        on_setattr=attr.setters.validate)
    # Sticky status flags.  Operations raise flags but never clear them.
    flags = attr.ib(default=Flags(0), converter=Flags, on_setattr=attr.setters.convert)

    def copy(self):
        '''Return a copy of the context.'''
        return copy.copy(self)

    def clear_flags(self):
        self.flags = Flags(0)

    def __repr__(self):
        return f'<Context precision={self.precision} flags={self.flags!r}>'


#
# Exported functions
#

DefaultContext = Context()
tls = threading.local()


def get_context():
    try:
        return tls.context
    except AttributeError:
        tls.context = DefaultContext.copy()
        return tls.context


def set_context(context):
    '''Sets the current thread's context to context (not a copy of it).'''
    if not isinstance(context, Context):
        raise TypeError('context must be a Context instance')
    tls.context = context


class LocalContext:
    '''A context manager that will set the current context for the active thread to a copy of
    context on entry to the with-statement and restore the previous context on exit.  If
    no context is specified a copy of the current context is taken instead.
    '''

    def __init__(self, context=None):
        self.saved_context = None
        self.context_to_set = context

    def __enter__(self):
        self.saved_context = get_context()
        context = (self.context_to_set or self.saved_context).copy()
        set_context(context)
        return context

    def __exit__(self, etype, value, traceback):
        set_context(self.saved_context)


local_context = LocalContext
