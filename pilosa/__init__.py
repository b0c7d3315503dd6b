#
# Exact arbitrary-precision decimal arithmetic
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

from .context import (Context, DefaultContext, get_context, set_context, local_context,
                      Flags, Compare, DEFAULT_PRECISION)
from .errors import (DecimalError, FormatError, ValidationError, DivisionByZero,
                     InternalInvariantViolation)
from .magnitude import Magnitude
from .number import DecimalNumber, align_scales, ZERO, ONE
from .text import TextFormat, DefaultFormat, parse_decimal, float_to_text

__all__ = ('Context', 'DefaultContext', 'get_context', 'set_context', 'local_context',
           'Flags', 'Compare', 'DEFAULT_PRECISION',
           'DecimalError', 'FormatError', 'ValidationError', 'DivisionByZero',
           'InternalInvariantViolation',
           'Magnitude', 'DecimalNumber', 'align_scales', 'ZERO', 'ONE',
           'TextFormat', 'DefaultFormat', 'parse_decimal', 'float_to_text')

__version__ = '0.1.0'
