#
# Exceptions raised by exact decimal arithmetic
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

__all__ = ('DecimalError', 'FormatError', 'ValidationError', 'DivisionByZero',
           'InternalInvariantViolation')


class DecimalError(Exception):
    '''All recoverable errors raised by this package subclass from this.

    Exceptions derived from DecimalError must have a linear inheritance from it and
    through the first base class if an exception has multiple base classes, so that
    callers can catch either DecimalError or the matching builtin exception.
    '''


class FormatError(DecimalError, ValueError):
    '''Raised when text cannot be parsed as a decimal number: it is empty, has a second
    decimal point, or contains a character that is not a digit.'''

    def __init__(self, text, reason):
        super().__init__(f'invalid decimal literal {text!r}: {reason}')
        self.text = text
        self.reason = reason


class ValidationError(DecimalError, ValueError):
    '''Raised when a low-level constructor is given a digit outside [0, 9].'''


class DivisionByZero(DecimalError, ZeroDivisionError):
    '''Raised by divide, euclidian division and short division with a zero divisor, and
    by raising zero to a negative power.'''


class InternalInvariantViolation(AssertionError):
    '''The arithmetic kernel has a bug.

    Raised when a quotient digit escapes [0, 9], when long division leaves a nonzero
    remainder after unnormalization, or when a magnitude subtraction is asked for a
    negative result.  None of these can happen for validated input, so this is
    deliberately not a DecimalError.
    '''
