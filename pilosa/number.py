#
# Signed decimal numbers of unbounded magnitude and scale
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

from collections import namedtuple
from decimal import Decimal
from fractions import Fraction
from math import isfinite, isnan

from . import magnitude
from .context import Compare, Flags, get_context
from .errors import DivisionByZero
from .magnitude import Magnitude
from .text import DefaultFormat, float_to_text, parse_decimal

__all__ = ('DecimalNumber', 'align_scales', 'ZERO', 'ONE')


class DecimalNumber(namedtuple('DecimalNumber', 'negative magnitude scale')):
    '''Internal Representation
       -----------------------

    A decimal number is a sign, an unsigned magnitude and a non-negative scale, and its
    value is

            value = (-1)^negative * magnitude * 10^-scale.

    Numbers are immutable and always canonical: the magnitude has no most-significant
    zeroes, the scale is the least possible (the magnitude's least significant digit
    is not zero when the scale is positive), and zero is positive with a scale of zero.
    Each value therefore has exactly one representation.

    All arithmetic is exact except division by a number that is not a power of ten,
    which truncates towards zero after the context's precision of fractional digits.
    '''

    __slots__ = ()

    def __new__(cls, negative, digits, scale=0):
        '''Validate and create a decimal number.  digits is a Magnitude, or an iterable of
        decimal digits with the least significant first.
        '''
        if not isinstance(negative, bool):
            raise TypeError('negative must be a bool')
        if isinstance(scale, bool) or not isinstance(scale, int):
            raise TypeError('scale must be an integer')
        if scale < 0:
            raise ValueError(f'scale {scale:,d} cannot be negative')
        if not isinstance(digits, Magnitude):
            digits = Magnitude(digits)
        return cls._canonical(negative, digits, scale)

    @classmethod
    def _canonical(cls, negative, mag, scale):
        '''Return the canonical number of a validated sign, magnitude and scale.'''
        if mag.is_zero():
            return super().__new__(cls, False, mag, 0)
        # Trailing fractional zeroes are insignificant
        strip = 0
        while strip < scale and mag[strip] == 0:
            strip += 1
        if strip:
            mag = Magnitude._make(mag[strip:])
            scale -= strip
        return super().__new__(cls, negative, mag, scale)

    @classmethod
    def from_string(cls, string):
        '''Convert a decimal literal to a number.'''
        negative, mag, scale = parse_decimal(string)
        return cls._canonical(negative, mag, scale)

    @classmethod
    def from_int(cls, value):
        '''Return the integer value as a decimal number.'''
        if not isinstance(value, int):
            raise TypeError('from_int requires an integer')
        return cls.from_string(str(int(value)))

    @classmethod
    def from_float(cls, value):
        '''Return the decimal number with the shortest text that reads back as the float.
        This is not the float's exact binary value; for example 0.1 becomes 0.1.'''
        return cls.from_string(float_to_text(value))

    @classmethod
    def from_value(cls, value):
        '''Return a decimal number from a DecimalNumber, int, float, str or finite Decimal.'''
        if isinstance(value, DecimalNumber):
            return value
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, float):
            return cls.from_float(value)
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, Decimal):
            return cls.from_string(format(value, 'f'))
        raise TypeError(f'cannot convert {type(value).__name__} to a decimal number')

    ##
    ## Non-computational operations.
    ##

    def is_zero(self):
        return self.magnitude.is_zero()

    def is_negative(self):
        return self.negative

    def is_integer(self):
        return self.scale == 0

    def as_integer_ratio(self):
        '''Return a pair (n, d) of integers with d positive whose ratio is equal to this
        number.  The pair is in lowest terms.'''
        ratio = Fraction(int(self.magnitude), 10 ** self.scale)
        numerator = -ratio.numerator if self.negative else ratio.numerator
        return numerator, ratio.denominator

    def negate(self):
        '''Return this value with the opposite sign.  Zero is unchanged.'''
        if self.is_zero():
            return self
        return super().__new__(self.__class__, not self.negative, self.magnitude, self.scale)

    def copy_abs(self):
        '''Return this value with a positive sign.'''
        if not self.negative:
            return self
        return self.negate()

    def to_string(self, text_format=None):
        '''Return the number as decimal text.  See TextFormat for output control.'''
        text_format = text_format or DefaultFormat
        return text_format.format_decimal(self.negative, str(self.magnitude), self.scale)

    ##
    ## Arithmetic
    ##

    def add(self, rhs):
        '''Return the sum self + rhs.'''
        lhs_mag, rhs_mag, scale = align_scales(self, rhs)
        if self.negative == rhs.negative:
            return self._canonical(self.negative, magnitude.add(lhs_mag, rhs_mag), scale)

        # The signs differ so subtract the smaller magnitude from the larger one, whose
        # sign is the sign of the result.  Equal magnitudes give a positive zero.
        if magnitude.compare(lhs_mag, rhs_mag) == Compare.LESS_THAN:
            return self._canonical(rhs.negative, magnitude.subtract(rhs_mag, lhs_mag), scale)
        return self._canonical(self.negative, magnitude.subtract(lhs_mag, rhs_mag), scale)

    def subtract(self, rhs):
        '''Return the difference self - rhs.'''
        return self.add(rhs.negate())

    def multiply(self, rhs):
        '''Return the product self * rhs.'''
        return self._canonical(self.negative != rhs.negative,
                               magnitude.multiply(self.magnitude, rhs.magnitude),
                               self.scale + rhs.scale)

    def divide(self, rhs, context=None):
        '''Return the quotient self / rhs.

        Division by a power of ten only moves the decimal point and is exact.  Otherwise
        the quotient is truncated towards zero after context.precision fractional digits
        (or the dividend's scale less the divisor's, if that is greater), so its error
        is less than 10^-precision.  If the quotient is truncated the context's INEXACT
        flag is raised.
        '''
        if rhs.is_zero():
            raise DivisionByZero(f'division of {self} by zero')
        negative = self.negative != rhs.negative

        exponent = magnitude.power_of_ten(rhs.magnitude)
        if exponent is not None:
            scale = self.scale + exponent - rhs.scale
            if scale < 0:
                return self._canonical(negative, magnitude.shift_left(self.magnitude, -scale), 0)
            return self._canonical(negative, self.magnitude, scale)

        context = context or get_context()
        # Pad the dividend with zeroes so the quotient has the required fractional digits
        scale = max(self.scale, context.precision + rhs.scale)
        dividend = magnitude.shift_left(self.magnitude, scale - self.scale)
        quotient, remainder = magnitude.divide(dividend, rhs.magnitude)
        if not remainder.is_zero():
            context.flags |= Flags.INEXACT
        return self._canonical(negative, quotient, scale - rhs.scale)

    def euclidian(self, rhs):
        '''Return a (quotient, remainder) pair such that self = quotient * rhs + remainder,
        where the quotient is an integer and 0 <= remainder < rhs.  self must not be
        negative and rhs must be positive.  The result is exact.
        '''
        if rhs.is_zero():
            raise DivisionByZero(f'euclidian division of {self} by zero')
        if rhs.negative:
            raise ValueError('euclidian division requires a positive divisor')
        if self.negative:
            raise ValueError('euclidian division requires a non-negative dividend')

        lhs_mag, rhs_mag, scale = align_scales(self, rhs)
        quotient, remainder = magnitude.divide(lhs_mag, rhs_mag)
        return self._canonical(False, quotient, 0), self._canonical(False, remainder, scale)

    def power(self, exponent, context=None):
        '''Return self raised to an integer power, by repeated squaring.  A negative exponent
        divides, and so can truncate; see divide().'''
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError('exponent must be an integer')
        if exponent == 0:
            return ONE

        # Halve towards zero
        half = exponent // 2 if exponent > 0 else -(-exponent // 2)
        root = self.power(half, context)
        result = root.multiply(root)
        if exponent % 2:
            if exponent > 0:
                result = result.multiply(self)
            else:
                result = result.divide(self, context)
        return result

    ##
    ## Comparisons
    ##

    def compare(self, rhs):
        '''Return self vs rhs as one of the comparison constants.'''
        # Zero is never negative so differing signs decide
        if self.negative != rhs.negative:
            return Compare.LESS_THAN if self.negative else Compare.GREATER_THAN

        lhs_mag, rhs_mag, _ = align_scales(self, rhs)
        result = magnitude.compare(lhs_mag, rhs_mag)
        if self.negative and result != Compare.EQUAL:
            if result == Compare.LESS_THAN:
                return Compare.GREATER_THAN
            return Compare.LESS_THAN
        return result

    ##
    ## Python protocol
    ##

    def __repr__(self):
        return f'DecimalNumber.from_string({self.to_string()!r})'

    def __str__(self):
        return self.to_string()

    def __abs__(self):
        return self.copy_abs()

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __eq__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare == Compare.EQUAL

    def __ne__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare != Compare.EQUAL

    def __lt__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare == Compare.LESS_THAN

    def __le__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare in (Compare.EQUAL, Compare.LESS_THAN)

    def __ge__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare in (Compare.EQUAL, Compare.GREATER_THAN)

    def __gt__(self, other):
        compare = compare_any(self, other)
        if compare is None:
            return NotImplemented
        return compare == Compare.GREATER_THAN

    def __hash__(self):
        '''Python hash.  Must hash equally to other types with the same value.'''
        return hash(Fraction(*self.as_integer_ratio()))

    def __bool__(self):
        return not self.is_zero()

    def __int__(self):
        # Truncates towards zero
        result = int(Magnitude._make(self.magnitude[self.scale:] or (0, )))
        return -result if self.negative else result

    def __float__(self):
        return float(self.to_string())

    def __add__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __floordiv__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.euclidian(other)[0]

    def __mod__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.euclidian(other)[1]

    def __divmod__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return self.euclidian(other)

    def __pow__(self, exponent):
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.power(exponent)

    def __radd__(self, other):
        return self.__add__(other)

    def __rsub__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __rtruediv__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __rfloordiv__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.euclidian(self)[0]

    def __rmod__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.euclidian(self)[1]

    def __rdivmod__(self, other):
        other = convert_for_arith(other)
        if other is None:
            return NotImplemented
        return other.euclidian(self)


def align_scales(lhs, rhs):
    '''Return a triple (lhs_magnitude, rhs_magnitude, scale).  The magnitude of the operand
    with the smaller scale has zeroes appended at its least significant end so that both
    magnitudes are of the common scale.'''
    scale = max(lhs.scale, rhs.scale)
    return (magnitude.shift_left(lhs.magnitude, scale - lhs.scale),
            magnitude.shift_left(rhs.magnitude, scale - rhs.scale),
            scale)


def convert_for_arith(value):
    '''Return value as a DecimalNumber if it is a type that mixes with decimal numbers in
    arithmetic, otherwise None.  Infinities and NaNs have no decimal value.'''
    if isinstance(value, DecimalNumber):
        return value
    if isinstance(value, int):
        return DecimalNumber.from_int(value)
    if isinstance(value, float) and isfinite(value):
        return DecimalNumber.from_float(value)
    if isinstance(value, Decimal) and value.is_finite():
        return DecimalNumber.from_value(value)
    return None


def compare_any(value, other):
    '''LHS is a DecimalNumber.  RHS is any type.  Comparisons with other numeric types are
    exact.  Returns None if other is not a comparable type.'''
    if isinstance(other, DecimalNumber):
        return value.compare(other)
    if isinstance(other, float) and not isfinite(other):
        if isnan(other):
            return Compare.UNORDERED
        return Compare.LESS_THAN if other > 0 else Compare.GREATER_THAN
    if isinstance(other, Decimal) and not other.is_finite():
        if other.is_nan():
            return Compare.UNORDERED
        return Compare.GREATER_THAN if other.is_signed() else Compare.LESS_THAN
    if isinstance(other, (int, float, Decimal, Fraction)):
        a, b = value.as_integer_ratio()
        c, d = other.as_integer_ratio()
        diff = a * d - b * c
        if diff > 0:
            return Compare.GREATER_THAN
        if diff < 0:
            return Compare.LESS_THAN
        return Compare.EQUAL

    return None


ZERO = DecimalNumber(False, (0, ))
ONE = DecimalNumber(False, (1, ))
