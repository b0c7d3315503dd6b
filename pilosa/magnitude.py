#
# Unsigned decimal magnitudes and the schoolbook arithmetic on them
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

from .context import Compare
from .errors import DivisionByZero, InternalInvariantViolation, ValidationError

__all__ = ('Magnitude', 'clean', 'is_zero', 'compare', 'add', 'subtract', 'multiply',
           'shift_left', 'short_divide', 'long_divide', 'divide', 'power_of_ten')


DIGIT_CHARS = '0123456789'


class Magnitude(tuple):
    '''An unsigned integer stored as a tuple of decimal digits, least significant first.

    Magnitudes are canonical: the most significant digit is non-zero unless the value is
    zero, which is the single digit (0, ).  Canonical forms are unique so tuple equality
    and hashing are value equality and hashing.  The functions of this module take
    canonical magnitudes and return canonical magnitudes; they also accept plain
    sequences of digits in canonical form.
    '''

    __slots__ = ()

    def __new__(cls, digits=(0, )):
        '''Validate and create a canonical magnitude from an iterable of digits, least
        significant first.  Most-significant zeroes are removed.
        '''
        digits = tuple(digits)
        for digit in digits:
            if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
                raise ValidationError(f'{digit!r} is not a decimal digit')
        return clean(digits)

    @classmethod
    def _make(cls, digits):
        '''Wrap digits already known to be valid and canonical.'''
        return tuple.__new__(cls, digits)

    @classmethod
    def from_int(cls, value):
        '''Return the magnitude of a non-negative integer.'''
        if not isinstance(value, int):
            raise TypeError('from_int requires an integer')
        if value < 0:
            raise ValueError('a magnitude cannot be negative')
        return cls._make(DIGIT_CHARS.index(c) for c in reversed(str(int(value))))

    @classmethod
    def from_string(cls, string):
        '''Return the magnitude written as string, a non-empty run of decimal digits with
        the most significant first.'''
        if not string or string.strip(DIGIT_CHARS):
            raise ValidationError(f'{string!r} is not a string of decimal digits')
        return clean([DIGIT_CHARS.index(c) for c in reversed(string)])

    def is_zero(self):
        return is_zero(self)

    def __int__(self):
        result = 0
        for digit in reversed(self):
            result = result * 10 + digit
        return result

    def __str__(self):
        return ''.join(DIGIT_CHARS[digit] for digit in reversed(self))

    def __repr__(self):
        return f'Magnitude.from_string({str(self)!r})'

    def __lt__(self, other):
        if not isinstance(other, Magnitude):
            return NotImplemented
        return compare(self, other) == Compare.LESS_THAN

    def __le__(self, other):
        if not isinstance(other, Magnitude):
            return NotImplemented
        return compare(self, other) != Compare.GREATER_THAN

    def __gt__(self, other):
        if not isinstance(other, Magnitude):
            return NotImplemented
        return compare(self, other) == Compare.GREATER_THAN

    def __ge__(self, other):
        if not isinstance(other, Magnitude):
            return NotImplemented
        return compare(self, other) != Compare.LESS_THAN


def clean(digits):
    '''Return the magnitude of digits, a little-endian sequence of decimal digits, with its
    most-significant zeroes removed.  Zero keeps exactly one digit; an empty sequence is
    also zero.
    '''
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1
    if end == 0:
        return ZERO_MAGNITUDE
    return Magnitude._make(digits[:end])


def is_zero(u):
    return len(u) == 1 and u[0] == 0


def _is_one(u):
    return len(u) == 1 and u[0] == 1


def compare(u, v):
    '''Return u vs v as one of the comparison constants.  Both must be canonical: the longer
    magnitude is the greater, and equal lengths are compared from the most significant
    digit down.
    '''
    if len(u) != len(v):
        return Compare.GREATER_THAN if len(u) > len(v) else Compare.LESS_THAN
    for i in range(len(u) - 1, -1, -1):
        if u[i] != v[i]:
            return Compare.GREATER_THAN if u[i] > v[i] else Compare.LESS_THAN
    return Compare.EQUAL


def add(u, v):
    '''Return u + v.'''
    if len(u) < len(v):
        u, v = v, u
    n = len(v)
    result = []
    carry = 0
    for i in range(len(u)):
        t = u[i] + (v[i] if i < n else 0) + carry
        result.append(t % 10)
        carry = t // 10
    result.append(carry)
    return clean(result)


def subtract(u, v):
    '''Return u - v.  u must not be less than v.'''
    if compare(u, v) == Compare.LESS_THAN:
        raise InternalInvariantViolation(f'cannot subtract {_text(v)} from {_text(u)}')
    # Pad v with leading zeroes to the length of u
    v = tuple(v) + (0, ) * (len(u) - len(v))
    result = []
    borrow = 0
    for u_digit, v_digit in zip(u, v):
        t = u_digit - v_digit - borrow
        borrow = 1 if t < 0 else 0
        result.append(t + 10 * borrow)
    if borrow:
        raise InternalInvariantViolation(f'borrow out of {_text(u)} - {_text(v)}')
    return clean(result)


def multiply(u, v):
    '''Return u * v by the schoolbook method.  Each digit of the shorter operand forms a
    partial product with the longer one that is shifted into position and accumulated.
    '''
    if len(u) < len(v):
        u, v = v, u
    if is_zero(v) or is_zero(u):
        return ZERO_MAGNITUDE
    if _is_one(v):
        return clean(u)
    if _is_one(u):
        return clean(v)

    result = ZERO_MAGNITUDE
    for shift, v_digit in enumerate(v):
        if v_digit == 0:
            continue
        partial = [0] * shift
        carry = 0
        for u_digit in u:
            t = u_digit * v_digit + carry
            partial.append(t % 10)
            carry = t // 10
        partial.append(carry)
        result = add(result, partial)
    return result


def shift_left(u, count):
    '''Return u * 10^count, inserting count zero digits at the least significant end.'''
    if count < 0:
        raise ValueError('shift count cannot be negative')
    if count == 0 or is_zero(u):
        return clean(u)
    return Magnitude._make((0, ) * count + tuple(u))


def short_divide(u, divisor):
    '''Divide u by a single-digit divisor.  Return a (quotient, remainder) pair where the
    remainder is an int.'''
    if divisor == 0:
        raise DivisionByZero('division by zero')
    if not 0 < divisor <= 9:
        raise ValueError(f'short division requires a single-digit divisor, not {divisor}')
    quotient = [0] * len(u)
    remainder = 0
    for i in range(len(u) - 1, -1, -1):
        quotient[i], remainder = divmod(remainder * 10 + u[i], divisor)
    return clean(quotient), remainder


def long_divide(u, v):
    '''Divide u by non-zero v with Knuth's Algorithm D (TAOCP vol. 2, 4.3.1).  Return a
    (quotient, remainder) pair of magnitudes.

    v is first normalized so that its leading digit is at least 5; each quotient digit
    is then estimated from the top two digits of the running remainder and at most one
    too large after the estimate is corrected with the second digit of v.  A trial
    digit that is still too large shows up as a negative partial remainder, which is
    repaired by adding v back.
    '''
    n = len(v)
    if n == 1:
        quotient, remainder = short_divide(u, v[0])
        return quotient, Magnitude._make((remainder, ))
    if compare(u, v) == Compare.LESS_THAN:
        return ZERO_MAGNITUDE, clean(u)
    m = len(u) - n

    # D1. Normalize.  Multiplying by d does not lengthen v but makes its top digit >= 5.
    # The dividend gains an extra leading digit, zero if the multiply did not need it.
    d = 10 // (v[-1] + 1)
    vn = multiply(v, (d, ))
    if len(vn) != n:
        raise InternalInvariantViolation(f'normalizing {_text(v)} by {d} changed its length')
    un = list(multiply(u, (d, )))
    un.extend([0] * (m + n + 1 - len(un)))

    top, second = vn[-1], vn[-2]
    quotient = [0] * (m + 1)
    for j in range(m, -1, -1):
        # D3. Estimate the quotient digit from the top two digits of the window
        # un[j:j + n + 1], then correct it using the second digit of v.
        q_hat, r_hat = divmod(un[j + n] * 10 + un[j + n - 1], top)
        while q_hat >= 10 or q_hat * second > r_hat * 10 + un[j + n - 2]:
            q_hat -= 1
            r_hat += top
            if r_hat >= 10:
                break

        # D4. Multiply and subtract.  If the result is negative the window is left
        # holding its ten's complement.
        carry = borrow = 0
        for i in range(n):
            p = q_hat * vn[i] + carry
            carry = p // 10
            t = un[i + j] - p % 10 - borrow
            borrow = 1 if t < 0 else 0
            un[i + j] = t + 10 * borrow
        t = un[j + n] - carry - borrow
        un[j + n] = t % 10

        # D5, D6. Add back; the carry out of the top digit cancels the complement.
        if t < 0:
            q_hat -= 1
            carry = 0
            for i in range(n):
                t = un[i + j] + vn[i] + carry
                un[i + j] = t % 10
                carry = t // 10
            un[j + n] = (un[j + n] + carry) % 10

        if not 0 <= q_hat <= 9:
            raise InternalInvariantViolation(f'quotient digit {q_hat} dividing '
                                             f'{_text(u)} by {_text(v)}')
        quotient[j] = q_hat

    # D8. Unnormalize.  The remainder is in the low n digits, still multiplied by d.
    remainder, leftover = short_divide(clean(un[:n]), d)
    if leftover:
        raise InternalInvariantViolation(f'unnormalizing the remainder of {_text(u)} / '
                                         f'{_text(v)} left {leftover}')
    return clean(quotient), remainder


def divide(u, v):
    '''Return the (quotient, remainder) magnitude pair of u divided by v.'''
    if is_zero(v):
        raise DivisionByZero('division by zero')
    return long_divide(u, v)


def power_of_ten(u):
    '''Return k if u is 10^k, otherwise None.'''
    if u[-1] != 1 or any(u[:-1]):
        return None
    return len(u) - 1


def _text(u):
    return ''.join(DIGIT_CHARS[digit] for digit in reversed(u))


ZERO_MAGNITUDE = Magnitude._make((0, ))
ONE_MAGNITUDE = Magnitude._make((1, ))
