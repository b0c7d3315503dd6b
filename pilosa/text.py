#
# Conversion of decimal numbers to and from text
#
# (c) Neil Booth 2007-2021.  All rights reserved.
#

import re
from decimal import Decimal
from math import isfinite

import attr
import structlog

from .errors import FormatError
from .magnitude import Magnitude

__all__ = ('TextFormat', 'DefaultFormat', 'parse_decimal', 'float_to_text')


logger = structlog.get_logger()


@attr.s(slots=True, kw_only=True, eq=False)
class TextFormat:
    '''Controls the output of conversion to decimal strings.  Every output can be read back
    by parse_decimal().'''

    # If True, non-negative numbers are preceded with a '+'.
    force_leading_sign = attr.ib(default=False)
    # If True, integral values display a point followed by a zero even though none is
    # needed.  For example, "5" would display as "5.0".
    force_point = attr.ib(default=False)

    def leading_sign(self, negative):
        '''Return the leading sign string.'''
        return '-' if negative else '+' if self.force_leading_sign else ''

    def format_decimal(self, negative, digits, scale):
        '''negative is True if the number has a negative sign.  digits is a string of the
        digits of the number's magnitude, most significant first, and scale is how many of
        them lie to the right of the decimal point.  Values less than one in magnitude
        are written with a "0." prefix and as many zeroes as are needed before the
        first significant digit.
        '''
        parts = [self.leading_sign(negative)]
        if scale == 0:
            parts.append(digits)
            if self.force_point:
                parts.append('.0')
        else:
            point = len(digits) - scale
            if point <= 0:
                parts.extend(('0.', '0' * -point, digits))
            else:
                parts.extend((digits[:point], '.', digits[point:]))

        return ''.join(parts)


# Default format; the inverse of parse_decimal()
DefaultFormat = TextFormat()


def _reject(string, reason):
    logger.debug('decimal_parse_rejected', text=string, reason=reason)
    raise FormatError(string, reason)


def parse_decimal(string):
    '''Parse a decimal literal and return a (negative, magnitude, scale) triple.

    The literal is an optional sign, then digits with at most one decimal point
    anywhere among them.  Spaces are ignored.  Raises FormatError if there are no
    digits, more than one decimal point, or any other character.
    '''
    if not isinstance(string, str):
        raise TypeError('parse_decimal requires a string')

    text = string.replace(' ', '')
    if not text:
        _reject(string, 'empty input')
    if text.count('.') > 1:
        _reject(string, 'more than one decimal point')

    match = DEC_LITERAL_REGEX.fullmatch(text)
    if match is None:
        bad = next(c for n, c in enumerate(text)
                   if c not in '0123456789.' and not (n == 0 and c in '+-'))
        _reject(string, f'invalid character {bad!r}')

    sign, integer, fraction = match.groups()
    fraction = fraction or ''
    if not (integer or fraction):
        _reject(string, 'no digits')

    return sign == '-', Magnitude.from_string(integer + fraction), len(fraction)


def float_to_text(value):
    '''Return the shortest decimal text, without an exponent, that reads back as the float
    value.'''
    if not isinstance(value, float):
        raise TypeError('float_to_text requires a float')
    if not isfinite(value):
        logger.debug('decimal_float_rejected', value=value)
        raise FormatError(repr(value), 'only finite floats have a decimal value')
    return format(Decimal(repr(value)), 'f')


DEC_LITERAL_REGEX = re.compile(
    # sign[opt]
    '([-+]?)'
    # dec-integer[opt] followed by .fraction[opt]
    '([0-9]*)(?:\\.([0-9]*))?',
    re.ASCII
)
