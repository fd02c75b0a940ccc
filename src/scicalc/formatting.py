'''
Calculator-style rendering of results.
'''

from collections import namedtuple
from enum import Enum
import math

import regex


class Notation(Enum):
    NORMAL = 'norm'
    SCIENTIFIC = 'sci'
    ENGINEERING = 'eng'
    FIXED = 'fix'


class DisplayFormat(namedtuple('DisplayFormat', 'notation precision')):
    '''
    How results are shown. Never affects computation.

    precision is only meaningful (and only set) for FIXED.
    '''
    __slots__ = ()

    MAX_PRECISION = 9
    SPEC = regex.compile(r'(?<notation>norm|sci|eng|fix)(?<precision>\d+)?')

    @classmethod
    def fixed(cls, precision):
        precision = int(precision)
        if not 0 <= precision <= cls.MAX_PRECISION:
            raise ValueError('Fixed precision must be within 0..{}'
                             .format(cls.MAX_PRECISION))
        return cls(Notation.FIXED, precision)

    @classmethod
    def parse(cls, spec):
        '''
        Parse short text specs: norm, sci, eng, fix<N>.
        '''
        match = cls.SPEC.fullmatch(spec.strip().lower())
        if match is None:
            raise ValueError('No such display format {}'.format(repr(spec)))
        notation = Notation(match.group('notation'))
        precision = match.group('precision')
        if notation is Notation.FIXED:
            if precision is None:
                raise ValueError('fix needs a precision, e.g. fix2')
            return cls.fixed(precision)
        elif precision is not None:
            raise ValueError('Only fix takes a precision')
        return cls(notation, None)

    def __str__(self):
        if self.notation is Notation.FIXED:
            return '{}{}'.format(self.notation.value, self.precision)
        return self.notation.value


DisplayFormat.NORMAL = DisplayFormat(Notation.NORMAL, None)
DisplayFormat.SCIENTIFIC = DisplayFormat(Notation.SCIENTIFIC, None)
DisplayFormat.ENGINEERING = DisplayFormat(Notation.ENGINEERING, None)


def _scale(value, exponent):
    '''
    value / 10**exponent, in two steps so subnormal and huge powers of ten
    don't underflow to zero or overflow.
    '''
    half = exponent // 2
    return value / 10.0 ** half / 10.0 ** (exponent - half)


def _strip(digits):
    if '.' in digits:
        digits = digits.rstrip('0').rstrip('.')
    return digits


def format_scientific(value, digits=9):
    if value == 0.0:
        return '0'
    exponent = math.floor(math.log10(abs(value)))
    mantissa = '{:.{}f}'.format(_scale(value, exponent), digits)
    return '{}×10^{}'.format(_strip(mantissa), exponent)


def format_engineering(value):
    if value == 0.0:
        return '0'
    exponent = math.floor(math.log10(abs(value))) // 3 * 3
    return '{:.3f}×10^{}'.format(_scale(value, exponent), exponent)


def format_fixed(value, precision):
    if value == 0.0:
        return '0'
    return '{:.{}f}'.format(value, precision)


def format_normal(value):
    if value == 0.0:
        return '0'
    magnitude = abs(value)
    # Long decimals are unreadable on a ten digit display.
    if magnitude < 1e-9 or magnitude >= 1e10:
        return format_scientific(value, 9)
    if value == math.trunc(value) and magnitude < 1e15:
        return str(int(value))
    return _strip('{:.10f}'.format(value))


def format_number(value, display_format=DisplayFormat.NORMAL):
    '''
    Render a finite float as calculator text in the given format.
    '''
    notation = display_format.notation
    if notation is Notation.SCIENTIFIC:
        return format_scientific(value)
    elif notation is Notation.ENGINEERING:
        return format_engineering(value)
    elif notation is Notation.FIXED:
        return format_fixed(value, display_format.precision)
    return format_normal(value)


def format_result(value, display_format=DisplayFormat.NORMAL):
    '''
    Like format_number, but NaN and infinities get their display text.
    '''
    if math.isnan(value):
        return 'Math ERROR'
    elif math.isinf(value):
        return '∞' if value > 0 else '-∞'
    return format_number(value, display_format)
