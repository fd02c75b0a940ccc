'''
Semantics of the calculator's named functions and operators.

Every function takes plain floats and returns a float, raising a CalcError
subclass on domain violations.
'''

import math
import sys

from .util import (MathError, Overflow, UnknownFunction,
                   wrap_user_errors)


# Longest name first wherever names share a prefix (asinh, asin, sin...).
# The lexer tries them in this order; reordering breaks tokenization.
FUNCTIONS = (
    'asinh', 'acosh', 'atanh', 'asin', 'acos', 'atan',
    'sinh', 'cosh', 'tanh', 'sin', 'cos', 'tan',
    'log₂', 'log', 'ln', 'sqrt', 'cbrt', 'abs', 'exp',
    'nCr', 'nPr', 'Rec', 'Pol',
)

# Above this the factorial no longer fits what the display can show.
MAX_FACTORIAL = 69
# |cos| below this is treated as a tangent asymptote.
TAN_EPSILON = 1e-12


def _require(condition, message):
    if not condition:
        raise MathError(message)


def _tan(x, angle):
    r = angle.to_radians(x)
    _require(abs(math.cos(r)) >= TAN_EPSILON, 'tan undefined')
    return math.tan(r)


def _asin(x, angle):
    _require(abs(x) <= 1.0, 'asin domain is [-1, 1]')
    return angle.from_radians(math.asin(x))


def _acos(x, angle):
    _require(abs(x) <= 1.0, 'acos domain is [-1, 1]')
    return angle.from_radians(math.acos(x))


def _acosh(x, angle):
    _require(x >= 1.0, 'acosh domain is [1, ∞)')
    return math.acosh(x)


def _atanh(x, angle):
    _require(abs(x) < 1.0, 'atanh domain is (-1, 1)')
    return math.atanh(x)


def _logarithm(log):
    def wrapped(x, angle):
        _require(x > 0.0, 'logarithm of non-positive number')
        return log(x)
    wrapped.__name__ = log.__name__
    return wrapped


def _sqrt(x, angle):
    _require(x >= 0.0, 'square root of negative number')
    return math.sqrt(x)


def _plain(f):
    '''
    Adapt an angle-independent one argument function.
    '''
    def wrapped(x, angle):
        return f(x)
    wrapped.__name__ = f.__name__
    return wrapped


UNARY = {
    'sin': lambda x, angle: math.sin(angle.to_radians(x)),
    'cos': lambda x, angle: math.cos(angle.to_radians(x)),
    'tan': _tan,
    'asin': _asin,
    'acos': _acos,
    'atan': lambda x, angle: angle.from_radians(math.atan(x)),
    'sinh': _plain(math.sinh),
    'cosh': _plain(math.cosh),
    'tanh': _plain(math.tanh),
    'asinh': _plain(math.asinh),
    'acosh': _acosh,
    'atanh': _atanh,
    'log': _logarithm(math.log10),
    'log₂': _logarithm(math.log2),
    'ln': _logarithm(math.log),
    'sqrt': _sqrt,
    'cbrt': _plain(math.cbrt),
    'abs': _plain(abs),
    'exp': _plain(math.exp),
}


@wrap_user_errors('{0}({1})', MathError)
def apply_unary(name, x, angle):
    '''
    Apply one argument function name to x, trig ones in angle units.
    '''
    try:
        f = UNARY[name]
    except KeyError:
        raise UnknownFunction('Unknown function: {}'.format(name)) from None
    return float(f(x, angle))


def _counts(n, r):
    '''
    Truncate to non-negative integers, checking r <= n.
    '''
    n, r = max(int(n), 0), max(int(r), 0)
    _require(r <= n, 'r must not exceed n')
    return n, r


def _bounded(result):
    # Both products only grow, so stop as soon as a float can't hold them.
    if result > sys.float_info.max:
        raise Overflow('count exceeds float range')
    return result


def combinations(n, r):
    n, r = _counts(n, r)
    r = min(r, n - r)
    result = 1
    for i in range(r):
        result = _bounded(result * (n - i) // (i + 1))
    return float(result)


def permutations(n, r):
    n, r = _counts(n, r)
    result = 1
    for i in range(r):
        result = _bounded(result * (n - i))
    return float(result)


def rectangular(r, theta):
    '''
    Polar (r, θ in degrees) to rectangular (x, y).
    '''
    radians = math.radians(theta)
    return r * math.cos(radians), r * math.sin(radians)


def polar(x, y):
    '''
    Rectangular (x, y) to polar (r, θ in degrees).
    '''
    return math.hypot(x, y), math.degrees(math.atan2(y, x))


BINARY = {
    'nCr': combinations,
    'nPr': permutations,
    # Only the first of each pair; rectangular()/polar() give both.
    'Rec': lambda a, b: a * math.cos(math.radians(b)),
    'Pol': lambda a, b: math.sqrt(a * a + b * b),
}


@wrap_user_errors('{0}({1}, {2})', MathError)
def apply_binary(name, a, b):
    '''
    Apply two argument function name to (a, b).
    '''
    try:
        f = BINARY[name]
    except KeyError:
        raise UnknownFunction('Unknown 2-arg function: {}'.format(name)) \
            from None
    return float(f(a, b))


def is_binary(name):
    return name in BINARY


def factorial(n):
    _require(0.0 <= n <= MAX_FACTORIAL and float(n).is_integer(),
             'factorial needs an integer in 0..{}'.format(MAX_FACTORIAL))
    return float(math.factorial(int(n)))


def percent(x):
    return x / 100.0


@wrap_user_errors('{0}^{1}', MathError)
def power(base, exponent):
    try:
        return math.pow(base, exponent)
    except ValueError:
        # math.pow calls 0^-n a domain error; it is a pole.
        if base == 0.0:
            raise Overflow('{}^{}'.format(base, exponent))
        raise
