'''
Parser/evaluator tests
'''

import math

import pytest
from pytest import approx, raises

from scicalc.angle import AngleMode
from scicalc.lexer import Token, TokenKind, tokenize
from scicalc.parser import parse_expression
from scicalc.util import (CalcSyntaxError, DivideByZero, MathError, Overflow,
                          StackError, UnknownFunction)


def calc(text, angle=AngleMode.DEGREES):
    return parse_expression(tokenize(text), angle)


@pytest.mark.parametrize(
    'text, expected',
    [
        pytest.param('1', 1.0),
        pytest.param('2+3*4', 14.0),
        pytest.param('(2+3)*4', 20.0),
        pytest.param('10/5/2', 1.0),
        pytest.param('10-4-3', 3.0),
        pytest.param('2^3^2', 512.0),
        pytest.param('2^-1', 0.5),
        pytest.param('-2^2', 4.0),
        pytest.param('-(1+2)', -3.0),
        pytest.param('+5', 5.0),
        pytest.param('3*-2', -6.0),
        pytest.param('5!', 120.0),
        pytest.param('0!', 1.0),
        pytest.param('3!!', 720.0),
        pytest.param('50%', 0.5),
        pytest.param('5!%', 1.2),
        pytest.param('2×3÷4', 1.5),
        pytest.param('0/5', 0.0),
        pytest.param('nCr(5,2)', 10.0),
        pytest.param('nCr(10.9, 2.9)', 45.0),
        pytest.param('nCr(5,0)', 1.0),
        pytest.param('nPr(5,2)', 20.0),
        pytest.param('nPr(5,0)', 1.0),
        pytest.param('Pol(3,4)', 5.0),
        pytest.param('abs(-3)', 3.0),
        pytest.param('sqrt(16)', 4.0),
        pytest.param('log(1000)', 3.0),
        pytest.param('log₂(8)', 3.0),
        pytest.param('ln(1)', 0.0),
        pytest.param('exp(0)', 1.0),
        pytest.param('sinh(0)', 0.0),
        pytest.param('cosh(0)', 1.0),
        pytest.param('tanh(0)', 0.0),
        pytest.param('asinh(0)', 0.0),
        pytest.param('acosh(1)', 0.0),
        pytest.param('atanh(0)', 0.0),
    ],
)
def test_evaluates(text, expected):
    assert calc(text) == expected


@pytest.mark.parametrize(
    'text, expected',
    [
        # Brackets and commas are consumed if present.
        pytest.param('(1+2', 3.0),
        pytest.param('((2', 2.0),
        pytest.param('sqrt 16', 4.0),
        pytest.param('sqrt(16', 4.0),
        pytest.param('nCr(5,2', 10.0),
        pytest.param('nCr(5 2)', 10.0),
        # Anything after a complete expression is left alone.
        pytest.param('2 3', 2.0),
        pytest.param('2)', 2.0),
    ],
)
def test_tolerates_incomplete_input(text, expected):
    assert calc(text) == expected


def test_trigonometry_in_degrees():
    assert calc('sin(30)') == approx(0.5)
    assert calc('cos(60)') == approx(0.5)
    assert calc('tan(45)') == approx(1.0)
    assert calc('asin(1)') == approx(90.0)
    assert calc('acos(0)') == approx(90.0)
    assert calc('atan(1)') == approx(45.0)


def test_trigonometry_in_other_modes():
    assert calc('sin(π/2)', AngleMode.RADIANS) == approx(1.0)
    assert calc('asin(1)', AngleMode.RADIANS) == approx(math.pi / 2)
    assert calc('cos(200)', AngleMode.GRADIANS) == approx(-1.0)
    assert calc('asin(1)', AngleMode.GRADIANS) == approx(100.0)


def test_hyperbolic_ignores_angle_mode():
    assert calc('sinh(1)') == calc('sinh(1)', AngleMode.RADIANS)


def test_cube_root():
    assert calc('cbrt(27)') == approx(3.0)
    assert calc('cbrt(-27)') == approx(-3.0)


def test_rec_returns_x_component():
    assert calc('Rec(2,60)') == approx(1.0)


@pytest.mark.parametrize(
    'text',
    [
        'asin(2)', 'acos(-1.5)', 'tan(90)', 'tan(270)',
        'acosh(0.5)', 'atanh(1)', 'atanh(-1)',
        'log(0)', 'log₂(-2)', 'ln(-1)', 'sqrt(-1)',
        '70!', '2.5!', '(-1)!',
        'nCr(2,5)', 'nPr(2,5)',
        '(-8)^(1/3)',
    ],
)
def test_domain_errors(text):
    with raises(MathError):
        calc(text)


def test_factorial_bound_is_inclusive():
    assert calc('69!') == float(math.factorial(69))


def test_divide_by_zero():
    with raises(DivideByZero):
        calc('5/0')
    with raises(DivideByZero):
        calc('1/(2-2)')


@pytest.mark.parametrize('text', ['0^-1', '10^400', 'exp(1000)',
                                  'sinh(1000)', 'nPr(1e6,1e6)'])
def test_overflow(text):
    with raises(Overflow):
        calc(text)


@pytest.mark.parametrize('text', ['', '2+', ')', '*3', 'sin()'])
def test_structural_errors(text):
    with raises(CalcSyntaxError):
        calc(text)


def test_unknown_function():
    tokens = [Token(TokenKind.FUNCTION, 'sec'), Token(TokenKind.NUMBER, 1.0)]
    with raises(UnknownFunction):
        parse_expression(tokens)


def test_deep_nesting():
    with raises(StackError):
        calc('(' * 10000 + '1')
