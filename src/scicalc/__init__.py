'''
Scientific calculator.

Evaluates what you would type into a pocket scientific calculator:
sin(30)+2^3, 5!%, nCr(5,2), Ans×π. Trig honours the angle mode (degrees,
radians or gradians), results are rendered the way a ten digit display
would (normal, scientific, engineering or fixed), and a session keeps Ans,
memory variables A-F X Y M, an M+ running total, and the last 50
evaluations.

Why evaluate while parsing rather than build a tree?

- Expressions are one line long and evaluated once.
- Calculator precedence has quirks (-2^2 is 4) that read plainest as one
  function per precedence level.
- Half typed input (sin(30 with no closing bracket) should still evaluate.
'''

# TODO: Return Rec/Pol companion values into X and Y, as the hardware does.

from .angle import AngleMode
from .cli import CLI
from .engine import Engine
from .formatting import DisplayFormat, format_number, format_result
from .lexer import Lexer, Token, TokenKind, tokenize
from .memory import Variable
from .parser import Parser, parse_expression
from .util import (CalcError, CalcSyntaxError, EvalError, MathError,
                   DivideByZero, Overflow, UnknownFunction, StackError)


__all__ = (
    'AngleMode', 'CLI', 'Engine', 'DisplayFormat', 'format_number',
    'format_result', 'Lexer', 'Token', 'TokenKind', 'tokenize', 'Variable',
    'Parser', 'parse_expression', 'CalcError', 'CalcSyntaxError',
    'EvalError', 'MathError', 'DivideByZero', 'Overflow', 'UnknownFunction',
    'StackError',
)
