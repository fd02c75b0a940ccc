from collections import namedtuple
from enum import Enum
from functools import reduce
import math
import operator

import regex

from .functions import FUNCTIONS
from .memory import Variable
from .util import CalcSyntaxError, wrap_user_errors


class TokenKind(Enum):
    NUMBER = 'number'
    PLUS = '+'
    MINUS = '-'
    TIMES = '*'
    DIVIDE = '/'
    POWER = '^'
    LPAREN = '('
    RPAREN = ')'
    COMMA = ','
    FACTORIAL = '!'
    PERCENT = '%'
    FUNCTION = 'function'


class Token(namedtuple('Token', 'kind value', defaults=(None,))):
    '''
    Immutable lexeme: a kind, and for numbers and functions, a value.
    '''
    __slots__ = ()

    def __str__(self):
        if self.value is None:
            return self.kind.value
        return '<{}>{}'.format(self.kind.name, self.value)


# Unicode glyphs share the kind of their ASCII spelling.
OPERATORS = {
    '+': TokenKind.PLUS,
    '-': TokenKind.MINUS,
    '*': TokenKind.TIMES,
    '\N{MULTIPLICATION SIGN}': TokenKind.TIMES,
    '/': TokenKind.DIVIDE,
    '\N{DIVISION SIGN}': TokenKind.DIVIDE,
    '^': TokenKind.POWER,
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
    ',': TokenKind.COMMA,
    '!': TokenKind.FACTORIAL,
    '%': TokenKind.PERCENT,
}

# Scan time substitutions.
CONSTANTS = {
    '\N{GREEK SMALL LETTER PI}': math.pi,
    'e': math.e,
}


class Lexer:
    '''
    Lexer for the calculator's *regular* grammar.

    Holds no state: Ans and memory are resolved from what tokenize is given,
    so tokens carry values, never names.
    '''
    # Doesn't validate, e.g. 1.2.3 or 2e. Captures the whole run so the
    # conversion rejects it whole.
    NUMBER = r'''
              [0-9.]+
              (?:
                  # 1.5e3, 2E-4
                  [eE]
                  [+-]?
                  [0-9]*
              )?
              '''
    # Not immediately followed by a letter or digit, so e doesn't eat the
    # start of exp.
    STANDALONE = r'(?![^\W_])'

    ANS = r'Ans'
    PI = regex.escape('\N{GREEK SMALL LETTER PI}')
    E = r'e' + STANDALONE
    VARIABLE = r'(?:' + r'|'.join(map(regex.escape, Variable.spellings())) + \
               r')' + STANDALONE
    # Alternation is ordered, so this is longest match first.
    FUNCTION = r'(?:' + r'|'.join(map(regex.escape, FUNCTIONS)) + r')'

    assert not [operator
                for operator
                in OPERATORS
                if len(operator) != 1]
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'
    # ASCII spaces only. Escaped, as VERBOSE ignores literal ones.
    SPACE = r'\x20+'

    # All possible lexemes, tried in this order at each position.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<ans>' + ANS + r')|' \
             r'(?<constant>' + PI + r'|' + E + r')|' \
             r'(?<variable>' + VARIABLE + r')|' \
             r'(?<function>' + FUNCTION + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)
    PATTERN = regex.compile(LEXEME, flags=FLAGS)

    def lex(self, line):
        '''
        Take a line and yield all lexeme matches, spaces included.

        Raises CalcSyntaxError at the first character no lexeme matches.
        '''
        pos = 0
        while pos < len(line):
            match = type(self).PATTERN.match(line, pos)
            if match is None:
                raise CalcSyntaxError(
                    "Unknown character: '{}'".format(line[pos]),
                    text=line,
                    index=pos)
            yield match
            pos = match.end()

    def matchedgroups(self, match):
        '''
        Return the lexeme's matched named groups.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}

    def isfeedable(self, match):
        '''
        Return True if lexeme produces a token.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    @wrap_user_errors('Bad number: {1}', CalcSyntaxError)
    def _iconvert(self, number):
        '''
        Convert a captured number lexeme to float.
        '''
        return float(number)

    def parse(self, groups, ans=0.0, memory=None):
        '''
        Turn one lexeme's groups into a token, substituting values.

        :param ans: Value Ans stands for.
        :param memory: Mapping of Variable to value; absent ones are 0.
        '''
        if 'number' in groups:
            return Token(TokenKind.NUMBER, self._iconvert(groups['number']))
        elif 'ans' in groups:
            return Token(TokenKind.NUMBER, float(ans))
        elif 'constant' in groups:
            return Token(TokenKind.NUMBER, CONSTANTS[groups['constant']])
        elif 'variable' in groups:
            variable = Variable.lookup(groups['variable'])
            return Token(TokenKind.NUMBER,
                         float((memory or {}).get(variable, 0.0)))
        elif 'function' in groups:
            return Token(TokenKind.FUNCTION, groups['function'])
        elif 'operator' in groups:
            return Token(OPERATORS[groups['operator']])

    def tokenize(self, line, ans=0.0, memory=None):
        '''
        Take a line and return its flat token list.
        '''
        return [self.parse(self.matchedgroups(match), ans, memory)
                for match
                in self.lex(line)
                if self.isfeedable(match)]


def tokenize(text, ans=0.0, memory=None):
    return Lexer().tokenize(text, ans, memory)
