'''
Calculator lexer tests
'''

import math

import regex

from scicalc.lexer import Lexer, Token, TokenKind, tokenize
from scicalc.memory import Variable
from scicalc.util import CalcSyntaxError

from pytest import raises


def kinds(tokens):
    return [t.kind for t in tokens]


def test_numbers():
    assert tokenize('12 .5 1.5e3 2E-4 7.') == [
        Token(TokenKind.NUMBER, 12.0),
        Token(TokenKind.NUMBER, 0.5),
        Token(TokenKind.NUMBER, 1500.0),
        Token(TokenKind.NUMBER, 0.0002),
        Token(TokenKind.NUMBER, 7.0),
    ]


def test_bad_numbers():
    for bad in '1.2.3', '.', '2e', '3e+':
        with raises(CalcSyntaxError, match=regex.escape('Bad number: ' + bad)):
            tokenize(bad)


def test_unknown_character():
    with raises(CalcSyntaxError, match="Unknown character: '#'") as info:
        tokenize('1+#')
    assert info.value.index == 2
    assert info.value.text == '1+#'


def test_only_ascii_spaces_skipped():
    assert tokenize('  1 ') == [Token(TokenKind.NUMBER, 1.0)]
    with raises(CalcSyntaxError):
        tokenize('1\t+1')


def test_operators_and_glyphs():
    assert kinds(tokenize('+-*×/÷^(),!%')) == [
        TokenKind.PLUS, TokenKind.MINUS,
        TokenKind.TIMES, TokenKind.TIMES,
        TokenKind.DIVIDE, TokenKind.DIVIDE,
        TokenKind.POWER, TokenKind.LPAREN, TokenKind.RPAREN,
        TokenKind.COMMA, TokenKind.FACTORIAL, TokenKind.PERCENT,
    ]


def test_ans_substituted_at_scan_time():
    assert tokenize('Ans*2', ans=21.0)[0] == Token(TokenKind.NUMBER, 21.0)


def test_constants():
    assert tokenize('π') == [Token(TokenKind.NUMBER, math.pi)]
    assert tokenize('e') == [Token(TokenKind.NUMBER, math.e)]
    assert tokenize('2π') == [Token(TokenKind.NUMBER, 2.0),
                              Token(TokenKind.NUMBER, math.pi)]


def test_e_does_not_swallow_exp():
    assert tokenize('exp(1)')[0] == Token(TokenKind.FUNCTION, 'exp')
    assert tokenize('e*e') == [Token(TokenKind.NUMBER, math.e),
                               Token(TokenKind.TIMES),
                               Token(TokenKind.NUMBER, math.e)]


def test_memory_variables():
    memory = {Variable.A: 3.0, Variable.M: 5.0}
    assert tokenize('A', memory=memory) == [Token(TokenKind.NUMBER, 3.0)]
    # m is an alias of M; unset variables are 0.
    assert tokenize('m+B', memory=memory) == [Token(TokenKind.NUMBER, 5.0),
                                              Token(TokenKind.PLUS),
                                              Token(TokenKind.NUMBER, 0.0)]


def test_variable_must_stand_alone():
    with raises(CalcSyntaxError, match="Unknown character: 'A'"):
        tokenize('AB')
    # Lowercase spellings other than m aren't variables.
    with raises(CalcSyntaxError, match="Unknown character: 'x'"):
        tokenize('x')


def test_longest_function_name_wins():
    for name in ('asinh', 'asin', 'sinh', 'sin', 'log₂', 'log', 'acosh',
                 'atanh', 'nCr', 'nPr', 'Rec', 'Pol'):
        assert tokenize(name + '(1)')[0] == Token(TokenKind.FUNCTION, name)


def test_function_names_are_case_sensitive():
    with raises(CalcSyntaxError):
        tokenize('SIN(1)')


def test_lex_yields_spaces_but_tokenize_drops_them():
    lexer = Lexer()
    matches = list(lexer.lex('1 + 2'))
    assert [m.group(0) for m in matches] == ['1', ' ', '+', ' ', '2']
    assert [lexer.isfeedable(m) for m in matches] == [True, False, True,
                                                      False, True]
