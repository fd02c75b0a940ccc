from .angle import AngleMode
from .functions import (apply_binary, apply_unary, factorial, is_binary,
                        percent, power)
from .lexer import TokenKind
from .util import CalcSyntaxError, DivideByZero, StackError


class Parser:
    '''
    Recursive descent parser that evaluates as it parses; there is no tree.

    Grammar, loosest first:

        expression → term (('+' | '-') term)*
        term       → power (('*' | '/') power)*
        power      → postfix ('^' power)?
        postfix    → unary ('!' | '%')*
        unary      → ('+' | '-')? primary
        primary    → NUMBER | '(' expression ')'? | FUNCTION call

    Unary signs wrap a primary only, so -2^2 is (-2)^2. Closing brackets
    and commas are consumed if present, never demanded, since the input is
    often half typed. Tokens left over after the expression are ignored.
    '''

    def __init__(self, tokens, angle=AngleMode.DEGREES):
        self.tokens = list(tokens)
        self.pos = 0
        self.angle = angle

    def peek(self):
        '''
        Return the next token's kind without consuming it, None at the end.
        '''
        if self.pos < len(self.tokens):
            return self.tokens[self.pos].kind
        return None

    def next(self):
        '''
        Consume and return the next token, None at the end.
        '''
        if self.pos < len(self.tokens):
            self.pos += 1
            return self.tokens[self.pos - 1]
        return None

    def skip(self, kind):
        '''
        Consume the next token if it is of this kind.
        '''
        if self.peek() is kind:
            self.next()
            return True
        return False

    def parse_expression(self):
        left = self.parse_term()
        while True:
            if self.skip(TokenKind.PLUS):
                left += self.parse_term()
            elif self.skip(TokenKind.MINUS):
                left -= self.parse_term()
            else:
                return left

    def parse_term(self):
        left = self.parse_power()
        while True:
            if self.skip(TokenKind.TIMES):
                left *= self.parse_power()
            elif self.skip(TokenKind.DIVIDE):
                right = self.parse_power()
                if right == 0.0:
                    raise DivideByZero('{} / 0'.format(left))
                left /= right
            else:
                return left

    def parse_power(self):
        base = self.parse_postfix()
        if self.skip(TokenKind.POWER):
            # Right associative: 2^3^2 is 2^9. The exponent may carry its
            # own sign, 2^-1.
            return power(base, self.parse_power())
        return base

    def parse_postfix(self):
        value = self.parse_unary()
        while True:
            if self.skip(TokenKind.FACTORIAL):
                value = factorial(value)
            elif self.skip(TokenKind.PERCENT):
                value = percent(value)
            else:
                return value

    def parse_unary(self):
        if self.skip(TokenKind.MINUS):
            return -self.parse_primary()
        self.skip(TokenKind.PLUS)
        return self.parse_primary()

    def parse_primary(self):
        token = self.next()
        if token is None:
            raise CalcSyntaxError('Unexpected end of expression',
                                  index=self.pos)
        elif token.kind is TokenKind.NUMBER:
            return token.value
        elif token.kind is TokenKind.LPAREN:
            value = self.parse_expression()
            self.skip(TokenKind.RPAREN)
            return value
        elif token.kind is TokenKind.FUNCTION:
            return self.parse_call(token.value)
        raise CalcSyntaxError('Unexpected token: {}'.format(token),
                              index=self.pos - 1)

    def parse_call(self, name):
        '''
        Parse a function's arguments, the name already consumed, and apply.
        '''
        self.skip(TokenKind.LPAREN)
        arg = self.parse_expression()
        if is_binary(name):
            self.skip(TokenKind.COMMA)
            arg2 = self.parse_expression()
            self.skip(TokenKind.RPAREN)
            return apply_binary(name, arg, arg2)
        self.skip(TokenKind.RPAREN)
        return apply_unary(name, arg, self.angle)


def parse_expression(tokens, angle=AngleMode.DEGREES):
    '''
    Evaluate a token sequence to a float.

    The result may be NaN or infinite; checking that is the caller's job.
    '''
    try:
        return Parser(tokens, angle).parse_expression()
    except RecursionError:
        raise StackError('Expression nested too deeply') from None
