from functools import wraps


class CalcError(Exception):
    '''
    Base of every recoverable calculator failure.

    args[0] holds the detailed message; display holds what a calculator
    screen would show.
    '''
    DISPLAY = 'ERROR'

    @property
    def display(self):
        return type(self).DISPLAY

    def __str__(self):
        if self.args:
            return '{}: {}'.format(self.display, self.args[0])
        return self.display


class CalcSyntaxError(CalcError):
    '''
    Malformed input: bad number, unknown character, unexpected token.
    '''
    DISPLAY = 'Syntax ERROR'

    def __init__(self, message, text=None, index=None):
        super().__init__(message)
        self.text = text
        self.index = index


class EvalError(CalcError):
    pass


class MathError(EvalError):
    DISPLAY = 'Math ERROR'


class DivideByZero(EvalError):
    DISPLAY = 'Math ERROR (div/0)'


class Overflow(EvalError):
    DISPLAY = 'Math ERROR (overflow)'


class UnknownFunction(EvalError):
    DISPLAY = 'Syntax ERROR'


class StackError(EvalError):
    '''
    Brackets nested deeper than the interpreter can recurse.
    '''
    DISPLAY = 'Stack ERROR'


def wrap_user_errors(fmt, error=CalcError):
    '''
    Ugly hack decorator that converts library exceptions to calculator ones.

    Passes through CalcErrors. OverflowError always becomes Overflow;
    anything else becomes error. fmt is formatted with the call arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except OverflowError as e:
                raise Overflow(fmt.format(*args, **kwargs)) from e
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
