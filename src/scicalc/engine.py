from collections import deque
import math

from .angle import AngleMode
from .formatting import DisplayFormat, format_result
from .lexer import Lexer
from .memory import Variable
from .parser import parse_expression
from .util import MathError, Overflow


class Engine:
    '''
    One calculator session: modes, Ans, memory, M+ total and history.

    Expressions go through the lexer and parser against this state. A
    successful evaluation updates Ans and history; a failed one leaves every
    register untouched.
    '''

    DEFAULT_ANGLE = AngleMode.DEGREES
    DEFAULT_FORMAT = DisplayFormat.NORMAL
    HISTORY_LIMIT = 50

    def __init__(self, angle=None, format=None):
        '''
        Create a fresh session.

        :param angle: AngleMode, DEFAULT_ANGLE if not given.
        :param format: DisplayFormat, DEFAULT_FORMAT if not given.
        '''
        self.initial_angle = angle or type(self).DEFAULT_ANGLE
        self.initial_format = format or type(self).DEFAULT_FORMAT
        self.lexer = Lexer()
        self.reset()

    def reset(self):
        '''
        Back to the state the session was created in (the ON key).
        '''
        self.angle = self.initial_angle
        self.format = self.initial_format
        self.ans = 0.0
        self.memory = {variable: 0.0
                       for variable
                       in Variable}
        self.accumulator = 0.0
        self._history = deque(maxlen=type(self).HISTORY_LIMIT)

    @property
    def history(self):
        '''
        (input, result) pairs of successful evaluations, oldest first.
        '''
        return list(self._history)

    def evaluate(self, text):
        '''
        Evaluate text, record it, and return the result.

        Raises a CalcError subclass, with no state changed, on failure.
        '''
        tokens = self.lexer.tokenize(text, self.ans, dict(self.memory))
        result = parse_expression(tokens, self.angle)
        if math.isnan(result):
            raise MathError('{} is not a number'.format(text))
        elif math.isinf(result):
            raise Overflow('{} is out of range'.format(text))
        self.ans = result
        self._history.append((text, result))
        return result

    def format_result(self, value):
        '''
        Render value in the session's display format.
        '''
        return format_result(value, self.format)

    def store(self, variable, value):
        '''
        Store value into memory variable (a Variable or its spelling).
        '''
        self.memory[Variable.lookup(variable)] = float(value)

    def recall(self, variable):
        '''
        Value of memory variable; 0 if never stored.
        '''
        return self.memory.get(Variable.lookup(variable), 0.0)

    def accumulate(self, value):
        '''
        M+: add value to the running total.
        '''
        self.accumulator += value

    def deaccumulate(self, value):
        '''
        M-: subtract value from the running total.
        '''
        self.accumulator -= value

    def recall_accumulator(self):
        return self.accumulator

    def clear_accumulator(self):
        self.accumulator = 0.0

    def cycle_angle(self):
        '''
        Step to the next angle mode and return it.
        '''
        self.angle = self.angle.next()
        return self.angle
