from enum import Enum

from .util import wrap_user_errors


# Lowercase spellings accepted on input.
ALIASES = {
    'm': 'M',
}


class Variable(Enum):
    '''
    Memory cells a calculator can store into and recall from.
    '''
    A = 'A'
    B = 'B'
    C = 'C'
    D = 'D'
    E = 'E'
    F = 'F'
    X = 'X'
    Y = 'Y'
    M = 'M'

    @classmethod
    @wrap_user_errors('No such variable {1!r}')
    def lookup(cls, name):
        '''
        Return the variable spelled name, which may already be a Variable.
        '''
        if isinstance(name, cls):
            return name
        return cls(ALIASES.get(name, name))

    @classmethod
    def spellings(cls):
        '''
        Every spelling the lexer accepts, canonical ones first.
        '''
        return [variable.value
                for variable
                in cls] + list(ALIASES)
