from enum import Enum
import math


class AngleMode(Enum):
    '''
    Unit that trigonometric arguments and inverse results are expressed in.
    '''
    DEGREES = 'D'
    RADIANS = 'R'
    GRADIANS = 'G'

    @property
    def label(self):
        return self.value

    def to_radians(self, v):
        if self is AngleMode.DEGREES:
            return v * math.pi / 180.0
        elif self is AngleMode.GRADIANS:
            return v * math.pi / 200.0
        return v

    def from_radians(self, v):
        if self is AngleMode.DEGREES:
            return v * 180.0 / math.pi
        elif self is AngleMode.GRADIANS:
            return v * 200.0 / math.pi
        return v

    def next(self):
        '''
        Mode following this one: degrees, radians, gradians, degrees...
        '''
        modes = list(type(self))
        return modes[(modes.index(self) + 1) % len(modes)]

    @classmethod
    def parse(cls, name):
        '''
        Look up a mode by label or by a prefix of its name (deg, rad, gra).
        '''
        for mode in cls:
            if name == mode.label or \
               len(name) >= 3 and mode.name.lower().startswith(name.lower()):
                return mode
        raise ValueError('No such angle mode {}'.format(repr(name)))


def to_radians(mode, v):
    return mode.to_radians(v)


def from_radians(mode, v):
    return mode.from_radians(v)
