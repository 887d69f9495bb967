'''
Operator catalog: how operators bind, as far as the converter cares.

Evaluation knows nothing of this table; see operations for that.
'''

from collections import namedtuple
from types import MappingProxyType


Descriptor = namedtuple('Descriptor',
                        'symbol precedence right_associative prefix postfix')


# Unary minus, once the converter has told it apart from subtraction.
NEGATE = 'neg'

# Prefix functions. All bind alike.
FUNCTIONS = NEGATE, 'sqrt', 'sin', 'cos', 'tan', 'ln', 'log', 'exp'


def _descriptors():
    yield Descriptor('!', 6, False, False, True)
    yield Descriptor('^', 5, True, False, False)
    for symbol in FUNCTIONS:
        yield Descriptor(symbol, 4, True, True, False)
    for symbol in '*', '/', '%':
        yield Descriptor(symbol, 3, False, False, False)
    for symbol in '+', '-':
        yield Descriptor(symbol, 2, False, False, False)


CATALOG = MappingProxyType({descriptor.symbol: descriptor
                            for descriptor
                            in _descriptors()})


def describe(symbol):
    '''
    Return the Descriptor for symbol, or None if it isn't an operator.
    '''
    return CATALOG.get(symbol)
