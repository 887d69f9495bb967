'''
Operations the machine can run, keyed by symbol.

Each operation checks its own argument count, and fails on a violation of
its mathematical domain where it has one. Elsewhere results are IEEE
doubles, as with the arithmetic operators: overflow gives infinity, an
undefined power gives NaN.
'''

from functools import reduce
import math
import operator

from .catalog import NEGATE
from .util import ArityError, DomainError, wrap_math_errors


# Factorials above this don't fit in a double.
MAX_FACTORIAL = 170
# How far from a whole number a factorial's argument may stray.
INTEGER_TOLERANCE = 1e-9


class Operation:
    '''
    A named function of a fixed number of numbers.

    Variadic operations accept arity or more arguments; the machine only
    ever gives them arity.
    '''

    def __init__(self, symbol, arity, function, variadic=False):
        self.symbol = symbol
        self.arity = arity
        self.function = function
        self.variadic = variadic

    def apply(self, *args):
        '''
        Check argument count, then compute.
        '''
        if len(args) < self.arity or \
           not self.variadic and len(args) != self.arity:
            raise ArityError(self.symbol, self.arity, len(args),
                             exact=not self.variadic)
        return self.function(*args)

    __call__ = apply

    def __repr__(self):
        return '{}({!r}, {})'.format(type(self).__name__,
                                     self.symbol, self.arity)


class Registry:
    '''
    Symbol to Operation lookup table.

    Registering a symbol twice replaces the first. Once frozen, the table is
    read-only and safe to share.
    '''

    def __init__(self):
        self._operations = dict()
        self._frozen = False

    def register(self, operation):
        if self._frozen:
            raise RuntimeError('Registry is frozen')
        self._operations[operation.symbol] = operation
        return self

    def lookup(self, symbol):
        '''
        Return the Operation for symbol, or None.
        '''
        return self._operations.get(symbol)

    def freeze(self):
        self._frozen = True
        return self

    @property
    def frozen(self):
        return self._frozen

    def __contains__(self, symbol):
        return symbol in self._operations

    def __iter__(self):
        return iter(self._operations.values())

    def __len__(self):
        return len(self._operations)

    @classmethod
    def default(cls):
        '''
        Create a (not yet frozen) registry holding every builtin operation.
        '''
        registry = cls()
        for operation in _builtins():
            registry.register(operation)
        return registry


def _add(*args):
    return sum(args, 0.0)


def _subtract(*args):
    return reduce(operator.__sub__, args)


def _multiply(*args):
    return reduce(operator.__mul__, args, 1.0)


def _divide(*args):
    if any(divisor == 0 for divisor in args[1:]):
        raise DomainError('divide by zero', '/')
    return reduce(operator.__truediv__, args)


def _modulo(left, right):
    if right == 0:
        raise DomainError('modulo by zero', '%')
    # Sign of the dividend, like C's fmod, not Python's %.
    return math.fmod(left, right)


def _isodd(n):
    return math.isfinite(n) and n % 2 == 1


def _power(base, exponent):
    '''
    IEEE pow: overflow is infinite, a negative base to a fraction is NaN.
    '''
    try:
        return math.pow(base, exponent)
    except OverflowError:
        sign = -1.0 if base < 0 and _isodd(exponent) else 1.0
        return math.copysign(math.inf, sign)
    except ValueError:
        # 0 to a negative power
        if base == 0:
            if _isodd(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def _sqrt(x):
    if x < 0:
        raise DomainError('sqrt domain error (x must be >= 0)', 'sqrt')
    return math.sqrt(x)


@wrap_math_errors('!')
def _factorial(x):
    n = round(x)
    if abs(x - n) > INTEGER_TOLERANCE:
        raise DomainError('factorial domain error (n must be an integer)',
                          '!')
    if n < 0:
        raise DomainError('factorial domain error (n must be >= 0)', '!')
    if n > MAX_FACTORIAL:
        raise DomainError('factorial overflow (n must be <= {})'
                          .format(MAX_FACTORIAL), '!')
    return float(math.factorial(n))


def _degrees(f):
    '''
    Make a radian trigonometric function take degrees.
    '''
    def wrapped(x):
        try:
            return f(math.radians(x))
        except ValueError:
            # Infinite angle.
            return math.nan
    return wrapped


def _ln(x):
    if x <= 0:
        raise DomainError('ln domain error (x must be > 0)', 'ln')
    return math.log(x)


def _log10(x):
    if x <= 0:
        raise DomainError('log domain error (x must be > 0)', 'log')
    return math.log10(x)


def _exp(x):
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _builtins():
    yield Operation('+', 2, _add, variadic=True)
    yield Operation('-', 2, _subtract, variadic=True)
    yield Operation('*', 2, _multiply, variadic=True)
    yield Operation('/', 2, _divide, variadic=True)
    yield Operation('%', 2, _modulo)
    yield Operation('^', 2, _power)
    yield Operation(NEGATE, 1, operator.__neg__)
    yield Operation('sqrt', 1, _sqrt)
    yield Operation('abs', 1, abs)
    yield Operation('!', 1, _factorial)
    yield Operation('sin', 1, _degrees(math.sin))
    yield Operation('cos', 1, _degrees(math.cos))
    yield Operation('tan', 1, _degrees(math.tan))
    yield Operation('ln', 1, _ln)
    yield Operation('log', 1, _log10)
    yield Operation('exp', 1, _exp)


# Shared, read-only.
BUILTINS = Registry.default().freeze()
