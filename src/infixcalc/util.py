from functools import wraps


class CalcError(Exception):
    '''
    Base of everything that can go wrong with a user's expression.

    The first argument is always the message shown to the user.
    '''
    pass


class LexError(CalcError):
    def __init__(self, character, position):
        super().__init__("unexpected character {!r} at position {}"
                         .format(character, position))
        self.character = character
        self.position = position


class ParseError(CalcError):
    def __init__(self, message, symbol=None):
        super().__init__(message)
        self.symbol = symbol


class ArityError(CalcError):
    def __init__(self, symbol, expected, got, exact=True):
        super().__init__("'{}' expects {}{} argument(s), got {}"
                         .format(symbol,
                                 '' if exact else 'at least ',
                                 expected, got))
        self.symbol = symbol
        self.expected = expected
        self.got = got


class DomainError(CalcError):
    def __init__(self, message, symbol=None):
        super().__init__(message)
        self.symbol = symbol


class EvalError(CalcError):
    def __init__(self, message, symbol=None):
        super().__init__(message)
        self.symbol = symbol


def wrap_math_errors(symbol):
    '''
    Decorator that turns the math library's complaints into DomainErrors.

    Passes through CalcErrors, so explicit domain checks keep their message.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except (ValueError, ArithmeticError) as e:
                raise DomainError('{} domain error ({})'.format(symbol, e),
                                  symbol) from e
        return wrapper
    return decorator
