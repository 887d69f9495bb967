from .converter import Converter
from .lexer import Lexer
from .machine import Machine


class Calculator:
    '''
    The whole pipeline for one expression: lex, convert to RPN, evaluate.

    Keeps nothing between expressions, so one instance can serve any number
    of them, in any order.
    '''

    def __init__(self, registry=None):
        self.lexer = Lexer()
        self.converter = Converter()
        self.machine = Machine(registry)

    def tokenize(self, expression):
        return self.lexer.tokenize(expression)

    def rpn(self, expression):
        '''
        Return expression's tokens in RPN order.
        '''
        return self.converter.convert(self.tokenize(expression))

    def calculate(self, expression):
        '''
        Return expression's value as a float.

        Raises a CalcError subclass for whichever stage rejects it.
        '''
        return self.machine.evaluate(self.rpn(expression))


_calculator = Calculator()


def calculate(expression):
    '''
    Evaluate expression with the builtin operations.
    '''
    return _calculator.calculate(expression)
