from pytest import fixture

from infixcalc.calculator import Calculator
from infixcalc.converter import Converter
from infixcalc.lexer import Lexer
from infixcalc.machine import Machine


@fixture
def lexer() -> Lexer:
    return Lexer()


@fixture
def converter() -> Converter:
    return Converter()


@fixture
def machine() -> Machine:
    return Machine()


@fixture
def calculator() -> Calculator:
    return Calculator()


@fixture
def rpn(calculator):
    '''
    Expression to the texts of its RPN tokens, for terse assertions.
    '''
    def convert(expression: str) -> list:
        return [token.text for token in calculator.rpn(expression)]
    return convert
