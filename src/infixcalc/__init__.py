'''
Infix scientific calculator.

Reads arithmetic the way it's written on paper, 2 + 3 * 4 =, converts it to
RPN with a shunting-yard that also knows about prefix functions (sin, sqrt,
...), a postfix factorial, and unary minus, then runs the RPN on a stack
machine. Angles are in degrees.

Not intended to be a programming language! No variables, no statements, no
complex numbers.
'''

from .calculator import Calculator, calculate
from .cli import CLI
from .converter import Converter
from .lexer import Kind, Lexer, Token
from .machine import Machine
from .operations import BUILTINS, Operation, Registry
from .util import (CalcError, LexError, ParseError, ArityError, DomainError,
                   EvalError)


__all__ = ('Calculator', 'calculate', 'CLI', 'Converter', 'Kind', 'Lexer',
           'Token', 'Machine', 'BUILTINS', 'Operation', 'Registry',
           'CalcError', 'LexError', 'ParseError', 'ArityError',
           'DomainError', 'EvalError')
