from collections import namedtuple
from enum import Enum
from functools import reduce
import logging
import operator

import regex

from .util import LexError


logger = logging.getLogger(__name__)


class Kind(Enum):
    NUMBER = 'number'
    OPERATOR = 'operator'
    LPAREN = 'lparen'
    RPAREN = 'rparen'
    TERMINATOR = 'terminator'


Token = namedtuple('Token', 'kind text')
Token.__doc__ = '''
Lexeme of an infix expression: its kind, and its literal text.

Function names are already lowercased.
'''


class Lexer:
    '''
    Lexer for the infix calculator's *regular* grammar.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Number, no sign. Signs are unary operators, resolved by the converter.
    NUMBER = r'''
              (?:
                  # 1, 12, 1. (notice trailing dot), 1.3
                  \d+
                  (?:
                      \.
                      \d*
                  )?
              )|(?:
                  # .2, and the lone . that the machine will refuse
                  \.
                  \d*
              )
              '''
    # Function names: sin, sqrt, ...
    NAME = r'\p{L}+'
    OPERATOR = r'[+\-*/%^!]'
    LPAREN = r'\('
    RPAREN = r'\)'
    TERMINATOR = r'='
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<name>' + NAME + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<lparen>' + LPAREN + r')|' \
             r'(?<rparen>' + RPAREN + r')|' \
             r'(?<terminator>' + TERMINATOR + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)
    PATTERN = regex.compile(LEXEME, flags=FLAGS)

    KINDS = {
        'number': Kind.NUMBER,
        'name': Kind.OPERATOR,
        'operator': Kind.OPERATOR,
        'lparen': Kind.LPAREN,
        'rparen': Kind.RPAREN,
        'terminator': Kind.TERMINATOR,
    }

    def lex(self, line):
        '''
        Take a line and yield its tokens, skipping whitespace.

        Raises LexError on the first character that starts no lexeme.
        '''
        position = 0
        while position < len(line):
            match = type(self).PATTERN.match(line, position)
            if match is None:
                raise LexError(line[position], position)
            group = match.lastgroup
            if group != 'space':
                text = match.group(0)
                if group == 'name':
                    text = text.lower()
                yield Token(type(self).KINDS[group], text)
            position = match.end()

    def tokenize(self, line):
        '''
        Take a line and return all of its tokens at once.
        '''
        tokens = list(self.lex(line))
        logger.debug('tokens of %r: %s', line, [t.text for t in tokens])
        return tokens
