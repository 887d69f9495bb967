'''
Lexer tests
'''

import regex

from infixcalc.lexer import Kind, Token
from infixcalc.util import LexError

from pytest import mark, raises


def test_numbers(lexer):
    tokens = lexer.tokenize('12 1.5 .5 5.')
    assert tokens == [Token(Kind.NUMBER, '12'),
                      Token(Kind.NUMBER, '1.5'),
                      Token(Kind.NUMBER, '.5'),
                      Token(Kind.NUMBER, '5.')]


def test_second_decimal_point_starts_new_number(lexer):
    assert [t.text for t in lexer.tokenize('1.2.3')] == ['1.2', '.3']


def test_no_sign_in_numbers(lexer):
    assert lexer.tokenize('-3') == [Token(Kind.OPERATOR, '-'),
                                    Token(Kind.NUMBER, '3')]


def test_names_are_lowercased(lexer):
    assert lexer.tokenize('SQRT Sin') == [Token(Kind.OPERATOR, 'sqrt'),
                                          Token(Kind.OPERATOR, 'sin')]


def test_name_stops_at_digit(lexer):
    assert lexer.tokenize('log10') == [Token(Kind.OPERATOR, 'log'),
                                       Token(Kind.NUMBER, '10')]


@mark.parametrize('symbol', list('+-*/%^!'))
def test_single_character_operators(lexer, symbol):
    assert lexer.tokenize(symbol) == [Token(Kind.OPERATOR, symbol)]


def test_adjacent_operators_are_separate(lexer):
    assert [t.text for t in lexer.tokenize('5!!')] == ['5', '!', '!']


def test_parens_and_terminator(lexer):
    kinds = [t.kind for t in lexer.tokenize('(1) =')]
    assert kinds == [Kind.LPAREN, Kind.NUMBER, Kind.RPAREN, Kind.TERMINATOR]


def test_whitespace_skipped(lexer):
    assert lexer.tokenize(' \t2\n+ 3 ') == lexer.tokenize('2+3')


def test_empty(lexer):
    assert lexer.tokenize('') == []
    assert lexer.tokenize('   ') == []


def test_bad_character(lexer):
    with raises(LexError, match=regex.escape("'$' at position 4")) as info:
        lexer.tokenize('2 + $3')
    assert info.value.character == '$'
    assert info.value.position == 4


def test_bad_character_stops_lexing(lexer):
    tokens = lexer.lex('1 2 # 3')
    assert next(tokens) == Token(Kind.NUMBER, '1')
    assert next(tokens) == Token(Kind.NUMBER, '2')
    with raises(LexError):
        next(tokens)
