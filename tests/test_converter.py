'''
Shunting-yard converter tests
'''

import regex

from infixcalc.catalog import CATALOG
from infixcalc.lexer import Kind, Token
from infixcalc.util import ParseError

from pytest import mark, raises


@mark.parametrize('expression, expected', [
    ('42', ['42']),
    ('42 =', ['42']),
    ('2 + 3 * 4', ['2', '3', '4', '*', '+']),
    ('(2 + 3) * 4', ['2', '3', '+', '4', '*']),
    ('10 - 4 - 3', ['10', '4', '-', '3', '-']),
    ('2 ^ 3 ^ 2', ['2', '3', '2', '^', '^']),
    ('8 / 4 % 3', ['8', '4', '/', '3', '%']),
])
def test_binary_precedence_and_associativity(rpn, expression, expected):
    assert rpn(expression) == expected


@mark.parametrize('expression, expected', [
    ('-2', ['2', 'neg']),
    ('-2 ^ 2', ['2', '2', '^', 'neg']),
    ('3 - -2', ['3', '2', 'neg', '-']),
    ('(-2)', ['2', 'neg']),
    ('2 * -3', ['2', '3', 'neg', '*']),
    ('--2', ['2', 'neg', 'neg']),
    ('(1) - 2', ['1', '2', '-']),
])
def test_unary_minus(rpn, expression, expected):
    assert rpn(expression) == expected


def test_minus_after_postfix_is_unary(rpn):
    assert rpn('5! - 3') == ['5', '!', '3', 'neg']
    assert rpn('(5!) - 3') == ['5', '!', '3', '-']


def test_minus_after_terminator_is_unary(converter):
    tokens = [Token(Kind.TERMINATOR, '='),
              Token(Kind.OPERATOR, '-'),
              Token(Kind.NUMBER, '1')]
    assert [t.text for t in converter.convert(tokens)] == ['1', 'neg']


@mark.parametrize('expression, expected', [
    ('sin(30)', ['30', 'sin']),
    ('sqrt(9) + 1', ['9', 'sqrt', '1', '+']),
    ('sqrt 9 + 1', ['9', 'sqrt', '1', '+']),
    ('sqrt(sqrt(16))', ['16', 'sqrt', 'sqrt']),
    ('2 * sin(30 + 60)', ['2', '30', '60', '+', 'sin', '*']),
])
def test_prefix_functions(rpn, expression, expected):
    assert rpn(expression) == expected


@mark.parametrize('expression, expected', [
    ('5!', ['5', '!']),
    ('2 + 3!', ['2', '3', '!', '+']),
    ('3!!', ['3', '!', '!']),
    ('2 ^ 3!', ['2', '3', '!', '^']),
    ('(1 + 2)!', ['1', '2', '+', '!']),
])
def test_postfix_factorial(rpn, expression, expected):
    assert rpn(expression) == expected


def test_output_has_no_parens_or_terminators(calculator):
    kinds = {t.kind for t in calculator.rpn('((1 + 2) * (3)) =')}
    assert kinds <= {Kind.NUMBER, Kind.OPERATOR}


def test_unknown_operator(rpn):
    with raises(ParseError, match=regex.escape("unknown operator 'foo'")) \
            as info:
        rpn('foo(2)')
    assert info.value.symbol == 'foo'


def test_abs_is_not_an_operator(rpn):
    with raises(ParseError, match=regex.escape("unknown operator 'abs'")):
        rpn('abs(-3)')


@mark.parametrize('expression', ['(2 + 3', '2 + 3)', ')(', '((1)'])
def test_mismatched_parentheses(rpn, expression):
    with raises(ParseError, match='mismatched parentheses'):
        rpn(expression)


def test_unexpected_token(converter):
    with raises(ParseError, match='unexpected token'):
        converter.convert([Token(None, '?')])


def test_converter_keeps_no_state(converter, lexer):
    with raises(ParseError):
        converter.convert(lexer.tokenize('(1 +'))
    assert [t.text for t in converter.convert(lexer.tokenize('1 + 2'))] == \
        ['1', '2', '+']


def test_catalog_table():
    assert CATALOG['!'].postfix and CATALOG['!'].precedence == 6
    assert CATALOG['^'].right_associative and CATALOG['^'].precedence == 5
    for symbol in 'neg', 'sqrt', 'sin', 'cos', 'tan', 'ln', 'log', 'exp':
        assert CATALOG[symbol].prefix
        assert CATALOG[symbol].right_associative
        assert CATALOG[symbol].precedence == 4
    for symbol in '*/%':
        assert CATALOG[symbol].precedence == 3
        assert not CATALOG[symbol].right_associative
    for symbol in '+-':
        assert CATALOG[symbol].precedence == 2
        assert not CATALOG[symbol].right_associative


def test_catalog_is_read_only():
    with raises(TypeError):
        CATALOG['?'] = CATALOG['+']
