from collections import deque
import logging

from .catalog import NEGATE, describe
from .lexer import Kind, Token
from .util import ParseError


logger = logging.getLogger(__name__)


class Converter:
    '''
    Infix to postfix (RPN) converter; Dijkstra's shunting-yard, generalized
    to prefix functions, a postfix operator, and unary minus.

    Holds no state between calls to convert.
    '''

    def _isoperand(self, token):
        '''
        Return true if token ends an operand, so a following - subtracts.

        Only numbers and closing parentheses do; after anything else,
        including a postfix !, a - is unary.
        '''
        return token is not None and \
            token.kind in {Kind.NUMBER, Kind.RPAREN}

    def convert(self, tokens):
        '''
        Take infix tokens and return them as a list in RPN order.

        Parentheses and terminators never make it to the output.
        '''
        output = []
        stack = deque()
        previous = None

        for token in tokens:
            if token.kind is Kind.NUMBER:
                output.append(token)
            elif token.kind is Kind.OPERATOR:
                token = self._push_operator(token, previous, stack, output)
            elif token.kind is Kind.LPAREN:
                stack.append(token)
            elif token.kind is Kind.RPAREN:
                self._close_paren(stack, output)
            elif token.kind is Kind.TERMINATOR:
                pass
            else:
                raise ParseError('unexpected token {!r}'.format(token.text),
                                 token.text)
            previous = token

        while stack:
            token = stack.pop()
            if token.kind is Kind.LPAREN:
                raise ParseError('mismatched parentheses', '(')
            output.append(token)

        logger.debug('rpn: %s', [t.text for t in output])
        return output

    def _push_operator(self, token, previous, stack, output):
        '''
        Pop whatever binds tighter than the operator, then stack it.

        Returns the operator's token, rewritten if it was a unary minus.
        '''
        if token.text == '-' and not self._isoperand(previous):
            token = Token(Kind.OPERATOR, NEGATE)
        descriptor = describe(token.text)
        if descriptor is None:
            raise ParseError('unknown operator {!r}'.format(token.text),
                             token.text)
        while stack and stack[-1].kind is Kind.OPERATOR:
            top = describe(stack[-1].text)
            if top.precedence > descriptor.precedence or \
               top.precedence == descriptor.precedence and \
               not descriptor.right_associative:
                output.append(stack.pop())
            else:
                break
        stack.append(token)
        return token

    def _close_paren(self, stack, output):
        while stack and stack[-1].kind is not Kind.LPAREN:
            output.append(stack.pop())
        if not stack:
            raise ParseError('mismatched parentheses', ')')
        stack.pop()
        # sin(...) applies as soon as its parenthesized argument is done.
        if stack and stack[-1].kind is Kind.OPERATOR and \
           describe(stack[-1].text).prefix:
            output.append(stack.pop())
