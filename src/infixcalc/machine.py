from collections import deque
import logging

from .lexer import Kind
from .operations import BUILTINS
from .util import EvalError


logger = logging.getLogger(__name__)


class Machine:
    '''
    Arithmetic stack machine.

    Takes RPN tokens, as the converter produces them, and runs them against
    a registry of operations. Every evaluation gets a fresh stack, so a
    failed one leaves nothing behind for the next.
    '''

    def __init__(self, registry=None):
        '''
        Create machine.

        :param registry: Operations to look operator tokens up in. The
                         builtins by default.
        '''
        self.registry = BUILTINS if registry is None else registry

    def evaluate(self, rpn):
        '''
        Run RPN tokens and return the one number they leave on the stack.
        '''
        stack = deque()
        for token in rpn:
            if token.kind is Kind.NUMBER:
                self._pshstack(stack, self._iconvert(token.text))
            elif token.kind is Kind.OPERATOR:
                self._apply(stack, token.text)
            else:
                raise EvalError('unexpected token {!r}'.format(token.text),
                                token.text)
        if len(stack) != 1:
            raise EvalError('invalid expression')
        result = stack.pop()
        logger.debug('result: %r', result)
        return result

    def _iconvert(self, number):
        '''
        Convert number literal to the internal representation.
        '''
        try:
            return float(number)
        except ValueError:
            raise EvalError('invalid number {!r}'.format(number), number) \
                from None

    def _apply(self, stack, symbol):
        '''
        Pop operator's operands, run it, and push the result.
        '''
        operation = self.registry.lookup(symbol)
        if operation is None:
            raise EvalError('unknown operator {!r}'.format(symbol), symbol)
        # If you don't reverse, you'll do 2**9 when you say 9 2 ^ instead of
        # 9**2.
        args = reversed(self._popstack(stack, symbol, operation.arity))
        self._pshstack(stack, operation.apply(*args))

    def _pshstack(self, stack, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        stack.extend(new)

    def _popstack(self, stack, symbol, n=1):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        if len(stack) < n:
            raise EvalError('missing operand(s) for {!r}: need {}, have {}'
                            .format(symbol, n, len(stack)), symbol)
        return [stack.pop() for _ in range(n)]
