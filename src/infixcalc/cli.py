from os import path
from argparse import ArgumentParser, ArgumentTypeError, REMAINDER, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .buffer import InputBuffer
from .calculator import Calculator
from .catalog import CATALOG
from .lexer import Lexer
from .util import CalcError


logger = logging.getLogger(__name__)


def format_result(value, precision=15):
    '''
    Format result for display, to precision significant digits.

    Rounding to fewer digits than a double holds hides noise like
    sin(30) = 0.49999999999999994.
    '''
    return '{:.{}G}'.format(value, precision)


def _precision(text):
    try:
        precision = int(text)
    except ValueError:
        raise ArgumentTypeError('not an integer: {!r}'.format(text)) \
            from None
    if not 0 < precision <= 17:
        raise ArgumentTypeError('precision must be within 1 and 17')
    return precision


class InteractiveInput:
    '''
    Lines read from a prompt_toolkit prompt, until end of file.
    '''

    def __init__(self, message, continuation='', history_file=None,
                 vi_mode=False):
        '''
        :param message: Prompt; text, or callable returning text.
        :param history_file: Where to persist history, if anywhere.
        '''
        self.message = message
        self.continuation = continuation
        self.history_file = history_file
        self.vi_mode = vi_mode

    def __iter__(self):
        history = None
        if self.history_file is not None:
            history = FileHistory(path.expanduser(self.history_file))
        try:
            session = PromptSession(message=self.message,
                                    vi_mode=self.vi_mode,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=history,
                                    prompt_continuation=self.continuation,
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the infix calculator.
    '''

    DEFAULT_PROMPT = 'calc> '
    CONTINUATION_PROMPT = '... '
    DEFAULT_PRECISION = 15
    HISTORY_FILE = '~/.infixcalc_history'
    EXIT_COMMAND = 'exit'
    BANNER = "CLI Scientific Calculator (DEG mode). " \
             "Enter expression and end with '='. " \
             "Type 'exit' to quit."

    def _expressions(self):
        '''
        Yield each complete expression from the input lines.

        Stops early on the exit command. Complains about an unterminated
        leftover.
        '''
        for line in self.args.expressions:
            if line.strip().lower() == self.EXIT_COMMAND:
                self.buffer.clear()
                return
            ready, expression = self.buffer.accept(line)
            if ready:
                yield expression
        if self.buffer.pending.strip():
            self._error("unterminated expression {!r} (missing '{}')"
                        .format(self.buffer.pending.strip(),
                                InputBuffer.TERMINATOR))
            self.buffer.clear()

    def _error(self, message):
        print('Error:', message, file=sys.stderr, flush=True)

    def dumper(self):
        '''
        Dump tokens and RPN of every expression, without evaluating.
        '''
        calculator = Calculator()
        for expression in self._expressions():
            try:
                tokens = calculator.tokenize(expression)
                rpn = calculator.converter.convert(tokens)
            except CalcError as e:
                logger.debug('could not convert %r', expression,
                             exc_info=True)
                self._error(e.args[0])
                continue
            print('tokens', *[token.text for token in tokens], sep='\t')
            print('rpn', *[token.text for token in rpn], sep='\t')

    def executor(self):
        '''
        Run calculator on every expression, printing each result.
        '''
        calculator = Calculator()
        for expression in self._expressions():
            try:
                result = calculator.calculate(expression)
            # Abort entire rest of expression, makes sense anyway
            except CalcError as e:
                logger.debug('could not calculate %r', expression,
                             exc_info=True)
                self._error(e.args[0])
            else:
                print(format_result(result, self.args.precision), flush=True)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)

    def list_operators(self):
        '''
        Print all operators: how they bind, and what they take.
        '''
        registry = Calculator().machine.registry
        print('symbol', 'precedence', 'associativity', 'fixity', 'arity',
              sep='\t')
        for descriptor in sorted(CATALOG.values(),
                                 key=lambda d: (-d.precedence, d.symbol)):
            operation = registry.lookup(descriptor.symbol)
            fixity = 'prefix' if descriptor.prefix else \
                     'postfix' if descriptor.postfix else 'infix'
            print(descriptor.symbol,
                  descriptor.precedence,
                  'right' if descriptor.right_associative else 'left',
                  fixity,
                  '-' if operation is None else operation.arity,
                  sep='\t')
        # Evaluable, but no expression can reach them.
        for operation in sorted(registry, key=lambda o: o.symbol):
            if operation.symbol not in CATALOG:
                print(operation.symbol, '-', '-', '-', operation.arity,
                      sep='\t')

    def _message(self):
        if self.buffer.pending:
            return self.CONTINUATION_PROMPT
        return self.args.prompt or self.DEFAULT_PROMPT

    def _prompting_input(self):
        '''
        Return prompting input if either:

        - prompt explicitly specified.
        - both stdin/out are a tty

        Otherwise, plain stdin.
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            prompt = self.args.prompt or self.DEFAULT_PROMPT
            return InteractiveInput(message=self._message,
                                    continuation=' ' * len(prompt),
                                    history_file=self.HISTORY_FILE,
                                    vi_mode=self.args.vi)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.buffer = InputBuffer()
        self.argument_parser = ArgumentParser(
            description='Infix scientific calculator. '
                        "Expressions end with '='; angles are in degrees.")
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log debugging output, '
                                               'including tracebacks')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=_precision,
                                          default=self.DEFAULT_PRECISION,
                                          help='significant digits shown')
        self.argument_parser.add_argument('--vi',
                                          action='store_true',
                                          help='vi editing mode at prompt')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper),
                                      ('-l', '--list', self.list_operators)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format='%(name)s: %(levelname)s: %(message)s')
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        if self._interactive() and self.args.action == self.executor:
            print(self.BANNER)
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
