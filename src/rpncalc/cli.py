from os import isatty
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from .util import RPNError
from .engine import Engine
from .lexer import Lexer, TokenKind
from .dispatcher import Dispatcher
from . import display


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, toolbar=None, rprompt=None, vi_mode=False):
        self.prompt = prompt
        self.toolbar = toolbar
        self.rprompt = rprompt
        self.vi_mode = vi_mode

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=self.vi_mode,
                                    enable_suspend=True,
                                    # Session only, never written to disk.
                                    history=InMemoryHistory(),
                                    # Last calculation
                                    rprompt=self.rprompt,
                                    # Stack
                                    bottom_toolbar=self.toolbar,
                                    prompt_continuation=' ' * len(self.prompt),
                                    mouse_support=False,
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to RPN system.
    '''

    DEFAULT_PROMPT = '> '
    HELP = frozenset({'help', '?'})
    QUIT = frozenset({'q', 'quit', 'exit'})
    HISTORY = frozenset({'history'})

    def dumper(self):
        '''
        Dump every token's kind, text, and arity.
        '''
        lexer = Lexer()
        print('[kind]\t<repr(text)>\t<arity>')
        for line in self.args.expressions:
            try:
                for token in lexer.lex(line):
                    arity = token.value.arity \
                        if token.kind is TokenKind.OPERATOR else None
                    print(token.kind.value,
                          repr(token.text),
                          arity,
                          sep='\t')
            except RPNError as e:
                print(display.render_error(e), file=sys.stderr)

    def executor(self):
        '''
        Run machine (RPN calculator).
        '''
        engine = self.dispatcher.engine
        for line in self.args.expressions:
            command = line.strip()
            if command in self.QUIT:
                break
            elif command in self.HELP:
                print(display.render_help())
                continue
            elif command in self.HISTORY:
                print(display.render_log(engine.log))
                continue
            try:
                self.dispatcher.dispatch_line(line)
            # Abort entire rest of line, makes sense anyway
            except RPNError as e:
                logger.debug('dispatch failed', exc_info=True)
                print(display.render_error(e), file=sys.stderr)
        if not self._interactive():
            print(display.render_stack(engine.snapshot(),
                                       self.args.precision))

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)

    def _toolbar(self):
        return 'stack: ' + display.render_toolbar(
            self.dispatcher.engine.snapshot(), self.args.precision)

    def _rprompt(self):
        log = self.dispatcher.engine.log
        return log[-1] if log else ''

    def _prompting_input(self):
        '''
        Return prompting input, or plain stdin...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    toolbar=self._toolbar,
                                    rprompt=self._rprompt,
                                    vi_mode=self.args.vi)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          help='round displayed numbers')
        self.argument_parser.add_argument('--degrees',
                                          action='store_true',
                                          help='trigonometry in degrees')
        self.argument_parser.add_argument('--log-size',
                                          type=int,
                                          default=Engine.DEFAULT_LOG_SIZE,
                                          help='calculations remembered')
        self.argument_parser.add_argument('--vi',
                                          action='store_true',
                                          help='vi key bindings')
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
                                      ('-D', '--dump', self.dumper)]:
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
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING,
                            format='%(levelname)s %(name)s: %(message)s')
        self.dispatcher = Dispatcher(Engine(degrees=self.args.degrees,
                                            log_size=self.args.log_size))
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)


def main():
    CLI().run()
