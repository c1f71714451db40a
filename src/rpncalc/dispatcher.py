import logging

from .util import RPNError
from .engine import Engine
from .lexer import Lexer, TokenKind


logger = logging.getLogger(__name__)


class Dispatcher:
    '''
    Feeds lines of input to an engine, one word at a time.
    '''

    def __init__(self, engine=None, lexer=None):
        self.engine = engine if engine is not None else Engine()
        self.lexer = lexer if lexer is not None else Lexer()

    def dispatch_line(self, line):
        '''
        Apply every word of line to the engine, left to right.

        Stops at the first bad word; words before it keep their effect.

        :returns: Label of the last operation applied, None if line is blank.
        :raises RPNError: with ``token`` set to the offending word.
        '''
        label = None
        token = None
        try:
            for token in self.lexer.lex(line):
                label = self.feed(token)
        except RPNError as e:
            if e.token is None and token is not None:
                e.token = token.text
            logger.debug('abandoned %r at %r: %s', line, e.token, e.message)
            raise
        return label

    def feed(self, token):
        '''
        Apply a single token to the engine, returning its label.
        '''
        if token.kind is TokenKind.NUMBER:
            return self.engine.push_value(token.value)
        elif token.kind is TokenKind.OPERATOR:
            return self.engine.apply_operator(token.value)
        elif token.value == 'undo':
            entry = self.engine.undo()
            return 'undo {}'.format(entry.label)
        raise RPNError('Unhandled command', token=token.text)
