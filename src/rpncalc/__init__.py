'''
RPN calculator.

A stack of floats, the usual arithmetic, a handful of scientific and
trigonometric functions, and unlimited undo. Not intended to be
Turing-complete!

Type numbers and operators separated by spaces; each word is applied as soon
as it is read, so ``5 4 + 3 *`` leaves 27 on the stack. A word that is neither
a number nor an operator stops the line there, keeping what came before it.
Every successful operation can be undone with ``undo``.
'''

from .cli import CLI
from .dispatcher import Dispatcher
from .engine import Engine, HistoryEntry
from .lexer import Lexer, Token, TokenKind
from .operators import OperatorKind
from .util import (RPNError, StackUnderflow, DivisionByZero, DomainError,
                   Overflow, UnknownToken, NothingToUndo)


__all__ = ('CLI', 'Dispatcher', 'Engine', 'HistoryEntry', 'Lexer', 'Token',
           'TokenKind', 'OperatorKind', 'RPNError', 'StackUnderflow',
           'DivisionByZero', 'DomainError', 'Overflow', 'UnknownToken',
           'NothingToUndo')
