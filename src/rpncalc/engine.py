from collections import deque, namedtuple
import logging
import math

from .util import RPNError, StackUnderflow, NothingToUndo, UnknownToken, \
                  format_number
from .operators import OperatorKind, OPERATIONS, STACK_OPERATIONS, \
                       TRIGONOMETRIC, INVERSE_TRIGONOMETRIC, describe, lookup


logger = logging.getLogger(__name__)


# Stack contents before an operation, and what that operation was.
HistoryEntry = namedtuple('HistoryEntry', ['snapshot', 'label'])


class Engine:
    '''
    Arithmetic stack engine (RPN calculator).

    Owns the stack, the undo history and a short log of calculations. Every
    mutating operation either succeeds completely, recording one history
    entry, or raises an RPNError with nothing changed.
    '''

    DEFAULT_LOG_SIZE = 10

    def __init__(self, degrees=False, log_size=None):
        '''
        Create empty engine.

        :param degrees: Trigonometric operators work in degrees, not radians.
        :param log_size: Number of calculations kept for display.
        '''
        if log_size is None:
            log_size = type(self).DEFAULT_LOG_SIZE
        self.degrees = degrees
        self._stack = []
        self._history = []
        self._log = deque(maxlen=log_size)

    def __len__(self):
        return len(self._stack)

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._stack)

    @property
    def history(self):
        '''
        Undo history, oldest first.
        '''
        return tuple(self._history)

    @property
    def log(self):
        '''
        Recent calculations as text, oldest first.
        '''
        return tuple(self._log)

    def snapshot(self):
        '''
        Return the stack contents, bottom first.
        '''
        return tuple(self._stack)

    def push_value(self, value):
        '''
        Push a number onto the stack. Always succeeds.
        '''
        value = float(value)
        label = 'push {}'.format(format_number(value))
        self._commit(label, 0, (value,))
        return label

    def apply_operator(self, kind):
        '''
        Pop the operands of ``kind``, and push its result.

        :param kind: OperatorKind, or its mnemonic.
        :returns: The operator's label.
        '''
        if not isinstance(kind, OperatorKind):
            word = kind
            kind = lookup(word)
            if kind is None:
                raise UnknownToken('Unknown command (type help for list)',
                                   token=word)
        if kind is OperatorKind.CLEAR:
            return self.clear()
        try:
            operands = self._peekstack(kind)
            if kind in STACK_OPERATIONS:
                results = STACK_OPERATIONS[kind](*operands)
            else:
                results = (self._compute(kind, operands),)
        except RPNError as e:
            logger.debug('%s failed on %r: %s', kind, self._stack, e.message)
            raise
        self._commit(kind.mnemonic, len(operands), results)
        if kind not in STACK_OPERATIONS:
            self._log.append(describe(kind, operands, results[0]))
        return kind.mnemonic

    def clear(self):
        '''
        Empty the stack and the undo history. Cannot be undone.
        '''
        self._stack.clear()
        self._history.clear()
        logger.debug('cleared')
        return OperatorKind.CLEAR.mnemonic

    def undo(self):
        '''
        Restore the stack as it was before the last operation.

        :returns: The HistoryEntry undone.
        '''
        if not self._history:
            raise NothingToUndo('Nothing to undo')
        entry = self._history.pop()
        self._stack[:] = entry.snapshot
        logger.debug('undid %s, stack %r', entry.label, self._stack)
        return entry

    def _peekstack(self, kind):
        '''
        Return the operands of kind, bottom first, without popping them.
        '''
        n = kind.arity
        if len(self._stack) < n:
            raise StackUnderflow('Need {} number{} for {}'
                                 .format(n, 's' if n > 1 else '', kind))
        return tuple(self._stack[len(self._stack) - n:])

    def _compute(self, kind, operands):
        f = OPERATIONS[kind]
        if self.degrees and kind in TRIGONOMETRIC:
            operands = tuple(map(math.radians, operands))
        result = f(*operands)
        if self.degrees and kind in INVERSE_TRIGONOMETRIC:
            result = math.degrees(result)
        return result

    def _commit(self, label, consumed, results):
        '''
        Record undo snapshot, then replace consumed operands with results.
        '''
        self._history.append(HistoryEntry(self.snapshot(), label))
        del self._stack[len(self._stack) - consumed:]
        self._stack.extend(results)
        logger.debug('%s, stack %r', label, self._stack)
