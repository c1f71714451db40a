from functools import wraps
import math


def format_number(value, precision=None):
    '''
    Format a stack value for humans.

    Integral values drop the trailing ``.0``; others use the shortest repr.
    Rounds to ``precision`` decimal places first, if given.
    '''
    if precision is not None and math.isfinite(value):
        value = round(value, precision)
    if math.isfinite(value) and value == int(value) and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


class RPNError(Exception):
    '''
    Base of all user-facing calculator errors.

    ``args[0]`` is the message shown to the user. ``token`` is the input word
    that caused the error, once the dispatcher knows it.
    '''

    def __init__(self, message, *args, token=None):
        super().__init__(message, *args)
        self.token = token

    @property
    def message(self):
        return self.args[0]

    def __str__(self):
        if self.token is None:
            return self.message
        return '{}: {}'.format(self.token, self.message)


class StackUnderflow(RPNError):
    pass


class DivisionByZero(RPNError):
    pass


class DomainError(RPNError):
    pass


class Overflow(RPNError):
    pass


class UnknownToken(RPNError):
    pass


class NothingToUndo(RPNError):
    pass


def wrap_math_errors(name):
    '''
    Decorator translating Python arithmetic exceptions into RPNErrors.

    Passes through RPNErrors. ``name`` is the operator mnemonic used in the
    message.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except ZeroDivisionError as e:
                raise DivisionByZero('Division by zero in {}'.format(name),
                                     e) from e
            except OverflowError as e:
                raise Overflow('Result of {} out of range'.format(name),
                               e) from e
            except ValueError as e:
                raise DomainError('Argument out of domain for {}'.format(name),
                                  e) from e
        return wrapper
    return decorator
