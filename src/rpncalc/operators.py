'''
The closed set of operators the engine knows about.

Every operator is a member of :class:`OperatorKind`, whose value is its
canonical mnemonic. :data:`OPERATIONS` maps each arithmetic member to a plain
function of its operands; :data:`STACK_OPERATIONS` maps the stack shufflers
to functions returning the replacement operands. ``clear`` is the only member
in neither table, since it resets the engine rather than computing anything.
'''

from enum import Enum
from inspect import signature as getsignature, Parameter
import math

from .util import (DivisionByZero, DomainError, Overflow, format_number,
                   wrap_math_errors)


# Largest n for which n! is representable as a double.
FACTORIAL_LIMIT = 170
# How far from an integer a factorial argument may stray.
FACTORIAL_EPSILON = 1e-9


class OperatorKind(Enum):
    # Arithmetic
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'
    POWER = '^'
    MODULO = '%'

    # Scientific
    SQRT = 'sqrt'
    INVERSE = 'inv'
    FACTORIAL = '!'
    LN = 'ln'
    LOG = 'log'
    EXP = 'exp'
    EXP10 = '10x'
    ABS = 'abs'
    CBRT = 'cbrt'
    ROOT = 'root'

    # Trigonometric
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    ASIN = 'asin'
    ACOS = 'acos'
    ATAN = 'atan'

    # Stack
    SWAP = 'swap'
    DROP = 'drop'
    CLEAR = 'clear'

    @property
    def mnemonic(self):
        return self.value

    @property
    def arity(self):
        return ARITY[self]

    @property
    def description(self):
        return DESCRIPTIONS[self]

    def __str__(self):
        return self.value


def _add(a, b):
    return a + b


def _subtract(a, b):
    return a - b


def _multiply(a, b):
    return a * b


def _divide(a, b):
    if b == 0:
        raise DivisionByZero('Division by zero')
    return a / b


def _modulo(a, b):
    # Truncated remainder: sign follows the dividend.
    if b == 0:
        raise DivisionByZero('Modulo by zero')
    return math.fmod(a, b)


def _power(a, b):
    if a == 0 and b < 0:
        raise DivisionByZero('Zero raised to a negative power')
    return math.pow(a, b)


def _sqrt(a):
    if a < 0:
        raise DomainError('Square root of negative number')
    return math.sqrt(a)


def _inverse(a):
    if a == 0:
        raise DivisionByZero('Cannot take reciprocal of zero')
    return 1 / a


def _factorial(a):
    if math.isnan(a) or a < 0 or \
       math.isfinite(a) and abs(a - round(a)) > FACTORIAL_EPSILON:
        raise DomainError('Factorial needs non-negative integer')
    if math.isinf(a) or round(a) > FACTORIAL_LIMIT:
        raise Overflow('Factorial above {}! out of range'
                       .format(FACTORIAL_LIMIT))
    product = 1
    for i in range(2, int(round(a)) + 1):
        product *= i
    return float(product)


def _ln(a):
    if a <= 0:
        raise DomainError('Logarithm of non-positive number')
    return math.log(a)


def _log(a):
    if a <= 0:
        raise DomainError('Logarithm of non-positive number')
    return math.log10(a)


def _cbrt(a):
    return math.copysign(abs(a) ** (1 / 3), a)


def _root(x, y):
    '''
    The y-th root of x, i.e., x^(1/y).
    '''
    if y == 0:
        raise DivisionByZero('Cannot take 0th root')
    if x == 0 and y < 0:
        raise DivisionByZero('Zero raised to a negative power')
    if x < 0:
        # Only odd integral roots of negatives are real.
        if not (math.isfinite(y) and y == int(y)) or int(y) % 2 == 0:
            raise DomainError('Even or fractional root of negative number')
        return -math.pow(-x, 1 / y)
    return math.pow(x, 1 / y)


def _asin(a):
    if abs(a) > 1:
        raise DomainError('asin argument outside [-1, 1]')
    return math.asin(a)


def _acos(a):
    if abs(a) > 1:
        raise DomainError('acos argument outside [-1, 1]')
    return math.acos(a)


def _swap(a, b):
    return b, a


def _drop(a):
    return ()


_OPERATIONS = {
    OperatorKind.ADD: _add,
    OperatorKind.SUBTRACT: _subtract,
    OperatorKind.MULTIPLY: _multiply,
    OperatorKind.DIVIDE: _divide,
    OperatorKind.POWER: _power,
    OperatorKind.MODULO: _modulo,

    OperatorKind.SQRT: _sqrt,
    OperatorKind.INVERSE: _inverse,
    OperatorKind.FACTORIAL: _factorial,
    OperatorKind.LN: _ln,
    OperatorKind.LOG: _log,
    OperatorKind.EXP: math.exp,
    OperatorKind.EXP10: lambda a: math.pow(10, a),
    OperatorKind.ABS: math.fabs,
    OperatorKind.CBRT: _cbrt,
    OperatorKind.ROOT: _root,

    OperatorKind.SIN: math.sin,
    OperatorKind.COS: math.cos,
    OperatorKind.TAN: math.tan,
    OperatorKind.ASIN: _asin,
    OperatorKind.ACOS: _acos,
    OperatorKind.ATAN: math.atan,
}

# Whatever slips past the explicit checks above (e.g., math.exp overflowing)
# still surfaces as an RPNError.
OPERATIONS = {kind: wrap_math_errors(kind.mnemonic)(f)
              for kind, f
              in _OPERATIONS.items()}

STACK_OPERATIONS = {
    OperatorKind.SWAP: _swap,
    OperatorKind.DROP: _drop,
}

assert set(OPERATIONS) | set(STACK_OPERATIONS) | {OperatorKind.CLEAR} == \
    set(OperatorKind), 'Operator table is not exhaustive'

TRIGONOMETRIC = frozenset({OperatorKind.SIN,
                           OperatorKind.COS,
                           OperatorKind.TAN})
INVERSE_TRIGONOMETRIC = frozenset({OperatorKind.ASIN,
                                   OperatorKind.ACOS,
                                   OperatorKind.ATAN})


def _arity(f):
    '''
    Return number of non-default positional arguments.
    '''
    parameters = getsignature(f).parameters.values()
    positionals = [parameter
                   for parameter
                   in parameters
                   if parameter.kind in (Parameter.POSITIONAL_ONLY,
                                         Parameter.POSITIONAL_OR_KEYWORD) and
                      parameter.default == Parameter.empty]
    return len(positionals)


# math builtins don't all expose a signature, so the unary ones are listed.
_BUILTIN_ARITY = {
    OperatorKind.EXP: 1,
    OperatorKind.ABS: 1,
    OperatorKind.SIN: 1,
    OperatorKind.COS: 1,
    OperatorKind.TAN: 1,
    OperatorKind.ATAN: 1,
}

ARITY = {OperatorKind.CLEAR: 0}
for kind, f in list(_OPERATIONS.items()) + list(STACK_OPERATIONS.items()):
    ARITY[kind] = _BUILTIN_ARITY.get(kind) or _arity(f)

# Alternative spellings accepted on input. Labels use the canonical mnemonic.
ALIASES = {
    'pow': OperatorKind.POWER,
    'mod': OperatorKind.MODULO,
    'fact': OperatorKind.FACTORIAL,
    'clr': OperatorKind.CLEAR,
}

# Every word the dispatcher accepts as an operator.
MNEMONICS = {kind.mnemonic: kind for kind in OperatorKind}
MNEMONICS.update(ALIASES)

DESCRIPTIONS = {
    OperatorKind.ADD: 'a b -> a + b',
    OperatorKind.SUBTRACT: 'a b -> a - b',
    OperatorKind.MULTIPLY: 'a b -> a * b',
    OperatorKind.DIVIDE: 'a b -> a / b',
    OperatorKind.POWER: 'a b -> a raised to b',
    OperatorKind.MODULO: 'a b -> remainder of a / b',
    OperatorKind.SQRT: 'a -> square root of a',
    OperatorKind.INVERSE: 'a -> 1 / a',
    OperatorKind.FACTORIAL: 'a -> a!',
    OperatorKind.LN: 'a -> natural logarithm of a',
    OperatorKind.LOG: 'a -> base 10 logarithm of a',
    OperatorKind.EXP: 'a -> e raised to a',
    OperatorKind.EXP10: 'a -> 10 raised to a',
    OperatorKind.ABS: 'a -> absolute value of a',
    OperatorKind.CBRT: 'a -> cube root of a',
    OperatorKind.ROOT: 'x y -> y-th root of x',
    OperatorKind.SIN: 'a -> sine of a',
    OperatorKind.COS: 'a -> cosine of a',
    OperatorKind.TAN: 'a -> tangent of a',
    OperatorKind.ASIN: 'a -> arcsine of a',
    OperatorKind.ACOS: 'a -> arccosine of a',
    OperatorKind.ATAN: 'a -> arctangent of a',
    OperatorKind.SWAP: 'a b -> b a',
    OperatorKind.DROP: 'a -> (nothing)',
    OperatorKind.CLEAR: 'empty the stack and the undo history',
}

# Sections of the help listing, in display order.
GROUPS = (
    ('arithmetic', (OperatorKind.ADD, OperatorKind.SUBTRACT,
                    OperatorKind.MULTIPLY, OperatorKind.DIVIDE,
                    OperatorKind.POWER, OperatorKind.MODULO)),
    ('scientific', (OperatorKind.SQRT, OperatorKind.INVERSE,
                    OperatorKind.FACTORIAL, OperatorKind.LN,
                    OperatorKind.LOG, OperatorKind.EXP, OperatorKind.EXP10,
                    OperatorKind.ABS, OperatorKind.CBRT, OperatorKind.ROOT)),
    ('trigonometric', (OperatorKind.SIN, OperatorKind.COS, OperatorKind.TAN,
                       OperatorKind.ASIN, OperatorKind.ACOS,
                       OperatorKind.ATAN)),
    ('stack', (OperatorKind.SWAP, OperatorKind.DROP, OperatorKind.CLEAR)),
)

assert not set(OperatorKind) - {kind
                                for _, kinds in GROUPS
                                for kind in kinds}

_DESCRIBE_FORMATS = {
    OperatorKind.INVERSE: '1/{0} = {result}',
    OperatorKind.FACTORIAL: '{0}! = {result}',
    OperatorKind.ROOT: '{1} root {0} = {result}',
}


def describe(kind, operands, result, precision=None):
    '''
    Render one calculation for the log, e.g. ``3 + 4 = 7``.
    '''
    operands = [format_number(operand, precision) for operand in operands]
    result = format_number(result, precision)
    fmt = _DESCRIBE_FORMATS.get(kind)
    if fmt is None:
        if len(operands) == 2:
            fmt = '{0} {op} {1} = {result}'
        else:
            fmt = '{op}({0}) = {result}'
    return fmt.format(*operands, op=kind.mnemonic, result=result)


def lookup(word):
    '''
    Return the OperatorKind for a mnemonic or alias, or None.
    '''
    return MNEMONICS.get(word)
