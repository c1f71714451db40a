'''
Text rendering of engine state. No decisions are made here.
'''

from .util import format_number
from .operators import GROUPS, ALIASES


EMPTY = '(empty)'

COMMANDS = (
    ('undo', 'restore the stack before the last operation'),
    ('help, ?', 'show this listing'),
    ('history', 'show recent calculations'),
    ('q, quit, exit', 'leave the calculator'),
)


def render_stack(values, precision=None):
    '''
    One line per stack level, top of stack last, numbered by depth.
    '''
    if not values:
        return EMPTY
    width = len(str(len(values)))
    return '\n'.join('{:>{}}: {}'.format(depth, width,
                                         format_number(value, precision))
                     for depth, value
                     in zip(range(len(values), 0, -1), values))


def render_toolbar(values, precision=None):
    '''
    The stack on a single line, top of stack rightmost.
    '''
    if not values:
        return EMPTY
    return '  '.join(format_number(value, precision) for value in values)


def render_log(entries):
    return '\n'.join(entries)


def render_error(error):
    return 'error: {}'.format(error)


def render_help():
    '''
    List every mnemonic the dispatcher accepts, grouped, with aliases.
    '''
    aliases = {}
    for alias, kind in ALIASES.items():
        aliases.setdefault(kind, []).append(alias)
    lines = []
    for title, kinds in GROUPS:
        lines.append(title + ':')
        for kind in kinds:
            names = ', '.join([kind.mnemonic] + sorted(aliases.get(kind, [])))
            lines.append('  {:<14} {}'.format(names, kind.description))
    lines.append('commands:')
    for names, description in COMMANDS:
        lines.append('  {:<14} {}'.format(names, description))
    return '\n'.join(lines)
