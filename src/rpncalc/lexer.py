from collections import namedtuple
from enum import Enum
from functools import reduce
import operator

import regex

from .util import UnknownToken
from .operators import MNEMONICS


class TokenKind(Enum):
    NUMBER = 'number'
    OPERATOR = 'operator'
    COMMAND = 'command'


# value is the float for numbers, the OperatorKind for operators, and the
# command name for commands.
Token = namedtuple('Token', ['kind', 'text', 'value'])


class Lexer:
    '''
    Lexer for the RPN *regular* grammar.

    Words are separated by whitespace; each must be a number, an operator
    mnemonic, or a command. Holds no state between lines.
    '''
    # ASCII digits, optionally grouped with single underscores: 1, 12, 1_200
    DIGITS = r'[0-9](?:_?[0-9])*'
    # Number, as Python's float() would accept it.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              [+-]?
              (?:
                  (?:
                      # 1, 1., 1.5
                      {DIGITS}
                      (?:
                          \.
                          (?:{DIGITS})?
                      )?
                      |
                      # .5
                      \.
                      {DIGITS}
                  )
                  # 1e3, 1.5E-3
                  (?:
                      [eE]
                      [+-]?
                      {DIGITS}
                  )?
                  |
                  (?i:
                      inf(?:inity)?
                      |
                      nan
                  )
              )
              '''.format(DIGITS=DIGITS)

    # Longest first, so that alternation never settles for a prefix.
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape,
                                      sorted(MNEMONICS,
                                             key=len,
                                             reverse=True))) + r')'
    COMMANDS = ('undo',)
    COMMAND = r'(?:' + r'|'.join(COMMANDS) + r')'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<command>' + COMMAND + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)
    PATTERN = regex.compile(LEXEME, flags=FLAGS)

    def lex(self, line):
        '''
        Take a line and yield a Token per word.

        Raises UnknownToken on the first word that is not a lexeme, only once
        every word before it has been yielded.
        '''
        for word in line.split():
            match = type(self).PATTERN.fullmatch(word)
            if match is None:
                raise UnknownToken('Unknown command (type help for list)',
                                   token=word)
            yield self.token(match)

    def token(self, match):
        '''
        Convert a lexeme match into a Token.
        '''
        groups = self.matchedgroups(match)
        if 'number' in groups:
            text = groups['number']
            return Token(TokenKind.NUMBER, text, float(text))
        elif 'operator' in groups:
            text = groups['operator']
            return Token(TokenKind.OPERATOR, text, MNEMONICS[text])
        else:
            text = groups['command']
            return Token(TokenKind.COMMAND, text, text)

    def matchedgroups(self, match):
        '''
        Return the named groups that matched, and their text.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
