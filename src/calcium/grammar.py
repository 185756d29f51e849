"""
The lexical grammar of the calculator.

Each TokenType carries a matcher: a function taking the rest of the source
text and returning the length of the token at its start, 0 if none. The
lexer tries the token types in their declaration order and the first
positive match wins, so the order below is significant.
"""

import enum
from collections import namedtuple


Token = namedtuple('Token', 'type text offset')


def char_matcher(c, separate=True):
    """
    Match the single character c.

    If separate is set, a doubled character is left for a two-character token.

    >>> char_matcher('*')('*2'), char_matcher('*')('**2')
    (1, 0)
    >>> char_matcher('(', separate=False)('((')
    1
    """
    def match(text):
        if not text or text[0] != c:
            return 0
        if separate and len(text) > 1 and text[1] == c:
            return 0  # might be a double character token
        return 1
    return match


def string_matcher(s):
    def match(text):
        return len(s) if text.startswith(s) else 0
    return match


def never(text):
    return 0


# literals

BIN_CHARS = set('01_')
OCT_CHARS = set('01234567_')
DEC_CHARS = set('0123456789_')
HEX_CHARS = DEC_CHARS | set('abcdefABCDEF')

base_prefixes = {'0b': BIN_CHARS, '0o': OCT_CHARS, '0x': HEX_CHARS}


def match_run(text, i, chars):
    "Advance i over the characters in chars."
    while i < len(text) and text[i] in chars:
        i += 1
    return i


def match_decimal(text, i):
    "Match a decimal run whose first character is a digit."
    if i >= len(text) or text[i] not in DEC_CHARS or text[i] == '_':
        return i
    return match_run(text, i + 1, DEC_CHARS)


def match_literal(text):
    """
    Match a number literal, possibly invalid: the parser reports the errors
    of the digits, so that e.g. "0b" is not split into 0 and b.

    >>> match_literal('0x1F_ff+1')
    7
    >>> match_literal('0b')
    2
    >>> match_literal('25E-3i * 2')
    6
    >>> match_literal('.5')
    0
    """
    prefix = text[:2]
    if prefix in base_prefixes:
        return match_run(text, 2, base_prefixes[prefix])

    i = match_decimal(text, 0)
    if i == 0:
        return 0
    if i < len(text) and text[i] == '.':
        i = match_decimal(text, i + 1)

    if i < len(text) and text[i] in 'eE':
        i += 1
        if i < len(text) and text[i] in '+-':
            i += 1
        i = match_run(text, i, DEC_CHARS)

    if i < len(text) and text[i] == 'i':
        i += 1
    return i


# identifiers

def is_name_char(c):
    return c.isalpha() or c == '_'


def match_identifier(text):
    """
    Match a name made of letters and underscores only.

    >>> match_identifier('hello_world(2)')
    11
    >>> match_identifier('x1'), match_identifier('_'), match_identifier('_1')
    (1, 0, 0)
    """
    if text[:1] == '_' and not (len(text) > 1 and is_name_char(text[1])):
        return 0
    i = 0
    while i < len(text) and is_name_char(text[i]):
        i += 1
    return i


class TokenType(enum.Enum):
    LEFT_PAREN = char_matcher('(', separate=False),
    RIGHT_PAREN = char_matcher(')', separate=False),
    COMMA = char_matcher(',', separate=False),
    ASSIGN = char_matcher('='),
    PLUS = char_matcher('+'),
    MINUS = char_matcher('-'),
    ASTERISK = char_matcher('*'),
    SLASH = char_matcher('/'),
    EXPONENT = string_matcher('**'),
    EXCLAMATION = char_matcher('!'),
    PIPE = char_matcher('|', separate=False),
    MOD = string_matcher('mod'),
    LITERAL = match_literal,
    IDENTIFIER = match_identifier,
    EOF = never,  # only produced at the end of the text

    def __init__(self, matcher):
        self.matcher = matcher

    def match(self, text):
        return self.matcher(text)

    def __repr__(self):
        return self.name
