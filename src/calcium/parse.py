from collections import deque

from .grammar import Token, TokenType
from .objects import ComplexNumber, SyntaxTree, tree_tag
from .errors import ParseError, UnknownTokenError
from .utils.debug import trace, log


class Lexer:
    """
    Split a text into tokens, the last one being EOF.

    >>> [t.type for t in Lexer('x = 2')]
    [IDENTIFIER, ASSIGN, LITERAL, EOF]
    """
    token_types = list(TokenType)

    def __init__(self, text):
        self.text = text
        self.restart()

    def restart(self):
        "Start again from the beginning of the text."
        self.index = 0
        self.current = None
        self.done = False

    def has_next(self):
        return not self.done

    def next_token(self):
        "Take the next token; once the text is exhausted, EOF is repeated."
        token = self.peek()
        if token.type is TokenType.EOF:
            self.done = True
        else:
            self.current = None
        return token

    def peek(self):
        if self.current is None:
            self.current = self.pick_next()
        return self.current

    def pick_next(self):
        text = self.text
        while self.index < len(text):
            part = text[self.index:]

            for type_ in self.token_types:
                i = type_.match(part)
                if i > 0:
                    token = Token(type_, part[:i], self.index)
                    self.index += i
                    return token

            if not part[0].isspace():
                raise UnknownTokenError(part[0], self.index)
            self.index += 1

        return Token(TokenType.EOF, '', len(text))

    def __iter__(self):
        return self

    def __next__(self):
        if self.done:
            raise StopIteration
        return self.next_token()


class Precedence:
    "Binding strength of the infix operators, from low to high."
    ASSIGNMENT = 1
    SUM = 2
    PRODUCT = 3
    EXPONENT = 4
    PREFIX = 5
    POSTFIX = 6
    CALL = 7


class Parser:
    "Parse a token sequence into a SyntaxTree by precedence climbing."

    def __init__(self, lexer):
        self.lexer = lexer
        self.read = deque()

    @trace
    def parse_expression(self, precedence=0):
        """
        Parse the expression made of the next tokens, stopping before an
        operator that does not bind tighter than precedence.
        """
        token = self.consume()

        prefix = prefix_parselets.get(token.type)
        if prefix is None:
            raise ParseError('Could not parse "%s".' % token.text, token.offset)

        left = prefix(self, token)

        while precedence < self.current_precedence():
            token = self.consume()
            _, infix = infix_parselets[token.type]
            left = infix(self, left, token)

        return left

    def match(self, expected):
        "Consume the current token if it has the expected type."
        if self.look_ahead(0).type is not expected:
            return False
        self.consume()
        return True

    def consume(self):
        self.look_ahead(0)
        return self.read.popleft()

    def expect(self, expected):
        token = self.consume()
        if token.type is not expected:
            raise ParseError('Expected %s but got %s at %d.'
                             % (expected.name, token.type.name, token.offset),
                             token.offset)
        return token

    def look_ahead(self, distance):
        while distance >= len(self.read):
            self.read.append(self.lexer.next_token())
        return self.read[distance]

    def current_precedence(self):
        infix = infix_parselets.get(self.look_ahead(0).type)
        return infix[0] if infix else 0

    def __repr__(self):
        return '<Parser of %r>' % self.lexer.text


# prefix parselets

base_prefixes = {'0b': 2, '0o': 8, '0x': 16}

def parse_literal(parser, token):
    text = token.text.replace('_', '')  # remove all visual separators

    def invalid(detail=''):
        return ParseError('Could not parse literal "%s", invalid number.%s'
                          % (token.text, detail), token.offset)

    if text[:2] in base_prefixes:
        digits = text[2:]
        if not digits:
            raise invalid()
        try:
            value = int(digits, base_prefixes[text[:2]])
        except ValueError as e:
            raise invalid(' (%s)' % e) from e
        if value >= 2 ** 63:
            raise invalid(' (out of range)')
        return SyntaxTree(['NUM', ComplexNumber(value)])

    imaginary = text.endswith('i')
    if imaginary:
        text = text[:-1]
    try:
        value = float(text)
    except ValueError as e:
        raise invalid(' (%s)' % e) from e

    number = ComplexNumber(0.0, value) if imaginary else ComplexNumber(value)
    return SyntaxTree(['NUM', number])

def parse_name(parser, token):
    return SyntaxTree(['NAME', token.text])

def parse_group(parser, token):
    tree = parser.parse_expression()
    parser.expect(TokenType.RIGHT_PAREN)
    return tree

def parse_invert(parser, token):
    return SyntaxTree(['NEG', parser.parse_expression(Precedence.PREFIX)])

def parse_absolute(parser, token):
    tree = parser.parse_expression()
    parser.expect(TokenType.PIPE)
    return SyntaxTree(['ABS', tree])


# infix parselets

def binary(tag, precedence, right_assoc=False):
    "Make the parselet of a binary operator."
    def parse_binary(parser, left, token):
        right = parser.parse_expression(precedence - right_assoc)
        return SyntaxTree([tag, left, right])
    parse_binary.__name__ = 'parse_' + tag.lower()
    return precedence, parse_binary

def parse_assign(parser, left, token):
    if tree_tag(left) != 'NAME':
        raise ParseError('The left-hand side of an assignment must be a name.',
                         token.offset)
    right = parser.parse_expression(Precedence.ASSIGNMENT - 1)
    return SyntaxTree(['ASSIGN', left[1], right])

def parse_call(parser, left, token):
    if tree_tag(left) != 'NAME':
        raise ParseError('Only a name can be called.', token.offset)
    args = []
    if not parser.match(TokenType.RIGHT_PAREN):
        args.append(parser.parse_expression())
        while parser.match(TokenType.COMMA):
            args.append(parser.parse_expression())
        parser.expect(TokenType.RIGHT_PAREN)
    return SyntaxTree(['CALL', left[1], *args])

def parse_factorial(parser, left, token):
    return SyntaxTree(['FACT', left])


prefix_parselets = {
    TokenType.LEFT_PAREN: parse_group,
    TokenType.MINUS: parse_invert,
    TokenType.PIPE: parse_absolute,
    TokenType.LITERAL: parse_literal,
    TokenType.IDENTIFIER: parse_name,
}

infix_parselets = {
    TokenType.LEFT_PAREN: (Precedence.CALL, parse_call),
    TokenType.ASSIGN: (Precedence.ASSIGNMENT, parse_assign),
    TokenType.PLUS: binary('ADD', Precedence.SUM),
    TokenType.MINUS: binary('SUB', Precedence.SUM),
    TokenType.ASTERISK: binary('MUL', Precedence.PRODUCT),
    TokenType.SLASH: binary('DIV', Precedence.PRODUCT),
    TokenType.MOD: binary('MOD', Precedence.PRODUCT),
    TokenType.EXPONENT: binary('POW', Precedence.EXPONENT, right_assoc=True),
    TokenType.EXCLAMATION: (Precedence.POSTFIX, parse_factorial),
}


def calc_parse(text):
    """
    Parse the first expression of the text.

    Returns the tree and the text left after it, empty if all was consumed.

    >>> calc_parse('1 + x')
    (['ADD', ['NUM', ComplexNumber(1.0, 0.0)], ['NAME', 'x']], '')
    >>> calc_parse('2 3')[1]
    '3'
    """
    parser = Parser(Lexer(text))
    tree = parser.parse_expression()
    rest = parser.look_ahead(0)
    log('parsed %r ==> %s' % (text, tree))
    return tree, text[rest.offset:]


def parse(text):
    "Parse one expression from the text; trailing tokens are left alone."
    return calc_parse(text)[0]
