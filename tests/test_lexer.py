"""Tests for the tokenizer."""

import pytest

from calcium import Lexer, UnknownTokenError, ParseError
from calcium.grammar import TokenType


def types(text):
    return [token.type for token in Lexer(text)]


def test_every_token_type_in_declaration_order():
    assert types('() , = + - * / ** ! |mod 536.25i hello_world') == list(TokenType)


def test_numerals_are_literals():
    tokens = list(Lexer('1 2.5 0x1F 3e4 7i 1_000 0b101 0o17 25E-3i'))
    assert [t.type for t in tokens[:-1]] == [TokenType.LITERAL] * 9
    assert [t.text for t in tokens[:-1]] == [
        '1', '2.5', '0x1F', '3e4', '7i', '1_000', '0b101', '0o17', '25E-3i']


def test_digits_end_an_identifier():
    tokens = list(Lexer('abc1'))
    assert [t.type for t in tokens] == [TokenType.IDENTIFIER, TokenType.LITERAL, TokenType.EOF]
    assert [t.text for t in tokens] == ['abc', '1', '']


@pytest.mark.parametrize('name', ['x', 'hello_world', '_x', 'Ans', 'a_'])
def test_letters_and_underscores_make_one_identifier(name):
    tokens = list(Lexer(name))
    assert len(tokens) == 2
    assert tokens[0].type is TokenType.IDENTIFIER
    assert tokens[0].text == name


def test_double_asterisk_is_exponent():
    assert types('2**3') == [TokenType.LITERAL, TokenType.EXPONENT,
                             TokenType.LITERAL, TokenType.EOF]
    assert types('2*3') == [TokenType.LITERAL, TokenType.ASTERISK,
                            TokenType.LITERAL, TokenType.EOF]


def test_parens_and_pipes_may_repeat():
    assert types('((||))') == [TokenType.LEFT_PAREN] * 2 + [TokenType.PIPE] * 2 + \
        [TokenType.RIGHT_PAREN] * 2 + [TokenType.EOF]


def test_offsets_skip_whitespace():
    tokens = list(Lexer('1 +  x'))
    assert [t.offset for t in tokens] == [0, 2, 5, 6]


def test_eof_is_empty_at_the_end():
    text = 'x = 2 '
    eof = list(Lexer(text))[-1]
    assert eof.type is TokenType.EOF
    assert eof.text == ''
    assert eof.offset == len(text)


def test_empty_text_is_only_eof():
    assert types('') == [TokenType.EOF]
    assert types('   ') == [TokenType.EOF]


def test_unknown_character():
    with pytest.raises(UnknownTokenError) as info:
        list(Lexer('2 $ 3'))
    assert info.value.char == '$'
    assert info.value.offset == 2
    assert isinstance(info.value, ParseError)


def test_has_next_and_restart():
    lexer = Lexer('1')
    assert lexer.has_next()
    assert lexer.next_token().type is TokenType.LITERAL
    assert lexer.has_next()
    assert lexer.next_token().type is TokenType.EOF
    assert not lexer.has_next()
    assert lexer.next_token().type is TokenType.EOF

    lexer.restart()
    assert lexer.has_next()
    assert lexer.next_token().text == '1'


def test_mod_is_a_keyword():
    assert types('5 mod 3') == [TokenType.LITERAL, TokenType.MOD,
                                TokenType.LITERAL, TokenType.EOF]
