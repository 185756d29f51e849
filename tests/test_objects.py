"""Tests for values, variables and syntax trees."""

import math

import pytest
import sympy

from calcium import (
    ComplexNumber, NONE, Variable, SyntaxTree,
    DivisionByZeroError, InvalidArgumentError, StateError
)
from calcium.objects import convert_output, expect_int


def test_complex_number_is_immutable():
    z = ComplexNumber(1, 2)
    with pytest.raises(AttributeError):
        z.real = 3
    with pytest.raises(AttributeError):
        z.foo = 3


def test_structural_equality_and_hash():
    assert ComplexNumber(1, 2) == ComplexNumber(1.0, 2.0)
    assert ComplexNumber(1, 2) != ComplexNumber(2, 1)
    assert hash(ComplexNumber(1, 2)) == hash(ComplexNumber(1.0, 2.0))
    assert ComplexNumber.ZERO == ComplexNumber()
    assert ComplexNumber.I == ComplexNumber(0, 1)


def test_is_real_and_is_integer():
    assert ComplexNumber(3).is_real()
    assert not ComplexNumber(3, 1).is_real()
    assert ComplexNumber(-7).is_integer()
    assert not ComplexNumber(1.5).is_integer()
    assert not ComplexNumber(2, 1).is_integer()
    assert not ComplexNumber(math.inf).is_integer()
    assert not ComplexNumber(math.nan).is_integer()
    assert ComplexNumber(-2.0 ** 63).is_integer()
    assert not ComplexNumber(2.0 ** 63).is_integer()


def test_int_and_real_values():
    assert ComplexNumber(4).int_value() == 4
    with pytest.raises(InvalidArgumentError):
        ComplexNumber(4.5).int_value()
    with pytest.raises(InvalidArgumentError):
        ComplexNumber(1, 1).real_value()


def test_arithmetic():
    a, b = ComplexNumber(1, 2), ComplexNumber(3, 4)
    assert a + b == ComplexNumber(4, 6)
    assert a - b == ComplexNumber(-2, -2)
    assert a * b == ComplexNumber(-5, 10)
    assert -a == ComplexNumber(-1, -2)
    assert a + 1 == ComplexNumber(2, 2)
    assert 1 - a == ComplexNumber(0, -2)
    assert 2 * a == ComplexNumber(2, 4)


def test_division():
    q = ComplexNumber(1, 2) / ComplexNumber(3, 4)
    assert q.real == pytest.approx(11 / 25)
    assert q.imag == pytest.approx(2 / 25)
    assert ComplexNumber(3, 6) / 3 == ComplexNumber(1, 2)
    assert 1 / ComplexNumber(0, 1) == ComplexNumber(0, -1)


def test_division_by_zero():
    with pytest.raises(DivisionByZeroError) as info:
        ComplexNumber(1) / ComplexNumber.ZERO
    assert info.value.kind == 'arithmetic'
    with pytest.raises(ZeroDivisionError):
        ComplexNumber(1) / 0


def test_abs_is_scaled():
    assert ComplexNumber(0).abs() == 0.0
    assert ComplexNumber(-3, 4).abs() == 5.0
    big = ComplexNumber(1e300, 1e300).abs()
    assert math.isfinite(big)
    assert big == pytest.approx(math.sqrt(2) * 1e300)
    tiny = ComplexNumber(3e-200, 4e-200).abs()
    assert tiny == pytest.approx(5e-200)


def test_conjugate_and_arg():
    assert ComplexNumber(1, 2).conjugate() == ComplexNumber(1, -2)
    assert ComplexNumber(0, 1).arg() == pytest.approx(math.pi / 2)
    assert ComplexNumber(-1).arg() == pytest.approx(math.pi)


def test_abs_of_an_infinity():
    assert ComplexNumber(math.inf, 1).abs() == math.inf
    assert ComplexNumber(1, -math.inf).abs() == math.inf
    assert ComplexNumber(-math.inf, math.nan).abs() == math.inf


def test_negation_has_no_negative_zero():
    z = -ComplexNumber(3)
    assert z == ComplexNumber(-3)
    assert math.copysign(1.0, z.imag) == 1.0


def test_str():
    assert str(ComplexNumber(1.5)) == '1.5'
    assert str(ComplexNumber(1, -2)) == '1.0-2.0i'
    assert str(ComplexNumber(1, 2)) == '1.0+2.0i'
    assert str(NONE) == 'None'
    assert repr(NONE) == 'NONE'


def test_convert_output():
    assert convert_output(ComplexNumber(1)) == ComplexNumber(1)
    assert convert_output(None) is NONE
    assert convert_output(True) == ComplexNumber(1)
    assert convert_output(3) == ComplexNumber(3)
    assert convert_output(1 + 2j) == ComplexNumber(1, 2)
    assert convert_output(sympy.pi).real == pytest.approx(math.pi)
    assert convert_output(sympy.I * 2) == ComplexNumber(0, 2)
    with pytest.raises(InvalidArgumentError):
        convert_output('text')


def test_expect_int():
    assert expect_int(ComplexNumber(3)) == 3
    with pytest.raises(InvalidArgumentError, match='integer'):
        expect_int(NONE)


def test_constant_variable():
    pi = Variable('pi', ComplexNumber(math.pi), constant=True)
    with pytest.raises(StateError):
        pi.value = ComplexNumber(3)
    assert pi.value == ComplexNumber(math.pi)

    x = Variable('x', ComplexNumber(1))
    x.value = ComplexNumber(2)
    assert x.value == ComplexNumber(2)


def test_syntax_tree_tag_is_fixed():
    tree = SyntaxTree(['NEG', SyntaxTree(['NAME', 'x'])])
    assert tree.tag == 'NEG'
    with pytest.raises(IndexError):
        tree[0] = 'ABS'
    with pytest.raises(IndexError):
        tree[:] = ['ABS', 1]
    tree[1] = SyntaxTree(['NAME', 'y'])
    assert tree.body == [['NAME', 'y']]


def test_syntax_tree_tags_are_closed():
    with pytest.raises(AssertionError):
        SyntaxTree(['FOO', 1])
