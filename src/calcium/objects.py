import re
import math
from numbers import Number
from sympy import Expr

from .errors import DivisionByZeroError, InvalidArgumentError, StateError


class Value:
    "A result of evaluation: either a ComplexNumber or NONE."
    __slots__ = ()


class NoneValue(Value):
    "The absence of a value, bound to the name None."
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'NONE'

    def __str__(self):
        return 'None'

NONE = NoneValue()


class ComplexNumber(Value):
    """
    An immutable complex number made of two floats.

    >>> ComplexNumber(1, 2) * ComplexNumber(3, -1)
    ComplexNumber(5.0, 5.0)
    >>> ComplexNumber(3, 4).abs()
    5.0
    """
    __slots__ = ('_real', '_imag')

    LONG_MIN, LONG_MAX = -2 ** 63, 2 ** 63

    def __init__(self, real=0.0, imag=0.0):
        object.__setattr__(self, '_real', float(real))
        object.__setattr__(self, '_imag', float(imag))

    def __setattr__(self, name, value):
        raise AttributeError('ComplexNumber is immutable')

    @property
    def real(self):
        return self._real

    @property
    def imag(self):
        return self._imag

    def is_real(self):
        return self.imag == 0.0

    def is_integer(self):
        "Whether the number is real and exactly a 64-bit signed integer."
        x = self.real
        return (self.is_real() and math.isfinite(x) and x.is_integer()
                and self.LONG_MIN <= x < self.LONG_MAX)

    def int_value(self):
        if not self.is_integer():
            raise InvalidArgumentError('%s is not an integer.' % self)
        return int(self.real)

    def real_value(self):
        if not self.is_real():
            raise InvalidArgumentError('%s is not a real number.' % self)
        return self.real

    def conjugate(self):
        return ComplexNumber(self.real, -self.imag)

    def abs(self):
        "The modulus, scaled to avoid overflow and underflow."
        x, y = self.real, self.imag
        if math.isinf(x) or math.isinf(y):
            return math.inf
        s = max(abs(x), abs(y))
        if s == 0.0:
            return 0.0
        x /= s
        y /= s
        return s * math.sqrt(x * x + y * y)

    def arg(self):
        return math.atan2(self.imag, self.real)

    @staticmethod
    def _split(other):
        if isinstance(other, ComplexNumber):
            return other.real, other.imag
        elif isinstance(other, Number) and not isinstance(other, complex):
            return float(other), 0.0
        return None

    def __add__(self, other):
        parts = self._split(other)
        if parts is None: return NotImplemented
        c, d = parts
        return ComplexNumber(self.real + c, self.imag + d)

    __radd__ = __add__

    def __sub__(self, other):
        parts = self._split(other)
        if parts is None: return NotImplemented
        c, d = parts
        return ComplexNumber(self.real - c, self.imag - d)

    def __rsub__(self, other):
        return -self + other

    def __mul__(self, other):
        if isinstance(other, ComplexNumber):
            a, b = self.real, self.imag
            c, d = other.real, other.imag
            # (a+bi)(c+di) = (ac - bd) + (ad + bc)i
            return ComplexNumber(a * c - b * d, a * d + b * c)
        parts = self._split(other)
        if parts is None: return NotImplemented
        k = parts[0]
        return ComplexNumber(self.real * k, self.imag * k)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not isinstance(other, ComplexNumber):
            parts = self._split(other)
            if parts is None: return NotImplemented
            k = parts[0]
            if k == 0.0:
                raise DivisionByZeroError('Division by 0')
            return ComplexNumber(self.real / k, self.imag / k)

        c, d = other.real, other.imag
        if c == 0.0 and d == 0.0:
            raise DivisionByZeroError('Division by 0')
        # multiply by the conjugate over the squared modulus, both
        # scaled by the largest component of the divisor
        s = max(abs(c), abs(d))
        c, d = c / s, d / s
        numerator = self * ComplexNumber(c, -d)
        return numerator / ((c * c + d * d) * s)

    def __rtruediv__(self, other):
        parts = self._split(other)
        if parts is None: return NotImplemented
        return ComplexNumber(*parts) / self

    def __neg__(self):
        # 0.0 - x keeps a zero part positive
        return ComplexNumber(0.0 - self.real, 0.0 - self.imag)

    def __abs__(self):
        return self.abs()

    def __eq__(self, other):
        if isinstance(other, ComplexNumber):
            return self.real == other.real and self.imag == other.imag
        return NotImplemented

    def __hash__(self):
        return hash((self.real, self.imag))

    def __complex__(self):
        return complex(self.real, self.imag)

    def __repr__(self):
        return 'ComplexNumber(%r, %r)' % (self.real, self.imag)

    def __str__(self):
        if self.is_real():
            return repr(self.real)
        sign = '+' if math.copysign(1.0, self.imag) > 0 else ''
        return '%r%s%ri' % (self.real, sign, self.imag)


ComplexNumber.ZERO = ComplexNumber(0.0, 0.0)
ComplexNumber.I = ComplexNumber(0.0, 1.0)


def expect_complex(value):
    if not isinstance(value, ComplexNumber):
        raise InvalidArgumentError('The argument is not a complex number (%s), '
                                   'while a complex number was expected.' % value)
    return value

def expect_int(value):
    if not isinstance(value, ComplexNumber) or not value.is_integer():
        raise InvalidArgumentError('The argument is not an integer (%s), '
                                   'while an integer was expected.' % value)
    return value.int_value()


def convert_output(val):
    "Convert the result of a native function into a Value."
    if isinstance(val, Value):
        return val
    elif val is None:
        return NONE
    elif type(val) is bool:
        return ComplexNumber(1 if val else 0)
    elif isinstance(val, Number):
        val = complex(val)
        return ComplexNumber(val.real, val.imag)
    elif isinstance(val, Expr):
        val = complex(val.evalf())
        return ComplexNumber(val.real, val.imag)
    else:
        raise InvalidArgumentError('cannot convert %r into a number' % (val,))


class Variable:
    "A named value, mutable only if not constant."

    def __init__(self, name, value, constant=False):
        self.name = name
        self._value = value
        self.constant = constant

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, value):
        if self.constant:
            raise StateError('Cannot replace variable "%s" as it is a constant.' % self.name)
        self._value = value

    def __repr__(self):
        kind = 'constant' if self.constant else 'variable'
        return '<%s %s = %s>' % (kind, self.name, self.value)


class SyntaxTree(list):
    """
    A node of the expression tree: a tag followed by the node's fields.

    >>> tree = SyntaxTree(['ADD', SyntaxTree(['NAME', 'x']), SyntaxTree(['NAME', 'y'])])
    >>> tree.tag, tree[1].body
    ('ADD', ['x'])
    """
    tag_pattern = re.compile('[A-Z]+$')

    tags = {
        'NUM', 'NAME', 'ASSIGN', 'NEG', 'ABS', 'FACT', 'CALL',
        'ADD', 'SUB', 'MUL', 'DIV', 'POW', 'MOD'
    }

    evaluator = lambda tree, env: NotImplemented
    # assign it in eval.py

    def __init__(self, tree):
        assert type(tree) in [list, tuple]
        assert tree and type(tree[0]) is str
        assert self.tag_pattern.match(tree[0]) and tree[0] in self.tags
        self[:] = tree

    @property
    def tag(self):
        return self[0]

    @property
    def body(self):
        return self[1:]

    def __setitem__(self, key, value):
        if key == 0 or isinstance(key, slice) and len(self):
            raise IndexError('cannot change the tag of a syntax tree')
        super().__setitem__(key, value)

    def evaluate(self, env):
        return SyntaxTree.evaluator(self, env)


def is_tree(obj):
    return isinstance(obj, SyntaxTree)

def tree_tag(obj):
    return obj.tag if is_tree(obj) else None
