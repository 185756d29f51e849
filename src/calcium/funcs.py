"""
Elementary functions over ComplexNumber.

Each function takes the real shortcut when its argument is real (and inside
the real domain of the function), otherwise it uses the complex formula.
The inverse functions follow Kahan's compositions of sqrt and ln, which
stay accurate near the branch points.
"""

import math
from functools import wraps
import numpy as np

from .objects import ComplexNumber

PI_2 = math.pi / 2
LN_10 = math.log(10)


def ieee(ufunc):
    "Evaluate a numpy ufunc on floats, with inf and nan in place of errors."
    @wraps(ufunc)
    def f(*args):
        with np.errstate(all='ignore'):
            return float(ufunc(*args))
    return f

_exp, _log, _pow = ieee(np.exp), ieee(np.log), ieee(np.power)
_sin, _cos, _tan = ieee(np.sin), ieee(np.cos), ieee(np.tan)
_sinh, _cosh, _tanh = ieee(np.sinh), ieee(np.cosh), ieee(np.tanh)
_asin, _acos, _atan = ieee(np.arcsin), ieee(np.arccos), ieee(np.arctan)
_asinh, _acosh, _atanh = ieee(np.arcsinh), ieee(np.arccosh), ieee(np.arctanh)


def polar(r, theta):
    return ComplexNumber(r * _cos(theta), r * _sin(theta))


def sqr(z):
    return z * z


def sqrt(z):
    """
    The principal square root; the sign of the imaginary part follows the
    sign of the imaginary part of z.

    >>> sqrt(ComplexNumber(-1))
    ComplexNumber(0.0, 1.0)
    >>> sqrt(ComplexNumber(-4, -0.0))
    ComplexNumber(0.0, 2.0)
    """
    x, y = z.real, z.imag

    if x == 0.0:
        t = math.sqrt(abs(y) / 2)
        return ComplexNumber(t, -t if y < 0.0 else t)
    else:
        t = math.sqrt(2 * (z.abs() + abs(x)))
        u = t / 2
        if x > 0.0:
            return ComplexNumber(u, y / t)
        else:
            return ComplexNumber(abs(y) / t, -u if y < 0.0 else u)


def exp(z):
    if z.is_real():
        return ComplexNumber(_exp(z.real))
    return polar(_exp(z.real), z.imag)


def ln(z):
    return ComplexNumber(_log(z.abs()), z.arg())


def log(z):
    "The logarithm in base 10."
    return ln(z) / LN_10


def power(z, n):
    """
    Raise z to the power n, both being ComplexNumber.

    An integer exponent above 1 only multiplies, so Gaussian integers
    stay exact.

    >>> power(ComplexNumber(2, 2), ComplexNumber(2))
    ComplexNumber(0.0, 8.0)
    """
    if z == ComplexNumber.ZERO:
        return ComplexNumber.ZERO

    if n.is_real() and n.real > 1 and n.is_integer():
        return int_power(z, n.int_value())

    if n.is_real():
        return real_power(z, n.real)

    return exp(n * ln(z))


def int_power(z, e):
    "Exponentiation by squaring, for e >= 1."
    result = None
    while e:
        if e & 1:
            result = z if result is None else result * z
        e >>= 1
        if e:
            z = z * z
    return result


def real_power(z, n):
    if z.is_real() and z.real > 0.0:
        return ComplexNumber(_pow(z.real, n))

    t = ln(z)
    return polar(_exp(n * t.real), n * t.imag)


# trigonometric functions

def sin(z):
    if z.is_real():
        x = z.real
        if (x / math.pi).is_integer():  # x is a multiple of pi
            return ComplexNumber.ZERO
        return ComplexNumber(_sin(x))

    return ComplexNumber(_sin(z.real) * _cosh(z.imag),
                         _cos(z.real) * _sinh(z.imag))


def cos(z):
    if z.is_real():
        return ComplexNumber(_cos(z.real))

    return ComplexNumber(_cos(z.real) * _cosh(z.imag),
                         -_sin(z.real) * _sinh(z.imag))


def tan(z):
    if z.is_real():
        return ComplexNumber(_tan(z.real))
    return sin(z) / cos(z)


def asin(z):
    if z.is_real() and abs(z.real) <= 1.0:
        return ComplexNumber(_asin(z.real))

    # asin(z) = -i asinh(iz)
    t = asinh(ComplexNumber(-z.imag, z.real))
    return ComplexNumber(t.imag, -t.real)


def acos(z):
    if z.is_real() and abs(z.real) <= 1.0:
        return ComplexNumber(_acos(z.real))

    t = asin(z)
    return ComplexNumber(PI_2 - t.real, -t.imag)


def atan(z):
    if z.is_real():
        return ComplexNumber(_atan(z.real))

    x, y = z.real, z.imag
    xx = x * x
    d = 1.0 - xx - y * y
    num = xx + (y + 1.0) ** 2
    den = xx + (y - 1.0) ** 2

    return ComplexNumber(0.5 * math.atan2(2.0 * x, d),
                         0.25 * (_log(num) - _log(den)))


# hyperbolic functions

def sinh(z):
    if z.is_real():
        return ComplexNumber(_sinh(z.real))

    return ComplexNumber(_sinh(z.real) * _cos(z.imag),
                         _cosh(z.real) * _sin(z.imag))


def cosh(z):
    if z.is_real():
        return ComplexNumber(_cosh(z.real))

    return ComplexNumber(_cosh(z.real) * _cos(z.imag),
                         _sinh(z.real) * _sin(z.imag))


def tanh(z):
    if z.is_real():
        return ComplexNumber(_tanh(z.real))
    return sinh(z) / cosh(z)


def asinh(z):
    if z.is_real():
        return ComplexNumber(_asinh(z.real))

    x, y = z.real, z.imag
    # sqrt(z^2 + 1), with z^2 computed as (x-y)(x+y) + 2xyi
    t = sqrt(ComplexNumber((x - y) * (x + y) + 1.0, 2.0 * x * y))
    return ln(z + t)


def acosh(z):
    if z.is_real() and z.real >= 1.0:
        return ComplexNumber(_acosh(z.real))

    # Kahan: 2 ln(sqrt((z+1)/2) + sqrt((z-1)/2))
    return ln(sqrt((z + 1.0) * 0.5) + sqrt((z - 1.0) * 0.5)) * 2.0


def atanh(z):
    if z.is_real() and abs(z.real) < 1.0:
        return ComplexNumber(_atanh(z.real))

    x, y = z.real, z.imag
    yy = y * y
    d = 1.0 - yy - x * x
    num = yy + (1.0 + x) ** 2
    den = yy + (1.0 - x) ** 2

    return ComplexNumber(0.25 * (_log(num) - _log(den)),
                         0.5 * math.atan2(2.0 * y, d))
