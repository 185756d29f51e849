from functools import wraps
from sympy import pi, E

from .objects import ComplexNumber, NONE, convert_output, expect_complex
from .functions import (
    NativeFunction, OneArgumentFunction,
    RandomNumberFunction, RandomIntegerFunction, SumFunction
)
from . import funcs


def numeric(f, name=None):
    "Lift a function of one ComplexNumber into a builtin function symbol."
    @wraps(f)
    def apply(value, env):
        return f(expect_complex(value))
    if name: apply.__name__ = name
    return OneArgumentFunction(apply, builtin=True)


def polar(r, theta):
    return funcs.polar(r.real_value(), theta.real_value())


constants = {
    'i': ComplexNumber.I, 'pi': pi, 'e': E, 'None': NONE
}

functions = {
    # basic functions
    'abs': lambda z: z.abs(), 'sqr': funcs.sqr, 'sqrt': funcs.sqrt,
    'exp': funcs.exp, 'ln': funcs.ln, 'log': funcs.log,
    # complex-related functions
    'arg': lambda z: z.arg(), 'Re': lambda z: z.real,
    'Im': lambda z: ComplexNumber(0.0, z.imag), 'conj': lambda z: z.conjugate(),
    # trigonometric functions
    'sin': funcs.sin, 'cos': funcs.cos, 'tan': funcs.tan,
    'asin': funcs.asin, 'acos': funcs.acos, 'atan': funcs.atan,
    # hyperbolic functions
    'sinh': funcs.sinh, 'cosh': funcs.cosh, 'tanh': funcs.tanh,
    'asinh': funcs.asinh, 'acosh': funcs.acosh, 'atanh': funcs.atanh,
}

for name, val in constants.items():
    constants[name] = convert_output(val)

for name, val in functions.items():
    functions[name] = numeric(val, name)

functions.update({
    'polar': NativeFunction(polar, builtin=True),
    'random': RandomNumberFunction(),
    'rand_int': RandomIntegerFunction(),
    'sum': SumFunction(),
})
