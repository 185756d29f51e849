"""
Function symbols: the values bound to names in the function table.

A function symbol receives its arguments unevaluated, together with the
symbol table of the call, so that it may choose the scope in which each
argument is evaluated.
"""

import inspect

from .objects import ComplexNumber, Variable, convert_output, expect_complex, tree_tag
from .errors import InvalidArgumentError


class FunctionSymbol:
    def __init__(self, builtin=False):
        self.builtin = builtin

    def evaluate(self, args, env):
        raise NotImplementedError

    @staticmethod
    def check_count(args, expected):
        if len(args) < expected:
            raise InvalidArgumentError('Too few arguments (%d) were passed, expected %d.'
                                       % (len(args), expected))
        if len(args) > expected:
            raise InvalidArgumentError('Too many arguments (%d) were passed, expected %d.'
                                       % (len(args), expected))

    @staticmethod
    def get_real(args, env, index):
        if len(args) <= index:
            raise InvalidArgumentError('Too few arguments were passed, expected at least %d.'
                                       % (index + 1))
        value = args[index].evaluate(env)
        if not isinstance(value, ComplexNumber) or not value.is_real():
            raise InvalidArgumentError('Argument %d is not a real number (%s), '
                                       'while a real number was expected.' % (index, value))
        return value

    @staticmethod
    def get_integer(args, env, index):
        if len(args) <= index:
            raise InvalidArgumentError('Too few arguments were passed, expected at least %d.'
                                       % (index + 1))
        value = args[index].evaluate(env)
        if not isinstance(value, ComplexNumber) or not value.is_integer():
            raise InvalidArgumentError('Argument %d is not an integer number (%s), '
                                       'while an integer number was expected.' % (index, value))
        return value.int_value()


class NativeFunction(FunctionSymbol):
    "A native function of a fixed number of complex arguments."

    def __init__(self, func, builtin=False):
        super().__init__(builtin)
        self.func = func
        self.arity = len(inspect.signature(func).parameters)

    def evaluate(self, args, env):
        self.check_count(args, self.arity)
        values = [expect_complex(arg.evaluate(env)) for arg in args]
        return convert_output(self.func(*values))

    def __repr__(self):
        return '<native %s/%d>' % (self.func.__name__, self.arity)


class OneArgumentFunction(FunctionSymbol):
    "A native function of one value, also given the symbol table."

    def __init__(self, func, builtin=False):
        super().__init__(builtin)
        self.func = func

    def evaluate(self, args, env):
        self.check_count(args, 1)
        value = args[0].evaluate(env)
        return convert_output(self.func(value, env))

    def __repr__(self):
        return '<function %s>' % self.func.__name__


class RandomNumberFunction(FunctionSymbol):
    "random(): a real number drawn uniformly in [0, 1)."

    def __init__(self):
        super().__init__(builtin=True)

    def evaluate(self, args, env):
        self.check_count(args, 0)
        return ComplexNumber(env.random.random())


class RandomIntegerFunction(FunctionSymbol):
    """
    rand_int(min, max) in [min, max). With one bound, rand_int(n) is in
    [0, n) for n > 0 and in (n, 0] for n < 0.
    """

    def __init__(self):
        super().__init__(builtin=True)

    def evaluate(self, args, env):
        if len(args) > 2:
            raise InvalidArgumentError('Too many arguments (%d), expected maximum 2.' % len(args))

        first = self.get_integer(args, env, 0)
        if len(args) == 2:
            low, high = first, self.get_integer(args, env, 1)
        elif first < 0:
            low, high = first + 1, 1
        elif first == 0:
            raise InvalidArgumentError('The bound of rand_int cannot be 0.')
        else:
            low, high = 0, first

        if low >= high:
            raise InvalidArgumentError('The minimum bound (%d) is not less than '
                                       'the maximum bound (%d).' % (low, high))
        return ComplexNumber(int(env.random.integers(low, high)))


class SumFunction(FunctionSymbol):
    """
    sum(min, max, name, body): the sum of body for name = min ... max - 1.

    The body is evaluated in a copy of the table where name is a private
    variable, so the binding does not leak into the caller.
    """

    def __init__(self):
        super().__init__(builtin=True)

    def evaluate(self, args, env):
        self.check_count(args, 4)

        low = self.get_integer(args, env, 0)
        high = self.get_integer(args, env, 1)
        if low > high:
            raise InvalidArgumentError('The max bound (%d) is smaller than the min bound (%d).'
                                       % (high, low))

        var, body = args[2], args[3]
        if tree_tag(var) != 'NAME':
            raise InvalidArgumentError('Expected a variable name for argument 3.')
        name = var[1]

        scope = env.copy()
        scope.put_variable(Variable(name, ComplexNumber(low)))

        real = imag = 0.0
        for i in range(low, high):
            scope.set_variable(name, ComplexNumber(i))
            res = expect_complex(body.evaluate(scope))
            real += res.real
            imag += res.imag

        return ComplexNumber(real, imag)
