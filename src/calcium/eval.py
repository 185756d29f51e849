"""
Evaluation of syntax trees.

There is one rule per tag of SyntaxTree, named after the tag and taking
the tree and the symbol table. Operands are evaluated from left to right;
an error aborts the whole evaluation without undoing earlier assignments.
"""

import sys
import math

from . import funcs
from .objects import ComplexNumber, SyntaxTree, expect_complex, expect_int
from .errors import ParseError, UnresolvedReferenceError, InvalidArgumentError, DivisionByZeroError
from .parse import calc_parse
from .symbols import SymbolTable
from .utils.debug import trace


float_max = sys.float_info.max


def NUM(tr, env):
    return tr[1]


def NAME(tr, env):
    name = tr[1]
    variable = env.get_variable(name)
    if variable is None:
        raise UnresolvedReferenceError('No variable with the name "%s" could be found.' % name)
    return variable.value


def ASSIGN(tr, env):
    _, name, exp = tr
    val = eval_tree(exp, env)
    env.set_variable(name, val)
    return val


def CALL(tr, env):
    _, name, *args = tr
    function = env.get_function(name)
    if function is None:
        raise UnresolvedReferenceError('No function with the name "%s" could be found.' % name)
    return function.evaluate(args, env)


# unary operations

def NEG(tr, env):
    return -expect_complex(eval_tree(tr[1], env))


def ABS(tr, env):
    return ComplexNumber(expect_complex(eval_tree(tr[1], env)).abs())


def FACT(tr, env):
    n = expect_int(eval_tree(tr[1], env))
    if n < 0:
        raise InvalidArgumentError('Factorial is only defined for natural numbers (and zero).')

    res = 1
    for i in range(2, n + 1):
        res *= i
        if res > float_max:
            return ComplexNumber(math.inf)
    return ComplexNumber(res)


# binary operations

def operands(tr, env):
    _, left, right = tr
    x = expect_complex(eval_tree(left, env))
    y = expect_complex(eval_tree(right, env))
    return x, y

def ADD(tr, env):
    x, y = operands(tr, env)
    return x + y

def SUB(tr, env):
    x, y = operands(tr, env)
    return x - y

def MUL(tr, env):
    x, y = operands(tr, env)
    return x * y

def DIV(tr, env):
    x, y = operands(tr, env)
    return x / y

def POW(tr, env):
    x, y = operands(tr, env)
    return funcs.power(x, y)

def MOD(tr, env):
    _, left, right = tr
    b = expect_int(eval_tree(left, env))
    n = expect_int(eval_tree(right, env))
    if n == 0:
        raise DivisionByZeroError('Division by 0')
    return ComplexNumber(b % n)  # floor modulus, with the sign of n


eval_rules = {name: rule for name, rule in
              globals().items() if name.isupper()}

assert set(eval_rules) == SyntaxTree.tags, 'every tag needs a rule'


@trace
def eval_tree(tree, env):
    try:
        rule = eval_rules[tree.tag]
    except (KeyError, AttributeError):
        raise TypeError('unknown syntax tree type: %r' % (tree,)) from None
    return rule(tree, env)


SyntaxTree.evaluator = eval_tree


def evaluate(tree, env):
    "Evaluate a parsed expression and bind the result to Ans."
    return env.evaluate_expression(tree)


Global = SymbolTable()


def calc_eval(text, env=None):
    """
    Parse and evaluate a whole line of text.

    >>> calc_eval('(2+2i) ** 2', SymbolTable())
    ComplexNumber(0.0, 8.0)
    """
    tree, rest = calc_parse(text)
    if rest:
        offset = len(text) - len(rest)
        raise ParseError('Unexpected "%s" after the expression.' % rest.split()[0], offset)

    if env is None: env = Global
    return evaluate(tree, env)
