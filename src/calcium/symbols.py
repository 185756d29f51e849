import numpy as np

from .objects import Variable
from .errors import StateError
from .utils.debug import log
from . import builtins


class SymbolTable:
    """
    The environment of evaluation: variables, functions and a random source.

    Constants and builtin functions cannot be replaced once registered.
    A copy shares the Variable and FunctionSymbol objects of this table
    but has its own bindings, so a new name defined in the copy does not
    reach this table while a shared variable being assigned does.
    """

    def __init__(self, seed=None, register=True):
        self.variables = {}
        self.functions = {}
        self.random = np.random.default_rng(seed)
        if register:
            self.register_builtins()

    def register_builtins(self):
        for name, value in builtins.constants.items():
            self.set_constant(name, value)
        for name, function in builtins.functions.items():
            self.set_function(name, function)

    def get_variable(self, name):
        return self.variables.get(name)

    def set_variable(self, name, value):
        "Assign the variable, defining it if it does not exist."
        variable = self.variables.get(name)
        if variable is not None:
            variable.value = value
        else:
            self.put_variable(Variable(name, value, constant=False))

    def put_variable(self, variable):
        "Bind a variable object, replacing the old binding unless it is a constant."
        old = self.variables.get(variable.name)
        if old is not None and old.constant:
            raise StateError('Cannot replace variable "%s" as it is a constant.'
                             % variable.name)
        self.variables[variable.name] = variable

    def set_constant(self, name, value):
        self.put_variable(Variable(name, value, constant=True))

    def get_function(self, name):
        return self.functions.get(name)

    def set_function(self, name, function):
        old = self.functions.get(name)
        if old is not None and old.builtin:
            raise StateError('Cannot replace function "%s" as it is a built-in function.'
                             % name)
        self.functions[name] = function

    def evaluate_expression(self, tree):
        "Evaluate the tree and bind the result to Ans."
        result = tree.evaluate(self)
        self.set_variable('Ans', result)
        return result

    def copy(self):
        "A table sharing the bindings of this one, with its own random source."
        table = SymbolTable(seed=int(self.random.integers(2 ** 63)), register=False)
        table.variables.update(self.variables)
        table.functions.update(self.functions)
        return table

    def clear(self):
        "Remove every binding and register the builtins again."
        log('clearing %r' % self)
        self.variables.clear()
        self.functions.clear()
        self.register_builtins()

    def user_variables(self):
        return [v for v in self.variables.values() if not v.constant]

    def __repr__(self):
        return '<SymbolTable: %d variables, %d functions>' % (
            len(self.variables), len(self.functions))
