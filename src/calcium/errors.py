"""
Errors raised by the calculator.

Every error derives from CalcError and from the builtin exception closest
to its meaning, so callers may catch either one.
"""


class CalcError(Exception):
    "Base class of all calculator errors."


class ParseError(CalcError, SyntaxError):
    "The token sequence does not form an expression."

    def __init__(self, message, offset):
        super().__init__(message)
        self.offset = offset

    def __str__(self):
        return self.args[0]


class UnknownTokenError(ParseError):
    "A character of the input starts no token."

    def __init__(self, char, offset):
        super().__init__('Unknown token start character "%s".' % char, offset)
        self.char = char


class EvaluationError(CalcError):
    "An expression failed to evaluate."
    kind = None


class UnresolvedReferenceError(EvaluationError, NameError):
    "A variable or function name is not bound."
    kind = 'reference'


class InvalidArgumentError(EvaluationError, TypeError):
    "A value has the wrong variant, shape or count."
    kind = 'argument'


class DivisionByZeroError(EvaluationError, ZeroDivisionError):
    "Division by an exact zero."
    kind = 'arithmetic'


class StateError(EvaluationError):
    "A constant or a builtin function would be replaced."
    kind = 'state'
