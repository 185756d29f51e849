"A calculator language over complex numbers."

from .objects import ComplexNumber, NONE, NoneValue, Value, Variable, SyntaxTree
from .errors import (
    CalcError, ParseError, UnknownTokenError, EvaluationError,
    UnresolvedReferenceError, InvalidArgumentError, DivisionByZeroError, StateError
)
from .parse import Lexer, Parser, parse, calc_parse
from .symbols import SymbolTable
from .eval import evaluate, calc_eval, eval_tree
from .format import calc_format

__version__ = '0.2.0'
