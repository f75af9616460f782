from .complex import Complex
from .errors import DimensionMismatch, DivisionByZero, InvalidDegree, ParseError, RingPolyError, UnknownName
from .evaluator import Environment, evaluate
from .matrix import Matrix
from .poly import Polynomial

__all__ = [
    "Complex",
    "DimensionMismatch",
    "DivisionByZero",
    "Environment",
    "InvalidDegree",
    "Matrix",
    "ParseError",
    "Polynomial",
    "RingPolyError",
    "UnknownName",
    "evaluate",
]
