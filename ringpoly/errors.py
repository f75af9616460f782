"""
Exceptions raised by ringpoly. Each one also derives from the builtin exception a caller would naturally catch, so
`except ValueError` keeps working for shape and degree problems.
"""


class RingPolyError(Exception):
    """Base class for every error raised by this package."""


class DimensionMismatch(RingPolyError, ValueError):
    """Matrix shapes are incompatible for construction, addition or multiplication."""


class DivisionByZero(RingPolyError, ZeroDivisionError):
    """Division by the zero polynomial, or by the zero complex number."""


class InvalidDegree(RingPolyError, ValueError):
    """A declared degree does not agree with the number of coefficients supplied."""


class ParseError(RingPolyError, ValueError):
    pass


class UnknownName(RingPolyError, KeyError):
    def __str__(self):
        # KeyError quotes its argument, which reads badly in the calculator.
        return str(self.args[0]) if self.args else ''
