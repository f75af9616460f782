"""
Dense polynomials over the complex numbers, and the cyclic quotient rings C[x]/(x^n - 1).

A polynomial is stored as a tuple of coefficients starting with the constant term, so 1 - 2x + x^3 is the tuple
(1, -2, 0, 1) (each entry a Complex). Constructing a polynomial keeps the coefficients exactly as given, but every
arithmetic operation returns a trimmed result, where the leading coefficient is non-zero unless the degree is 0.
"""
from __future__ import annotations

import dataclasses
import functools
import itertools
import random
import re
from typing import Iterable

from .complex import Complex
from .errors import DivisionByZero, InvalidDegree, ParseError


# One term of the display form: a parenthesised complex coefficient, optionally followed by X or X<degree>.
_TERM = re.compile(r'\s*\(([^()]*)\)\s*(?:([Xx])(\d*))?\s*')


@dataclasses.dataclass(init=False, frozen=True)
class Polynomial:
    """
    A polynomial over the complex numbers, represented by a dense tuple of coefficients starting with the constant
    term. The zero polynomial has degree 0 and a single zero coefficient.

    >>> Polynomial([-1, 0, 1])
    Polynomial('(1)X2 + (-1)')
    >>> Polynomial([3, 1]) + Polynomial([1, -1])
    Polynomial('(4)')
    """
    coeffs: tuple[Complex, ...]

    def __init__(self, coeffs: Iterable[Complex | int | float | complex] = ()):
        coeffs = tuple(Complex.coerce(c) for c in coeffs)
        object.__setattr__(self, 'coeffs', coeffs if coeffs else (Complex.ZERO,))

    @classmethod
    def with_degree(cls, degree: int, coeffs: Iterable[Complex | int | float | complex]) -> Polynomial:
        """
        Construct a polynomial from a declared degree and its coefficients, which must number exactly degree + 1.

        >>> Polynomial.with_degree(1, [0, 1])
        Polynomial('(1)X')
        >>> Polynomial.with_degree(3, [0, 1])
        Traceback (most recent call last):
            ...
        ringpoly.errors.InvalidDegree: Declared degree 3 needs 4 coefficients, but 2 were given.
        """
        coeffs = tuple(coeffs)
        if degree < 0 or len(coeffs) != degree + 1:
            raise InvalidDegree(f"Declared degree {degree} needs {degree + 1} coefficients, but {len(coeffs)} were given.")

        return cls(coeffs)

    @classmethod
    def zero(cls) -> Polynomial:
        return cls()

    @classmethod
    def one(cls) -> Polynomial:
        return cls([Complex.ONE])

    @classmethod
    def monomial(cls, coeff: Complex | int | float | complex, k: int) -> Polynomial:
        """The polynomial coeff * x^k."""
        if k < 0:
            raise ValueError("Monomials must have a non-negative degree.")
        return cls([Complex.ZERO] * k + [Complex.coerce(coeff)])

    @staticmethod
    @functools.lru_cache(maxsize=64)
    def cyclic_modulus(ring: int) -> Polynomial:
        """
        The polynomial x^ring - 1 defining the cyclic quotient ring C[x]/(x^ring - 1).

        >>> Polynomial.cyclic_modulus(3)
        Polynomial('(1)X3 + (-1)')
        """
        if ring < 1:
            raise ValueError(f"The ring degree must be at least 1, was given {ring}.")

        return Polynomial([-1, *[0] * (ring - 1), 1])

    @property
    def degree(self) -> int:
        """The index of the highest stored coefficient. Only meaningful as the true degree once trimmed."""
        return len(self.coeffs) - 1

    def leading(self) -> Complex:
        return self.coeffs[-1]

    def is_zero(self) -> bool:
        return all(c.is_zero() for c in self.coeffs)

    def trim(self) -> Polynomial:
        """
        Strip high-degree zero coefficients, stopping at degree 0.

        >>> Polynomial([1, 2, 0, 0]).trim()
        Polynomial('(2)X + (1)')
        >>> Polynomial([0, 0]).trim() == Polynomial.zero()
        True
        """
        end = len(self.coeffs)
        while end > 1 and self.coeffs[end - 1].is_zero():
            end -= 1

        return self if end == len(self.coeffs) else Polynomial(self.coeffs[:end])

    def evaluate(self, x):
        """
        Evaluate the polynomial at a point, using Horner's rule.

        >>> Polynomial([1, 0, 1]).evaluate(Complex(0, 1))
        Complex('0')
        >>> Polynomial([1, 1, 1]).evaluate(Polynomial([0, 2]))
        Polynomial('(4)X2 + (2)X + (1)')
        """
        result = Complex.ZERO
        for c in reversed(self.coeffs):
            result = result * x + c
        return result

    def __str__(self):
        """
        Terms go from the highest degree down, zero terms are skipped, and the zero polynomial prints as 0.

        >>> print(Polynomial([Complex(1, 2), 0, Complex(0, -3), 5]))
        (5)X3 + (-3i)X2 + (1 + 2i)
        >>> print(Polynomial.zero())
        0
        """
        parts = []
        for i, c in reversed(list(enumerate(self.coeffs))):
            if c.is_zero():
                continue

            term = '' if i == 0 else 'X' if i == 1 else f'X{i}'
            parts += [f'({c}){term}']

        return ' + '.join(parts) if parts else '0'

    def __repr__(self):
        return f"Polynomial('{self}')"

    @classmethod
    def parse(cls, text: str) -> Polynomial:
        """
        Parse the display form back into a (trimmed) polynomial. Terms of the same degree are summed.

        >>> Polynomial.parse('(1.5 + 3i)X2 + (-2.0 - 1.0i)X + (-1.0 + 0.0i)')
        Polynomial('(1.5 + 3i)X2 + (-2 - 1i)X + (-1)')
        >>> Polynomial.parse('(1)X + (2)X + (1 - 2i)X3')
        Polynomial('(1 - 2i)X3 + (3)X')
        >>> Polynomial.parse('X2')
        Traceback (most recent call last):
            ...
        ringpoly.errors.ParseError: Expected a term like (1 + 2i)X3 at position 0 of 'X2'.
        """
        stripped = text.strip()
        if stripped == '0':
            return cls.zero()
        if not stripped:
            raise ParseError("Cannot parse an empty polynomial.")

        terms: dict[int, Complex] = {}
        pos = 0
        while True:
            m = _TERM.match(stripped, pos)
            if m is None:
                raise ParseError(f"Expected a term like (1 + 2i)X3 at position {pos} of {stripped!r}.")

            coeff = Complex.parse(m[1])
            degree = 0 if m[2] is None else int(m[3]) if m[3] else 1
            terms[degree] = terms.get(degree, Complex.ZERO) + coeff

            pos = m.end()
            if pos == len(stripped):
                break
            if stripped[pos] != '+':
                raise ParseError(f"Expected '+' between terms at position {pos} of {stripped!r}.")
            pos += 1

        coeffs = [Complex.ZERO] * (max(terms) + 1)
        for degree, coeff in terms.items():
            coeffs[degree] = coeff

        return cls(coeffs).trim()

    @staticmethod
    def coerce(other) -> Polynomial:
        if isinstance(other, Polynomial):
            return other
        return Polynomial([Complex.coerce(other)])

    def __add__(self, other) -> Polynomial:
        if not isinstance(other, (Polynomial, Complex, int, float, complex)):
            return NotImplemented

        other = Polynomial.coerce(other)
        return Polynomial([
            c + d for c, d in itertools.zip_longest(self.coeffs, other.coeffs, fillvalue=Complex.ZERO)
        ]).trim()

    def __neg__(self) -> Polynomial:
        return Polynomial([-c for c in self.coeffs])

    def __sub__(self, other) -> Polynomial:
        if not isinstance(other, (Polynomial, Complex, int, float, complex)):
            return NotImplemented
        return self + (-Polynomial.coerce(other))

    def __rsub__(self, other) -> Polynomial:
        return (-self) + other

    def __mul__(self, other) -> Polynomial:
        """
        Schoolbook multiplication. Multiplying by a scalar scales every coefficient.

        >>> Polynomial([1, 1]) * Polynomial([-1, 1])
        Polynomial('(1)X2 + (-1)')
        >>> Polynomial([1, 1]) * Complex(0, 1)
        Polynomial('(1i)X + (1i)')
        """
        if isinstance(other, (Complex, int, float, complex)):
            return Polynomial([c * other for c in self.coeffs]).trim()

        if isinstance(other, Polynomial):
            result = [Complex.ZERO] * (len(self.coeffs) + len(other.coeffs) - 1)
            for (i, c), (j, d) in itertools.product(enumerate(self.coeffs), enumerate(other.coeffs)):
                result[i + j] += c * d
            return Polynomial(result).trim()

        return NotImplemented

    __radd__ = __add__
    __rmul__ = __mul__

    @staticmethod
    def euclidean_division(numerator: Polynomial, denominator: Polynomial) -> tuple[Polynomial, Polynomial]:
        """
        Return the quotient and remainder of numerator / denominator by long division, i.e. the solution to
        n = dq + r where deg(r) < deg(d). When d is a non-zero constant the remainder is the zero polynomial.

        >>> Polynomial.euclidean_division(Polynomial([1, 0, -1, 0, 0, 1]), Polynomial([-1, 0, 1]))
        (Polynomial('(1)X3 + (1)X + (-1)'), Polynomial('(1)X'))
        >>> divmod(Polynomial([-1, 0, 1]), Polynomial([2, 2]))
        (Polynomial('(0.5)X + (-0.5)'), Polynomial('0'))
        """
        if denominator.is_zero():
            raise DivisionByZero(f"Cannot divide {numerator} by the zero polynomial.")

        n, d = numerator.trim(), denominator.trim()
        if n.degree < d.degree:
            return Polynomial.zero(), n

        lead = d.leading()
        quotient = [Complex.ZERO] * (n.degree - d.degree + 1)
        r = n
        while not r.is_zero() and r.degree >= d.degree:
            k = r.degree - d.degree
            t = r.leading() / lead
            quotient[k] += t

            # Subtract t x^k d. The leading term cancels by construction, so drop it instead of trusting the rounding.
            coeffs = list(r.coeffs)
            for i, c in enumerate(d.coeffs):
                coeffs[i + k] -= t * c
            r = Polynomial(coeffs[:-1]).trim()

        return Polynomial(quotient).trim(), r

    def __divmod__(self, other: Polynomial) -> tuple[Polynomial, Polynomial]:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial.euclidean_division(self, other)

    def __floordiv__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial.euclidean_division(self, other)[0]

    def __mod__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial.euclidean_division(self, other)[1]

    def reduce_to(self, ring: int) -> Polynomial:
        """
        Reduce into the ring C[x]/(x^ring - 1), by taking the remainder on division by x^ring - 1. Polynomials of
        degree below the ring degree are returned as they are.

        >>> Polynomial([0, -1, -16, 18, 16, 1, 1]).reduce_to(4)
        Polynomial('(18)X3 + (-15)X2 + (16)')
        """
        if ring < 1:
            raise ValueError(f"The ring degree must be at least 1, was given {ring}.")
        if self.degree < ring:
            return self

        return Polynomial.euclidean_division(self, Polynomial.cyclic_modulus(ring))[1]

    def add_in_ring(self, other: Polynomial, ring: int) -> Polynomial:
        """Reduce both operands into C[x]/(x^ring - 1), then add them."""
        return self.reduce_to(ring) + other.reduce_to(ring)

    def mul_in_ring(self, other: Polynomial, ring: int) -> Polynomial:
        """
        Reduce both operands into C[x]/(x^ring - 1), multiply them, and reduce the product back into the ring.

        >>> Polynomial([3, 1]).mul_in_ring(Polynomial([1, -1]), 2)
        Polynomial('(-2)X + (2)')
        """
        return (self.reduce_to(ring) * other.reduce_to(ring)).reduce_to(ring)

    @classmethod
    def random(cls, rand: random.Random | None = None, degree: int | None = None, bound: float = 10.0) -> Polynomial:
        """Sample a polynomial with coefficients from Complex.random, of the given degree or a random one up to 10."""
        rand = rand if rand is not None else random.Random()
        degree = degree if degree is not None else rand.randint(0, 10)
        return cls([Complex.random(rand, bound) for _ in range(degree + 1)])
