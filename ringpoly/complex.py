"""
Complex numbers with float real and imaginary parts.

Equality is exact: two values are equal only if both parts compare equal as floats, there is no tolerance.
"""
from __future__ import annotations

import dataclasses
import math
import random
from typing import ClassVar

from .errors import DivisionByZero, ParseError


def fmt_float(x: float) -> str:
    """
    Format a float the short way: integral values lose their trailing '.0'.

    >>> fmt_float(3.0), fmt_float(-0.5), fmt_float(-0.0)
    ('3', '-0.5', '0')
    """
    if x.is_integer() and abs(x) < 1e16:
        return str(int(x))
    return repr(x)


@dataclasses.dataclass(frozen=True)
class Complex:
    """
    A complex number re + im*i.

    >>> Complex(2, 5) + Complex(-1, 10)
    Complex('1 + 15i')
    >>> Complex(2, 5) * Complex(-1, 10)
    Complex('-52 + 15i')
    >>> Complex(0, 5) * Complex(3, 4)
    Complex('-20 + 15i')
    """
    re: float
    im: float = 0.0

    ZERO: ClassVar[Complex]
    ONE: ClassVar[Complex]

    def __post_init__(self):
        object.__setattr__(self, 're', float(self.re))
        object.__setattr__(self, 'im', float(self.im))

    @staticmethod
    def coerce(other: int | float | complex | Complex) -> Complex:
        if isinstance(other, Complex):
            return other
        if isinstance(other, (int, float)):
            return Complex(other, 0.0)
        if isinstance(other, complex):
            return Complex(other.real, other.imag)
        raise TypeError(f"Cannot coerce {other!r} to a Complex")

    def is_zero(self) -> bool:
        return self.re == 0 and self.im == 0

    def conjugate(self) -> Complex:
        return Complex(self.re, -self.im)

    def __neg__(self) -> Complex:
        return Complex(-self.re, -self.im)

    def __add__(self, other) -> Complex:
        if not isinstance(other, (Complex, int, float, complex)):
            return NotImplemented
        other = Complex.coerce(other)
        return Complex(self.re + other.re, self.im + other.im)

    def __sub__(self, other) -> Complex:
        if not isinstance(other, (Complex, int, float, complex)):
            return NotImplemented
        other = Complex.coerce(other)
        return Complex(self.re - other.re, self.im - other.im)

    def __rsub__(self, other) -> Complex:
        return (-self) + other

    def __mul__(self, other) -> Complex:
        if not isinstance(other, (Complex, int, float, complex)):
            return NotImplemented
        other = Complex.coerce(other)
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    __radd__ = __add__
    __rmul__ = __mul__

    def __truediv__(self, other) -> Complex:
        """
        True complex division.

        >>> Complex(-52, 15) / Complex(-1, 10)
        Complex('2 + 5i')
        >>> Complex(1, 1) / 0
        Traceback (most recent call last):
            ...
        ringpoly.errors.DivisionByZero: Complex division by zero: (1 + 1i) / 0
        """
        if not isinstance(other, (Complex, int, float, complex)):
            return NotImplemented
        other = Complex.coerce(other)
        if other.is_zero():
            raise DivisionByZero(f"Complex division by zero: ({self}) / {other}")

        # Scale the divisor by a power of two so that its squared magnitude lies in [1/4, 2). Scaling by 2^e is exact,
        # so results of ordinary magnitude are the same as with the unscaled formula.
        _, e = math.frexp(max(abs(other.re), abs(other.im)))
        c, d = math.ldexp(other.re, -e), math.ldexp(other.im, -e)
        denom = c * c + d * d
        return Complex(
            math.ldexp(self.re * c + self.im * d, -e) / denom,
            math.ldexp(self.im * c - self.re * d, -e) / denom,
        )

    def __rtruediv__(self, other) -> Complex:
        if not isinstance(other, (Complex, int, float, complex)):
            return NotImplemented
        return Complex.coerce(other) / self

    def __abs__(self) -> float:
        return math.hypot(self.re, self.im)

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __str__(self):
        """
        >>> print(Complex(0, 0), Complex(-1, 0), Complex(0, 2.5), Complex(1, -2), sep=', ')
        0, -1, 2.5i, 1 - 2i
        """
        if self.is_zero():
            return '0'
        if self.im == 0:
            return fmt_float(self.re)
        if self.re == 0:
            return f'{fmt_float(self.im)}i'

        sign = '-' if self.im < 0 else '+'
        return f'{fmt_float(self.re)} {sign} {fmt_float(abs(self.im))}i'

    def __repr__(self):
        return f"Complex('{self}')"

    @classmethod
    def parse(cls, text: str) -> Complex:
        """
        Parse the display form of a complex number. Spaces are ignored, and the imaginary unit on its own means 1i.

        >>> Complex.parse('1.23 + 3.45i')
        Complex('1.23 + 3.45i')
        >>> Complex.parse('-2.0 - 1.0i'), Complex.parse('-i'), Complex.parse('4'), Complex.parse('1e-3i')
        (Complex('-2 - 1i'), Complex('-1i'), Complex('4'), Complex('0.001i'))
        """
        s = ''.join(text.split())
        if not s:
            raise ParseError("Empty complex number")

        try:
            if not s.endswith('i'):
                return cls(float(s), 0.0)

            body = s[:-1]
            # The imaginary part starts at the last sign which is neither leading nor part of an exponent.
            split = 0
            for k in range(len(body) - 1, 0, -1):
                if body[k] in '+-' and body[k - 1] not in 'eE':
                    split = k
                    break

            re_text, im_text = body[:split], body[split:]
            im = 1.0 if im_text in ('', '+') else -1.0 if im_text == '-' else float(im_text)
            return cls(float(re_text) if re_text else 0.0, im)
        except ValueError as e:
            raise ParseError(f"Cannot parse {text!r} as a complex number") from e

    @classmethod
    def random(cls, rand: random.Random | None = None, bound: float = 10.0) -> Complex:
        """Sample a complex number with both parts uniform in [-bound, bound)."""
        rand = rand if rand is not None else random.Random()
        return cls(rand.uniform(-bound, bound), rand.uniform(-bound, bound))


Complex.ZERO = Complex(0.0, 0.0)
Complex.ONE = Complex(1.0, 0.0)
