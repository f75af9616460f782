from __future__ import annotations

import dataclasses
import random
from typing import Callable

from .complex import Complex
from .errors import DimensionMismatch
from .poly import Polynomial


@dataclasses.dataclass(frozen=True)
class Matrix:
    """
    An immutable matrix of polynomials, stored as a flat row-major tuple, with width columns and height rows.
    Entries given as numbers are promoted to constant polynomials. Matrices may be constructed directly::

    >>> Matrix(2, 1, (Polynomial([1, 1]), 3))
    Matrix([[Polynomial('(1)X + (1)'), Polynomial('(3)')]])

    From a list of rows::

    >>> print(Matrix.from_rows([[Polynomial([0, 1]), 0], [0, Polynomial([0, 0, 1])]]))
    [(1)X, 0]
    [0, (1)X2]

    Or as special matrices::

    >>> print(Matrix.identity(2))
    [(1), 0]
    [0, (1)]
    """
    width: int
    height: int
    content: tuple[Polynomial, ...]

    def __post_init__(self):
        if not (self.width >= 1 and self.height >= 1):
            raise DimensionMismatch(f"A matrix needs at least one row and one column, was given {self.width} x {self.height}.")
        content = tuple(Polynomial.coerce(p) for p in self.content)
        if len(content) != self.width * self.height:
            raise DimensionMismatch(
                f"A {self.width} x {self.height} matrix needs {self.width * self.height} entries, but {len(content)} were given."
            )
        object.__setattr__(self, 'content', content)

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width), in the usual rows-then-columns order."""
        return self.height, self.width

    def indices(self):
        return ((i, j) for i in range(self.height) for j in range(self.width))

    @classmethod
    def from_rows(cls, rows: list[list[Polynomial]]) -> Matrix:
        """
        Construct a matrix from a list of rows, which must all have the same length.

        >>> Matrix.from_rows([[1, 2, 3], [4, 5, 6]]).shape
        (2, 3)
        """
        if not rows or not rows[0]:
            raise DimensionMismatch("Cannot build a matrix from no rows.")
        width = len(rows[0])
        if not all(len(row) == width for row in rows):
            raise DimensionMismatch(f"Rows have differing lengths: {[len(row) for row in rows]}")
        return cls(width, len(rows), tuple(x for row in rows for x in row))

    @classmethod
    def zero(cls, width: int, height: int) -> Matrix:
        return cls(width, height, tuple(Polynomial.zero() for _ in range(width * height)))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        return cls(size, size, tuple(
            Polynomial.one() if i == j else Polynomial.zero() for i in range(size) for j in range(size)
        ))

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        rand: random.Random | None = None,
        degree: int | None = None,
        bound: float = 10.0,
    ) -> Matrix:
        """Sample a matrix whose entries come from Polynomial.random."""
        rand = rand if rand is not None else random.Random()
        return cls(width, height, tuple(Polynomial.random(rand, degree, bound) for _ in range(width * height)))

    def rows(self) -> list[list[Polynomial]]:
        return [list(self.content[self.width * i:self.width * (i + 1)]) for i in range(self.height)]

    def _checkbounds(self, i, j):
        if not (0 <= i < self.height and 0 <= j < self.width):
            raise IndexError(f"Index ({i}, {j}) out of range for matrix with {self.height} rows and {self.width} columns")

    def __getitem__(self, key) -> Polynomial:
        """
        For a matrix M, M[i, j] returns the zero-indexed entry in row i and column j.

        >>> M = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        >>> M[1, 0]
        Polynomial('(4)')
        """
        if not isinstance(key, tuple) or len(key) != 2:
            raise KeyError(f"Supplied key {key!r} should be a tuple of length 2.")

        i, j = key
        self._checkbounds(i, j)
        return self.content[self.width * i + j]

    def _check_same_shape(self, other: Matrix, verb: str):
        if self.shape != other.shape:
            raise DimensionMismatch(f"Cannot {verb} matrices of incompatible shapes: {self.shape} and {other.shape}")

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented

        self._check_same_shape(other, 'add')
        return Matrix(self.width, self.height, tuple(a + b for a, b in zip(self.content, other.content)))

    def add_in_ring(self, other: Matrix, ring: int) -> Matrix:
        """Add entry by entry in the ring C[x]/(x^ring - 1)."""
        if not isinstance(other, Matrix):
            raise TypeError(f"Cannot add a Matrix and a {type(other).__name__} in a ring.")
        self._check_same_shape(other, 'add')
        return Matrix(self.width, self.height, tuple(a.add_in_ring(b, ring) for a, b in zip(self.content, other.content)))

    def __neg__(self):
        return self.map(lambda p: -p)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented

        self._check_same_shape(other, 'subtract')
        return Matrix(self.width, self.height, tuple(a - b for a, b in zip(self.content, other.content)))

    def _product(
        self,
        other: Matrix,
        mul: Callable[[Polynomial, Polynomial], Polynomial],
        add: Callable[[Polynomial, Polynomial], Polynomial],
    ) -> Matrix:
        if self.width != other.height:
            raise DimensionMismatch(f"Matrix dimensions incompatible: {self.shape} * {other.shape}")

        newdata = [Polynomial.zero()] * (self.height * other.width)
        for i in range(self.height):
            for j in range(other.width):
                for k in range(self.width):
                    idx = other.width * i + j
                    newdata[idx] = add(newdata[idx], mul(self.content[self.width * i + k], other.content[other.width * k + j]))

        return Matrix(other.width, self.height, tuple(newdata))

    def __mul__(self, other):
        """
        Matrix product, or scaling every entry when multiplied by a polynomial or a number.

        >>> M = Matrix.from_rows([[1, Polynomial([0, 1])], [1, 0]])
        >>> print(M * M)
        [(1)X + (1), (1)X]
        [(1), (1)X]
        >>> print(M * 2)
        [(2), (2)X]
        [(2), 0]
        """
        if isinstance(other, Matrix):
            return self._product(other, Polynomial.__mul__, Polynomial.__add__)

        if isinstance(other, Polynomial) or _is_scalar(other):
            return self.map(lambda p: p * other)

        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Polynomial) or _is_scalar(other):
            return self.map(lambda p: other * p)

        return NotImplemented

    def mul_in_ring(self, other: Matrix, ring: int) -> Matrix:
        """
        Matrix product in the ring C[x]/(x^ring - 1): every entry product and every partial sum is reduced.

        >>> x = Polynomial([0, 1])
        >>> print(Matrix.from_rows([[x, x]]).mul_in_ring(Matrix.from_rows([[x], [x]]), 2))
        [(2)]
        """
        if not isinstance(other, Matrix):
            raise TypeError(f"Cannot multiply a Matrix and a {type(other).__name__} in a ring.")

        return self._product(
            other,
            lambda a, b: a.mul_in_ring(b, ring),
            lambda a, b: a.add_in_ring(b, ring),
        )

    def reduce_to(self, ring: int) -> Matrix:
        """Reduce every entry into C[x]/(x^ring - 1)."""
        return self.map(lambda p: p.reduce_to(ring))

    def degree(self) -> int:
        """The largest degree among the (trimmed) entries."""
        return max(p.trim().degree for p in self.content)

    def transpose(self) -> Matrix:
        return Matrix(self.height, self.width, tuple(self[j, i] for i in range(self.width) for j in range(self.height)))

    def entries(self):
        """Return an iterator over the entries of the matrix, in row-major order."""
        return iter(self.content)

    def map(self, f: Callable[[Polynomial], Polynomial]) -> Matrix:
        """Map a function over the entries of the matrix."""
        return Matrix(self.width, self.height, tuple(f(p) for p in self.content))

    def __repr__(self):
        if self.height == 1:
            return 'Matrix([[' + ', '.join(repr(p) for p in self.content) + ']])'
        if self.width == 1:
            return 'Matrix([' + ', '.join(f'[{p!r}]' for p in self.content) + '])'
        return '\n'.join([
            'Matrix([',
            *('    [' + ', '.join(repr(p) for p in row) + '],' for row in self.rows()),
            '])',
        ])

    def __str__(self):
        return '\n'.join('[' + ', '.join(str(p) for p in row) + ']' for row in self.rows())


def _is_scalar(x) -> bool:
    return isinstance(x, (Complex, int, float, complex))
