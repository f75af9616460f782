"""
polymat: packed numpy representation of polynomial matrices.

A matrix M with polynomial entries can be treated as a polynomial in ordinary complex matrices,
M = M_0 + M_1 x + ... + M_k x^k, and hence as a list [M_0, ..., M_k]. We pack this into a 3D complex
tensor indexed like (i, j, d), where (i, j) is the row and column and (d) is the degree. Functions
here broadcast along any prefix of extra leading axes, as in (α, I, J, D).

The arithmetic mirrors Matrix and Polynomial (schoolbook products, cyclic reduction modulo x^n - 1),
done a whole degree slice at a time.
"""

import numpy as np
import numpy.typing as npt

from .complex import Complex
from .errors import DimensionMismatch
from .matrix import Matrix
from .poly import Polynomial


def from_matrix(mat: Matrix, dtype: npt.DTypeLike = np.complex128) -> npt.NDArray:
    """
    Convert a Matrix to a polymat of shape (height, width, D), where D is one more than the largest degree
    of any (trimmed) entry.
    """
    D = mat.degree() + 1
    A = np.zeros((mat.height, mat.width, D), dtype=dtype)
    for i, j in mat.indices():
        coeffs = mat[i, j].trim().coeffs
        A[i, j, :len(coeffs)] = [complex(c) for c in coeffs]

    return A


def to_matrix(A: npt.NDArray) -> Matrix:
    """Return a polymat of shape (I, J, D) as a Matrix of trimmed polynomials."""
    if len(A.shape) != 3:
        raise DimensionMismatch(f"Expected a polymat of shape (I, J, D), was given {A.shape}.")

    I, J, _ = A.shape
    return Matrix(J, I, tuple(
        Polynomial([Complex(z.real, z.imag) for z in A[i, j, :]]).trim()
        for i in range(I)
        for j in range(J)
    ))


def trim(A: npt.NDArray) -> npt.NDArray:
    """
    Trim trailing zeros from a polymat, keeping at least the constant slice.
    (α, D) ↦ (α, K), where K ≥ 1 is least such that A[..., K:] consists entirely of zeros.
    """
    last = A.shape[-1]
    while last > 1 and not np.any(A[..., last - 1]):
        last -= 1

    return A[..., :last] if last < A.shape[-1] else A


def zeropad(A: npt.NDArray, D: int) -> npt.NDArray:
    """(α, I, J, L) ↦ (α, I, J, D) by padding with zeros. Must have L ≤ D."""
    if A.shape[-1] > D:
        raise ValueError(f"Cannot pad a polymat with {A.shape[-1]} degree slices down to {D}.")

    result = np.zeros((*A.shape[:-1], D), dtype=A.dtype)
    result[..., :A.shape[-1]] = A
    return result


def _matrix_dims(A: npt.NDArray, name: str):
    if len(A.shape) < 3:
        raise DimensionMismatch(f"{name} must have at least 3 axes, was given shape {A.shape}.")
    return A.shape[-3:]


def add(A: npt.NDArray, B: npt.NDArray) -> npt.NDArray:
    """Entrywise sum of two polymats with the same matrix dimensions, trimmed."""
    I, J, D = _matrix_dims(A, 'A')
    I2, J2, E = _matrix_dims(B, 'B')
    if (I, J) != (I2, J2):
        raise DimensionMismatch(f"Cannot add polymats of matrix shapes {(I, J)} and {(I2, J2)}.")

    P = max(D, E)
    return trim(zeropad(A, P) + zeropad(B, P))


def mul(A: npt.NDArray, B: npt.NDArray) -> npt.NDArray:
    """
    Calculate the product AB where A, B are polynomial matrices.
    In short notation this function has type

        (α, I, J, D) × (β, J, K, E) ↦ (α · β, I, K, D + E - 1)

    where (α · β) denotes the broadcasting of shapes according to numpy rules. The result is trimmed.
    """
    _matrix_dims(A, 'A')
    _matrix_dims(B, 'B')
    *alpha, I, J, D = A.shape
    *beta, J2, K, E = B.shape
    if J != J2:
        raise DimensionMismatch(f"The matrix dimensions of A and B must be compatible, was given {J} and {J2}.")

    P = D + E - 1
    prefix = np.broadcast_shapes(tuple(alpha), tuple(beta))

    parts = np.zeros((*prefix, I, K, P), dtype=np.result_type(A, B))
    for d in range(P):
        parts[..., d] = sum(A[..., i] @ B[..., d - i] for i in range(d + 1) if i < D and d - i < E)

    return trim(parts)


def reduce(A: npt.NDArray, ring: int) -> npt.NDArray:
    """
    Reduce every entry into C[x]/(x^ring - 1). Since x^ring = 1 there, the slice of degree d is folded onto
    degree d mod ring. Polymats of degree below the ring degree are returned as they are.
    """
    if ring < 1:
        raise ValueError(f"The ring degree must be at least 1, was given {ring}.")

    D = A.shape[-1]
    if D <= ring:
        return A

    # Pad up to a whole number of ring-sized blocks, then sum the blocks.
    blocks = -(-D // ring)
    folded = zeropad(A, blocks * ring).reshape(*A.shape[:-1], blocks, ring).sum(axis=-2)
    return trim(folded)


def mul_in_ring(A: npt.NDArray, B: npt.NDArray, ring: int) -> npt.NDArray:
    """The product AB in C[x]/(x^ring - 1): reduce both factors, multiply, reduce the result."""
    return reduce(mul(reduce(A, ring), reduce(B, ring)), ring)

