"""
A small line-oriented calculator over named polynomials.

There are two kinds of statement. A definition binds a name to a polynomial written in the display form,

    A = (1.5 + 3i)X2 + (-2 - 1i)X + (-1)

and an expression combines previously defined names with +, - and *, strictly from left to right (there is no
precedence and there are no parentheses), so `A * B + B` means (A * B) + B. Names live in an Environment, which
belongs to one session and is passed to every call of evaluate().
"""
from __future__ import annotations

import dataclasses
import re
from typing import Callable, Iterator

from .errors import ParseError, UnknownName
from .poly import Polynomial

_NAME = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


class Environment:
    """
    The table of named polynomials for one session. If a ring degree is given, expressions are evaluated in
    C[x]/(x^ring - 1) instead of the ordinary polynomial ring.
    """
    def __init__(self, ring: int | None = None):
        if ring is not None and ring < 1:
            raise ValueError(f"The ring degree must be at least 1, was given {ring}.")
        self.ring = ring
        self._names: dict[str, Polynomial] = {}

    def define(self, name: str, poly: Polynomial):
        if not _NAME.fullmatch(name):
            raise ParseError(f"{name!r} is not a valid polynomial name.")
        self._names[name] = poly

    def lookup(self, name: str) -> Polynomial:
        try:
            return self._names[name]
        except KeyError:
            raise UnknownName(f"unknown polynomial: {name}") from None

    def __contains__(self, name: str) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def operations(self) -> dict[str, Callable[[Polynomial, Polynomial], Polynomial]]:
        if self.ring is None:
            return {
                '+': lambda a, b: a + b,
                '-': lambda a, b: a - b,
                '*': lambda a, b: a * b,
            }

        ring = self.ring
        return {
            '+': lambda a, b: a.add_in_ring(b, ring),
            '-': lambda a, b: a.add_in_ring(-b, ring),
            '*': lambda a, b: a.mul_in_ring(b, ring),
        }


@dataclasses.dataclass(frozen=True)
class Outcome:
    """The result of one statement: the polynomial produced, and the name it was bound to for a definition."""
    value: Polynomial
    name: str | None = None

    @property
    def is_definition(self) -> bool:
        return self.name is not None


def evaluate_expression(env: Environment, text: str) -> Polynomial:
    """
    Evaluate names joined by +, - and * from left to right.

    >>> env = Environment()
    >>> env.define('A', Polynomial([1, 1]))
    >>> env.define('B', Polynomial([-1, 1]))
    >>> evaluate_expression(env, 'A * B + B')
    Polynomial('(1)X2 + (1)X + (-2)')
    """
    tokens = text.split()
    if not tokens:
        raise ParseError("Empty expression.")
    if len(tokens) % 2 == 0:
        raise ParseError(f"Expression {text.strip()!r} should alternate names and operators.")

    ops = env.operations()
    value = ops['+'](Polynomial.zero(), env.lookup(tokens[0]))
    for op, name in zip(tokens[1::2], tokens[2::2]):
        if op not in ops:
            raise ParseError(f"unknown operation {op}")
        value = ops[op](value, env.lookup(name))

    return value


def evaluate(env: Environment, line: str) -> Outcome:
    """
    Evaluate one statement, a definition if it contains '=' and an expression otherwise.

    >>> env = Environment(ring=2)
    >>> evaluate(env, 'P = (1)X3 + (2)')
    Outcome(value=Polynomial('(1)X3 + (2)'), name='P')
    >>> evaluate(env, 'P * P').value
    Polynomial('(4)X + (5)')
    """
    if '=' in line:
        name, _, definition = line.partition('=')
        if '=' in definition:
            raise ParseError("A definition has exactly one '='.")
        poly = Polynomial.parse(definition)
        env.define(name.strip(), poly)
        return Outcome(poly, name.strip())

    return Outcome(evaluate_expression(env, line))
