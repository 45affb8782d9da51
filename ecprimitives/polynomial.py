"""Polynomials with coefficients in the scalar field."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Sequence, Union

from .curve import Scalar

INFINITY = math.inf
"""Degree of the zero polynomial."""

Degree = Union[int, float]


class Polynomial:
    """f(x) = a_0 + a_1 x + ... + a_n x^n over the scalar field."""

    __slots__ = ("_coefficients",)

    def __init__(self, coefficients: Iterable[Scalar]) -> None:
        self._coefficients = tuple(Scalar(c) for c in coefficients)

    @classmethod
    def sample_exact(cls, degree: Degree) -> "Polynomial":
        """Random polynomial with ``degree + 1`` coefficients; INFINITY gives the zero polynomial."""
        if degree == INFINITY:
            return cls([])
        if degree < 0:
            raise ValueError("degree must not be negative")
        return cls(Scalar.random() for _ in range(int(degree) + 1))

    @classmethod
    def sample_exact_with_fixed_const_term(cls, n: int, const_term: Scalar) -> "Polynomial":
        """Random polynomial of degree ``n`` whose constant term is ``const_term``."""
        if n < 0:
            raise ValueError("degree must not be negative")
        return cls([const_term, *(Scalar.random() for _ in range(n))])

    def degree(self) -> Degree:
        """Index of the last non-zero coefficient, or INFINITY if every coefficient is zero."""
        for i in reversed(range(len(self._coefficients))):
            if not self._coefficients[i].is_zero():
                return i
        return INFINITY

    def evaluate(self, x: Scalar) -> Scalar:
        if not self._coefficients:
            raise ValueError("polynomial has no coefficients")
        result = self._coefficients[-1]
        for coefficient in reversed(self._coefficients[:-1]):
            result = result * x + coefficient
        return result

    def evaluate_int(self, x: int) -> Scalar:
        return self.evaluate(Scalar(x))

    def evaluate_many(self, xs: Iterable[Scalar]) -> Iterator[Scalar]:
        return (self.evaluate(x) for x in xs)

    def evaluate_many_int(self, xs: Iterable[int]) -> Iterator[Scalar]:
        return (self.evaluate_int(x) for x in xs)

    def coefficients(self) -> tuple[Scalar, ...]:
        return self._coefficients

    @staticmethod
    def lagrange_basis(x: Scalar, j: int, xs: Sequence[Scalar]) -> Scalar:
        """Evaluate the j-th Lagrange basis polynomial over the nodes ``xs`` at ``x``."""
        if not 0 <= j < len(xs):
            raise IndexError("j is out of range of xs")
        x_j = xs[j]
        num = Scalar(1)
        denum = Scalar(1)
        for m, x_m in enumerate(xs):
            if m != j:
                num = num * (x - x_m)
                denum = denum * (x_j - x_m)
        try:
            return num * denum.invert()
        except ZeroDivisionError:
            raise ValueError("elements in xs are not pairwise distinct") from None

    def __mul__(self, scalar: object) -> "Polynomial":
        if not isinstance(scalar, (Scalar, int)):
            return NotImplemented
        return Polynomial(c * scalar for c in self._coefficients)

    __rmul__ = __mul__

    def __add__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        f, g = self._coefficients, other._coefficients
        overlapped = [a + b for a, b in zip(f, g)]
        tail = g[len(f):] if len(f) < len(g) else f[len(g):]
        return Polynomial(overlapped + list(tail))

    def __sub__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        f, g = self._coefficients, other._coefficients
        overlapped = [a - b for a, b in zip(f, g)]
        tail = [-c for c in g[len(f):]] if len(f) < len(g) else list(f[len(g):])
        return Polynomial(overlapped + tail)

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coefficients)!r})"