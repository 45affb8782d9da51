"""Low degree exponent interpolation (LDEI) proof.

Claims that there is a polynomial ``w`` with ``deg(w) <= d`` such that
``x[i] = g[i] * w(alpha[i])`` for every ``i``, and that the prover knows ``w``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from .curve import Point, Scalar
from .errors import ProofError
from .hashing import DEFAULT_ALGORITHM, Algorithm, HashChain
from .polynomial import Polynomial


class LdeiIssue(Enum):
    """What makes a statement invalid or inconsistent with a witness."""

    ALPHA_NOT_PAIRWISE_DISTINCT = "`alpha`s are not pairwise distinct"
    ALPHA_LENGTH_DOESNT_MATCH_G = "alpha.len() != g.len()"
    POLYNOMIAL_DEGREE_MORE_THAN_D = "deg(w) > d"
    LIST_OF_X_DOESNT_MATCH_EXPECTED_VALUE = "`statement.x` doesn't match expected value"


class InvalidLdeiStatement(ValueError):
    """Raised when a statement is not valid or doesn't match a witness."""

    def __init__(self, issue: LdeiIssue) -> None:
        super().__init__(issue.value)
        self.issue = issue


@dataclass(frozen=True)
class LdeiWitness:
    """The prover's secret polynomial."""

    w: Polynomial


def _check(witness: LdeiWitness, alpha: Sequence[Scalar], g: Sequence[Point], d: int) -> None:
    if len(g) != len(alpha):
        raise InvalidLdeiStatement(LdeiIssue.ALPHA_LENGTH_DOESNT_MATCH_G)
    if witness.w.degree() > d:
        raise InvalidLdeiStatement(LdeiIssue.POLYNOMIAL_DEGREE_MORE_THAN_D)
    if len(set(alpha)) != len(alpha):
        raise InvalidLdeiStatement(LdeiIssue.ALPHA_NOT_PAIRWISE_DISTINCT)


def _exponents(polynomial: Polynomial, g: Sequence[Point], alpha: Sequence[Scalar]) -> tuple[Point, ...]:
    return tuple(g_i * polynomial.evaluate(a_i) for g_i, a_i in zip(g, alpha))


@dataclass(frozen=True)
class LdeiStatement:
    alpha: tuple[Scalar, ...]
    g: tuple[Point, ...]
    x: tuple[Point, ...]
    d: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "alpha", tuple(self.alpha))
        object.__setattr__(self, "g", tuple(self.g))
        object.__setattr__(self, "x", tuple(self.x))

    @classmethod
    def create(
        cls,
        witness: LdeiWitness,
        alpha: Sequence[Scalar],
        g: Sequence[Point],
        d: int,
    ) -> "LdeiStatement":
        """Build the statement with ``x[i] = g[i] * w(alpha[i])``."""
        alpha = tuple(alpha)
        g = tuple(g)
        _check(witness, alpha, g, d)
        return cls(alpha, g, _exponents(witness.w, g, alpha), d)


def _challenge(
    statement: LdeiStatement, a: Sequence[Point], algorithm: Algorithm
) -> Scalar:
    return (
        HashChain(algorithm)
        .chain_points(statement.g)
        .chain_points(statement.x)
        .chain_points(a)
        .result_scalar()
    )


@dataclass(frozen=True)
class LdeiProof:
    a: tuple[Point, ...]
    e: Scalar
    z: Polynomial
    algorithm: Algorithm = field(default=DEFAULT_ALGORITHM, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", tuple(self.a))

    @classmethod
    def prove(
        cls,
        witness: LdeiWitness,
        statement: LdeiStatement,
        algorithm: Algorithm = DEFAULT_ALGORITHM,
    ) -> "LdeiProof":
        """Sample ``u`` of degree ``d``, publish ``a_i = g_i * u(alpha_i)`` and ``z = u - e*w``."""
        _check(witness, statement.alpha, statement.g, statement.d)
        if statement.x != _exponents(witness.w, statement.g, statement.alpha):
            raise InvalidLdeiStatement(LdeiIssue.LIST_OF_X_DOESNT_MATCH_EXPECTED_VALUE)

        u = Polynomial.sample_exact(statement.d)
        a = _exponents(u, statement.g, statement.alpha)
        e = _challenge(statement, a, algorithm)
        z = u - witness.w * e
        return cls(a, e, z, algorithm)

    def verify(self, statement: LdeiStatement) -> None:
        """Raise ProofError unless the challenge, the degree of ``z`` and every ``a_i`` check out."""
        e = _challenge(statement, self.a, self.algorithm)
        if e != self.e:
            raise ProofError()
        if self.z.degree() > statement.d:
            raise ProofError()
        expected_a = tuple(
            g_i * self.z.evaluate(a_i) + x_i * e
            for g_i, a_i, x_i in zip(statement.g, statement.alpha, statement.x)
        )
        if self.a != expected_a:
            raise ProofError()