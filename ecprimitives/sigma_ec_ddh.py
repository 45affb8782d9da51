"""Chaum-Pedersen proof that two pairs of points share the same discrete logarithm."""

from __future__ import annotations

from dataclasses import dataclass, field

from .curve import Point, Scalar
from .errors import ProofError
from .hashing import DEFAULT_ALGORITHM, Algorithm, HashChain


@dataclass(frozen=True)
class ECDDHStatement:
    """Claims ``h1 = x * g1`` and ``h2 = x * g2`` for a common ``x``."""

    g1: Point
    h1: Point
    g2: Point
    h2: Point


@dataclass(frozen=True)
class ECDDHWitness:
    x: Scalar


def _challenge(statement: ECDDHStatement, a1: Point, a2: Point, algorithm: Algorithm) -> Scalar:
    return (
        HashChain(algorithm)
        .chain_points([statement.g1, statement.h1, statement.g2, statement.h2, a1, a2])
        .result_scalar()
    )


@dataclass(frozen=True)
class ECDDHProof:
    a1: Point
    a2: Point
    z: Scalar
    algorithm: Algorithm = field(default=DEFAULT_ALGORITHM, compare=False)

    @classmethod
    def prove(
        cls,
        witness: ECDDHWitness,
        statement: ECDDHStatement,
        algorithm: Algorithm = DEFAULT_ALGORITHM,
    ) -> "ECDDHProof":
        s = Scalar.random()
        a1 = statement.g1 * s
        a2 = statement.g2 * s
        e = _challenge(statement, a1, a2, algorithm)
        z = s + e * witness.x
        return cls(a1, a2, z, algorithm)

    def verify(self, statement: ECDDHStatement) -> None:
        """Raise ProofError unless ``z*g1 = a1 + e*h1`` and ``z*g2 = a2 + e*h2``."""
        e = _challenge(statement, self.a1, self.a2, self.algorithm)
        z_g1 = statement.g1 * self.z
        z_g2 = statement.g2 * self.z
        a1_plus_e_h1 = self.a1 + statement.h1 * e
        a2_plus_e_h2 = self.a2 + statement.h2 * e
        if z_g1 != a1_plus_e_h1 or z_g2 != a2_plus_e_h2:
            raise ProofError()