"""Proofs that a pair of points is a valid homomorphic ElGamal encryption "in the exponent"."""

from __future__ import annotations

from dataclasses import dataclass, field

from .curve import Point, Scalar
from .errors import ProofError
from .hashing import DEFAULT_ALGORITHM, Algorithm, HashChain


@dataclass(frozen=True)
class HomoElGamalWitness:
    """Witness ``(x, r)`` of the encryption."""

    r: Scalar
    x: Scalar


@dataclass(frozen=True)
class HomoElGamalStatement:
    """Claims ``d = x*h + r*y`` and ``e = r*g``; with ``g == h`` this is plain ElGamal."""

    g: Point
    h: Point
    y: Point
    d: Point
    e: Point


@dataclass(frozen=True)
class HomoElGamalProof:
    t: Point
    a3: Point
    z1: Scalar
    z2: Scalar
    algorithm: Algorithm = field(default=DEFAULT_ALGORITHM, compare=False)

    @staticmethod
    def _challenge(
        t: Point, a3: Point, statement: HomoElGamalStatement, algorithm: Algorithm
    ) -> Scalar:
        return (
            HashChain(algorithm)
            .chain_points([t, a3, statement.g, statement.h, statement.y, statement.d, statement.e])
            .result_scalar()
        )

    @classmethod
    def prove(
        cls,
        witness: HomoElGamalWitness,
        statement: HomoElGamalStatement,
        algorithm: Algorithm = DEFAULT_ALGORITHM,
    ) -> "HomoElGamalProof":
        s1 = Scalar.random()
        s2 = Scalar.random()
        a1 = statement.h * s1
        a2 = statement.y * s2
        a3 = statement.g * s2
        t = a1 + a2
        e = cls._challenge(t, a3, statement, algorithm)
        z1 = s1 + witness.x * e
        z2 = s2 + witness.r * e
        return cls(t, a3, z1, z2, algorithm)

    def verify(self, statement: HomoElGamalStatement) -> None:
        """Raise ProofError unless ``z1*h + z2*y = t + e*d`` and ``z2*g = a3 + e*E``."""
        e = self._challenge(self.t, self.a3, statement, self.algorithm)
        z1h_plus_z2y = statement.h * self.z1 + statement.y * self.z2
        t_plus_ed = self.t + statement.d * e
        z2g = statement.g * self.z2
        a3_plus_ee = self.a3 + statement.e * e
        if z1h_plus_z2y != t_plus_ed or z2g != a3_plus_ee:
            raise ProofError()


@dataclass(frozen=True)
class HomoElGamalDlogWitness:
    r: Scalar
    x: Scalar


@dataclass(frozen=True)
class HomoElGamalDlogStatement:
    """Claims ``d = x*g + r*y``, ``e = r*g`` and ``q = x*g``."""

    g: Point
    y: Point
    q: Point
    d: Point
    e: Point


@dataclass(frozen=True)
class HomoElGamalDlogProof:
    a1: Point
    a2: Point
    a3: Point
    z1: Scalar
    z2: Scalar
    algorithm: Algorithm = field(default=DEFAULT_ALGORITHM, compare=False)

    @staticmethod
    def _challenge(
        a1: Point,
        a2: Point,
        a3: Point,
        statement: HomoElGamalDlogStatement,
        algorithm: Algorithm,
    ) -> Scalar:
        return (
            HashChain(algorithm)
            .chain_points([a1, a2, a3, statement.g, statement.y, statement.d, statement.e])
            .result_scalar()
        )

    @classmethod
    def prove(
        cls,
        witness: HomoElGamalDlogWitness,
        statement: HomoElGamalDlogStatement,
        algorithm: Algorithm = DEFAULT_ALGORITHM,
    ) -> "HomoElGamalDlogProof":
        s1 = Scalar.random()
        s2 = Scalar.random()
        a1 = statement.g * s1
        a2 = statement.y * s2
        a3 = statement.g * s2
        e = cls._challenge(a1, a2, a3, statement, algorithm)
        z1 = s1 + e * witness.x
        z2 = s2 + e * witness.r
        return cls(a1, a2, a3, z1, z2, algorithm)

    def verify(self, statement: HomoElGamalDlogStatement) -> None:
        """Raise ProofError unless all three verification equations hold."""
        e = self._challenge(self.a1, self.a2, self.a3, statement, self.algorithm)
        z1g = statement.g * self.z1
        z2y = statement.y * self.z2
        z2g = statement.g * self.z2
        a1_plus_eq = self.a1 + statement.q * e
        a3_plus_ee = self.a3 + statement.e * e
        a2_plus_e_d_minus_q = self.a2 + (statement.d - statement.q) * e
        if z1g != a1_plus_eq or z2g != a3_plus_ee or z2y != a2_plus_e_d_minus_q:
            raise ProofError()