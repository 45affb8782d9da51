"""Proofs that a Pedersen commitment ``c = m*G + r*H`` was formed correctly."""

from __future__ import annotations

from dataclasses import dataclass, field

from .commitments import pedersen_commitment
from .curve import Point, Scalar
from .errors import ProofError
from .hashing import DEFAULT_ALGORITHM, Algorithm, HashChain


@dataclass(frozen=True)
class PedersenProof:
    """Proof of knowledge of ``(m, r)`` opening the commitment ``com``."""

    e: Scalar
    a1: Point
    a2: Point
    com: Point
    z1: Scalar
    z2: Scalar
    algorithm: Algorithm = field(default=DEFAULT_ALGORITHM, compare=False)

    @staticmethod
    def _challenge(com: Point, a1: Point, a2: Point, algorithm: Algorithm) -> Scalar:
        return (
            HashChain(algorithm)
            .chain_points([Point.generator(), Point.base_point2(), com, a1, a2])
            .result_scalar()
        )

    @classmethod
    def prove(
        cls, m: Scalar, r: Scalar, algorithm: Algorithm = DEFAULT_ALGORITHM
    ) -> "PedersenProof":
        s1 = Scalar.random()
        s2 = Scalar.random()
        a1 = Point.generator() * s1
        a2 = Point.base_point2() * s2
        com = pedersen_commitment(m.to_int(), r.to_int())
        e = cls._challenge(com, a1, a2, algorithm)
        z1 = s1 + e * m
        z2 = s2 + e * r
        return cls(e, a1, a2, com, z1, z2, algorithm)

    def verify(self) -> None:
        """Raise ProofError unless ``z1*G + z2*H = a1 + a2 + e*com``."""
        e = self._challenge(self.com, self.a1, self.a2, self.algorithm)
        lhs = Point.generator() * self.z1 + Point.base_point2() * self.z2
        rhs = self.a1 + self.a2 + self.com * e
        if lhs != rhs:
            raise ProofError()


@dataclass(frozen=True)
class PedersenBlindingProof:
    """Proof of knowledge of ``r`` such that ``com = m*G + r*H`` for the public ``m``."""

    e: Scalar
    m: Scalar
    a: Point
    com: Point
    z: Scalar
    algorithm: Algorithm = field(default=DEFAULT_ALGORITHM, compare=False)

    @staticmethod
    def _challenge(com: Point, a: Point, m: Scalar, algorithm: Algorithm) -> Scalar:
        return (
            HashChain(algorithm)
            .chain_points([Point.generator(), Point.base_point2(), com, a])
            .chain_scalar(m)
            .result_scalar()
        )

    @classmethod
    def prove(
        cls, m: Scalar, r: Scalar, algorithm: Algorithm = DEFAULT_ALGORITHM
    ) -> "PedersenBlindingProof":
        s = Scalar.random()
        a = Point.base_point2() * s
        com = pedersen_commitment(m.to_int(), r.to_int())
        e = cls._challenge(com, a, m, algorithm)
        z = s + e * r
        return cls(e, Scalar(m), a, com, z, algorithm)

    def verify(self) -> None:
        """Raise ProofError unless ``z*H + e*m*G = a + e*com``."""
        e = self._challenge(self.com, self.a, self.m, self.algorithm)
        lhs = Point.base_point2() * self.z + (Point.generator() * self.m) * e
        rhs = self.com * e + self.a
        if lhs != rhs:
            raise ProofError()