"""Schnorr proof of knowledge of a discrete logarithm, made non-interactive by Fiat-Shamir."""

from __future__ import annotations

from dataclasses import dataclass, field

from .curve import Point, Scalar
from .errors import ProofError
from .hashing import DEFAULT_ALGORITHM, Algorithm, HashChain


def _challenge(commitment: Point, pk: Point, algorithm: Algorithm) -> Scalar:
    return (
        HashChain(algorithm)
        .chain_point(commitment)
        .chain_point(Point.generator())
        .chain_point(pk)
        .result_scalar()
    )


@dataclass(frozen=True)
class DLogProof:
    """Proof that the prover knows ``sk`` with ``pk = sk * G``."""

    pk: Point
    pk_t_rand_commitment: Point
    challenge_response: Scalar
    algorithm: Algorithm = field(default=DEFAULT_ALGORITHM, compare=False)

    @classmethod
    def prove(cls, sk: Scalar, algorithm: Algorithm = DEFAULT_ALGORITHM) -> "DLogProof":
        generator = Point.generator()
        sk_t_rand_commitment = Scalar.random()
        pk_t_rand_commitment = generator * sk_t_rand_commitment
        pk = generator * sk
        challenge = _challenge(pk_t_rand_commitment, pk, algorithm)
        challenge_response = sk_t_rand_commitment - challenge * sk
        return cls(pk, pk_t_rand_commitment, challenge_response, algorithm)

    def verify(self) -> None:
        """Raise ProofError unless ``response * G + challenge * pk`` equals the commitment."""
        challenge = _challenge(self.pk_t_rand_commitment, self.pk, self.algorithm)
        pk_verifier = Point.generator() * self.challenge_response + self.pk * challenge
        if pk_verifier != self.pk_t_rand_commitment:
            raise ProofError()