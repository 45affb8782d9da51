"""Constant-round two-party coin tossing built on Pedersen commitments.

Party one commits to a random seed and proves the commitment is well formed,
party two answers with its own seed, and party one then opens the commitment.
Both sides end up with the XOR of the two seeds.
"""

from __future__ import annotations

from dataclasses import dataclass

from .curve import Point, Scalar
from .errors import ProofError
from .hashing import DEFAULT_ALGORITHM, Algorithm
from .pedersen_proofs import PedersenBlindingProof, PedersenProof


@dataclass(frozen=True)
class Party1FirstMessage:
    """Commitment to party one's seed with a proof that it was formed correctly."""

    proof: PedersenProof

    @classmethod
    def commit(
        cls, algorithm: Algorithm = DEFAULT_ALGORITHM
    ) -> tuple["Party1FirstMessage", Scalar, Scalar]:
        """Return the message, the secret seed and the blinding factor."""
        seed = Scalar.random()
        blinding = Scalar.random()
        proof = PedersenProof.prove(seed, blinding, algorithm)
        return cls(proof), seed, blinding


@dataclass(frozen=True)
class Party2FirstMessage:
    """Party two's seed, sent in the clear."""

    seed: Scalar

    @classmethod
    def share(cls, proof: PedersenProof) -> "Party2FirstMessage":
        """Check party one's commitment proof, then answer with a random seed."""
        proof.verify()
        return cls(Scalar.random())


@dataclass(frozen=True)
class Party1SecondMessage:
    """Opening of party one's commitment."""

    proof: PedersenBlindingProof
    seed: Scalar

    @classmethod
    def reveal(
        cls,
        party2seed: Scalar,
        party1seed: Scalar,
        party1blinding: Scalar,
        algorithm: Algorithm = DEFAULT_ALGORITHM,
    ) -> tuple["Party1SecondMessage", Scalar]:
        """Open the commitment and return the message with the coin-flip result."""
        proof = PedersenBlindingProof.prove(party1seed, party1blinding, algorithm)
        result = Scalar(party1seed.to_int() ^ party2seed.to_int())
        return cls(proof, Scalar(party1seed)), result


def finalize(
    proof: PedersenBlindingProof, party2seed: Scalar, party1comm: Point
) -> Scalar:
    """Party two checks the opening against the earlier commitment and derives the result."""
    proof.verify()
    if proof.com != party1comm:
        raise ProofError("opened commitment differs from the committed one")
    return Scalar(proof.m.to_int() ^ party2seed.to_int())