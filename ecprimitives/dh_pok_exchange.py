"""Diffie-Hellman key exchange in which neither party can bias the result.

Party one commits to its public share and to the first message of a discrete-log
proof; party two sends its public share with a proof of knowledge; party one
checks that proof and opens its commitments; party two checks the openings and
party one's proof. The shared secret is ``x * y * G``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .commitments import SECURITY_BITS, hash_commitment, sample_bits
from .curve import Point, Scalar
from .errors import ProofError
from .hashing import DEFAULT_ALGORITHM, Algorithm, bigint_from_bytes
from .sigma_dlog import DLogProof

__all__ = [
    "EcKeyPair",
    "CommWitness",
    "Party1FirstMessage",
    "Party2FirstMessage",
    "Party1SecondMessage",
    "Party2SecondMessage",
    "compute_pubkey",
]


@dataclass(frozen=True)
class EcKeyPair:
    """A party's public share together with the secret scalar behind it."""

    public_share: Point
    secret_share: Scalar = field(repr=False)


def compute_pubkey(local_share: EcKeyPair, other_public_share: Point) -> Point:
    """Combine the local secret with the other party's public share."""
    return other_public_share * local_share.secret_share


def _point_commitment(point: Point, blinding: int, algorithm: Algorithm) -> int:
    return hash_commitment(bigint_from_bytes(point.to_bytes(compressed=True)), blinding, algorithm)


@dataclass(frozen=True)
class CommWitness:
    """Openings of party one's commitments."""

    pk_commitment_blind_factor: int
    zk_pok_blind_factor: int
    public_share: Point
    d_log_proof: DLogProof


@dataclass(frozen=True)
class Party1FirstMessage:
    pk_commitment: int
    zk_pok_commitment: int

    @classmethod
    def create_commitments(
        cls, algorithm: Algorithm = DEFAULT_ALGORITHM
    ) -> tuple["Party1FirstMessage", CommWitness, EcKeyPair]:
        return cls.create_commitments_with_fixed_secret_share(Scalar.random(), algorithm)

    @classmethod
    def create_commitments_with_fixed_secret_share(
        cls, secret_share: Scalar, algorithm: Algorithm = DEFAULT_ALGORITHM
    ) -> tuple["Party1FirstMessage", CommWitness, EcKeyPair]:
        public_share = Point.generator() * secret_share
        d_log_proof = DLogProof.prove(secret_share, algorithm)

        pk_blind = sample_bits(SECURITY_BITS)
        pk_commitment = _point_commitment(public_share, pk_blind, algorithm)

        zk_pok_blind = sample_bits(SECURITY_BITS)
        zk_pok_commitment = _point_commitment(
            d_log_proof.pk_t_rand_commitment, zk_pok_blind, algorithm
        )

        witness = CommWitness(pk_blind, zk_pok_blind, public_share, d_log_proof)
        return (
            cls(pk_commitment, zk_pok_commitment),
            witness,
            EcKeyPair(public_share, secret_share),
        )


@dataclass(frozen=True)
class Party2FirstMessage:
    d_log_proof: DLogProof
    public_share: Point

    @classmethod
    def create(
        cls, algorithm: Algorithm = DEFAULT_ALGORITHM
    ) -> tuple["Party2FirstMessage", EcKeyPair]:
        return cls.create_with_fixed_secret_share(Scalar.random(), algorithm)

    @classmethod
    def create_with_fixed_secret_share(
        cls, secret_share: Scalar, algorithm: Algorithm = DEFAULT_ALGORITHM
    ) -> tuple["Party2FirstMessage", EcKeyPair]:
        public_share = Point.generator() * secret_share
        d_log_proof = DLogProof.prove(secret_share, algorithm)
        return cls(d_log_proof, public_share), EcKeyPair(public_share, secret_share)


@dataclass(frozen=True)
class Party1SecondMessage:
    comm_witness: CommWitness

    @classmethod
    def verify_and_decommit(
        cls, comm_witness: CommWitness, proof: DLogProof
    ) -> "Party1SecondMessage":
        """Check party two's proof, then release the openings."""
        proof.verify()
        return cls(comm_witness)


@dataclass(frozen=True)
class Party2SecondMessage:
    @classmethod
    def verify_commitments_and_dlog_proof(
        cls,
        first_message: Party1FirstMessage,
        second_message: Party1SecondMessage,
    ) -> "Party2SecondMessage":
        """Raise ProofError unless party one's openings and proof are valid."""
        witness = second_message.comm_witness
        if witness.public_share.is_zero():
            raise ProofError("public share is the point at infinity")
        algorithm = witness.d_log_proof.algorithm

        pk_ok = first_message.pk_commitment == _point_commitment(
            witness.public_share, witness.pk_commitment_blind_factor, algorithm
        )
        zk_ok = first_message.zk_pok_commitment == _point_commitment(
            witness.d_log_proof.pk_t_rand_commitment, witness.zk_pok_blind_factor, algorithm
        )
        if not (pk_ok and zk_ok):
            raise ProofError("commitments do not open to the revealed values")

        witness.d_log_proof.verify()
        return cls()