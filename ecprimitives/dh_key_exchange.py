"""Elliptic-curve Diffie-Hellman key exchange.

Each party picks a secret ``s`` and publishes ``s * G``; both can then compute
the joint point ``a * b * G``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .curve import Point, Scalar


@dataclass(frozen=True)
class EcKeyPair:
    """A party's public share and the secret behind it."""

    public_share: Point
    secret_share: Scalar = field(repr=False)


def _key_pair(secret_share: Scalar) -> EcKeyPair:
    return EcKeyPair(Point.generator() * secret_share, secret_share)


@dataclass(frozen=True)
class Party1FirstMessage:
    public_share: Point

    @classmethod
    def first(cls) -> tuple["Party1FirstMessage", EcKeyPair]:
        return cls.first_with_fixed_secret_share(Scalar.random())

    @classmethod
    def first_with_fixed_secret_share(
        cls, secret_share: Scalar
    ) -> tuple["Party1FirstMessage", EcKeyPair]:
        pair = _key_pair(secret_share)
        return cls(pair.public_share), pair


@dataclass(frozen=True)
class Party2FirstMessage:
    public_share: Point

    @classmethod
    def first(cls) -> tuple["Party2FirstMessage", EcKeyPair]:
        return cls.first_with_fixed_secret_share(Scalar.random())

    @classmethod
    def first_with_fixed_secret_share(
        cls, secret_share: Scalar
    ) -> tuple["Party2FirstMessage", EcKeyPair]:
        pair = _key_pair(secret_share)
        return cls(pair.public_share), pair


def compute_pubkey(local_share: EcKeyPair, other_public_share: Point) -> Point:
    """The joint point: the other party's public share times the local secret."""
    return other_public_share * local_share.secret_share