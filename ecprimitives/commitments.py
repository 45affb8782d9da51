"""Hash-based and Pedersen commitments to integers."""

from __future__ import annotations

import secrets

from .curve import Point, Scalar
from .hashing import DEFAULT_ALGORITHM, Algorithm, HashChain

SECURITY_BITS = 256


def sample_bits(bits: int) -> int:
    """A uniformly random non-negative integer of at most ``bits`` bits."""
    if bits < 0:
        raise ValueError("bit count must not be negative")
    return secrets.randbits(bits) if bits else 0


def hash_commitment(message: int, blinding_factor: int, algorithm: Algorithm = DEFAULT_ALGORITHM) -> int:
    """Commit to ``message`` as c = H(m || r), read as a big-endian integer."""
    return HashChain(algorithm).chain_bigint(message).chain_bigint(blinding_factor).result_bigint()


def create_hash_commitment(message: int, algorithm: Algorithm = DEFAULT_ALGORITHM) -> tuple[int, int]:
    """Commit to ``message`` with a fresh 256-bit blinding factor; return (commitment, blinding)."""
    blinding_factor = sample_bits(SECURITY_BITS)
    return hash_commitment(message, blinding_factor, algorithm), blinding_factor


def pedersen_commitment(message: int, blinding_factor: int) -> Point:
    """Commit to ``message`` as c = m*G + r*H."""
    mg = Point.generator() * Scalar(message)
    rh = Point.base_point2() * Scalar(blinding_factor)
    return mg + rh


def create_pedersen_commitment(message: int) -> tuple[Point, int]:
    """Pedersen commitment with a fresh 256-bit blinding factor; return (commitment, blinding)."""
    blinding_factor = sample_bits(SECURITY_BITS)
    return pedersen_commitment(message, blinding_factor), blinding_factor