"""Commitments, zero-knowledge proofs, secret sharing and two-party protocols over secp256k1."""

__version__ = "0.1.0"