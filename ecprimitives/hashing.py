"""Hash and HMAC helpers that absorb integers, scalars and curve points."""

from __future__ import annotations

import hashlib
import hmac
from typing import Any, Callable, Iterable, Union

from .curve import SCALAR_LENGTH, Point, Scalar

Algorithm = Union[str, Callable[[], Any]]

DEFAULT_ALGORITHM: Algorithm = "sha256"


def bigint_to_bytes(n: int) -> bytes:
    """Big-endian bytes of the magnitude of ``n``, without leading zeros."""
    magnitude = abs(n)
    return magnitude.to_bytes((magnitude.bit_length() + 7) // 8, "big")


def bigint_from_bytes(data: bytes) -> int:
    return int.from_bytes(data, "big")


def _new_hash(algorithm: Algorithm) -> Any:
    if isinstance(algorithm, str):
        return hashlib.new(algorithm)
    return algorithm()


def digest_bigint(data: bytes, algorithm: Algorithm = DEFAULT_ALGORITHM) -> int:
    """Hash ``data`` and read the digest as a big-endian integer."""
    return HashChain(algorithm).chain_bytes(data).result_bigint()


class HashChain:
    """An incremental hash whose ``chain_*`` methods return the chain itself."""

    def __init__(self, algorithm: Algorithm = DEFAULT_ALGORITHM) -> None:
        self._state = _new_hash(algorithm)

    @property
    def digest_size(self) -> int:
        return self._state.digest_size

    def chain_bytes(self, data: bytes) -> "HashChain":
        self._state.update(data)
        return self

    def chain_bigint(self, n: int) -> "HashChain":
        return self.chain_bytes(bigint_to_bytes(n))

    def chain_point(self, point: Point) -> "HashChain":
        return self.chain_bytes(point.to_bytes(compressed=False))

    def chain_points(self, points: Iterable[Point]) -> "HashChain":
        for point in points:
            self.chain_point(point)
        return self

    def chain_scalar(self, scalar: Scalar) -> "HashChain":
        return self.chain_bigint(scalar.to_int())

    def chain_scalars(self, scalars: Iterable[Scalar]) -> "HashChain":
        for scalar in scalars:
            self.chain_scalar(scalar)
        return self

    def result_bytes(self) -> bytes:
        return self._state.copy().digest()

    def result_bigint(self) -> int:
        return bigint_from_bytes(self.result_bytes())

    def result_scalar(self) -> Scalar:
        """Derive a scalar by appending a 32-bit counter until the digest is below the order."""
        size = self.digest_size
        if size < SCALAR_LENGTH:
            raise ValueError(
                f"Output size of the hash({size}) is smaller than the scalar length({SCALAR_LENGTH})"
            )
        for counter in range(2**32):
            state = self._state.copy()
            state.update(counter.to_bytes(4, "big"))
            try:
                return Scalar.from_bytes(state.digest()[:SCALAR_LENGTH])
            except ValueError:
                continue
        raise RuntimeError("no digest below the curve order was found")


class MacError(Exception):
    """Raised when a message authentication code does not match."""


class HmacChain:
    """An HMAC keyed by an integer that absorbs integers."""

    def __init__(self, key: int, algorithm: Algorithm = DEFAULT_ALGORITHM) -> None:
        self._mac = hmac.new(bigint_to_bytes(key), digestmod=algorithm)

    def chain_bigint(self, n: int) -> "HmacChain":
        self._mac.update(bigint_to_bytes(n))
        return self

    def result_bigint(self) -> int:
        return bigint_from_bytes(self._mac.copy().digest())

    def verify_bigint(self, code: int) -> None:
        """Check ``code`` against the current tag; raise MacError on mismatch."""
        expected = self._mac.copy().digest()
        received = bigint_to_bytes(code)
        if len(received) > len(expected):
            raise MacError("code is longer than the tag")
        received = received.rjust(len(expected), b"\x00")
        if not hmac.compare_digest(expected, received):
            raise MacError("code does not match")