"""Feldman verifiable secret sharing over the scalar field.

Each party gets an index ``1..n`` and the share ``f(index)``. The dealer publishes
commitments ``a_i * G`` to the coefficients of ``f``, and a discrete-log proof for the
constant-term commitment to guard against an ``n - t + 1`` attack.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterable, Iterator, overload

from .curve import Point, Scalar
from .errors import ProofError
from .hashing import DEFAULT_ALGORITHM, Algorithm
from .polynomial import Polynomial
from .sigma_dlog import DLogProof


class VerifyShareError(Exception):
    """Raised when a secret share does not match the published commitments."""


@dataclass(frozen=True)
class ShamirSecretSharing:
    """Threshold ``t`` and number of shares ``n``; ``t + 1`` shares reconstruct the secret."""

    threshold: int
    share_count: int


class SecretShares(Sequence):
    """The shares produced by :meth:`VerifiableSS.share`, with the polynomial behind them."""

    __slots__ = ("_shares", "_polynomial")

    def __init__(self, shares: Iterable[Scalar], polynomial: Polynomial) -> None:
        self._shares = tuple(shares)
        self._polynomial = polynomial

    def polynomial(self) -> Polynomial:
        """The polynomial the shares were evaluated from."""
        return self._polynomial

    @overload
    def __getitem__(self, index: int) -> Scalar: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Scalar, ...]: ...

    def __getitem__(self, index):
        return self._shares[index]

    def __len__(self) -> int:
        return len(self._shares)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._shares)

    def __repr__(self) -> str:
        return "SecretShares{ ... }"


def _commit(polynomial: Polynomial) -> tuple[Point, ...]:
    generator = Point.generator()
    return tuple(generator * coefficient for coefficient in polynomial.coefficients())


@dataclass(frozen=True)
class VerifiableSS:
    parameters: ShamirSecretSharing
    commitments: tuple[Point, ...]
    proof: DLogProof

    def __post_init__(self) -> None:
        object.__setattr__(self, "commitments", tuple(self.commitments))

    def reconstruct_limit(self) -> int:
        """The number of shares needed to reconstruct the secret."""
        return self.parameters.threshold + 1

    @classmethod
    def share(
        cls, t: int, n: int, secret: Scalar, algorithm: Algorithm = DEFAULT_ALGORITHM
    ) -> tuple["VerifiableSS", SecretShares]:
        """Share ``secret`` among parties ``1..n`` with threshold ``t``."""
        return cls.share_at_indices(t, n, secret, range(1, n + 1), algorithm)

    @classmethod
    def share_at_indices(
        cls,
        t: int,
        n: int,
        secret: Scalar,
        indices: Iterable[int],
        algorithm: Algorithm = DEFAULT_ALGORITHM,
    ) -> tuple["VerifiableSS", SecretShares]:
        """Share ``secret`` at the given non-zero evaluation points instead of ``1..n``."""
        indices = tuple(indices)
        if t >= n:
            raise ValueError("threshold must be smaller than the share count")
        if len(indices) != n:
            raise ValueError(f"expected {n} indices, got {len(indices)}")
        if any(index <= 0 for index in indices):
            raise ValueError("indices must be positive")

        polynomial = Polynomial.sample_exact_with_fixed_const_term(t, secret)
        shares = SecretShares(polynomial.evaluate_many_int(indices), polynomial)
        vss = cls(
            ShamirSecretSharing(threshold=t, share_count=n),
            _commit(polynomial),
            DLogProof.prove(secret, algorithm),
        )
        return vss, shares

    def reshare(self) -> tuple["VerifiableSS", list[Scalar]]:
        """New commitments to the same secret, and shares of zero that match them."""
        t = self.parameters.threshold
        n = self.parameters.share_count
        one = Scalar(1)
        poly = Polynomial.sample_exact_with_fixed_const_term(t, one)
        zero_shares = [share - one for share in poly.evaluate_many_int(range(1, n + 1))]
        generator = Point.generator()
        new_commitments = [self.commitments[0]] + [
            generator * coefficient + commitment
            for coefficient, commitment in zip(poly.coefficients()[1:], self.commitments[1:])
        ]
        return VerifiableSS(self.parameters, tuple(new_commitments), self.proof), zero_shares

    def reconstruct(self, indices: Sequence[int], shares: Sequence[Scalar]) -> Scalar:
        """Recover the secret from shares of the zero-based party ``indices``."""
        if len(shares) != len(indices):
            raise ValueError("indices and shares differ in length")
        if len(shares) < self.reconstruct_limit():
            raise ValueError(
                f"at least {self.reconstruct_limit()} shares are needed, got {len(shares)}"
            )
        points = [Scalar(index + 1) for index in indices]
        return self.lagrange_interpolation_at_zero(points, shares)

    @staticmethod
    def lagrange_interpolation_at_zero(
        points: Sequence[Scalar], values: Sequence[Scalar]
    ) -> Scalar:
        """Value at zero of the polynomial through ``(points[i], values[i])``."""
        if len(points) != len(values):
            raise ValueError("points and values differ in length")
        if not values:
            raise ValueError("at least one point is needed")
        result = Scalar.zero()
        for i, (x_i, y_i) in enumerate(zip(points, values)):
            num = Scalar(1)
            denum = Scalar(1)
            for j, x_j in enumerate(points):
                if i != j:
                    num = num * x_j
                    denum = denum * (x_j - x_i)
            try:
                result = result + num * denum.invert() * y_i
            except ZeroDivisionError:
                raise ValueError("points are not pairwise distinct") from None
        return result

    def validate_share(self, secret_share: Scalar, index: int) -> None:
        """Raise VerifyShareError unless ``secret_share`` is the share of party ``index``."""
        if self.commitments[0] != self.proof.pk:
            raise VerifyShareError("constant commitment does not match the proof")
        try:
            self.proof.verify()
        except ProofError:
            raise VerifyShareError("discrete log proof is invalid") from None
        self.validate_share_public(Point.generator() * secret_share, index)

    def validate_share_public(self, ss_point: Point, index: int) -> None:
        """Raise VerifyShareError unless ``ss_point`` is ``G`` times the share of ``index``."""
        if ss_point != self.get_point_commitment(index):
            raise VerifyShareError("share does not match the commitments")

    def get_point_commitment(self, index: int) -> Point:
        """Commitment ``f(index) * G`` computed from the coefficient commitments."""
        if not self.commitments:
            raise ValueError("there are no commitments")
        index_fe = Scalar(index)
        result = self.commitments[-1]
        for commitment in reversed(self.commitments[:-1]):
            result = commitment + result * index_fe
        return result

    @staticmethod
    def map_share_to_new_params(
        params: ShamirSecretSharing, index: int, s: Sequence[int]
    ) -> Scalar:
        """Lagrange coefficient turning a (t, n) share of ``index`` into a (|s|, |s|) share."""
        try:
            j = list(s).index(index)
        except ValueError:
            raise ValueError("`s` doesn't include `index`") from None
        xs = [Scalar(x + 1) for x in s]
        return Polynomial.lagrange_basis(Scalar.zero(), j, xs)