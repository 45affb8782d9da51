"""Complete binary Merkle tree over curve points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .curve import Point
from .errors import ProofError
from .hashing import DEFAULT_ALGORITHM, Algorithm, HashChain


def _leaf_hash(point: Point, algorithm: Algorithm) -> bytes:
    return HashChain(algorithm).chain_point(point).result_bytes()


def _merge(left: bytes, right: bytes, algorithm: Algorithm) -> bytes:
    return HashChain(algorithm).chain_bytes(left).chain_bytes(right).result_bytes()


def _sibling(index: int) -> int:
    return ((index + 1) ^ 1) - 1


def _parent(index: int) -> int:
    return (index - 1) >> 1


def _is_left(index: int) -> bool:
    return index & 1 == 1


@dataclass(frozen=True)
class MerkleProof:
    """Membership proof for a point: its node index and the sibling hashes up to the root."""

    index: int
    lemmas: tuple[bytes, ...]
    point: Point
    algorithm: Algorithm = DEFAULT_ALGORITHM

    def _root(self) -> Optional[bytes]:
        node = _leaf_hash(self.point, self.algorithm)
        index = self.index
        lemmas = iter(self.lemmas)
        while index != 0:
            sibling = next(lemmas, None)
            if sibling is None:
                return None
            if _is_left(index):
                node = _merge(node, sibling, self.algorithm)
            else:
                node = _merge(sibling, node, self.algorithm)
            index = _parent(index)
        if next(lemmas, None) is not None:
            return None
        return node

    def verify(self, root: bytes) -> None:
        """Raise ProofError unless the proof leads to ``root``."""
        if self.index < 0 or self._root() != root:
            raise ProofError()


class MerkleTree:
    """Merkle tree whose leaves are hashes of curve points, stored as an implicit heap."""

    def __init__(self, leaves: Iterable[Point], algorithm: Algorithm = DEFAULT_ALGORITHM) -> None:
        self._algorithm = algorithm
        self._leaves = list(leaves)
        hashes = [_leaf_hash(leaf, algorithm) for leaf in self._leaves]
        inner = max(len(hashes) - 1, 0)
        self._nodes: list[bytes] = [b""] * inner + hashes
        for i in reversed(range(inner)):
            self._nodes[i] = _merge(self._nodes[2 * i + 1], self._nodes[2 * i + 2], algorithm)

    @property
    def leaves(self) -> tuple[Point, ...]:
        return tuple(self._leaves)

    def build_proof(self, point: Point) -> Optional[MerkleProof]:
        """Proof for the first leaf equal to ``point``, or None if it is absent."""
        try:
            position = self._leaves.index(point)
        except ValueError:
            return None
        index = position + len(self._leaves) - 1
        lemmas = []
        node = index
        while node != 0:
            lemmas.append(self._nodes[_sibling(node)])
            node = _parent(node)
        return MerkleProof(index, tuple(lemmas), point, self._algorithm)

    def get_root(self) -> bytes:
        if not self._nodes:
            return bytes(len(HashChain(self._algorithm).result_bytes()))
        return self._nodes[0]