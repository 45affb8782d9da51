import dataclasses

import pytest

from ecprimitives.curve import Point
from ecprimitives.errors import ProofError
from ecprimitives.merkle_tree import MerkleTree

ALGORITHM = "sha3_256"


def test_four_leaves():
    ge1 = Point.generator()
    ge2 = ge1
    ge3 = ge1 + ge2
    ge4 = ge1 + ge3
    tree = MerkleTree([ge1, ge2, ge3, ge4], ALGORITHM)
    proof = tree.build_proof(ge1)
    assert proof is not None
    assert proof.verify(tree.get_root()) is None


def test_three_leaves():
    ge1 = Point.generator()
    ge2 = ge1
    ge3 = ge1 + ge2
    tree = MerkleTree([ge1, ge2, ge3], ALGORITHM)
    proof = tree.build_proof(ge1)
    assert proof is not None
    assert proof.verify(tree.get_root()) is None


@pytest.mark.parametrize("count", [1, 2, 3, 5, 7, 8])
def test_every_leaf_proves_membership(count):
    points = [Point.generator() * (i + 1) for i in range(count)]
    tree = MerkleTree(points)
    root = tree.get_root()
    for point in points:
        proof = tree.build_proof(point)
        assert proof.point == point
        proof.verify(root)
    assert tree.leaves == tuple(points)


def test_missing_point_has_no_proof():
    tree = MerkleTree([Point.generator(), Point.generator() * 2])
    assert tree.build_proof(Point.base_point2()) is None


def test_proof_rejects_other_root():
    points = [Point.generator() * (i + 1) for i in range(4)]
    tree = MerkleTree(points)
    other = MerkleTree(points[:3])
    proof = tree.build_proof(points[1])
    with pytest.raises(ProofError):
        proof.verify(other.get_root())


def test_tampered_proof_fails():
    points = [Point.generator() * (i + 1) for i in range(4)]
    tree = MerkleTree(points)
    root = tree.get_root()
    proof = tree.build_proof(points[0])
    with pytest.raises(ProofError):
        dataclasses.replace(proof, point=Point.base_point2()).verify(root)
    with pytest.raises(ProofError):
        dataclasses.replace(proof, index=proof.index + 1).verify(root)
    with pytest.raises(ProofError):
        dataclasses.replace(proof, lemmas=proof.lemmas[:-1]).verify(root)
    with pytest.raises(ProofError):
        dataclasses.replace(proof, lemmas=proof.lemmas + (root,)).verify(root)


def test_root_depends_on_leaf_order():
    a = Point.generator()
    b = Point.base_point2()
    assert MerkleTree([a, b]).get_root() != MerkleTree([b, a]).get_root()


def test_empty_tree_root_is_zero_digest():
    assert MerkleTree([]).get_root() == bytes(32)
    assert MerkleTree([], "sha512").get_root() == bytes(64)