import dataclasses

import pytest

from ecprimitives.curve import Point, Scalar
from ecprimitives.elgamal_proofs import (
    HomoElGamalDlogProof,
    HomoElGamalDlogStatement,
    HomoElGamalDlogWitness,
    HomoElGamalProof,
    HomoElGamalStatement,
    HomoElGamalWitness,
)
from ecprimitives.errors import ProofError

ALGORITHMS = ["sha256", "sha512", "sha3_256"]


def _witness():
    return HomoElGamalWitness(r=Scalar.random(), x=Scalar.random())


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_correct_general_homo_elgamal(algorithm):
    witness = _witness()
    g = Point.generator()
    h = g * Scalar.random()
    y = g * Scalar.random()
    d = h * witness.x + y * witness.r
    e = g * witness.r
    statement = HomoElGamalStatement(g=g, h=h, y=y, d=d, e=e)
    proof = HomoElGamalProof.prove(witness, statement, algorithm)
    assert proof.verify(statement) is None
    assert proof.z2 * g == proof.a3 + e * HomoElGamalProof._challenge(
        proof.t, proof.a3, statement, algorithm
    )


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_correct_homo_elgamal(algorithm):
    witness = _witness()
    g = Point.generator()
    y = g * Scalar.random()
    d = g * witness.x + y * witness.r
    e = g * witness.r
    statement = HomoElGamalStatement(g=g, h=g, y=y, d=d, e=e)
    proof = HomoElGamalProof.prove(witness, statement, algorithm)
    assert proof.verify(statement) is None
    assert proof.z1 * g + proof.z2 * y != proof.t


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_wrong_homo_elgamal(algorithm):
    witness = _witness()
    g = Point.generator()
    h = g * Scalar.random()
    y = g * Scalar.random()
    d = h * witness.x + y * witness.r
    e = g * witness.r + g
    statement = HomoElGamalStatement(g=g, h=h, y=y, d=d, e=e)
    proof = HomoElGamalProof.prove(witness, statement, algorithm)
    with pytest.raises(ProofError):
        proof.verify(statement)


def test_tampered_homo_elgamal_proof_fails():
    witness = _witness()
    g = Point.generator()
    y = g * Scalar.random()
    statement = HomoElGamalStatement(
        g=g, h=g, y=y, d=g * witness.x + y * witness.r, e=g * witness.r
    )
    proof = HomoElGamalProof.prove(witness, statement)
    forged = dataclasses.replace(proof, z1=proof.z1 + 1)
    with pytest.raises(ProofError):
        forged.verify(statement)


def test_homo_elgamal_proof_rejects_other_hash():
    witness = _witness()
    g = Point.generator()
    y = g * Scalar.random()
    statement = HomoElGamalStatement(
        g=g, h=g, y=y, d=g * witness.x + y * witness.r, e=g * witness.r
    )
    proof = HomoElGamalProof.prove(witness, statement, "sha256")
    other = dataclasses.replace(proof, algorithm="sha512")
    with pytest.raises(ProofError):
        other.verify(statement)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_correct_homo_elgamal_dlog(algorithm):
    witness = HomoElGamalDlogWitness(r=Scalar.random(), x=Scalar.random())
    g = Point.generator()
    y = g * Scalar.random()
    d = g * witness.x + y * witness.r
    e = g * witness.r
    q = g * witness.x
    statement = HomoElGamalDlogStatement(g=g, y=y, q=q, d=d, e=e)
    proof = HomoElGamalDlogProof.prove(witness, statement, algorithm)
    assert proof.verify(statement) is None
    assert proof.a3 == g * (proof.z2 - witness.r * HomoElGamalDlogProof._challenge(
        proof.a1, proof.a2, proof.a3, statement, algorithm
    ))


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_wrong_homo_elgamal_dlog(algorithm):
    witness = HomoElGamalDlogWitness(r=Scalar.random(), x=Scalar.random())
    g = Point.generator()
    y = g * Scalar.random()
    d = g * witness.x + y * witness.r
    e = g * witness.r + g
    q = g * witness.x + g
    statement = HomoElGamalDlogStatement(g=g, y=y, q=q, d=d, e=e)
    proof = HomoElGamalDlogProof.prove(witness, statement, algorithm)
    with pytest.raises(ProofError):
        proof.verify(statement)


def test_tampered_homo_elgamal_dlog_proof_fails():
    witness = HomoElGamalDlogWitness(r=Scalar.random(), x=Scalar.random())
    g = Point.generator()
    y = g * Scalar.random()
    statement = HomoElGamalDlogStatement(
        g=g,
        y=y,
        q=g * witness.x,
        d=g * witness.x + y * witness.r,
        e=g * witness.r,
    )
    proof = HomoElGamalDlogProof.prove(witness, statement)
    forged = dataclasses.replace(proof, a2=proof.a2 + g)
    with pytest.raises(ProofError):
        forged.verify(statement)