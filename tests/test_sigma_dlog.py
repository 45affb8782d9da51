import dataclasses

import pytest

from ecprimitives.curve import Point, Scalar
from ecprimitives.errors import ProofError
from ecprimitives.sigma_dlog import DLogProof

ALGORITHMS = ["sha256", "sha512", "sha3_256"]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_dlog_proof(algorithm):
    witness = Scalar.random()
    proof = DLogProof.prove(witness, algorithm)
    assert proof.pk == Point.generator() * witness
    proof.verify()


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_tampered_response_is_rejected(algorithm):
    proof = DLogProof.prove(Scalar.random(), algorithm)
    bad = dataclasses.replace(proof, challenge_response=proof.challenge_response + 1)
    with pytest.raises(ProofError):
        bad.verify()


def test_wrong_public_key_is_rejected():
    proof = DLogProof.prove(Scalar.random())
    bad = dataclasses.replace(proof, pk=proof.pk + Point.generator())
    with pytest.raises(ProofError):
        bad.verify()


def test_proof_bound_to_hash_algorithm():
    proof = DLogProof.prove(Scalar.random(), "sha256")
    bad = dataclasses.replace(proof, algorithm="sha512")
    with pytest.raises(ProofError):
        bad.verify()