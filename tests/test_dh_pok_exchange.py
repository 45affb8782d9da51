from dataclasses import replace

import pytest

from ecprimitives.curve import Point, Scalar
from ecprimitives.dh_pok_exchange import (
    Party1FirstMessage,
    Party1SecondMessage,
    Party2FirstMessage,
    Party2SecondMessage,
    compute_pubkey,
)
from ecprimitives.errors import ProofError


@pytest.mark.parametrize("algorithm", ["sha256", "sha512"])
def test_dh_key_exchange(algorithm):
    msg1, witness, pair1 = Party1FirstMessage.create_commitments(algorithm)
    msg2, pair2 = Party2FirstMessage.create(algorithm)
    second1 = Party1SecondMessage.verify_and_decommit(witness, msg2.d_log_proof)
    result = Party2SecondMessage.verify_commitments_and_dlog_proof(msg1, second1)
    assert result == Party2SecondMessage()
    assert compute_pubkey(pair2, second1.comm_witness.public_share) == compute_pubkey(
        pair1, msg2.public_share
    )


def test_fixed_secret_shares():
    _, witness, pair1 = Party1FirstMessage.create_commitments_with_fixed_secret_share(Scalar(3))
    msg2, pair2 = Party2FirstMessage.create_with_fixed_secret_share(Scalar(5))
    assert witness.public_share == Point.generator() * Scalar(3)
    assert msg2.public_share == Point.generator() * Scalar(5)
    assert compute_pubkey(pair1, msg2.public_share) == Point.generator() * Scalar(15)
    assert compute_pubkey(pair2, pair1.public_share) == Point.generator() * Scalar(15)


def test_decommit_rejects_bad_proof():
    _, witness, _ = Party1FirstMessage.create_commitments()
    msg2, _ = Party2FirstMessage.create()
    bad = replace(msg2.d_log_proof, challenge_response=msg2.d_log_proof.challenge_response + 1)
    with pytest.raises(ProofError):
        Party1SecondMessage.verify_and_decommit(witness, bad)


def test_rejects_wrong_blind_factor():
    msg1, witness, _ = Party1FirstMessage.create_commitments()
    bad = replace(witness, pk_commitment_blind_factor=witness.pk_commitment_blind_factor + 1)
    with pytest.raises(ProofError):
        Party2SecondMessage.verify_commitments_and_dlog_proof(msg1, Party1SecondMessage(bad))


def test_rejects_swapped_public_share():
    msg1, witness, _ = Party1FirstMessage.create_commitments()
    bad = replace(witness, public_share=witness.public_share + Point.generator())
    with pytest.raises(ProofError):
        Party2SecondMessage.verify_commitments_and_dlog_proof(msg1, Party1SecondMessage(bad))


def test_rejects_zero_public_share():
    msg1, witness, _ = Party1FirstMessage.create_commitments()
    bad = replace(witness, public_share=Point.zero())
    with pytest.raises(ProofError):
        Party2SecondMessage.verify_commitments_and_dlog_proof(msg1, Party1SecondMessage(bad))


def test_rejects_invalid_dlog_proof_with_valid_commitments():
    msg1, witness, _ = Party1FirstMessage.create_commitments()
    proof = witness.d_log_proof
    bad = replace(witness, d_log_proof=replace(proof, challenge_response=proof.challenge_response + 1))
    with pytest.raises(ProofError):
        Party2SecondMessage.verify_commitments_and_dlog_proof(msg1, Party1SecondMessage(bad))