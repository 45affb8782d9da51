# ecprimitives

Building blocks for protocols over the secp256k1 elliptic-curve group, in
pure Python with no third-party dependencies.

## What is in it

| Module | Contents |
| --- | --- |
| `ecprimitives.curve` | `Scalar` (integers modulo the group order) and `Point` (group elements, SEC1 encoding, `generator()`, `base_point2()`, `zero()`) |
| `ecprimitives.errors` | `ProofError`, raised by every `verify` that fails |
| `ecprimitives.hashing` | `HashChain`, `HmacChain`, `MacError`, `digest_bigint`, `bigint_to_bytes`, `bigint_from_bytes` |
| `ecprimitives.merkle_tree` | `MerkleTree` and `MerkleProof` over lists of points |
| `ecprimitives.commitments` | `hash_commitment`, `create_hash_commitment`, `pedersen_commitment`, `create_pedersen_commitment`, `sample_bits` |
| `ecprimitives.polynomial` | `Polynomial` over the scalar field, with `+`, `-`, scalar `*` and Lagrange basis evaluation |
| `ecprimitives.sigma_dlog` | `DLogProof`: knowledge of a discrete logarithm (Schnorr) |
| `ecprimitives.sigma_ec_ddh` | `ECDDHProof`, `ECDDHStatement`, `ECDDHWitness`: two pairs share one discrete logarithm |
| `ecprimitives.pedersen_proofs` | `PedersenProof` and `PedersenBlindingProof`: a Pedersen commitment was formed correctly |
| `ecprimitives.elgamal_proofs` | `HomoElGamalProof` and `HomoElGamalDlogProof` with their statements and witnesses |
| `ecprimitives.ldei` | `LdeiProof`, `LdeiStatement`, `LdeiWitness`, `InvalidLdeiStatement`, `LdeiIssue`: low-degree exponent interpolation |
| `ecprimitives.feldman_vss` | `VerifiableSS`, `SecretShares`, `ShamirSecretSharing`, `VerifyShareError` |
| `ecprimitives.coin_flip` | two-party coin flipping: `Party1FirstMessage`, `Party2FirstMessage`, `Party1SecondMessage`, `finalize` |
| `ecprimitives.dh_key_exchange` | Diffie–Hellman key exchange and `compute_pubkey` |
| `ecprimitives.dh_pok_exchange` | Diffie–Hellman in which party one commits first and both parties prove knowledge of their secret shares |

Everything that hashes takes an `algorithm` argument, which defaults to
`"sha256"`. It may be any `hashlib` algorithm name (`"sha512"`,
`"sha3_256"`, ...) or a hash constructor such as `hashlib.sha512`. Challenges
are derived with `HashChain.result_scalar()`, which needs a digest of at
least 32 bytes.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

### Hashing points and integers

```python
from ecprimitives.curve import Point
from ecprimitives.hashing import HashChain

digest = (
    HashChain("sha256")
    .chain_point(Point.generator())
    .chain_point(Point.base_point2())
    .chain_bigint(10)
    .result_bigint()
)
```

Points are absorbed in uncompressed SEC1 form and integers as big-endian
bytes without leading zeros. `result_scalar()` turns the state into a
scalar by appending a 32-bit counter until the digest is below the group
order.

### Proving knowledge of a discrete logarithm

```python
from ecprimitives.curve import Scalar
from ecprimitives.errors import ProofError
from ecprimitives.sigma_dlog import DLogProof

witness = Scalar.random()
proof = DLogProof.prove(witness, "sha256")

try:
    proof.verify()
except ProofError:
    print("rejected")
```

All `verify` methods return `None` on success and raise `ProofError` when
the proof does not hold.

### Merkle membership

```python
from ecprimitives.curve import Point
from ecprimitives.merkle_tree import MerkleTree

g = Point.generator()
tree = MerkleTree([g, g + g, g * 3], "sha3_256")
proof = tree.build_proof(g + g)   # None if the point is not a leaf
proof.verify(tree.get_root())
```

### Verifiable secret sharing

```python
from ecprimitives.curve import Scalar
from ecprimitives.feldman_vss import VerifiableSS

shared_value = Scalar.random()
vss, shares = VerifiableSS.share(3, 5, shared_value, "sha256")

# Any threshold + 1 shares recover the value; indices are zero-based.
recovered = vss.reconstruct([0, 1, 2, 4], [shares[0], shares[1], shares[2], shares[4]])
assert recovered == shared_value

# Each party checks its own share against the public commitments;
# party numbers here start at 1. A bad share raises VerifyShareError.
vss.validate_share(shares[2], 3)
```

`share_at_indices` shares at chosen positive evaluation points instead of
`1..n`. `reshare()` returns fresh commitments to the same value together with
shares of zero to add to the old shares, and `map_share_to_new_params` gives
the Lagrange coefficient that turns a (t, n) share into an additive share
among a chosen subset of parties.

### Diffie–Hellman key exchange

```python
from ecprimitives import dh_key_exchange as dh

msg1, keys1 = dh.Party1FirstMessage.first()
msg2, keys2 = dh.Party2FirstMessage.first()

assert dh.compute_pubkey(keys1, msg2.public_share) == dh.compute_pubkey(keys2, msg1.public_share)
```

In `ecprimitives.dh_pok_exchange` party one calls
`Party1FirstMessage.create_commitments`, party two answers with
`Party2FirstMessage.create`, party one opens with
`Party1SecondMessage.verify_and_decommit`, and party two checks the openings
with `Party2SecondMessage.verify_commitments_and_dlog_proof`, which raises
`ProofError` if anything does not match.

### Coin flipping

```python
from ecprimitives import coin_flip

first, seed1, blinding1 = coin_flip.Party1FirstMessage.commit("sha256")
reply = coin_flip.Party2FirstMessage.share(first.proof)
second, result1 = coin_flip.Party1SecondMessage.reveal(reply.seed, seed1, blinding1, "sha256")
result2 = coin_flip.finalize(second.proof, reply.seed, first.proof.com)

assert result1 == result2
```

## What it does not do

- Only the secp256k1 curve is provided; there is no choice of curve.
- Proofs, messages and shares are plain Python objects. There is no
  serialization format for them and no network transport: sending messages
  between parties is left to the caller.
- There is no command-line tool.

## Security note

This package favours clarity over speed and makes no attempt at
constant-time arithmetic. Use it for prototyping, testing and teaching
rather than for protecting real secrets.