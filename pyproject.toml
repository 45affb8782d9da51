[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecprimitives"
version = "0.1.0"
description = "Elliptic-curve cryptographic primitives over secp256k1: commitments, sigma proofs, Feldman VSS and two-party protocols"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "elliptic-curve",
    "secp256k1",
    "zero-knowledge",
    "sigma-protocol",
    "commitment",
    "secret-sharing",
    "feldman-vss",
    "diffie-hellman",
    "merkle-tree",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ecprimitives"]

[tool.hatch.build.targets.sdist]
include = ["ecprimitives", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
