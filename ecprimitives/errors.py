"""Errors shared by the proof systems."""


class ProofError(Exception):
    """Raised when a proof fails to verify."""

    def __init__(self, message: str = "ProofError") -> None:
        super().__init__(message)