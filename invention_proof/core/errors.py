"""
Error taxonomy for the proof-of-invention core.

The core raises exactly these exceptions; translating them into HTTP
responses or exit codes is left to the calling layer.
"""


class ProofOfInventionError(Exception):
    """Base class for all errors raised by the core."""

    pass


class EmptyInputError(ProofOfInventionError, ValueError):
    """Raised when no files (or no leaf hashes) are supplied."""

    def __init__(self, message: str = "No files provided"):
        super().__init__(message)


class InvalidLeafError(ProofOfInventionError, ValueError):
    """Raised when a leaf is not a 0x-prefixed 32-byte hex digest."""

    def __init__(self, index: int, value: object):
        self.index = index
        self.value = value
        super().__init__(f"Leaf {index} is not a 0x-prefixed 32-byte hex digest: {value!r}")


class UnsupportedHashError(ProofOfInventionError, ValueError):
    """Raised when a hash algorithm does not produce a 32-byte digest."""

    pass
