"""
Hashing primitives for the proof-of-invention core.

Leaves and tree nodes are both produced by a ``Hasher`` and combined by a
``NodeCombiner``. Both are swappable so the 32-byte digest assumption and the
node concatenation convention can be exercised independently.
"""

import hashlib
import re
from abc import ABC, abstractmethod
from typing import Optional

from cryptography.hazmat.primitives import hashes

from invention_proof.core.errors import UnsupportedHashError

HEX_PREFIX = "0x"
DIGEST_SIZE = 32

_PREFIXED_DIGEST_RE = re.compile(r"^0x[0-9a-f]{64}$")


def add_hex_prefix(hex_digest: str) -> str:
    """Prepend ``0x`` to a bare hex string."""
    return HEX_PREFIX + hex_digest


def strip_hex_prefix(value: str) -> str:
    """Remove a leading ``0x`` if present."""
    if value.startswith(HEX_PREFIX):
        return value[len(HEX_PREFIX):]
    return value


def is_prefixed_digest(value: object) -> bool:
    """Check if a value is a lowercase, 0x-prefixed 32-byte hex digest."""
    return isinstance(value, str) and _PREFIXED_DIGEST_RE.match(value) is not None


class Hasher(ABC):
    """A hash function producing a fixed 32-byte digest."""

    name: str = ""
    digest_size: int = DIGEST_SIZE

    @abstractmethod
    def digest(self, data: bytes) -> bytes:
        """Return the raw digest of ``data``."""

    def hexdigest(self, data: bytes) -> str:
        """Return the digest of ``data`` as 0x-prefixed lowercase hex."""
        return add_hex_prefix(self.digest(data).hex())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Sha256Hasher(Hasher):
    """SHA-256 from the standard library."""

    name = "sha256"

    def digest(self, data: bytes) -> bytes:
        return hashlib.sha256(data).digest()


class CryptographyHasher(Hasher):
    """
    A hasher backed by ``cryptography``'s hash primitives.

    Only algorithms with a 32-byte output are accepted, e.g. ``hashes.SHA256()``,
    ``hashes.SHA3_256()`` or ``hashes.BLAKE2s(32)``.
    """

    def __init__(self, algorithm: Optional[hashes.HashAlgorithm] = None):
        algorithm = algorithm or hashes.SHA256()
        if algorithm.digest_size != DIGEST_SIZE:
            raise UnsupportedHashError(
                f"{algorithm.name} produces {algorithm.digest_size}-byte digests, "
                f"expected {DIGEST_SIZE}"
            )
        self.algorithm = algorithm
        self.name = algorithm.name

    def digest(self, data: bytes) -> bytes:
        ctx = hashes.Hash(self.algorithm)
        ctx.update(data)
        return ctx.finalize()


class NodeCombiner(ABC):
    """Combines two child node hashes into their parent hash."""

    @abstractmethod
    def combine(self, left: str, right: str) -> str:
        """Return the parent hash of ``left`` and ``right``."""


class PrefixedConcatCombiner(NodeCombiner):
    """
    Hash the string ``left + right`` with only the right operand's ``0x`` removed.

    The left operand keeps its prefix, so the hashed input is the UTF-8 text
    ``"0x<left hex><right hex>"``. Issued roots depend on this exact form:
    stripping both prefixes or hashing raw bytes yields different values.
    """

    def __init__(self, hasher: Optional[Hasher] = None):
        self.hasher = hasher or Sha256Hasher()

    def combine(self, left: str, right: str) -> str:
        combined = left + strip_hex_prefix(right)
        return self.hasher.hexdigest(combined.encode("utf-8"))

    def __repr__(self) -> str:
        return f"PrefixedConcatCombiner({self.hasher!r})"


def hash_sha256(data: bytes) -> str:
    """Compute SHA-256 of data and return it as a 0x-prefixed hex string."""
    return Sha256Hasher().hexdigest(data)


def get_default_hasher() -> Hasher:
    return Sha256Hasher()


HASHER_NAMES = ("sha256", "sha3-256", "blake2s")


def get_hasher(name: str) -> Hasher:
    """Look up a 32-byte hasher by name."""
    if name == "sha256":
        return Sha256Hasher()
    if name == "sha3-256":
        return CryptographyHasher(hashes.SHA3_256())
    if name == "blake2s":
        return CryptographyHasher(hashes.BLAKE2s(32))
    raise UnsupportedHashError(f"Unknown hash algorithm: {name}")


__all__ = [
    "DIGEST_SIZE",
    "HASHER_NAMES",
    "HEX_PREFIX",
    "CryptographyHasher",
    "Hasher",
    "NodeCombiner",
    "PrefixedConcatCombiner",
    "Sha256Hasher",
    "add_hex_prefix",
    "get_default_hasher",
    "get_hasher",
    "hash_sha256",
    "is_prefixed_digest",
    "strip_hex_prefix",
]
