"""
Invention Proof - Merkle commitments over uploaded files.

This package hashes a set of files, commits to all of them with a single Merkle
root and returns the tree needed to later prove each file's inclusion.
"""

from importlib.metadata import version

# Set up version
__version__ = "0.1.0"

try:
    __version__ = version("invention-proof")
except Exception:
    pass

# Core components
from invention_proof.config import ConfigurationError, Settings
from invention_proof.core.crypto import (
    CryptographyHasher,
    Hasher,
    NodeCombiner,
    PrefixedConcatCombiner,
    Sha256Hasher,
    get_hasher,
    hash_sha256,
)
from invention_proof.core.errors import (
    EmptyInputError,
    InvalidLeafError,
    ProofOfInventionError,
    UnsupportedHashError,
)
from invention_proof.core.merkle import MerkleTree, build_commitment
from invention_proof.core.digest import digest_file, digest_files, hash_file
from invention_proof.core.models import (
    MERKLE_TREE_FORMAT,
    FileDigest,
    FileUpload,
    MerkleCommitment,
    MerkleTreeView,
    MerkleValue,
    ProofOfInventionResult,
    TransactionPayload,
)
from invention_proof.core.service import ProofOfInventionService, generate_proof_of_invention

__all__ = [
    # Core functionality
    "Settings",
    "ConfigurationError",
    "CryptographyHasher",
    "Hasher",
    "NodeCombiner",
    "PrefixedConcatCombiner",
    "Sha256Hasher",
    "get_hasher",
    "hash_sha256",
    "hash_file",
    "digest_file",
    "digest_files",
    "MerkleTree",
    "build_commitment",
    "ProofOfInventionService",
    "generate_proof_of_invention",
    # Errors
    "EmptyInputError",
    "InvalidLeafError",
    "ProofOfInventionError",
    "UnsupportedHashError",
    # Models
    "MERKLE_TREE_FORMAT",
    "FileDigest",
    "FileUpload",
    "MerkleCommitment",
    "MerkleTreeView",
    "MerkleValue",
    "ProofOfInventionResult",
    "TransactionPayload",
]
