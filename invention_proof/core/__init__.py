"""
Core functionality for proof-of-invention commitments.

This package contains the file digest and Merkle commitment components and
the service that bundles their output for the API and CLI.
"""

from .errors import EmptyInputError, InvalidLeafError, ProofOfInventionError, UnsupportedHashError
from .digest import digest_file, digest_files, hash_file
from .merkle import MerkleTree, build_commitment
from .service import ProofOfInventionService, generate_proof_of_invention

__all__ = [
    'EmptyInputError',
    'InvalidLeafError',
    'MerkleTree',
    'ProofOfInventionError',
    'ProofOfInventionService',
    'UnsupportedHashError',
    'build_commitment',
    'digest_file',
    'digest_files',
    'generate_proof_of_invention',
    'hash_file',
]
