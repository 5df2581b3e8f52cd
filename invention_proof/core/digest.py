"""
Content hashing for uploaded files.

Each file is identified by a digest of its raw bytes alone: the same content
always produces the same hash whatever its filename or declared type.
"""

import logging
from typing import List, Optional, Sequence

from invention_proof.core.crypto import Hasher, get_default_hasher
from invention_proof.core.errors import EmptyInputError
from invention_proof.core.models import FileDigest, FileUpload

logger = logging.getLogger(__name__)


def hash_file(content: bytes, hasher: Optional[Hasher] = None) -> str:
    """Hash a file buffer and return the 0x-prefixed hex digest."""
    hasher = hasher or get_default_hasher()
    return hasher.hexdigest(content)


def digest_file(upload: FileUpload, hasher: Optional[Hasher] = None) -> FileDigest:
    """Compute the digest record for a single upload."""
    content_hash = hash_file(upload.content, hasher)
    logger.debug("Hashed %s (%d bytes) -> %s", upload.filename, upload.size, content_hash)
    return FileDigest(
        filename=upload.filename,
        content_hash=content_hash,
        size=upload.size,
        mime_type=upload.mime_type,
    )


def digest_files(
    uploads: Sequence[FileUpload],
    hasher: Optional[Hasher] = None
) -> List[FileDigest]:
    """
    Digest every upload, preserving submission order.

    Args:
        uploads: The files to hash, in the order they were submitted.
        hasher: Hash function to use. Defaults to SHA-256.

    Returns:
        One ``FileDigest`` per upload, in the same order.

    Raises:
        EmptyInputError: If ``uploads`` is empty.
    """
    if not uploads:
        raise EmptyInputError()

    hasher = hasher or get_default_hasher()
    return [digest_file(upload, hasher) for upload in uploads]
