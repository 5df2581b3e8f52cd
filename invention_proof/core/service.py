"""
Proof-of-invention assembly.

Ties the digest and Merkle components together and shapes the result and the
response envelopes handed back to the HTTP and CLI layers.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Sequence

from invention_proof.config import Settings
from invention_proof.core.crypto import Hasher, NodeCombiner, PrefixedConcatCombiner, get_default_hasher
from invention_proof.core.digest import digest_files
from invention_proof.core.errors import EmptyInputError
from invention_proof.core.merkle import build_commitment
from invention_proof.core.models import (
    ErrorDetail,
    ErrorResponse,
    FileUpload,
    MerkleTreeView,
    ProofOfInventionResult,
    ResponseMetadata,
    SuccessResponse,
    TransactionPayload,
    UploadValidation,
)

logger = logging.getLogger(__name__)

_MB = 1024 * 1024


class ProofOfInventionService:
    """Builds proof-of-invention commitments for a deployment."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        hasher: Optional[Hasher] = None,
        combiner: Optional[NodeCombiner] = None,
    ):
        self.settings = settings or Settings()
        self.hasher = hasher or get_default_hasher()
        self.combiner = combiner or PrefixedConcatCombiner(self.hasher)

    def generate(self, uploads: Sequence[FileUpload]) -> ProofOfInventionResult:
        """
        Hash every upload and commit to all of them with a single Merkle root.

        Either every file is included or an exception is raised; there is no
        partial result.

        Raises:
            EmptyInputError: If no uploads are given.
        """
        if not uploads:
            raise EmptyInputError()

        files = digest_files(uploads, self.hasher)
        commitment = build_commitment([f.content_hash for f in files], self.combiner)

        logger.info("Committed %d file(s) under root %s", len(files), commitment.root)
        return ProofOfInventionResult(
            root=commitment.root,
            merkle_tree=MerkleTreeView.from_commitment(commitment),
            transaction=TransactionPayload(
                payload=commitment.root,
                recipient=self.settings.contract_address,
            ),
            files=files,
        )

    def validate_uploads(self, uploads: Sequence[FileUpload]) -> UploadValidation:
        """Check the upload count and the aggregate size before hashing."""
        if not uploads:
            return UploadValidation(
                valid=False,
                error="No files provided. Please upload at least one file."
            )

        total_size = sum(upload.size for upload in uploads)
        limit = self.settings.max_upload_bytes
        if total_size > limit:
            return UploadValidation(
                valid=False,
                error=(
                    f"Total file size ({round(total_size / _MB)}MB) exceeds "
                    f"{round(limit / _MB)}MB limit"
                ),
            )

        return UploadValidation(valid=True)

    def metadata(self) -> ResponseMetadata:
        """Get API metadata for a response."""
        now = datetime.now(timezone.utc)
        return ResponseMetadata(
            supported_evm_chain_ids=self.settings.supported_chain_ids,
            api_version=self.settings.api_version,
            timestamp=now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        )

    def success_response(self, result: ProofOfInventionResult) -> SuccessResponse:
        return SuccessResponse(result=result, metadata=self.metadata())

    def error_response(self, message: str, code: int) -> ErrorResponse:
        return ErrorResponse(
            error=ErrorDetail(message=message, code=code),
            metadata=self.metadata(),
        )


def generate_proof_of_invention(
    uploads: Sequence[FileUpload],
    settings: Optional[Settings] = None
) -> ProofOfInventionResult:
    """Generate a proof of invention with the default hash and combination rule."""
    return ProofOfInventionService(settings).generate(uploads)
