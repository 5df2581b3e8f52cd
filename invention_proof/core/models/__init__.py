"""Value objects for file digests, Merkle commitments and API envelopes."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, StringConstraints, ValidationInfo, field_validator
from typing_extensions import Annotated

# Type aliases
PrefixedDigest = Annotated[str, StringConstraints(pattern=r'^0x[0-9a-f]{64}$')]
MerkleTreeFormat = Literal["simple-v1"]

MERKLE_TREE_FORMAT: MerkleTreeFormat = "simple-v1"
DEFAULT_MIME_TYPE = "application/octet-stream"


class FrozenModel(BaseModel):
    """Immutable model serialized with camelCase aliases."""

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    def to_dict(self) -> Dict[str, Any]:
        """Dump to a JSON-ready dictionary using the wire field names."""
        return self.model_dump(mode="json", by_alias=True)


class FileUpload(FrozenModel):
    """A file received from the caller, fully materialized in memory."""
    content: bytes = Field(
        ...,
        description="Raw file bytes."
    )
    filename: str = Field(
        ...,
        description="Caller-supplied display name; not checked for uniqueness or path safety."
    )
    mime_type: str = Field(
        DEFAULT_MIME_TYPE,
        alias="mimeType",
        description="Caller-declared content type, passed through unvalidated."
    )

    @property
    def size(self) -> int:
        return len(self.content)


class FileDigest(FrozenModel):
    """Content hash and descriptive metadata for one input file."""
    filename: str = Field(
        ...,
        description="Display name of the file."
    )
    content_hash: PrefixedDigest = Field(
        ...,
        alias="contentHash",
        description="0x-prefixed hex digest of the raw file bytes."
    )
    size: int = Field(
        ...,
        ge=0,
        description="Byte length of the original buffer."
    )
    mime_type: str = Field(
        ...,
        alias="mimeType",
        description="Caller-declared content type."
    )


class MerkleValue(FrozenModel):
    """A leaf hash and its 1-based position in submission order."""
    value: PrefixedDigest
    tree_index: int = Field(..., ge=1, alias="treeIndex")


class MerkleCommitment(FrozenModel):
    """Root, generated nodes and leaf assignments of one Merkle tree."""
    root: PrefixedDigest = Field(
        ...,
        description="Top-level node committing to every leaf and its order."
    )
    tree: List[PrefixedDigest] = Field(
        ...,
        min_length=1,
        description="Root first, then generated nodes in reverse generation order."
    )
    values: List[MerkleValue] = Field(
        ...,
        min_length=1,
        description="One entry per leaf in submission order."
    )

    @field_validator('tree')
    @classmethod
    def root_leads_tree(cls, v: List[str], info: ValidationInfo) -> List[str]:
        """The first element of the tree is always the root."""
        root = info.data.get('root')
        if root is not None and v[0] != root:
            raise ValueError('tree must start with the root')
        return v


class MerkleTreeView(FrozenModel):
    """A Merkle commitment tagged with its encoding format."""
    format: MerkleTreeFormat = MERKLE_TREE_FORMAT
    tree: List[PrefixedDigest]
    values: List[MerkleValue]

    @classmethod
    def from_commitment(cls, commitment: MerkleCommitment) -> 'MerkleTreeView':
        return cls(tree=commitment.tree, values=commitment.values)


class TransactionPayload(FrozenModel):
    """Data a client submits on-chain to anchor the commitment."""
    payload: PrefixedDigest = Field(
        ...,
        description="The Merkle root."
    )
    recipient: str = Field(
        ...,
        description="Deployment-configured contract address."
    )


class ProofOfInventionResult(FrozenModel):
    """Everything produced for one set of uploaded files."""
    root: PrefixedDigest
    merkle_tree: MerkleTreeView = Field(..., alias="merkleTree")
    transaction: TransactionPayload
    files: List[FileDigest]


class UploadValidation(FrozenModel):
    """Outcome of the boundary checks run before hashing."""
    valid: bool
    error: Optional[str] = None


class ResponseMetadata(FrozenModel):
    """Metadata attached to every API response."""
    supported_evm_chain_ids: List[int] = Field(..., alias="supportedEvmChainIds")
    api_version: str = Field(..., alias="apiVersion")
    timestamp: str = Field(
        ...,
        description="UTC time the response was produced (ISO 8601, 'Z' suffix)."
    )


class ErrorDetail(FrozenModel):
    message: str
    code: int


class SuccessResponse(FrozenModel):
    success: Literal[True] = True
    result: ProofOfInventionResult
    metadata: ResponseMetadata


class ErrorResponse(FrozenModel):
    success: Literal[False] = False
    error: ErrorDetail
    metadata: ResponseMetadata


__all__ = [
    "DEFAULT_MIME_TYPE",
    "MERKLE_TREE_FORMAT",
    "ErrorDetail",
    "ErrorResponse",
    "FileDigest",
    "FileUpload",
    "MerkleCommitment",
    "MerkleTreeView",
    "MerkleValue",
    "PrefixedDigest",
    "ProofOfInventionResult",
    "ResponseMetadata",
    "SuccessResponse",
    "TransactionPayload",
    "UploadValidation",
]
