"""
Deployment settings for the proof-of-invention service.

Values come from the environment; nothing is cached at module level, so each
caller decides when to read them.
"""

import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

DEFAULT_CONTRACT_ADDRESS = "0x1DEA29b04a59000b877979339a457d5aBE315b52"
DEFAULT_MAX_UPLOAD_BYTES = 100 * 1024 * 1024  # 100MB across all files
DEFAULT_SUPPORTED_CHAIN_IDS = [1, 8453]  # Ethereum Mainnet, Base
API_VERSION = "1.0"

ENV_FIELDS = {
    "POI_CONTRACT_ADDRESS": "contract_address",
    "POI_API_KEY": "api_key",
    "POI_MAX_UPLOAD_BYTES": "max_upload_bytes",
}
FIELD_ENV = {field: name for name, field in ENV_FIELDS.items()}


class ConfigurationError(ValueError):
    """Raised when an environment variable holds an invalid setting."""

    pass


class Settings(BaseModel):
    """Static, per-deployment configuration."""

    contract_address: str = Field(
        DEFAULT_CONTRACT_ADDRESS,
        description="On-chain recipient of the commitment transaction."
    )
    api_key: Optional[str] = Field(
        None,
        description="Bearer token expected by the HTTP API. When unset, every request is rejected."
    )
    max_upload_bytes: int = Field(
        DEFAULT_MAX_UPLOAD_BYTES,
        gt=0,
        description="Ceiling on the summed size of all files in one request."
    )
    supported_chain_ids: List[int] = Field(
        default_factory=lambda: list(DEFAULT_SUPPORTED_CHAIN_IDS),
        description="EVM chain IDs the commitment can be anchored on."
    )
    api_version: str = API_VERSION

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Load settings from ``POI_*`` environment variables."""
        environ = os.environ if environ is None else environ
        values = {
            field: environ[name]
            for name, field in ENV_FIELDS.items()
            if environ.get(name)
        }
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            problems = []
            for error in e.errors():
                name = FIELD_ENV[error["loc"][0]]
                problems.append(f"{name}={environ[name]!r}: {error['msg']}")
            raise ConfigurationError(f"Invalid environment settings: {'; '.join(problems)}") from e
