import pytest

from invention_proof.config import Settings
from invention_proof.core.models import FileUpload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        contract_address="0x000000000000000000000000000000000000dEaD",
        api_key="test-token",
    )


@pytest.fixture
def uploads_ab():
    return [
        FileUpload(content=b"a", filename="a.txt", mime_type="text/plain"),
        FileUpload(content=b"b", filename="b.bin", mime_type="application/octet-stream"),
    ]
