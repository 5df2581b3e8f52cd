"""Unit tests for file digests."""

import pytest

from invention_proof.core.crypto import get_hasher
from invention_proof.core.digest import digest_file, digest_files, hash_file
from invention_proof.core.errors import EmptyInputError
from invention_proof.core.models import FileDigest, FileUpload


def test_hash_file_known_value() -> None:
    assert hash_file(b"b") == "0x3e23e8160039594a33894f6564e1b1348bbd7a0088d42c4acb73eeaed59c009d"


def test_digest_file_carries_metadata() -> None:
    upload = FileUpload(content=b"hello", filename="notes.txt", mime_type="text/plain")
    digest = digest_file(upload)

    assert isinstance(digest, FileDigest)
    assert digest.filename == "notes.txt"
    assert digest.size == 5
    assert digest.mime_type == "text/plain"
    assert digest.content_hash == hash_file(b"hello")


def test_digest_files_preserves_order(uploads_ab) -> None:
    digests = digest_files(uploads_ab)
    assert [d.filename for d in digests] == ["a.txt", "b.bin"]
    assert [d.content_hash for d in digests] == [hash_file(b"a"), hash_file(b"b")]


def test_hash_depends_only_on_content() -> None:
    """Identical bytes hash identically whatever the name or content type."""
    digests = digest_files([
        FileUpload(content=b"same bytes", filename="one.pdf", mime_type="application/pdf"),
        FileUpload(content=b"same bytes", filename="two.txt", mime_type="text/plain"),
    ])
    assert digests[0].content_hash == digests[1].content_hash


def test_digest_files_is_deterministic(uploads_ab) -> None:
    assert digest_files(uploads_ab) == digest_files(uploads_ab)


def test_digest_files_rejects_empty_input() -> None:
    with pytest.raises(EmptyInputError):
        digest_files([])


def test_zero_length_file_is_accepted() -> None:
    digest = digest_file(FileUpload(content=b"", filename="empty"))
    assert digest.size == 0
    assert digest.mime_type == "application/octet-stream"


def test_digest_files_with_alternative_hasher(uploads_ab) -> None:
    hasher = get_hasher("blake2s")
    digests = digest_files(uploads_ab, hasher)
    assert digests[0].content_hash == hasher.hexdigest(b"a")
    assert digests[0].content_hash != hash_file(b"a")


def test_digest_serializes_with_wire_names() -> None:
    data = digest_file(FileUpload(content=b"a", filename="a.txt", mime_type="text/plain")).to_dict()
    assert set(data) == {"filename", "contentHash", "size", "mimeType"}
