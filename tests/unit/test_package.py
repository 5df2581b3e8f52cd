"""Tests for the top-level package exports."""

import invention_proof
import invention_proof.core


def test_core_exports_are_available_at_top_level() -> None:
    """Everything the core package exports is also exported by the top-level package."""
    missing = set(invention_proof.core.__all__) - set(invention_proof.__all__)
    assert not missing


def test_exported_names_resolve() -> None:
    for name in invention_proof.__all__:
        assert hasattr(invention_proof, name), name
    assert invention_proof.get_hasher("sha256").name == "sha256"
