"""Tests for the command line interface."""

import json

from click.testing import CliRunner

from invention_proof.cli import cli

AB_ROOT = "0xab73cd59c2e70d462b484ffa89702cd668e3d908d77282e198f6d69d69e1b9fe"


def write_ab(tmp_path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_bytes(b"a")
    b.write_bytes(b"b")
    return str(a), str(b)


def test_commit_prints_result(tmp_path, monkeypatch):
    monkeypatch.delenv("POI_CONTRACT_ADDRESS", raising=False)
    a, b = write_ab(tmp_path)
    result = CliRunner().invoke(cli, ["commit", a, b])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["root"] == AB_ROOT
    assert data["files"][0]["mimeType"] == "text/plain"
    assert data["files"][1]["size"] == 1


def test_commit_writes_output_file(tmp_path):
    a, b = write_ab(tmp_path)
    output = tmp_path / "result.json"
    result = CliRunner().invoke(cli, ["commit", a, b, "-o", str(output), "--recipient", "0xabc"])

    assert result.exit_code == 0, result.output
    data = json.loads(output.read_text())
    assert data["transaction"] == {"payload": AB_ROOT, "recipient": "0xabc"}


def test_commit_with_alternative_hash(tmp_path):
    a, b = write_ab(tmp_path)
    result = CliRunner().invoke(cli, ["commit", a, b, "--hash", "sha3-256"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["root"] != AB_ROOT


def test_commit_without_files_fails():
    result = CliRunner().invoke(cli, ["commit"])
    assert result.exit_code == 1
    assert "No files provided" in result.output


def test_verbose_commit(tmp_path):
    a, b = write_ab(tmp_path)
    output = tmp_path / "result.json"
    result = CliRunner().invoke(cli, ["-v", "commit", a, b, "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert json.loads(output.read_text())["root"] == AB_ROOT


def test_commit_mime_type_override(tmp_path):
    a, b = write_ab(tmp_path)
    output = tmp_path / "result.json"
    result = CliRunner().invoke(
        cli, ["commit", a, b, "--mime-type", "application/pdf", "-o", str(output)]
    )

    assert result.exit_code == 0, result.output
    files = json.loads(output.read_text())["files"]
    assert [f["mimeType"] for f in files] == ["application/pdf", "application/pdf"]
    # Content type never affects the hash
    assert json.loads(output.read_text())["root"] == AB_ROOT


def test_commit_reports_bad_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("POI_MAX_UPLOAD_BYTES", "lots")
    a, b = write_ab(tmp_path)
    result = CliRunner().invoke(cli, ["commit", a, b])

    assert result.exit_code == 1
    assert "POI_MAX_UPLOAD_BYTES" in result.output
