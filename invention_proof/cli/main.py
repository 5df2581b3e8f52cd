"""
Invention Proof Command Line Interface

Provides commands for committing files to a Merkle root and serving the API.
"""

import json
import logging
import mimetypes
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import click

from invention_proof.config import ConfigurationError, Settings
from invention_proof.core.crypto import HASHER_NAMES, get_hasher
from invention_proof.core.errors import ProofOfInventionError
from invention_proof.core.models import DEFAULT_MIME_TYPE, FileUpload
from invention_proof.core.service import ProofOfInventionService

# Configure click
CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


# Helper functions
def load_upload(file_path: str, mime_type: Optional[str] = None) -> FileUpload:
    """Read a file from disk into an upload record."""
    path = Path(file_path)
    if mime_type is None:
        mime_type = mimetypes.guess_type(path.name)[0] or DEFAULT_MIME_TYPE
    try:
        content = path.read_bytes()
    except OSError as e:
        click.echo(f"Error reading {file_path}: {e}", err=True)
        sys.exit(1)
    return FileUpload(content=content, filename=path.name, mime_type=mime_type)


def write_result(data: dict, output: Optional[str]) -> None:
    """Print the result as JSON or save it to a file."""
    text = json.dumps(data, indent=2)
    if output is None:
        click.echo(text)
        return
    try:
        Path(output).write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        click.echo(f"Error saving result: {e}", err=True)
        sys.exit(1)
    click.echo(f"Result saved to {output}", err=True)


# Command groups
@click.group(context_settings=CONTEXT_SETTINGS)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose: bool):
    """Invention Proof - Merkle commitments over uploaded files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument('files', nargs=-1, type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', help='Output file for the result JSON')
@click.option('--mime-type', help='Content type for every file (default: guessed from the name)')
@click.option('--recipient', help='Override the contract address in the transaction payload')
@click.option('--hash', 'hash_name', type=click.Choice(HASHER_NAMES), default='sha256',
              show_default=True, help='Hash algorithm for leaves and nodes')
def commit(files: Tuple[str, ...], output: Optional[str], mime_type: Optional[str],
           recipient: Optional[str], hash_name: str):
    """Commit FILES, in the given order, to a single Merkle root."""
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    if recipient:
        settings = settings.model_copy(update={"contract_address": recipient})

    uploads: List[FileUpload] = [load_upload(f, mime_type) for f in files]
    service = ProofOfInventionService(settings, hasher=get_hasher(hash_name))

    validation = service.validate_uploads(uploads)
    if not validation.valid:
        click.echo(f"Error: {validation.error}", err=True)
        sys.exit(1)

    try:
        result = service.generate(uploads)
    except ProofOfInventionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    write_result(result.to_dict(), output)


@cli.command()
@click.option('--host', default='0.0.0.0', help='Host to bind to')
@click.option('--port', type=int, default=5000, help='Port to listen on')
@click.option('--debug', is_flag=True, help='Enable debug mode')
def serve(host: str, port: int, debug: bool):
    """Run the proof-of-invention HTTP API."""
    from invention_proof.api import run_server

    click.echo(f"Starting proof-of-invention API on {host}:{port}")
    run_server(host=host, port=port, debug=debug)


# Main entry point
if __name__ == '__main__':
    cli()
