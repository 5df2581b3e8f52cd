"""
Invention Proof Command Line Interface.

This package provides command-line tools for committing files to a Merkle root
and running the HTTP API.
"""

# Import the main CLI entry point
from .main import cli

# Re-export for easier imports
__all__ = [
    'cli',
]
