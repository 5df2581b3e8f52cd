"""
HTTP API for proof-of-invention commitments.

Exposes the Flask application factory and a development server runner.
"""

from .server import create_app, run_server

__all__ = ['create_app', 'run_server']
