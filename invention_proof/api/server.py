"""
Proof-of-Invention HTTP API
===========================

A thin Flask layer over the core: authenticates the caller, reads the
multipart upload into memory, enforces the aggregate size limit and returns
the commitment in a success/error envelope.
"""

import hmac
import logging
import os
from functools import wraps
from typing import Callable, List

from flask import Flask, jsonify, request
from flask.typing import ResponseReturnValue
from werkzeug.exceptions import HTTPException

from invention_proof.config import Settings
from invention_proof.core.errors import EmptyInputError
from invention_proof.core.models import DEFAULT_MIME_TYPE, FileUpload
from invention_proof.core.service import ProofOfInventionService

logger = logging.getLogger(__name__)

# Room for multipart boundaries and headers on top of the file bytes
MULTIPART_OVERHEAD_BYTES = 1024 * 1024

UNAUTHORIZED_MESSAGE = "Unauthorized: Invalid or missing API token"


def _read_uploads() -> List[FileUpload]:
    """Materialize every ``files`` part of the current request."""
    return [
        FileUpload(
            content=storage.read(),
            filename=storage.filename or "",
            mime_type=storage.mimetype or DEFAULT_MIME_TYPE,
        )
        for storage in request.files.getlist("files")
    ]


def create_app(test_config=None) -> Flask:
    """Create and configure the Flask application.

    Args:
        test_config: Optional mapping applied over the environment settings

    Returns:
        Configured Flask application
    """
    app = Flask(__name__, instance_relative_config=True)

    settings = Settings.from_env()
    app.config.from_mapping(
        SECRET_KEY=os.urandom(24),
        POI_SETTINGS=settings,
        # Only the aggregate byte size is limited, not the number of files
        MAX_FORM_PARTS=None,
    )

    # Apply test config if provided
    if test_config is not None:
        app.config.update(test_config)

    settings = app.config["POI_SETTINGS"]
    if app.config.get("MAX_CONTENT_LENGTH") is None:
        app.config["MAX_CONTENT_LENGTH"] = settings.max_upload_bytes + MULTIPART_OVERHEAD_BYTES

    service = ProofOfInventionService(settings)

    def error_json(message: str, code: int) -> ResponseReturnValue:
        return jsonify(service.error_response(message, code).to_dict()), code

    def require_bearer_token(view: Callable) -> Callable:
        """Reject requests without the configured bearer token."""
        @wraps(view)
        def wrapper(*args, **kwargs):
            auth_header = request.headers.get("Authorization", "")
            if not auth_header.startswith("Bearer ") or not settings.api_key:
                return error_json(UNAUTHORIZED_MESSAGE, 401)

            token = auth_header[len("Bearer "):]
            if not hmac.compare_digest(token.encode(), settings.api_key.encode()):
                return error_json(UNAUTHORIZED_MESSAGE, 401)

            return view(*args, **kwargs)
        return wrapper

    # Register routes
    @app.route('/health', methods=['GET'])
    def health() -> ResponseReturnValue:
        """Health check endpoint."""
        return jsonify({
            'status': 'healthy',
            'metadata': service.metadata().to_dict(),
        })

    @app.route('/api/v1/inventions', methods=['POST'])
    @require_bearer_token
    def create_invention() -> ResponseReturnValue:
        """Generate a proof of invention for the uploaded files."""
        uploads = _read_uploads()

        validation = service.validate_uploads(uploads)
        if not validation.valid:
            return error_json(validation.error, 400)

        try:
            result = service.generate(uploads)
        except EmptyInputError as e:
            return error_json(str(e), 400)
        except Exception:
            logger.exception("Error generating proof of invention")
            return error_json(
                "Internal server error occurred while processing your request", 500
            )

        return jsonify(service.success_response(result).to_dict())

    # Error handlers
    @app.errorhandler(404)
    def not_found(error: HTTPException) -> ResponseReturnValue:
        return error_json("Not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(error: HTTPException) -> ResponseReturnValue:
        return error_json("Method not allowed", 405)

    @app.errorhandler(413)
    def too_large(error: HTTPException) -> ResponseReturnValue:
        max_length = app.config.get("MAX_CONTENT_LENGTH")
        if max_length is not None and (request.content_length or 0) > max_length:
            limit_mb = round(settings.max_upload_bytes / (1024 * 1024))
            return error_json(f"File size exceeds the {limit_mb}MB limit", 400)
        return error_json(f"File upload error: {error.description}", 400)

    @app.errorhandler(500)
    def internal_error(error: HTTPException) -> ResponseReturnValue:
        return error_json("An internal server error occurred", 500)

    return app


def run_server(host: str = '0.0.0.0', port: int = 5000, debug: bool = False) -> None:
    """Run the proof-of-invention API server.

    Args:
        host: Host to bind to
        port: Port to listen on
        debug: Enable debug mode
    """
    app = create_app()
    app.run(host=host, port=port, debug=debug)
