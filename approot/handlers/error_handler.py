"""Error types for path resolution and their mapping to API responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Dict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from approot.utility.logger import AppLogger

logger = AppLogger.get_logger(__name__)


@dataclass(eq=False)
class InvalidPathError(Exception):
    """
    Raised when a resolved path is required to exist but is not a directory.
    Carries the offending category and path so callers can report them.
    """

    category: str
    path: str
    status_code: int = 500
    error_type: str = "invalid_path"
    details: Optional[Dict[str, Any]] = None
    message: str = field(init=False)

    def __post_init__(self) -> None:
        """Build the human readable message from category and path."""
        self.message = (
            f'Configured path for "{self.category}" is not a valid directory: '
            f"{self.path}"
        )
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


class MapExceptions:
    """Register translators from path errors to JSON error envelopes.

    Keeps the FastAPI app factory free of error plumbing. create_app builds
    its registry before serving, so the handler matters for applications
    that construct a Paths registry while handling a request.
    """

    def to_payload(self, exc: InvalidPathError) -> Dict[str, Any]:
        """Render an InvalidPathError as the JSON body sent to clients."""
        return {
            "status": "error",
            "error_type": exc.error_type,
            "category": exc.category,
            "path": exc.path,
            "message": exc.message,
            "details": exc.details,
        }

    @staticmethod
    def register_exception_handlers(app: FastAPI) -> None:
        """
        Call this once in the FastAPI app factory:

            app = FastAPI()
            MapExceptions.register_exception_handlers(app)
        """

        @app.exception_handler(InvalidPathError)
        async def invalid_path_error_handler(
            request: Request, exc: InvalidPathError
        ) -> JSONResponse:
            logger.error(
                "InvalidPathError caught by FastAPI handler",
                extra={"category": exc.category, "path": exc.path},
            )

            return JSONResponse(
                status_code=exc.status_code,
                content=MapExceptions().to_payload(exc),
            )
