"""FastAPI application bootstrap and routing setup."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from termcolor import colored

from approot.config.container import Container, PathsProvider
from approot.config.settings import Settings
from approot.controller.paths_controller import router as paths_router
from approot.handlers.error_handler import MapExceptions as me
from approot.middleware.base_path import BasePathMiddleware
from approot.middleware.paths_middleware import PathsMiddleware
from approot.services.registry_service.paths import Paths
from approot.utility.logger import AppLogger

logger = AppLogger.get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application: resolve paths once, then wire middleware and routes.

    Raises:
        InvalidPathError: If strict validation is enabled and a directory is missing.
    """
    settings = settings or Settings.from_env()

    container = Container()
    PathsProvider.register(
        container,
        settings.root_path,
        settings.load_overrides(),
        settings.auto_discover,
        settings.validate_paths,
    )
    paths: Paths = container.get(Paths)

    AppLogger.init(
        level=getattr(logging, settings.log_level),
        log_to_file=settings.log_to_file,
        paths=paths,
    )
    logger.info(colored(f"Serving {paths.get_root_path()} in {settings.server_mode} mode", "yellow"))

    app = FastAPI(title="approot", version="0.1.0")
    app.state.container = container
    app.state.settings = settings
    me.register_exception_handlers(app)

    # Added last, runs first: the base path must be set before routing.
    app.add_middleware(PathsMiddleware, paths=paths)
    app.add_middleware(
        BasePathMiddleware,
        server_mode=settings.server_mode,
        script_name=settings.script_name,
    )
    app.include_router(paths_router)

    @app.get("/health", tags=["Health"])
    def health_check(request: Request):
        """Health probe reporting the mode and detected base path."""
        return {
            "status": "ok",
            "mode": settings.server_mode,
            "base_path": request.state.base_path,
        }

    return app
