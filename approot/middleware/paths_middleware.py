"""Attach the shared Paths registry to every request."""

from starlette.types import ASGIApp, Receive, Scope, Send

from approot.services.registry_service.paths import Paths


class PathsMiddleware:
    """ASGI middleware exposing the registry as ``request.state.paths``."""

    def __init__(self, app: ASGIApp, paths: Paths) -> None:
        self.app = app
        self.paths = paths

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] in ("http", "websocket"):
            scope.setdefault("state", {})["paths"] = self.paths
        await self.app(scope, receive, send)
