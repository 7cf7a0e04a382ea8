"""Detect the URL prefix an application is mounted under and strip it before routing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import unquote, urlsplit

from starlette.types import ASGIApp, Receive, Scope, Send

from approot.config.settings import Settings
from approot.utility.logger import AppLogger

logger = AppLogger.get_logger(__name__)

DEV_SERVER_MODE = "dev-server"


def dirname(path: str, levels: int = 1) -> str:
    """
    POSIX ``dirname`` applied ``levels`` times.

    Unlike os.path.dirname, a bare file name yields ``"."`` and trailing
    slashes are ignored, so ``dirname("/a/b/")`` is ``"/a"``.
    """
    for _ in range(levels):
        if path == "":
            return ""
        stripped = path.rstrip("/")
        if stripped == "":
            path = "/"
            continue
        head, sep, _ = stripped.rpartition("/")
        if not sep:
            path = "."
            continue
        path = head.rstrip("/") or "/"
    return path


@dataclass(frozen=True)
class BasePathContext:
    """Request metadata needed to work out the base path."""

    script_name: str = ""
    request_uri: Optional[str] = None
    dev_server: bool = False

    @classmethod
    def from_scope(
        cls, scope: Scope, script_name: str, server_mode: Optional[str]
    ) -> "BasePathContext":
        """Build the context for an ASGI request scope."""
        raw_path = scope.get("raw_path")
        if raw_path:
            request_uri = raw_path.decode("latin-1")
        else:
            request_uri = scope.get("path")

        query_string = scope.get("query_string") or b""
        if request_uri is not None and query_string:
            request_uri = request_uri + "?" + query_string.decode("latin-1")

        return cls(
            script_name=script_name,
            request_uri=request_uri,
            dev_server=server_mode == DEV_SERVER_MODE,
        )


class BasePathResolver:
    """
    Compute the prefix to strip when the app is not served from the web root.

    Two deployment modes are supported. Behind the development server the
    prefix is the directory of the entry script. Behind a production web
    server the entry script lives one level below the mount point (for
    example ``/my-app/public/index.py``), so the prefix is the leading part
    of the request path as long as the script's grandparent directory.
    Anything unexpected yields an empty prefix.
    """

    def resolve(self, context: BasePathContext) -> str:
        if context.dev_server:
            return self._by_script_name(context)
        return self._by_request_uri(context)

    def _by_script_name(self, context: BasePathContext) -> str:
        base_path = dirname(context.script_name or "").replace("\\", "/")
        if len(base_path) > 1:
            return base_path
        return ""

    def _by_request_uri(self, context: BasePathContext) -> str:
        if context.request_uri is None:
            return ""

        try:
            # root_path is matched against the decoded ASGI path
            request_path = unquote(urlsplit(context.request_uri).path)
        except ValueError:
            logger.debug("Unparseable request URI: %r", context.request_uri)
            return ""

        script_dir = dirname(context.script_name or "", 2).replace("\\", "/")
        if script_dir == "/":
            return ""

        base_path = request_path[: len(script_dir)]
        if len(base_path) > 1:
            return base_path
        return ""


class BasePathMiddleware:
    """
    ASGI middleware applying the detected base path to every request.

    The prefix becomes the scope's ``root_path`` so the Starlette router
    matches routes against the remainder of the path. The value is also
    published as ``request.state.base_path``.
    """

    def __init__(
        self,
        app: ASGIApp,
        server_mode: Optional[str] = None,
        script_name: Optional[str] = None,
    ) -> None:
        self.app = app
        if server_mode is None or script_name is None:
            settings = Settings.from_env()
            server_mode = server_mode if server_mode is not None else settings.server_mode
            script_name = script_name if script_name is not None else settings.script_name
        self.server_mode = server_mode
        self.script_name = script_name
        self.resolver = BasePathResolver()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        context = BasePathContext.from_scope(scope, self.script_name, self.server_mode)
        base_path = self.resolver.resolve(context)

        scope.setdefault("state", {})["base_path"] = base_path
        if base_path:
            scope["root_path"] = base_path
            logger.debug("Base path %s applied to %s", base_path, scope.get("path"))

        await self.app(scope, receive, send)
