"""Dependency providers handing path services to API handlers."""

from fastapi import Request

from approot.services.discovery_service.discoverer import PathDiscoverer
from approot.services.registry_service.paths import Paths


class PathServices:
    """Expose dependency providers for the registry and the discoverer.

    The registry comes from the request (set by PathsMiddleware); other
    services are looked up in the container stored on the application.
    """

    @staticmethod
    def get_paths(request: Request) -> Paths:
        """Provide the Paths registry attached to the current request."""
        return request.state.paths

    @staticmethod
    def get_discoverer(request: Request) -> PathDiscoverer:
        """Provide the PathDiscoverer registered in the app container."""
        return request.app.state.container.get(PathDiscoverer)
