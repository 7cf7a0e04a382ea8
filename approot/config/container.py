"""Minimal service container and the registration of path services."""

from typing import Any, Callable, Dict, Mapping, Optional

from approot.services.discovery_service.discoverer import PathDiscoverer
from approot.services.registry_service.paths import Paths
from approot.services.validation_service.validator import PathValidator
from approot.utility.logger import AppLogger
from approot.utility.normalizer import PathNormalizer

logger = AppLogger.get_logger(__name__)

Factory = Callable[["Container"], Any]


class Container:
    """
    Key -> service lookup with lazily built services.

    Factories receive the container so they can resolve their own
    dependencies. Singleton factories run at most once.
    """

    def __init__(self):
        self._factories: Dict[Any, Factory] = {}
        self._singletons: Dict[Any, bool] = {}
        self._instances: Dict[Any, Any] = {}

    def register(self, key: Any, factory: Factory, singleton: bool = True) -> None:
        """Register ``factory`` under ``key``, replacing any earlier entry."""
        self._factories[key] = factory
        self._singletons[key] = singleton
        self._instances.pop(key, None)

    def set(self, key: Any, value: Any) -> None:
        """Register an already built service."""
        self.register(key, lambda container: value)
        self._instances[key] = value

    def has(self, key: Any) -> bool:
        return key in self._factories

    def get(self, key: Any) -> Any:
        """
        Return the service registered under ``key``.

        Raises:
            KeyError: If nothing is registered under ``key``.
        """
        if key in self._instances:
            return self._instances[key]

        if key not in self._factories:
            known = [getattr(k, "__name__", k) for k in self._factories]
            msg = f"Unknown service: '{getattr(key, '__name__', key)}'. Registered: {known}"
            logger.error(msg)
            raise KeyError(msg)

        service = self._factories[key](self)
        if self._singletons[key]:
            self._instances[key] = service
        return service


class PathsProvider:
    """Register the path services with a Container."""

    @staticmethod
    def register(
        container: Container,
        root_path: str,
        custom_paths: Optional[Mapping[str, str]] = None,
        auto_discover: bool = True,
        validate_paths: bool = False,
    ) -> None:
        """
        Register Paths (built on first lookup) and the discovery,
        validation and normalization helpers.
        """
        overrides = dict(custom_paths or {})

        container.register(
            Paths,
            lambda c: Paths(root_path, overrides, auto_discover, validate_paths),
        )
        container.register(PathDiscoverer, lambda c: PathDiscoverer())
        container.register(PathValidator, lambda c: PathValidator())
        container.register(PathNormalizer, lambda c: PathNormalizer())
