"""Resolved directory layout of an application root."""

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional

from approot.models.paths import PathsResponse
from approot.services.discovery_service.discoverer import PathDiscoverer
from approot.services.validation_service.validator import PathValidator
from approot.utility.logger import AppLogger
from approot.utility.normalizer import PathNormalizer

logger = AppLogger.get_logger(__name__)

# Category -> location relative to the root ("" is the root itself).
DEFAULT_LAYOUT: Dict[str, str] = {
    "root": "",
    "config": "/config",
    "resources": "/resources",
    "views": "/resources/views",
    "assets": "/resources/assets",
    "cache": "/var/cache",
    "logs": "/var/logs",
    "public": "/public",
    "database": "/database",
    "migrations": "/database/migrations",
    "storage": "/storage",
    "tests": "/tests",
}


class Paths:
    """
    Directory layout of one application, resolved once at construction.

    Values come from the default layout, then auto-discovered directories,
    then caller overrides (highest precedence). Every value is normalized
    exactly once after merging. Instances are never mutated afterwards, so
    one registry can be shared by all requests.
    """

    def __init__(
        self,
        root_path: str,
        custom_paths: Optional[Mapping[str, str]] = None,
        auto_discover: bool = True,
        validate_paths: bool = False,
    ):
        """
        Args:
            root_path: Absolute location of the project root.
            custom_paths: Category -> absolute path overrides; may name
                categories outside the default layout.
            auto_discover: Probe the root for non-standard directory names.
            validate_paths: Require every resolved path to be an existing
                directory.

        Raises:
            InvalidPathError: If ``validate_paths`` is set and a path is missing.
        """
        normalizer = PathNormalizer()
        self._root_path = normalizer.normalize(root_path)

        default_paths = {
            category: self._root_path + suffix
            for category, suffix in DEFAULT_LAYOUT.items()
        }

        discovered_paths: Dict[str, str] = {}
        if auto_discover:
            discovered_paths = PathDiscoverer().discover(self._root_path)

        merged = {**default_paths, **discovered_paths, **dict(custom_paths or {})}
        self._paths = {
            category: normalizer.normalize(path) for category, path in merged.items()
        }

        if validate_paths:
            PathValidator().validate(self._paths, strict=True)

        logger.debug(
            "Resolved %d path(s) for %s (discovered=%d, overrides=%d)",
            len(self._paths),
            self._root_path,
            len(discovered_paths),
            len(custom_paths or {}),
        )

    def get_root_path(self) -> str:
        return self._paths["root"]

    def get_config_path(self) -> str:
        return self._paths["config"]

    def get_resources_path(self) -> str:
        return self._paths["resources"]

    def get_views_path(self) -> str:
        return self._paths["views"]

    def get_assets_path(self) -> str:
        return self._paths["assets"]

    def get_cache_path(self) -> str:
        return self._paths["cache"]

    def get_logs_path(self) -> str:
        return self._paths["logs"]

    def get_public_path(self) -> str:
        return self._paths["public"]

    def get_database_path(self) -> str:
        return self._paths["database"]

    def get_migrations_path(self) -> str:
        return self._paths["migrations"]

    def get_storage_path(self) -> str:
        return self._paths["storage"]

    def get_tests_path(self) -> str:
        return self._paths["tests"]

    def get(self, category: str, default: Optional[str] = None) -> Optional[str]:
        """Look up any category, including custom ones added by overrides."""
        return self._paths.get(category, default)

    def path(self, relative: str) -> str:
        """Join ``relative`` onto the root without doubling the separator."""
        normalized = PathNormalizer().normalize(relative)
        return self._paths["root"] + "/" + normalized.lstrip("/")

    def get_paths(self) -> Dict[str, str]:
        """Return a copy of every resolved category and its path."""
        return dict(self._paths)

    get_all_paths = get_paths

    def get_build_path(self, build_directory: str = "build") -> str:
        """Front-end build output directory under the public directory."""
        return self.get_public_path() + "/" + build_directory

    def get_build_assets_path(self, build_directory: str = "build") -> str:
        """
        Always ``<public>/assets``.

        ``build_directory`` is accepted for backward compatibility and ignored.
        """
        return self.get_public_path() + "/assets"

    def get_vite_manifest_path(self, build_directory: str = "build") -> str:
        """
        Locate the Vite manifest inside ``<public>/assets``.

        Returns the first existing candidate, falling back to the
        ``.vite/manifest.json`` location. ``build_directory`` is ignored.
        """
        candidates = [
            self.get_public_path() + "/assets/manifest.json",
            self.get_public_path() + "/assets/.vite/manifest.json",
        ]
        for candidate in candidates:
            if os.path.exists(candidate):
                return candidate

        return self.get_public_path() + "/assets/.vite/manifest.json"

    def to_model(self) -> PathsResponse:
        """Serialize the resolved layout for JSON responses."""
        return PathsResponse(**self._paths)

    def __repr__(self) -> str:
        return f"Paths(root={self._root_path!r})"
