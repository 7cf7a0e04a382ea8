"""Auto-discovery of conventionally named project directories."""

import os
from typing import Dict, List, Mapping, Optional, Sequence

from approot.utility.logger import AppLogger

logger = AppLogger.get_logger(__name__)

# Candidate locations per category, most conventional first.
DISCOVERY_RULES: Dict[str, List[str]] = {
    "config": ["config", "app/config", "etc"],
    "resources": ["resources", "app/resources", "res"],
    "views": ["resources/views", "templates", "views", "app/views"],
    "assets": ["resources/assets", "assets", "public/assets"],
    "cache": ["var/cache", "cache", "tmp/cache", "storage/cache"],
    "logs": ["var/logs", "logs", "log", "storage/logs"],
    "public": ["public", "web", "www", "htdocs"],
    "database": ["database", "db", "storage/database"],
    "migrations": ["database/migrations", "migrations", "db/migrations"],
    "storage": ["storage", "var", "data"],
    "tests": ["tests", "test"],
}


class PathDiscoverer:
    """
    Probe a project root for well-known directory names.

    Only existing directories count; a file with a matching name is skipped.
    Categories without any existing candidate are left out of the result.
    """

    def __init__(self, rules: Optional[Mapping[str, Sequence[str]]] = None):
        """Use ``rules`` instead of DISCOVERY_RULES when given."""
        source = rules if rules is not None else DISCOVERY_RULES
        self.rules = {category: list(paths) for category, paths in source.items()}

    def discover(self, root_path: str) -> Dict[str, str]:
        """Return category -> ``root_path/candidate`` for every category found."""
        found: Dict[str, str] = {}
        for category, candidates in self.rules.items():
            path = self._find_first_valid_path(root_path, candidates)
            if path is not None:
                found[category] = path

        logger.debug("Discovered %d path(s) under %s", len(found), root_path)
        return found

    def _find_first_valid_path(
        self, root: str, candidates: Sequence[str]
    ) -> Optional[str]:
        for candidate in candidates:
            full_path = root + "/" + candidate
            if os.path.isdir(full_path):
                return full_path
        return None
