"""Existence checks for resolved directory paths."""

import os
from typing import Mapping

from approot.handlers.error_handler import InvalidPathError
from approot.utility.logger import AppLogger

logger = AppLogger.get_logger(__name__)


class PathValidator:
    """Check that every configured path is an existing directory.

    Validation is advisory unless ``strict`` is requested, in which case
    the first missing directory aborts with InvalidPathError.
    """

    def validate(self, paths: Mapping[str, str], strict: bool = False) -> None:
        """
        Walk ``paths`` in order and verify each one is a directory.

        Raises:
            InvalidPathError: In strict mode, for the first path that is
                not an existing directory.
        """
        for category, path in paths.items():
            if os.path.isdir(path):
                continue
            if strict:
                logger.error("Path for %s is not a directory: %s", category, path)
                raise InvalidPathError(category=category, path=path)
            logger.debug("Path for %s does not exist yet: %s", category, path)
