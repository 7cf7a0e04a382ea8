"""Canonical string form for filesystem paths."""


class PathNormalizer:
    """Unify separators and drop trailing slashes.

    Pure string handling, the filesystem is never touched.
    """

    def normalize(self, path: str) -> str:
        """Return ``path`` with forward slashes and no trailing slash."""
        return path.replace("\\", "/").rstrip("/")
