"""Mapping between caller-visible paths and provider object keys."""

from __future__ import annotations


class PathPrefixer:
    """Prepends and strips a fixed root prefix on object keys."""

    def __init__(self, prefix: str = "", separator: str = "/"):
        """
        Initialize the prefixer.

        Args:
            prefix: Root under which every path lives (e.g., "uploads").
                A non-empty prefix always ends with exactly one separator.
            separator: Path separator used by the provider key space
        """
        self.separator = separator
        trimmed = prefix.rstrip(separator)
        self.prefix = f"{trimmed}{separator}" if trimmed else ""

    def prefix_path(self, path: str) -> str:
        return f"{self.prefix}{path}"

    def strip_prefix(self, path: str) -> str:
        if self.prefix and path.startswith(self.prefix):
            return path[len(self.prefix):]
        return path
