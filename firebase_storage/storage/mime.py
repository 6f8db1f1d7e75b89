"""Mime-type detection strategies."""

from __future__ import annotations

import codecs
import mimetypes
from abc import ABC, abstractmethod
from pathlib import PurePosixPath
from typing import Dict, Optional

# Extensions the platform mimetypes table misses or maps inconsistently
_EXTENSION_OVERRIDES: Dict[str, str] = {
    ".json": "application/json",
    ".md": "text/markdown",
    ".webp": "image/webp",
    ".woff2": "font/woff2",
    ".yaml": "application/yaml",
    ".yml": "application/yaml",
}

_SIGNATURES = (
    (b"%PDF-", "application/pdf"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"PK\x03\x04", "application/zip"),
    (b"\x1f\x8b", "application/gzip"),
)


class MimeTypeDetector(ABC):
    """Strategy resolving a mime type from a path and/or file contents."""

    @abstractmethod
    def detect_mime_type(self, path: str, contents: bytes) -> Optional[str]:
        """
        Detect a mime type using both the path and the contents.

        Args:
            path: Object path or key (e.g., "docs/report.pdf")
            contents: Leading bytes of the file

        Returns:
            Mime type, or None when unknown
        """
        pass

    @abstractmethod
    def detect_mime_type_from_path(self, path: str) -> Optional[str]:
        """Detect a mime type from the path alone."""
        pass

    @abstractmethod
    def detect_mime_type_from_buffer(self, contents: bytes) -> Optional[str]:
        """Detect a mime type from the contents alone."""
        pass


class ExtensionMimeTypeDetector(MimeTypeDetector):
    """Resolves by file extension, falling back to magic-number sniffing."""

    def detect_mime_type(self, path: str, contents: bytes) -> Optional[str]:
        return self.detect_mime_type_from_path(path) or self.detect_mime_type_from_buffer(
            contents
        )

    def detect_mime_type_from_path(self, path: str) -> Optional[str]:
        extension = PurePosixPath(path).suffix.lower()
        if extension in _EXTENSION_OVERRIDES:
            return _EXTENSION_OVERRIDES[extension]
        mime_type, _ = mimetypes.guess_type(path.lower(), strict=False)
        return mime_type

    def detect_mime_type_from_buffer(self, contents: bytes) -> Optional[str]:
        for signature, mime_type in _SIGNATURES:
            if contents.startswith(signature):
                return mime_type
        if not contents:
            return None
        try:
            # Truncated buffers may end mid-character
            codecs.getincrementaldecoder("utf-8")().decode(contents, final=False)
        except UnicodeDecodeError:
            return "application/octet-stream"
        return "text/plain"
