"""File and directory descriptors returned by listing and metadata operations."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Union

PUBLIC = "public"
PRIVATE = "private"

TYPE_FILE = "file"
TYPE_DIRECTORY = "dir"


@dataclass(frozen=True)
class FileAttributes:
    """Metadata for a single stored object."""

    path: str
    file_size: Optional[int] = None
    visibility: Optional[str] = None
    last_modified: Optional[int] = None
    mime_type: Optional[str] = None
    extra_metadata: Dict[str, Any] = field(default_factory=dict, hash=False)

    @property
    def type(self) -> str:
        return TYPE_FILE

    def is_file(self) -> bool:
        return True

    def is_dir(self) -> bool:
        return False

    def with_path(self, path: str) -> "FileAttributes":
        return replace(self, path=path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "path": self.path,
            "file_size": self.file_size,
            "visibility": self.visibility,
            "last_modified": self.last_modified,
            "mime_type": self.mime_type,
            "extra_metadata": dict(self.extra_metadata),
        }


@dataclass(frozen=True)
class DirectoryAttributes:
    """A directory marker; object storage has no real directories."""

    path: str
    visibility: Optional[str] = None
    last_modified: Optional[int] = None
    extra_metadata: Dict[str, Any] = field(default_factory=dict, hash=False)

    @property
    def type(self) -> str:
        return TYPE_DIRECTORY

    def is_file(self) -> bool:
        return False

    def is_dir(self) -> bool:
        return True

    def with_path(self, path: str) -> "DirectoryAttributes":
        return replace(self, path=path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "path": self.path,
            "visibility": self.visibility,
            "last_modified": self.last_modified,
            "extra_metadata": dict(self.extra_metadata),
        }


StorageAttributes = Union[FileAttributes, DirectoryAttributes]
