"""Provider-side object storage capabilities consumed by the adapter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import BinaryIO, Iterator, Optional

PUBLIC_READ = "publicRead"


class ObjectNotFound(Exception):
    """Raised by providers when no object exists at a key."""

    code = 404


@dataclass(frozen=True)
class ObjectInfo:
    """Provider metadata for one object."""

    name: str
    size: Optional[int]
    updated: Optional[datetime]
    md5_hash: Optional[str]
    content_type: Optional[str] = None


@dataclass(frozen=True)
class ObjectListing:
    """One entry yielded by a prefix listing."""

    name: str
    size: Optional[int]


class StorageClient(ABC):
    """Abstract interface over a bucket of a key/value blob store."""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """
        Check whether an object exists.

        Args:
            key: Provider key (e.g., "uploads/test/test-file.txt")

        Returns:
            True if the object exists
        """
        pass

    @abstractmethod
    def upload(
        self,
        key: str,
        data: bytes,
        content_type: Optional[str] = None,
        predefined_acl: Optional[str] = None,
    ) -> None:
        """
        Upload bytes to a key, replacing any existing object.

        Args:
            key: Provider key
            data: Object contents
            content_type: MIME type stored with the object
            predefined_acl: Canned ACL applied on upload (e.g., "publicRead")
        """
        pass

    @abstractmethod
    def download_stream(self, key: str) -> BinaryIO:
        """
        Open a readable binary stream over an object.

        Args:
            key: Provider key

        Returns:
            File-like object; the caller is responsible for closing it

        Raises:
            ObjectNotFound: If no object exists at the key
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Delete an object.

        Args:
            key: Provider key

        Raises:
            ObjectNotFound: If no object exists at the key
        """
        pass

    @abstractmethod
    def copy(self, source_key: str, destination_key: str) -> None:
        """
        Copy an object within the bucket.

        Args:
            source_key: Provider key of the existing object
            destination_key: Provider key of the copy

        Raises:
            ObjectNotFound: If the source does not exist
        """
        pass

    @abstractmethod
    def info(self, key: str) -> ObjectInfo:
        """
        Fetch object metadata without downloading content.

        Args:
            key: Provider key

        Returns:
            ObjectInfo with size, update time and MD5 hash

        Raises:
            ObjectNotFound: If no object exists at the key
        """
        pass

    @abstractmethod
    def list_objects(self, prefix: str) -> Iterator[ObjectListing]:
        """
        Lazily list every object whose key starts with the prefix.

        Args:
            prefix: Key prefix (e.g., "uploads/test/")

        Returns:
            Iterator over matching objects, at any nesting depth
        """
        pass
