"""In-memory storage client for tests and local development."""

from __future__ import annotations

import base64
import hashlib
import io
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import BinaryIO, Dict, Iterator, List, Optional

from firebase_storage.storage.client import (
    ObjectInfo,
    ObjectListing,
    ObjectNotFound,
    StorageClient,
)


@dataclass
class StoredObject:
    data: bytes
    updated: datetime
    content_type: Optional[str] = None
    acl: Optional[str] = None


class InMemoryStorageClient(StorageClient):
    """Storage client keeping objects in a dict keyed by provider key."""

    def __init__(self, page_size: int = 100):
        """
        Initialize in-memory storage.

        Args:
            page_size: Number of keys fetched per listing page
        """
        self.objects: Dict[str, StoredObject] = {}
        self.page_size = page_size

    def _get(self, key: str) -> StoredObject:
        try:
            return self.objects[key]
        except KeyError as exc:
            raise ObjectNotFound(f"No such object: {key}") from exc

    def exists(self, key: str) -> bool:
        return key in self.objects

    def upload(
        self,
        key: str,
        data: bytes,
        content_type: Optional[str] = None,
        predefined_acl: Optional[str] = None,
    ) -> None:
        self.objects[key] = StoredObject(
            data=bytes(data),
            updated=datetime.now(timezone.utc),
            content_type=content_type,
            acl=predefined_acl,
        )

    def download_stream(self, key: str) -> BinaryIO:
        return io.BytesIO(self._get(key).data)

    def delete(self, key: str) -> None:
        self._get(key)
        del self.objects[key]

    def copy(self, source_key: str, destination_key: str) -> None:
        source = self._get(source_key)
        self.objects[destination_key] = StoredObject(
            data=source.data,
            updated=datetime.now(timezone.utc),
            content_type=source.content_type,
            acl=source.acl,
        )

    def info(self, key: str) -> ObjectInfo:
        stored = self._get(key)
        digest = hashlib.md5(stored.data).digest()
        return ObjectInfo(
            name=key,
            size=len(stored.data),
            updated=stored.updated,
            md5_hash=base64.b64encode(digest).decode("ascii"),
            content_type=stored.content_type,
        )

    def list_objects(self, prefix: str) -> Iterator[ObjectListing]:
        # Pages are fetched by key cursor so each page reflects current state
        cursor: Optional[str] = None
        while True:
            page = self._next_page(prefix, cursor)
            if not page:
                return
            for key in page:
                stored = self.objects.get(key)
                if stored is not None:
                    yield ObjectListing(name=key, size=len(stored.data))
            cursor = page[-1]

    def _next_page(self, prefix: str, cursor: Optional[str]) -> List[str]:
        keys = sorted(
            key
            for key in self.objects
            if key.startswith(prefix) and (cursor is None or key > cursor)
        )
        return keys[: self.page_size]
