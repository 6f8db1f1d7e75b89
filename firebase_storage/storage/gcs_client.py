"""Google Cloud Storage client backing Firebase Storage buckets."""

from __future__ import annotations

import logging
from typing import BinaryIO, Iterator, Optional

from firebase_storage.storage.client import ObjectInfo, ObjectListing, StorageClient

# google-cloud-storage is optional - only required when talking to a real bucket
try:
    from google.cloud import storage
    _GCS_AVAILABLE = True
except ImportError:
    _GCS_AVAILABLE = False

logger = logging.getLogger(__name__)


class GCSStorageClient(StorageClient):
    """StorageClient over a google-cloud-storage ``Bucket``."""

    def __init__(self, bucket):
        """
        Wrap an existing bucket handle.

        Args:
            bucket: ``google.cloud.storage.Bucket`` (Firebase buckets are
                GCS buckets, e.g. "my-app.appspot.com")
        """
        self.bucket = bucket

    @classmethod
    def from_bucket_name(
        cls,
        bucket_name: str,
        credentials_path: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> "GCSStorageClient":
        """
        Build a client for a bucket by name.

        Args:
            bucket_name: Firebase/GCS bucket name
            credentials_path: Service account JSON file; application default
                credentials are used when omitted
            project_id: GCP project ID (optional)
        """
        if not _GCS_AVAILABLE:
            raise ImportError(
                "google-cloud-storage is required for Firebase storage. "
                "Install with: pip install google-cloud-storage"
            )

        if credentials_path:
            client = storage.Client.from_service_account_json(
                credentials_path, project=project_id
            )
        elif project_id:
            client = storage.Client(project=project_id)
        else:
            client = storage.Client()

        logger.info(f"Initialized GCS client for bucket={bucket_name}")
        return cls(client.bucket(bucket_name))

    def exists(self, key: str) -> bool:
        return self.bucket.blob(key).exists()

    def upload(
        self,
        key: str,
        data: bytes,
        content_type: Optional[str] = None,
        predefined_acl: Optional[str] = None,
    ) -> None:
        blob = self.bucket.blob(key)
        blob.upload_from_string(
            data,
            content_type=content_type,
            predefined_acl=predefined_acl,
        )

    def download_stream(self, key: str) -> BinaryIO:
        blob = self.bucket.blob(key)
        # BlobReader is lazy; reload surfaces NotFound before handing it out
        blob.reload()
        return blob.open("rb")

    def delete(self, key: str) -> None:
        self.bucket.blob(key).delete()

    def copy(self, source_key: str, destination_key: str) -> None:
        source = self.bucket.blob(source_key)
        self.bucket.copy_blob(source, self.bucket, destination_key)

    def info(self, key: str) -> ObjectInfo:
        blob = self.bucket.blob(key)
        blob.reload()
        return ObjectInfo(
            name=blob.name,
            size=blob.size,
            updated=blob.updated,
            md5_hash=blob.md5_hash,
            content_type=blob.content_type,
        )

    def list_objects(self, prefix: str) -> Iterator[ObjectListing]:
        # list_blobs pages lazily through the results
        for blob in self.bucket.list_blobs(prefix=prefix):
            yield ObjectListing(name=blob.name, size=blob.size)
