"""Firebase Storage filesystem adapter."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional, Union

from firebase_storage.core.errors import (
    UnableToCopyFile,
    UnableToCreateDirectory,
    UnableToDeleteDirectory,
    UnableToDeleteFile,
    UnableToListContents,
    UnableToMoveFile,
    UnableToProvideChecksum,
    UnableToReadFile,
    UnableToRetrieveMetadata,
    UnableToSetVisibility,
    UnableToWriteFile,
    classify_error,
)
from firebase_storage.storage.adapter import ChecksumProvider, FilesystemAdapter, Options
from firebase_storage.storage.attributes import (
    DirectoryAttributes,
    FileAttributes,
    StorageAttributes,
)
from firebase_storage.storage.client import PUBLIC_READ, ObjectListing, StorageClient
from firebase_storage.storage.mime import ExtensionMimeTypeDetector, MimeTypeDetector
from firebase_storage.storage.prefixer import PathPrefixer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExistenceCheck:
    """Outcome of an existence probe; a provider fault counts as absent."""

    exists: bool
    error: Optional[Exception] = None


class FirebaseStorageAdapter(FilesystemAdapter, ChecksumProvider):
    """
    Filesystem adapter for a Firebase Storage (Google Cloud Storage) bucket.

    Every path is rooted under a fixed prefix inside the bucket's flat key
    space. Object storage has no directories: keys ending in "/" are
    reported as directory markers, and directory creation and per-object
    visibility changes are unsupported. Every write is uploaded with the
    "publicRead" ACL.

    ``move`` and ``delete_directory`` issue several provider calls with no
    transaction around them. A failure part-way leaves both source and
    destination present (move) or a partially deleted tree
    (delete_directory); neither is safe to blindly retry.
    """

    def __init__(
        self,
        client: StorageClient,
        prefix: str = "",
        mime_type_detector: Optional[MimeTypeDetector] = None,
    ):
        """
        Initialize the adapter.

        Args:
            client: Provider client bound to one bucket
            prefix: Root prefix for every path (e.g., "uploads")
            mime_type_detector: Mime strategy (default: extension based)
        """
        self.client = client
        self.prefixer = PathPrefixer(prefix)
        self.mime_type_detector = mime_type_detector or ExtensionMimeTypeDetector()

    @classmethod
    def from_bucket(
        cls,
        bucket_name: str,
        prefix: str = "",
        credentials_path: Optional[str] = None,
        project_id: Optional[str] = None,
        mime_type_detector: Optional[MimeTypeDetector] = None,
    ) -> "FirebaseStorageAdapter":
        """Build an adapter over a live bucket through google-cloud-storage."""
        from firebase_storage.storage.gcs_client import GCSStorageClient

        client = GCSStorageClient.from_bucket_name(
            bucket_name,
            credentials_path=credentials_path,
            project_id=project_id,
        )
        return cls(client, prefix=prefix, mime_type_detector=mime_type_detector)

    def _apply_path_prefix(self, path: str) -> str:
        return self.prefixer.prefix_path(path)

    def _log_fault(self, operation: str, location: str, exc: Exception) -> None:
        logger.warning(
            f"Firebase storage {operation} failed ({classify_error(exc)}): {exc}",
            extra={"operation": operation, "location": location},
        )

    def _check_existence(self, location: str) -> ExistenceCheck:
        try:
            return ExistenceCheck(exists=bool(self.client.exists(location)))
        except Exception as exc:  # noqa: BLE001 - existence checks never raise
            return ExistenceCheck(exists=False, error=exc)

    def file_exists(self, path: str) -> bool:
        location = self._apply_path_prefix(path)
        result = self._check_existence(location)
        if result.error is not None:
            logger.debug(
                f"Existence check treated as missing: {result.error}",
                extra={"operation": "file_exists", "location": location},
            )
        return result.exists

    def directory_exists(self, path: str) -> bool:
        return self.file_exists(path)

    def write(self, path: str, contents: Union[bytes, str], options: Options = None) -> None:
        location = self._apply_path_prefix(path)
        try:
            data = contents.encode("utf-8") if isinstance(contents, str) else bytes(contents)
            self.client.upload(
                location,
                data,
                content_type=self._content_type(path, data, options),
                predefined_acl=PUBLIC_READ,
            )
        except Exception as exc:
            self._log_fault("write", location, exc)
            raise UnableToWriteFile.at_location(location, str(exc)) from exc

    def write_stream(self, path: str, stream: BinaryIO, options: Options = None) -> None:
        location = self._apply_path_prefix(path)
        try:
            data = stream.read()
            if isinstance(data, str):
                data = data.encode("utf-8")
            self.client.upload(
                location,
                data,
                content_type=self._content_type(path, data, options),
                predefined_acl=PUBLIC_READ,
            )
        except Exception as exc:
            self._log_fault("write_stream", location, exc)
            raise UnableToWriteFile.at_location(location, str(exc)) from exc

    def _content_type(self, path: str, data: bytes, options: Options) -> Optional[str]:
        if options and options.get("mimetype"):
            return options["mimetype"]
        return self.mime_type_detector.detect_mime_type(path, data[:512])

    def read(self, path: str) -> bytes:
        stream = self.read_stream(path)
        try:
            with stream:
                return stream.read()
        except Exception as exc:
            location = self._apply_path_prefix(path)
            self._log_fault("read", location, exc)
            raise UnableToReadFile.from_location(location, str(exc)) from exc

    def read_stream(self, path: str) -> BinaryIO:
        location = self._apply_path_prefix(path)
        try:
            return self.client.download_stream(location)
        except Exception as exc:
            self._log_fault("read_stream", location, exc)
            raise UnableToReadFile.from_location(location, str(exc)) from exc

    def delete(self, path: str) -> None:
        location = self._apply_path_prefix(path)
        try:
            self.client.delete(location)
        except Exception as exc:
            self._log_fault("delete", location, exc)
            raise UnableToDeleteFile.at_location(location, str(exc)) from exc

    def delete_directory(self, path: str) -> None:
        """Delete every object under the path, one call per object. Not atomic."""
        location = self._apply_path_prefix(path)
        deleted = 0
        try:
            # Directory markers are deleted too, including the one for path itself
            for entry in self._list_entries(path, skip_self=False):
                self.delete(entry.path)
                deleted += 1
        except Exception as exc:
            self._log_fault("delete_directory", location, exc)
            raise UnableToDeleteDirectory.at_location(location, str(exc)) from exc
        logger.info(
            f"Deleted {deleted} objects",
            extra={"operation": "delete_directory", "location": location},
        )

    def create_directory(self, path: str, options: Options = None) -> None:
        raise UnableToCreateDirectory.at_location(
            path, "Firebase storage doesn't support directory creation."
        )

    def set_visibility(self, path: str, visibility: str) -> None:
        raise UnableToSetVisibility.at_location(
            path, "Firebase Storage does not support visibility settings."
        )

    def visibility(self, path: str) -> FileAttributes:
        return FileAttributes(path)

    def mime_type(self, path: str) -> FileAttributes:
        location = self._apply_path_prefix(path)
        return FileAttributes(
            path,
            mime_type=self.mime_type_detector.detect_mime_type_from_path(location),
        )

    def last_modified(self, path: str) -> FileAttributes:
        location = self._apply_path_prefix(path)
        try:
            updated = self.client.info(location).updated
        except Exception as exc:
            self._log_fault("last_modified", location, exc)
            raise UnableToRetrieveMetadata.last_modified(location, str(exc)) from exc

        if updated is None:
            raise UnableToRetrieveMetadata.last_modified(
                location, "Provider did not report an update time."
            )
        return FileAttributes(path, last_modified=int(updated.timestamp()))

    def checksum(self, path: str, options: Options = None) -> str:
        location = self._apply_path_prefix(path)
        try:
            md5_hash = self.client.info(location).md5_hash
        except Exception as exc:
            self._log_fault("checksum", location, exc)
            raise UnableToProvideChecksum.at_location(location, str(exc)) from exc

        if not md5_hash:
            raise UnableToProvideChecksum.at_location(
                location, "Provider did not report an MD5 hash."
            )
        return md5_hash

    def file_size(self, path: str) -> FileAttributes:
        location = self._apply_path_prefix(path)
        try:
            size = self.client.info(location).size
        except Exception as exc:
            self._log_fault("file_size", location, exc)
            raise UnableToRetrieveMetadata.file_size(location, str(exc)) from exc

        if size is None:
            raise UnableToRetrieveMetadata.file_size(
                location, "Provider did not report a size."
            )
        return FileAttributes(path, file_size=size)

    def list_contents(self, path: str = "", deep: bool = False) -> Iterator[StorageAttributes]:
        """
        Lazily list entries whose key starts with the prefixed path.

        Prefix queries match keys at any depth, so ``deep`` does not change
        the result. Each call re-queries the provider.
        """
        return self._list_entries(path, skip_self=True)

    def _list_entries(self, path: str, skip_self: bool) -> Iterator[StorageAttributes]:
        location = self._apply_path_prefix(path)
        query_path = path.rstrip(self.prefixer.separator)
        try:
            for listing in self.client.list_objects(location):
                attributes = self._normalize(listing)
                if (
                    skip_self
                    and attributes.is_dir()
                    and attributes.path.rstrip(self.prefixer.separator) == query_path
                ):
                    continue
                yield attributes
        except Exception as exc:
            self._log_fault("list_contents", location, exc)
            raise UnableToListContents.at_location(location, str(exc)) from exc

    def _normalize(self, listing: ObjectListing) -> StorageAttributes:
        path = self.prefixer.strip_prefix(listing.name)
        if listing.name.endswith(self.prefixer.separator):
            return DirectoryAttributes(path)
        return FileAttributes(path, file_size=listing.size)

    def move(self, source: str, destination: str, options: Options = None) -> None:
        """Copy then delete the source. Not atomic."""
        try:
            self.copy(source, destination, options)
            self.delete(source)
        except Exception as exc:
            raise UnableToMoveFile.because(str(exc), source, destination) from exc

    def copy(self, source: str, destination: str, options: Options = None) -> None:
        source_location = self._apply_path_prefix(source)
        destination_location = self._apply_path_prefix(destination)
        try:
            self.client.copy(source_location, destination_location)
        except Exception as exc:
            self._log_fault("copy", source_location, exc)
            raise UnableToCopyFile.from_location_to(
                source_location, destination_location, str(exc)
            ) from exc
