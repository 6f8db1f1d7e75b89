"""Storage abstraction layer for Firebase Storage buckets."""

from firebase_storage.storage.adapter import ChecksumProvider, FilesystemAdapter
from firebase_storage.storage.attributes import (
    PRIVATE,
    PUBLIC,
    DirectoryAttributes,
    FileAttributes,
    StorageAttributes,
)
from firebase_storage.storage.client import StorageClient
from firebase_storage.storage.firebase_adapter import FirebaseStorageAdapter
from firebase_storage.storage.gcs_client import GCSStorageClient
from firebase_storage.storage.memory_client import InMemoryStorageClient
from firebase_storage.storage.mime import ExtensionMimeTypeDetector, MimeTypeDetector
from firebase_storage.storage.prefixer import PathPrefixer

__all__ = [
    "ChecksumProvider",
    "DirectoryAttributes",
    "ExtensionMimeTypeDetector",
    "FileAttributes",
    "FilesystemAdapter",
    "FirebaseStorageAdapter",
    "GCSStorageClient",
    "InMemoryStorageClient",
    "MimeTypeDetector",
    "PRIVATE",
    "PUBLIC",
    "PathPrefixer",
    "StorageAttributes",
    "StorageClient",
]
