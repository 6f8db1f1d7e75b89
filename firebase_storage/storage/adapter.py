"""Abstract filesystem adapter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Iterator, Mapping, Optional, Union

from firebase_storage.storage.attributes import FileAttributes, StorageAttributes

Options = Optional[Mapping[str, Any]]


class FilesystemAdapter(ABC):
    """Abstract interface for filesystem-like storage backends."""

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """
        Check if a file exists.

        Args:
            path: Relative path (e.g., "test/test-file.txt")

        Returns:
            True if file exists, False otherwise. Never raises.
        """
        pass

    @abstractmethod
    def directory_exists(self, path: str) -> bool:
        """
        Check if a directory exists.

        Args:
            path: Relative path

        Returns:
            True if directory exists, False otherwise. Never raises.
        """
        pass

    @abstractmethod
    def write(self, path: str, contents: Union[bytes, str], options: Options = None) -> None:
        """
        Write file contents.

        Args:
            path: Relative path
            contents: File contents; text is encoded as UTF-8
            options: Backend-specific write options (e.g., {"mimetype": "text/plain"})

        Raises:
            UnableToWriteFile: If the backend rejects the write
        """
        pass

    @abstractmethod
    def write_stream(self, path: str, stream: BinaryIO, options: Options = None) -> None:
        """
        Write file contents from a readable binary stream.

        Args:
            path: Relative path
            stream: Stream consumed to its end
            options: Backend-specific write options

        Raises:
            UnableToWriteFile: If the backend rejects the write
        """
        pass

    @abstractmethod
    def read(self, path: str) -> bytes:
        """
        Read file contents.

        Args:
            path: Relative path

        Returns:
            File contents as bytes

        Raises:
            UnableToReadFile: If file not found or unreadable
        """
        pass

    @abstractmethod
    def read_stream(self, path: str) -> BinaryIO:
        """
        Open file contents as a stream.

        Args:
            path: Relative path

        Returns:
            Readable binary stream; the caller must close it

        Raises:
            UnableToReadFile: If file not found or unreadable
        """
        pass

    @abstractmethod
    def delete(self, path: str) -> None:
        """
        Delete a file.

        Raises:
            UnableToDeleteFile: If deletion fails
        """
        pass

    @abstractmethod
    def delete_directory(self, path: str) -> None:
        """
        Delete a directory and everything below it.

        Raises:
            UnableToDeleteDirectory: If any deletion fails
        """
        pass

    @abstractmethod
    def create_directory(self, path: str, options: Options = None) -> None:
        """
        Create a directory.

        Raises:
            UnableToCreateDirectory: If the directory cannot be created
        """
        pass

    @abstractmethod
    def set_visibility(self, path: str, visibility: str) -> None:
        """
        Set file visibility ("public" or "private").

        Raises:
            UnableToSetVisibility: If visibility cannot be changed
        """
        pass

    @abstractmethod
    def visibility(self, path: str) -> FileAttributes:
        """Return attributes carrying the file's visibility."""
        pass

    @abstractmethod
    def mime_type(self, path: str) -> FileAttributes:
        """Return attributes carrying the file's mime type."""
        pass

    @abstractmethod
    def last_modified(self, path: str) -> FileAttributes:
        """Return attributes carrying the last-modified Unix timestamp."""
        pass

    @abstractmethod
    def file_size(self, path: str) -> FileAttributes:
        """Return attributes carrying the file size in bytes."""
        pass

    @abstractmethod
    def list_contents(self, path: str = "", deep: bool = False) -> Iterator[StorageAttributes]:
        """
        List entries below a path.

        Args:
            path: Relative directory path (e.g., "test/")
            deep: Include nested entries

        Returns:
            Lazy iterator of FileAttributes / DirectoryAttributes
        """
        pass

    @abstractmethod
    def move(self, source: str, destination: str, options: Options = None) -> None:
        """
        Move a file.

        Raises:
            UnableToMoveFile: If the move fails
        """
        pass

    @abstractmethod
    def copy(self, source: str, destination: str, options: Options = None) -> None:
        """
        Copy a file.

        Raises:
            UnableToCopyFile: If the copy fails
        """
        pass


class ChecksumProvider(ABC):
    """Backends able to report a content checksum without reading the file."""

    @abstractmethod
    def checksum(self, path: str, options: Options = None) -> str:
        """
        Get a checksum of the file contents.

        Raises:
            UnableToProvideChecksum: If the checksum is unavailable
        """
        pass
