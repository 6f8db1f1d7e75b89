from __future__ import annotations


class FilesystemError(Exception):
    error_type = "UNKNOWN"


class FilesystemOperationFailed(FilesystemError):
    error_type = "OPERATION_FAILED"

    def __init__(self, message: str, location: str = "", reason: str = "") -> None:
        super().__init__(message)
        self.location = location
        self.reason = reason

    @classmethod
    def at_location(cls, location: str, reason: str = ""):
        message = f"{cls._verb()} at location: {location}."
        if reason:
            message = f"{message} {reason}"
        return cls(message.rstrip(), location=location, reason=reason)

    @classmethod
    def _verb(cls) -> str:
        return "Operation failed"


class UnableToWriteFile(FilesystemOperationFailed):
    error_type = "WRITE"

    @classmethod
    def _verb(cls) -> str:
        return "Unable to write file"


class UnableToReadFile(FilesystemOperationFailed):
    error_type = "READ"

    @classmethod
    def from_location(cls, location: str, reason: str = ""):
        return cls.at_location(location, reason)

    @classmethod
    def _verb(cls) -> str:
        return "Unable to read file"


class UnableToDeleteFile(FilesystemOperationFailed):
    error_type = "DELETE_FILE"

    @classmethod
    def _verb(cls) -> str:
        return "Unable to delete file"


class UnableToDeleteDirectory(FilesystemOperationFailed):
    error_type = "DELETE_DIRECTORY"

    @classmethod
    def _verb(cls) -> str:
        return "Unable to delete directory"


class UnableToCreateDirectory(FilesystemOperationFailed):
    error_type = "CREATE_DIRECTORY"

    @classmethod
    def _verb(cls) -> str:
        return "Unable to create directory"


class UnableToSetVisibility(FilesystemOperationFailed):
    error_type = "SET_VISIBILITY"

    @classmethod
    def _verb(cls) -> str:
        return "Unable to set visibility"


class UnableToListContents(FilesystemOperationFailed):
    error_type = "LIST"

    @classmethod
    def _verb(cls) -> str:
        return "Unable to list contents"


class UnableToProvideChecksum(FilesystemOperationFailed):
    error_type = "CHECKSUM"

    @classmethod
    def _verb(cls) -> str:
        return "Unable to provide checksum"


class UnableToRetrieveMetadata(FilesystemOperationFailed):
    error_type = "METADATA"

    def __init__(
        self,
        message: str,
        location: str = "",
        reason: str = "",
        metadata_type: str = "",
    ) -> None:
        super().__init__(message, location=location, reason=reason)
        self.metadata_type = metadata_type

    @classmethod
    def create(cls, location: str, metadata_type: str, reason: str = ""):
        message = f"Unable to retrieve the {metadata_type} for file at location: {location}."
        if reason:
            message = f"{message} {reason}"
        return cls(message, location=location, reason=reason, metadata_type=metadata_type)

    @classmethod
    def file_size(cls, location: str, reason: str = ""):
        return cls.create(location, "file_size", reason)

    @classmethod
    def last_modified(cls, location: str, reason: str = ""):
        return cls.create(location, "last_modified", reason)

    @classmethod
    def mime_type(cls, location: str, reason: str = ""):
        return cls.create(location, "mime_type", reason)

    @classmethod
    def visibility(cls, location: str, reason: str = ""):
        return cls.create(location, "visibility", reason)


class UnableToCopyFile(FilesystemOperationFailed):
    error_type = "COPY"

    def __init__(
        self,
        message: str,
        source: str = "",
        destination: str = "",
        reason: str = "",
    ) -> None:
        super().__init__(message, location=source, reason=reason)
        self.source = source
        self.destination = destination

    @classmethod
    def from_location_to(cls, source: str, destination: str, reason: str = ""):
        message = f"Unable to copy file from {source} to {destination}."
        if reason:
            message = f"{message} {reason}"
        return cls(message, source=source, destination=destination, reason=reason)


class UnableToMoveFile(FilesystemOperationFailed):
    error_type = "MOVE"

    def __init__(
        self,
        message: str,
        source: str = "",
        destination: str = "",
        reason: str = "",
    ) -> None:
        super().__init__(message, location=source, reason=reason)
        self.source = source
        self.destination = destination

    @classmethod
    def because(cls, reason: str, source: str, destination: str):
        message = f"Unable to move file from {source} to {destination}, because {reason}"
        return cls(message, source=source, destination=destination, reason=reason)


def classify_error(error: Exception) -> str:
    if hasattr(error, "error_type"):
        return getattr(error, "error_type")

    if getattr(error, "code", None) == 404:
        return "NOT_FOUND"

    message = str(error).lower()

    if "not found" in message or "no such" in message or "404" in message:
        return "NOT_FOUND"

    if "permission" in message or "forbidden" in message or "403" in message:
        return "PERMISSION"

    return "UNKNOWN"
