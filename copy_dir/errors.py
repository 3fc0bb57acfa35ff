"""Errors raised while copying a directory tree."""

from __future__ import annotations

import os


class CopyDirError(Exception):
    """Base class for every failure of a tree copy.

    ``path`` is the source-side path being handled when the failure
    happened; ``destination`` is its counterpart under the destination
    root, when one exists.
    """

    kind = "error"

    def __init__(self, message: str, path: str | os.PathLike[str], destination: str | os.PathLike[str] | None = None) -> None:
        super().__init__(message)
        self.path = os.fspath(path)
        self.destination = os.fspath(destination) if destination is not None else None


class DestinationExistsError(CopyDirError):
    """Something already exists where a directory, file or link was to be created."""

    kind = "destination_exists"


class SourceDoesNotExistError(CopyDirError):
    kind = "source_does_not_exist"


class SourceNotDirectoryError(CopyDirError):
    kind = "source_not_directory"


class SourceIsDestinationRootError(CopyDirError):
    """The walk reached the destination root while reading the source tree."""

    kind = "source_is_destination_root"


class UnsupportedEntryError(CopyDirError):
    """The entry is not a directory, regular file or symbolic link."""

    kind = "unsupported_entry"


class CopyOSError(CopyDirError):
    """An underlying filesystem call failed."""

    kind = "io"

    def __init__(self, error: OSError, path: str | os.PathLike[str], destination: str | os.PathLike[str] | None = None) -> None:
        super().__init__(f"{error.strerror or error}: {os.fspath(path)}", path, destination)
        self.error = error


def wrap_os_error(error: OSError, path: str | os.PathLike[str], destination: str | os.PathLike[str] | None = None) -> CopyDirError:
    """Translate a platform error into the matching CopyDirError."""
    if isinstance(error, FileExistsError):
        target = destination if destination is not None else path
        return DestinationExistsError(f"Destination already exists: {os.fspath(target)}", path, destination)
    return CopyOSError(error, path, destination)
