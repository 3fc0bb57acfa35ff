"""Recursive directory tree copying that preserves files and symlinks."""

from __future__ import annotations

from .errors import (
    CopyDirError,
    CopyOSError,
    DestinationExistsError,
    SourceDoesNotExistError,
    SourceIsDestinationRootError,
    SourceNotDirectoryError,
    UnsupportedEntryError,
)
from .tree import classify_entry, copy_tree, copy_tree_with_handler
from .types import CopyFailure, CopyResult, EntryKind, ErrorMode

__all__ = [
    "CopyDirError",
    "CopyFailure",
    "CopyOSError",
    "CopyResult",
    "DestinationExistsError",
    "EntryKind",
    "ErrorMode",
    "SourceDoesNotExistError",
    "SourceIsDestinationRootError",
    "SourceNotDirectoryError",
    "UnsupportedEntryError",
    "classify_entry",
    "copy_tree",
    "copy_tree_with_handler",
]
