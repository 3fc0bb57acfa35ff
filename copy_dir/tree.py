"""Recursive directory tree copy."""

from __future__ import annotations

import os
import shutil
from typing import TYPE_CHECKING, get_args

from .config import DEFAULT_ERROR_MODE
from .errors import (
    CopyDirError,
    DestinationExistsError,
    SourceDoesNotExistError,
    SourceIsDestinationRootError,
    SourceNotDirectoryError,
    UnsupportedEntryError,
    wrap_os_error,
)
from .logger import logger
from .types import CopyFailure, CopyResult, EntryKind, ErrorMode

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    StrPath = str | os.PathLike[str]


def classify_entry(entry: os.DirEntry[str]) -> EntryKind:
    """Classify a directory entry without following symlinks."""
    if entry.is_symlink():
        return "symlink"
    if entry.is_dir(follow_symlinks=False):
        return "directory"
    if entry.is_file(follow_symlinks=False):
        return "file"
    return "other"


def _identity(st: os.stat_result) -> tuple[int, int]:
    return (st.st_dev, st.st_ino)


def _check_paths(source: StrPath, destination: StrPath) -> tuple[str, str]:
    src = os.fspath(source)
    dst = os.fspath(destination)
    if not os.path.exists(src):
        raise SourceDoesNotExistError(f"Source does not exist: {src}", src, dst)
    if not os.path.isdir(src):
        raise SourceNotDirectoryError(f"Source is not a directory: {src}", src, dst)
    if os.path.lexists(dst):
        raise DestinationExistsError(f"Destination already exists: {dst}", src, dst)
    return src, dst


def _make_dir(src: str, dst: str) -> None:
    try:
        os.mkdir(dst)
    except OSError as err:
        raise wrap_os_error(err, src, dst) from err


def _scan(src: str, dst: str) -> Iterator[os.DirEntry[str]]:
    # Read the whole listing up front so no directory handle stays open
    # while descending.
    try:
        with os.scandir(src) as it:
            return iter(list(it))
    except OSError as err:
        raise wrap_os_error(err, src, dst) from err


def _copy_file(src: str, dst: str) -> None:
    try:
        # "x" so an existing target is a conflict rather than an overwrite
        with open(src, "rb") as fsrc, open(dst, "xb") as fdst:
            shutil.copyfileobj(fsrc, fdst)
    except OSError as err:
        raise wrap_os_error(err, src, dst) from err


def _copy_symlink(src: str, dst: str) -> None:
    try:
        os.symlink(os.readlink(src), dst)
    except OSError as err:
        raise wrap_os_error(err, src, dst) from err


def _walk(src_root: str, dst_root: str, on_error: Callable[[CopyDirError], None] | None) -> int:
    """Mirror the contents of src_root into the existing dst_root.

    Depth-first with an explicit stack of pending directory listings, so
    entries are visited in exactly the order a recursive copy would visit
    them without growing the Python call stack. With no ``on_error`` the
    first failure propagates; otherwise the failing entry (and its subtree)
    is handed to ``on_error`` and skipped.

    Returns the number of entries created below dst_root.
    """
    try:
        root_id = _identity(os.stat(dst_root))
    except OSError as err:
        raise wrap_os_error(err, src_root, dst_root) from err

    copied = 0
    stack: list[tuple[str, Iterator[os.DirEntry[str]]]] = [(dst_root, _scan(src_root, dst_root))]
    while stack:
        dst_dir, entries = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            continue

        src_path = entry.path
        dst_path = os.path.join(dst_dir, entry.name)
        try:
            try:
                kind = classify_entry(entry)
                if kind == "directory" and _identity(entry.stat(follow_symlinks=False)) == root_id:
                    raise SourceIsDestinationRootError(
                        f"Source tree contains the destination root: {src_path}", src_path, dst_path
                    )
            except OSError as err:
                raise wrap_os_error(err, src_path, dst_path) from err

            if kind == "directory":
                _make_dir(src_path, dst_path)
                copied += 1
                stack.append((dst_path, _scan(src_path, dst_path)))
            elif kind == "file":
                _copy_file(src_path, dst_path)
                copied += 1
            elif kind == "symlink":
                _copy_symlink(src_path, dst_path)
                copied += 1
            else:
                raise UnsupportedEntryError(f"Unsupported entry type: {src_path}", src_path, dst_path)
        except CopyDirError as error:
            if on_error is None:
                raise
            on_error(error)

    return copied


def copy_tree(source: StrPath, destination: StrPath) -> None:
    """Copy the directory tree at source to a new directory at destination.

    Directories are recreated, regular files have their bytes copied and
    symbolic links are recreated with the same target string (never
    followed). Any other kind of entry is an error.

    The destination must not exist. The first failure at any depth is
    raised as a CopyDirError; whatever was created before it is left on
    disk.
    """
    src, dst = _check_paths(source, destination)
    logger.debug("Copying tree", source=src, destination=dst)
    _make_dir(src, dst)
    copied = _walk(src, dst, None)
    logger.debug("Tree copied", source=src, destination=dst, copied=copied)


def copy_tree_with_handler(source: StrPath, destination: StrPath, on_error: ErrorMode | None = None) -> CopyResult:
    """Same as copy_tree, but skips entries that fail instead of aborting.

    ``on_error`` decides what happens to each skipped failure: "collect"
    records it in the result, "log" logs it, "ignore" drops it. Defaults to
    the COPY_DIR_ON_ERROR setting. Problems with the source or destination
    roots themselves are still raised.
    """
    mode = on_error or DEFAULT_ERROR_MODE
    if mode not in get_args(ErrorMode):
        raise ValueError(f"Unknown error mode: {mode}")

    failures: list[CopyFailure] = []
    skipped = 0

    def handle(error: CopyDirError) -> None:
        nonlocal skipped
        skipped += 1
        if mode == "collect":
            failures.append(CopyFailure.from_error(error))
        elif mode == "log":
            logger.error(
                "Skipped entry during tree copy",
                kind=error.kind,
                path=error.path,
                destination=error.destination,
                error=str(error),
            )

    src, dst = _check_paths(source, destination)
    logger.debug("Copying tree", source=src, destination=dst, on_error=mode)
    _make_dir(src, dst)
    copied = _walk(src, dst, handle)
    logger.debug("Tree copied", source=src, destination=dst, copied=copied, skipped=skipped)

    return CopyResult(success=skipped == 0, copied=copied, failures=failures)
