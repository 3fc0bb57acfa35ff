"""Domain types for tree copies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel

if TYPE_CHECKING:
    from .errors import CopyDirError

EntryKind = Literal["directory", "file", "symlink", "other"]
ErrorMode = Literal["collect", "log", "ignore"]


class CopyFailure(BaseModel):
    kind: str
    path: str
    destination: str | None = None
    message: str

    @classmethod
    def from_error(cls, error: CopyDirError) -> CopyFailure:
        return cls(kind=error.kind, path=error.path, destination=error.destination, message=str(error))


class CopyResult(BaseModel):
    success: bool
    copied: int
    failures: list[CopyFailure]
