"""Node types and info records for the in-memory tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Union

Content = Union[str, bytes]


def now_iso() -> str:
    """Current UTC timestamp as an ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()


@dataclass
class FileData:
    """Payload of a regular file."""

    content: Content = ""


@dataclass
class DirectoryData:
    """Payload of a directory: child node ids in insertion order."""

    children: list[int] = field(default_factory=list)


@dataclass(eq=False)
class Node:
    """A file or directory in the tree.

    Nodes compare by identity. Two files with the same name and content in
    different places are different nodes.

    Attributes:
        name: Name within the parent directory ("/" for the root).
        parent_path: Canonical path of the containing directory.
        data: FileData for files, DirectoryData for directories.
        modified: ISO 8601 timestamp (UTC) of the last change.
        id: Arena id assigned by the owning NodeTable.
    """

    name: str
    parent_path: str
    data: FileData | DirectoryData
    modified: str = field(default_factory=now_iso)
    id: int = -1

    @property
    def is_dir(self) -> bool:
        return isinstance(self.data, DirectoryData)

    @property
    def is_file(self) -> bool:
        return isinstance(self.data, FileData)

    @property
    def content(self) -> Content:
        if not isinstance(self.data, FileData):
            raise AttributeError(f"Directory has no content: '{self.name}'")
        return self.data.content

    @property
    def children(self) -> list[int]:
        if not isinstance(self.data, DirectoryData):
            raise AttributeError(f"File has no children: '{self.name}'")
        return self.data.children

    @property
    def size(self) -> int:
        """Content length for files, 0 for directories."""
        if isinstance(self.data, FileData):
            return len(self.data.content)
        return 0

    def touch(self) -> None:
        self.modified = now_iso()


@dataclass
class FileInfo:
    """File information for UI display.

    Attributes:
        name: File or directory name (basename).
        path: Full canonical path.
        size: Content length (0 for directories).
        modified_at: ISO 8601 timestamp when last modified (UTC).
        is_dir: True if this is a directory, False if file.
    """

    name: str
    path: str
    size: int
    modified_at: str
    is_dir: bool
