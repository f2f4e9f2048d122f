"""In-memory filesystem facade.

Provides the FakeFS class: every path argument is normalized against the
instance's current directory, handed to the tree engine, and the outcome
is returned as a Result instead of raised.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

from . import paths
from .base import Content, DirectoryData, FileData, FileInfo, Node
from .config import FakeFSConfig
from .errors import FSError, NotFoundError, Result
from .tree import Tree

logger = logging.getLogger(__name__)


class FakeFS:
    """Hierarchical filesystem held entirely in memory.

    Fallible operations return a Result carrying either the payload or
    the ErrorKind plus the path or name that caused it. Queries such as
    exists() return plain booleans. walk() is the exception: it is a
    generator and raises FSError when its start path is not a directory.

    Instances are independent and not thread-safe: a multi-threaded host
    must guard each instance with a single lock.

    Example:
        >>> fs = FakeFS()
        >>> fs.create_dir("/", "docs").success
        True
        >>> fs.create_file("/docs", "note.txt", "hi").success
        True
        >>> fs.write_file("/docs/note.txt", " there", append=True).success
        True
        >>> fs.read_file("/docs/note.txt").value
        'hi there'
    """

    def __init__(self, config: FakeFSConfig | None = None):
        """Initialize an empty filesystem.

        Args:
            config: Options from configure(). Defaults to FakeFSConfig().

        Raises:
            InvalidNameError: If the configured cwd holds an invalid name.
        """
        self._config = config if config is not None else FakeFSConfig()
        self._tree = Tree()
        self._cwd = paths.ROOT
        self._cwd = self._ensure_dirs(self.normalize(self._config.cwd))

    def _ensure_dirs(self, path: str) -> str:
        """Create each missing directory along a canonical path."""
        current = paths.ROOT
        for part in paths.segments(path):
            if not self._tree.exists(paths.join(current, part)):
                self._tree.create(current, part, DirectoryData())
            current = paths.join(current, part)
        return current

    def _run(self, op: str, fn: Callable[[], Any]) -> Result[Any]:
        try:
            return Result.ok(fn())
        except FSError as exc:
            logger.debug("%s failed: %s (%s)", op, exc.kind.name, exc.cause)
            return Result.from_error(exc)

    @property
    def root(self) -> Node:
        return self._tree.root

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    def normalize(self, path: str) -> str:
        """Canonical absolute form of ``path`` relative to the current directory."""
        return paths.normalize(path, self._cwd, self._tree.parent_of)

    def basename(self, path: str) -> str:
        return paths.basename(self.normalize(path))

    def parent_path(self, path: str) -> str:
        return paths.parent_path(self.normalize(path))

    def full_path(self, node: Node) -> str:
        """Canonical path of a node from its stored parent path and name."""
        return self.normalize(self._tree.full_path(node))

    def is_same_file(self, path1: str, path2: str) -> bool:
        return self.normalize(path1) == self.normalize(path2)

    @staticmethod
    def is_valid_name(name: str) -> bool:
        return paths.is_valid_name(name)

    # -------------------------------------------------------------------------
    # Working Directory
    # -------------------------------------------------------------------------

    def getcwd(self) -> str:
        return self._cwd

    def chdir(self, path: str) -> Result[str]:
        """Change the current directory.

        Returns:
            Result holding the new canonical current directory, or
            NOT_FOUND / NOT_A_DIRECTORY citing the target path.
        """
        target = self.normalize(path)

        def change() -> str:
            self._tree.list_dir(target)
            self._cwd = target
            return target

        return self._run("chdir", change)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def resolve(self, path: str) -> Result[Node]:
        """Look up the node at ``path``.

        Fails with NOT_FOUND citing the missing segment, or with
        NOT_A_DIRECTORY citing a file met in the middle of the path.
        """
        target = self.normalize(path)
        return self._run("resolve", lambda: self._tree.resolve(target))

    def exists(self, path: str) -> bool:
        return self._tree.exists(self.normalize(path))

    def isfile(self, path: str) -> bool:
        result = self.resolve(path)
        return result.success and result.value.is_file

    def isdir(self, path: str) -> bool:
        result = self.resolve(path)
        return result.success and result.value.is_dir

    def get_parent(self, path: str) -> Result[Node]:
        """Directory node containing ``path`` (the root for the root)."""
        parent = self.parent_path(path)

        def lookup() -> Node:
            try:
                return self._tree.resolve(parent)
            except FSError:
                raise NotFoundError(parent) from None

        return self._run("get_parent", lookup)

    def read_file(self, path: str) -> Result[Content]:
        target = self.normalize(path)
        return self._run("read_file", lambda: self._tree.read_file(target))

    def list_dir(self, path: str = ".") -> Result[list[Node]]:
        """Children of a directory in insertion order."""
        target = self.normalize(path)
        return self._run("list_dir", lambda: self._tree.list_dir(target))

    def _info(self, node: Node) -> FileInfo:
        return FileInfo(
            name=node.name,
            path=self.full_path(node),
            size=node.size,
            modified_at=node.modified,
            is_dir=node.is_dir,
        )

    def stat(self, path: str) -> Result[FileInfo]:
        result = self.resolve(path)
        if not result.success:
            return result
        return Result.ok(self._info(result.value))

    def list_detailed(self, path: str = ".") -> Result[list[FileInfo]]:
        """List directory contents as FileInfo records.

        Example:
            >>> for f in fs.list_detailed("/docs").value:
            ...     print(f"{f.name:20} {f.size:>10} {f.modified_at}")
        """
        result = self.list_dir(path)
        if not result.success:
            return result
        return Result.ok([self._info(node) for node in result.value])

    def walk(self, path: str = "/") -> Iterator[tuple[str, list[str], list[str]]]:
        """Walk a subtree like os.walk, top-down in insertion order.

        Raises:
            FSError: If ``path`` is not an existing directory.
        """
        return self._tree.walk(self.normalize(path))

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create_file(
        self, parent: str, name: str, content: Content | None = None
    ) -> Result[Node]:
        """Create a file named ``name`` inside the directory ``parent``.

        Args:
            parent: Directory path.
            name: New file name.
            content: Initial content. Defaults to the configured
                default_content.

        Returns:
            Result holding the new node, or INVALID_NAME, ALREADY_EXISTS,
            NOT_FOUND or NOT_A_DIRECTORY.
        """
        if content is None:
            content = self._config.default_content
        target = self.normalize(parent)
        return self._run(
            "create_file", lambda: self._tree.create(target, name, FileData(content))
        )

    def create_dir(self, parent: str, name: str) -> Result[Node]:
        """Create a directory named ``name`` inside the directory ``parent``."""
        target = self.normalize(parent)
        return self._run(
            "create_dir", lambda: self._tree.create(target, name, DirectoryData())
        )

    def write_file(self, path: str, content: Content, append: bool = False) -> Result[Node]:
        """Write content to a file, creating it when missing.

        Args:
            path: File path.
            content: Content to write.
            append: If True, append to the existing content instead of
                replacing it.

        Returns:
            Result holding the file node, NOT_A_FILE if ``path`` is a
            directory, or any create_file error for a new file.

        Raises:
            TypeError: If appending bytes to text or text to bytes.
        """
        target = self.normalize(path)
        return self._run(
            "write_file", lambda: self._tree.write(target, content, append=append)
        )

    def delete(self, path: str) -> Result[Node]:
        """Delete a file or a directory together with everything below it."""
        target = self.normalize(path)
        return self._run("delete", lambda: self._tree.delete(target))

    def copy(self, source: str, destination: str) -> Result[Node]:
        """Copy a file or directory by value.

        A missing destination names the copy; an existing destination
        directory receives the copy under the source's name.
        """
        src = self.normalize(source)
        dst = self.normalize(destination)
        return self._run("copy", lambda: self._tree.copy(src, dst))

    def move(self, source: str, destination: str) -> Result[Node]:
        """Move a file or directory (copy, then delete the source).

        On failure the copy error is returned and the source is left as
        it was.
        """
        src = self.normalize(source)
        dst = self.normalize(destination)
        return self._run("move", lambda: self._tree.move(src, dst))
