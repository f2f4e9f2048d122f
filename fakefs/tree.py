"""Node arena and tree engine.

All paths handed to ``Tree`` methods must already be canonical (see
``fakefs.paths.normalize``). Failures are raised as ``FSError``
subclasses and propagate unchanged; ``FakeFS`` turns them into results.
"""

from __future__ import annotations

import logging
from typing import Iterator

from .base import Content, DirectoryData, FileData, Node
from .errors import (
    AlreadyExistsError,
    FSError,
    InvalidNameError,
    NotADirError,
    NotAFileError,
    NotFoundError,
    RootProhibitedError,
    SameFileError,
)
from .paths import ROOT, basename, is_valid_name, join, parent_path, segments

logger = logging.getLogger(__name__)


class Tree:
    """Directory tree stored in an id-indexed arena.

    Directories hold the ids of their children. Nodes know their parent
    only by canonical path, which is re-resolved when needed.
    """

    ROOT_ID = 0

    def __init__(self) -> None:
        self._nodes: dict[int, Node] = {}
        self._next_id = self.ROOT_ID
        self._add(Node(name=ROOT, parent_path=ROOT, data=DirectoryData()))

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def root(self) -> Node:
        return self._nodes[self.ROOT_ID]

    def _add(self, node: Node) -> Node:
        node.id = self._next_id
        self._next_id += 1
        self._nodes[node.id] = node
        return node

    def _discard(self, node: Node) -> None:
        """Drop a node and its whole subtree from the arena."""
        stack = [node]
        while stack:
            current = stack.pop()
            self._nodes.pop(current.id, None)
            if current.is_dir:
                stack.extend(self._nodes[i] for i in current.children if i in self._nodes)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def children(self, directory: Node) -> list[Node]:
        """Child nodes of a directory in insertion order."""
        return [self._nodes[i] for i in directory.children]

    def find_child(self, directory: Node, name: str) -> Node | None:
        for child_id in directory.children:
            child = self._nodes[child_id]
            if child.name == name:
                return child
        return None

    def resolve(self, path: str) -> Node:
        """Walk a canonical path from the root.

        Raises:
            NotADirError: If an intermediate segment is a file (cites the
                file's name).
            NotFoundError: If a segment is missing (cites the segment).
        """
        current = self.root
        parts = segments(path)
        for part in parts:
            if not current.is_dir:
                raise NotADirError(current.name)
            child = self.find_child(current, part)
            if child is None:
                raise NotFoundError(part)
            current = child
        return current

    def parent_of(self, path: str) -> str | None:
        """Stored parent path of the node at ``path``, or None if missing."""
        try:
            return self.resolve(path).parent_path
        except FSError:
            return None

    def exists(self, path: str) -> bool:
        try:
            self.resolve(path)
        except FSError:
            return False
        return True

    def full_path(self, node: Node) -> str:
        if node.id == self.ROOT_ID:
            return ROOT
        return join(node.parent_path, node.name)

    def _require_dir(self, path: str) -> Node:
        """Resolve a directory that must exist, citing ``path`` on failure."""
        try:
            node = self.resolve(path)
        except FSError:
            raise NotFoundError(path) from None
        if not node.is_dir:
            raise NotADirError(path)
        return node

    def read_file(self, path: str) -> Content:
        try:
            node = self.resolve(path)
        except FSError:
            raise NotFoundError(path) from None
        if not node.is_file:
            raise NotAFileError(path)
        return node.content

    def list_dir(self, path: str) -> list[Node]:
        return self.children(self._require_dir(path))

    def walk(self, path: str = ROOT) -> Iterator[tuple[str, list[str], list[str]]]:
        """Depth-first walk yielding ``(dir_path, dirnames, filenames)``."""
        stack = [(path, self._require_dir(path))]
        while stack:
            dir_path, directory = stack.pop()
            kids = self.children(directory)
            dirnames = [c.name for c in kids if c.is_dir]
            filenames = [c.name for c in kids if c.is_file]
            yield dir_path, dirnames, filenames
            subdirs = [(join(dir_path, c.name), c) for c in kids if c.is_dir]
            stack.extend(reversed(subdirs))

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def create(self, parent: str, name: str, data: FileData | DirectoryData) -> Node:
        """Attach a new node under an existing directory.

        Raises:
            InvalidNameError: If ``name`` is not a valid node name.
            AlreadyExistsError: If the target path is taken.
            NotFoundError: If ``parent`` does not resolve.
            NotADirError: If ``parent`` is a file.
        """
        if not is_valid_name(name):
            raise InvalidNameError(name)
        name = name.strip()
        target = join(parent, name)
        if self.exists(target):
            raise AlreadyExistsError(target)

        directory = self._require_dir(parent)
        node = self._add(Node(name=name, parent_path=parent, data=data))
        directory.children.append(node.id)
        directory.touch()
        logger.debug("Created %s %s", "directory" if node.is_dir else "file", target)
        return node

    def write(self, path: str, content: Content, append: bool = False) -> Node:
        """Overwrite or append to a file, creating it if missing."""
        try:
            node = self.resolve(path)
        except FSError:
            return self.create(parent_path(path), basename(path), FileData(content))

        if not isinstance(node.data, FileData):
            raise NotAFileError(path)
        if append:
            existing = node.data.content
            if type(existing) is not type(content):
                raise TypeError(
                    f"Expected {type(existing).__name__}, got {type(content).__name__}"
                )
            node.data.content = existing + content  # type: ignore[operator]
        else:
            node.data.content = content
        node.touch()
        logger.debug("Wrote %d to %s (append=%s)", len(content), path, append)
        return node

    def delete(self, path: str) -> Node:
        """Detach a node from its parent and drop its subtree.

        Raises:
            RootProhibitedError: If ``path`` is the root.
            NotFoundError: If nothing lives at ``path``.
        """
        if path == ROOT:
            raise RootProhibitedError(path)
        try:
            node = self.resolve(path)
        except FSError:
            raise NotFoundError(path) from None

        directory = self.resolve(node.parent_path)
        directory.children[:] = [i for i in directory.children if i != node.id]
        directory.touch()
        self._discard(node)
        logger.debug("Deleted %s", path)
        return node

    def _clone(self, source: Node, parent: str, name: str) -> Node:
        """Deep copy ``source`` into fresh arena nodes (not yet attached)."""
        if isinstance(source.data, FileData):
            return self._add(
                Node(name=name, parent_path=parent, data=FileData(source.data.content))
            )
        node = self._add(Node(name=name, parent_path=parent, data=DirectoryData()))
        here = join(parent, name)
        for child in self.children(source):
            node.children.append(self._clone(child, here, child.name).id)
        return node

    def copy(self, src: str, dst: str) -> Node:
        """Copy a file or directory by value.

        If ``dst`` does not exist it names the copy; if it is an existing
        directory the copy lands inside it under the source's name.

        Raises:
            RootProhibitedError: If ``src`` is the root.
            NotFoundError: If ``src`` or the parent of a new ``dst`` is missing.
            SameFileError: If ``src`` and ``dst`` are the same path.
            NotADirError: If ``dst`` (or its parent) is a file.
            AlreadyExistsError: If ``dst`` already holds the source's name.
            InvalidNameError: If the basename of a new ``dst`` is invalid.
        """
        if src == ROOT:
            raise RootProhibitedError(src)
        try:
            source = self.resolve(src)
        except FSError:
            raise NotFoundError(src) from None
        if src == dst:
            raise SameFileError(src)

        try:
            target: Node | None = self.resolve(dst)
        except FSError:
            target = None

        if target is None:
            parent = parent_path(dst)
            directory = self._require_dir(parent)
            name = basename(dst)
            if not is_valid_name(name):
                raise InvalidNameError(name)
        else:
            if not target.is_dir:
                raise NotADirError(dst)
            if self.find_child(target, source.name) is not None:
                raise AlreadyExistsError(join(dst, source.name))
            directory, parent, name = target, dst, source.name

        clone = self._clone(source, parent, name)
        directory.children.append(clone.id)
        directory.touch()
        logger.debug("Copied %s to %s", src, join(parent, name))
        return clone

    def move(self, src: str, dst: str) -> Node:
        """Copy then delete the source.

        Not atomic: the copy is in place before the source is removed.
        A failed copy leaves the tree untouched. Moving a directory into
        one of its own descendants succeeds, but deleting the source then
        discards the fresh copy too, so the returned node is detached.
        """
        node = self.copy(src, dst)
        self.delete(src)
        return node
