"""Path normalization and pure path helpers.

Every function here works on strings only. The single tree dependency,
looking up the parent of the current directory for a leading ``../``, is
passed in as a callable.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

ROOT = "/"

_SEPARATOR_RUN = re.compile(r"/{2,}")
_FORBIDDEN = re.compile(r"[\\/:*?\"<>|']")


def parent_path(path: str) -> str:
    """Everything before the last separator of a canonical path.

    Examples:
        >>> parent_path("/docs/note.txt")
        '/docs'
        >>> parent_path("/docs")
        '/'
        >>> parent_path("/")
        '/'
    """
    if path == ROOT:
        return ROOT
    return path[: path.rfind("/")] or ROOT


def basename(path: str) -> str:
    """Last segment of a canonical path, or "/" for the root."""
    if path == ROOT:
        return ROOT
    return path[path.rfind("/") + 1 :]


def join(directory: str, name: str) -> str:
    """Join a canonical directory path and a name without doubling "/"."""
    if directory == ROOT:
        return ROOT + name
    return f"{directory}/{name}"


def segments(path: str) -> list[str]:
    """Non-empty segments of a canonical path ("/" has none)."""
    return [s for s in path.split("/") if s]


def is_valid_name(name: str) -> bool:
    """Check whether a node name is allowed.

    A name is valid if, once stripped of surrounding whitespace, it is
    non-empty, is not "." or "..", and contains none of
    ``\\ / : * ? " < > | '``.
    """
    name = name.strip()
    if not name or name in (".", ".."):
        return False
    return _FORBIDDEN.search(name) is None


def normalize(
    raw: str,
    cwd: str = ROOT,
    parent_of: Optional[Callable[[str], Optional[str]]] = None,
) -> str:
    """Turn any path into a canonical absolute path.

    Relative paths resolve against ``cwd``. A leading ``../`` resolves
    against the stored parent of ``cwd`` as reported by ``parent_of``
    (falling back to the lexical parent when it returns None); ``..``
    anywhere else pops the previous segment and clamps at the root.

    Args:
        raw: Path as given by the user.
        cwd: Canonical current directory.
        parent_of: Maps a canonical directory path to its parent path.

    Returns:
        Canonical path: starts with "/", no empty, "." or ".." segments,
        no trailing "/" unless it is the root itself.

    Examples:
        >>> normalize("/a/./b/../c")
        '/a/c'
        >>> normalize("//a//b///")
        '/a/b'
        >>> normalize("  ", cwd="/x")
        '/x'
    """
    path = raw.strip()
    if not path:
        return cwd

    while True:
        path = _SEPARATOR_RUN.sub("/", path)
        if path == ROOT:
            return ROOT
        if path.endswith("/"):
            path = path[:-1]

        if path.startswith("./"):
            path = f"{cwd}/{path[2:]}"
            continue
        if path.startswith("../"):
            parent = parent_of(cwd) if parent_of is not None else None
            if parent is None:
                parent = parent_path(cwd)
            path = parent + path[2:]
            continue
        if not path.startswith("/"):
            path = f"{cwd}/{path}"
            continue
        break

    stack: list[str] = []
    for segment in path.split("/"):
        if not segment or segment == ".":
            continue
        if segment == "..":
            if stack:
                stack.pop()
            continue
        stack.append(segment)

    # The last segment ends the path, so its trailing whitespace would be
    # trimmed on the next pass; settle it now.
    while stack:
        last = stack[-1].rstrip()
        if last in ("", "."):
            stack.pop()
        elif last == "..":
            stack.pop()
            if stack:
                stack.pop()
        else:
            stack[-1] = last
            break

    return ROOT + "/".join(stack)
