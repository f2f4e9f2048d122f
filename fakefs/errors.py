"""Error kinds, exceptions and the Result value returned by FakeFS.

The tree engine raises ``FSError`` subclasses. Each one also derives from
the matching builtin ``OSError`` subclass so callers can catch either.
The ``FakeFS`` facade converts them into ``Result`` values at its boundary.
"""

from __future__ import annotations

import errno
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Failure categories. Values are the user-facing messages."""

    NOT_FOUND = "No such file or directory"
    NOT_A_FILE = "Not a regular file"
    NOT_A_DIRECTORY = "Not a directory"
    ALREADY_EXISTS = "File or directory already exists"
    SAME_FILE = "Source and destination are the same"
    INVALID_NAME = (
        "Invalid file name, must be at least one character long and cannot "
        "contain \\ / : * ? \" < > | '"
    )
    ROOT_PROHIBITED = "You cannot perform this operation on the root directory"


class FSError(OSError):
    """Base class for fakefs failures.

    Attributes:
        kind: The ErrorKind of this failure.
        cause: The path or name that triggered it.
    """

    kind: ErrorKind = ErrorKind.NOT_FOUND
    code: int = errno.EIO

    def __init__(self, cause: str):
        super().__init__(self.code, self.kind.value, cause)
        self.cause = cause


class NotFoundError(FSError, FileNotFoundError):
    kind = ErrorKind.NOT_FOUND
    code = errno.ENOENT


class NotAFileError(FSError, IsADirectoryError):
    kind = ErrorKind.NOT_A_FILE
    code = errno.EISDIR


class NotADirError(FSError, NotADirectoryError):
    kind = ErrorKind.NOT_A_DIRECTORY
    code = errno.ENOTDIR


class AlreadyExistsError(FSError, FileExistsError):
    kind = ErrorKind.ALREADY_EXISTS
    code = errno.EEXIST


class SameFileError(FSError):
    kind = ErrorKind.SAME_FILE
    code = errno.EINVAL


class InvalidNameError(FSError):
    kind = ErrorKind.INVALID_NAME
    code = errno.EINVAL


class RootProhibitedError(FSError, PermissionError):
    kind = ErrorKind.ROOT_PROHIBITED
    code = errno.EPERM


_ERRORS: dict[ErrorKind, type[FSError]] = {
    cls.kind: cls
    for cls in (
        NotFoundError,
        NotAFileError,
        NotADirError,
        AlreadyExistsError,
        SameFileError,
        InvalidNameError,
        RootProhibitedError,
    )
}


def error_for(kind: ErrorKind, cause: str) -> FSError:
    """Build the exception matching an error kind."""
    return _ERRORS[kind](cause)


@dataclass
class Result(Generic[T]):
    """Outcome of a FakeFS operation.

    Attributes:
        success: True if the operation completed.
        value: The payload on success, None otherwise.
        error: The ErrorKind on failure, None otherwise.
        cause: The path or name that caused the failure.
    """

    success: bool
    value: T | None = None
    error: ErrorKind | None = None
    cause: str | None = None

    @classmethod
    def ok(cls, value: Any) -> "Result[Any]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: ErrorKind, cause: str) -> "Result[Any]":
        return cls(success=False, error=error, cause=cause)

    @classmethod
    def from_error(cls, exc: FSError) -> "Result[Any]":
        return cls.fail(exc.kind, exc.cause)

    @property
    def message(self) -> str | None:
        """Human-readable error message, or None on success."""
        if self.error is None:
            return None
        return f"{self.error.value}: {self.cause}"

    def unwrap(self) -> T:
        """Return the payload or raise the matching FSError.

        Raises:
            FSError: If the operation failed.
            ValueError: If a failed result has no error kind.
        """
        if not self.success:
            if self.error is None:
                raise ValueError("Failed result carries no error kind")
            raise error_for(self.error, self.cause or "")
        return self.value  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self.success
