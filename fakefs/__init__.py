"""fakefs: A hierarchical filesystem simulated entirely in memory."""

from .base import DirectoryData, FileData, FileInfo, Node
from .config import FakeFSConfig, configure
from .errors import (
    AlreadyExistsError,
    ErrorKind,
    FSError,
    InvalidNameError,
    NotADirError,
    NotAFileError,
    NotFoundError,
    Result,
    RootProhibitedError,
    SameFileError,
)
from .fake import FakeFS
from .paths import is_valid_name, normalize

__all__ = [
    "AlreadyExistsError",
    "configure",
    "DirectoryData",
    "ErrorKind",
    "FakeFS",
    "FakeFSConfig",
    "FileData",
    "FileInfo",
    "FSError",
    "InvalidNameError",
    "is_valid_name",
    "Node",
    "normalize",
    "NotADirError",
    "NotAFileError",
    "NotFoundError",
    "Result",
    "RootProhibitedError",
    "SameFileError",
]
