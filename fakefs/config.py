"""Configuration for FakeFS instances.

Provides the FakeFSConfig dataclass and the configure factory function.
"""

from dataclasses import dataclass

from .base import Content


@dataclass
class FakeFSConfig:
    """Configuration for an in-memory filesystem.

    Attributes:
        cwd: Initial current directory. Must be absolute; it is created
            as a chain of directories if missing.
        default_content: Content given to files created without any.
    """

    cwd: str = "/"
    default_content: Content = ""


def configure(**kwargs) -> FakeFSConfig:
    """Build a FakeFSConfig, rejecting unknown options.

    Args:
        **kwargs: Configuration values.
            - cwd (str): Optional. Absolute initial current directory
              (default: "/").
            - default_content (str | bytes): Optional. Content for files
              created without explicit content (default: "").

    Returns:
        FakeFSConfig for FakeFS(config=...).

    Examples:
        >>> configure()
        FakeFSConfig(cwd='/', default_content='')

        >>> configure(cwd="/home/user", default_content=b"")
        FakeFSConfig(cwd='/home/user', default_content=b'')
    """
    cwd = kwargs.pop("cwd", "/")
    default_content = kwargs.pop("default_content", "")

    if kwargs:
        raise ValueError(f"Unexpected arguments for fakefs: {list(kwargs.keys())}")

    if not isinstance(cwd, str) or not cwd.strip().startswith("/"):
        raise ValueError(f"cwd must be an absolute path, got {cwd!r}")

    if not isinstance(default_content, (str, bytes)):
        raise ValueError(
            f"default_content must be str or bytes, got {type(default_content).__name__}"
        )

    return FakeFSConfig(cwd=cwd, default_content=default_content)
