"""
Base58Check - Version
======================
Package version, shown by ``base58check version``.
"""

from typing import NamedTuple


class VersionInfo(NamedTuple):
    major: int
    minor: int
    patch: int
    prerelease: str = ""


VERSION = VersionInfo(1, 0, 0)


def get_version_string() -> str:
    """
    Version as text, with a ``-prerelease`` suffix when set.

    Example:
        >>> get_version_string()
        '1.0.0'
    """
    text = ".".join(str(part) for part in VERSION[:3])
    return f"{text}-{VERSION.prerelease}" if VERSION.prerelease else text


__version__ = get_version_string()

__all__ = [
    "__version__",
    "VERSION",
    "get_version_string",
]
