"""Platforms known to keep a freedesktop recently-used bookmark file.

Maps ``sys.platform``-style identifiers onto a closed enumeration so
callers dispatch on a fixed set of values.
"""
from __future__ import annotations

import sys
from enum import Enum


class Platform(str, Enum):
    LINUX = "linux"
    FREEBSD = "freebsd"
    OPENBSD = "openbsd"
    NETBSD = "netbsd"
    UNSUPPORTED = "unsupported"


# Identifier prefixes, e.g. "freebsd13" -> FREEBSD.
_PREFIXES: tuple[tuple[str, Platform], ...] = (
    ("linux", Platform.LINUX),
    ("freebsd", Platform.FREEBSD),
    ("openbsd", Platform.OPENBSD),
    ("netbsd", Platform.NETBSD),
)


def current_identifier() -> str:
    return sys.platform


def detect_platform(identifier: str | None = None) -> Platform:
    """Return the Platform for an identifier, UNSUPPORTED when unknown."""
    if identifier is None:
        identifier = current_identifier()
    ident = identifier.strip().lower()
    for prefix, platform in _PREFIXES:
        if ident.startswith(prefix):
            return platform
    return Platform.UNSUPPORTED


def is_supported(identifier: str | None = None) -> bool:
    return detect_platform(identifier) is not Platform.UNSUPPORTED
