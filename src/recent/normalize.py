"""Turn bookmark hrefs into absolute local file paths."""
import logging
import os
from typing import Iterable, Optional
from urllib.parse import unquote_to_bytes

logger = logging.getLogger("desktop_recentf.recent.normalize")

FILE_SCHEME = "file://"
_LOCALHOST = "localhost"


def _decode(remainder: str) -> Optional[str]:
    """Percent-decode to bytes, then decode as UTF-8."""
    try:
        return unquote_to_bytes(remainder).decode("utf-8")
    except (UnicodeDecodeError, TypeError, ValueError):
        return None


def normalize(href: str) -> Optional[str]:
    """Return the local path an href points at, or None.

    Rejected: anything not starting with ``file://``, URIs naming a host
    other than localhost, undecodable escapes, relative results, and
    paths that no longer exist.
    """
    if not isinstance(href, str) or not href.startswith(FILE_SCHEME):
        return None

    remainder = href[len(FILE_SCHEME):]
    if remainder.startswith(_LOCALHOST + "/"):
        remainder = remainder[len(_LOCALHOST):]

    path = _decode(remainder)
    if path is None or "\x00" in path or not os.path.isabs(path):
        logger.debug("Dropping malformed href %r", href)
        return None

    if not os.path.exists(path):
        logger.debug("Dropping stale bookmark %s", path)
        return None

    return path


def normalize_all(hrefs: Iterable[str]) -> list[str]:
    """Normalize every href, keeping order and dropping rejects."""
    paths: list[str] = []
    for href in hrefs:
        path = normalize(href)
        if path is not None:
            paths.append(path)
    return paths
