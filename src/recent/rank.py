"""Order file paths by last modification time, newest first.

Modification time is used rather than access time: stat'ing atime for
ranking purposes would itself look like a use of the file.
"""
import logging
import os
import re
from typing import Iterable

logger = logging.getLogger("desktop_recentf.recent.rank")

# Remote-file access methods, as in "/ssh:host:/path" or "/sudo::/etc/hosts".
REMOTE_METHODS = (
    "adb", "afp", "dav", "davs", "docker", "doas", "fcp", "flatpak", "ftp",
    "gdrive", "kubernetes", "ksu", "mtp", "nc", "plink", "plinkx", "podman",
    "pscp", "psftp", "rclone", "rcp", "remcp", "rsh", "rsync", "scp", "scpx",
    "sftp", "sg", "smb", "ssh", "sshfs", "sshx", "su", "sudo", "sudoedit",
    "telnet", "toolbox",
)
# Multi-hop paths chain hops with "|": "/ssh:host|sudo:root:/etc".
_REMOTE_FILE_RE = re.compile(
    r"^/(?:" + "|".join(REMOTE_METHODS) + r"):[^/:|]*(?:\|[\w-]+:[^/:|]*)*:"
)
# "sftp://host/path", "smb://share/file"
_URI_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")

_LOCAL = 0
_OTHER = 1


def is_remote(path: str) -> bool:
    """True for remote-file syntax or URIs, which cannot be stat'ed locally.

    Remote-file syntax is only recognised for the methods in REMOTE_METHODS,
    so a local path such as "/data:v1:x/file" stays local.
    """
    return bool(_REMOTE_FILE_RE.match(path) or _URI_RE.match(path))


def _sort_key(path: str) -> tuple[int, float]:
    """(class, -mtime); missing and remote paths share the trailing class."""
    if is_remote(path):
        return (_OTHER, 0.0)
    try:
        mtime = os.stat(path).st_mtime
    except (OSError, ValueError):
        return (_OTHER, 0.0)
    return (_LOCAL, -mtime)


def rank(paths: Iterable[str]) -> list[str]:
    """Return paths with existing local files first, most recently modified first.

    Existence is checked again here. The sort is stable, so equal keys keep
    their input order.
    """
    paths = list(paths)
    keyed = [(_sort_key(path), index, path) for index, path in enumerate(paths)]
    keyed.sort()
    ranked = [path for _key, _index, path in keyed]
    logger.debug("Ranked %d paths", len(ranked))
    return ranked
