"""Merge system recent files with the editor's own history."""
import logging
import os
from typing import Callable, Iterable, Optional

from src.recent.rank import rank

logger = logging.getLogger("desktop_recentf.recent.merge")

Include = Callable[[str], bool]


def union_paths(
    system_paths: Iterable[str],
    history_paths: Iterable[str],
    include: Optional[Include] = None,
) -> list[str]:
    """History entries accepted by include, then system paths, deduplicated.

    History entries are stored home-abbreviated ("~/notes.org"); they are
    expanded so they stat and compare like the absolute system paths. The
    first occurrence of a path wins.
    """
    eligible = [
        os.path.expanduser(p) for p in history_paths if include is None or include(p)
    ]
    seen: set[str] = set()
    merged: list[str] = []
    for path in [*eligible, *system_paths]:
        if path in seen:
            continue
        seen.add(path)
        merged.append(path)
    return merged


def merge(
    system_paths: Iterable[str],
    history_paths: Iterable[str],
    include: Optional[Include] = None,
) -> list[str]:
    """Union of both lists, ranked by modification time."""
    merged = union_paths(system_paths, history_paths, include)
    logger.debug("Merged %d unique paths", len(merged))
    return rank(merged)
