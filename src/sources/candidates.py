"""Candidate sources for a picker UI listing recently used files.

Two sources are exposed: files the desktop reports as recently used
("system"), and those merged with the editor's own history ("mixed").
Items are recomputed on every call; nothing is cached between queries.
"""
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional, Sequence

from src.app.config import get_settings
from src.app.paths import default_data_dir
from src.app.platforms import current_identifier
from src.recent.merge import Include, merge
from src.recent.notices import Notify
from src.recent.system import system_recent_files

logger = logging.getLogger("desktop_recentf.sources.candidates")

CATEGORY_FILE = "file"
STYLE_FILE = "file-name"

# Navigation history shared by both sources; the picker appends to it.
RECENTF_HISTORY: list[str] = []


def abbreviate_home(path: str) -> str:
    """Replace a leading home directory with ``~``."""
    home = os.path.expanduser("~")
    if not home or home == os.sep:
        return path
    if path == home:
        return "~"
    if path.startswith(home + os.sep):
        return "~" + path[len(home):]
    return path


def _no_history() -> Sequence[str]:
    return []


def _never_live(path: str) -> bool:
    return False


def _ignore_open(path: str) -> None:
    logger.warning("No open action configured; ignoring %s", path)


@dataclass
class Host:
    """Hooks supplied by the editor hosting the picker."""

    platform: Callable[[], str] = current_identifier
    data_dir: Callable[[], Path] = default_data_dir
    history: Callable[[], Sequence[str]] = _no_history
    include: Optional[Include] = None
    is_live_buffer: Callable[[str], bool] = _never_live
    display: Callable[[str], str] = abbreviate_home
    open_file: Callable[[str], None] = _ignore_open
    notify: Optional[Notify] = None


@dataclass(frozen=True)
class CandidateSource:
    name: str
    narrow_key: str
    candidates: Callable[[], list[str]]
    action: Callable[[str], None]
    category: str = CATEGORY_FILE
    style: str = STYLE_FILE
    history: list[str] = field(default_factory=lambda: RECENTF_HISTORY)

    def __post_init__(self):
        if len(self.narrow_key) != 1:
            raise ValueError(f"narrow_key must be one character, got {self.narrow_key!r}")

    def items(self) -> list[str]:
        return self.candidates()

    def as_dict(self) -> dict[str, Any]:
        """The source shape consumed by picker UIs, items evaluated now."""
        return {
            "name": self.name,
            "narrow-key": self.narrow_key,
            "category": self.category,
            "style": self.style,
            "history": self.history,
            "action": self.action,
            "items": self.items(),
        }


def _system_paths(host: Host) -> list[str]:
    settings = get_settings()
    return system_recent_files(
        host.platform(),
        host.data_dir(),
        filename=settings.bookmark_filename,
        notify=host.notify,
    )


def _present(host: Host, paths: list[str]) -> list[str]:
    """Drop live buffers, format for display, apply max_candidates."""
    limit = get_settings().max_candidates
    items = [host.display(p) for p in paths if not host.is_live_buffer(p)]
    if limit > 0:
        items = items[:limit]
    return items


def _make_action(host: Host) -> Callable[[str], None]:
    def open_candidate(candidate: str) -> None:
        host.open_file(os.path.expanduser(candidate))

    return open_candidate


def system_source(host: Host) -> CandidateSource:
    """Source listing only the files the desktop tracks."""

    def candidates() -> list[str]:
        return _present(host, _system_paths(host))

    return CandidateSource(
        name="Recentf (system)",
        narrow_key="s",
        candidates=candidates,
        action=_make_action(host),
    )


def mixed_source(host: Host) -> CandidateSource:
    """Source listing desktop files merged with the editor's history."""

    def candidates() -> list[str]:
        history = list(host.history())
        paths = merge(_system_paths(host), history, host.include)
        return _present(host, paths)

    return CandidateSource(
        name="Recentf (mixed)",
        narrow_key="m",
        candidates=candidates,
        action=_make_action(host),
    )


def candidate_sources(host: Optional[Host] = None) -> list[CandidateSource]:
    """Both sources, system first."""
    if host is None:
        host = Host()
    return [system_source(host), mixed_source(host)]
