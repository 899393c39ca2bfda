"""Platform providers for the files other desktop applications used recently."""
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from src.app.config import DEFAULT_BOOKMARK_FILENAME
from src.app.platforms import Platform, detect_platform
from src.recent.bookmarks import read_bookmarks
from src.recent.normalize import normalize_all
from src.recent.notices import Notify, emit_notice
from src.recent.rank import rank

logger = logging.getLogger("desktop_recentf.recent.system")


class RecentFilesProvider(ABC):
    """Source of recently used files tracked by the operating system."""

    platform: Platform

    @abstractmethod
    def recent_files(self) -> list[str]:
        """Return existing local paths, most recently modified first."""
        ...


class XbelProvider(RecentFilesProvider):
    """freedesktop.org desktops: ``recently-used.xbel`` in the data dir."""

    def __init__(
        self,
        platform: Platform,
        data_dir: Union[str, Path],
        filename: str = DEFAULT_BOOKMARK_FILENAME,
        notify: Optional[Notify] = None,
    ):
        self.platform = platform
        self.path = Path(data_dir) / filename
        self.notify = notify

    def recent_files(self) -> list[str]:
        hrefs = read_bookmarks(self.path, notify=self.notify)
        paths = normalize_all(hrefs)
        logger.debug("%d of %d bookmarks usable", len(paths), len(hrefs))
        return rank(paths)


class UnsupportedProvider(RecentFilesProvider):
    platform = Platform.UNSUPPORTED

    def __init__(self, identifier: str, notify: Optional[Notify] = None):
        self.identifier = identifier
        self.notify = notify

    def recent_files(self) -> list[str]:
        emit_notice(
            logger,
            f"System recent files are not supported on platform {self.identifier!r}",
            self.notify,
        )
        return []


PROVIDERS: dict[Platform, type[XbelProvider]] = {
    Platform.LINUX: XbelProvider,
    Platform.FREEBSD: XbelProvider,
    Platform.OPENBSD: XbelProvider,
    Platform.NETBSD: XbelProvider,
}


def get_provider(
    identifier: str,
    data_dir: Union[str, Path],
    filename: str = DEFAULT_BOOKMARK_FILENAME,
    notify: Optional[Notify] = None,
) -> RecentFilesProvider:
    """Pick the provider for a platform identifier such as ``sys.platform``."""
    platform = detect_platform(identifier)
    provider_cls = PROVIDERS.get(platform)
    if provider_cls is None:
        return UnsupportedProvider(identifier, notify=notify)
    return provider_cls(platform, data_dir, filename=filename, notify=notify)


def system_recent_files(
    identifier: str,
    data_dir: Union[str, Path],
    filename: str = DEFAULT_BOOKMARK_FILENAME,
    notify: Optional[Notify] = None,
) -> list[str]:
    """Ranked recent files from the desktop, or [] where unsupported."""
    provider = get_provider(identifier, data_dir, filename=filename, notify=notify)
    return provider.recent_files()
