"""Reader for the desktop recently-used bookmark file (XBEL).

The file is a list of ``<bookmark href="file:///...">`` elements appended
oldest first. Hrefs are returned newest first so that document order can
serve as the tie-break for entries with equal modification times.
"""
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from src.recent.notices import Notify, emit_notice

logger = logging.getLogger("desktop_recentf.recent.bookmarks")

BOOKMARK_TAG = "bookmark"


@dataclass(frozen=True)
class BookmarkEntry:
    href: str


def _local_name(tag) -> str:
    """Strip a ``{namespace}`` prefix from an element tag."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def parse_bookmark_xml(data: bytes) -> list[BookmarkEntry]:
    """Parse an XBEL document into bookmark entries, in document order.

    Elements without an href are skipped. A document that does not parse,
    including one declaring an unknown encoding, yields an empty list.
    """
    try:
        root = ET.fromstring(data)
    except (ET.ParseError, LookupError, ValueError) as e:
        logger.warning("Bookmark document is not valid XML: %s", e)
        return []

    entries: list[BookmarkEntry] = []
    for elem in root.iter():
        if _local_name(elem.tag) != BOOKMARK_TAG:
            continue
        href = elem.get("href")
        if not href:
            continue
        entries.append(BookmarkEntry(href=href))
    return entries


def read_bookmarks(
    path: Union[str, Path],
    notify: Optional[Notify] = None,
) -> list[str]:
    """Return the href of every bookmark in the file, newest first.

    A missing or unreadable file is not an error: a notice is emitted and
    an empty list returned.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        emit_notice(logger, f"Cannot read bookmark file {path}: {e.strerror or e}", notify)
        return []

    entries = parse_bookmark_xml(data)
    logger.debug("Parsed %d bookmarks from %s", len(entries), path)
    return [entry.href for entry in reversed(entries)]
