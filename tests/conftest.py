"""Shared test fixtures for desktop_recentf tests."""
import os
from pathlib import Path
from unittest.mock import patch
from urllib.parse import quote

import pytest

from src.app.config import Settings


@pytest.fixture()
def tmp_settings(tmp_path):
    """Create a Settings instance backed by a temporary directory.

    Patches get_settings globally so all modules use the temp paths.
    """
    settings = Settings(
        xdg_data_home=tmp_path / "share",
        log_path=tmp_path / "logs" / "app.log",
        max_candidates=0,
    )
    settings.data_dir.mkdir(parents=True, exist_ok=True)

    with patch("src.app.config.get_settings", return_value=settings), \
            patch("src.app.paths.get_settings", return_value=settings), \
            patch("src.app.logging.get_settings", return_value=settings), \
            patch("src.sources.candidates.get_settings", return_value=settings):
        yield settings


@pytest.fixture()
def make_file(tmp_path):
    """Factory creating a file under tmp_path/files with a given mtime."""
    root = tmp_path / "files"
    root.mkdir(exist_ok=True)

    def _make(name: str, mtime: float | None = None, content: str = "x") -> str:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return str(path)

    return _make


def file_uri(path: str) -> str:
    return "file://" + quote(path)


def xbel_document(hrefs: list[str]) -> str:
    items = "\n".join(
        f'  <bookmark href="{href}" added="2025-01-15T10:00:00Z"'
        f' modified="2025-01-15T10:00:00Z" visited="2025-01-15T10:00:00Z"/>'
        for href in hrefs
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<xbel version="1.0"\n'
        '      xmlns:bookmark="http://www.freedesktop.org/standards/desktop-bookmarks"\n'
        '      xmlns:mime="http://www.freedesktop.org/standards/shared-mime-info">\n'
        f"{items}\n"
        "</xbel>\n"
    )


@pytest.fixture()
def write_xbel():
    """Write an XBEL document listing hrefs, oldest first."""

    def _write(path: Path, hrefs: list[str]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(xbel_document(hrefs), encoding="utf-8")
        return path

    return _write
