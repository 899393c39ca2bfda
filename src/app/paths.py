"""Path utilities for the data directory and log locations."""
from pathlib import Path

from src.app.config import get_settings


def default_data_dir() -> Path:
    """Return the base data directory holding the bookmark file."""
    return get_settings().data_dir


def bookmark_file_path(data_dir: Path | None = None) -> Path:
    """Return the bookmark file path, under data_dir when one is given."""
    settings = get_settings()
    if data_dir is None:
        return settings.bookmark_path
    return Path(data_dir) / settings.bookmark_filename


def ensure_dirs() -> None:
    settings = get_settings()
    for d in [
        settings.log_path.parent,
    ]:
        d.mkdir(parents=True, exist_ok=True)
