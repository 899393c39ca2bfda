"""Application configuration loaded from .env and defaults."""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

DEFAULT_BOOKMARK_FILENAME = "recently-used.xbel"


class Settings(BaseSettings):
    xdg_data_home: Optional[Path] = None
    bookmark_filename: str = DEFAULT_BOOKMARK_FILENAME
    max_candidates: int = 0
    log_level: str = "INFO"
    log_path: Path = PROJECT_ROOT / "data" / "logs" / "app.log"

    @property
    def data_dir(self) -> Path:
        """Base directory of the desktop bookmark file.

        XDG_DATA_HOME wins when set and absolute, ~/.local/share otherwise.
        """
        if self.xdg_data_home and self.xdg_data_home.is_absolute():
            return self.xdg_data_home
        return Path.home() / ".local" / "share"

    @property
    def bookmark_path(self) -> Path:
        return self.data_dir / self.bookmark_filename

    class Config:
        env_file = str(PROJECT_ROOT / ".env")
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
