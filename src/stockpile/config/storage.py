"""Where stockpile keeps its database and photos on disk."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

DATA_DIR_ENV: Final[str] = "STOCKPILE_DATA_DIR"
DATABASE_URI_ENV: Final[str] = "DATABASE_URI"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    database_filename: str = "stockpile.db"
    blob_dirname: str = "blobs"

    @property
    def root(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def blob_dir(self) -> Path:
        return self.root / self.blob_dirname

    def database_uri(self) -> str:
        """SQLite URI inside the data directory, creating the directory if needed."""

        self.root.mkdir(parents=True, exist_ok=True)
        return f"sqlite+pysqlite:///{self.root / self.database_filename}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def _platform_data_home() -> Path:
    if os.name == "nt":
        local = os.getenv("LOCALAPPDATA")
        return Path(local) if local else Path.home() / "AppData" / "Local"
    xdg = os.getenv("XDG_DATA_HOME")
    return Path(xdg) if xdg else Path.home() / ".local" / "share"


def get_storage_config() -> StorageConfig:
    configured = os.getenv(DATA_DIR_ENV)
    data_dir = Path(configured) if configured else _platform_data_home() / "stockpile"
    return StorageConfig(data_dir=data_dir)


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    """``DATABASE_URI`` if set, otherwise a SQLite file under the data directory."""

    uri = os.getenv(DATABASE_URI_ENV)
    if uri:
        return DatabaseConfig(uri=uri)
    return DatabaseConfig(uri=(storage or get_storage_config()).database_uri())
