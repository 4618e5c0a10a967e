"""Blob store writing photos below a local directory."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from pathlib import Path, PurePosixPath

from stockpile.domain.errors import RepositoryError

log = getLogger(__name__)


@dataclass(slots=True)
class LocalBlobStore:
    """Store blobs as files under ``root`` and hand out ``file://`` URLs."""

    root: Path

    def put_blob(self, key: str, data: bytes, content_type: str | None = None) -> str:
        _ = content_type
        target = self._path_for(key)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as exc:
            raise RepositoryError(f"Failed to store blob {key!r}: {exc}") from exc
        log.debug("Stored %d bytes at %s", len(data), target)
        return target.as_uri()

    def _path_for(self, key: str) -> Path:
        parts = PurePosixPath(key).parts
        if not parts or any(part in {"", ".", ".."} for part in parts) or parts[0] == "/":
            raise RepositoryError(f"Invalid blob key: {key!r}")
        return self.root.expanduser().resolve().joinpath(*parts)
