"""Camera device backed by an image file, for headless captures."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from stockpile.domain.errors import CaptureError

if TYPE_CHECKING:
    from pathlib import Path
    from types import TracebackType

log = getLogger(__name__)


@dataclass(slots=True)
class FileFrameStream:
    path: Path
    closed: bool = field(default=False, init=False)

    def __enter__(self) -> FileFrameStream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.closed = True

    def grab_frame(self) -> bytes:
        if self.closed:
            raise CaptureError("Camera stream is closed")
        try:
            return self.path.read_bytes()
        except OSError as exc:
            raise CaptureError(f"Failed to capture photo from {self.path}: {exc}") from exc


@dataclass(slots=True)
class FileCameraDevice:
    """Treat a still image on disk as the camera's single frame.

    Permission is granted when the file exists and is a regular file.
    """

    path: Path

    def request_permission(self) -> bool:
        granted = self.path.is_file()
        if not granted:
            log.warning("Camera source %s is not accessible", self.path)
        return granted

    def open_stream(self) -> FileFrameStream:
        return FileFrameStream(self.path)
