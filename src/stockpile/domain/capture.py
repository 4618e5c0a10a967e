"""Camera capture workflow: permission, stream, frame, fresh identity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

from stockpile.domain.errors import CaptureError, CapturePermissionError
from stockpile.domain.model import AddMethod, ItemSubmission, SubmissionIntent

if TYPE_CHECKING:
    from collections.abc import Callable

    from stockpile.domain.ports.capture import CameraDevice

log = getLogger(__name__)

CAPTURE_IDENTITY_PREFIX = "Item-"
CAPTURED_COUNT = 1


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class CaptureIdentityGenerator:
    """Generate ``Item-<epoch ms>`` identities, strictly increasing per instance.

    Two captures within the same millisecond (or after the clock steps back) get
    consecutive millisecond values instead of colliding.
    """

    clock: Callable[[], datetime] = _utcnow
    _last_millis: int = field(default=-1, init=False)

    def __call__(self) -> str:
        millis = int(self.clock().timestamp() * 1000)
        if millis <= self._last_millis:
            millis = self._last_millis + 1
        self._last_millis = millis
        return f"{CAPTURE_IDENTITY_PREFIX}{millis}"


def capture_frame(camera: CameraDevice) -> bytes:
    """Grab one frame, aborting at the first failing step."""

    if not camera.request_permission():
        raise CapturePermissionError(
            "Camera permission denied. Please allow camera access and try again."
        )
    with camera.open_stream() as stream:
        frame = stream.grab_frame()
    if not frame:
        raise CaptureError("Camera returned an empty frame")
    log.debug("Captured frame of %d bytes", len(frame))
    return frame


def capture_submission(identity: str, image: str | None) -> ItemSubmission:
    return ItemSubmission(
        name=identity,
        count=CAPTURED_COUNT,
        intent=SubmissionIntent.CAPTURE,
        add_method=AddMethod.CAMERA,
        image=image,
    )
