"""Ports for camera devices used by the capture workflow."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType


@runtime_checkable
class CameraStream(Protocol):
    """An acquired video stream; closing it releases the device."""

    def __enter__(self) -> CameraStream: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool | None: ...

    def grab_frame(self) -> bytes: ...


@runtime_checkable
class CameraDevice(Protocol):
    def request_permission(self) -> bool: ...

    def open_stream(self) -> CameraStream: ...
