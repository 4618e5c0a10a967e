"""Domain error taxonomy for inventory writes and captures."""

from __future__ import annotations


class InventoryError(Exception):
    """Base class for inventory failures surfaced to the presentation layer."""


class ValidationError(InventoryError, ValueError):
    """Raised when a submission is rejected before any write happens."""


class RepositoryError(InventoryError):
    """Raised when a repository, unit of work or blob store call fails."""


class PartialRenameFailure(RepositoryError):
    """Raised when a rename wrote its destination but could not delete its source.

    Both records remain stored until someone reconciles them by hand.
    """

    def __init__(self, *, source: str, destination: str) -> None:
        super().__init__(
            f"Renamed item was written to {destination!r} but {source!r} could not be deleted"
        )
        self.source = source
        self.destination = destination


class CaptureError(InventoryError):
    """Raised when a camera capture aborts."""


class CapturePermissionError(CaptureError):
    """Raised when camera access is refused."""
