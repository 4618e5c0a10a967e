"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class AddMethod(StrEnum):
    """How an item first entered the inventory."""

    MANUAL = "Manual"
    CAMERA = "Camera"


class SubmissionIntent(StrEnum):
    """What the user meant by a submission.

    ``EDIT`` corrects a stored row (quantities are replaced), ``NEW_ENTRY`` reports
    more stock (quantities are summed into an existing row) and ``CAPTURE`` stores a
    photographed item under a freshly generated identity.
    """

    NEW_ENTRY = "new_entry"
    EDIT = "edit"
    CAPTURE = "capture"
