"""Submission validation run before any repository or blob call."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stockpile.domain.errors import ValidationError
from stockpile.domain.model import SubmissionIntent

if TYPE_CHECKING:
    from stockpile.domain.model import ItemSubmission


def validate_submission(submission: ItemSubmission) -> None:
    """Raise ``ValidationError`` unless ``submission`` may be written."""

    if not submission.identity:
        raise ValidationError("Please enter a valid name and count: name is empty")
    count = submission.count
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValidationError(
            f"Please enter a valid name and count: count must be an integer, got {count!r}"
        )
    if count < 0:
        raise ValidationError(
            f"Please enter a valid name and count: count must not be negative, got {count}"
        )

    if submission.intent is SubmissionIntent.EDIT:
        if not (submission.prior_identity or "").strip():
            raise ValidationError("Edits must name the item they replace")
    elif submission.prior_identity is not None:
        raise ValidationError(
            f"{submission.intent.value} submissions cannot carry a prior identity"
        )
