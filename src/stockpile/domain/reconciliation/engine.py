"""Planner mapping a submission plus stored state to a write plan."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from stockpile.domain.model import ItemRecord, RecordPatch, SubmissionIntent

from .plan import DeleteStep, MergeStep, PlanKind, PutStep, ReadStep, WritePlan
from .validate import validate_submission

if TYPE_CHECKING:
    from stockpile.domain.model import ItemSubmission
    from stockpile.domain.ports.persistence import ItemLookup

log = getLogger(__name__)


def reconcile(submission: ItemSubmission, lookup: ItemLookup) -> WritePlan:
    """Decide how ``submission`` is written.

    Edits replace the stored quantity of their own row; new entries and renames that
    land on an existing identity add their quantity to it. Captures always create.
    Raises ``ValidationError`` before looking anything up.
    """

    validate_submission(submission)
    identity = submission.identity

    if submission.intent is SubmissionIntent.CAPTURE:
        plan = _create(submission)
    elif submission.intent is SubmissionIntent.EDIT:
        plan = _plan_edit(submission, lookup.get(identity))
    else:
        plan = _plan_new_entry(submission, lookup.get(identity))

    log.info("Planned %s for %r (%d steps)", plan.kind.value, identity, len(plan.steps))
    return plan


def _plan_edit(submission: ItemSubmission, existing: ItemRecord | None) -> WritePlan:
    identity = submission.identity
    prior = submission.prior_identity or identity

    if not submission.is_rename:
        if existing is None:
            # the row vanished while it was being edited
            return _create(submission)
        return WritePlan(
            kind=PlanKind.UPDATE_IN_PLACE,
            identity=identity,
            prior_identity=prior,
            steps=(MergeStep(identity, _edit_patch(submission)),),
        )

    if existing is None:
        return WritePlan(
            kind=PlanKind.RENAME_CREATE,
            identity=identity,
            prior_identity=prior,
            steps=(PutStep(identity, submission.record()), DeleteStep(prior)),
        )
    return WritePlan(
        kind=PlanKind.RENAME_MERGE,
        identity=identity,
        prior_identity=prior,
        steps=(
            ReadStep(identity, existing),
            PutStep(identity, _summed(submission, existing)),
            DeleteStep(prior),
        ),
    )


def _plan_new_entry(submission: ItemSubmission, existing: ItemRecord | None) -> WritePlan:
    if existing is None:
        return _create(submission)
    identity = submission.identity
    return WritePlan(
        kind=PlanKind.ADD_STOCK,
        identity=identity,
        steps=(ReadStep(identity, existing), PutStep(identity, _summed(submission, existing))),
    )


def _create(submission: ItemSubmission) -> WritePlan:
    identity = submission.identity
    return WritePlan(
        kind=PlanKind.CREATE,
        identity=identity,
        prior_identity=submission.prior_identity,
        steps=(PutStep(identity, submission.record()),),
    )


def _summed(submission: ItemSubmission, existing: ItemRecord) -> ItemRecord:
    if submission.clear_image:
        image = None
    else:
        image = submission.image if submission.image is not None else existing.image
    return ItemRecord(
        count=existing.count + submission.count,
        add_method=submission.add_method,
        image=image,
    )


def _edit_patch(submission: ItemSubmission) -> RecordPatch:
    patch = RecordPatch(count=submission.count, add_method=submission.add_method)
    if submission.clear_image:
        patch["image"] = None
    elif submission.image is not None:
        patch["image"] = submission.image
    return patch
