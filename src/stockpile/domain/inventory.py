"""Application services behind the inventory screens.

Each operation follows the same shape: validate, write through one unit of work,
then re-read the whole collection so callers always display stored state.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import quote

from stockpile.domain.capture import capture_frame, capture_submission
from stockpile.domain.model import ItemSubmission, SubmissionIntent
from stockpile.domain.reconciliation import execute_plan, reconcile, validate_submission

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from stockpile.domain.model import InventoryItem
    from stockpile.domain.ports.capture import CameraDevice
    from stockpile.domain.ports.storage import BlobStore
    from stockpile.domain.ports.unit_of_work import InventoryUnitOfWork
    from stockpile.domain.reconciliation import WritePlan

type UnitOfWorkFactory = Callable[[], InventoryUnitOfWork]

log = getLogger(__name__)

IMAGE_KEY_PREFIX = "images/"


@dataclass(slots=True)
class SubmissionOutcome:
    """Result handed back to the presentation layer after a successful write."""

    plan: WritePlan
    items: list[InventoryItem]
    message: str


def image_key(identity: str) -> str:
    """Blob key for an item's photo."""

    return IMAGE_KEY_PREFIX + quote(identity, safe="")


def list_items(*, unit_of_work_factory: UnitOfWorkFactory) -> list[InventoryItem]:
    with unit_of_work_factory() as uow:
        items = uow.repositories.items.list_items()
    return sorted(items, key=lambda item: item.name)


def filter_items(items: Iterable[InventoryItem], term: str | None) -> list[InventoryItem]:
    """Case-insensitive substring search on item names."""

    needle = (term or "").strip().lower()
    if not needle:
        return list(items)
    return [item for item in items if needle in item.name.lower()]


def submit_item(
    submission: ItemSubmission,
    *,
    unit_of_work_factory: UnitOfWorkFactory,
    blob_store: BlobStore | None = None,
    image_data: bytes | None = None,
    content_type: str | None = None,
) -> SubmissionOutcome:
    """Reconcile and store one submission, uploading its image first if given."""

    validate_submission(submission)

    if image_data is not None:
        if blob_store is None:
            raise ValueError("An image was supplied but no blob store is configured")
        url = blob_store.put_blob(image_key(submission.identity), image_data, content_type)
        submission = submission.with_image(url)

    with unit_of_work_factory() as uow:
        plan = reconcile(submission, uow.repositories.items)
        execute_plan(plan, uow)

    items = list_items(unit_of_work_factory=unit_of_work_factory)
    if submission.intent is SubmissionIntent.EDIT:
        message = "Item updated successfully!"
    elif submission.intent is SubmissionIntent.CAPTURE:
        message = "Item added successfully from camera!"
    else:
        message = "Item added successfully!"
    log.info("%s (%s %r)", message, plan.kind.value, plan.identity)
    return SubmissionOutcome(plan=plan, items=items, message=message)


def delete_item(identity: str, *, unit_of_work_factory: UnitOfWorkFactory) -> list[InventoryItem]:
    """Delete ``identity`` unconditionally; the caller has already confirmed."""

    with unit_of_work_factory() as uow:
        uow.repositories.items.delete(identity)
        uow.commit()
    log.info("Item deleted successfully! (%r)", identity)
    return list_items(unit_of_work_factory=unit_of_work_factory)


def capture_item(
    camera: CameraDevice,
    *,
    unit_of_work_factory: UnitOfWorkFactory,
    blob_store: BlobStore,
    identities: Callable[[], str],
    content_type: str | None = "image/jpeg",
) -> SubmissionOutcome:
    """Photograph an item and store it under a freshly generated identity."""

    frame = capture_frame(camera)
    identity = identities()
    return submit_item(
        capture_submission(identity, image=None),
        unit_of_work_factory=unit_of_work_factory,
        blob_store=blob_store,
        image_data=frame,
        content_type=content_type,
    )


def import_items(
    items: Iterable[InventoryItem],
    *,
    unit_of_work_factory: UnitOfWorkFactory,
) -> list[WritePlan]:
    """Submit each item as a new entry, so known names receive added stock."""

    plans: list[WritePlan] = []
    for item in items:
        submission = ItemSubmission(
            name=item.name,
            count=item.count,
            add_method=item.add_method,
            image=item.image,
        )
        with unit_of_work_factory() as uow:
            plan = reconcile(submission, uow.repositories.items)
            execute_plan(plan, uow)
        plans.append(plan)
    log.info("Imported %d items", len(plans))
    return plans
