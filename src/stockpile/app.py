"""Application orchestration entry points."""

from __future__ import annotations

import json
import mimetypes
from logging import getLogger
from typing import TYPE_CHECKING

from stockpile.adapters.blobstore import build_blob_store
from stockpile.adapters.camera import FileCameraDevice
from stockpile.adapters.documents import dump_documents, parse_documents
from stockpile.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, is_started, startup
from stockpile.config import get_blob_store_config
from stockpile.domain import inventory
from stockpile.domain.capture import CaptureIdentityGenerator
from stockpile.domain.errors import ValidationError
from stockpile.domain.model import ItemSubmission

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from stockpile.domain.inventory import SubmissionOutcome
    from stockpile.domain.model import AddMethod, InventoryItem
    from stockpile.domain.ports.storage import BlobStore
    from stockpile.domain.ports.unit_of_work import InventoryUnitOfWork
    from stockpile.domain.reconciliation import WritePlan

type UnitOfWorkFactory = Callable[[], InventoryUnitOfWork]

log = getLogger(__name__)

_CAPTURE_IDENTITIES = CaptureIdentityGenerator()


def _unit_of_work_factory(factory: UnitOfWorkFactory | None) -> UnitOfWorkFactory:
    if factory is not None:
        return factory
    if not is_started():
        startup()
    return SqlAlchemyUnitOfWork


def _blob_store(blob_store: BlobStore | None) -> BlobStore:
    return blob_store or build_blob_store(get_blob_store_config())


def _read_image(path: Path) -> tuple[bytes, str | None]:
    content_type, _ = mimetypes.guess_type(path.name)
    try:
        return path.read_bytes(), content_type
    except OSError as exc:
        raise ValidationError(f"Cannot read image {path}: {exc}") from exc


def list_inventory(
    *,
    search: str | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[InventoryItem]:
    items = inventory.list_items(unit_of_work_factory=_unit_of_work_factory(unit_of_work_factory))
    return inventory.filter_items(items, search)


def find_item(
    identity: str,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> InventoryItem | None:
    for item in list_inventory(unit_of_work_factory=unit_of_work_factory):
        if item.identity == identity:
            return item
    return None


def add_item(
    name: str,
    count: int,
    *,
    image_path: Path | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    blob_store: BlobStore | None = None,
) -> SubmissionOutcome:
    """Add ``count`` units of ``name``, creating the item or adding to its stock."""

    submission = ItemSubmission(name=name, count=count)
    image_data, content_type = _read_image(image_path) if image_path else (None, None)
    return inventory.submit_item(
        submission,
        unit_of_work_factory=_unit_of_work_factory(unit_of_work_factory),
        blob_store=_blob_store(blob_store) if image_data is not None else None,
        image_data=image_data,
        content_type=content_type,
    )


def edit_item(
    identity: str,
    *,
    name: str | None = None,
    count: int | None = None,
    add_method: AddMethod | None = None,
    image_path: Path | None = None,
    remove_image: bool = False,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    blob_store: BlobStore | None = None,
) -> SubmissionOutcome:
    """Edit a stored item; fields left as ``None`` keep their stored values."""

    factory = _unit_of_work_factory(unit_of_work_factory)
    current = find_item(identity, unit_of_work_factory=factory)
    if current is None:
        raise ValidationError(f"No item named {identity!r} to edit")

    submission = ItemSubmission.edit_of(
        current,
        name=current.name if name is None else name,
        count=current.count if count is None else count,
        add_method=current.add_method if add_method is None else add_method,
        clear_image=remove_image,
    )
    image_data, content_type = _read_image(image_path) if image_path else (None, None)
    return inventory.submit_item(
        submission,
        unit_of_work_factory=factory,
        blob_store=_blob_store(blob_store) if image_data is not None else None,
        image_data=image_data,
        content_type=content_type,
    )


def remove_item(
    identity: str,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[InventoryItem]:
    return inventory.delete_item(
        identity, unit_of_work_factory=_unit_of_work_factory(unit_of_work_factory)
    )


def capture_item_from_file(
    frame_path: Path,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    blob_store: BlobStore | None = None,
    identities: Callable[[], str] = _CAPTURE_IDENTITIES,
) -> SubmissionOutcome:
    """Capture an item using a still image as the camera frame."""

    content_type, _ = mimetypes.guess_type(frame_path.name)
    return inventory.capture_item(
        FileCameraDevice(frame_path),
        unit_of_work_factory=_unit_of_work_factory(unit_of_work_factory),
        blob_store=_blob_store(blob_store),
        identities=identities,
        content_type=content_type or "image/jpeg",
    )


def export_inventory(
    *,
    search: str | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> str:
    items = list_inventory(search=search, unit_of_work_factory=unit_of_work_factory)
    return json.dumps(dump_documents(items), indent=2, sort_keys=True)


def import_inventory(
    payload: bytes | str,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[WritePlan]:
    """Load a document collection, adding stock to items that already exist."""

    items = parse_documents(payload)
    log.info("Importing %d documents", len(items))
    return inventory.import_items(
        items, unit_of_work_factory=_unit_of_work_factory(unit_of_work_factory)
    )
