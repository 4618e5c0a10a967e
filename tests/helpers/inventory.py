"""Reusable fakes and helpers for inventory tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from stockpile.domain.errors import CaptureError, RepositoryError
from stockpile.domain.model import AddMethod, InventoryItem, ItemRecord
from stockpile.domain.ports.unit_of_work import InventoryRepositories

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from stockpile.domain.model import RecordPatch

type Call = tuple[str, str]


def record(
    count: int,
    *,
    image: str | None = None,
    add_method: AddMethod = AddMethod.MANUAL,
) -> ItemRecord:
    return ItemRecord(count=count, image=image, add_method=add_method)


class InMemoryItemRepository:
    """Dict-backed repository that logs every call and can be told to fail."""

    def __init__(self, records: dict[str, ItemRecord] | None = None) -> None:
        self.records: dict[str, ItemRecord] = dict(records or {})
        self.calls: list[Call] = []
        self.fail_on: set[Call] = set()

    def _call(self, operation: str, key: str) -> None:
        self.calls.append((operation, key))
        if (operation, key) in self.fail_on:
            raise RepositoryError(f"simulated {operation} failure for {key!r}")

    def get(self, key: str) -> ItemRecord | None:
        self._call("get", key)
        return self.records.get(key)

    def put(self, key: str, record: ItemRecord) -> None:
        self._call("put", key)
        self.records[key] = record

    def merge(self, key: str, fields: RecordPatch) -> None:
        self._call("merge", key)
        current = self.records.get(key)
        if current is None:
            raise RepositoryError(f"No item stored under {key!r}")
        self.records[key] = ItemRecord(
            count=fields.get("count", current.count),
            add_method=fields.get("add_method", current.add_method),
            image=fields["image"] if "image" in fields else current.image,
        )

    def delete(self, key: str) -> None:
        self._call("delete", key)
        self.records.pop(key, None)

    def list_items(self) -> list[InventoryItem]:
        self._call("list", "")
        return [InventoryItem.from_record(name, rec) for name, rec in self.records.items()]

    @property
    def writes(self) -> list[Call]:
        return [call for call in self.calls if call[0] in {"put", "merge", "delete"}]


class FakeUnitOfWork:
    """Unit of work over an in-memory repository; commits are logged as calls."""

    def __init__(self, repository: InMemoryItemRepository) -> None:
        self.repository = repository
        self._repositories = InventoryRepositories(items=repository)
        self.commits = 0
        self.rollbacks = 0
        self.fail_commit_after: int | None = None

    @property
    def repositories(self) -> InventoryRepositories:
        return self._repositories

    def __enter__(self) -> FakeUnitOfWork:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        return False

    def commit(self) -> None:
        if self.fail_commit_after is not None and self.commits >= self.fail_commit_after:
            raise RepositoryError("simulated commit failure")
        self.commits += 1
        self.repository.calls.append(("commit", ""))

    def rollback(self) -> None:
        self.rollbacks += 1


@dataclass(slots=True)
class RecordingBlobStore:
    blobs: dict[str, bytes] = field(default_factory=dict[str, bytes])
    content_types: dict[str, str | None] = field(default_factory=dict[str, str | None])
    fail: bool = False

    def put_blob(self, key: str, data: bytes, content_type: str | None = None) -> str:
        if self.fail:
            raise RepositoryError(f"simulated upload failure for {key!r}")
        self.blobs[key] = data
        self.content_types[key] = content_type
        return f"https://blobs.test/{key}"


@dataclass(slots=True)
class FakeStream:
    frame: bytes
    fail: bool = False
    opened: bool = False
    closed: bool = False

    def __enter__(self) -> FakeStream:
        self.opened = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.closed = True

    def grab_frame(self) -> bytes:
        if self.fail:
            raise CaptureError("Failed to capture photo. Please try again.")
        return self.frame


@dataclass(slots=True)
class FakeCamera:
    permission: bool = True
    frame: bytes = b"\xff\xd8frame"
    fail_open: bool = False
    fail_grab: bool = False
    streams: list[FakeStream] = field(default_factory=list[FakeStream])
    permission_requests: int = 0

    def request_permission(self) -> bool:
        self.permission_requests += 1
        return self.permission

    def open_stream(self) -> FakeStream:
        if self.fail_open:
            raise CaptureError("Camera not accessible")
        stream = FakeStream(frame=self.frame, fail=self.fail_grab)
        self.streams.append(stream)
        return stream


def fixed_identities(*identities: str) -> Callable[[], str]:
    iterator = iter(identities)
    return lambda: next(iterator)
