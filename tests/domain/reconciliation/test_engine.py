from __future__ import annotations

import pytest

from stockpile.domain.errors import ValidationError
from stockpile.domain.model import AddMethod, InventoryItem, ItemSubmission, SubmissionIntent
from stockpile.domain.reconciliation import (
    DeleteStep,
    MergeStep,
    PlanKind,
    PutStep,
    ReadStep,
    reconcile,
)
from tests.helpers.inventory import InMemoryItemRepository, record


def _edit(prior: str, name: str, count: int, **kwargs: object) -> ItemSubmission:
    return ItemSubmission(
        name=name,
        count=count,
        intent=SubmissionIntent.EDIT,
        prior_identity=prior,
        **kwargs,  # type: ignore[arg-type]
    )


@pytest.mark.parametrize(
    "submission",
    [
        ItemSubmission(name="Apple", count=-1),
        ItemSubmission(name="", count=3),
        ItemSubmission(name="   ", count=3),
        ItemSubmission(name="Apple", count=True),
        ItemSubmission(name="Apple", count=2.5),  # type: ignore[arg-type]
        ItemSubmission(name="Apple", count=1, intent=SubmissionIntent.EDIT),
        ItemSubmission(name="Apple", count=1, prior_identity="Pear"),
        ItemSubmission(
            name="Item-1", count=1, intent=SubmissionIntent.CAPTURE, prior_identity="Item-0"
        ),
    ],
)
def test_invalid_submission_issues_no_repository_calls(submission: ItemSubmission) -> None:
    repository = InMemoryItemRepository({"Apple": record(3)})

    with pytest.raises(ValidationError):
        reconcile(submission, repository)

    assert repository.calls == []


def test_create_when_identity_is_fresh() -> None:
    repository = InMemoryItemRepository()

    plan = reconcile(ItemSubmission(name="Apple", count=3), repository)

    assert plan.kind is PlanKind.CREATE
    assert plan.steps == (PutStep("Apple", record(3)),)
    assert plan.vacated_identity is None


def test_new_entry_for_existing_identity_adds_stock() -> None:
    repository = InMemoryItemRepository({"Apple": record(3, image="https://img/apple")})

    plan = reconcile(ItemSubmission(name="Apple", count=2), repository)

    assert plan.kind is PlanKind.ADD_STOCK
    assert plan.steps == (
        ReadStep("Apple", record(3, image="https://img/apple")),
        PutStep("Apple", record(5, image="https://img/apple")),
    )


def test_add_stock_takes_submitted_image_and_add_method() -> None:
    repository = InMemoryItemRepository({"Apple": record(3, image="https://img/old")})
    submission = ItemSubmission(
        name="Apple", count=1, image="https://img/new", add_method=AddMethod.CAMERA
    )

    plan = reconcile(submission, repository)

    assert plan.writes == (
        PutStep("Apple", record(4, image="https://img/new", add_method=AddMethod.CAMERA)),
    )


def test_edit_without_rename_replaces_count() -> None:
    repository = InMemoryItemRepository({"Apple": record(3, image="https://img/apple")})

    plan = reconcile(_edit("Apple", "Apple", 10), repository)

    assert plan.kind is PlanKind.UPDATE_IN_PLACE
    assert plan.steps == (
        MergeStep("Apple", {"count": 10, "add_method": AddMethod.MANUAL}),
    )


def test_edit_can_replace_or_clear_the_image() -> None:
    repository = InMemoryItemRepository({"Apple": record(3, image="https://img/apple")})

    replaced = reconcile(_edit("Apple", "Apple", 3, image="https://img/new"), repository)
    cleared = reconcile(_edit("Apple", "Apple", 3, clear_image=True), repository)

    assert replaced.steps[0] == MergeStep(
        "Apple", {"count": 3, "add_method": AddMethod.MANUAL, "image": "https://img/new"}
    )
    assert cleared.steps[0] == MergeStep(
        "Apple", {"count": 3, "add_method": AddMethod.MANUAL, "image": None}
    )


def test_rename_onto_existing_identity_sums_and_vacates_source() -> None:
    repository = InMemoryItemRepository({"Apple": record(3), "Banana": record(5)})

    plan = reconcile(_edit("Apple", "Banana", 3), repository)

    assert plan.kind is PlanKind.RENAME_MERGE
    assert plan.steps == (
        ReadStep("Banana", record(5)),
        PutStep("Banana", record(8)),
        DeleteStep("Apple"),
    )
    assert plan.vacated_identity == "Apple"


def test_rename_to_fresh_identity_creates_then_deletes() -> None:
    repository = InMemoryItemRepository({"Apple": record(3)})

    plan = reconcile(_edit("Apple", "Cherry", 3), repository)

    assert plan.kind is PlanKind.RENAME_CREATE
    assert plan.steps == (PutStep("Cherry", record(3)), DeleteStep("Apple"))


def test_prefilled_rename_carries_stored_photo() -> None:
    apple = InventoryItem(name="Apple", count=3, image="https://img/apple")
    repository = InMemoryItemRepository(
        {"Apple": apple.record(), "Banana": record(5, image="https://img/banana")}
    )

    created = reconcile(ItemSubmission.edit_of(apple, name="Cherry"), repository)
    merged = reconcile(ItemSubmission.edit_of(apple, name="Banana"), repository)

    assert created.steps[0] == PutStep("Cherry", record(3, image="https://img/apple"))
    assert merged.steps[1] == PutStep("Banana", record(8, image="https://img/apple"))


def test_edit_of_vanished_item_recreates_it() -> None:
    repository = InMemoryItemRepository()

    plan = reconcile(_edit("Apple", "Apple", 4), repository)

    assert plan.kind is PlanKind.CREATE
    assert plan.steps == (PutStep("Apple", record(4)),)


def test_capture_always_creates_without_lookup() -> None:
    repository = InMemoryItemRepository()
    submission = ItemSubmission(
        name="Item-1700000000000",
        count=1,
        intent=SubmissionIntent.CAPTURE,
        add_method=AddMethod.CAMERA,
        image="https://img/capture",
    )

    plan = reconcile(submission, repository)

    assert plan.kind is PlanKind.CREATE
    assert repository.calls == []
    assert plan.steps == (
        PutStep(
            "Item-1700000000000",
            record(1, image="https://img/capture", add_method=AddMethod.CAMERA),
        ),
    )


def test_identity_ignores_surrounding_whitespace() -> None:
    repository = InMemoryItemRepository({"Apple": record(1)})

    plan = reconcile(ItemSubmission(name="  Apple ", count=1), repository)

    assert plan.kind is PlanKind.ADD_STOCK
    assert plan.identity == "Apple"


def test_zero_count_is_accepted() -> None:
    plan = reconcile(ItemSubmission(name="Apple", count=0), InMemoryItemRepository())

    assert plan.steps == (PutStep("Apple", record(0)),)
