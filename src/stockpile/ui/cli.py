from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from stockpile.app import (
    add_item,
    capture_item_from_file,
    edit_item,
    export_inventory,
    import_inventory,
    list_inventory,
    remove_item,
)
from stockpile.config import ConfigurationError, configure_logging
from stockpile.domain.errors import InventoryError, PartialRenameFailure, ValidationError
from stockpile.domain.inventory import filter_items
from stockpile.domain.model import AddMethod

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from stockpile.domain.model import InventoryItem

log = logging.getLogger(__name__)

NO_IMAGE = "-"


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"count must not be negative: {parsed}")
    return parsed


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage the stockpile inventory")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    listing = subparsers.add_parser("list", help="Show inventory items")
    listing.add_argument("--search", type=str, help="Only show items whose name contains this")
    listing.add_argument("--json", action="store_true", help="Print wire-format documents")

    add = subparsers.add_parser("add", help="Add an item or more stock of a known item")
    add.add_argument("name", type=str, help="Item name")
    add.add_argument("--count", type=_non_negative_int, required=True, help="Quantity to add")
    add.add_argument("--image", type=Path, help="Photo to attach")

    edit = subparsers.add_parser("edit", help="Edit or rename a stored item")
    edit.add_argument("identity", type=str, help="Current item name")
    edit.add_argument("--name", type=str, help="New item name (renames, merging if it exists)")
    edit.add_argument("--count", type=_non_negative_int, help="Quantity on hand")
    edit.add_argument(
        "--add-method",
        type=AddMethod,
        choices=list(AddMethod),
        help="Provenance tag",
    )
    image_group = edit.add_mutually_exclusive_group()
    image_group.add_argument("--image", type=Path, help="Replace the photo")
    image_group.add_argument("--remove-image", action="store_true", help="Drop the photo")

    delete = subparsers.add_parser("delete", help="Delete an item")
    delete.add_argument("identity", type=str, help="Item name")
    delete.add_argument("--yes", action="store_true", help="Confirm the deletion")

    capture = subparsers.add_parser("capture", help="Add an item from a camera frame")
    capture.add_argument("--frame", type=Path, required=True, help="Image used as the frame")

    subparsers.add_parser("export", help="Print all items as wire-format JSON")

    importer = subparsers.add_parser("import", help="Add stock from wire-format JSON")
    importer.add_argument("path", type=Path, help="JSON file keyed by item name")

    return parser.parse_args(list(argv))


def _format_items(items: Sequence[InventoryItem], *, total: int, search: str | None) -> str:
    rows = [("Item Name", "Quantity", "Add Method", "Image")]
    rows.extend(
        (item.name, str(item.count), item.add_method.value, item.image or NO_IMAGE)
        for item in items
    )
    widths = [max(len(row[column]) for row in rows) for column in range(3)]
    lines = [
        "  ".join(value.ljust(width) for value, width in zip(row[:3], widths, strict=True))
        + "  "
        + row[3]
        for row in rows
    ]
    if search:
        suffix = "" if len(items) == 1 else "s"
        lines.append(f"{len(items)} Search result{suffix} found.")
    lines.append(f"{total} Items in inventory")
    return "\n".join(lines)


def _run(args: argparse.Namespace) -> None:
    if args.command == "list":
        if args.json:
            sys.stdout.write(export_inventory(search=args.search) + "\n")
            return
        everything = list_inventory()
        shown = filter_items(everything, args.search)
        sys.stdout.write(_format_items(shown, total=len(everything), search=args.search) + "\n")
    elif args.command == "add":
        outcome = add_item(args.name, args.count, image_path=args.image)
        log.info(
            "%s %r now has %s",
            outcome.message,
            outcome.plan.identity,
            _count_of(outcome.items, outcome.plan.identity),
        )
    elif args.command == "edit":
        outcome = edit_item(
            args.identity,
            name=args.name,
            count=args.count,
            add_method=args.add_method,
            image_path=args.image,
            remove_image=args.remove_image,
        )
        log.info("%s (%s)", outcome.message, outcome.plan.kind.value)
    elif args.command == "delete":
        if not args.yes:
            raise ValidationError(f"Deleting {args.identity!r} requires confirmation (--yes)")
        remove_item(args.identity)
        log.info("Item deleted successfully!")
    elif args.command == "capture":
        outcome = capture_item_from_file(args.frame)
        log.info("%s Stored as %s", outcome.message, outcome.plan.identity)
    elif args.command == "export":
        sys.stdout.write(export_inventory() + "\n")
    elif args.command == "import":
        plans = import_inventory(args.path.read_bytes())
        log.info("Imported %d items", len(plans))
    else:
        raise ValueError(f"Unsupported command: {args.command}")


def _count_of(items: Sequence[InventoryItem], identity: str) -> int | None:
    return next((item.count for item in items if item.identity == identity), None)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        _run(parsed_args)
    except ValidationError as exc:
        log.error("Error: %s", exc)  # noqa: TRY400
        sys.exit(2)
    except PartialRenameFailure as exc:
        log.error(
            "Rename incomplete: %r and %r are both stored; remove %r by hand",
            exc.source,
            exc.destination,
            exc.source,
        )
        sys.exit(1)
    except (InventoryError, ConfigurationError, OSError):
        log.exception("Failed to update the inventory. Please try again later.")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
