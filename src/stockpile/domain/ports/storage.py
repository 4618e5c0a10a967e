"""Ports for storing image blobs."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BlobStore(Protocol):
    """Object store returning a URL for every stored blob."""

    def put_blob(self, key: str, data: bytes, content_type: str | None = None) -> str: ...
