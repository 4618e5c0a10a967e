"""Blob store uploading photos to a remote object store over HTTP."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx
from pydantic import ValidationError as PydanticValidationError

from stockpile.domain.errors import RepositoryError

from .schema import BlobUploadResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from stockpile.config import HttpBlobConfig

log = getLogger(__name__)


def _default_client_factory(config: HttpBlobConfig) -> httpx.Client:
    headers = {"Authorization": f"Bearer {config.token}"} if config.token else None
    return httpx.Client(
        base_url=config.base_url,
        timeout=config.timeout_seconds,
        headers=headers,
    )


@dataclass(slots=True)
class HttpBlobStore:
    """PUT each blob to ``<base_url>/<key>``.

    The object store may answer with a JSON body carrying the public ``url`` (or
    ``downloadUrl``); an empty body means the upload location itself is the URL.
    """

    config: HttpBlobConfig
    client_factory: Callable[[HttpBlobConfig], httpx.Client] = field(
        default=_default_client_factory
    )

    def put_blob(self, key: str, data: bytes, content_type: str | None = None) -> str:
        path = "/" + quote(key, safe="/%")
        headers = {"Content-Type": content_type or "application/octet-stream"}
        try:
            with self.client_factory(self.config) as client:
                response = client.put(path, content=data, headers=headers)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            log.error("Blob upload of %r failed: %s", key, exc)  # noqa: TRY400
            raise RepositoryError(f"Failed to store blob {key!r}: {exc}") from exc

        if not response.content:
            return str(response.request.url)
        try:
            payload = BlobUploadResponse.model_validate_json(response.content)
        except PydanticValidationError as exc:
            raise RepositoryError(f"Unexpected object store response for {key!r}") from exc
        return payload.url
