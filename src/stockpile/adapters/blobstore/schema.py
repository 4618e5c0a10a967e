"""Minimal Pydantic models for object store responses."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class BlobUploadResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str = Field(validation_alias=AliasChoices("url", "downloadUrl"))
