"""Texture generation endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import Field

from leonardo.types import CreditJob, WireModel

if TYPE_CHECKING:
    from leonardo._http import HttpTransport

logger = logging.getLogger(__name__)


class CreateTextureGenerationRequest(WireModel):
    model_asset_id: str | None = None
    prompt: str | None = None
    negative_prompt: str | None = Field(None, alias="negative_prompt")
    front_rotation_offset: int | None = Field(None, alias="front_rotation_offset")
    preview: bool | None = None
    preview_direction: str | None = Field(None, alias="preview_direction")
    sd_version: str | None = Field(None, alias="sd_version")
    seed: int | None = None


class CreateTextureGenerationResponse(WireModel):
    texture_generation_job: CreditJob = Field(default_factory=CreditJob)


class TextureAPI:
    def __init__(self, http: HttpTransport) -> None:
        self._http = http

    def create_generation(
        self, req: CreateTextureGenerationRequest, *, timeout: float | None = None
    ) -> CreateTextureGenerationResponse:
        """Texture a previously uploaded 3D model asset."""
        logger.info("texture generation for asset %s", req.model_asset_id)
        return self._http.request("POST", "/generations-texture", req, CreateTextureGenerationResponse, timeout=timeout)
