"""Image variation endpoints (unzoom, upscale, background removal)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import Field

from leonardo.types import GenerationStatus, Timestamp, TransformType, VariationJob, WireModel, escape_path

if TYPE_CHECKING:
    from leonardo._http import HttpTransport

logger = logging.getLogger(__name__)


class VariationRequest(WireModel):
    """Target image; ``is_variation`` marks ``id`` as a variation rather than a generated image."""

    id: str
    is_variation: bool | None = None


class UniversalUpscalerRequest(WireModel):
    image_url: str = Field(alias="image_url")
    scale_factor: int = Field(alias="scale_factor")


class UnzoomResponse(WireModel):
    sd_unzoom_job: VariationJob = Field(default_factory=VariationJob)


class UpscaleResponse(WireModel):
    sd_upscale_job: VariationJob = Field(default_factory=VariationJob)


class NoBackgroundResponse(WireModel):
    sd_nobg_job: VariationJob = Field(default_factory=VariationJob)


class UniversalUpscalerResponse(WireModel):
    upscaled_image_url: str | None = Field(None, alias="upscaled_image_url")


class Variation(WireModel):
    created_at: Timestamp | None = None
    id: str | None = None
    status: GenerationStatus | str | None = None
    transform_type: TransformType | str | None = None
    url: str | None = None


class GetVariationResponse(WireModel):
    variations: list[Variation] = Field(default_factory=list, alias="generated_image_variation_generic")


class VariationAPI:
    def __init__(self, http: HttpTransport) -> None:
        self._http = http

    def unzoom(self, req: VariationRequest, *, timeout: float | None = None) -> UnzoomResponse:
        return self._http.request("POST", "/variations/unzoom", req, UnzoomResponse, timeout=timeout)

    def upscale(self, image_id: str, *, timeout: float | None = None) -> UpscaleResponse:
        """Upscale a generated image."""
        req = VariationRequest(id=image_id)
        return self._http.request("POST", "/variations/upscale", req, UpscaleResponse, timeout=timeout)

    def no_background(self, req: VariationRequest, *, timeout: float | None = None) -> NoBackgroundResponse:
        """Remove the background of a generated image."""
        return self._http.request("POST", "/variations/nobg", req, NoBackgroundResponse, timeout=timeout)

    def universal_upscaler(self, req: UniversalUpscalerRequest, *, timeout: float | None = None) -> UniversalUpscalerResponse:
        logger.info("universal upscaler x%d: %s", req.scale_factor, req.image_url)
        return self._http.request("POST", "/variations/universal-upscaler", req, UniversalUpscalerResponse, timeout=timeout)

    def get(self, variation_id: str, *, timeout: float | None = None) -> GetVariationResponse:
        path = f"/variations/{escape_path(variation_id)}"
        return self._http.request("GET", path, response_model=GetVariationResponse, timeout=timeout)
