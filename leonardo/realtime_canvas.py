"""Realtime canvas (LCM) endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from leonardo.types import LCMGenerationJob, WireModel

if TYPE_CHECKING:
    from leonardo._http import HttpTransport

logger = logging.getLogger(__name__)


class LCMRequest(WireModel):
    """Common LCM parameters. ``image_data_url`` is a ``data:`` URL of the canvas."""

    image_data_url: str
    prompt: str
    guidance: float | None = None
    height: int | None = None
    width: int | None = None
    request_timestamp: str | None = None
    seed: int | None = None
    steps: int | None = None
    strength: float | None = None
    style: str | None = None


class LCMGenerationRequest(LCMRequest):
    refine_creative: bool | None = None
    refine_strength: float | None = None


class InstantRefineRequest(LCMGenerationRequest):
    pass


class InpaintingRequest(LCMRequest):
    mask_data_url: str


class AlchemyUpscaleRequest(LCMRequest):
    pass


class LCMResponse(WireModel):
    lcm_generation_job: LCMGenerationJob | None = None


class UpscaleJob(LCMGenerationJob):
    generated_image_id: str | None = None
    generation_id: list[str] | None = None
    variation_id: list[str] | None = None


class AlchemyUpscaleResponse(WireModel):
    lcm_generation_job: UpscaleJob | None = None


class RealtimeCanvasAPI:
    def __init__(self, http: HttpTransport) -> None:
        self._http = http

    def lcm_generation(self, req: LCMGenerationRequest, *, timeout: float | None = None) -> LCMResponse:
        """Generate from a canvas image and prompt."""
        logger.info("lcm generation: '%s'", req.prompt[:60])
        return self._http.request("POST", "/generations-lcm", req, LCMResponse, timeout=timeout)

    def instant_refine(self, req: InstantRefineRequest, *, timeout: float | None = None) -> LCMResponse:
        return self._http.request("POST", "/lcm-instant-refine", req, LCMResponse, timeout=timeout)

    def inpainting(self, req: InpaintingRequest, *, timeout: float | None = None) -> LCMResponse:
        """Repaint the masked region of the canvas."""
        return self._http.request("POST", "/lcm-inpainting", req, LCMResponse, timeout=timeout)

    def alchemy_upscale(self, req: AlchemyUpscaleRequest, *, timeout: float | None = None) -> AlchemyUpscaleResponse:
        return self._http.request("POST", "/lcm-upscale", req, AlchemyUpscaleResponse, timeout=timeout)
