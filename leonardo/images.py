"""Image generation endpoints."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from pydantic import Field

from leonardo.types import (
    CanvasRequestType,
    DeletedRecord,
    GenerationStatus,
    Lora,
    PresetStyle,
    Scheduler,
    SDVersion,
    Timestamp,
    TransformType,
    WireModel,
    escape_path,
    page_query,
)

if TYPE_CHECKING:
    from leonardo._http import HttpTransport

logger = logging.getLogger(__name__)


class CreateGenerationRequest(WireModel):
    """Text-to-image generation job.

    Only ``prompt`` is required; every other field is sent only when set.
    Server-side defaults: 4 images at 1024x768, 15 inference steps,
    alchemy on, ``DYNAMIC`` style, ``EULER_DISCRETE`` scheduler.
    """

    prompt: str
    alchemy: bool | None = None
    contrast_ratio: float | None = None  # 0.1-1.0
    expanded_domain: bool | None = None
    fantasy_avatar: bool | None = None
    guidance_scale: int | None = Field(None, alias="guidance_scale")  # 1-20
    height: int | None = None
    high_contrast: bool | None = None
    high_resolution: bool | None = None
    image_prompts: list[str] | None = None
    image_prompt_weight: float | None = None
    init_generation_image_id: str | None = Field(None, alias="init_generation_image_id")
    init_image_id: str | None = Field(None, alias="init_image_id")
    init_strength: float | None = Field(None, alias="init_strength")
    model_id: str | None = None
    negative_prompt: str | None = Field(None, alias="negative_prompt")
    num_images: int | None = Field(None, alias="num_images")
    num_inference_steps: int | None = Field(None, alias="num_inference_steps")  # 10-60
    photo_real: bool | None = None  # needs alchemy and no model_id
    photo_real_version: str | None = None
    photo_real_strength: float | None = None
    preset_style: PresetStyle | None = None
    prompt_magic: bool | None = None
    prompt_magic_strength: float | None = None
    prompt_magic_version: str | None = None
    public: bool | None = None
    scheduler: Scheduler | None = None
    sd_version: SDVersion | None = Field(None, alias="sd_version")
    seed: int | None = None
    tiling: bool | None = None
    transparency: str | None = None
    ultra: bool | None = None
    unzoom: bool | None = None
    unzoom_amount: int | None = None
    upscale_ratio: int | None = None
    width: int | None = None  # 32-1024
    canvas_request: bool | None = None
    canvas_request_type: CanvasRequestType | None = None
    canvas_init_id: str | None = None
    canvas_mask_id: str | None = None


class GenerationJob(WireModel):
    api_credit_cost: int | None = None
    generation_id: str | None = None


class CreateGenerationResponse(WireModel):
    sd_generation_job: GenerationJob = Field(default_factory=GenerationJob, alias="sdGenerationJob")


class ImageVariation(WireModel):
    id: str | None = None
    status: GenerationStatus | str | None = None
    transform_type: TransformType | str | None = None
    url: str | None = None


class GeneratedImage(WireModel):
    id: str | None = None
    url: str | None = None
    nsfw: bool | None = None
    like_count: int | None = None
    fantasy_avatar: bool | None = None
    image_to_video: bool | None = None
    motion: bool | None = None
    motion_model: str | None = None
    motion_mp4_url: str | None = Field(None, alias="motionMP4Url")
    motion_strength: int | None = None
    variations: list[ImageVariation] = Field(default_factory=list, alias="generated_image_variation_generics")


class GenerationElement(WireModel):
    id: str | None = None
    lora: Lora | None = None
    weight_applied: int | None = None


class Generation(WireModel):
    id: str | None = None
    status: GenerationStatus | str | None = None
    created_at: Timestamp | None = None
    prompt: str | None = None
    negative_prompt: str | None = None
    model_id: str | None = None
    image_height: int | None = None
    image_width: int | None = None
    inference_steps: int | None = None
    photo_real: bool | None = None
    photo_real_strength: float | None = None
    preset_style: PresetStyle | str | None = None
    prompt_magic: bool | None = None
    prompt_magic_strength: float | None = None
    prompt_magic_version: str | None = None
    public: bool | None = None
    scheduler: Scheduler | str | None = None
    sd_version: SDVersion | str | None = None
    seed: int | None = None
    ultra: bool | None = None
    generation_elements: list[GenerationElement] = Field(default_factory=list, alias="generation_elements")
    generated_images: list[GeneratedImage] = Field(default_factory=list, alias="generated_images")

    @property
    def is_pending(self) -> bool:
        return self.status is None or self.status == GenerationStatus.PENDING


class GetGenerationResponse(WireModel):
    generations_by_pk: Generation = Field(default_factory=Generation, alias="generations_by_pk")


class GenerationsByUserResponse(WireModel):
    generations: list[Generation] = Field(default_factory=list)


class DeleteGenerationResponse(WireModel):
    delete_generations_by_pk: DeletedRecord = Field(default_factory=DeletedRecord, alias="delete_generations_by_pk")


class ImagesAPI:
    def __init__(self, http: HttpTransport) -> None:
        self._http = http

    def create_generation(self, req: CreateGenerationRequest, *, timeout: float | None = None) -> CreateGenerationResponse:
        """Queue an image generation job."""
        logger.info("generation: '%s' num_images=%s", req.prompt[:60], req.num_images)
        resp: CreateGenerationResponse = self._http.request(
            "POST", "/generations", req, CreateGenerationResponse, timeout=timeout
        )
        logger.info("generation queued: %s", resp.sd_generation_job.generation_id)
        return resp

    def get_generation(self, generation_id: str, *, timeout: float | None = None) -> GetGenerationResponse:
        """Fetch a generation and its images."""
        path = f"/generations/{escape_path(generation_id)}"
        return self._http.request("GET", path, response_model=GetGenerationResponse, timeout=timeout)

    def delete_generation(self, generation_id: str, *, timeout: float | None = None) -> DeleteGenerationResponse:
        path = f"/generations/{escape_path(generation_id)}"
        return self._http.request("DELETE", path, response_model=DeleteGenerationResponse, timeout=timeout)

    def generations_by_user(
        self, user_id: str, limit: int = 0, offset: int = 0, *, timeout: float | None = None
    ) -> GenerationsByUserResponse:
        """List a user's generations. ``limit``/``offset`` of zero are not sent."""
        path = f"/generations/user/{escape_path(user_id)}{page_query(limit, offset)}"
        return self._http.request("GET", path, response_model=GenerationsByUserResponse, timeout=timeout)

    def wait_for_generation(
        self,
        generation_id: str,
        interval: float = 1.0,
        max_wait: float = 300.0,
        *,
        timeout: float | None = None,
    ) -> Generation:
        """Poll until the generation leaves PENDING. Errors from each poll propagate.

        ``timeout`` bounds each poll request; ``max_wait`` bounds the whole wait.
        """
        deadline = time.monotonic() + max_wait
        while True:
            generation = self.get_generation(generation_id, timeout=timeout).generations_by_pk
            if not generation.is_pending:
                logger.info("generation %s: %s", generation_id, generation.status)
                return generation
            if time.monotonic() + interval > deadline:
                raise TimeoutError(f"generation {generation_id} still pending after {max_wait:.0f}s")
            logger.debug("generation %s pending, next poll in %.1fs", generation_id, interval)
            time.sleep(interval)
