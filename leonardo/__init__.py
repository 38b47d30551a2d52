"""Typed httpx client for the Leonardo.ai REST API."""

from __future__ import annotations

from typing import Any

from leonardo._http import HttpTransport
from leonardo.config import DEFAULT_TIMEOUT, load_api_key, load_base_url
from leonardo.custom_models import CustomModelsAPI
from leonardo.datasets import DatasetsAPI
from leonardo.elements import ElementsAPI
from leonardo.errors import (
    APIError,
    DecodingError,
    EncodingError,
    HTTPError,
    LeonardoError,
    TransportError,
)
from leonardo.images import CreateGenerationRequest, ImagesAPI
from leonardo.init_images import InitImagesAPI
from leonardo.motion import MotionAPI
from leonardo.pricing import PricingAPI
from leonardo.prompt import PromptAPI
from leonardo.realtime_canvas import RealtimeCanvasAPI
from leonardo.texture import TextureAPI
from leonardo.three_d import ThreeDAPI
from leonardo.types import GenerationStatus, PresetStyle, Timestamp
from leonardo.upload import to_data_url, upload_to_presigned
from leonardo.user import UserAPI
from leonardo.variation import VariationAPI

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "CreateGenerationRequest",
    "DecodingError",
    "EncodingError",
    "GenerationStatus",
    "HTTPError",
    "LeonardoClient",
    "LeonardoError",
    "PresetStyle",
    "Timestamp",
    "TransportError",
    "to_data_url",
    "upload_to_presigned",
]


class LeonardoClient:
    """Composite client for the Leonardo.ai REST API.

    Usage::

        with LeonardoClient() as c:
            job = c.images.create_generation(CreateGenerationRequest(prompt="a cat"))
            gen = c.images.wait_for_generation(job.sd_generation_job.generation_id)

    ``api_key`` and ``base_url`` fall back to ``LEONARDO_API_KEY`` /
    ``LEONARDO_BASE_URL`` and then to ``~/.config/leonardo/config.toml``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        **transport_kwargs: Any,
    ) -> None:
        api_key = api_key or load_api_key()
        if not api_key:
            raise ValueError("no API key: pass api_key or set LEONARDO_API_KEY")
        self._http = HttpTransport(api_key, base_url or load_base_url(), timeout, **transport_kwargs)

        self.datasets = DatasetsAPI(self._http)
        self.images = ImagesAPI(self._http)
        self.elements = ElementsAPI(self._http)
        self.prompt = PromptAPI(self._http)
        self.init_images = InitImagesAPI(self._http)
        self.models = CustomModelsAPI(self._http)
        self.pricing = PricingAPI(self._http)
        self.realtime_canvas = RealtimeCanvasAPI(self._http)
        self.texture = TextureAPI(self._http)
        self.three_d = ThreeDAPI(self._http)
        self.user = UserAPI(self._http)
        self.variation = VariationAPI(self._http)
        self.motion = MotionAPI(self._http)

    @property
    def http(self) -> HttpTransport:
        return self._http

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> LeonardoClient:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
