"""Motion (SVD) video generation endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import Field

from leonardo.types import WireModel

if TYPE_CHECKING:
    from leonardo._http import HttpTransport


class MotionRequest(WireModel):
    """The endpoint currently takes no body parameters; sent as ``{}``."""


class CreateMotionResponse(WireModel):
    details: dict[str, Any] = Field(default_factory=dict)
    generation_id: str | None = None
    status: str | None = None


class MotionAPI:
    def __init__(self, http: HttpTransport) -> None:
        self._http = http

    def create_svd(self, req: MotionRequest | None = None, *, timeout: float | None = None) -> CreateMotionResponse:
        """Start a short SVD motion generation."""
        body = req or MotionRequest()
        return self._http.request("POST", "/generations-motion-svd", body, CreateMotionResponse, timeout=timeout)
