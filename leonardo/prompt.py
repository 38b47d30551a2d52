"""Prompt generation endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from leonardo.types import WireModel

if TYPE_CHECKING:
    from leonardo._http import HttpTransport

logger = logging.getLogger(__name__)


class ImprovePromptRequest(WireModel):
    prompt: str


class PromptGeneration(WireModel):
    api_credit_cost: int | None = None
    prompt: str | None = None


class PromptResponse(WireModel):
    prompt_generation: PromptGeneration | None = None


class PromptAPI:
    def __init__(self, http: HttpTransport) -> None:
        self._http = http

    def random(self, *, timeout: float | None = None) -> PromptResponse:
        """Ask the service for a random prompt."""
        return self._http.request("POST", "/prompt/random", response_model=PromptResponse, timeout=timeout)

    def improve(self, req: ImprovePromptRequest, *, timeout: float | None = None) -> PromptResponse:
        """Rewrite a prompt into a more detailed one."""
        logger.info("improving prompt: '%s'", req.prompt[:60])
        return self._http.request("POST", "/prompt/improve", req, PromptResponse, timeout=timeout)
