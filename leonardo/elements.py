"""Element (LoRA) listing endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from leonardo.types import Lora, WireModel

if TYPE_CHECKING:
    from leonardo._http import HttpTransport


class ListElementsResponse(WireModel):
    loras: list[Lora] = Field(default_factory=list)


class ElementsAPI:
    def __init__(self, http: HttpTransport) -> None:
        self._http = http

    def list(self, *, timeout: float | None = None) -> ListElementsResponse:
        """Available elements (LoRAs)."""
        return self._http.request("GET", "/elements", response_model=ListElementsResponse, timeout=timeout)
