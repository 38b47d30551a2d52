"""Pricing calculator endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import Field

from leonardo.types import WireModel

if TYPE_CHECKING:
    from leonardo._http import HttpTransport


class CalculateAPICostRequest(WireModel):
    """Estimate request; ``service`` names the API service, e.g. ``IMAGE_GENERATION``."""

    service: str
    service_params: dict[str, Any] | None = None


class ServiceCost(WireModel):
    cost: int | None = None


class CalculateAPICostResponse(WireModel):
    calculate_production_api_service_cost: ServiceCost = Field(
        default_factory=ServiceCost, alias="calculateProductionApiServiceCost"
    )


class PricingAPI:
    def __init__(self, http: HttpTransport) -> None:
        self._http = http

    def calculate(self, req: CalculateAPICostRequest, *, timeout: float | None = None) -> CalculateAPICostResponse:
        return self._http.request("POST", "/pricing-calculator", req, CalculateAPICostResponse, timeout=timeout)
