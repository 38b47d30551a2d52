"""Custom model training and platform model endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import Field

from leonardo.types import DeletedRecord, Lora, Timestamp, WireModel, escape_path, page_query

if TYPE_CHECKING:
    from leonardo._http import HttpTransport

logger = logging.getLogger(__name__)


class TrainCustomModelRequest(WireModel):
    name: str
    dataset_id: str
    instance_prompt: str = Field(alias="instance_prompt")
    description: str | None = None
    model_type: str | None = None
    nsfw: bool | None = None
    resolution: int | None = None
    sd_version: str | None = Field(None, alias="sd_Version")
    strength: str | None = None


class TrainingJob(WireModel):
    api_credit_cost: int | None = None
    custom_model_id: str | None = None


class TrainCustomModelResponse(WireModel):
    sd_training_job: TrainingJob = Field(default_factory=TrainingJob)


class CustomModel(WireModel):
    created_at: Timestamp | None = None
    description: str | None = None
    id: str | None = None
    instance_prompt: str | None = None
    model_height: int | None = None
    model_width: int | None = None
    name: str | None = None
    public: bool | None = None
    sd_version: str | None = None
    status: str | None = None
    type: str | None = None
    updated_at: Timestamp | None = None


class GetCustomModelResponse(WireModel):
    custom_models_by_pk: CustomModel = Field(default_factory=CustomModel, alias="custom_models_by_pk")


class DeleteCustomModelResponse(WireModel):
    delete_custom_models_by_pk: DeletedRecord = Field(default_factory=DeletedRecord, alias="delete_custom_models_by_pk")


class UpdateCustomModelRequest(WireModel):
    name: str | None = None
    description: str | None = None


class UpdatedCustomModel(WireModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None


class UpdateCustomModelResponse(WireModel):
    updated_custom_models_by_pk: UpdatedCustomModel = Field(
        default_factory=UpdatedCustomModel, alias="updated_custom_models_by_pk"
    )


class ListPlatformModelsResponse(WireModel):
    custom_models: list[Lora] = Field(default_factory=list, alias="custom_models")


class CustomModelsAPI:
    def __init__(self, http: HttpTransport) -> None:
        self._http = http

    def train(self, req: TrainCustomModelRequest, *, timeout: float | None = None) -> TrainCustomModelResponse:
        """Start training a custom model from a dataset."""
        logger.info("training model '%s' from dataset %s", req.name, req.dataset_id)
        return self._http.request("POST", "/models", req, TrainCustomModelResponse, timeout=timeout)

    def get(self, model_id: str, *, timeout: float | None = None) -> GetCustomModelResponse:
        path = f"/models/{escape_path(model_id)}"
        return self._http.request("GET", path, response_model=GetCustomModelResponse, timeout=timeout)

    def update(
        self, model_id: str, req: UpdateCustomModelRequest, *, timeout: float | None = None
    ) -> UpdateCustomModelResponse:
        path = f"/models/{escape_path(model_id)}"
        return self._http.request("PUT", path, req, UpdateCustomModelResponse, timeout=timeout)

    def delete(self, model_id: str, *, timeout: float | None = None) -> DeleteCustomModelResponse:
        path = f"/models/{escape_path(model_id)}"
        return self._http.request("DELETE", path, response_model=DeleteCustomModelResponse, timeout=timeout)

    def list_platform(
        self, limit: int = 0, offset: int = 0, *, timeout: float | None = None
    ) -> ListPlatformModelsResponse:
        """Platform (Leonardo-provided) models."""
        path = f"/platformModels{page_query(limit, offset)}"
        return self._http.request("GET", path, response_model=ListPlatformModelsResponse, timeout=timeout)
