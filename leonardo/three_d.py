"""3D model asset endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import Field

from leonardo.types import DeletedRecord, Timestamp, WireModel, escape_path, page_query

if TYPE_CHECKING:
    from leonardo._http import HttpTransport

logger = logging.getLogger(__name__)


class Upload3DModelRequest(WireModel):
    model_extension: str | None = None
    name: str | None = None


class ModelAssetUpload(WireModel):
    """Presigned target for the mesh; ``fields`` is a JSON-encoded string."""

    fields: str | None = Field(None, alias="modelFields")
    id: str | None = Field(None, alias="modelId")
    key: str | None = Field(None, alias="modelKey")
    url: str | None = Field(None, alias="modelUrl")


class Upload3DModelResponse(WireModel):
    upload_model_asset: ModelAssetUpload | None = None


class ModelAsset(WireModel):
    created_at: Timestamp | None = None
    description: str | None = None
    id: str | None = None
    mesh_url: str | None = None
    name: str | None = None
    updated_at: Timestamp | None = None
    user_id: str | None = None


class ModelAssetsResponse(WireModel):
    model_assets: list[ModelAsset] = Field(default_factory=list, alias="model_assets")


class ModelAssetResponse(WireModel):
    model_assets_by_pk: ModelAsset = Field(default_factory=ModelAsset, alias="model_assets_by_pk")


class DeleteModelAssetResponse(WireModel):
    delete_model_assets_by_pk: DeletedRecord = Field(default_factory=DeletedRecord, alias="delete_model_assets_by_pk")


class ThreeDAPI:
    def __init__(self, http: HttpTransport) -> None:
        self._http = http

    def upload(self, req: Upload3DModelRequest, *, timeout: float | None = None) -> Upload3DModelResponse:
        """Reserve a 3D model asset and get presigned upload details."""
        logger.info("uploading 3d model '%s'", req.name)
        return self._http.request("POST", "/models-3d/upload", req, Upload3DModelResponse, timeout=timeout)

    def by_user(
        self, user_id: str, limit: int = 0, offset: int = 0, *, timeout: float | None = None
    ) -> ModelAssetsResponse:
        path = f"/models-3d/user/{escape_path(user_id)}{page_query(limit, offset)}"
        return self._http.request("GET", path, response_model=ModelAssetsResponse, timeout=timeout)

    def get(self, asset_id: str, *, timeout: float | None = None) -> ModelAssetResponse:
        path = f"/models-3d/{escape_path(asset_id)}"
        return self._http.request("GET", path, response_model=ModelAssetResponse, timeout=timeout)

    def delete(self, asset_id: str, *, timeout: float | None = None) -> DeleteModelAssetResponse:
        path = f"/models-3d/{escape_path(asset_id)}"
        return self._http.request("DELETE", path, response_model=DeleteModelAssetResponse, timeout=timeout)
