"""Dataset endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import Field

from leonardo.types import DeletedRecord, Timestamp, WireModel, escape_path

if TYPE_CHECKING:
    from leonardo._http import HttpTransport

logger = logging.getLogger(__name__)


class CreateDatasetRequest(WireModel):
    name: str
    description: str | None = None


class CreatedDataset(WireModel):
    id: str | None = None


class CreateDatasetResponse(WireModel):
    insert_datasets_one: CreatedDataset = Field(default_factory=CreatedDataset, alias="insert_datasets_one")


class DatasetImage(WireModel):
    created_at: Timestamp | None = None
    id: str | None = None
    url: str | None = None


class Dataset(WireModel):
    created_at: Timestamp | None = None
    dataset_images: list[DatasetImage] = Field(default_factory=list, alias="dataset_images")
    description: str | None = None
    id: str | None = None
    name: str | None = None
    updated_at: Timestamp | None = None


class GetDatasetResponse(WireModel):
    datasets_by_pk: Dataset = Field(default_factory=Dataset, alias="datasets_by_pk")


class DeleteDatasetResponse(WireModel):
    delete_datasets_by_pk: DeletedRecord = Field(default_factory=DeletedRecord, alias="delete_datasets_by_pk")


class UploadDatasetImageRequest(WireModel):
    extension: str


class PresignedUpload(WireModel):
    """Presigned S3 target: POST ``fields`` plus the file to ``url``."""

    fields: dict[str, str] | None = None
    id: str | None = None
    key: str | None = None
    url: str | None = None


class UploadDatasetImageResponse(WireModel):
    upload_dataset_image: PresignedUpload | None = None


class UploadGeneratedImageRequest(WireModel):
    generated_image_id: str


class UploadGeneratedImageResponse(WireModel):
    upload_dataset_image_from_gen: DeletedRecord | None = None


class DatasetsAPI:
    def __init__(self, http: HttpTransport) -> None:
        self._http = http

    def create(self, req: CreateDatasetRequest, *, timeout: float | None = None) -> CreateDatasetResponse:
        """Create a new dataset."""
        logger.info("creating dataset '%s'", req.name)
        return self._http.request("POST", "/datasets", req, CreateDatasetResponse, timeout=timeout)

    def get(self, dataset_id: str, *, timeout: float | None = None) -> GetDatasetResponse:
        path = f"/datasets/{escape_path(dataset_id)}"
        return self._http.request("GET", path, response_model=GetDatasetResponse, timeout=timeout)

    def delete(self, dataset_id: str, *, timeout: float | None = None) -> DeleteDatasetResponse:
        path = f"/datasets/{escape_path(dataset_id)}"
        return self._http.request("DELETE", path, response_model=DeleteDatasetResponse, timeout=timeout)

    def upload_image(
        self, dataset_id: str, req: UploadDatasetImageRequest, *, timeout: float | None = None
    ) -> UploadDatasetImageResponse:
        """Get presigned upload details for a new dataset image."""
        path = f"/datasets/{escape_path(dataset_id)}/upload"
        return self._http.request("POST", path, req, UploadDatasetImageResponse, timeout=timeout)

    def upload_generated_image(
        self, dataset_id: str, req: UploadGeneratedImageRequest, *, timeout: float | None = None
    ) -> UploadGeneratedImageResponse:
        """Copy a previously generated image into a dataset."""
        path = f"/datasets/{escape_path(dataset_id)}/upload/gen"
        return self._http.request("POST", path, req, UploadGeneratedImageResponse, timeout=timeout)
