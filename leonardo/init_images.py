"""Init image endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from leonardo.types import DeletedRecord, Timestamp, WireModel, escape_path

if TYPE_CHECKING:
    from leonardo._http import HttpTransport


class UploadInitImageRequest(WireModel):
    image_file: str = Field(alias="image_file")


class InitImageUpload(WireModel):
    """Presigned target for an init image; ``fields`` is a JSON-encoded string."""

    fields: str | None = None
    id: str | None = None
    key: str | None = None
    url: str | None = None


class UploadInitImageResponse(WireModel):
    upload_init_image_id: str | None = None
    message: str | None = None
    upload_init_image: InitImageUpload | None = None


class InitImage(WireModel):
    created_at: Timestamp | None = None
    id: str | None = None
    url: str | None = None


class GetInitImageResponse(WireModel):
    init_images_by_pk: InitImage = Field(default_factory=InitImage, alias="init_images_by_pk")


class DeleteInitImageResponse(WireModel):
    delete_init_images_by_pk: DeletedRecord = Field(default_factory=DeletedRecord, alias="delete_init_images_by_pk")


class UploadCanvasImagesRequest(WireModel):
    init_extension: str
    mask_extension: str


class CanvasImagesUpload(WireModel):
    init_fields: str | None = None
    init_image_id: str | None = None
    init_key: str | None = None
    init_url: str | None = None
    mask_fields: str | None = None
    mask_image_id: str | None = None
    mask_key: str | None = None
    mask_url: str | None = None


class UploadCanvasImagesResponse(WireModel):
    upload_canvas_init_image: CanvasImagesUpload | None = None


class InitImagesAPI:
    def __init__(self, http: HttpTransport) -> None:
        self._http = http

    def upload(self, req: UploadInitImageRequest, *, timeout: float | None = None) -> UploadInitImageResponse:
        """Reserve an init image and get presigned upload details."""
        return self._http.request("POST", "/init-image", req, UploadInitImageResponse, timeout=timeout)

    def get(self, image_id: str, *, timeout: float | None = None) -> GetInitImageResponse:
        path = f"/init-image/{escape_path(image_id)}"
        return self._http.request("GET", path, response_model=GetInitImageResponse, timeout=timeout)

    def delete(self, image_id: str, *, timeout: float | None = None) -> DeleteInitImageResponse:
        path = f"/init-image/{escape_path(image_id)}"
        return self._http.request("DELETE", path, response_model=DeleteInitImageResponse, timeout=timeout)

    def upload_canvas(self, req: UploadCanvasImagesRequest, *, timeout: float | None = None) -> UploadCanvasImagesResponse:
        """Reserve a canvas init + mask image pair and get presigned upload details."""
        return self._http.request("POST", "/canvas-init-image", req, UploadCanvasImagesResponse, timeout=timeout)
