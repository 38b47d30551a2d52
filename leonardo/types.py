"""Shared wire types: base model, timestamp codec, enums and path helpers."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any
from urllib.parse import quote, urlencode

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator
from pydantic.alias_generators import to_camel

# ============================================================================
# Timestamp codec
# ============================================================================

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"
_TIMESTAMP_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}\.[0-9]{3}")


def parse_timestamp(value: str) -> datetime:
    """Parse ``YYYY-MM-DDTHH:MM:SS.mmm`` (no zone), tolerating surrounding quotes."""
    text = value.strip('"')
    if not _TIMESTAMP_RE.fullmatch(text):
        raise ValueError(f"invalid timestamp: {value!r}")
    return datetime.strptime(text, TIMESTAMP_FORMAT)


def format_timestamp(value: datetime) -> str:
    """Format with exactly three fractional digits and no zone suffix.

    Aware values are converted to UTC first; naive values are written as-is.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}"


def _validate_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return parse_timestamp(value)
    raise ValueError(f"invalid timestamp: {value!r}")


Timestamp = Annotated[
    datetime,
    PlainValidator(_validate_timestamp),
    PlainSerializer(format_timestamp, return_type=str),
]


# ============================================================================
# Base models
# ============================================================================


class WireModel(BaseModel):
    """Base for request and response payloads.

    Python attributes are snake_case; wire keys are camelCase unless a field
    declares its own alias. Unknown response keys are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        protected_namespaces=(),
    )

    def to_body(self) -> dict[str, Any]:
        """JSON-ready dict using wire keys, with unset optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class APIErrorResponse(WireModel):
    """Error body returned with non-2xx responses."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    code: str = ""
    message: str = Field("", alias="error")
    path: str = ""


class DeletedRecord(WireModel):
    id: str | None = None


class CreditJob(WireModel):
    """Job handle returned by endpoints that queue work and bill credits."""

    id: str | None = None
    api_credit_cost: int | None = None


VariationJob = CreditJob


class Lora(WireModel):
    """An element (LoRA) or platform model listing entry."""

    ak_uuid: str | None = Field(None, alias="akUUID")
    id: str | None = None
    base_model: str | None = None
    creator_name: str | None = None
    description: str | None = None
    name: str | None = None
    url_image: str | None = None
    weight_default: int | None = None
    weight_max: int | None = None
    weight_min: int | None = None


class LCMGenerationJob(WireModel):
    api_credit_cost: int | None = None
    image_data_url: list[str] | None = None
    request_timestamp: str | None = None


# ============================================================================
# Enums
# ============================================================================


class PresetStyle(str, Enum):
    """Generation preset styles.

    ``LEONARDO`` requires alchemy off; the photography-oriented styles from
    ``STOCK_PHOTO`` onward require PhotoReal; the rest require alchemy.
    """

    NONE = "NONE"
    LEONARDO = "LEONARDO"
    ANIME = "ANIME"
    CREATIVE = "CREATIVE"
    DYNAMIC = "DYNAMIC"
    ENVIRONMENT = "ENVIRONMENT"
    GENERAL = "GENERAL"
    ILLUSTRATION = "ILLUSTRATION"
    PHOTOGRAPHY = "PHOTOGRAPHY"
    RAYTRACED = "RAYTRACED"
    RENDER_3D = "RENDER_3D"
    SKETCH_BW = "SKETCH_BW"
    SKETCH_COLOR = "SKETCH_COLOR"
    STOCK_PHOTO = "STOCK_PHOTO"
    VIBRANT = "VIBRANT"
    UNPROCESSED = "UNPROCESSED"
    BOKEH = "BOKEH"
    CINEMATIC = "CINEMATIC"
    CINEMATIC_CLOSEUP = "CINEMATIC_CLOSEUP"
    FASHION = "FASHION"
    FILM = "FILM"
    FOOD = "FOOD"
    HDR = "HDR"
    LONG_EXPOSURE = "LONG_EXPOSURE"
    MACRO = "MACRO"
    MINIMALISTIC = "MINIMALISTIC"
    MONOCHROME = "MONOCHROME"
    MOODY = "MOODY"
    NEUTRAL = "NEUTRAL"
    PORTRAIT = "PORTRAIT"
    RETRO = "RETRO"


class Scheduler(str, Enum):
    KLMS = "KLMS"
    EULER_ANCESTRAL_DISCRETE = "EULER_ANCESTRAL_DISCRETE"
    EULER_DISCRETE = "EULER_DISCRETE"
    DDIM = "DDIM"
    DPM_SOLVER = "DPM_SOLVER"
    PNDM = "PNDM"
    LEONARDO = "LEONARDO"


class SDVersion(str, Enum):
    V1_5 = "v1_5"
    V2 = "v2"
    V3 = "v3"
    SDXL_0_8 = "SDXL_0_8"
    SDXL_0_9 = "SDXL_0_9"
    SDXL_1_0 = "SDXL_1_0"
    SDXL_LIGHTNING = "SDXL_LIGHTNING"


class CanvasRequestType(str, Enum):
    INPAINT = "INPAINT"
    OUTPAINT = "OUTPAINT"
    SKETCH2IMG = "SKETCH2IMG"
    IMG2IMG = "IMG2IMG"


class GenerationStatus(str, Enum):
    COMPLETE = "COMPLETE"
    FAILED = "FAILED"
    PENDING = "PENDING"


class TransformType(str, Enum):
    OUTPAINT = "OUTPAINT"
    INPAINT = "INPAINT"
    UPSCALE = "UPSCALE"
    UNZOOM = "UNZOOM"
    NOBG = "NOBG"


# ============================================================================
# Path helpers
# ============================================================================


def escape_path(segment: str) -> str:
    """Percent-escape an identifier for use as a single path segment."""
    return quote(segment, safe="")


def page_query(limit: int = 0, offset: int = 0) -> str:
    """Build ``?limit=..&offset=..``; values of zero or less are left out."""
    params = {}
    if limit > 0:
        params["limit"] = limit
    if offset > 0:
        params["offset"] = offset
    if not params:
        return ""
    return "?" + urlencode(params)
