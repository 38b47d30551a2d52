"""HTTP transport layer wrapping httpx."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Mapping
from typing import Any, TypeVar, overload

import httpx
from pydantic import BaseModel, ValidationError

from leonardo.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from leonardo.errors import APIError, DecodingError, EncodingError, HTTPError, TransportError
from leonardo.types import APIErrorResponse, WireModel

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})
JSON_CONTENT_TYPE = "application/json"


def encode_body(body: WireModel | Mapping[str, Any]) -> bytes:
    """Serialize a payload to UTF-8 JSON using wire field names."""
    try:
        payload = body.to_body() if isinstance(body, WireModel) else dict(body)
        return json.dumps(payload).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodingError(f"cannot encode {type(body).__name__}: {e}") from e


class HttpTransport:
    """Builds authenticated requests and decodes responses.

    Configuration is fixed at construction, so one instance can be shared
    between threads.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = httpx.Client(timeout=timeout, transport=transport)
        logger.debug("transport ready: %s", self._base_url)

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_request(self, method: str, path: str, body: WireModel | Mapping[str, Any] | None = None) -> httpx.Request:
        """Attach auth and, when a body is given, the JSON payload. No I/O."""
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"unsupported method: {method}")

        headers = {"Authorization": f"Bearer {self._api_key}"}
        content = None
        if body is not None:
            content = encode_body(body)
            headers["Content-Type"] = JSON_CONTENT_TYPE

        return self._client.build_request(method, self._base_url + path, headers=headers, content=content)

    @overload
    def send(self, request: httpx.Request, response_model: type[M], *, timeout: float | None = None) -> M: ...

    @overload
    def send(self, request: httpx.Request, response_model: None = None, *, timeout: float | None = None) -> None: ...

    def send(
        self,
        request: httpx.Request,
        response_model: type[M] | None = None,
        *,
        timeout: float | None = None,
    ) -> M | None:
        """Execute one round trip and decode the result or raise a classified error.

        ``timeout`` (seconds) bounds the whole call, body read included, and
        overrides the client timeout for this call only.
        """
        if timeout is not None:
            request.extensions["timeout"] = httpx.Timeout(timeout).as_dict()
        deadline = time.monotonic() + (self._timeout if timeout is None else timeout)

        label = f"{request.method} {request.url.raw_path.decode('ascii')}"
        logger.debug("%s", label)
        try:
            response = self._client.send(request, stream=True)
        except httpx.TimeoutException as e:
            logger.error("%s timed out: %s", label, e)
            raise TransportError(f"{label} timed out", timed_out=True) from e
        except httpx.RequestError as e:
            logger.error("%s connection failed: %s", label, e)
            raise TransportError(f"{label} connection failed: {e}") from e

        try:
            return self._decode(label, response, response_model, deadline)
        finally:
            response.close()

    @staticmethod
    def _read(label: str, response: httpx.Response, deadline: float) -> bytes:
        chunks: list[bytes] = []
        try:
            for chunk in response.iter_bytes():
                chunks.append(chunk)
                if time.monotonic() > deadline:
                    logger.error("%s timed out reading body", label)
                    raise TransportError(f"{label} timed out", timed_out=True)
        except httpx.TimeoutException as e:
            logger.error("%s timed out reading body: %s", label, e)
            raise TransportError(f"{label} timed out", timed_out=True) from e
        except httpx.RequestError as e:
            logger.error("%s failed reading body: %s", label, e)
            raise TransportError(f"{label} failed reading body: {e}") from e
        return b"".join(chunks)

    def _decode(
        self, label: str, response: httpx.Response, response_model: type[M] | None, deadline: float
    ) -> M | None:
        if response.is_success and response_model is None:
            return None

        body = self._read(label, response, deadline)
        if not response.is_success:
            raise self._error(label, response.status_code, body)

        try:
            return response_model.model_validate_json(body)  # type: ignore[union-attr]
        except ValidationError as e:
            name = response_model.__name__  # type: ignore[union-attr]
            logger.error("%s → %d: unexpected body: %s", label, response.status_code, body[:200])
            raise DecodingError(f"{label}: response does not match {name}: {e}") from e

    @staticmethod
    def _error(label: str, status: int, body: bytes) -> HTTPError:
        logger.error("%s → %d: %s", label, status, body[:200])
        try:
            err = APIErrorResponse.model_validate_json(body)
        except ValidationError:
            return HTTPError(status)
        return APIError(err.code, err.message, status, err.path)

    def request(
        self,
        method: str,
        path: str,
        body: WireModel | Mapping[str, Any] | None = None,
        response_model: type[M] | None = None,
        *,
        timeout: float | None = None,
    ) -> Any:
        """Build and send in one step."""
        return self.send(self.build_request(method, path, body), response_model, timeout=timeout)

    def close(self) -> None:
        self._client.close()
        logger.debug("transport closed")
