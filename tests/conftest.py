"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import respx

from leonardo import LeonardoClient

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

BASE_URL = "https://api.test"
API_KEY = "test-api-key"


def error_body(code: str, message: str, path: str = "") -> dict[str, str]:
    """Error payload as the service sends it (message under ``error``)."""
    return {"code": code, "error": message, "path": path}


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config file at a temp dir and clear credentials from the env."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr("leonardo.config.CONFIG_DIR", config_dir)
    monkeypatch.setattr("leonardo.config.CONFIG_FILE", config_dir / "config.toml")
    monkeypatch.delenv("LEONARDO_API_KEY", raising=False)
    monkeypatch.delenv("LEONARDO_BASE_URL", raising=False)
    return config_dir


@pytest.fixture()
def mock_api() -> Iterator[respx.MockRouter]:
    """Activate respx mock for the fake API base URL."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as rsps:
        yield rsps


@pytest.fixture()
def client(mock_api: respx.MockRouter) -> Iterator[LeonardoClient]:  # noqa: ARG001
    """LeonardoClient wired to the mocked transport."""
    c = LeonardoClient(api_key=API_KEY, base_url=BASE_URL)
    yield c
    c.close()
