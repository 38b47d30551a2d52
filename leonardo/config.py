"""Configuration and constants for the Leonardo.ai client."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any

# ============================================================================
# XDG Base Directory Configuration
# ============================================================================

# Config: ~/.config/leonardo/config.toml
CONFIG_DIR = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "leonardo"
CONFIG_FILE = CONFIG_DIR / "config.toml"

DEFAULT_BASE_URL = "https://cloud.leonardo.ai/api/rest/v1"
DEFAULT_TIMEOUT = 30.0

API_KEY_ENV = "LEONARDO_API_KEY"
BASE_URL_ENV = "LEONARDO_BASE_URL"


# ============================================================================
# Config Functions
# ============================================================================


def load_config() -> dict[str, Any]:
    """Load configuration from TOML config file."""
    if CONFIG_FILE.exists():
        with CONFIG_FILE.open("rb") as f:
            return tomllib.load(f)
    return {}


def _toml_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        # JSON string escapes are a subset of TOML basic-string escapes
        return json.dumps(value, ensure_ascii=False).replace("\x7f", "\\u007f")
    return str(value)


def save_config(config: dict[str, Any]) -> None:
    """Save configuration to TOML config file."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    lines: list[str] = []
    for key, value in config.items():
        if isinstance(value, dict):
            lines.append(f"[{key}]")
            for k, v in value.items():
                lines.append(f"{k} = {_toml_value(v)}")
            lines.append("")
        else:
            lines.append(f"{key} = {_toml_value(value)}")

    CONFIG_FILE.write_text("\n".join(lines) + "\n", encoding="utf-8")


def _api_section() -> dict[str, Any]:
    section = load_config().get("api", {})
    return section if isinstance(section, dict) else {}


def load_api_key() -> str | None:
    """Load API key from LEONARDO_API_KEY env var or the config file."""
    env_key = os.environ.get(API_KEY_ENV)
    if env_key:
        return env_key

    key = _api_section().get("key")
    if key:
        return str(key)
    return None


def load_base_url() -> str:
    """Resolve the API base URL (env var, then config file, then default)."""
    env_url = os.environ.get(BASE_URL_ENV)
    if env_url:
        return env_url

    url = _api_section().get("base_url")
    if url:
        return str(url)
    return DEFAULT_BASE_URL
