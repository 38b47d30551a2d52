"""Tests for config loading and client construction."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from leonardo import LeonardoClient, config
from leonardo.config import DEFAULT_BASE_URL, load_api_key, load_base_url, load_config, save_config

if TYPE_CHECKING:
    from pathlib import Path


class TestConfigFile:
    def test_missing_file_is_empty(self):
        assert load_config() == {}

    def test_save_then_load(self, isolated_config: Path):
        save_config({"api": {"key": "file-key", "base_url": "https://file.test"}})
        assert (isolated_config / "config.toml").exists()
        assert load_config() == {"api": {"key": "file-key", "base_url": "https://file.test"}}

    @pytest.mark.parametrize("key", ['ab"cd', "back\\slash", "tab\there", "ünïcode-ключ", "multi\nline"])
    def test_special_characters_round_trip(self, key: str):
        save_config({"api": {"key": key, "base_url": "https://file.test"}})
        assert load_config()["api"] == {"key": key, "base_url": "https://file.test"}
        assert load_api_key() == key

    def test_non_string_values(self):
        save_config({"api": {"verify": True, "retries": 3}, "debug": False})
        assert load_config() == {"api": {"verify": True, "retries": 3}, "debug": False}


class TestApiKey:
    def test_none_by_default(self):
        assert load_api_key() is None

    def test_from_file(self):
        save_config({"api": {"key": "file-key"}})
        assert load_api_key() == "file-key"

    def test_env_wins(self, monkeypatch: pytest.MonkeyPatch):
        save_config({"api": {"key": "file-key"}})
        monkeypatch.setenv("LEONARDO_API_KEY", "env-key")
        assert load_api_key() == "env-key"


class TestBaseUrl:
    def test_default(self):
        assert load_base_url() == DEFAULT_BASE_URL == "https://cloud.leonardo.ai/api/rest/v1"

    def test_from_file(self):
        save_config({"api": {"base_url": "https://file.test"}})
        assert load_base_url() == "https://file.test"

    def test_env_wins(self, monkeypatch: pytest.MonkeyPatch):
        save_config({"api": {"base_url": "https://file.test"}})
        monkeypatch.setenv("LEONARDO_BASE_URL", "https://env.test")
        assert load_base_url() == "https://env.test"

    def test_non_table_api_section_ignored(self):
        config.CONFIG_DIR.mkdir(parents=True)
        config.CONFIG_FILE.write_text('api = "oops"\n')
        assert load_base_url() == DEFAULT_BASE_URL


class TestClientConstruction:
    def test_missing_key(self):
        with pytest.raises(ValueError, match="API key"):
            LeonardoClient()

    def test_key_and_url_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LEONARDO_API_KEY", "env-key")
        monkeypatch.setenv("LEONARDO_BASE_URL", "https://env.test/")
        with LeonardoClient() as c:
            assert c.http.base_url == "https://env.test"
            req = c.http.build_request("GET", "/me")
        assert req.headers["Authorization"] == "Bearer env-key"

    def test_explicit_args_win(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LEONARDO_API_KEY", "env-key")
        with LeonardoClient(api_key="arg-key", base_url="https://arg.test") as c:
            req = c.http.build_request("GET", "/me")
        assert str(req.url) == "https://arg.test/me"
        assert req.headers["Authorization"] == "Bearer arg-key"

    def test_default_base_url(self):
        with LeonardoClient(api_key="k") as c:
            assert c.http.base_url == DEFAULT_BASE_URL
