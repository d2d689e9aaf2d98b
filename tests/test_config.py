"""
Tests for environment-driven configuration (provider credentials, RPC URL).
"""

from __future__ import annotations

import pytest

from backend_txinsight.config import env
from backend_txinsight.config.settings import get_settings, load_generation_config
from backend_txinsight.core.exceptions import ConfigurationError

_ENV_VARS = (
    "API_PROVIDER",
    "ELYN_API_KEY",
    "ELYN_API_ENDPOINT",
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "LLM_MODEL",
    "LLM_TIMEOUT_SEC",
    "SOLANA_RPC_URL",
    "HELIUS_API_KEY",
    "SOLANA_RPC_TIMEOUT_SEC",
    "API_HOST",
    "API_PORT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate from the developer's shell and .env file."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(env, "load_txinsight_env", lambda: None)


def test_elyn_default_provider(monkeypatch):
    monkeypatch.setenv("ELYN_API_KEY", "elyn-key")
    monkeypatch.setenv("ELYN_API_ENDPOINT", "https://elyn.example/v1")
    cfg = load_generation_config()
    assert cfg.provider == "ELYN"
    assert cfg.api_key == "elyn-key"
    assert cfg.base_url == "https://elyn.example/v1"
    assert cfg.model == "elyn/4o-mini"


def test_elyn_missing_credentials():
    with pytest.raises(ConfigurationError, match="ELYN"):
        load_generation_config()


def test_openai_provider(monkeypatch):
    monkeypatch.setenv("API_PROVIDER", "openai")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-1")
    monkeypatch.setenv("LLM_MODEL", "gpt-4.1-mini")
    monkeypatch.setenv("LLM_TIMEOUT_SEC", "12.5")
    cfg = load_generation_config()
    assert cfg.provider == "OPENAI"
    assert cfg.base_url is None
    assert cfg.model == "gpt-4.1-mini"
    assert cfg.timeout_sec == 12.5


def test_unknown_provider(monkeypatch):
    monkeypatch.setenv("API_PROVIDER", "other")
    with pytest.raises(ConfigurationError, match="Unsupported API_PROVIDER"):
        env.get_api_provider()


def test_invalid_timeout(monkeypatch):
    monkeypatch.setenv("LLM_TIMEOUT_SEC", "soon")
    with pytest.raises(ConfigurationError, match="LLM_TIMEOUT_SEC"):
        env.get_llm_timeout()


def test_rpc_url_resolution(monkeypatch):
    assert env.get_solana_rpc_url() == env.MAINNET_RPC_URL
    monkeypatch.setenv("HELIUS_API_KEY", "abc")
    assert env.get_solana_rpc_url() == "https://mainnet.helius-rpc.com/?api-key=abc"
    monkeypatch.setenv("SOLANA_RPC_URL", "https://my.rpc")
    assert env.get_solana_rpc_url() == "https://my.rpc"


def test_mask_rpc_url():
    assert env.mask_rpc_url("https://mainnet.helius-rpc.com/?api-key=abc") == "https://mainnet.helius-rpc.com/?api-key=***"


def test_get_settings(monkeypatch):
    monkeypatch.setenv("API_PROVIDER", "OPENAI")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-1")
    settings = get_settings()
    assert settings.solana_rpc_timeout_sec == env.DEFAULT_RPC_TIMEOUT_SEC
    assert settings.generation.model == "gpt-4o-mini"


def test_api_bind_address(monkeypatch):
    assert env.get_api_host() == "0.0.0.0"
    assert env.get_api_port() == 8000
    monkeypatch.setenv("API_HOST", "127.0.0.1")
    monkeypatch.setenv("API_PORT", "9000")
    assert (env.get_api_host(), env.get_api_port()) == ("127.0.0.1", 9000)


def test_invalid_api_port(monkeypatch):
    monkeypatch.setenv("API_PORT", "eighty")
    with pytest.raises(ConfigurationError, match="API_PORT"):
        env.get_api_port()
