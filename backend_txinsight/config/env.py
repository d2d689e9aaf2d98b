"""
Environment variable loading and validation for TxInsight.

- API_PROVIDER: ELYN | OPENAI (default: ELYN)
- ELYN_API_KEY / ELYN_API_ENDPOINT: required when API_PROVIDER=ELYN
- OPENAI_API_KEY (required) / OPENAI_BASE_URL (optional): when API_PROVIDER=OPENAI
- LLM_MODEL: overrides the provider's default model
- LLM_TIMEOUT_SEC: HTTP timeout for generation calls (default 60)
- SOLANA_RPC_URL: RPC endpoint; HELIUS_API_KEY is the fallback; mainnet-beta otherwise
- SOLANA_RPC_TIMEOUT_SEC: HTTP timeout for getTransaction (default 30)
- API_HOST / API_PORT: bind address for main.py (default 0.0.0.0:8000)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from backend_txinsight.core.exceptions import ConfigurationError

# Project root: config is backend_txinsight/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_ROOT = _CONFIG_DIR.parent.parent
_ENV_PATH = _ROOT / ".env"

PROVIDER_ELYN = "ELYN"
PROVIDER_OPENAI = "OPENAI"
SUPPORTED_PROVIDERS = (PROVIDER_ELYN, PROVIDER_OPENAI)

DEFAULT_MODELS = {
    PROVIDER_ELYN: "elyn/4o-mini",
    PROVIDER_OPENAI: "gpt-4o-mini",
}

DEFAULT_LLM_TIMEOUT_SEC = 60.0
DEFAULT_RPC_TIMEOUT_SEC = 30.0

MAINNET_RPC_URL = "https://api.mainnet-beta.solana.com"
HELIUS_MAINNET_URL_TEMPLATE = "https://mainnet.helius-rpc.com/?api-key={key}"

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000


def load_txinsight_env() -> None:
    """Load .env from project root. Safe to call multiple times; real env vars win."""
    load_dotenv(_ENV_PATH, override=False)


def _env(name: str) -> str:
    return (os.getenv(name) or "").strip()


def _env_float(name: str, default: float) -> float:
    raw = _env(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value


def get_api_provider() -> str:
    load_txinsight_env()
    provider = (_env("API_PROVIDER") or PROVIDER_ELYN).upper()
    if provider not in SUPPORTED_PROVIDERS:
        raise ConfigurationError(
            f"Unsupported API_PROVIDER {provider!r}; expected one of {', '.join(SUPPORTED_PROVIDERS)}"
        )
    return provider


def get_llm_credentials() -> tuple[str, str | None]:
    """
    Return (api_key, base_url) for the configured provider.

    ELYN requires both key and endpoint; OPENAI requires the key only
    (base_url None means the SDK default).
    """
    provider = get_api_provider()
    if provider == PROVIDER_ELYN:
        key = _env("ELYN_API_KEY")
        endpoint = _env("ELYN_API_ENDPOINT")
        if not key or not endpoint:
            raise ConfigurationError("Missing required environment variables for ELYN API")
        return key, endpoint
    key = _env("OPENAI_API_KEY")
    if not key:
        raise ConfigurationError("OPENAI_API_KEY not set")
    return key, _env("OPENAI_BASE_URL") or None


def get_llm_model() -> str:
    load_txinsight_env()
    return _env("LLM_MODEL") or DEFAULT_MODELS[get_api_provider()]


def get_llm_timeout() -> float:
    load_txinsight_env()
    return _env_float("LLM_TIMEOUT_SEC", DEFAULT_LLM_TIMEOUT_SEC)


def get_solana_rpc_url() -> str:
    """
    Resolve Solana RPC URL from env.
    Order: SOLANA_RPC_URL > HELIUS_API_KEY > public mainnet-beta.
    """
    load_txinsight_env()
    url = _env("SOLANA_RPC_URL")
    if url:
        return url
    key = _env("HELIUS_API_KEY")
    if key:
        return HELIUS_MAINNET_URL_TEMPLATE.format(key=key)
    return MAINNET_RPC_URL


def get_solana_rpc_timeout() -> float:
    load_txinsight_env()
    return _env_float("SOLANA_RPC_TIMEOUT_SEC", DEFAULT_RPC_TIMEOUT_SEC)


def mask_rpc_url(url: str) -> str:
    """Hide the api-key query value so the URL can be logged."""
    if "api-key=" in url:
        return url.split("api-key=")[0] + "api-key=***"
    return url


def get_api_host() -> str:
    load_txinsight_env()
    return _env("API_HOST") or DEFAULT_API_HOST


def get_api_port() -> int:
    load_txinsight_env()
    raw = _env("API_PORT")
    if not raw:
        return DEFAULT_API_PORT
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"API_PORT must be an integer, got {raw!r}") from e
