"""
Application settings.

Resolves the environment (see config.env) once into frozen dataclasses that
are passed explicitly to the generation invoker, the RPC lookup and the API
server. Nothing downstream reads os.environ directly.
"""

from __future__ import annotations

from dataclasses import dataclass

from backend_txinsight.config import env


@dataclass(frozen=True)
class GenerationConfig:
    """Connection settings for the OpenAI-compatible text-generation backend."""

    api_key: str
    model: str
    base_url: str | None = None
    provider: str = env.PROVIDER_ELYN
    timeout_sec: float = env.DEFAULT_LLM_TIMEOUT_SEC

    def __repr__(self) -> str:
        return (
            f"GenerationConfig(provider={self.provider!r}, model={self.model!r}, "
            f"base_url={self.base_url!r}, api_key='***')"
        )


@dataclass(frozen=True)
class GenerationParams:
    """Sampling parameters for one output mode; fixed, never chosen per request."""

    temperature: float
    max_tokens: int
    presence_penalty: float


DIAGRAM_GENERATION_PARAMS = GenerationParams(temperature=0.1, max_tokens=1000, presence_penalty=0.1)
EXPLANATION_GENERATION_PARAMS = GenerationParams(temperature=0.2, max_tokens=800, presence_penalty=0.1)


@dataclass(frozen=True)
class Settings:
    generation: GenerationConfig
    solana_rpc_url: str
    solana_rpc_timeout_sec: float


def load_generation_config() -> GenerationConfig:
    """Build GenerationConfig from env; raises ConfigurationError when credentials are missing."""
    api_key, base_url = env.get_llm_credentials()
    return GenerationConfig(
        api_key=api_key,
        model=env.get_llm_model(),
        base_url=base_url,
        provider=env.get_api_provider(),
        timeout_sec=env.get_llm_timeout(),
    )


def get_settings() -> Settings:
    """Return the current application settings (re-read from env on every call)."""
    env.load_txinsight_env()
    return Settings(
        generation=load_generation_config(),
        solana_rpc_url=env.get_solana_rpc_url(),
        solana_rpc_timeout_sec=env.get_solana_rpc_timeout(),
    )
