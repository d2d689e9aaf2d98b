"""
Text-generation backend boundary.

TextGenerator is the only capability the pipeline needs: a system prompt and
user content in, completion text out. OpenAIGenerationInvoker implements it
on any OpenAI-compatible chat completions endpoint (ELYN, OpenAI, local
servers), configured explicitly through GenerationConfig.
"""

from __future__ import annotations

import time
from typing import Any, Protocol

from openai import OpenAI, OpenAIError

from backend_txinsight.config.settings import GenerationConfig, GenerationParams
from backend_txinsight.core.exceptions import GenerationFailed
from backend_txinsight.txinsight_logging import get_logger

logger = get_logger(__name__)

INVALID_RESPONSE_MESSAGE = "Invalid response from AI model"


class TextGenerator(Protocol):
    def generate(self, system_prompt: str, user_content: str, params: GenerationParams) -> str:
        """Return completion text; raise GenerationFailed when no usable content is produced."""
        ...


def _completion_text(response: Any) -> str | None:
    choices = getattr(response, "choices", None) or []
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if not isinstance(content, str):
        return None
    return content


class OpenAIGenerationInvoker:
    """
    Chat-completions invoker for one configured backend.

    One request per call, non-streaming. No retries: a failed call surfaces as
    GenerationFailed and the caller may retry the whole request.
    """

    def __init__(self, config: GenerationConfig, *, client: OpenAI | None = None) -> None:
        """
        Args:
            config: Credentials, endpoint and model for the backend.
            client: Prebuilt OpenAI client (tests); built from config when omitted.
        """
        self._config = config
        self._client = client or OpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout_sec,
        )

    @property
    def model(self) -> str:
        return self._config.model

    def generate(self, system_prompt: str, user_content: str, params: GenerationParams) -> str:
        started = time.monotonic()
        try:
            response = self._client.chat.completions.create(
                model=self._config.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_content},
                ],
                temperature=params.temperature,
                max_tokens=params.max_tokens,
                presence_penalty=params.presence_penalty,
            )
        except OpenAIError as e:
            logger.warning(
                "generation_request_failed",
                model=self._config.model,
                provider=self._config.provider,
                error=str(e),
            )
            raise GenerationFailed(f"Generation backend error: {e}") from e

        text = _completion_text(response)
        if not text or not text.strip():
            logger.warning("generation_empty_response", model=self._config.model)
            raise GenerationFailed(INVALID_RESPONSE_MESSAGE)

        logger.info(
            "generation_completed",
            model=self._config.model,
            chars=len(text),
            elapsed_ms=round((time.monotonic() - started) * 1000, 1),
        )
        return text
