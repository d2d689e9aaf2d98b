"""
Prompt template types shared by the diagram and explanation prompt tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from backend_txinsight.classification import Category
from backend_txinsight.config.settings import (
    DIAGRAM_GENERATION_PARAMS,
    EXPLANATION_GENERATION_PARAMS,
    GenerationParams,
)


class OutputMode(str, Enum):
    EXPLANATION = "explanation"
    DIAGRAM = "diagram"


GENERATION_PARAMS: dict[OutputMode, GenerationParams] = {
    OutputMode.DIAGRAM: DIAGRAM_GENERATION_PARAMS,
    OutputMode.EXPLANATION: EXPLANATION_GENERATION_PARAMS,
}


@dataclass(frozen=True)
class PromptTemplate:
    """
    Static instruction pair for one generation call.

    category is None for the per-mode default template.
    """

    mode: OutputMode
    category: Category | None
    system: str
    user_prefix: str

    @property
    def params(self) -> GenerationParams:
        return GENERATION_PARAMS[self.mode]

    def user_content(self, serialized_transaction: str) -> str:
        """User message: wrapper text followed by the serialized transaction."""
        return f"{self.user_prefix}{serialized_transaction}"
