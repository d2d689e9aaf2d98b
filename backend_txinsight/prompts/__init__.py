"""
Prompt templates for explanation and diagram generation, keyed by category.
"""

from backend_txinsight.prompts.selector import (
    DEFAULT_TEMPLATES,
    PROMPT_TABLE,
    iter_prompt_templates,
    select_prompt,
)
from backend_txinsight.prompts.templates import GENERATION_PARAMS, OutputMode, PromptTemplate

__all__ = [
    "DEFAULT_TEMPLATES",
    "GENERATION_PARAMS",
    "OutputMode",
    "PROMPT_TABLE",
    "PromptTemplate",
    "iter_prompt_templates",
    "select_prompt",
]
