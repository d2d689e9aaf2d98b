"""
Prompt selection: (Category, OutputMode) -> PromptTemplate.

Pure lookup over a static table. Categories without a dedicated entry
(GENERIC, anything added later) use the default template of their mode.
"""

from __future__ import annotations

from collections.abc import Iterator

from backend_txinsight.classification import Category
from backend_txinsight.prompts.diagram import DEFAULT_DIAGRAM_TEMPLATE, DIAGRAM_TEMPLATES
from backend_txinsight.prompts.explanation import (
    DEFAULT_EXPLANATION_TEMPLATE,
    EXPLANATION_TEMPLATES,
)
from backend_txinsight.prompts.templates import OutputMode, PromptTemplate

PROMPT_TABLE: dict[tuple[Category, OutputMode], PromptTemplate] = {
    **{(category, OutputMode.DIAGRAM): t for category, t in DIAGRAM_TEMPLATES.items()},
    **{(category, OutputMode.EXPLANATION): t for category, t in EXPLANATION_TEMPLATES.items()},
}

DEFAULT_TEMPLATES: dict[OutputMode, PromptTemplate] = {
    OutputMode.DIAGRAM: DEFAULT_DIAGRAM_TEMPLATE,
    OutputMode.EXPLANATION: DEFAULT_EXPLANATION_TEMPLATE,
}


def select_prompt(category: Category, mode: OutputMode) -> PromptTemplate:
    mode = OutputMode(mode)
    template = PROMPT_TABLE.get((Category(category), mode))
    if template is None:
        return DEFAULT_TEMPLATES[mode]
    return template


def iter_prompt_templates() -> Iterator[PromptTemplate]:
    """Every template in the table, defaults last."""
    yield from PROMPT_TABLE.values()
    yield from DEFAULT_TEMPLATES.values()
