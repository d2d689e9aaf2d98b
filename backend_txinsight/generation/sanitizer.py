"""
Post-processing of generated text.

Diagram output is stripped of model chatter (preamble line, code fences,
trailing headings, trailing "Explanation:" section) and must then start with
a Mermaid graph, flowchart or sequenceDiagram declaration. Explanation output
is only trimmed and must be non-empty.
"""

from __future__ import annotations

import re

from backend_txinsight.core.exceptions import OutputInvalid
from backend_txinsight.prompts.templates import OutputMode
from backend_txinsight.txinsight_logging import get_logger

logger = get_logger(__name__)

DIAGRAM_KEYWORDS: tuple[str, ...] = ("graph", "flowchart", "sequenceDiagram")

INVALID_DIAGRAM_MESSAGE = "Invalid diagram code generated"
EMPTY_EXPLANATION_MESSAGE = "Empty explanation generated"

_PREAMBLE = re.compile(r"^(?:Here[’']s|This is|Generated|Creating|The)[^\n]*\n", re.IGNORECASE)
_OPENING_FENCE = re.compile(r"^```(?:mermaid)?[ \t]*\n?")
_CLOSING_FENCE = re.compile(r"\n?```[ \t]*\Z")
_TRAILING_HEADING = re.compile(r"^[ \t]*#{1,6}[ \t].*\Z", re.MULTILINE | re.DOTALL)
_TRAILING_EXPLANATION = re.compile(
    r"^[ \t]*(?:\*\*)?Explanation(?:\*\*)?:.*\Z", re.MULTILINE | re.DOTALL
)


def strip_diagram_artifacts(raw: str) -> str:
    """Apply the diagram stripping steps in order; does not validate."""
    text = raw.strip()
    text = _PREAMBLE.sub("", text, count=1).lstrip()
    text = _OPENING_FENCE.sub("", text, count=1)
    text = _CLOSING_FENCE.sub("", text, count=1)
    text = _TRAILING_HEADING.sub("", text, count=1)
    text = _TRAILING_EXPLANATION.sub("", text, count=1)
    # closing fence that sat above a removed trailing section
    text = _CLOSING_FENCE.sub("", text.rstrip(), count=1)
    return text.strip()


def is_valid_diagram(text: str) -> bool:
    return text.startswith(DIAGRAM_KEYWORDS)


def sanitize_diagram(raw: str) -> str:
    cleaned = strip_diagram_artifacts(raw or "")
    if not is_valid_diagram(cleaned):
        logger.warning("diagram_output_invalid", head=cleaned[:40], raw_chars=len(raw or ""))
        raise OutputInvalid(INVALID_DIAGRAM_MESSAGE)
    return cleaned


def sanitize_explanation(raw: str) -> str:
    cleaned = (raw or "").strip()
    if not cleaned:
        raise OutputInvalid(EMPTY_EXPLANATION_MESSAGE)
    return cleaned


def sanitize_output(raw: str, mode: OutputMode) -> str:
    """Return sanitized text for mode or raise OutputInvalid; never returns unvalidated diagram text."""
    if OutputMode(mode) is OutputMode.DIAGRAM:
        return sanitize_diagram(raw)
    return sanitize_explanation(raw)
