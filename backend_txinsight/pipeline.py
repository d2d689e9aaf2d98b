"""
Transaction pipeline: extract -> classify -> select prompt -> generate -> sanitize.

Single entrypoint for the API server and the CLI. Both output modes share the
same extraction and classification; the mode only picks the template and the
sanitation rules. Stateless: nothing is cached between calls.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from backend_txinsight.classification import Category, classify_with_rule, extract_program_ids
from backend_txinsight.core.exceptions import InvalidTransaction, LookupFailed, TxInsightError
from backend_txinsight.generation.invoker import TextGenerator
from backend_txinsight.generation.sanitizer import sanitize_output
from backend_txinsight.lookup.rpc_lookup import DocumentLookup
from backend_txinsight.prompts import OutputMode, PromptTemplate, select_prompt
from backend_txinsight.txinsight_logging import get_logger, short_signature

logger = get_logger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Sanitized output tagged with its mode, the category and the template sent to the backend."""

    mode: OutputMode
    category: Category
    output: str
    template: PromptTemplate

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "category": self.category.value,
            "output": self.output,
        }


def serialize_transaction(document: Any) -> str:
    """Compact JSON for the user message; raises InvalidTransaction when not serializable."""
    try:
        return json.dumps(document, separators=(",", ":"), ensure_ascii=False, default=str)
    except (TypeError, ValueError) as e:
        raise InvalidTransaction(f"Transaction document is not JSON-serializable: {e}") from e


class TransactionPipeline:
    """
    Composes classification, prompt selection, generation and sanitation.

    Args:
        generator: Text-generation backend (OpenAIGenerationInvoker in production).
        lookup: Resolves signatures to documents; required only for run_reference/fetch.
    """

    def __init__(self, generator: TextGenerator, lookup: DocumentLookup | None = None) -> None:
        self._generator = generator
        self._lookup = lookup

    def fetch(self, signature: str) -> dict[str, Any]:
        if self._lookup is None:
            raise LookupFailed("No transaction lookup configured", status_code=500)
        return self._lookup.fetch_transaction(signature)

    def run(self, document: Any, mode: OutputMode) -> PipelineResult:
        mode = OutputMode(mode)
        if document is None:
            raise InvalidTransaction("Valid transaction data is required")

        category, _ = classify_with_rule(extract_program_ids(document))
        template = select_prompt(category, mode)

        user_content = template.user_content(serialize_transaction(document))
        raw = self._generator.generate(template.system, user_content, template.params)
        try:
            output = sanitize_output(raw, mode)
        except TxInsightError as e:
            logger.warning("pipeline_output_rejected", mode=mode.value, category=category.value, error=e.message)
            raise

        logger.info("pipeline_done", mode=mode.value, category=category.value, chars=len(output))
        return PipelineResult(mode=mode, category=category, output=output, template=template)

    def run_reference(self, signature: str, mode: OutputMode) -> PipelineResult:
        """Resolve the signature via lookup, then run; LookupFailed aborts before generation."""
        logger.info("pipeline_lookup_start", signature=short_signature(signature), mode=OutputMode(mode).value)
        document = self.fetch(signature)
        return self.run(document, mode)

    def explain(self, document: Any) -> PipelineResult:
        return self.run(document, OutputMode.EXPLANATION)

    def diagram(self, document: Any) -> PipelineResult:
        return self.run(document, OutputMode.DIAGRAM)
