"""
End-to-end pipeline tests with a fake generation backend and fake lookup.
"""

from __future__ import annotations

import json

import pytest

from backend_txinsight.classification import Category
from backend_txinsight.classification.programs import (
    JUPITER_PROGRAM_ID,
    METAPLEX_METADATA_PROGRAM_ID,
    SPL_TOKEN_PROGRAM_ID,
)
from backend_txinsight.config.settings import DIAGRAM_GENERATION_PARAMS, EXPLANATION_GENERATION_PARAMS
from backend_txinsight.core.exceptions import (
    GenerationFailed,
    InvalidTransaction,
    LookupFailed,
    OutputInvalid,
)
from backend_txinsight.pipeline import TransactionPipeline, serialize_transaction
from backend_txinsight.prompts import OutputMode, select_prompt

VALID_FLOWCHART = "flowchart TD\nA[Sender] -->|5 USDC| B[Receiver]"


def test_spl_token_diagram_end_to_end(pipeline, fake_generator, tx_factory):
    """SPL-only document: fixed flowchart is returned unchanged; SPL_TOKEN template was sent."""
    doc = tx_factory(program_ids=[SPL_TOKEN_PROGRAM_ID])
    result = pipeline.run(doc, OutputMode.DIAGRAM)

    assert result.output == VALID_FLOWCHART
    assert result.category == Category.SPL_TOKEN
    assert result.mode == OutputMode.DIAGRAM

    assert len(fake_generator.calls) == 1
    system, user, params = fake_generator.calls[0]
    expected = select_prompt(Category.SPL_TOKEN, OutputMode.DIAGRAM)
    assert system == expected.system
    assert result.template is expected
    assert params == DIAGRAM_GENERATION_PARAMS
    assert user == expected.user_prefix + json.dumps(doc, separators=(",", ":"))


def test_explanation_uses_explanation_template(pipeline, fake_generator, tx_factory):
    fake_generator.reply = "\n## Summary\nSwap of 1 SOL for 150 USDC on Jupiter.\n"
    doc = tx_factory(program_ids=[JUPITER_PROGRAM_ID])
    result = pipeline.explain(doc)

    assert result.category == Category.DEFI
    assert result.output == "## Summary\nSwap of 1 SOL for 150 USDC on Jupiter."
    system, user, params = fake_generator.calls[0]
    assert system == select_prompt(Category.DEFI, OutputMode.EXPLANATION).system
    assert user.startswith("Analyze this Solana transaction in detail: ")
    assert params == EXPLANATION_GENERATION_PARAMS


def test_modes_share_classification(pipeline, fake_generator, tx_factory):
    """Same document classifies identically for both modes."""
    fake_generator.reply = "graph TD\nA-->B"
    doc = tx_factory(inner_program_ids=[METAPLEX_METADATA_PROGRAM_ID])
    assert pipeline.diagram(doc).category == pipeline.explain(doc).category == Category.NFT


def test_document_without_programs_uses_default_template(pipeline, fake_generator):
    result = pipeline.run({}, OutputMode.DIAGRAM)
    assert result.category == Category.GENERIC
    assert fake_generator.calls[0][0] == select_prompt(Category.GENERIC, OutputMode.DIAGRAM).system


def test_invalid_diagram_output_is_rejected(pipeline, fake_generator, tx_factory):
    fake_generator.reply = "Sure, no diagram available"
    with pytest.raises(OutputInvalid):
        pipeline.run(tx_factory(program_ids=[SPL_TOKEN_PROGRAM_ID]), OutputMode.DIAGRAM)


def test_generation_failure_propagates(pipeline, fake_generator, tx_factory):
    fake_generator.error = GenerationFailed("Invalid response from AI model")
    with pytest.raises(GenerationFailed):
        pipeline.run(tx_factory(), OutputMode.EXPLANATION)


def test_lookup_not_found_skips_generation(pipeline, fake_generator, fake_lookup):
    with pytest.raises(LookupFailed, match="not found"):
        pipeline.run_reference("missing-signature", OutputMode.DIAGRAM)
    assert fake_lookup.requested == ["missing-signature"]
    assert fake_generator.calls == []


def test_run_reference_resolves_document(pipeline, fake_lookup, tx_factory):
    fake_lookup.documents["sig-1"] = tx_factory(program_ids=[SPL_TOKEN_PROGRAM_ID])
    result = pipeline.run_reference("sig-1", OutputMode.DIAGRAM)
    assert result.category == Category.SPL_TOKEN
    assert result.output == VALID_FLOWCHART


def test_no_lookup_configured(fake_generator):
    with pytest.raises(LookupFailed):
        TransactionPipeline(fake_generator).run_reference("sig", OutputMode.DIAGRAM)
    assert fake_generator.calls == []


def test_none_document_rejected(pipeline, fake_generator):
    with pytest.raises(InvalidTransaction):
        pipeline.run(None, OutputMode.EXPLANATION)
    assert fake_generator.calls == []


def test_repeated_runs_are_independent(pipeline, fake_generator, tx_factory):
    """No caching: each run extracts, classifies and calls the backend again."""
    doc = tx_factory(program_ids=[SPL_TOKEN_PROGRAM_ID])
    first = pipeline.run(doc, OutputMode.DIAGRAM)
    second = pipeline.run(doc, OutputMode.DIAGRAM)
    assert first == second
    assert len(fake_generator.calls) == 2


def test_serialize_transaction_is_compact():
    assert serialize_transaction({"a": [1, 2], "b": None}) == '{"a":[1,2],"b":null}'


def test_serialize_transaction_circular_rejected():
    doc: dict = {}
    doc["self"] = doc
    with pytest.raises(InvalidTransaction):
        serialize_transaction(doc)


def test_result_to_dict(pipeline, tx_factory):
    result = pipeline.run(tx_factory(program_ids=[SPL_TOKEN_PROGRAM_ID]), OutputMode.DIAGRAM)
    assert result.to_dict() == {"mode": "diagram", "category": "SPL_TOKEN", "output": VALID_FLOWCHART}


def test_run_logs_transaction_classified(pipeline, tx_factory, monkeypatch):
    events = []

    class _RecordingLogger:
        def info(self, event, **fields):
            events.append((event, fields))

    monkeypatch.setattr("backend_txinsight.classification.classifier.logger", _RecordingLogger())
    pipeline.run(tx_factory(program_ids=[JUPITER_PROGRAM_ID]), OutputMode.DIAGRAM)

    assert [e for e, _ in events] == ["transaction_classified"]
    fields = events[0][1]
    assert fields["category"] == "DEFI"
    assert fields["rule"] == "dex_program"
    assert fields["programs"] == ["Jupiter"]
