"""
Pytest fixtures for TxInsight tests: transaction documents, a recording fake
generation backend, a fake document lookup, and a FastAPI TestClient wired
to them. No network access.
"""

from __future__ import annotations

from typing import Any

import pytest

from backend_txinsight.config.settings import GenerationParams
from backend_txinsight.core.exceptions import LookupFailed

VALID_FLOWCHART = "flowchart TD\nA[Sender] -->|5 USDC| B[Receiver]"


def make_tx(
    program_ids: list[str] | None = None,
    inner_program_ids: list[str] | None = None,
    account_program_ids: list[str] | None = None,
) -> dict[str, Any]:
    """Build a getTransaction-like document (transaction.message + meta.innerInstructions)."""
    account_keys: list[dict[str, Any]] = [
        {"pubkey": "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka", "signer": True, "writable": True},
    ]
    for pid in account_program_ids or []:
        account_keys.append({"pubkey": pid, "programId": True})
    message = {
        "accountKeys": account_keys,
        "instructions": [{"programId": pid, "data": "3Bxs4h24hBtQy9rw"} for pid in program_ids or []],
    }
    doc: dict[str, Any] = {
        "slot": 123456789,
        "blockTime": 1700000000,
        "transaction": {"message": message, "signatures": ["sig"]},
        "meta": {"fee": 5000, "err": None},
    }
    if inner_program_ids:
        doc["meta"]["innerInstructions"] = [
            {"index": 0, "instructions": [{"programId": pid} for pid in inner_program_ids]}
        ]
    return doc


class FakeGenerator:
    """TextGenerator that records every call and returns a fixed reply (or raises)."""

    def __init__(self, reply: str = VALID_FLOWCHART, error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str, GenerationParams]] = []

    def generate(self, system_prompt: str, user_content: str, params: GenerationParams) -> str:
        self.calls.append((system_prompt, user_content, params))
        if self.error is not None:
            raise self.error
        return self.reply


class FakeLookup:
    """DocumentLookup over an in-memory dict; unknown signatures are not found."""

    def __init__(self, documents: dict[str, dict[str, Any]] | None = None) -> None:
        self.documents = documents or {}
        self.requested: list[str] = []

    def fetch_transaction(self, signature: str) -> dict[str, Any]:
        self.requested.append(signature)
        if signature not in self.documents:
            raise LookupFailed("Transaction not found or not confirmed yet", status_code=404)
        return self.documents[signature]


@pytest.fixture
def tx_factory():
    return make_tx


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture
def fake_lookup():
    return FakeLookup()


@pytest.fixture
def pipeline(fake_generator, fake_lookup):
    from backend_txinsight.pipeline import TransactionPipeline

    return TransactionPipeline(generator=fake_generator, lookup=fake_lookup)


@pytest.fixture
def client(pipeline):
    """FastAPI TestClient with the pipeline dependency replaced by the fake-backed pipeline."""
    from fastapi.testclient import TestClient

    from backend_txinsight.api_server.app import app
    from backend_txinsight.api_server.routes import get_pipeline

    app.dependency_overrides[get_pipeline] = lambda: pipeline
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
