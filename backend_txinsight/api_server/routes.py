"""
FastAPI router: transaction explanation and diagram endpoints.

GET  /api/tx-parse?hash=     -> transaction + markdown explanation
POST /api/tx-parse           -> explanation for a supplied transaction document
GET  /api/tx-diagram?hash=   -> Mermaid diagram for a transaction signature
POST /api/tx-diagram         -> Mermaid diagram for a supplied document or hash

Errors are returned as {"error": message} with the status carried by the
TxInsightError subclass; anything unexpected is a 500.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Callable

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from backend_txinsight.config import get_settings
from backend_txinsight.core.exceptions import TxInsightError
from backend_txinsight.generation.invoker import OpenAIGenerationInvoker
from backend_txinsight.lookup.rpc_lookup import SolanaRpcLookup
from backend_txinsight.pipeline import PipelineResult, TransactionPipeline
from backend_txinsight.prompts import OutputMode
from backend_txinsight.txinsight_logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["transactions"])


# -----------------------------------------------------------------------------
# Dependency
# -----------------------------------------------------------------------------

@lru_cache(maxsize=1)
def get_pipeline() -> TransactionPipeline:
    """Dependency: pipeline built once from env settings (credentials, RPC URL)."""
    settings = get_settings()
    logger.info(
        "pipeline_configured",
        provider=settings.generation.provider,
        model=settings.generation.model,
    )
    return TransactionPipeline(
        generator=OpenAIGenerationInvoker(settings.generation),
        lookup=SolanaRpcLookup(settings.solana_rpc_url, timeout_sec=settings.solana_rpc_timeout_sec),
    )


# -----------------------------------------------------------------------------
# Request / response models
# -----------------------------------------------------------------------------

class TxParseRequest(BaseModel):
    """POST /api/tx-parse body."""

    transaction: dict[str, Any] | None = Field(None, description="getTransaction result document")


class TxDiagramRequest(BaseModel):
    """POST /api/tx-diagram body: a document, or a signature to look up."""

    transaction: dict[str, Any] | None = Field(None, description="getTransaction result document")
    hash: str | None = Field(None, max_length=128, description="Transaction signature (base58)")


class TxParseResponse(BaseModel):
    transaction: dict[str, Any] | None = Field(None, description="Fetched transaction (GET only)")
    explanation: str = Field(..., description="Markdown explanation")
    category: str = Field(..., description="Category that selected the prompt")


class TxDiagramResponse(BaseModel):
    diagram: str = Field(..., description="Mermaid diagram code")
    category: str = Field(..., description="Category that selected the prompt")


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


def _guarded(event: str, fn: Callable[[], Any]) -> Any:
    """Run a handler body; classified errors keep their status, others become 500."""
    try:
        return fn()
    except TxInsightError as e:
        logger.warning(event, kind=type(e).__name__, error=e.message, status=e.status_code)
        return JSONResponse(status_code=e.status_code, content=e.to_dict())
    except Exception as e:
        logger.exception(event, error=str(e))
        return JSONResponse(
            status_code=500,
            content={"error": "An unexpected error occurred while processing the transaction"},
        )


def _diagram_response(result: PipelineResult) -> TxDiagramResponse:
    return TxDiagramResponse(diagram=result.output, category=result.category.value)


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------

@router.get("/tx-parse", response_model=TxParseResponse)
def get_tx_parse(hash: str | None = None, pipeline: TransactionPipeline = Depends(get_pipeline)):
    if not (hash or "").strip():
        return _bad_request("Transaction hash is required")

    def _handle() -> TxParseResponse:
        transaction = pipeline.fetch(hash.strip())
        result = pipeline.run(transaction, OutputMode.EXPLANATION)
        return TxParseResponse(
            transaction=transaction,
            explanation=result.output,
            category=result.category.value,
        )

    return _guarded("tx_parse_failed", _handle)


@router.post("/tx-parse", response_model=TxParseResponse, response_model_exclude_none=True)
def post_tx_parse(body: TxParseRequest, pipeline: TransactionPipeline = Depends(get_pipeline)):
    if body.transaction is None:
        return _bad_request("Transaction data is required")

    def _handle() -> TxParseResponse:
        result = pipeline.run(body.transaction, OutputMode.EXPLANATION)
        return TxParseResponse(explanation=result.output, category=result.category.value)

    return _guarded("tx_parse_failed", _handle)


@router.get("/tx-diagram", response_model=TxDiagramResponse)
def get_tx_diagram(hash: str | None = None, pipeline: TransactionPipeline = Depends(get_pipeline)):
    if not (hash or "").strip():
        return _bad_request("Transaction hash is required")
    return _guarded(
        "tx_diagram_failed",
        lambda: _diagram_response(pipeline.run_reference(hash.strip(), OutputMode.DIAGRAM)),
    )


@router.post("/tx-diagram", response_model=TxDiagramResponse)
def post_tx_diagram(body: TxDiagramRequest, pipeline: TransactionPipeline = Depends(get_pipeline)):
    signature = (body.hash or "").strip()
    if body.transaction is None and not signature:
        return _bad_request("Transaction data or hash is required")

    def _handle() -> TxDiagramResponse:
        if signature:
            return _diagram_response(pipeline.run_reference(signature, OutputMode.DIAGRAM))
        return _diagram_response(pipeline.run(body.transaction, OutputMode.DIAGRAM))

    return _guarded("tx_diagram_failed", _handle)
