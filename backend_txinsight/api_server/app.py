"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn backend_txinsight.api_server.app:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from backend_txinsight import __version__
from backend_txinsight.api_server.routes import router
from backend_txinsight.core.exceptions import TxInsightError
from backend_txinsight.txinsight_logging import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="TxInsight API",
    description="Explanations and Mermaid diagrams for Solana transactions",
    version=__version__,
)
app.include_router(router)


@app.exception_handler(TxInsightError)
async def txinsight_error_handler(request: Request, exc: TxInsightError) -> JSONResponse:
    """Classified errors raised outside route bodies (e.g. configuration while building the pipeline)."""
    logger.error("api_request_failed", path=request.url.path, kind=type(exc).__name__, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


__all__ = ["app"]
