"""
Transaction document lookup over Solana JSON-RPC.

One getTransaction call per lookup; the result document is returned as-is
for classification and prompting. Every failure (malformed signature,
HTTP/RPC error, transaction not found or not yet confirmed) raises
LookupFailed.
"""

from __future__ import annotations

from typing import Any, Protocol

import httpx
from solders.signature import Signature

from backend_txinsight.config.env import DEFAULT_RPC_TIMEOUT_SEC, MAINNET_RPC_URL, mask_rpc_url
from backend_txinsight.core.exceptions import LookupFailed
from backend_txinsight.txinsight_logging import get_logger, short_signature

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "Transaction not found or not confirmed yet"


class DocumentLookup(Protocol):
    def fetch_transaction(self, signature: str) -> dict[str, Any]:
        """Return the transaction document; raise LookupFailed when it cannot be retrieved."""
        ...


def is_valid_signature(signature: str) -> bool:
    """True if signature is a well-formed base58 transaction signature (64 bytes)."""
    try:
        Signature.from_string(signature)
    except (ValueError, TypeError):
        return False
    return True


def _build_rpc_body(signature: str, encoding: str, commitment: str) -> dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "id": 1,
        "method": "getTransaction",
        "params": [
            signature,
            {
                "encoding": encoding,
                "maxSupportedTransactionVersion": 0,
                "commitment": commitment,
            },
        ],
    }


class SolanaRpcLookup:
    """DocumentLookup backed by a Solana RPC HTTP endpoint."""

    def __init__(
        self,
        rpc_url: str = MAINNET_RPC_URL,
        *,
        timeout_sec: float = DEFAULT_RPC_TIMEOUT_SEC,
        encoding: str = "json",
        commitment: str = "confirmed",
        client: httpx.Client | None = None,
    ) -> None:
        """
        Args:
            rpc_url: Solana RPC HTTP endpoint.
            timeout_sec: HTTP timeout for each getTransaction request.
            encoding: getTransaction encoding (json or jsonParsed).
            commitment: Minimum commitment of the returned transaction.
            client: Shared httpx client (tests); a short-lived one is used per call when omitted.
        """
        if not rpc_url.strip():
            raise ValueError("rpc_url must be non-empty")
        self._rpc_url = rpc_url.strip()
        self._timeout = timeout_sec
        self._encoding = encoding
        self._commitment = commitment
        self._client = client

    def _post(self, body: dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return self._client.post(self._rpc_url, json=body)
        with httpx.Client(timeout=httpx.Timeout(self._timeout)) as client:
            return client.post(self._rpc_url, json=body)

    def fetch_transaction(self, signature: str) -> dict[str, Any]:
        signature = (signature or "").strip()
        if not is_valid_signature(signature):
            raise LookupFailed("Invalid transaction signature", status_code=400)

        body = _build_rpc_body(signature, self._encoding, self._commitment)
        try:
            resp = self._post(body)
        except httpx.HTTPError as e:
            logger.warning(
                "rpc_lookup_transport_error",
                signature=short_signature(signature),
                rpc_url=mask_rpc_url(self._rpc_url),
                error=str(e),
            )
            raise LookupFailed(f"Failed to fetch transaction: {e}") from e

        if resp.status_code >= 400:
            logger.warning("rpc_lookup_http_error", signature=short_signature(signature), status=resp.status_code)
            raise LookupFailed(f"Failed to fetch transaction: {resp.status_code} {resp.text}")

        try:
            data = resp.json()
        except ValueError as e:
            raise LookupFailed("Failed to fetch transaction: malformed RPC response") from e

        err = data.get("error") if isinstance(data, dict) else None
        if err:
            message = err.get("message", err) if isinstance(err, dict) else err
            logger.warning("rpc_lookup_rpc_error", signature=short_signature(signature), error=str(message))
            raise LookupFailed(f"Failed to fetch transaction: {message}")

        result = data.get("result") if isinstance(data, dict) else None
        if not result:
            logger.info("rpc_lookup_not_found", signature=short_signature(signature))
            raise LookupFailed(NOT_FOUND_MESSAGE, status_code=404)
        if not isinstance(result, dict):
            raise LookupFailed("Failed to fetch transaction: malformed RPC response")

        logger.info("rpc_lookup_done", signature=short_signature(signature), slot=result.get("slot"))
        return result
