"""
Application-level exceptions.

Every failure a caller can see derives from TxInsightError and carries a
human-readable message plus the HTTP status the API layer responds with.
ExtractionDegraded is raised only inside the identifier extractor and is
always absorbed there.
"""

from __future__ import annotations


class TxInsightError(Exception):
    """Base class for classified pipeline failures."""

    status_code: int = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message}


class ConfigurationError(TxInsightError):
    """Required settings (provider credentials, endpoint) are missing or invalid."""

    status_code = 500


class LookupFailed(TxInsightError):
    """The referenced transaction could not be retrieved (not found, unconfirmed, RPC or transport error)."""

    status_code = 502


class ExtractionDegraded(TxInsightError):
    """Malformed document region met during extraction; the partial identifier set is kept."""

    status_code = 500


class GenerationFailed(TxInsightError):
    """The generation backend rejected the call or returned no usable content."""

    status_code = 502


class OutputInvalid(TxInsightError):
    """Generated text did not survive sanitization (wrong diagram grammar, empty output)."""

    status_code = 502


class InvalidTransaction(TxInsightError):
    """The supplied transaction document is missing or cannot be serialized."""

    status_code = 400
