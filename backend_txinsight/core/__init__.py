"""
Core cross-cutting pieces: the application exception hierarchy.
"""

from backend_txinsight.core.exceptions import (
    ConfigurationError,
    ExtractionDegraded,
    GenerationFailed,
    InvalidTransaction,
    LookupFailed,
    OutputInvalid,
    TxInsightError,
)

__all__ = [
    "ConfigurationError",
    "ExtractionDegraded",
    "GenerationFailed",
    "InvalidTransaction",
    "LookupFailed",
    "OutputInvalid",
    "TxInsightError",
]
