"""
Structured logging for Backend TxInsight (structlog).

Use get_logger(__name__) in every module; events are JSON lines with
timestamp, level, event_type and the keyword fields passed at the call site.
"""

from backend_txinsight.txinsight_logging.logger import (
    bind_signature,
    get_logger,
    short_signature,
)

__all__ = ["bind_signature", "get_logger", "short_signature"]
