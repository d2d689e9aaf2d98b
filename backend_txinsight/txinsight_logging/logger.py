"""
Structured logging for TxInsight: timestamp, event_type, signature, category.

Every module calls get_logger(__name__) and logs an event name plus keyword
fields, e.g. logger.info("transaction_classified", category="DEFI").
JSON output by default (LOG_FORMAT=json); console output for local runs.

LOG_LEVEL and LOG_FORMAT are read after the project-root .env is loaded, so
they can live there next to the provider settings. No backend_txinsight
imports here so any module can import it first.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import structlog
from dotenv import load_dotenv

# Project root: logger is backend_txinsight/txinsight_logging/, root is 2 levels up
_ENV_PATH = Path(__file__).resolve().parent.parent.parent / ".env"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"

# Longest prefix of a signature written to logs
SIGNATURE_LOG_PREFIX = 16


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog 'event' becomes event_type; message mirrors it when absent."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def load_logging_env(env_path: Path | None = None) -> None:
    """Load .env (project root by default) without overriding real env vars."""
    load_dotenv(env_path or _ENV_PATH, override=False)


def resolve_log_settings() -> tuple[int, str]:
    """Return (level, format) from LOG_LEVEL / LOG_FORMAT; unknown levels fall back to INFO."""
    level_name = (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    log_format = (os.getenv("LOG_FORMAT") or DEFAULT_LOG_FORMAT).strip().lower()
    return getattr(logging, level_name, logging.INFO), log_format


def configure_structlog() -> None:
    level, log_format = resolve_log_settings()
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _normalize_event,
    ]
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    load_logging_env()
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structured logger bound to the calling module name."""
    return structlog.get_logger(name).bind(logger=name)


def short_signature(signature: str | None) -> str:
    sig = (signature or "").strip()
    if len(sig) > SIGNATURE_LOG_PREFIX:
        return sig[:SIGNATURE_LOG_PREFIX] + "..."
    return sig


def bind_signature(signature: str, name: str = "backend_txinsight") -> structlog.BoundLogger:
    """Return a logger with the (shortened) transaction signature bound to every call."""
    return get_logger(name).bind(signature=short_signature(signature))
