"""
Program ID extraction from getTransaction-style documents.

Walks three regions of the document:
  transaction.message.accountKeys        entries flagged with programId -> pubkey
  transaction.message.instructions       programId (or programIdIndex -> account key)
  meta.innerInstructions[].instructions  same as top-level instructions

Purely structural and never raises: missing or non-list regions contribute
nothing, and a malformed region stops the walk with whatever was collected.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from backend_txinsight.core.exceptions import ExtractionDegraded
from backend_txinsight.txinsight_logging import get_logger

logger = get_logger(__name__)


def _field(obj: Any, key: str) -> Any:
    """Read key from a mapping, or the attribute of the same name from any other object."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _identifier(value: Any, region: str) -> str | None:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ExtractionDegraded(f"{region}: expected string identifier, got {type(value).__name__}")
    return value


def _account_key_strings(account_keys: list[Any]) -> list[str | None]:
    """accountKeys as plain strings (json encoding) or {pubkey} objects (jsonParsed)."""
    out: list[str | None] = []
    for key in account_keys:
        if isinstance(key, str):
            out.append(key)
        else:
            pubkey = _field(key, "pubkey")
            out.append(pubkey if isinstance(pubkey, str) else None)
    return out


def _instruction_program_id(
    instruction: Any,
    keys: list[str | None],
    region: str,
) -> str | None:
    program_id = _identifier(_field(instruction, "programId"), region)
    if program_id is not None:
        return program_id
    idx = _field(instruction, "programIdIndex")
    if isinstance(idx, int) and not isinstance(idx, bool) and 0 <= idx < len(keys):
        return keys[idx]
    return None


def _collect(document: Any, found: set[str]) -> None:
    message = _field(_field(document, "transaction"), "message")
    account_keys = _as_list(_field(message, "accountKeys"))
    keys = _account_key_strings(account_keys)

    for account in account_keys:
        if isinstance(account, str) or not _field(account, "programId"):
            continue
        pubkey = _identifier(_field(account, "pubkey"), "accountKeys")
        if pubkey is not None:
            found.add(pubkey)

    for instruction in _as_list(_field(message, "instructions")):
        program_id = _instruction_program_id(instruction, keys, "instructions")
        if program_id is not None:
            found.add(program_id)

    for group in _as_list(_field(_field(document, "meta"), "innerInstructions")):
        inner = _field(group, "instructions")
        if inner is None:
            continue
        if not isinstance(inner, (list, tuple)):
            raise ExtractionDegraded(
                f"innerInstructions: expected instruction list, got {type(inner).__name__}"
            )
        for instruction in inner:
            program_id = _instruction_program_id(instruction, keys, "innerInstructions")
            if program_id is not None:
                found.add(program_id)


def extract_program_ids(document: Any) -> frozenset[str]:
    """
    Return the deduplicated set of program IDs referenced by a transaction document.

    Accepts any value; a malformed document yields a partial (possibly empty) set
    and a warning log instead of an exception.
    """
    found: set[str] = set()
    try:
        _collect(document, found)
    except ExtractionDegraded as e:
        logger.warning("program_id_extraction_degraded", error=e.message, collected=len(found))
    except Exception as e:
        logger.warning("program_id_extraction_degraded", error=str(e), collected=len(found))
    program_ids = frozenset(found)
    logger.debug("program_ids_extracted", count=len(program_ids))
    return program_ids
