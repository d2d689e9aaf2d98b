"""
Transaction category classification.

Maps the set of program IDs a transaction touches to exactly one Category
using a flat, ordered rule list: the first rule with any of its program IDs
present wins, otherwise GENERIC. No weighting, so a transaction touching
both the SPL Token program and a DEX is always SPL_TOKEN.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from backend_txinsight.classification.extractor import extract_program_ids
from backend_txinsight.classification.programs import (
    DEX_PROGRAM_IDS,
    GOVERNANCE_PROGRAM_ID,
    METAPLEX_METADATA_PROGRAM_ID,
    SPL_TOKEN_PROGRAM_ID,
    known_program_labels,
)
from backend_txinsight.txinsight_logging import get_logger

logger = get_logger(__name__)


class Category(str, Enum):
    SPL_TOKEN = "SPL_TOKEN"
    NFT = "NFT"
    DEFI = "DEFI"
    GOVERNANCE = "GOVERNANCE"
    GENERIC = "GENERIC"


FALLBACK_CATEGORY = Category.GENERIC
FALLBACK_RULE_NAME = "fallback"


@dataclass(frozen=True)
class ClassificationRule:
    """One entry of the priority list: matches when any of program_ids is present."""

    name: str
    program_ids: frozenset[str]
    category: Category

    def matches(self, program_ids: frozenset[str]) -> bool:
        return not self.program_ids.isdisjoint(program_ids)


# Priority order; first match wins.
CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule("spl_token_program", frozenset({SPL_TOKEN_PROGRAM_ID}), Category.SPL_TOKEN),
    ClassificationRule("metaplex_metadata_program", frozenset({METAPLEX_METADATA_PROGRAM_ID}), Category.NFT),
    ClassificationRule("dex_program", DEX_PROGRAM_IDS, Category.DEFI),
    ClassificationRule("governance_program", frozenset({GOVERNANCE_PROGRAM_ID}), Category.GOVERNANCE),
)


def explain_classification(program_ids: Iterable[str]) -> tuple[Category, str]:
    """Return (category, rule_name); rule_name is 'fallback' when no rule matched."""
    ids = frozenset(program_ids)
    for rule in CLASSIFICATION_RULES:
        if rule.matches(ids):
            return rule.category, rule.name
    return FALLBACK_CATEGORY, FALLBACK_RULE_NAME


def classify_with_rule(program_ids: Iterable[str]) -> tuple[Category, str]:
    """explain_classification plus the transaction_classified log event."""
    ids = frozenset(program_ids)
    category, rule_name = explain_classification(ids)
    logger.info(
        "transaction_classified",
        category=category.value,
        rule=rule_name,
        program_id_count=len(ids),
        programs=known_program_labels(ids),
    )
    return category, rule_name


def classify_program_ids(program_ids: Iterable[str]) -> Category:
    category, _ = explain_classification(program_ids)
    return category


def classify_transaction(document: Any) -> Category:
    """Extract program IDs from a transaction document and classify them."""
    category, _ = classify_with_rule(extract_program_ids(document))
    return category
