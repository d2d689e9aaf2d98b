"""
Transaction classification package.

Extracts the program IDs a Solana transaction references and maps them to
one Category (SPL_TOKEN, NFT, DEFI, GOVERNANCE, GENERIC) that selects the
prompt template for generation.
"""

from backend_txinsight.classification.classifier import (
    CLASSIFICATION_RULES,
    FALLBACK_CATEGORY,
    Category,
    ClassificationRule,
    classify_program_ids,
    classify_transaction,
    classify_with_rule,
    explain_classification,
)
from backend_txinsight.classification.extractor import extract_program_ids

__all__ = [
    "CLASSIFICATION_RULES",
    "FALLBACK_CATEGORY",
    "Category",
    "ClassificationRule",
    "classify_program_ids",
    "classify_transaction",
    "classify_with_rule",
    "explain_classification",
    "extract_program_ids",
]
