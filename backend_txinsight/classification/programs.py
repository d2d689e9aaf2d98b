"""
Well-known Solana program IDs used for transaction classification.
"""

from __future__ import annotations

SYSTEM_PROGRAM_ID = "11111111111111111111111111111111"

# SPL Token program
SPL_TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"

# Metaplex Token Metadata program
METAPLEX_METADATA_PROGRAM_ID = "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"

JUPITER_PROGRAM_ID = "JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4"
RAYDIUM_AMM_PROGRAM_ID = "675kPX9MHTjS2zt1qfr1NYHuzeLXfQM9H24wFSUt1Mp8"
ORCA_WHIRLPOOL_PROGRAM_ID = "whirLbMiicVdio4qvUfM5KAg6Ct8VwpYzGff3uctyCc"

DEX_PROGRAM_IDS: frozenset[str] = frozenset(
    {
        JUPITER_PROGRAM_ID,
        RAYDIUM_AMM_PROGRAM_ID,
        ORCA_WHIRLPOOL_PROGRAM_ID,
    }
)

# SPL Governance program
GOVERNANCE_PROGRAM_ID = "GovER5Lthms3bLBqWub97yVrMmEogzX7xNjdXpPPCVZw"

PROGRAM_LABELS: dict[str, str] = {
    SYSTEM_PROGRAM_ID: "System Program",
    SPL_TOKEN_PROGRAM_ID: "SPL Token",
    METAPLEX_METADATA_PROGRAM_ID: "Metaplex Token Metadata",
    JUPITER_PROGRAM_ID: "Jupiter",
    RAYDIUM_AMM_PROGRAM_ID: "Raydium",
    ORCA_WHIRLPOOL_PROGRAM_ID: "Orca",
    GOVERNANCE_PROGRAM_ID: "SPL Governance",
}


def known_program_labels(program_ids: set[str] | frozenset[str]) -> list[str]:
    """Sorted display names of the recognized programs among program_ids (for logs)."""
    return sorted(PROGRAM_LABELS[p] for p in program_ids if p in PROGRAM_LABELS)
