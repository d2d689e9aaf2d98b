"""
Markdown explanation prompts.

Every explanation follows the same section order (summary, type and
details, accounts, amounts, fees); the per-category text only adds what the
analyst should pay special attention to.
"""

from __future__ import annotations

from backend_txinsight.classification import Category
from backend_txinsight.classification.programs import (
    METAPLEX_METADATA_PROGRAM_ID,
    SPL_TOKEN_PROGRAM_ID,
)
from backend_txinsight.prompts.templates import OutputMode, PromptTemplate

EXPLANATION_USER_PREFIX = "Analyze this Solana transaction in detail: "

EXPLANATION_SECTIONS: tuple[str, ...] = (
    "A brief summary (2-3 sentences) of what the transaction accomplishes",
    "Transaction type and key details",
    "Accounts involved (with readable labels when possible)",
    "Token amounts with proper decimal places",
    "Any fees or price impacts",
)

_CATEGORY_LABELS: dict[Category | None, str] = {
    Category.SPL_TOKEN: "SPL Token",
    Category.NFT: "NFT/Metaplex",
    Category.DEFI: "DeFi",
    Category.GOVERNANCE: "Governance",
    None: "general Solana",
}


def explanation_base_prompt(label: str) -> str:
    sections = "\n".join(f"{i}. {s}" for i, s in enumerate(EXPLANATION_SECTIONS, start=1))
    return f"""You are a Solana transaction analyzer specializing in {label} transactions. Explain the transaction in a clear, structured way using markdown.

Include:
{sections}

Make your explanation accessible to both technical and non-technical users.
Return ONLY the markdown explanation, without any introduction or closing remarks."""


_SPL_TOKEN = f"""You specialize in SPL Token transactions. Pay special attention to:
- Token transfers, mints, and burns
- Token account creations
- Authority changes
- Token program interactions ({SPL_TOKEN_PROGRAM_ID})
- Associated token account program interactions

For token amounts, ensure you convert to the proper decimal places based on the token's decimal field."""

_NFT = f"""You specialize in NFT and Metaplex transactions. Pay special attention to:
- NFT mints, transfers, and burns
- Marketplace interactions (Magic Eden, OpenSea, etc.)
- Metaplex program interactions ({METAPLEX_METADATA_PROGRAM_ID})
- Metadata updates and verifications
- Collection assignments and verifications

Identify the NFT name and collection when possible."""

_DEFI = """You specialize in DeFi transactions. Pay special attention to:
- Swaps, liquidity provision, and staking
- Jupiter, Raydium, Orca or other DEX interactions
- Lending and borrowing on protocols like Solend or Mango
- Yield farming and harvesting
- Price impacts and slippage

For swaps, clearly show the input and output tokens with their amounts and calculate the effective price."""

_GOVERNANCE = """You specialize in Governance transactions. Pay special attention to:
- Proposal creation, voting, and execution
- DAO treasury management
- Community token distributions
- Realm configurations
- Governance program interactions

Explain the significance of the governance action in context of the DAO when possible."""


def _template(category: Category | None, focus: str | None) -> PromptTemplate:
    system = explanation_base_prompt(_CATEGORY_LABELS[category])
    if focus:
        system = f"{system}\n\n{focus}"
    return PromptTemplate(
        mode=OutputMode.EXPLANATION,
        category=category,
        system=system,
        user_prefix=EXPLANATION_USER_PREFIX,
    )


EXPLANATION_TEMPLATES: dict[Category, PromptTemplate] = {
    Category.SPL_TOKEN: _template(Category.SPL_TOKEN, _SPL_TOKEN),
    Category.NFT: _template(Category.NFT, _NFT),
    Category.DEFI: _template(Category.DEFI, _DEFI),
    Category.GOVERNANCE: _template(Category.GOVERNANCE, _GOVERNANCE),
}

DEFAULT_EXPLANATION_TEMPLATE = _template(None, None)
