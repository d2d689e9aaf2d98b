"""
Mermaid diagram prompts, one per transaction category plus a default.
"""

from __future__ import annotations

from backend_txinsight.classification import Category
from backend_txinsight.classification.programs import SPL_TOKEN_PROGRAM_ID
from backend_txinsight.prompts.templates import OutputMode, PromptTemplate

DIAGRAM_USER_PREFIX = (
    "Convert this Solana transaction into a Mermaid diagram. Return only the diagram code: "
)

DIAGRAM_BASE_PROMPT = """You are an expert in creating Mermaid diagrams for Solana blockchain transactions. Your task is to generate ONLY the Mermaid diagram code without any additional text or explanations.

Use Solana's branding colors for the diagram:
- Primary Purple: #9945FF
- Primary Green: #14F195
- Secondary colors: white or light gray for backgrounds

IMPORTANT: Return ONLY the Mermaid diagram code without any surrounding text, explanations, or markdown code blocks."""

_SPL_TOKEN = f"""For SPL Token transactions, create a FLOWCHART diagram (using flowchart TD or graph TD) showing:
1. Account interactions with arrows representing token transfers
2. Include token amounts and token symbols
3. Show the SPL Token program ({SPL_TOKEN_PROGRAM_ID}) as a node
4. Use stylized nodes with Solana colors:
   - style sender fill:#9945FF,color:white
   - style receiver fill:#9945FF,color:white
   - style programs fill:#14F195,color:black
   - style tokens/amounts fill:#14F195,color:black
5. Keep addresses short (first 6 chars) for readability"""

_NFT = """For NFT/Metaplex transactions, create a FLOWCHART diagram (using flowchart TD or graph TD) showing:
1. NFT movement between accounts
2. Metaplex program interactions
3. Metadata updates or creation
4. Collection relationships if applicable
5. Use stylized nodes with Solana colors:
   - style NFTs fill:#9945FF,color:white
   - style accounts fill:#9945FF,color:white
   - style metadata fill:#14F195,color:black
   - style programs fill:#14F195,color:black
6. Keep addresses short (first 6 chars) for readability"""

_DEFI = """For DeFi transactions, create a FLOWCHART diagram (using flowchart TD or graph TD) showing:
1. Token swap flows with input and output amounts
2. Liquidity pool interactions
3. Price impact and fees where available
4. DeFi program interactions (Jupiter, Raydium, Orca, etc.)
5. Use stylized nodes with Solana colors:
   - style accounts fill:#9945FF,color:white
   - style tokens fill:#9945FF,color:white
   - style programs fill:#14F195,color:black
   - style amounts/rates fill:#14F195,color:black
6. Keep addresses short (first 6 chars) for readability"""

_GOVERNANCE = """For Governance transactions, create a FLOWCHART diagram (using flowchart TD or graph TD) showing:
1. Proposal or voting actions
2. Treasury fund movements if applicable
3. Governance program interactions
4. Voting token details if available
5. Use stylized nodes with Solana colors:
   - style governance fill:#9945FF,color:white
   - style accounts fill:#9945FF,color:white
   - style actions fill:#14F195,color:black
   - style programs fill:#14F195,color:black
6. Keep addresses short (first 6 chars) for readability"""

_DEFAULT = """Create a FLOWCHART diagram (using flowchart TD or graph TD) showing:
1. Transaction signers and accounts involved
2. Program interactions with accounts
3. Any balance changes or state updates
4. Fees paid for transaction
5. Use stylized nodes with Solana colors:
   - style accounts fill:#9945FF,color:white
   - style programs fill:#14F195,color:black
   - style actions fill:#14F195,color:black
6. Keep addresses short (first 6 chars) for readability"""


def _template(category: Category | None, body: str) -> PromptTemplate:
    return PromptTemplate(
        mode=OutputMode.DIAGRAM,
        category=category,
        system=f"{DIAGRAM_BASE_PROMPT}\n\n{body}",
        user_prefix=DIAGRAM_USER_PREFIX,
    )


DIAGRAM_TEMPLATES: dict[Category, PromptTemplate] = {
    Category.SPL_TOKEN: _template(Category.SPL_TOKEN, _SPL_TOKEN),
    Category.NFT: _template(Category.NFT, _NFT),
    Category.DEFI: _template(Category.DEFI, _DEFI),
    Category.GOVERNANCE: _template(Category.GOVERNANCE, _GOVERNANCE),
}

DEFAULT_DIAGRAM_TEMPLATE = _template(None, _DEFAULT)
