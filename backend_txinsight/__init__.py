"""
Backend TxInsight: Solana transaction explainer.

Classifies a Solana transaction by the programs it touches, selects a
category-specific prompt, and asks a text-generation backend for either a
markdown explanation or a Mermaid diagram. Generated output is sanitized
and validated before it is returned.
"""

__version__ = "0.1.0"
