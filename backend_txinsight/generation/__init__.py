"""
Generation package: the text-generation backend boundary and output sanitation.
"""

from backend_txinsight.generation.invoker import OpenAIGenerationInvoker, TextGenerator
from backend_txinsight.generation.sanitizer import (
    DIAGRAM_KEYWORDS,
    sanitize_diagram,
    sanitize_explanation,
    sanitize_output,
)

__all__ = [
    "DIAGRAM_KEYWORDS",
    "OpenAIGenerationInvoker",
    "TextGenerator",
    "sanitize_diagram",
    "sanitize_explanation",
    "sanitize_output",
]
